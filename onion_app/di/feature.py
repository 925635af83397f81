"""
Feature Contract
================

A feature bundles one capability's storage wiring, service wiring and
startup initialization behind a single named unit. Features never reference
each other; the FeatureCoordinator is the only caller of these hooks.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from onion_app.core.config import AppSettings

if TYPE_CHECKING:
    from .base_container import BaseContainer


@dataclass(frozen=True)
class RuntimeContext:
    """Runtime information handed to feature initializers."""
    environment: str
    settings: AppSettings


class Feature(ABC):
    """Abstract feature module."""

    #: Unique human-readable name, used for logging and diagnostics only
    name: str = ""

    @abstractmethod
    def register_storage(self, container: "BaseContainer", settings: AppSettings) -> None:
        """
        Register any storage backend this feature needs.

        Must be idempotent: a second call must leave the registry unchanged.
        """

    @abstractmethod
    def register_services(self, container: "BaseContainer", settings: AppSettings) -> None:
        """
        Register the feature's repositories and services.

        Storage registered by this feature's register_storage() is available.
        Services of other features may not be registered yet.
        """

    @abstractmethod
    async def initialize(self, container: "BaseContainer", context: RuntimeContext) -> None:
        """
        Perform startup-only work once the registry is complete.

        Any feature's services can be resolved here. Raising aborts startup.
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
