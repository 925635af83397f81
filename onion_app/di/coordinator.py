"""
Feature Coordinator
===================

Composes independently registered features into one application.

Three phases, each walking the features in registration order:
1. Storage wiring   (Feature.register_storage)
2. Service wiring   (Feature.register_services), only after phase 1 finished for all
3. Initialization   (Feature.initialize), sequential, after the registry is complete

Initialization is fail-fast: the first failing feature stops the sequence and
the failure is re-raised as InitializationError.
"""
import asyncio
import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional

from onion_app.core.config import AppSettings
from onion_app.core.errors import InitializationError
from .base_container import BaseContainer
from .feature import Feature, RuntimeContext

logger = logging.getLogger(__name__)


class FeatureState(str, Enum):
    """Initialization state of a single feature."""
    PENDING = "pending"
    INITIALIZING = "initializing"
    INITIALIZED = "initialized"
    FAILED = "failed"


class CoordinatorPhase(str, Enum):
    """Lifecycle phase of the coordinator itself."""
    CREATED = "created"
    REGISTERED = "registered"
    INITIALIZED = "initialized"
    FAILED = "failed"


class FeatureCoordinator:
    """
    Holds the ordered feature list and drives registration and initialization.
    """

    def __init__(self, features: Optional[Iterable[Feature]] = None) -> None:
        self._features: List[Feature] = []
        self._states: Dict[str, FeatureState] = {}
        self._phase = CoordinatorPhase.CREATED
        for feature in features or ():
            self.add(feature)

    @property
    def features(self) -> List[Feature]:
        return list(self._features)

    @property
    def phase(self) -> CoordinatorPhase:
        return self._phase

    @property
    def states(self) -> Dict[str, FeatureState]:
        return dict(self._states)

    def state_of(self, name: str) -> FeatureState:
        """
        Get the initialization state of a feature.

        Raises:
            KeyError: If no feature with that name is registered
        """
        return self._states[name]

    def add(self, feature: Feature) -> None:
        """
        Append a feature to the ordered list.

        Raises:
            ValueError: If the name is empty or already taken
            RuntimeError: If registration has already run
        """
        if self._phase is not CoordinatorPhase.CREATED:
            raise RuntimeError("Cannot add features after registration has started")
        if not feature.name:
            raise ValueError(f"Feature {feature!r} has no name")
        if feature.name in self._states:
            raise ValueError(f"Feature '{feature.name}' is already registered")

        self._features.append(feature)
        self._states[feature.name] = FeatureState.PENDING

    def register_all(self, container: BaseContainer, settings: AppSettings) -> None:
        """
        Run storage wiring for every feature, then service wiring for every feature.

        Args:
            container: Shared service registry
            settings: Application settings snapshot

        Raises:
            RuntimeError: If called more than once
        """
        if self._phase is not CoordinatorPhase.CREATED:
            raise RuntimeError("Features have already been registered")

        for feature in self._features:
            logger.debug(f"Registering storage for feature: {feature.name}")
            feature.register_storage(container, settings)

        for feature in self._features:
            logger.debug(f"Registering services for feature: {feature.name}")
            feature.register_services(container, settings)

        self._phase = CoordinatorPhase.REGISTERED
        logger.info(f"Registered {len(self._features)} feature(s): {', '.join(f.name for f in self._features)}")

    async def initialize_all(self, container: BaseContainer, context: RuntimeContext) -> None:
        """
        Initialize every feature sequentially, in registration order.

        Args:
            container: Fully wired service registry
            context: Runtime context passed to each initializer

        Raises:
            RuntimeError: If registration has not run, or initialization already ran
            InitializationError: On the first feature whose initializer fails;
                remaining features are left pending
        """
        if self._phase is CoordinatorPhase.CREATED:
            raise RuntimeError("Features must be registered before initialization")
        if self._phase is not CoordinatorPhase.REGISTERED:
            raise RuntimeError(f"Features cannot be initialized in phase '{self._phase.value}'")

        for feature in self._features:
            self._states[feature.name] = FeatureState.INITIALIZING
            logger.info(f"Initializing feature: {feature.name}")
            try:
                await feature.initialize(container, context)
            except asyncio.CancelledError:
                self._fail(feature)
                logger.warning(f"Initialization of feature {feature.name} was cancelled")
                raise
            except Exception as e:
                self._fail(feature)
                logger.error(f"Failed to initialize feature: {feature.name}", exc_info=True)
                raise InitializationError(feature.name, f"Failed to initialize feature: {feature.name}: {e}") from e

            self._states[feature.name] = FeatureState.INITIALIZED
            logger.info(f"Successfully initialized feature: {feature.name}")

        self._phase = CoordinatorPhase.INITIALIZED

    def _fail(self, feature: Feature) -> None:
        self._states[feature.name] = FeatureState.FAILED
        self._phase = CoordinatorPhase.FAILED
