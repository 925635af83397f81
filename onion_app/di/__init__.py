"""
Dependency Injection Package
============================

Service registry, feature contract and the coordinator that composes features.
"""
from .base_container import BaseContainer
from .coordinator import CoordinatorPhase, FeatureCoordinator, FeatureState
from .feature import Feature, RuntimeContext

__all__ = [
    "BaseContainer",
    "CoordinatorPhase",
    "Feature",
    "FeatureCoordinator",
    "FeatureState",
    "RuntimeContext",
]
