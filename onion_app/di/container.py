# Standard library imports
from typing import Iterable, List, Optional

# Local application imports
from onion_app.core.config import AppSettings
from onion_app.features.greetings import GreetingsFeature
from .base_container import BaseContainer
from .coordinator import FeatureCoordinator
from .feature import Feature, RuntimeContext


def build_features() -> List[Feature]:
    """
    Ordered list of application features.

    Registration and initialization follow this order.
    """
    return [
        GreetingsFeature(),
        # Add more features here as needed
    ]


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all features through the FeatureCoordinator.

    Registration order is important:
    1. Storage of every feature (register_storage)
    2. Repositories and services of every feature (register_services)
    Initialization runs later, once the application is built.
    """

    def __init__(self, settings: AppSettings, features: Optional[Iterable[Feature]] = None) -> None:
        super().__init__()
        self.settings = settings
        self.coordinator = FeatureCoordinator(build_features() if features is None else features)
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations.
        Order matters: settings → storage → services
        """
        self.register_singleton(AppSettings, self.settings)
        self.coordinator.register_all(self, self.settings)

    async def initialize_features(self, context: Optional[RuntimeContext] = None) -> None:
        """
        Run every feature's initializer in registration order (fail-fast).

        Raises:
            InitializationError: If any feature fails to initialize
        """
        if context is None:
            context = RuntimeContext(environment=self.settings.environment, settings=self.settings)
        await self.coordinator.initialize_all(self, context)
