# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AnalysisProvider,
    AuthProvider,
    CustomerProvider,
    DatabaseProvider,
    GatewayProvider,
    JobProvider,
    RepositoryProvider,
    RoomProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depend on collections
    3. Gateways (GatewayProvider) - blob store, detection client, image fetcher
    4. Analysis service and queue (AnalysisProvider) - depend on 2 and 3
    5. Use cases (Auth, Job, Room, Customer providers)
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        GatewayProvider.register(self)
        AnalysisProvider.register(self)
        AuthProvider.register(self)
        JobProvider.register(self)
        RoomProvider.register(self)
        CustomerProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
