# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Repositories (RepositoryProvider) - owns the in-memory user store
    2. Use cases (AuthProvider, UserProvider) - depend on repositories
    """
    
    def __init__(self) -> None:
        super().__init__()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: repositories → use cases
        """
        # Step 1: Register the user store (one per container)
        RepositoryProvider.register(self)
        
        # Step 2: Register use cases (depends on repositories)
        AuthProvider.register(self)
        UserProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


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


def reset_container() -> None:
    """Drop the global container, and with it every stored user"""
    global _container
    _container = None
