# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    CacheProvider,
    CaptureProvider,
    InferenceProvider,
    PhotoProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. In-memory session store (CacheProvider)
    2. External clients (InferenceProvider)
    3. Use cases and services (AuthProvider, PhotoProvider, CaptureProvider)
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: store → clients → use cases → services
        """
        CacheProvider.register(self)
        InferenceProvider.register(self)
        AuthProvider.register(self)
        PhotoProvider.register(self)
        CaptureProvider.register(self)


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


def reset_container() -> None:
    """Forget the global container; the next get_container() starts with empty state."""
    global _container
    _container = None
