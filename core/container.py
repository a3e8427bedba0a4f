"""
Dependency Injection Container.
"""

from typing import Any, Dict, Type, TypeVar

from .logger import logger

T = TypeVar("T")


class Container:
    """
    Simple Dependency Injection Container.

    One instance is created per application; registrations live on the
    instance so tests and multiple apps never share state.
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}

    def register(self, interface: Type[T], instance: T) -> None:
        """Register a singleton instance for an interface."""
        self._instances[interface] = instance

    def resolve(self, interface: Type[T]) -> T:
        """Resolve an interface to its implementation."""
        if interface in self._instances:
            return self._instances[interface]
        raise KeyError(f"No provider registered for {interface.__name__}")


def bootstrap_container() -> Container:
    """
    Build the application container.

    Registers one in-memory repository per entity type; services are cheap
    and are built per request from these.
    """
    from repositories import InMemoryCategoryRepository, InMemoryTaskRepository
    from repositories.interfaces import ICategoryRepository, ITaskRepository

    container = Container()
    container.register(ITaskRepository, InMemoryTaskRepository())
    container.register(ICategoryRepository, InMemoryCategoryRepository())
    logger.debug("Container bootstrapped with in-memory repositories")
    return container
