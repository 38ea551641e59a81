"""
Dependency Injection Container.
The composition root: the only place where concrete classes are chosen.
"""

from typing import Any, Callable, Dict, Type, TypeVar

T = TypeVar("T")


class Container:
    """Maps an interface to the factory that builds its implementation."""

    _providers: Dict[Type, Callable[[], Any]] = {}

    @classmethod
    def register_factory(cls, interface: Type[T], factory: Callable[[], T]) -> None:
        cls._providers[interface] = factory

    @classmethod
    def resolve(cls, interface: Type[T]) -> T:
        """Build a new implementation of the interface."""
        try:
            factory = cls._providers[interface]
        except KeyError:
            raise KeyError(f"No provider registered for {interface.__name__}") from None
        return factory()

    @classmethod
    def clear(cls):
        cls._providers.clear()


def bootstrap_container():
    """
    Register the task repository and service factories.
    Every resolve builds a fresh repository and a service wired to it.
    """
    from repositories import ITaskRepository, InMemoryTaskRepository
    from services import ITaskService, TaskService

    Container.register_factory(ITaskRepository, InMemoryTaskRepository)
    Container.register_factory(
        ITaskService, lambda: TaskService(Container.resolve(ITaskRepository))
    )
