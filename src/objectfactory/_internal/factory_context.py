from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from objectfactory._internal.factory import ObjectFactory

T = TypeVar("T")


class FactoryContext:
    """Process-wide access point to one shared ``ObjectFactory``.

    Every method delegates to the currently bound factory and adds no behavior
    of its own. The binding is process-global for this ``FactoryContext``
    instance; it is not task-local or thread-local.

    Use ``clear_all`` to reset overrides between tests, or bind a fresh factory
    with ``set_current`` (the pytest plugin does this for every test).
    """

    def __init__(self, factory: ObjectFactory | None = None) -> None:
        self._factory = factory if factory is not None else ObjectFactory()

    def get_current(self) -> ObjectFactory:
        """Return the bound factory."""
        return self._factory

    def set_current(self, factory: ObjectFactory) -> ObjectFactory:
        """Bind ``factory`` and return the previously bound one."""
        previous = self._factory
        self._factory = factory
        return previous

    def set_one(self, abstraction: type[T], instance: T) -> None:
        """Queue a one-shot override on the bound factory."""
        self._factory.set_one(abstraction, instance)

    def set_always(self, abstraction: type[T], instance: T) -> None:
        """Set a persistent override on the bound factory."""
        self._factory.set_always(abstraction, instance)

    def set_factory(self, abstraction: type[T], factory: Callable[..., T]) -> None:
        """Set a custom factory on the bound factory."""
        self._factory.set_factory(abstraction, factory)

    def has_custom_factory(self, abstraction: type[Any]) -> bool:
        return self._factory.has_custom_factory(abstraction)

    def clear_factory(self, abstraction: type[Any]) -> None:
        self._factory.clear_factory(abstraction)

    def clear(self, abstraction: type[Any]) -> None:
        self._factory.clear(abstraction)

    def clear_all(self) -> None:
        """Reset the bound factory to its empty state."""
        self._factory.clear_all()

    def create(
        self,
        abstraction: type[T],
        *args: Any,
        concrete_type: type[Any] | None = None,
    ) -> T:
        """Resolve ``abstraction`` through the bound factory. See ``ObjectFactory.create``."""
        return self._factory.create(abstraction, *args, concrete_type=concrete_type)


factory_context = FactoryContext()

__all__ = ["FactoryContext", "factory_context"]
