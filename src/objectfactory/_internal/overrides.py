from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Override:
    """Result of an override lookup.

    ``tier`` names the table that served the lookup and ``value`` is either
    the instance to return or the factory to invoke.
    """

    tier: str
    value: Any


class OverrideTables:
    """Per-abstraction override storage: one-shot queues, persistent stubs, factories.

    The tables are not synchronized; callers hold their own guard around every
    method call.
    """

    def __init__(self) -> None:
        self._queues: dict[Any, deque[Any]] = {}
        self._stubs: dict[Any, Any] = {}
        self._factories: dict[Any, Callable[..., Any]] = {}

    def enqueue(self, key: Any, instance: Any) -> None:
        self._queues.setdefault(key, deque()).append(instance)

    def set_stub(self, key: Any, instance: Any) -> None:
        self._stubs[key] = instance

    def set_factory(self, key: Any, factory: Callable[..., Any]) -> None:
        self._factories[key] = factory

    def has_factory(self, key: Any) -> bool:
        return key in self._factories

    def remove_factory(self, key: Any) -> None:
        self._factories.pop(key, None)

    def remove(self, key: Any) -> None:
        self._queues.pop(key, None)
        self._stubs.pop(key, None)
        self._factories.pop(key, None)

    def clear(self) -> None:
        self._queues.clear()
        self._stubs.clear()
        self._factories.clear()

    def take(self, key: Any) -> Override | None:
        """Consume the highest-precedence override for ``key``.

        Queued instances are popped from the head; a drained queue stays in the
        table but no longer intercepts. Stubs and factories are returned without
        mutation. ``None`` means no override is registered.
        """
        queue = self._queues.get(key)
        if queue:
            return Override(tier="queue", value=queue.popleft())
        if key in self._stubs:
            return Override(tier="stub", value=self._stubs[key])
        factory = self._factories.get(key)
        if factory is not None:
            return Override(tier="factory", value=factory)
        return None


__all__ = ["Override", "OverrideTables"]
