from __future__ import annotations

from collections.abc import Iterator

import pytest

from objectfactory._internal.factory import ObjectFactory
from objectfactory._internal.factory_context import factory_context


@pytest.fixture()
def object_factory() -> ObjectFactory:
    """Create a per-test factory bound to ``factory_context``.

    The fixture is function-scoped, so overrides registered through it (or
    through ``factory_context``) are isolated between tests unless users
    override the fixture scope explicitly.

    Returns:
        A new ``ObjectFactory`` instance.

    """
    return ObjectFactory()


@pytest.fixture(autouse=True)
def _objectfactory_state(object_factory: ObjectFactory) -> Iterator[None]:
    """Bind the per-test factory as current and restore the previous binding afterwards."""
    previous = factory_context.set_current(object_factory)
    try:
        yield
    finally:
        object_factory.clear_all()
        factory_context.set_current(previous)
