"""Shared pytest fixtures for objectfactory tests."""

import pytest

from objectfactory import LockMode, ObjectFactory


@pytest.fixture()
def factory() -> ObjectFactory:
    """Default factory with thread locking and strict override checks."""
    return ObjectFactory()


@pytest.fixture()
def lenient_factory() -> ObjectFactory:
    """Factory accepting duck-typed overrides."""
    return ObjectFactory(strict_overrides=False)


@pytest.fixture()
def unlocked_factory() -> ObjectFactory:
    """Factory without locking around override tables."""
    return ObjectFactory(lock_mode=LockMode.NONE)
