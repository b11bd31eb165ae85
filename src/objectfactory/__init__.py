from objectfactory.exceptions import (
    ObjectFactoryAbstractTypeError,
    ObjectFactoryError,
    ObjectFactoryInvalidAbstractionError,
    ObjectFactoryInvalidRegistrationError,
    ObjectFactoryNoMatchingConstructorError,
)
from objectfactory.factory import ObjectFactory
from objectfactory.factory_context import FactoryContext, factory_context
from objectfactory.lock_mode import LockMode

__all__ = [
    "FactoryContext",
    "LockMode",
    "ObjectFactory",
    "ObjectFactoryAbstractTypeError",
    "ObjectFactoryError",
    "ObjectFactoryInvalidAbstractionError",
    "ObjectFactoryInvalidRegistrationError",
    "ObjectFactoryNoMatchingConstructorError",
    "factory_context",
]
