from objectfactory._internal.integrations.pytest_plugin import _objectfactory_state, object_factory

__all__ = ["_objectfactory_state", "object_factory"]
