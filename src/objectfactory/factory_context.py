from objectfactory._internal.factory_context import FactoryContext, factory_context

__all__ = ["FactoryContext", "factory_context"]
