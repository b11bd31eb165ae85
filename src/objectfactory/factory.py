from objectfactory._internal.factory import ObjectFactory

__all__ = ["ObjectFactory"]
