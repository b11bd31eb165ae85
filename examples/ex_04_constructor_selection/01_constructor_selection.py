"""Default construction picks the constructor matching the arguments.

Declare alternative constructors with ``@overload`` on ``__init__``. The
factory selects the overload whose parameters accept the argument count and
types, and ``concrete_type`` chooses the implementation of an abstraction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from typing_extensions import overload

from objectfactory import ObjectFactory, ObjectFactoryNoMatchingConstructorError


class Service(ABC):
    @abstractmethod
    def describe(self) -> str: ...


class NamedService(Service):
    @overload
    def __init__(self) -> None: ...

    @overload
    def __init__(self, name: str, value: int) -> None: ...

    def __init__(self, name: str = "default", value: int = 0) -> None:
        self.name = name
        self.value = value

    def describe(self) -> str:
        return f"{self.name}={self.value}"


def main() -> None:
    factory = ObjectFactory()

    print(factory.create(Service, concrete_type=NamedService).describe())  # => default=0
    print(factory.create(Service, "answer", 42, concrete_type=NamedService).describe())  # => answer=42

    try:
        factory.create(Service, 42, "answer", concrete_type=NamedService)
    except ObjectFactoryNoMatchingConstructorError:
        print("no_match=True")  # => no_match=True


if __name__ == "__main__":
    main()
