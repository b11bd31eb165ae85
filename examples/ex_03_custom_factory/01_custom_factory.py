"""Custom factories receive the ``create`` arguments.

A custom factory runs on every resolution that no queued or stubbed instance
intercepts. It gets the positional arguments passed to ``create``, unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from objectfactory import ObjectFactory


class Storage(ABC):
    @abstractmethod
    def location(self) -> str: ...


class InMemoryStorage(Storage):
    def __init__(self, bucket: str) -> None:
        self.bucket = bucket

    def location(self) -> str:
        return f"memory://{self.bucket}"


def main() -> None:
    factory = ObjectFactory()
    factory.set_factory(Storage, lambda bucket: InMemoryStorage(bucket))

    storage = factory.create(Storage, "avatars")
    print(storage.location())  # => memory://avatars
    print(f"has_factory={factory.has_custom_factory(Storage)}")  # => has_factory=True

    factory.clear_factory(Storage)
    print(f"has_factory={factory.has_custom_factory(Storage)}")  # => has_factory=False


if __name__ == "__main__":
    main()
