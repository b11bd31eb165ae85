"""Quickstart: replace direct construction with ``ObjectFactory.create``.

Production code asks the factory for an instance instead of calling the
constructor. Without overrides the factory simply constructs the type with the
arguments it was given.
"""

from __future__ import annotations

from objectfactory import ObjectFactory


class Mailer:
    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port

    def send(self, to: str) -> str:
        return f"sent to {to} via {self.host}:{self.port}"


class SignupService:
    def __init__(self, factory: ObjectFactory) -> None:
        self.factory = factory

    def register(self, email: str) -> str:
        mailer = self.factory.create(Mailer, "smtp.example.com", 25)
        return mailer.send(email)


def main() -> None:
    factory = ObjectFactory()
    service = SignupService(factory)

    print(service.register("ada@example.com"))  # => sent to ada@example.com via smtp.example.com:25


if __name__ == "__main__":
    main()
