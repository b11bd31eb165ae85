"""Process-wide factory through ``factory_context``.

``factory_context`` is reachable from anywhere without passing a factory
around. It delegates to one shared ``ObjectFactory``; ``clear_all`` resets it.
"""

from __future__ import annotations

from objectfactory import factory_context


class PaymentGateway:
    def charge(self, amount: int) -> str:
        return f"charged {amount}"


class FakeGateway(PaymentGateway):
    def charge(self, amount: int) -> str:
        return f"pretended to charge {amount}"


def checkout(amount: int) -> str:
    return factory_context.create(PaymentGateway).charge(amount)


def main() -> None:
    print(checkout(10))  # => charged 10

    factory_context.set_always(PaymentGateway, FakeGateway())
    print(checkout(10))  # => pretended to charge 10

    factory_context.clear_all()
    print(checkout(10))  # => charged 10


if __name__ == "__main__":
    main()
