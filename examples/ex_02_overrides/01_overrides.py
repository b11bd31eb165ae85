"""Overrides: one-shot queue and persistent stub.

``set_one`` queues instances handed out once each, first-in first-out.
``set_always`` returns the same instance on every call. Queued instances mask
the stub until the queue is drained.
"""

from __future__ import annotations

from objectfactory import ObjectFactory


class Clock:
    def __init__(self, now: str = "real-time") -> None:
        self.now = now


def main() -> None:
    factory = ObjectFactory()

    factory.set_one(Clock, Clock("09:00"))
    factory.set_one(Clock, Clock("10:00"))
    print(f"first={factory.create(Clock).now}")  # => first=09:00
    print(f"second={factory.create(Clock).now}")  # => second=10:00
    print(f"drained={factory.create(Clock).now}")  # => drained=real-time

    frozen = Clock("12:00")
    factory.set_always(Clock, frozen)
    factory.set_one(Clock, Clock("11:00"))
    print(f"queued_first={factory.create(Clock).now}")  # => queued_first=11:00
    print(f"stub_every_time={factory.create(Clock) is factory.create(Clock)}")  # => stub_every_time=True

    factory.clear_all()
    print(f"after_clear={factory.create(Clock).now}")  # => after_clear=real-time


if __name__ == "__main__":
    main()
