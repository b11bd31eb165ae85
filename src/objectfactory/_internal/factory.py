from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    from typing_extensions import Self

from objectfactory._internal.constructors import ConstructorSelector
from objectfactory._internal.lock_mode import LockMode
from objectfactory._internal.overrides import OverrideTables
from objectfactory._internal.type_checks import (
    abstraction_origin,
    is_instance_of,
    is_runtime_class,
    is_subclass_of,
    is_unconstructible,
)
from objectfactory.exceptions import (
    ObjectFactoryAbstractTypeError,
    ObjectFactoryInvalidAbstractionError,
    ObjectFactoryInvalidRegistrationError,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ObjectFactory:
    """Resolve instances of requested types with test-configurable overrides.

    Application code calls ``create`` wherever it would otherwise call a
    constructor directly. Test code registers overrides for an abstraction,
    and ``create`` consults them in a fixed order:

    1. one-shot queue (``set_one``): each queued instance is returned once, FIFO;
    2. persistent stub (``set_always``): returned on every call;
    3. custom factory (``set_factory``): called with the ``create`` arguments;
    4. default construction: a constructor accepting the arguments is invoked.

    A higher tier always masks the lower ones for the same abstraction.
    Overrides are keyed by the exact abstraction and never apply to its
    subclasses or base classes.

    Examples:
        .. code-block:: python

            factory = ObjectFactory()

            # production code
            client = factory.create(HttpClient, "https://api.example.com")

            # test code
            factory.set_one(HttpClient, FakeHttpClient())
            assert isinstance(factory.create(HttpClient, "ignored"), FakeHttpClient)

    """

    def __init__(
        self,
        *,
        lock_mode: LockMode = LockMode.THREAD,
        strict_overrides: bool = True,
    ) -> None:
        """Initialize an empty factory.

        Args:
            lock_mode: Guard strategy for the override tables. ``LockMode.THREAD``
                makes every operation safe to call from multiple threads.
            strict_overrides: Reject ``set_one``/``set_always`` instances that are
                not instances of the abstraction. Disable to register duck-typed
                fakes.

        """
        self._lock_mode = lock_mode
        self._strict_overrides = strict_overrides
        self._guard = lock_mode.create_guard()
        self._overrides = OverrideTables()
        self._constructor_selector = ConstructorSelector()

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    @property
    def strict_overrides(self) -> bool:
        return self._strict_overrides

    # region Override Configuration
    def set_one(self, abstraction: type[T], instance: T) -> None:
        """Queue an instance returned by exactly one future ``create`` call.

        Repeated calls append, so queued instances are handed out first-in,
        first-out. Once the queue is drained, resolution falls through to the
        next tier.

        Args:
            abstraction: Requested type the instance substitutes.
            instance: Pre-built instance to return.

        Raises:
            ObjectFactoryInvalidAbstractionError: If ``abstraction`` is not a class.
            ObjectFactoryInvalidRegistrationError: If ``strict_overrides`` is on and
                ``instance`` is not an instance of ``abstraction``.

        """
        self._validate_instance(abstraction, instance, method_name="set_one")
        with self._guard:
            self._overrides.enqueue(abstraction, instance)
        logger.debug("Queued one-shot override for %r", abstraction)

    def set_always(self, abstraction: type[T], instance: T) -> None:
        """Return ``instance`` from every ``create`` call for ``abstraction``.

        A later call replaces the previous stub. Queued one-shot instances still
        take precedence while they last.

        Raises:
            ObjectFactoryInvalidAbstractionError: If ``abstraction`` is not a class.
            ObjectFactoryInvalidRegistrationError: If ``strict_overrides`` is on and
                ``instance`` is not an instance of ``abstraction``.

        """
        self._validate_instance(abstraction, instance, method_name="set_always")
        with self._guard:
            self._overrides.set_stub(abstraction, instance)
        logger.debug("Set persistent override for %r", abstraction)

    def set_factory(self, abstraction: type[T], factory: Callable[..., T]) -> None:
        """Build instances of ``abstraction`` with ``factory`` instead of a constructor.

        ``factory`` receives the positional arguments passed to ``create``,
        unchanged and in order, and is invoked on every resolution that reaches
        this tier. Its result is not cached. A later call replaces the previous
        factory.

        Raises:
            ObjectFactoryInvalidAbstractionError: If ``abstraction`` is not a class.
            ObjectFactoryInvalidRegistrationError: If ``factory`` is not callable.

        """
        self._validate_abstraction(abstraction)
        if not callable(factory):
            msg = f"set_factory() requires a callable factory for {abstraction!r}, got {factory!r}."
            raise ObjectFactoryInvalidRegistrationError(msg)
        with self._guard:
            self._overrides.set_factory(abstraction, factory)
        logger.debug("Set custom factory for %r", abstraction)

    def has_custom_factory(self, abstraction: type[Any]) -> bool:
        """Return whether a custom factory is registered for ``abstraction``."""
        self._validate_abstraction(abstraction)
        with self._guard:
            return self._overrides.has_factory(abstraction)

    def clear_factory(self, abstraction: type[Any]) -> None:
        """Remove the custom factory for ``abstraction``; queued and stubbed overrides stay."""
        self._validate_abstraction(abstraction)
        with self._guard:
            self._overrides.remove_factory(abstraction)
        logger.debug("Cleared custom factory for %r", abstraction)

    def clear(self, abstraction: type[Any]) -> None:
        """Remove every override registered for ``abstraction``."""
        self._validate_abstraction(abstraction)
        with self._guard:
            self._overrides.remove(abstraction)
        logger.debug("Cleared overrides for %r", abstraction)

    def clear_all(self) -> None:
        """Remove every override for every abstraction.

        Afterwards the factory behaves like a freshly constructed one.
        """
        with self._guard:
            self._overrides.clear()
        logger.debug("Cleared all overrides")

    # endregion Override Configuration

    # region Resolution
    def create(
        self,
        abstraction: type[T],
        *args: Any,
        concrete_type: type[Any] | None = None,
    ) -> T:
        """Return an instance of ``abstraction``.

        Overrides are consulted first (one-shot queue, then persistent stub,
        then custom factory). Without an override, a new instance of
        ``concrete_type`` (or of ``abstraction`` itself) is constructed with
        ``args`` through the first constructor signature that accepts them.

        Args:
            abstraction: Requested type; the key overrides are registered under.
            *args: Positional arguments for the custom factory or the constructor.
                Ignored when a queued or stubbed instance is returned.
            concrete_type: Class to construct at the default tier when
                ``abstraction`` is an interface or abstract base class.

        Returns:
            The resolved instance.

        Raises:
            ObjectFactoryInvalidAbstractionError: If ``abstraction`` is not a class,
                or ``concrete_type`` is not a subclass of it.
            ObjectFactoryAbstractTypeError: If no override applies and the type to
                construct is abstract.
            ObjectFactoryNoMatchingConstructorError: If no constructor accepts
                ``args``.

        Notes:
            Exceptions raised by a custom factory or constructor propagate
            unchanged.

        Examples:
            .. code-block:: python

                service = factory.create(Service, "name", 42)
                repository = factory.create(Repository, concrete_type=SqlRepository)

        """
        origin = self._validate_abstraction(abstraction)
        if concrete_type is not None:
            self._validate_concrete_type(abstraction, origin, concrete_type)

        with self._guard:
            override = self._overrides.take(abstraction)

        if override is not None:
            logger.debug("Resolved %r from %s override", abstraction, override.tier)
            if override.tier == "factory":
                return cast("T", override.value(*args))
            return cast("T", override.value)

        return cast("T", self._construct(abstraction, origin, concrete_type, args))

    # endregion Resolution

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.clear_all()

    def _construct(
        self,
        abstraction: Any,
        origin: type[Any],
        concrete_type: type[Any] | None,
        args: tuple[Any, ...],
    ) -> Any:
        if concrete_type is not None:
            concrete: Any = concrete_type
            concrete_class = concrete_type
        else:
            concrete = abstraction
            concrete_class = origin

        if is_unconstructible(concrete_class):
            msg = (
                f"Cannot construct abstract type '{concrete_class.__qualname__}'. "
                "Pass concrete_type=... or register an override for it."
            )
            raise ObjectFactoryAbstractTypeError(msg)

        logger.debug("Constructing %r for %r", concrete_class, abstraction)
        return self._constructor_selector.construct(concrete, concrete_class, args)

    def _validate_abstraction(self, abstraction: object) -> type[Any]:
        origin = abstraction_origin(abstraction)
        if origin is None:
            msg = (
                "Abstraction must be a class or a parameterized generic class, "
                f"got {abstraction!r}."
            )
            raise ObjectFactoryInvalidAbstractionError(msg)
        return origin

    def _validate_concrete_type(
        self,
        abstraction: object,
        origin: type[Any],
        concrete_type: object,
    ) -> None:
        if not is_runtime_class(concrete_type):
            msg = f"create() parameter 'concrete_type' must be a class, got {concrete_type!r}."
            raise ObjectFactoryInvalidAbstractionError(msg)
        if not is_subclass_of(concrete_type, origin):
            msg = (
                f"Concrete type '{concrete_type.__qualname__}' is not a subclass of "
                f"abstraction {abstraction!r}."
            )
            raise ObjectFactoryInvalidAbstractionError(msg)

    def _validate_instance(
        self,
        abstraction: object,
        instance: object,
        *,
        method_name: str,
    ) -> None:
        origin = self._validate_abstraction(abstraction)
        if not self._strict_overrides:
            return
        if not is_instance_of(instance, origin):
            msg = (
                f"{method_name}() instance {instance!r} is not an instance of "
                f"abstraction {abstraction!r}."
            )
            raise ObjectFactoryInvalidRegistrationError(msg)


__all__ = ["ObjectFactory"]
