class ObjectFactoryError(Exception):
    """Represent a base class for all ObjectFactory-specific failures.

    Catch this type when you want to handle any ObjectFactory error path without
    matching each concrete exception class individually. Errors raised by
    user-supplied factories or constructors are never wrapped in this type.
    """


class ObjectFactoryInvalidAbstractionError(ObjectFactoryError):
    """Signal an abstraction key that cannot identify a requested type.

    Raised by every ``ObjectFactory`` operation when the abstraction is not a
    class or a class-based generic alias such as ``Repository[User]``, and by
    ``ObjectFactory.create`` when ``concrete_type`` is not a class assignable to
    the abstraction.

    Typical fixes include passing the class object itself instead of an
    instance or a string, and making the concrete type subclass the abstraction.
    """


class ObjectFactoryInvalidRegistrationError(ObjectFactoryError):
    """Signal an override that does not fit the abstraction it was registered for.

    Raised by ``ObjectFactory.set_one`` and ``ObjectFactory.set_always`` when the
    instance is not assignable to the abstraction, and by
    ``ObjectFactory.set_factory`` when the factory is not callable.

    Typical fixes include registering an instance of a subclass of the
    abstraction, or constructing the factory with
    ``ObjectFactory(strict_overrides=False)`` when registering duck-typed fakes
    such as ``unittest.mock.Mock()``.
    """


class ObjectFactoryAbstractTypeError(ObjectFactoryError):
    """Signal default construction of a type that cannot be instantiated.

    Raised by ``ObjectFactory.create`` when no override intercepted the call and
    the type to construct is an abstract base class or a ``typing.Protocol``.

    Typical fixes include passing ``concrete_type=...`` or registering an
    override with ``set_one``, ``set_always`` or ``set_factory``.
    """


class ObjectFactoryNoMatchingConstructorError(ObjectFactoryError):
    """Signal that no constructor accepts the supplied arguments.

    Raised by ``ObjectFactory.create`` at the default-construction tier when no
    constructor signature (``__init__`` or one of its ``@overload`` variants)
    accepts the arguments by count and annotated type.

    Typical fixes include passing arguments that match a declared constructor
    signature, or registering a custom factory with ``set_factory``.
    """
