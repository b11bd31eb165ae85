from collections.abc import Callable
from typing import Annotated, Any, Literal, Optional, TypeVar, Union

import pytest

from objectfactory._internal.type_checks import (
    abstraction_origin,
    is_assignable,
    is_runtime_class,
    is_unconstructible,
)
from tests.services import (
    ConcreteService,
    EnglishGreeter,
    Greeter,
    ITestService,
    TestService,
    Untyped,
)

Bounded = TypeVar("Bounded", bound=ITestService)
Constrained = TypeVar("Constrained", str, bytes)


@pytest.mark.parametrize(
    ("value", "annotation", "expected"),
    [
        (1, Any, True),
        (1, object, True),
        (1, "NotYetDefined", True),
        (None, None, True),
        (0, None, False),
        (1, int, True),
        (True, int, True),
        ("1", int, False),
        (1, float, True),
        (1.0, complex, True),
        (True, float, False),
        (None, Optional[int], True),
        ("x", Union[int, str], True),
        (b"x", int | str, False),
        (3, Annotated[int, "meta"], True),
        ("a", Literal["a", "b"], True),
        ("c", Literal["a", "b"], False),
        (1, Literal[True], False),
        ([1], list[str], True),
        ({}, list[str], False),
        (len, Callable[[str], int], True),
        (1, Callable[..., Any], False),
        (TestService, type[ITestService], True),
        (ConcreteService, type[ITestService], False),
        (TestService(), type[ITestService], False),
        (TestService(), Bounded, True),
        (ConcreteService(), Bounded, False),
        (b"x", Constrained, True),
        (1, Constrained, False),
        (EnglishGreeter(), Greeter, True),
        (object(), Greeter, False),
        (object(), Untyped, True),
    ],
)
def test_is_assignable(value: object, annotation: Any, expected: bool) -> None:  # noqa: FBT001
    assert is_assignable(value, annotation) is expected


def test_is_runtime_class() -> None:
    assert is_runtime_class(ConcreteService)
    assert not is_runtime_class(list[int])
    assert not is_runtime_class(ConcreteService())


def test_abstraction_origin() -> None:
    assert abstraction_origin(ConcreteService) is ConcreteService
    assert abstraction_origin(list[int]) is list
    assert abstraction_origin(Optional[int]) is None
    assert abstraction_origin("ConcreteService") is None


def test_is_unconstructible() -> None:
    assert is_unconstructible(ITestService)
    assert is_unconstructible(Greeter)
    assert not is_unconstructible(TestService)
    assert not is_unconstructible(EnglishGreeter)
