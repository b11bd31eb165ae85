from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, cast, get_type_hints

from typing_extensions import get_overloads

from objectfactory._internal.type_checks import is_assignable, is_protocol_init_placeholder
from objectfactory.exceptions import ObjectFactoryNoMatchingConstructorError

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_MISSING = object()

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConstructorCandidate:
    """One constructor signature a concrete class can be built with.

    ``signature`` never includes the bound ``self``/``cls`` parameter.
    ``annotations`` maps parameter names to resolved type hints; parameters
    whose hints cannot be resolved are absent and accept any argument.
    """

    signature: inspect.Signature
    annotations: dict[str, Any]

    @property
    def positional_count(self) -> int:
        return sum(
            1
            for parameter in self.signature.parameters.values()
            if parameter.kind in _POSITIONAL_KINDS
        )

    def accepts(self, args: Sequence[Any]) -> bool:
        """Return whether ``args`` bind positionally and match every annotation."""
        try:
            bound = self.signature.bind(*args)
        except TypeError:
            return False

        for name, value in bound.arguments.items():
            parameter = self.signature.parameters[name]
            annotation = self.annotations.get(name, inspect.Parameter.empty)
            if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
                if not all(is_assignable(item, annotation) for item in value):
                    return False
            elif not is_assignable(value, annotation):
                return False
        return True

    def is_exact_arity(self, args: Sequence[Any]) -> bool:
        return self.positional_count == len(args)

    def describe(self) -> str:
        return str(self.signature)


class ConstructorSelector:
    """Pick the constructor of a concrete class that fits a call's arguments.

    Candidates come from ``@overload`` variants of ``__init__`` when the class
    declares any, otherwise from ``inspect.signature(cls)``. Candidates are
    cached per class.
    """

    def __init__(self) -> None:
        self._candidates_cache: dict[type[Any], tuple[ConstructorCandidate, ...] | None] = {}

    def construct(
        self,
        concrete: Callable[..., Any],
        concrete_class: type[Any],
        args: Sequence[Any],
    ) -> Any:
        """Instantiate ``concrete`` with ``args`` after checking a constructor accepts them.

        Args:
            concrete: Callable producing the instance; usually ``concrete_class``
                itself or a parameterized alias of it.
            concrete_class: Class whose constructor signatures are inspected.
            args: Positional arguments in caller order.

        Raises:
            ObjectFactoryNoMatchingConstructorError: If no candidate accepts ``args``.

        """
        candidates = self.get_candidates(concrete_class)
        if candidates is None:
            # builtins without an introspectable signature validate their own arguments
            return concrete(*args)

        # the single runtime __init__ performs the call; the match only vets args
        matched = self.select(concrete_class, candidates, args)
        logger.debug("Matched constructor %s%s", concrete_class.__qualname__, matched.describe())
        return concrete(*args)

    def select(
        self,
        concrete_class: type[Any],
        candidates: Sequence[ConstructorCandidate],
        args: Sequence[Any],
    ) -> ConstructorCandidate:
        """Return the candidate that accepts ``args``, preferring an exact positional arity.

        The result names the signature the call matched. Python dispatches the
        call through the class's one ``__init__`` regardless of which overload
        is returned here.
        """
        matching =[candidate for candidate in candidates if candidate.accepts(args)]
        for candidate in matching:
            if candidate.is_exact_arity(args):
                return candidate
        if matching:
            return matching[0]

        argument_types = ", ".join(type(arg).__name__ for arg in args)
        tried = "; ".join(
            f"{concrete_class.__qualname__}{candidate.describe()}" for candidate in candidates
        )
        msg = (
            f"No constructor of '{concrete_class.__qualname__}' accepts arguments "
            f"({argument_types}). Tried: {tried}."
        )
        raise ObjectFactoryNoMatchingConstructorError(msg)

    def get_candidates(
        self,
        concrete_class: type[Any],
    ) -> tuple[ConstructorCandidate, ...] | None:
        """Return cached candidates, or ``None`` when the class is not introspectable."""
        cached = self._candidates_cache.get(concrete_class, _MISSING)
        if cached is not _MISSING:
            return cast("tuple[ConstructorCandidate, ...] | None", cached)

        candidates = self._collect_candidates(concrete_class)
        return self._candidates_cache.setdefault(concrete_class, candidates)

    def _collect_candidates(
        self,
        concrete_class: type[Any],
    ) -> tuple[ConstructorCandidate, ...] | None:
        init_func = self._get_init_func(concrete_class)
        if inspect.isfunction(init_func):
            overloads = get_overloads(init_func)
            if overloads:
                return tuple(self._candidate_from_function(overload) for overload in overloads)

        hints_source = init_func if init_func is not None else self._get_new_func(concrete_class)
        if is_protocol_init_placeholder(concrete_class.__init__):
            # inspect.signature() would report the placeholder's (*args, **kwargs)
            if hints_source is None:
                return (ConstructorCandidate(signature=inspect.Signature(), annotations={}),)
            try:
                return (self._candidate_from_function(hints_source),)
            except (TypeError, ValueError):
                return None

        try:
            signature = inspect.signature(concrete_class)
        except (TypeError, ValueError):
            return None

        annotations = self._resolve_annotations(hints_source) if hints_source is not None else {}
        return (ConstructorCandidate(signature=signature, annotations=annotations),)

    def _candidate_from_function(self, func: Callable[..., Any]) -> ConstructorCandidate:
        signature = inspect.signature(func)
        parameters = list(signature.parameters.values())[1:]
        return ConstructorCandidate(
            signature=signature.replace(parameters=parameters),
            annotations=self._resolve_annotations(func),
        )

    def _resolve_annotations(self, func: Callable[..., Any]) -> dict[str, Any]:
        try:
            hints = get_type_hints(func)
        except (NameError, TypeError):
            hints = self._resolve_each_annotation(func)
        hints.pop("return", None)
        return hints

    def _resolve_each_annotation(self, func: Callable[..., Any]) -> dict[str, Any]:
        """Resolve annotations one at a time so a single unresolved name only skips its own check.

        Typical trigger is a parameter typed with a name imported under
        ``TYPE_CHECKING`` in a module using ``from __future__ import annotations``.
        """
        try:
            raw_annotations = dict(getattr(func, "__annotations__", {}))
        except NameError:
            return {}

        globalns = getattr(func, "__globals__", None)
        hints: dict[str, Any] = {}
        for name, annotation in raw_annotations.items():
            holder = SimpleNamespace(__annotations__={name: annotation})
            try:
                hints.update(get_type_hints(holder, globalns=globalns))
            except (NameError, TypeError):
                # unresolved forward references stay unchecked
                continue
        return hints

    def _get_init_func(self, concrete_class: type[Any]) -> Callable[..., Any] | None:
        for klass in concrete_class.__mro__:
            init_func = klass.__dict__.get("__init__")
            if init_func is None or is_protocol_init_placeholder(init_func):
                continue
            if init_func is object.__init__:
                return None
            return cast("Callable[..., Any]", init_func)
        return None

    def _get_new_func(self, concrete_class: type[Any]) -> Callable[..., Any] | None:
        new_func = concrete_class.__new__
        if new_func is object.__new__:
            return None
        return new_func


__all__ = ["ConstructorCandidate", "ConstructorSelector"]
