from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar, Union

from .errors import EmptyValueError
from .logger import ConsoleLogger, default_logger

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Matcher(Generic[A, B]):
    some: Callable[[A], B]
    none: Callable[[], B]


def _branch(matcher: Any, name: str) -> Callable[..., Any]:
    if isinstance(matcher, Mapping):
        fn = matcher.get(name)
    else:
        fn = getattr(matcher, name, None)
    if fn is None:
        raise TypeError(f"matcher is missing the '{name}' branch")
    return fn


class Option(Generic[A]):
    """Either ``Some(value)`` or the empty option ``NONE``.

    Combinators never change an option in place; they return a new option or
    the same immutable instance. Callbacks are only invoked on the branch that
    needs them.
    """

    __slots__ = ()

    @property
    def is_defined(self) -> bool: raise NotImplementedError
    @property
    def is_empty(self) -> bool: return not self.is_defined
    @property
    def non_empty(self) -> bool: return self.is_defined

    @property
    def get(self) -> A:
        if self.is_defined:
            return self.value  # type: ignore[attr-defined]
        raise EmptyValueError()

    def exists(self, p: Callable[[A], bool]) -> bool:
        return p(self.value) if self.is_defined else False  # type: ignore[attr-defined]

    def for_all(self, p: Callable[[A], bool]) -> bool:
        return p(self.value) if self.is_defined else True  # type: ignore[attr-defined]

    def filter(self, p: Callable[[A], bool]) -> "Option[A]":
        if self.is_defined and not p(self.value):  # type: ignore[attr-defined]
            return NONE
        return self

    def filter_not(self, p: Callable[[A], bool]) -> "Option[A]":
        if self.is_defined and p(self.value):  # type: ignore[attr-defined]
            return NONE
        return self

    def map(self, f: Callable[[A], B]) -> "Option[B]":
        if self.is_defined:
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[A], "Option[B]"]) -> "Option[B]":
        if self.is_defined:
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    def fold(self, if_empty: Callable[[], B]) -> Callable[[Callable[[A], B]], B]:
        def apply(f: Callable[[A], B]) -> B:
            if self.is_defined:
                return f(self.value)  # type: ignore[attr-defined]
            return if_empty()
        return apply

    def for_each(self, f: Callable[[A], Any]) -> None:
        if self.is_defined:
            f(self.value)  # type: ignore[attr-defined]

    def inspect(self, f: Callable[[A], Any]) -> "Option[A]":
        self.for_each(f)
        return self

    def get_or_else(self, default: Callable[[], A]) -> A:
        return self.value if self.is_defined else default()  # type: ignore[attr-defined]

    def get_or_else_value(self, default: A) -> A:
        return self.value if self.is_defined else default  # type: ignore[attr-defined]

    def or_else(self, alternative: Callable[[], "Option[A]"]) -> "Option[A]":
        return self if self.is_defined else alternative()

    def or_else_value(self, alternative: "Option[A]") -> "Option[A]":
        return self if self.is_defined else alternative

    @property
    def or_null(self) -> Optional[A]:
        return self.value if self.is_defined else None  # type: ignore[attr-defined]

    # Python has a single absence sentinel; kept for callers ported from APIs
    # that distinguish null from undefined.
    @property
    def or_undefined(self) -> Optional[A]:
        return self.or_null

    def match(self, matcher: Union[Matcher[A, B], Mapping[str, Callable[..., B]]]) -> B:
        """Dispatch to ``matcher.some(value)`` or ``matcher.none()``.

        ``matcher`` is a :class:`Matcher`, any object with ``some``/``none``
        attributes, or a mapping with those keys.
        """
        if self.is_defined:
            return _branch(matcher, "some")(self.value)  # type: ignore[attr-defined]
        return _branch(matcher, "none")()

    def to_list(self) -> List[A]:
        return [self.value] if self.is_defined else []  # type: ignore[attr-defined]

    def __iter__(self) -> Iterator[A]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return 1 if self.is_defined else 0

    def __bool__(self) -> bool:
        return self.is_defined

    def for_comprehension(self, *fns: Callable[[Any], Any]) -> "Option[Any]":
        """Chain ``flat_map`` over every function but the last, then ``map`` the last.

        >>> some({"a": some(1)}).for_comprehension(lambda d: d["a"], lambda x: x + 1)
        Some(2)
        """
        if not fns:
            raise TypeError("for_comprehension requires at least one function")
        result: Option[Any] = self
        for f in fns[:-1]:
            result = result.flat_map(f)
        return result.map(fns[-1])

    def trace(self, label: str, logger: Optional[ConsoleLogger] = None) -> "Option[A]":
        logger = logger or default_logger
        # str(self) may be costly; only render when the record is kept.
        if logger.is_enabled_for("DEBUG"):
            logger.debug(f"{label}: {self}", defined=self.is_defined)
        return self


@dataclass(frozen=True)
class Some(Option[A]):
    value: A

    @property
    def is_defined(self) -> bool: return True

    def __str__(self) -> str: return f"Some({self.value})"
    def __repr__(self) -> str: return f"Some({self.value!r})"


class _None(Option[Any]):
    __slots__ = ()
    _instance: Optional["_None"] = None

    def __new__(cls) -> "_None":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_defined(self) -> bool: return False

    def __str__(self) -> str: return "None"
    def __repr__(self) -> str: return "NONE"
    def __eq__(self, other: object) -> bool: return isinstance(other, _None)
    def __hash__(self) -> int: return hash(_None)
    def __copy__(self) -> "_None": return self
    def __deepcopy__(self, memo: dict) -> "_None": return self
    def __reduce__(self) -> str: return "NONE"


NONE: Option[Any] = _None()
none = NONE


def some(value: A) -> Option[A]:
    return Some(value)


def option(value: Optional[A] = None) -> Option[A]:
    return NONE if value is None else Some(value)
