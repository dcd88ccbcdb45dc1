"""
Option type for values that may be absent.

An Option is either ``Some(value)`` or ``Nothing``. It replaces ``None``
checks with explicit combinators.

Python's ``None`` is treated as absence: ``Some(None)`` is rejected with
a ConstructionError, while the ``some()`` factory maps ``None`` to
``NOTHING``. A ``Some`` therefore never holds ``None``.

Example:
    >>> def find_user(user_id: int) -> Option[str]:
    ...     return some(USERS.get(user_id))
    ...
    >>> find_user(1).map(str.upper).unwrap_or("anonymous")
    'ALICE'
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Never, TypeGuard

from monads.config import get_settings
from monads.errors import ConstructionError, EmptyUnwrapError, ErrorCode
from monads.logging import get_logger
from monads.types import OptionType

if TYPE_CHECKING:
    from collections.abc import Callable

    from monads.result import Result

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Some[T]:
    """
    Option variant holding a value.

    Attributes:
        value: The contained value. Never None.
    """

    value: T
    type: ClassVar[OptionType] = OptionType.SOME

    def __post_init__(self) -> None:
        """Reject None, which is represented by Nothing."""
        if self.value is None:
            logger.debug("construction_rejected", variant="Some")
            raise ConstructionError(
                ErrorCode.CONSTRUCTION,
                "Some cannot hold None, use some() or NOTHING",
            )

    def is_some(self) -> bool:
        """Return True if this is a Some."""
        return True

    def is_none(self) -> bool:
        """Return False if this is a Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _message: str) -> T:
        """Return the contained value (ignores message)."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value (ignores default)."""
        return self.value

    def unwrap_or_else(self, _func: Callable[[], T]) -> T:
        """Return the contained value without calling the producer."""
        return self.value

    def map[U](self, func: Callable[[T], U | None]) -> Option[U]:
        """
        Apply a function to the contained value.

        Args:
            func: Function to apply to the value.

        Returns:
            Some with the mapped value, or NOTHING if func returned None.
        """
        return some(func(self.value))

    def and_then[U](self, func: Callable[[T], Option[U]]) -> Option[U]:
        """
        Apply a function that itself returns an Option.

        Args:
            func: Function to apply to the value.

        Returns:
            The Option returned by func, not wrapped again.
        """
        return func(self.value)

    def or_(self, _alt: Option[T]) -> Some[T]:
        """Return self, since the first present value wins."""
        return self

    def and_[U](self, alt: Option[U]) -> Option[U]:
        """Return alt, discarding the contained value."""
        return alt

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if predicate holds for the value, else NOTHING."""
        if predicate(self.value):
            return self
        return NOTHING

    def ok_or[E](self, _error: E) -> Result[T, E]:
        """Convert to Ok holding the contained value."""
        from monads.result import Ok

        return Ok(self.value)

    def match[U](self, *, some: Callable[[T], U], none: U | Callable[[], U]) -> U:
        """
        Dispatch on the variant.

        Args:
            some: Handler called with the contained value.
            none: Fallback for Nothing (not used).

        Returns:
            The result of the some handler.
        """
        return some(self.value)


@dataclass(frozen=True, slots=True)
class Nothing:
    """Option variant holding no value."""

    type: ClassVar[OptionType] = OptionType.NONE

    def is_some(self) -> bool:
        """Return False if this is Nothing."""
        return False

    def is_none(self) -> bool:
        """Return True if this is Nothing."""
        return True

    def unwrap(self) -> Never:
        """
        Raise an error since Nothing has no value.

        Raises:
            UnwrapError: Always, with code EMPTY_UNWRAP.
        """
        logger.debug("unwrap_failed", variant="Nothing", code=ErrorCode.EMPTY_UNWRAP.value)
        raise EmptyUnwrapError()

    def expect(self, message: str) -> Never:
        """
        Raise an error with the given message.

        Raises:
            UnwrapError: Always, with code EMPTY_UNWRAP.
        """
        logger.debug("unwrap_failed", variant="Nothing", code=ErrorCode.EMPTY_UNWRAP.value)
        raise EmptyUnwrapError(message)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_or_else[T](self, func: Callable[[], T]) -> T:
        """Return the value produced by func."""
        return func()

    def map(self, _func: Callable[[Any], Any]) -> Nothing:
        """Return self without calling func."""
        return self

    def and_then(self, _func: Callable[[Any], Any]) -> Nothing:
        """Return self without calling func."""
        return self

    def or_[T](self, alt: Option[T]) -> Option[T]:
        """Return the alternative."""
        return alt

    def and_(self, _alt: Option[Any]) -> Nothing:
        """Return self, since there is nothing to sequence after."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> Nothing:
        """Return self without calling predicate."""
        return self

    def ok_or[E](self, error: E) -> Result[Any, E]:
        """Convert to Err holding the given error."""
        from monads.result import Err

        return Err(error)

    def match[U](self, *, some: Callable[[Any], U], none: U | Callable[[], U]) -> U:
        """
        Dispatch on the variant.

        A callable fallback is treated as a producer and called with no
        arguments; any other fallback is returned as-is. Wrap callables
        that should be returned unchanged in a lambda.

        Args:
            some: Handler for Some (not used).
            none: Fallback value or zero-argument producer.

        Returns:
            The fallback value.
        """
        if callable(none):
            return none()
        return none


NOTHING = Nothing()

type Option[T] = Some[T] | Nothing


def some[T](value: T | None) -> Option[T]:
    """
    Create an Option from a value that may be None.

    Args:
        value: The value to wrap.

    Returns:
        NOTHING if value is None, otherwise Some(value).
    """
    if value is None:
        return NOTHING
    return Some(value)


def nothing() -> Nothing:
    """Return the empty Option."""
    return NOTHING


def is_option(value: object) -> TypeGuard[Some[Any] | Nothing]:
    """Return True if value is Some or Nothing."""
    return isinstance(value, Some | Nothing)


def is_some(value: object) -> TypeGuard[Some[Any]]:
    """Return True if value is a Some."""
    return isinstance(value, Some)


def is_none(value: object) -> TypeGuard[Nothing]:
    """Return True if value is Nothing."""
    return isinstance(value, Nothing)


def get_in(obj: object, path: str, separator: str | None = None) -> Option[Any]:
    """
    Look up a nested value by a dotted path.

    Each segment is resolved as a mapping key, a sequence index or an
    attribute, in that order. A missing key, index or attribute, or a None
    at any step, yields NOTHING.

    Args:
        obj: The structure to walk.
        path: Segments joined by the separator, e.g. ``"a.b.0.c"``.
        separator: Segment separator. Defaults to the configured
            ``path_separator``.

    Returns:
        Some with the value at the end of the path, or NOTHING.

    Raises:
        ValueError: If separator is an empty string.
    """
    if separator is None:
        separator = get_settings().path_separator
    elif not separator:
        raise ValueError("get_in separator must not be empty")
    result: Option[Any] = some(obj)
    if not path:
        return result
    for segment in path.split(separator):
        result = result.and_then(lambda current, key=segment: _lookup(current, key))
    return result


def _lookup(current: object, key: str) -> Option[Any]:
    """Resolve a single path segment."""
    if isinstance(current, Mapping):
        return some(current.get(key))
    if isinstance(current, Sequence) and not isinstance(current, str | bytes):
        try:
            return some(current[int(key)])
        except (ValueError, IndexError):
            return NOTHING
    return some(getattr(current, key, None))
