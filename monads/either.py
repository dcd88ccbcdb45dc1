"""
Either type for values that can take one of two shapes.

An Either is ``Left(value)`` or ``Right(value)``. Unlike Result, neither
side means success or failure; both sides have the same set of accessors
and combinators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Never, TypeGuard

from monads.errors import ErrorCode, WrongBranchError
from monads.logging import get_logger
from monads.option import NOTHING, Option, some
from monads.types import EitherType

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Left[L]:
    """
    Either variant holding a left value.

    Attributes:
        value: The left value.
    """

    value: L
    type: ClassVar[EitherType] = EitherType.LEFT

    def is_left(self) -> bool:
        """Return True if this is a Left."""
        return True

    def is_right(self) -> bool:
        """Return False if this is a Left."""
        return False

    def left(self) -> Option[L]:
        """Return the left value as an Option."""
        return some(self.value)

    def right(self) -> Option[Never]:
        """Return NOTHING, since Left holds no right value."""
        return NOTHING

    def unwrap_left(self) -> L:
        """Return the left value."""
        return self.value

    def unwrap_right(self) -> Never:
        """
        Raise an error since this is a Left.

        Raises:
            UnwrapError: Always, with code WRONG_BRANCH.
        """
        logger.debug("unwrap_failed", variant="Left", code=ErrorCode.WRONG_BRANCH.value)
        raise WrongBranchError("right", "left", self.value)

    def unwrap_left_or(self, _default: L) -> L:
        """Return the left value (ignores default)."""
        return self.value

    def unwrap_left_or_else(self, _func: Callable[[Any], L]) -> L:
        """Return the left value without calling func."""
        return self.value

    def unwrap_right_or[R](self, default: R) -> R:
        """Return the default value."""
        return default

    def unwrap_right_or_else[R](self, func: Callable[[L], R]) -> R:
        """Compute a right value from the left value."""
        return func(self.value)

    def map_left[U](self, func: Callable[[L], U]) -> Left[U]:
        """Return a new Left with func applied to the value."""
        return Left(func(self.value))

    def map_right(self, _func: Callable[[Any], Any]) -> Left[L]:
        """Return self unchanged without calling func."""
        return self

    def map[U](self, func: Callable[[L], U]) -> Left[U]:
        """
        Apply a function to whichever value is present.

        Args:
            func: Function accepting either side's value.

        Returns:
            New Left with the mapped value.
        """
        return Left(func(self.value))

    def left_and_then[U, R](self, func: Callable[[L], Either[U, R]]) -> Either[U, R]:
        """Return the Either produced by func from the left value."""
        return func(self.value)

    def right_and_then(self, _func: Callable[[Any], Any]) -> Left[L]:
        """Return self unchanged without calling func."""
        return self

    def swap(self) -> Right[L]:
        """Return a Right holding the same value."""
        return Right(self.value)

    def match[U](self, *, left: Callable[[L], U], right: Callable[[Any], U]) -> U:
        """Call the left handler with the left value."""
        return left(self.value)


@dataclass(frozen=True, slots=True)
class Right[R]:
    """
    Either variant holding a right value.

    Attributes:
        value: The right value.
    """

    value: R
    type: ClassVar[EitherType] = EitherType.RIGHT

    def is_left(self) -> bool:
        """Return False if this is a Right."""
        return False

    def is_right(self) -> bool:
        """Return True if this is a Right."""
        return True

    def left(self) -> Option[Never]:
        """Return NOTHING, since Right holds no left value."""
        return NOTHING

    def right(self) -> Option[R]:
        """Return the right value as an Option."""
        return some(self.value)

    def unwrap_left(self) -> Never:
        """
        Raise an error since this is a Right.

        Raises:
            UnwrapError: Always, with code WRONG_BRANCH.
        """
        logger.debug("unwrap_failed", variant="Right", code=ErrorCode.WRONG_BRANCH.value)
        raise WrongBranchError("left", "right", self.value)

    def unwrap_right(self) -> R:
        """Return the right value."""
        return self.value

    def unwrap_left_or[L](self, default: L) -> L:
        """Return the default value."""
        return default

    def unwrap_left_or_else[L](self, func: Callable[[R], L]) -> L:
        """Compute a left value from the right value."""
        return func(self.value)

    def unwrap_right_or(self, _default: R) -> R:
        """Return the right value (ignores default)."""
        return self.value

    def unwrap_right_or_else(self, _func: Callable[[Any], R]) -> R:
        """Return the right value without calling func."""
        return self.value

    def map_left(self, _func: Callable[[Any], Any]) -> Right[R]:
        """Return self unchanged without calling func."""
        return self

    def map_right[U](self, func: Callable[[R], U]) -> Right[U]:
        """Return a new Right with func applied to the value."""
        return Right(func(self.value))

    def map[U](self, func: Callable[[R], U]) -> Right[U]:
        """
        Apply a function to whichever value is present.

        Args:
            func: Function accepting either side's value.

        Returns:
            New Right with the mapped value.
        """
        return Right(func(self.value))

    def left_and_then(self, _func: Callable[[Any], Any]) -> Right[R]:
        """Return self unchanged without calling func."""
        return self

    def right_and_then[L, U](self, func: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """Return the Either produced by func from the right value."""
        return func(self.value)

    def swap(self) -> Left[R]:
        """Return a Left holding the same value."""
        return Left(self.value)

    def match[U](self, *, left: Callable[[Any], U], right: Callable[[R], U]) -> U:
        """Call the right handler with the right value."""
        return right(self.value)


type Either[L, R] = Left[L] | Right[R]


def is_either(value: object) -> TypeGuard[Left[Any] | Right[Any]]:
    """Return True if value is Left or Right."""
    return isinstance(value, Left | Right)


def is_left(value: object) -> TypeGuard[Left[Any]]:
    """Return True if value is a Left."""
    return isinstance(value, Left)


def is_right(value: object) -> TypeGuard[Right[Any]]:
    """Return True if value is a Right."""
    return isinstance(value, Right)
