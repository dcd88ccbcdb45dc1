"""
Result type for explicit error handling.

A Result is either ``Ok(value)`` or ``Err(error)``. It makes failure part
of the return type instead of raising exceptions.

Example:
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Err("Division by zero")
    ...     return Ok(a / b)
    ...
    >>> divide(10, 2).map(round).unwrap()
    5
    >>> divide(1, 0).match(ok=str, err=lambda e: f"Error: {e}")
    'Error: Division by zero'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Never, TypeGuard

from monads.errors import ErrorCode, UnwrapErrError, UnwrapOkError
from monads.logging import get_logger
from monads.option import NOTHING, Option, some
from monads.types import ResultType

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """
    Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T
    type: ClassVar[ResultType] = ResultType.OK

    def is_ok(self) -> bool:
        """Return True if this is an Ok."""
        return True

    def is_err(self) -> bool:
        """Return False if this is an Ok."""
        return False

    def ok(self) -> Option[T]:
        """Return the success value as an Option."""
        return some(self.value)

    def err(self) -> Option[Never]:
        """Return NOTHING, since Ok holds no error."""
        return NOTHING

    def unwrap(self) -> T:
        """Return the success value."""
        return self.value

    def expect(self, _message: str) -> T:
        """Return the success value (ignores message)."""
        return self.value

    def unwrap_err(self) -> Never:
        """
        Raise an error since this is an Ok.

        Raises:
            UnwrapError: Always, with code UNWRAP_OK.
        """
        logger.debug("unwrap_failed", variant="Ok", code=ErrorCode.UNWRAP_OK.value)
        raise UnwrapOkError(self.value)

    def expect_err(self, message: str) -> Never:
        """
        Raise an error with the given message since this is an Ok.

        Raises:
            UnwrapError: Always, with code UNWRAP_OK.
        """
        logger.debug("unwrap_failed", variant="Ok", code=ErrorCode.UNWRAP_OK.value)
        raise UnwrapOkError(self.value, message)

    def unwrap_or(self, _default: T) -> T:
        """Return the success value (ignores default)."""
        return self.value

    def unwrap_or_else(self, _func: Callable[[Any], T]) -> T:
        """Return the success value without calling func."""
        return self.value

    def map[U](self, func: Callable[[T], U]) -> Ok[U]:
        """
        Apply a function to the success value.

        Args:
            func: Function to apply to the value.

        Returns:
            New Ok with the mapped value.
        """
        return Ok(func(self.value))

    def map_err(self, _func: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged, since there is no error to map."""
        return self

    def and_then[U, E](self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Apply a function that itself returns a Result.

        Args:
            func: Function to apply to the success value.

        Returns:
            The Result returned by func.
        """
        return func(self.value)

    def or_else(self, _func: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged without calling func."""
        return self

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        """Call the ok handler with the success value."""
        return ok(self.value)


@dataclass(frozen=True, slots=True)
class Err[E]:
    """
    Represents a failed result containing an error.

    Attributes:
        error: The error value.
    """

    error: E
    type: ClassVar[ResultType] = ResultType.ERR

    def is_ok(self) -> bool:
        """Return False if this is an Err."""
        return False

    def is_err(self) -> bool:
        """Return True if this is an Err."""
        return True

    def ok(self) -> Option[Never]:
        """Return NOTHING, since Err holds no success value."""
        return NOTHING

    def err(self) -> Option[E]:
        """Return the error as an Option."""
        return some(self.error)

    def unwrap(self) -> Never:
        """
        Raise an error since this is an Err.

        When the held error is an exception it is chained as the cause.

        Raises:
            UnwrapError: Always, with code UNWRAP_ERR and the error as context.
        """
        self._fail(UnwrapErrError(self.error))

    def expect(self, message: str) -> Never:
        """
        Raise an error with the given message since this is an Err.

        Raises:
            UnwrapError: Always, with code UNWRAP_ERR and the error as context.
        """
        self._fail(UnwrapErrError(self.error, message))

    def _fail(self, error: Exception) -> Never:
        logger.debug("unwrap_failed", variant="Err", code=ErrorCode.UNWRAP_ERR.value)
        if isinstance(self.error, BaseException):
            raise error from self.error
        raise error

    def unwrap_err(self) -> E:
        """Return the error value."""
        return self.error

    def expect_err(self, _message: str) -> E:
        """Return the error value (ignores message)."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_or_else[T](self, func: Callable[[E], T]) -> T:
        """
        Compute a value from the error.

        Args:
            func: Function mapping the error to a fallback value.

        Returns:
            The value returned by func.
        """
        return func(self.error)

    def map(self, _func: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged, since there is no value to map."""
        return self

    def map_err[F](self, func: Callable[[E], F]) -> Err[F]:
        """
        Apply a function to the error value.

        Args:
            func: Function to apply to the error.

        Returns:
            New Err with the mapped error.
        """
        return Err(func(self.error))

    def and_then(self, _func: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged without calling func."""
        return self

    def or_else[T, F](self, func: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """
        Recover from the error with a function returning a Result.

        Args:
            func: Function to apply to the error.

        Returns:
            The Result returned by func.
        """
        return func(self.error)

    def match[U](self, *, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        """Call the err handler with the error value."""
        return err(self.error)


type Result[T, E] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Create an Ok result."""
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Create an Err result."""
    return Err(error)


def is_result(value: object) -> TypeGuard[Ok[Any] | Err[Any]]:
    """Return True if value is Ok or Err."""
    return isinstance(value, Ok | Err)


def is_ok(value: object) -> TypeGuard[Ok[Any]]:
    """Return True if value is an Ok."""
    return isinstance(value, Ok)


def is_err(value: object) -> TypeGuard[Err[Any]]:
    """Return True if value is an Err."""
    return isinstance(value, Err)


def try_call[T](
    func: Callable[..., T],
    *args: Any,
    exceptions: tuple[type[Exception], ...] = (Exception,),
    **kwargs: Any,
) -> Result[T, Exception]:
    """
    Call a function and capture selected exceptions as an Err.

    Args:
        func: Function to call.
        *args: Positional arguments for func.
        exceptions: Exception types to capture. Others propagate.
        **kwargs: Keyword arguments for func.

    Returns:
        Ok with the return value, or Err with the captured exception.
    """
    try:
        return Ok(func(*args, **kwargs))
    except exceptions as e:
        logger.debug(
            "exception_captured",
            func=getattr(func, "__qualname__", repr(func)),
            exception_type=type(e).__name__,
        )
        return Err(e)
