"""
Error types for misuse of the variant types.

All errors raised by this package signal programmer error: unwrapping the
wrong variant, or constructing a variant from a value it cannot hold.
Failures raised by caller-supplied functions are never wrapped and
propagate unchanged.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for monad errors."""

    EMPTY_UNWRAP = "empty_unwrap"
    UNWRAP_ERR = "unwrap_err"
    UNWRAP_OK = "unwrap_ok"
    WRONG_BRANCH = "wrong_branch"
    CONSTRUCTION = "construction"


class MonadError(Exception):
    """
    Base error type for this package.

    Attributes:
        code: Error code identifying the type of error.
        message: Human-readable error message.
        context: The payload involved, if any (e.g. the error held by an Err).
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: object | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"


class UnwrapError(MonadError, ValueError):
    """Raised when a value is extracted from a variant that does not hold it."""


class ConstructionError(MonadError, TypeError):
    """Raised when a variant constructor receives a value it cannot hold."""


def EmptyUnwrapError(message: str = "Called unwrap on Nothing") -> UnwrapError:
    """Create an error for unwrapping an empty Option."""
    return UnwrapError(ErrorCode.EMPTY_UNWRAP, message)


def UnwrapErrError(error: object, message: str | None = None) -> UnwrapError:
    """Create an error for unwrapping the success value of an Err."""
    return UnwrapError(
        ErrorCode.UNWRAP_ERR,
        message or f"Called unwrap on Err: {error!r}",
        context=error,
    )


def UnwrapOkError(value: object, message: str | None = None) -> UnwrapError:
    """Create an error for unwrapping the error value of an Ok."""
    return UnwrapError(
        ErrorCode.UNWRAP_OK,
        message or f"Called unwrap_err on Ok: {value!r}",
        context=value,
    )


def WrongBranchError(expected: str, actual: str, value: object) -> UnwrapError:
    """Create an error for unwrapping the wrong side of an Either."""
    return UnwrapError(
        ErrorCode.WRONG_BRANCH,
        f"Called unwrap_{expected} on {actual.capitalize()}: {value!r}",
        context=value,
    )
