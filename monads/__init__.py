"""Option, Result and Either types for explicit absence and failure handling."""

import logging

from monads.either import Either, Left, Right, is_either, is_left, is_right
from monads.errors import ConstructionError, ErrorCode, MonadError, UnwrapError
from monads.option import (
    NOTHING,
    Nothing,
    Option,
    Some,
    get_in,
    is_none,
    is_option,
    is_some,
    nothing,
    some,
)
from monads.result import Err, Ok, Result, err, is_err, is_ok, is_result, ok, try_call
from monads.types import EitherType, OptionType, ResultType

logging.getLogger("monads").addHandler(logging.NullHandler())

__all__ = [
    "NOTHING",
    "ConstructionError",
    "Either",
    "EitherType",
    "Err",
    "ErrorCode",
    "Left",
    "MonadError",
    "Nothing",
    "Ok",
    "Option",
    "OptionType",
    "Result",
    "ResultType",
    "Right",
    "Some",
    "UnwrapError",
    "err",
    "get_in",
    "is_either",
    "is_err",
    "is_left",
    "is_none",
    "is_ok",
    "is_option",
    "is_result",
    "is_right",
    "is_some",
    "nothing",
    "ok",
    "some",
    "try_call",
]
