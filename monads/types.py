"""Discriminant tags for the variant types."""

from __future__ import annotations

from enum import Enum


class OptionType(str, Enum):
    """Discriminant for Option variants."""

    SOME = "some"
    NONE = "none"


class ResultType(str, Enum):
    """Discriminant for Result variants."""

    OK = "ok"
    ERR = "err"


class EitherType(str, Enum):
    """Discriminant for Either variants."""

    LEFT = "left"
    RIGHT = "right"
