"""Input guards for the `digits` package.

Fail-closed checks applied before any arithmetic runs. The ``is_*``
predicates return True iff the input is acceptable; the ``require_*``
functions raise the matching error from ``errors.py`` otherwise.
"""

from __future__ import annotations

from typing import Any, Sequence

from .errors import IntRangeError, InvalidBaseError, InvalidDigitError
from .math import MAX_BASE, MIN_BASE
from .types import IntType


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_base(base: Any) -> bool:
    return is_int(base) and MIN_BASE <= base <= MAX_BASE


def is_valid_digit(digit: Any, base: int) -> bool:
    return is_int(digit) and 0 <= digit < base


def require_int(name: str, value: Any) -> None:
    if not is_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def require_base(base: Any) -> int:
    require_int("base", base)
    if not is_valid_base(base):
        raise InvalidBaseError(base)
    return base


def require_in_range(name: str, value: Any, int_type: IntType) -> int:
    """Check *value* is an int representable in *int_type*."""
    require_int(name, value)
    if not int_type.contains(value):
        raise IntRangeError(
            f"{name} must be in [{int_type.min_value}, {int_type.max_value}] for {int_type}: {value}"
        )
    return value


def require_index(i: Any) -> int:
    require_int("i", i)
    if i < 0:
        raise ValueError(f"digit index must be non-negative: {i}")
    return i


def require_digit_sequence(digits: Sequence[Any], base: int) -> list[int]:
    """Validate a digit sequence for reconstruction and return it as a list."""
    if isinstance(digits, str):
        raise TypeError("digits must be a sequence of ints, not a str")
    out = list(digits)
    for idx, d in enumerate(out):
        if not is_valid_digit(d, base):
            raise InvalidDigitError(idx, d, base)
    return out
