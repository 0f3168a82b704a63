"""Exception types for the `digits` package.

Raised by the guards in ``guards.py`` and by ``DigitOps`` when a result does
not fit its integer type under ``OverflowPolicy.CHECKED``.
"""

from __future__ import annotations

from .math import MAX_BASE, MIN_BASE


class DigitError(Exception):
    """Base class for every error raised by digit operations."""


class InvalidBaseError(DigitError, ValueError):
    """Raised when a radix is outside ``[MIN_BASE, MAX_BASE]``."""

    def __init__(self, base: int) -> None:
        self.base = base
        super().__init__(f"base must be in [{MIN_BASE}, {MAX_BASE}]: {base}")


class InvalidDigitError(DigitError, ValueError):
    """Raised when a digit to reconstruct from is outside ``[0, base)``."""

    def __init__(self, index: int, digit: object, base: int) -> None:
        self.index = index
        self.digit = digit
        self.base = base
        super().__init__(f"digit[{index}] must be in [0, {base}): {digit!r}")


class IntRangeError(DigitError, ValueError):
    """Raised when an input value is outside its integer type's range."""


class DigitOverflowError(DigitError, OverflowError):
    """Raised when a result is not representable in the target integer type."""

    def __init__(self, op: str, value: int, type_name: str) -> None:
        self.op = op
        self.value = value
        self.type_name = type_name
        super().__init__(f"{op}: result {value} overflows {type_name}")


class ConfigError(DigitError):
    """Raised when a digits configuration file or mapping is malformed."""
