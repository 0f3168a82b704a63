"""Data types for the `digits` package.

All types are frozen dataclasses / enums (immutable).

Conventions:
- an `IntType` describes a fixed-width two's complement (signed) or plain
  binary (unsigned) integer; values themselves stay plain Python ints,
- a digit sequence is a `list[int]`, most-significant digit first, every
  element in `[0, base)`,
- sign never lives in a digit sequence; it is tracked on the integer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique


@unique
class Signedness(Enum):
    UNSIGNED = "unsigned"
    SIGNED = "signed"


@unique
class OverflowPolicy(Enum):
    """What happens when a result does not fit its integer type."""
    CHECKED = "checked"     # raise DigitOverflowError
    WRAPPING = "wrapping"   # reduce modulo 2**bits (two's complement for signed)


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer type (`u8` .. `u128`, `i8` .. `i128`, `usize`, `isize`)."""

    name: str
    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if not isinstance(self.bits, int) or isinstance(self.bits, bool):
            raise TypeError(f"bits must be an int: {self.bits!r}")
        if self.bits <= 0 or self.bits % 8 != 0:
            raise ValueError(f"bits must be a positive multiple of 8: {self.bits}")

    @property
    def signedness(self) -> Signedness:
        return Signedness.SIGNED if self.signed else Signedness.UNSIGNED

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, n: int) -> bool:
        return self.min_value <= n <= self.max_value

    def wrap(self, n: int) -> int:
        """Reduce *n* into range the way native wraparound arithmetic does."""
        r = n & ((1 << self.bits) - 1)
        if self.signed and r > self.max_value:
            r -= 1 << self.bits
        return r

    def __str__(self) -> str:
        return self.name


U8 = IntType("u8", 8, False)
U16 = IntType("u16", 16, False)
U32 = IntType("u32", 32, False)
U64 = IntType("u64", 64, False)
U128 = IntType("u128", 128, False)
USIZE = IntType("usize", 64, False)

I8 = IntType("i8", 8, True)
I16 = IntType("i16", 16, True)
I32 = IntType("i32", 32, True)
I64 = IntType("i64", 64, True)
I128 = IntType("i128", 128, True)
ISIZE = IntType("isize", 64, True)

FIXED_INT_TYPES: tuple[IntType, ...] = (U8, U16, U32, U64, U128, I8, I16, I32, I64, I128)
POINTER_WIDTHS: tuple[int, ...] = (32, 64)


def native_int_types(pointer_width: int = 64) -> tuple[IntType, IntType]:
    """Return `(usize, isize)` for the given platform pointer width."""
    if type(pointer_width) is not int or pointer_width not in POINTER_WIDTHS:
        raise ValueError(f"pointer_width must be one of {POINTER_WIDTHS}: {pointer_width}")
    if pointer_width == USIZE.bits:
        return USIZE, ISIZE
    return IntType("usize", pointer_width, False), IntType("isize", pointer_width, True)


def int_types(pointer_width: int = 64) -> dict[str, IntType]:
    """Name -> IntType for every supported type."""
    table = {t.name: t for t in FIXED_INT_TYPES}
    usize, isize = native_int_types(pointer_width)
    table[usize.name] = usize
    table[isize.name] = isize
    return table


def lookup_int_type(name: str, pointer_width: int = 64) -> IntType:
    """Resolve an integer type by name. Raises KeyError on unknown names."""
    table = int_types(pointer_width)
    try:
        return table[name]
    except KeyError:
        raise KeyError(f"unknown integer type {name!r}; expected one of {sorted(table)}") from None
