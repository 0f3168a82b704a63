"""Pure radix arithmetic for the `digits` package.

Every function is stateless and operates on plain Python ints. Functions
taking ``m`` expect a non-negative magnitude; sign handling lives in
``ops.py``. Bases are assumed to have passed ``guards.require_base``.

Python ints never overflow, so every value computed here is exact; range
policy is applied by the caller on the final result only.
"""

from __future__ import annotations

from typing import Iterable

DECIMAL: int = 10
MIN_BASE: int = 2
MAX_BASE: int = 256  # digits are 8-bit values


# -- Basic helpers -----------------------------------------------------------

def abs_val(x: int) -> int:
    """Absolute value of *x*."""
    return x if x >= 0 else -x


def apply_sign(negative: bool, m: int) -> int:
    """Reattach a sign to magnitude *m*."""
    return -m if negative else m


# -- Decomposition / reconstruction ------------------------------------------

def to_digits(m: int, base: int) -> list[int]:
    """Digits of *m* in *base*, most-significant first. ``0 -> [0]``."""
    if m == 0:
        return [0]
    acc: list[int] = []
    while m > 0:
        m, d = divmod(m, base)
        acc.append(d)
    acc.reverse()
    return acc


def from_digits(digits: Iterable[int], base: int) -> int:
    """Horner evaluation: ``acc = acc * base + d``. Empty input -> 0."""
    acc = 0
    for d in digits:
        acc = acc * base + d
    return acc


# -- Aggregates --------------------------------------------------------------

def digit_sum(m: int, base: int) -> int:
    total = 0
    while m > 0:
        m, d = divmod(m, base)
        total += d
    return total


def digit_product(m: int, base: int) -> int:
    """Product of digits; zero (single digit 0) gives 0."""
    if m == 0:
        return 0
    prod = 1
    while m > 0:
        m, d = divmod(m, base)
        if d == 0:
            return 0
        prod *= d
    return prod


def count_digits(m: int, base: int) -> int:
    """Number of digits of *m* in *base*. ``0`` has one digit."""
    if m == 0:
        return 1
    cnt = 0
    while m > 0:
        m //= base
        cnt += 1
    return cnt


def ilog10(m: int) -> int:
    """``floor(log10(m))`` for ``m > 0`` without floating point.

    Estimates from the bit length (``log10(2) ~= 1233 / 4096``) and corrects
    the estimate by at most one step.
    """
    if m <= 0:
        raise ValueError(f"ilog10 requires a positive value: {m}")
    est = ((m.bit_length() - 1) * 1233) >> 12
    if m >= 10 ** (est + 1):
        est += 1
    return est


def count_decimal_digits(m: int) -> int:
    """Fast path for ``count_digits(m, 10)``."""
    if m == 0:
        return 1
    return ilog10(m) + 1


# -- Reversal / indexing / membership ----------------------------------------

def reverse_magnitude(m: int, base: int) -> int:
    """Digit-reverse *m*. Trailing zeros of *m* vanish (``1200 -> 21``)."""
    acc = 0
    while m > 0:
        m, d = divmod(m, base)
        acc = acc * base + d
    return acc


def digit_at(m: int, i: int, length: int, base: int) -> int | None:
    """Digit at position *i* from the most significant end, or None."""
    if i >= length:
        return None
    return (m // base ** (length - 1 - i)) % base


def has_digit(m: int, digit: int, base: int) -> bool:
    if m == 0:
        return digit == 0
    while m > 0:
        m, d = divmod(m, base)
        if d == digit:
            return True
    return False


# -- Concatenation / permutation ---------------------------------------------

def shift_append(a_mag: int, b_mag: int, b_len: int, base: int) -> int:
    """Magnitude of *a_mag* written before the *b_len* digits of *b_mag*."""
    return a_mag * base ** b_len + b_mag


def sorted_digits(m: int, base: int, *, descending: bool) -> list[int]:
    return sorted(to_digits(m, base), reverse=descending)
