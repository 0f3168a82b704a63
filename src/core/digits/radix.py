"""Module-level digit functions.

Thin wrappers over ``ops_for(int_type, overflow)``. ``int_type`` and
``overflow`` are keyword-only and default to the configured values (``i64``,
checked, unless ``DIGITS_CONFIG`` says otherwise).

Example::

    >>> digits(12345)
    [1, 2, 3, 4, 5]
    >>> digits_radix(255, 16)
    [15, 15]
    >>> concat(-12, 34)
    -1234
    >>> make_min(2026)
    226
"""

from __future__ import annotations

from typing import Sequence

from .ops import ops_for
from .types import IntType, OverflowPolicy

IntTypeArg = IntType | str | None
PolicyArg = OverflowPolicy | str | None


# -- Radix forms -------------------------------------------------------------

def digits_radix(n: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> list[int]:
    """Digits of ``|n|`` in *base*, most-significant first. ``0 -> [0]``."""
    return ops_for(int_type, overflow).digits_radix(n, base)


def from_digits_radix(
    digits: Sequence[int], base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None,
) -> int:
    """Rebuild an integer from digits (MSD first). Empty input -> 0."""
    return ops_for(int_type, overflow).from_digits_radix(digits, base)


def digit_sum_radix(n: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).digit_sum_radix(n, base)


def digit_product_radix(n: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).digit_product_radix(n, base)


def digits_len_radix(n: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).digits_len_radix(n, base)


def reverse_radix(n: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    """Reverse the digits of ``|n|`` and keep the sign of *n*."""
    return ops_for(int_type, overflow).reverse_radix(n, base)


def is_palindrome_radix(n: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> bool:
    return ops_for(int_type, overflow).is_palindrome_radix(n, base)


def nth_digit_radix(
    n: int, i: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None,
) -> int | None:
    """Digit *i* counted from the most significant end, or None past the end."""
    return ops_for(int_type, overflow).nth_digit_radix(n, i, base)


def contains_digit_radix(
    n: int, digit: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None,
) -> bool:
    return ops_for(int_type, overflow).contains_digit_radix(n, digit, base)


def concat_radix(a: int, b: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    """Digits of *a* followed by the digits of ``|b|``; the sign follows *a*."""
    return ops_for(int_type, overflow).concat_radix(a, b, base)


def make_max_radix(n: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).make_max_radix(n, base)


def make_min_radix(n: int, base: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).make_min_radix(n, base)


# -- Decimal forms -----------------------------------------------------------

def digits(n: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> list[int]:
    return ops_for(int_type, overflow).digits(n)


def from_digits(digits: Sequence[int], *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).from_digits(digits)


def digit_sum(n: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).digit_sum(n)


def digit_product(n: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).digit_product(n)


def digits_len(n: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).digits_len(n)


def reverse(n: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).reverse(n)


def is_palindrome(n: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> bool:
    return ops_for(int_type, overflow).is_palindrome(n)


def nth_digit(n: int, i: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int | None:
    return ops_for(int_type, overflow).nth_digit(n, i)


def contains_digit(n: int, digit: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> bool:
    return ops_for(int_type, overflow).contains_digit(n, digit)


def concat(a: int, b: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).concat(a, b)


def make_max(n: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).make_max(n)


def make_min(n: int, *, int_type: IntTypeArg = None, overflow: PolicyArg = None) -> int:
    return ops_for(int_type, overflow).make_min(n)
