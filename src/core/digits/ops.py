"""The digit-operations capability.

``DigitOps`` is one interface with two implementations, chosen by the
integer type's signedness through a dispatch table:

- ``UnsignedDigitOps``: values are their own magnitude.
- ``SignedDigitOps``: digits come from ``|n|``; reversal and concatenation
  put the sign back.

Every operation validates its inputs (``guards.py``), runs exact arithmetic
on magnitudes (``math.py``) and applies the overflow policy to the final
result only. Decimal forms are the radix forms with base 10.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import ClassVar, Sequence

from . import math as dm
from .config import get_config
from .errors import DigitOverflowError
from .guards import (
    require_base,
    require_digit_sequence,
    require_in_range,
    require_index,
    require_int,
)
from .types import IntType, OverflowPolicy, Signedness, lookup_int_type

logger = logging.getLogger(__name__)


class DigitOps(ABC):
    """Digit operations bound to one integer type and overflow policy.

    Abstract: subclasses set ``signedness`` and implement the two signedness
    hooks. Obtain instances through ``ops_for``.
    """

    signedness: ClassVar[Signedness]

    def __init__(self, int_type: IntType, overflow: OverflowPolicy = OverflowPolicy.CHECKED) -> None:
        if int_type.signedness is not self.signedness:
            raise ValueError(f"{type(self).__name__} cannot serve {int_type.signedness.value} type {int_type}")
        self.int_type = int_type
        self.overflow = overflow

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.int_type}, {self.overflow.value})"

    # -- Signedness hooks ----------------------------------------------------

    @abstractmethod
    def _magnitude(self, n: int) -> int:
        """Magnitude of *n* (exact, also for a signed MIN)."""

    @abstractmethod
    def _reattach(self, n: int, m: int) -> int:
        """Give magnitude *m* the sign of *n*."""

    # -- Policy helpers ------------------------------------------------------

    def _value(self, n: int, name: str = "n") -> int:
        return require_in_range(name, n, self.int_type)

    def _result(self, op: str, value: int) -> int:
        if self.int_type.contains(value):
            return value
        if self.overflow is OverflowPolicy.WRAPPING:
            wrapped = self.int_type.wrap(value)
            logger.debug("%s: wrapped %d to %d in %s", op, value, wrapped, self.int_type)
            return wrapped
        raise DigitOverflowError(op, value, self.int_type.name)

    # -- Decomposition / reconstruction --------------------------------------

    def digits_radix(self, n: int, base: int) -> list[int]:
        base = require_base(base)
        return dm.to_digits(self._magnitude(self._value(n)), base)

    def from_digits_radix(self, digits: Sequence[int], base: int) -> int:
        base = require_base(base)
        seq = require_digit_sequence(digits, base)
        return self._result("from_digits", dm.from_digits(seq, base))

    # -- Aggregates ----------------------------------------------------------

    def digit_sum_radix(self, n: int, base: int) -> int:
        base = require_base(base)
        return dm.digit_sum(self._magnitude(self._value(n)), base)

    def digit_product_radix(self, n: int, base: int) -> int:
        base = require_base(base)
        return dm.digit_product(self._magnitude(self._value(n)), base)

    def digits_len_radix(self, n: int, base: int) -> int:
        base = require_base(base)
        return dm.count_digits(self._magnitude(self._value(n)), base)

    # -- Reversal / palindrome -----------------------------------------------

    def reverse_radix(self, n: int, base: int) -> int:
        base = require_base(base)
        n = self._value(n)
        r = self._reattach(n, dm.reverse_magnitude(self._magnitude(n), base))
        return self._result("reverse", r)

    def is_palindrome_radix(self, n: int, base: int) -> bool:
        base = require_base(base)
        n = self._value(n)
        r = self._reattach(n, dm.reverse_magnitude(self._magnitude(n), base))
        if self.overflow is OverflowPolicy.WRAPPING:
            r = self.int_type.wrap(r)
        # An unrepresentable reversal cannot equal n, so checked mode never raises here.
        return r == n

    # -- Indexing / membership -----------------------------------------------

    def nth_digit_radix(self, n: int, i: int, base: int) -> int | None:
        base = require_base(base)
        i = require_index(i)
        m = self._magnitude(self._value(n))
        return dm.digit_at(m, i, dm.count_digits(m, base), base)

    def contains_digit_radix(self, n: int, digit: int, base: int) -> bool:
        base = require_base(base)
        require_int("digit", digit)
        m = self._magnitude(self._value(n))
        if not 0 <= digit < base:
            return False
        return dm.has_digit(m, digit, base)

    # -- Concatenation -------------------------------------------------------

    def concat_radix(self, a: int, b: int, base: int) -> int:
        base = require_base(base)
        a = self._value(a, "a")
        b_mag = self._magnitude(self._value(b, "b"))
        m = dm.shift_append(self._magnitude(a), b_mag, dm.count_digits(b_mag, base), base)
        return self._result("concat", self._reattach(a, m))

    # -- Max / min permutation -----------------------------------------------

    def make_max_radix(self, n: int, base: int) -> int:
        base = require_base(base)
        d = dm.sorted_digits(self._magnitude(self._value(n)), base, descending=True)
        return self._result("make_max", dm.from_digits(d, base))

    def make_min_radix(self, n: int, base: int) -> int:
        base = require_base(base)
        d = dm.sorted_digits(self._magnitude(self._value(n)), base, descending=False)
        return self._result("make_min", dm.from_digits(d, base))

    # -- Decimal shortcuts ---------------------------------------------------

    def digits(self, n: int) -> list[int]:
        return self.digits_radix(n, dm.DECIMAL)

    def from_digits(self, digits: Sequence[int]) -> int:
        return self.from_digits_radix(digits, dm.DECIMAL)

    def digit_sum(self, n: int) -> int:
        return self.digit_sum_radix(n, dm.DECIMAL)

    def digit_product(self, n: int) -> int:
        return self.digit_product_radix(n, dm.DECIMAL)

    def digits_len(self, n: int) -> int:
        """Decimal digit count via the integer-logarithm fast path."""
        return dm.count_decimal_digits(self._magnitude(self._value(n)))

    def reverse(self, n: int) -> int:
        return self.reverse_radix(n, dm.DECIMAL)

    def is_palindrome(self, n: int) -> bool:
        return self.is_palindrome_radix(n, dm.DECIMAL)

    def nth_digit(self, n: int, i: int) -> int | None:
        i = require_index(i)
        m = self._magnitude(self._value(n))
        return dm.digit_at(m, i, dm.count_decimal_digits(m), dm.DECIMAL)

    def contains_digit(self, n: int, digit: int) -> bool:
        return self.contains_digit_radix(n, digit, dm.DECIMAL)

    def concat(self, a: int, b: int) -> int:
        return self.concat_radix(a, b, dm.DECIMAL)

    def make_max(self, n: int) -> int:
        return self.make_max_radix(n, dm.DECIMAL)

    def make_min(self, n: int) -> int:
        return self.make_min_radix(n, dm.DECIMAL)


class UnsignedDigitOps(DigitOps):
    signedness = Signedness.UNSIGNED

    def _magnitude(self, n: int) -> int:
        return n

    def _reattach(self, n: int, m: int) -> int:
        return m


class SignedDigitOps(DigitOps):
    signedness = Signedness.SIGNED

    def _magnitude(self, n: int) -> int:
        # Exact, so MIN decomposes even though |MIN| is not itself representable.
        return dm.abs_val(n)

    def _reattach(self, n: int, m: int) -> int:
        return dm.apply_sign(n < 0, m)


_OPS_BY_SIGNEDNESS: dict[Signedness, type[DigitOps]] = {
    Signedness.UNSIGNED: UnsignedDigitOps,
    Signedness.SIGNED: SignedDigitOps,
}


@lru_cache(maxsize=None)
def _bound_ops(int_type: IntType, overflow: OverflowPolicy) -> DigitOps:
    return _OPS_BY_SIGNEDNESS[int_type.signedness](int_type, overflow)


def ops_for(int_type: IntType | str | None = None, overflow: OverflowPolicy | str | None = None) -> DigitOps:
    """Return the ``DigitOps`` for *int_type* under *overflow*.

    Either argument may be given by name (``"u64"``, ``"wrapping"``); omitted
    arguments come from ``config.get_config()``.
    """
    if int_type is None or overflow is None or isinstance(int_type, str):
        cfg = get_config()
        if int_type is None:
            int_type = cfg.default_int_type
        elif isinstance(int_type, str):
            int_type = lookup_int_type(int_type, cfg.pointer_width)
        if overflow is None:
            overflow = cfg.overflow
    if isinstance(overflow, str):
        overflow = OverflowPolicy(overflow)
    if not isinstance(int_type, IntType):
        raise TypeError(f"int_type must be an IntType or a type name, got {type(int_type).__name__}")
    return _bound_ops(int_type, overflow)

