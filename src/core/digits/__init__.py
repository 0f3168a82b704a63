"""`digits`: digit-level arithmetic over fixed-width integers.

Decompose a number into its digits in a radix, rebuild it, aggregate
(sum / product / count), reverse, test for palindromes, index a digit,
test digit membership, concatenate two numbers, and form the largest /
smallest digit permutation. Every operation has a decimal form and a radix
form; the decimal form is exactly the radix form with base 10.

Properties:
- pure, stateless functions over plain Python ints,
- fixed-width semantics per ``IntType`` (``u8`` .. ``u128``, ``i8`` .. ``i128``,
  ``usize``, ``isize``),
- fail-closed input guards; overflow is an error (checked) or two's
  complement reduction (wrapping), never silently promoted.

Public API:
- module-level functions (``digits``, ``digits_radix``, ``concat`` ...)
- `ops_for(int_type, overflow) -> DigitOps` for a bound capability
- `get_config()` / `reload_config()` for the process-wide defaults
"""

from .config import DigitConfig, get_config, load_config, parse_config, reload_config
from .errors import (
    ConfigError,
    DigitError,
    DigitOverflowError,
    IntRangeError,
    InvalidBaseError,
    InvalidDigitError,
)
from .math import MAX_BASE, MIN_BASE
from .ops import DigitOps, SignedDigitOps, UnsignedDigitOps, ops_for
from .radix import (
    concat,
    concat_radix,
    contains_digit,
    contains_digit_radix,
    digit_product,
    digit_product_radix,
    digit_sum,
    digit_sum_radix,
    digits,
    digits_len,
    digits_len_radix,
    digits_radix,
    from_digits,
    from_digits_radix,
    is_palindrome,
    is_palindrome_radix,
    make_max,
    make_max_radix,
    make_min,
    make_min_radix,
    nth_digit,
    nth_digit_radix,
    reverse,
    reverse_radix,
)
from .types import (
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    IntType,
    OverflowPolicy,
    Signedness,
    int_types,
    lookup_int_type,
)

__all__ = [
    # operations
    "digits",
    "digits_radix",
    "from_digits",
    "from_digits_radix",
    "digit_sum",
    "digit_sum_radix",
    "digit_product",
    "digit_product_radix",
    "digits_len",
    "digits_len_radix",
    "reverse",
    "reverse_radix",
    "is_palindrome",
    "is_palindrome_radix",
    "nth_digit",
    "nth_digit_radix",
    "contains_digit",
    "contains_digit_radix",
    "concat",
    "concat_radix",
    "make_max",
    "make_max_radix",
    "make_min",
    "make_min_radix",
    # capability
    "DigitOps",
    "SignedDigitOps",
    "UnsignedDigitOps",
    "ops_for",
    # types
    "IntType",
    "OverflowPolicy",
    "Signedness",
    "int_types",
    "lookup_int_type",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    "MIN_BASE",
    "MAX_BASE",
    # config
    "DigitConfig",
    "get_config",
    "load_config",
    "parse_config",
    "reload_config",
    # errors
    "DigitError",
    "DigitOverflowError",
    "IntRangeError",
    "InvalidBaseError",
    "InvalidDigitError",
    "ConfigError",
]
