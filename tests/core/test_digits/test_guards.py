# [TESTER] v1

from __future__ import annotations

import pytest

from src.core.digits.errors import DigitError, IntRangeError, InvalidBaseError, InvalidDigitError
from src.core.digits.guards import (
    is_int,
    is_valid_base,
    require_base,
    require_digit_sequence,
    require_in_range,
    require_index,
)
from src.core.digits.types import I8, U8


def test_is_int_excludes_bool() -> None:
    assert is_int(3)
    assert not is_int(True)
    assert not is_int(3.0)


@pytest.mark.parametrize("base", [2, 10, 16, 36, 256])
def test_valid_bases(base: int) -> None:
    assert is_valid_base(base)
    assert require_base(base) == base


@pytest.mark.parametrize("base", [-10, 0, 1, 257])
def test_invalid_bases_fail_fast(base: int) -> None:
    with pytest.raises(InvalidBaseError) as ei:
        require_base(base)
    assert ei.value.base == base
    assert isinstance(ei.value, ValueError)
    assert isinstance(ei.value, DigitError)


def test_non_int_base_is_type_error() -> None:
    with pytest.raises(TypeError):
        require_base(10.0)
    with pytest.raises(TypeError):
        require_base(True)


def test_require_in_range() -> None:
    assert require_in_range("n", 255, U8) == 255
    assert require_in_range("n", -128, I8) == -128
    with pytest.raises(IntRangeError, match="u8"):
        require_in_range("n", 256, U8)
    with pytest.raises(IntRangeError):
        require_in_range("n", -1, U8)
    with pytest.raises(TypeError):
        require_in_range("n", "12", U8)


def test_require_index() -> None:
    assert require_index(0) == 0
    with pytest.raises(ValueError):
        require_index(-1)


def test_digit_sequence_accepts_lists_tuples_bytes() -> None:
    assert require_digit_sequence([1, 2, 3], 10) == [1, 2, 3]
    assert require_digit_sequence((0, 1), 2) == [0, 1]
    assert require_digit_sequence(b"\x01\xff", 256) == [1, 255]
    assert require_digit_sequence([], 10) == []


def test_digit_sequence_rejects_out_of_range_digit() -> None:
    with pytest.raises(InvalidDigitError) as ei:
        require_digit_sequence([1, 10, 3], 10)
    assert ei.value.index == 1
    assert ei.value.digit == 10


def test_digit_sequence_rejects_negative_and_non_int() -> None:
    with pytest.raises(InvalidDigitError):
        require_digit_sequence([1, -1], 10)
    with pytest.raises(InvalidDigitError):
        require_digit_sequence([1, 2.0], 10)


def test_digit_sequence_rejects_str() -> None:
    with pytest.raises(TypeError):
        require_digit_sequence("123", 10)
