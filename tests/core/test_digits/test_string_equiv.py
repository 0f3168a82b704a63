"""Equivalence tests: digit operations vs an independent string-based reference.

Uses Hypothesis to fuzz values across every supported integer type and radix
(2..36) and checks the digit operations against text manipulation of the
rendered number: `str`/`format` to render, slicing and sorting to rearrange,
`int(s, base)` to parse back.
"""

from __future__ import annotations

import importlib.util
import string

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from src.core.digits import OverflowPolicy, int_types, ops_for

ALPHABET = string.digits + string.ascii_lowercase  # radixes 2..36 as text


# ---------------------------------------------------------------------------
# Reference model (string based)
# ---------------------------------------------------------------------------

def ref_text(m: int, base: int) -> str:
    if base == 10:
        return str(m)
    if base == 2:
        return format(m, "b")
    if base == 8:
        return format(m, "o")
    if base == 16:
        return format(m, "x")
    if m == 0:
        return "0"
    out = []
    while m:
        m, d = divmod(m, base)
        out.append(ALPHABET[d])
    return "".join(reversed(out))


def ref_digits(m: int, base: int) -> list[int]:
    return [ALPHABET.index(c) for c in ref_text(m, base)]


def ref_value(text: str, base: int) -> int:
    return int(text, base) if text else 0


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

TYPES = list(int_types().values())


@st.composite
def typed_values(draw):
    t = draw(st.sampled_from(TYPES))
    n = draw(st.integers(min_value=t.min_value, max_value=t.max_value))
    return t, n


bases = st.integers(min_value=2, max_value=36)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

@settings(max_examples=300, deadline=None)
@given(tv=typed_values(), base=bases)
def test_digits_match_reference(tv, base) -> None:
    t, n = tv
    ops = ops_for(t, OverflowPolicy.CHECKED)
    assert ops.digits_radix(n, base) == ref_digits(abs(n), base)
    assert ops.digits_len_radix(n, base) == len(ref_text(abs(n), base))
    assert ops.digit_sum_radix(n, base) == sum(ref_digits(abs(n), base))


@settings(max_examples=300, deadline=None)
@given(tv=typed_values(), base=bases)
def test_round_trip_magnitude(tv, base) -> None:
    t, n = tv
    ops = ops_for(t, OverflowPolicy.WRAPPING)
    assert ops.from_digits_radix(ops.digits_radix(n, base), base) == t.wrap(abs(n))


@settings(max_examples=300, deadline=None)
@given(tv=typed_values(), base=bases)
def test_reverse_matches_reference(tv, base) -> None:
    t, n = tv
    ops = ops_for(t, OverflowPolicy.WRAPPING)
    mag = ref_value(ref_text(abs(n), base)[::-1], base)
    expected = -mag if n < 0 else mag
    assert ops.reverse_radix(n, base) == t.wrap(expected)
    assert ops.is_palindrome_radix(n, base) == (t.wrap(expected) == n)


@settings(max_examples=300, deadline=None)
@given(tv=typed_values(), base=bases)
def test_permutations_match_reference(tv, base) -> None:
    t, n = tv
    ops = ops_for(t, OverflowPolicy.WRAPPING)
    text = ref_text(abs(n), base)
    hi = ref_value("".join(sorted(text, key=ALPHABET.index, reverse=True)), base)
    lo = ref_value("".join(sorted(text, key=ALPHABET.index)), base)
    assert ops.make_max_radix(n, base) == t.wrap(hi)
    assert ops.make_min_radix(n, base) == t.wrap(lo)
    assert hi >= 0 and lo >= 0


@settings(max_examples=300, deadline=None)
@given(data=st.data(), base=bases)
def test_concat_matches_reference(data, base) -> None:
    t = data.draw(st.sampled_from(TYPES))
    a = data.draw(st.integers(min_value=t.min_value, max_value=t.max_value))
    b = data.draw(st.integers(min_value=t.min_value, max_value=t.max_value))
    ops = ops_for(t, OverflowPolicy.WRAPPING)
    mag = ref_value(ref_text(abs(a), base) + ref_text(abs(b), base), base)
    expected = -mag if a < 0 else mag
    assert ops.concat_radix(a, b, base) == t.wrap(expected)


@settings(max_examples=300, deadline=None)
@given(tv=typed_values(), base=bases, i=st.integers(min_value=0, max_value=140))
def test_nth_and_contains_match_reference(tv, base, i) -> None:
    t, n = tv
    ops = ops_for(t, OverflowPolicy.CHECKED)
    text = ref_text(abs(n), base)
    expected = ALPHABET.index(text[i]) if i < len(text) else None
    assert ops.nth_digit_radix(n, i, base) == expected
    d = i % base
    assert ops.contains_digit_radix(n, d, base) == (ALPHABET[d] in text)


@settings(max_examples=300, deadline=None)
@given(tv=typed_values())
def test_decimal_length_fast_path(tv) -> None:
    t, n = tv
    ops = ops_for(t, OverflowPolicy.CHECKED)
    assert ops.digits_len(n) == len(str(abs(n))) == ops.digits_len_radix(n, 10)
