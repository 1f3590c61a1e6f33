import pytest

from dsreview.fnv import FNV_OFFSET_BASIS, fnv1, fnv1a


def test_fnv1_known_value():
    assert fnv1(b"testing123") == 8404323582830432641


def test_fnv1a_known_value():
    assert fnv1a(b"testing123") == 4517894324711253781


@pytest.mark.parametrize("func", [fnv1, fnv1a])
def test_empty_input_is_offset_basis(func):
    assert func(b"") == FNV_OFFSET_BASIS


@pytest.mark.parametrize("func", [fnv1, fnv1a])
def test_result_fits_in_64_bits(func):
    result = func(b"a much longer input string to exercise wraparound" * 10)
    assert 0 <= result < 2**64


def test_variants_differ_on_nonempty_input():
    assert fnv1(b"abc") != fnv1a(b"abc")
    assert fnv1(b"abc") == fnv1(b"abc")