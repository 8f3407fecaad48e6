"""Unit tests for permutation tables and the checksum primitive."""

import itertools

import pytest

from luhnmodn.algorithms import (
    PERMUTATION_TABLES,
    build_table,
    compute_check_digit,
    get_table,
    validate_base,
    validate_digits,
)
from luhnmodn.exceptions import CheckDigitError, InvalidBaseError, MalformedDigitError
from .util.util import get_invalid_bases, get_supported_bases


def test_build_table_base10_matches_classic_luhn():
    """Base 10 reproduces the double-and-sum-digits step of classic Luhn."""
    table = build_table(10)
    assert table == (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)
    for digit in range(10):
        doubled = digit * 2
        assert table[digit] == doubled // 10 + doubled % 10


def test_build_table_small_and_large_bases():
    assert build_table(2) == (0, 1)
    assert build_table(3) == (0, 2, 1)
    assert build_table(16) == (0, 2, 4, 6, 8, 10, 12, 14, 1, 3, 5, 7, 9, 11, 13, 15)


@pytest.mark.parametrize("base", get_supported_bases())
def test_table_is_permutation(base):
    table = build_table(base)
    assert len(table) == base
    assert sorted(table) == list(range(base))


@pytest.mark.parametrize("base", get_supported_bases())
def test_precomputed_tables_match_builder(base):
    assert get_table(base) == build_table(base)
    assert get_table(base) is PERMUTATION_TABLES[base]


def test_precomputed_tables_are_read_only():
    assert sorted(PERMUTATION_TABLES) == get_supported_bases()
    with pytest.raises(TypeError):
        PERMUTATION_TABLES[17] = (0,)  # type: ignore[index]


@pytest.mark.parametrize("base", get_invalid_bases())
def test_invalid_bases_rejected(base):
    with pytest.raises(InvalidBaseError) as exc_info:
        validate_base(base)
    assert exc_info.value.base is base

    with pytest.raises(InvalidBaseError):
        build_table(base)
    with pytest.raises(InvalidBaseError):
        compute_check_digit([1, 2, 3], base)


def test_invalid_base_is_a_value_error():
    """Callers catching ValueError also catch library errors."""
    with pytest.raises(ValueError):
        validate_base(17)
    assert issubclass(InvalidBaseError, CheckDigitError)
    assert issubclass(MalformedDigitError, CheckDigitError)


def test_compute_check_digit_literals():
    assert compute_check_digit([3, 6, 1, 5, 5]) == 0
    assert compute_check_digit([3, 6, 1, 5, 6]) == 8
    assert compute_check_digit([0]) == 0
    assert compute_check_digit([1]) == 8
    assert compute_check_digit([2]) == 6


@pytest.mark.parametrize("base", get_supported_bases())
def test_empty_sequence_has_zero_check_digit(base):
    assert compute_check_digit([], base) == 0


def test_compute_check_digit_base16_literal():
    # 4 9 9 6 0 2 d 2
    assert compute_check_digit([4, 9, 9, 6, 0, 2, 13, 2], 16) == 15


def test_compute_check_digit_accepts_tuples_and_ranges():
    assert compute_check_digit((3, 6, 1, 5, 6)) == 8
    assert compute_check_digit(range(10)) == compute_check_digit(list(range(10)))


def test_out_of_range_digit_rejected():
    with pytest.raises(MalformedDigitError) as exc_info:
        compute_check_digit([1, 2, 10], 10)
    assert exc_info.value.position == 2
    assert exc_info.value.value == 10

    with pytest.raises(MalformedDigitError):
        compute_check_digit([-1], 10)
    with pytest.raises(MalformedDigitError):
        compute_check_digit([2], 2)


def test_non_integer_digit_rejected():
    with pytest.raises(MalformedDigitError):
        validate_digits([1, "2"], 10)
    with pytest.raises(MalformedDigitError):
        validate_digits([1.0], 10)
    with pytest.raises(MalformedDigitError):
        validate_digits([True], 10)


def test_validate_digits_returns_copy():
    digits = [1, 2, 3]
    result = validate_digits(digits, 10)
    assert result == digits
    assert result is not digits


@pytest.mark.parametrize("base", get_supported_bases())
def test_leading_zeros_do_not_change_check_digit(base):
    for digits in itertools.product(range(base), repeat=2):
        digits = list(digits)
        expected = compute_check_digit(digits, base)
        assert compute_check_digit([0] + digits, base) == expected
        assert compute_check_digit([0, 0, 0] + digits, base) == expected


@pytest.mark.exhaustive
@pytest.mark.exhaustive
@pytest.mark.parametrize("base", [10, 16])
def test_single_substitution_always_detected(base):
    """Exhaustive over every sequence of up to three digits."""
    for length in range(1, 4):
        for digits in itertools.product(range(base), repeat=length):
            original = list(digits)
            expected = compute_check_digit(original, base)
            for position in range(length):
                for replacement in range(base):
                    if replacement == original[position]:
                        continue
                    altered = list(original)
                    altered[position] = replacement
                    assert compute_check_digit(altered, base) != expected


def test_adjacent_transposition_detected_except_zero_nine():
    base = 10
    for a in range(base):
        for b in range(base):
            if a == b:
                continue
            for prefix in ([], [7], [4, 2]):
                original = prefix + [a, b, 5]
                swapped = prefix + [b, a, 5]
                same = compute_check_digit(original) == compute_check_digit(swapped)
                assert same == ({a, b} == {0, 9})


@pytest.mark.parametrize("base", get_supported_bases())
def test_determinism(base):
    digits = [d % base for d in range(20)]
    results = {compute_check_digit(digits, base) for _ in range(5)}
    assert len(results) == 1
