"""
Core Luhn mod N Algorithms

This module contains the base-parameterized permutation tables and the single
checksum primitive that every input shape funnels into.

Algorithm Overview:
1. Build a permutation table for the base: all even digit values ascending,
   followed by all odd digit values ascending. For base 10 this is
   (0,2,4,6,8,1,3,5,7,9), the classic "double and sum the digits" step.
2. Walk the digits most-significant first. A digit whose position has the
   same parity as the sequence length is used as-is, every other digit is
   replaced by its table entry.
3. The check digit is (total * (base - 1)) % base.

Because the weighted positions are anchored to the sequence length, they
alternate from the tail. Appending the check digit therefore shifts every
digit into the opposite role, and the extended sequence validates.

Tables for all supported bases are built once at import time and never
mutated, so concurrent callers share them without locking.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from luhnmodn.config import MIN_BASE, MAX_BASE, DEFAULT_BASE
from luhnmodn.exceptions import InvalidBaseError, MalformedDigitError
from luhnmodn.log import get_logger, log

logger = get_logger("algorithms")


def validate_base(base: Any) -> int:
    """
    Check that base is an integer in [MIN_BASE, MAX_BASE].

    Args:
        base: Candidate base

    Returns:
        The base, unchanged

    Raises:
        InvalidBaseError: If base is not an int (bool excluded) or is out of range
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(base)
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBaseError(base)
    return base


def build_table(base: int) -> Tuple[int, ...]:
    """
    Build the permutation table for a base.

    Examples:
        base=2:  (0, 1)
        base=10: (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)
        base=16: (0, 2, 4, 6, 8, 10, 12, 14, 1, 3, 5, 7, 9, 11, 13, 15)

    Args:
        base: Base in [2, 16]

    Returns:
        Tuple of length base that is a permutation of range(base)
    """
    validate_base(base)

    table = []
    for i in range(0, base, 2):
        table.append(i)
    for i in range(1, base, 2):
        table.append(i)

    return tuple(table)


_TABLES: Dict[int, Tuple[int, ...]] = {
    base: build_table(base) for base in range(MIN_BASE, MAX_BASE + 1)
}

# Read-only view over the precomputed tables
PERMUTATION_TABLES: Mapping[int, Tuple[int, ...]] = MappingProxyType(_TABLES)


def get_table(base: int) -> Tuple[int, ...]:
    """Return the precomputed permutation table for base."""
    return PERMUTATION_TABLES[validate_base(base)]


def validate_digits(digits: Sequence[int], base: int) -> List[int]:
    """
    Check every element of a digit sequence against the base.

    Args:
        digits: Digit values, most significant first
        base: Base in [2, 16]

    Returns:
        The digits as a new list

    Raises:
        MalformedDigitError: If an element is not an int in [0, base)
    """
    result = []
    for position, digit in enumerate(digits):
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise MalformedDigitError(digit, base, position)
        if digit < 0 or digit >= base:
            raise MalformedDigitError(digit, base, position)
        result.append(digit)
    return result


def compute_check_digit(digits: Sequence[int], base: int = DEFAULT_BASE) -> int:
    """
    Compute the Luhn mod N check digit for a sequence of digit values.

    The digits are validated against the base before the table lookup, so
    an out-of-range value raises instead of indexing past the table.

    Args:
        digits: Digit values in [0, base), most significant first. May be empty.
        base: Base in [2, 16]

    Returns:
        Check digit in [0, base). An empty sequence yields 0.

    Examples:
        >>> compute_check_digit([3, 6, 1, 5, 5])
        0
        >>> compute_check_digit([3, 6, 1, 5, 6])
        8
    """
    table = get_table(base)
    values = validate_digits(digits, base)

    length_mod = len(values) % 2
    total = 0
    for i, digit in enumerate(values):
        if i % 2 == length_mod:
            total += digit
        else:
            total += table[digit]

    check = (total * (base - 1)) % base
    log(logger, "debug", "computed check digit", base=base, length=len(values), check=check)
    return check
