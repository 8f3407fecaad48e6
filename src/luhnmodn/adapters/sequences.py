"""
Digit-sequence adapter.

Sequences are taken and returned most significant digit first. Inputs are
never modified; appended and fixed results are new lists.
"""

from typing import List, Sequence

from luhnmodn.algorithms import compute_check_digit, validate_base, validate_digits
from luhnmodn.config import DEFAULT_BASE
from luhnmodn.exceptions import MalformedDigitError
from luhnmodn.log import get_logger, log

logger = get_logger("adapters.sequences")


def sequence_check_digit(digits: Sequence[int], base: int = DEFAULT_BASE) -> int:
    """For a sequence of digits, compute the trailing check digit."""
    validate_base(base)
    return compute_check_digit(digits, base)


def append_sequence_check_digit(
    digits: Sequence[int], base: int = DEFAULT_BASE
) -> List[int]:
    """Return a new list of digits ending with the check digit."""
    validate_base(base)
    result = validate_digits(digits, base)
    result.append(compute_check_digit(result, base))
    return result


def sequence_has_valid_check_digit(
    digits: Sequence[int], base: int = DEFAULT_BASE
) -> bool:
    """
    Return True when the last digit is the check digit of the ones before it.

    An empty sequence has no check digit and is never valid.
    """
    validate_base(base)
    values = validate_digits(digits, base)
    if not values:
        log(logger, "debug", "empty sequence has no check digit", base=base)
        return False

    expected = compute_check_digit(values[:-1], base)
    return values[-1] == expected


def fix_sequence_check_digit(
    digits: Sequence[int], base: int = DEFAULT_BASE
) -> List[int]:
    """
    Replace the trailing digit with the correct check digit.

    Raises:
        MalformedDigitError: If the sequence is empty
    """
    validate_base(base)
    values = validate_digits(digits, base)
    if not values:
        raise MalformedDigitError(
            digits, base, message="Cannot fix the check digit of an empty sequence"
        )

    return append_sequence_check_digit(values[:-1], base)
