"""
Integer adapter.

Integers are read as non-negative magnitudes. Digits are extracted least
significant first by repeated divmod and reversed into the most significant
first order the checksum expects. The check digit becomes the new least
significant digit: ``number * base + check``.

Width classes:
- INT32: values up to 2**31 - 1
- INT64: values up to 2**63 - 1
- None: arbitrary precision (default)

A fixed width bounds both the input and the appended result. Nothing wraps
around; a value that does not fit raises MalformedDigitError.

Leading zeros cannot be expressed by an integer. They never change the
check digit, so an integer and its zero-padded string agree.
"""

from typing import Any, List, Optional

from luhnmodn.algorithms import compute_check_digit, validate_base
from luhnmodn.config import DEFAULT_BASE, INT32_MAX, INT64_MAX
from luhnmodn.exceptions import MalformedDigitError
from luhnmodn.log import get_logger, log

logger = get_logger("adapters.integers")

INT32 = 32
INT64 = 64

WIDTH_LIMITS = {
    INT32: INT32_MAX,
    INT64: INT64_MAX,
}


def _check_magnitude(number: Any, base: int, width: Optional[int]) -> int:
    if isinstance(number, bool) or not isinstance(number, int):
        raise MalformedDigitError(
            number, base, message=f"Expected an integer, got {type(number).__name__}"
        )
    if width is not None and width not in WIDTH_LIMITS:
        raise ValueError(
            f"Unknown width {width!r}. Valid widths: {list(WIDTH_LIMITS.keys())} or None"
        )
    if number < 0:
        raise MalformedDigitError(
            number, base, message=f"Negative value {number} has no digits in base {base}"
        )
    if width is not None and number > WIDTH_LIMITS[width]:
        raise MalformedDigitError(
            number, base, message=f"Value {number} exceeds the {width}-bit range"
        )
    return number


def to_digits(
    number: int, base: int = DEFAULT_BASE, width: Optional[int] = None
) -> List[int]:
    """
    Convert a non-negative integer into its digits in base.

    Examples:
        to_digits(36155) -> [3, 6, 1, 5, 5]
        to_digits(0) -> [0]
        to_digits(255, 16) -> [15, 15]

    Raises:
        MalformedDigitError: If number is negative, not an int, or outside width
    """
    validate_base(base)
    number = _check_magnitude(number, base, width)
    if number == 0:
        return [0]

    digits = []
    while number > 0:
        number, remainder = divmod(number, base)
        digits.append(remainder)

    digits.reverse()
    return digits


def integer_check_digit(
    number: int, base: int = DEFAULT_BASE, width: Optional[int] = None
) -> int:
    """For an integer, compute the check digit."""
    validate_base(base)
    return compute_check_digit(to_digits(number, base, width), base)


def append_integer_check_digit(
    number: int, base: int = DEFAULT_BASE, width: Optional[int] = None
) -> int:
    """
    Return the integer extended by its check digit.

    Raises:
        MalformedDigitError: If the extended value no longer fits width
    """
    validate_base(base)
    check = integer_check_digit(number, base, width)
    result = number * base + check
    if width is not None and result > WIDTH_LIMITS[width]:
        log(logger, "debug", "appended value overflows width", number=number, width=width)
        raise MalformedDigitError(
            number,
            base,
            message=f"Appending a check digit to {number} exceeds the {width}-bit range",
        )
    return result


def integer_has_valid_check_digit(
    number: int, base: int = DEFAULT_BASE, width: Optional[int] = None
) -> bool:
    """Return True when the least significant digit is the check digit of the rest."""
    validate_base(base)
    digits = to_digits(number, base, width)
    return digits[-1] == compute_check_digit(digits[:-1], base)


def fix_integer_check_digit(
    number: int, base: int = DEFAULT_BASE, width: Optional[int] = None
) -> int:
    """Replace the least significant digit with the correct check digit."""
    validate_base(base)
    _check_magnitude(number, base, width)
    return append_integer_check_digit(number // base, base, width)
