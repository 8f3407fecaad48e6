"""
String adapter.

Each character of the string is one digit of the base: '0'-'9' then 'a'-'f'
(upper case accepted). Check digits are rendered in lower case, and the
caller's text is otherwise preserved, so appending to "3A6D1F56" in base 16
gives "3A6D1F566" while "499602d2" gives "499602d2f".
"""

from typing import List

from luhnmodn.algorithms import compute_check_digit, validate_base
from luhnmodn.config import DEFAULT_BASE, DIGIT_ALPHABET
from luhnmodn.exceptions import MalformedDigitError
from luhnmodn.log import get_logger, log

logger = get_logger("adapters.strings")


def to_digits(text: str, base: int = DEFAULT_BASE) -> List[int]:
    """
    Convert a string into a list of digit values.

    Args:
        text: Digit characters, most significant first
        base: Base in [2, 16]

    Returns:
        List of ints in [0, base)

    Raises:
        MalformedDigitError: If a character is not a digit of the base
    """
    validate_base(base)
    if not isinstance(text, str):
        raise MalformedDigitError(
            text, base, message=f"Expected a string, got {type(text).__name__}"
        )

    alphabet = DIGIT_ALPHABET[:base]
    digits = []
    for position, char in enumerate(text):
        # Unicode digits such as '٣' are rejected; only ASCII glyphs are digits here.
        lowered = char.lower() if char.isascii() else ""
        index = alphabet.find(lowered) if lowered else -1
        if index < 0:
            raise MalformedDigitError(char, base, position)
        digits.append(index)

    return digits


def from_digit(value: int, base: int = DEFAULT_BASE) -> str:
    """Render a single digit value as its lower-case character."""
    validate_base(base)
    if value < 0 or value >= base:
        raise MalformedDigitError(value, base)
    return DIGIT_ALPHABET[value]


def string_check_digit(text: str, base: int = DEFAULT_BASE) -> str:
    """For a string of digits, compute the check digit character."""
    validate_base(base)
    return from_digit(compute_check_digit(to_digits(text, base), base), base)


def append_string_check_digit(text: str, base: int = DEFAULT_BASE) -> str:
    """Return the string followed by its check digit character."""
    return text + string_check_digit(text, base)


def string_has_valid_check_digit(text: str, base: int = DEFAULT_BASE) -> bool:
    """
    Return True when the last character is the check digit of the rest.

    The comparison is on digit values, so "0B012722900021AC35B25" and
    "0b012722900021ac35b25" validate alike. An empty string is never valid.
    """
    validate_base(base)
    digits = to_digits(text, base)
    if not digits:
        log(logger, "debug", "empty string has no check digit", base=base)
        return False

    return digits[-1] == compute_check_digit(digits[:-1], base)


def fix_string_check_digit(text: str, base: int = DEFAULT_BASE) -> str:
    """
    Replace the last character with the correct check digit character.

    Raises:
        MalformedDigitError: If the string is empty or holds a non-digit
    """
    validate_base(base)
    to_digits(text, base)
    if not text:
        raise MalformedDigitError(
            text, base, message="Cannot fix the check digit of an empty string"
        )

    return append_string_check_digit(text[:-1], base)
