"""
Shape-dispatching entry points.

Each operation accepts a string, an integer, or a sequence of digit values
and routes to the matching adapter:

    check_digit("7992739871")        -> "3"
    check_digit(36156)               -> 8
    check_digit([3, 6, 1, 5, 6])     -> 8

    append_check_digit("499602d2", base=16)  -> "499602d2f"
    has_valid_check_digit(361568)            -> True
"""

from collections.abc import Sequence
from typing import Any, List, Optional, Union

from luhnmodn.adapters import integers, sequences, strings
from luhnmodn.algorithms import validate_base
from luhnmodn.config import DEFAULT_BASE

DigitValue = Union[str, int, Sequence]


def _resolve_shape(value: Any, base: int, width: Optional[int]) -> str:
    validate_base(base)
    if isinstance(value, str):
        shape = "string"
    elif isinstance(value, bool):
        raise TypeError("Booleans are not digit values")
    elif isinstance(value, int):
        shape = "integer"
    elif isinstance(value, (bytes, bytearray)):
        raise TypeError("Bytes are not supported; decode to str or pass a list of ints")
    elif isinstance(value, Sequence):
        shape = "sequence"
    else:
        raise TypeError(
            f"Unsupported value type {type(value).__name__}: expected str, int or a sequence of ints"
        )

    if width is not None and shape != "integer":
        raise TypeError("width only applies to integer values")
    return shape


def check_digit(
    value: DigitValue, base: int = DEFAULT_BASE, width: Optional[int] = None
) -> Union[str, int]:
    """
    Compute the check digit of value without modifying it.

    Returns:
        A single character for strings, an int for integers and sequences
    """
    shape = _resolve_shape(value, base, width)
    if shape == "string":
        return strings.string_check_digit(value, base)
    elif shape == "integer":
        return integers.integer_check_digit(value, base, width)
    else:
        return sequences.sequence_check_digit(value, base)


def append_check_digit(
    value: DigitValue, base: int = DEFAULT_BASE, width: Optional[int] = None
) -> Union[str, int, List[int]]:
    """Return a new value one digit longer, ending with its check digit."""
    shape = _resolve_shape(value, base, width)
    if shape == "string":
        return strings.append_string_check_digit(value, base)
    elif shape == "integer":
        return integers.append_integer_check_digit(value, base, width)
    else:
        return sequences.append_sequence_check_digit(value, base)


def has_valid_check_digit(
    value: DigitValue, base: int = DEFAULT_BASE, width: Optional[int] = None
) -> bool:
    """Return True when the last digit of value is its check digit."""
    shape = _resolve_shape(value, base, width)
    if shape == "string":
        return strings.string_has_valid_check_digit(value, base)
    elif shape == "integer":
        return integers.integer_has_valid_check_digit(value, base, width)
    else:
        return sequences.sequence_has_valid_check_digit(value, base)


def fix_check_digit(
    value: DigitValue, base: int = DEFAULT_BASE, width: Optional[int] = None
) -> Union[str, int, List[int]]:
    """Return value with its last digit replaced by the correct check digit."""
    shape = _resolve_shape(value, base, width)
    if shape == "string":
        return strings.fix_string_check_digit(value, base)
    elif shape == "integer":
        return integers.fix_integer_check_digit(value, base, width)
    else:
        return sequences.fix_sequence_check_digit(value, base)
