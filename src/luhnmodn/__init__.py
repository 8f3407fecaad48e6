"""
Luhn mod N check digits

This library computes, appends and validates a trailing check digit over
digits in any base from 2 to 16. It generalizes the classic base-10 Luhn
checksum by replacing the "double and sum the digits" step with a
base-specific permutation table (even digit values ascending, then odd).

Input Shapes:
- str: one character per digit, '0'-'9' then 'a'-'f' (case-insensitive)
- int: a non-negative magnitude, optionally bounded to 32 or 64 bits
- sequence of ints: digit values, most significant first

Main Features:
- Single-digit substitution errors are always detected
- Adjacent transpositions are detected except for a few pairs per base
  (0/9 in base 10, as with the classic Luhn checksum)
- Permutation tables precomputed for every base at import time
- Error detection analysis with rich-rendered reports

Example Usage:
    from luhnmodn import check_digit, append_check_digit, has_valid_check_digit

    check_digit("7992739871")                       # "3"
    append_check_digit("7992739871")                # "79927398713"
    has_valid_check_digit("361568")                 # True

    append_check_digit("499602d2", base=16)         # "499602d2f"
    check_digit([3, 6, 1, 5, 6])                    # 8
    append_check_digit(36156)                       # 361568
    append_check_digit(36156, width=INT32)          # bounded to 32 bits

    # Detection rates for every base
    from luhnmodn.analysis import generate_detection_report
    generate_detection_report()
"""

# Core algorithm functions
from .algorithms import (
    build_table,
    get_table,
    compute_check_digit,
    validate_base,
    validate_digits,
    PERMUTATION_TABLES,
)

# Shape-dispatching entry points
from .core import (
    check_digit,
    append_check_digit,
    has_valid_check_digit,
    fix_check_digit,
)

# Per-shape adapters
from .adapters.sequences import (
    sequence_check_digit,
    append_sequence_check_digit,
    sequence_has_valid_check_digit,
    fix_sequence_check_digit,
)
from .adapters.strings import (
    string_check_digit,
    append_string_check_digit,
    string_has_valid_check_digit,
    fix_string_check_digit,
)
from .adapters.integers import (
    integer_check_digit,
    append_integer_check_digit,
    integer_has_valid_check_digit,
    fix_integer_check_digit,
    INT32,
    INT64,
)

# Errors
from .exceptions import (
    CheckDigitError,
    InvalidBaseError,
    MalformedDigitError,
)

# Note: analysis module is available as luhnmodn.analysis
# Example: from luhnmodn.analysis import generate_detection_report

# Public API
__all__ = [
    # Core functions
    "build_table",
    "get_table",
    "compute_check_digit",
    "validate_base",
    "validate_digits",
    "PERMUTATION_TABLES",
    # Entry points
    "check_digit",
    "append_check_digit",
    "has_valid_check_digit",
    "fix_check_digit",
    # Sequences
    "sequence_check_digit",
    "append_sequence_check_digit",
    "sequence_has_valid_check_digit",
    "fix_sequence_check_digit",
    # Strings
    "string_check_digit",
    "append_string_check_digit",
    "string_has_valid_check_digit",
    "fix_string_check_digit",
    # Integers
    "integer_check_digit",
    "append_integer_check_digit",
    "integer_has_valid_check_digit",
    "fix_integer_check_digit",
    "INT32",
    "INT64",
    # Errors
    "CheckDigitError",
    "InvalidBaseError",
    "MalformedDigitError",
]

__version__ = "0.1.0"
__author__ = "luhnmodn team"
__description__ = "Luhn mod N check digits for bases 2 through 16"
