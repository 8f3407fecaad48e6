"""
Exceptions raised by the luhnmodn library.

Both error kinds are caller-input errors: they are raised once, before any
partial result is produced, and never recovered inside the library.
"""

from typing import Any, Optional

from luhnmodn.config import MIN_BASE, MAX_BASE


class CheckDigitError(ValueError):
    """Base exception for check digit errors"""

    pass


class InvalidBaseError(CheckDigitError):
    """The numeric base is outside the supported range"""

    def __init__(self, base: Any, message: Optional[str] = None):
        self.base = base
        if message is None:
            message = f"Invalid base {base!r}: must be an integer in [{MIN_BASE}, {MAX_BASE}]"
        super().__init__(message)


class MalformedDigitError(CheckDigitError):
    """A character or value cannot be represented as digits of the base"""

    def __init__(
        self,
        value: Any,
        base: int,
        position: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.value = value
        self.base = base
        self.position = position
        if message is None:
            if position is None:
                message = f"Value {value!r} is not representable in base {base}"
            else:
                message = f"Invalid digit {value!r} at position {position} for base {base}"
        super().__init__(message)
