"""
Shape adapters: conversions between external representations and the digit
sequences consumed by ``luhnmodn.algorithms.compute_check_digit``.
"""

from . import sequences, strings, integers

__all__ = ["sequences", "strings", "integers"]
