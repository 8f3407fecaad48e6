from typing import List

from luhnmodn.config import MIN_BASE, MAX_BASE


def get_supported_bases() -> List[int]:
    """
    Returns every base the library accepts.
    """
    return list(range(MIN_BASE, MAX_BASE + 1))


def get_invalid_bases() -> List[object]:
    """
    Returns bases that must be rejected before any computation.
    """
    return [-10, -1, 0, 1, 17, 36, 10.0, "10", None, True]
