"""Integer rounding helpers used by break sizing and progress reporting.

Python's built-in ``round`` rounds halves to even (``round(2.5) == 2``);
minute arithmetic here rounds halves up so that a 2.5-minute break becomes
3 before increment rounding.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Example: 2.5 -> 3, 2.4999 -> 2, -2.5 -> -2
    """
    return math.floor(value + 0.5)


def ceil_to_increment(value: int, increment: int) -> int:
    """Round ``value`` up to the next multiple of ``increment``.

    Raises:
        ValueError: If increment is not positive.
    """
    if increment <= 0:
        raise ValueError(f"increment must be positive, got {increment}")
    return math.ceil(value / increment) * increment
