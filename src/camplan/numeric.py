"""
Numeric Helpers
===============

Rounding used for every displayed figure.

Python's built-in ``round`` rounds halves to even (``round(0.25, 1) == 0.2``).
Planner figures round halves UP, so ``round_half_up(0.25, 1) == 0.3``.
"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round ``value`` to ``ndigits`` decimals, halves toward +infinity.

    Args:
        value: Number to round
        ndigits: Decimal places to keep

    Returns:
        Rounded value as float
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return int(math.floor(value + 0.5))
