# File: utils/math_utils.py
"""Math and calculation utilities for FamilyHub.

Pure Python math functions with ZERO imports from the engines.

Functions:
    - percent_of: Share of a whole as a percentage
"""

from __future__ import annotations


def percent_of(part: float, whole: float) -> float:
    """Return `part` as a percentage of `whole`, unrounded.

    Layout values stay unrounded so repeated runs are bit-identical and
    the rendering layer decides presentation precision.

    Examples:
        percent_of(60, 900) → 6.666666666666667
        percent_of(5, 0) → 0.0  # Division by zero protection
    """
    if whole <= 0:
        return 0.0
    return part / whole * 100
