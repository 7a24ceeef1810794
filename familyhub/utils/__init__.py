# File: utils/__init__.py
"""Pure Python utilities for FamilyHub.

This module contains pure Python functions with ZERO imports from the
engines or helpers. All functions here can be unit tested in isolation.

Submodules:
    - dt_utils: Date/time parsing, week helpers, grid label formatting
    - math_utils: Percentage arithmetic

Usage:
    from . import dt_utils
    from .math_utils import percent_of
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
