"""
Rounding helper shared by the percentage-style scores.
"""

from __future__ import annotations


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (2.5 -> 3, not 2)."""
    return int(value + 0.5)
