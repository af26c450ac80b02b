"""Numeric validation utilities"""

import math


def is_finite(value) -> bool:
    """True when value is a real number that converts to a finite float"""
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False  # ints beyond float range
