"""Floating-point helpers for angles."""

from __future__ import annotations

import math


def double_modulo(a: float, b: float) -> float:
    """Reduce a into the range [0, |b|); a zero modulus returns a unchanged."""
    if b == 0.0:
        return a
    b = abs(b)
    while a >= b:
        a -= b
    while a < 0:
        a += b
    return a


def double_round(d: float) -> int:
    """Add one half and truncate toward zero."""
    return int(d + 0.5)


def radian_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad / math.pi * 180.0


def deg_to_radian(deg: float) -> float:
    """Convert degrees to radians."""
    return deg / 180.0 * math.pi