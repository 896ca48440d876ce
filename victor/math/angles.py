"""Angle unit conversion between radians and degrees."""

from __future__ import annotations

from math import pi

DEGREES_PER_RADIAN = 180.0 / pi


def radians_to_degrees(radians: float) -> float:
    return radians * DEGREES_PER_RADIAN


def degrees_to_radians(degrees: float) -> float:
    return degrees / DEGREES_PER_RADIAN
