"""Math utilities for 2D vectors."""

from .angles import DEGREES_PER_RADIAN, degrees_to_radians, radians_to_degrees
from .vector import Vector

__all__ = [
    "DEGREES_PER_RADIAN",
    "Vector",
    "degrees_to_radians",
    "radians_to_degrees",
]
