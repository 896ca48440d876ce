"""Chainable 2D vector arithmetic."""

from .logging_utils import VectorLogger
from .math import DEGREES_PER_RADIAN, Vector, degrees_to_radians, radians_to_degrees
from .settings_schema import VectorSettings, load_last_used, save_last_used

__all__ = [
    "DEGREES_PER_RADIAN",
    "Vector",
    "VectorLogger",
    "VectorSettings",
    "degrees_to_radians",
    "load_last_used",
    "radians_to_degrees",
    "save_last_used",
]
