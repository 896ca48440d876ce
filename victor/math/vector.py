"""Mutable 2D vector with a chainable, in-place API."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from math import atan2, cos, isfinite, sin, sqrt
from numbers import Real
from typing import Any, Iterator, Mapping, Sequence

import numpy as np

from .. import config
from .angles import degrees_to_radians, radians_to_degrees

# Integer digits of the largest finite double.
_MAX_FLOAT_DIGITS = 309


def _ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 results (inf/nan) instead of ZeroDivisionError."""
    if denominator != 0:
        return numerator / denominator
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _round_axis(value: float) -> float:
    # round() raises on inf/nan; those pass through untouched.
    if not isfinite(value):
        return value
    return float(round(value))


def format_fixed(value: float, precision: int) -> str:
    if not isfinite(value):
        return f"{value:.{precision}f}"
    # Decimal(value) is the exact binary value, so only true ties round up.
    exact = Decimal(value if value != 0 else 0)
    quantum = Decimal(1).scaleb(-precision)
    context = Context(prec=_MAX_FLOAT_DIGITS + precision)
    return f"{exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context):f}"


@dataclass
class Vector:
    """2D point or direction whose operations mutate in place.

    Mutators return ``self`` so calls can be chained::

        Vector(3.0, 4.0).normalize().multiply_scalar(10.0)

    Instances carry no locking. Callers sharing one vector across threads
    must synchronize access themselves.
    """

    x: float = 0.0
    y: float = 0.0

    # --- Construction & copying ---

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector":
        if len(values) != 2:
            raise ValueError(f"Expected 2 values for a vector, got {len(values)}.")
        return cls(values[0], values[1])

    @classmethod
    def from_object(cls, payload: Mapping[str, Any]) -> "Vector":
        try:
            return cls(payload["x"], payload["y"])
        except KeyError as exc:
            raise ValueError(f"Vector payload is missing axis {exc.args[0]!r}.") from exc

    def clone(self) -> "Vector":
        return Vector(self.x, self.y)

    def copy_x(self, v: "Vector") -> "Vector":
        self.x = v.x
        return self

    def copy_y(self, v: "Vector") -> "Vector":
        self.y = v.y
        return self

    def copy(self, v: "Vector") -> "Vector":
        """Overwrite both axes with those of ``v``."""
        self.copy_x(v)
        self.copy_y(v)
        return self

    def zero(self) -> "Vector":
        self.x = 0.0
        self.y = 0.0
        return self

    # --- Addition & subtraction ---

    def add_x(self, v: "Vector") -> "Vector":
        return self.add_scalar_x(v.x)

    def add_y(self, v: "Vector") -> "Vector":
        return self.add_scalar_y(v.y)

    def add(self, v: "Vector") -> "Vector":
        self.add_scalar_x(v.x)
        self.add_scalar_y(v.y)
        return self

    def add_scalar(self, scalar: float) -> "Vector":
        self.add_scalar_x(scalar)
        self.add_scalar_y(scalar)
        return self

    def add_scalar_x(self, scalar: float) -> "Vector":
        self.x += scalar
        return self

    def add_scalar_y(self, scalar: float) -> "Vector":
        self.y += scalar
        return self

    def subtract_x(self, v: "Vector") -> "Vector":
        return self.subtract_scalar_x(v.x)

    def subtract_y(self, v: "Vector") -> "Vector":
        return self.subtract_scalar_y(v.y)

    def subtract(self, v: "Vector") -> "Vector":
        self.subtract_scalar_x(v.x)
        self.subtract_scalar_y(v.y)
        return self

    def subtract_scalar(self, scalar: float) -> "Vector":
        self.subtract_scalar_x(scalar)
        self.subtract_scalar_y(scalar)
        return self

    def subtract_scalar_x(self, scalar: float) -> "Vector":
        self.x -= scalar
        return self

    def subtract_scalar_y(self, scalar: float) -> "Vector":
        self.y -= scalar
        return self

    # --- Scaling & division ---

    def multiply_x(self, v: "Vector") -> "Vector":
        return self.multiply_scalar_x(v.x)

    def multiply_y(self, v: "Vector") -> "Vector":
        return self.multiply_scalar_y(v.y)

    def multiply(self, v: "Vector") -> "Vector":
        self.multiply_x(v)
        self.multiply_y(v)
        return self

    def multiply_scalar(self, scalar: float) -> "Vector":
        self.multiply_scalar_x(scalar)
        self.multiply_scalar_y(scalar)
        return self

    def multiply_scalar_x(self, scalar: float) -> "Vector":
        self.x *= scalar
        return self

    def multiply_scalar_y(self, scalar: float) -> "Vector":
        self.y *= scalar
        return self

    def divide_x(self, v: "Vector") -> "Vector":
        self.x = _ieee_divide(self.x, v.x)
        return self

    def divide_y(self, v: "Vector") -> "Vector":
        self.y = _ieee_divide(self.y, v.y)
        return self

    def divide(self, v: "Vector") -> "Vector":
        """Component-wise division by another vector.

        A zero component in ``v`` is not guarded: the axis becomes ``inf``,
        ``-inf`` or ``nan`` as IEEE-754 prescribes.
        """
        self.divide_x(v)
        self.divide_y(v)
        return self

    def divide_scalar(self, scalar: float) -> "Vector":
        """Divide both axes by ``scalar``; a zero scalar zeroes the vector."""
        self.divide_scalar_x(scalar)
        self.divide_scalar_y(scalar)
        return self

    def divide_scalar_x(self, scalar: float) -> "Vector":
        self.x = self.x / scalar if scalar != 0 else 0.0
        return self

    def divide_scalar_y(self, scalar: float) -> "Vector":
        self.y = self.y / scalar if scalar != 0 else 0.0
        return self

    def invert_x(self) -> "Vector":
        self.x *= -1
        return self

    def invert_y(self) -> "Vector":
        self.y *= -1
        return self

    def invert(self) -> "Vector":
        self.invert_x()
        self.invert_y()
        return self

    def limit(self, maximum: float, factor: float) -> "Vector":
        """Multiply each axis whose absolute value exceeds ``maximum`` by ``factor``.

        Axes are checked independently::

            Vector(100, 50).limit(80, 0.9)  # -> x: 90.0, y: 50
        """
        if abs(self.x) > maximum:
            self.x *= factor
        if abs(self.y) > maximum:
            self.y *= factor
        return self

    # --- Length & normalization ---

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return sqrt(self.length_sq())

    def magnitude(self) -> float:
        return self.length()

    def normalize(self) -> "Vector":
        """Scale to unit length. A zero-length vector becomes ``(1, 0)``."""
        length = self.length()
        if length == 0:
            self.x = 1.0
            self.y = 0.0
        else:
            self.x /= length
            self.y /= length
        return self

    def norm(self) -> "Vector":
        return self.normalize()

    # --- Products & distances ---

    def dot(self, v: "Vector") -> float:
        return self.x * v.x + self.y * v.y

    def cross(self, v: "Vector") -> float:
        """2D cross product returning a scalar (z-component)."""
        return self.x * v.y - self.y * v.x

    def distance_x(self, v: "Vector") -> float:
        return self.x - v.x

    def distance_y(self, v: "Vector") -> float:
        return self.y - v.y

    def abs_distance_x(self, v: "Vector") -> float:
        return abs(self.distance_x(v))

    def abs_distance_y(self, v: "Vector") -> float:
        return abs(self.distance_y(v))

    def distance_sq(self, v: "Vector") -> float:
        dx = self.distance_x(v)
        dy = self.distance_y(v)
        return dx * dx + dy * dy

    def distance(self, v: "Vector") -> float:
        return sqrt(self.distance_sq(v))

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def is_equal_to(self, v: "Vector") -> bool:
        """Exact comparison of both axes, without tolerance."""
        return self.x == v.x and self.y == v.y

    # --- Angles & rotation ---

    def horizontal_angle(self) -> float:
        return atan2(self.y, self.x)

    def horizontal_angle_deg(self) -> float:
        return radians_to_degrees(self.horizontal_angle())

    def vertical_angle(self) -> float:
        return atan2(self.x, self.y)

    def vertical_angle_deg(self) -> float:
        return radians_to_degrees(self.vertical_angle())

    def angle(self) -> float:
        return self.horizontal_angle()

    def angle_deg(self) -> float:
        return self.horizontal_angle_deg()

    def direction(self) -> float:
        return self.horizontal_angle()

    def rotate(self, angle_rad: float) -> "Vector":
        """Rotate about the origin by ``angle_rad`` (radians, counter-clockwise)."""
        cos_a = cos(angle_rad)
        sin_a = sin(angle_rad)
        nx = self.x * cos_a - self.y * sin_a
        ny = self.x * sin_a + self.y * cos_a
        self.x = nx
        self.y = ny
        return self

    def rotate_deg(self, degrees: float) -> "Vector":
        return self.rotate(degrees_to_radians(degrees))

    def rotate_to(self, rotation: float) -> "Vector":
        """Rotate so the horizontal angle becomes ``rotation``; length is kept."""
        return self.rotate(rotation - self.angle())

    def rotate_to_deg(self, degrees: float) -> "Vector":
        return self.rotate_to(degrees_to_radians(degrees))

    def rotate_by(self, rotation: float) -> "Vector":
        """Rotate by the current angle plus ``rotation``.

        The applied turn is ``angle() + rotation``, so the resulting angle is
        ``2 * angle() + rotation``. For a vector on the positive x-axis this
        is a plain rotation by ``rotation``.
        """
        return self.rotate(self.angle() + rotation)

    def rotate_by_deg(self, degrees: float) -> "Vector":
        return self.rotate_by(degrees_to_radians(degrees))

    # --- Conversion & presentation ---

    def round(self) -> "Vector":
        """Round both axes to the nearest integer, ties to even.

        ``0.5`` rounds to ``0.0`` and ``1.5`` to ``2.0``. Axes remain floats;
        ``inf`` and ``nan`` are left as they are.
        """
        self.x = _round_axis(self.x)
        self.y = _round_axis(self.y)
        return self

    def to_fixed(self, precision: int | None = None) -> dict[str, str]:
        """Format both axes with ``precision`` decimals (default from config).

        Exact ties round away from zero (``2.5 -> "3"``, ``0.125 -> "0.13"``),
        unlike ``round()`` which rounds ties to even.
        """
        if precision is None:
            precision = config.DEFAULT_PRECISION
        return {"x": format_fixed(self.x, precision), "y": format_fixed(self.y, precision)}

    def to_array(self) -> list[float]:
        return [self.x, self.y]

    def to_object(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    def __str__(self) -> str:
        return f"x: {self.x}, y: {self.y}"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # --- Non-mutating operators ---

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.clone().add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.clone().subtract(other)

    def __mul__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.clone().multiply_scalar(scalar)

    def __rmul__(self, scalar: float) -> "Vector":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.clone().divide_scalar(scalar)

    def __neg__(self) -> "Vector":
        return self.clone().invert()
