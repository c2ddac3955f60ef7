"""
Tipos geométricos imutáveis usados pelo núcleo de decisão.

Todas as coordenadas estão em metros, no referencial do campo (origem no
centro, gol amigo em x negativo). Ângulos estão em radianos.
"""

import math
from dataclasses import dataclass

# Tolerância padrão para comparações aproximadas
DEFAULT_EPSILON = 1e-9


@dataclass(frozen=True)
class Vector:
    """A 2D vector (displacement or velocity)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self, length: float = 1.0) -> "Vector":
        """Returns a vector with the same direction and the given length.

        The zero vector normalizes to itself.
        """
        current = self.length()
        if current == 0.0:
            return Vector()
        return self * (length / current)

    def orientation(self) -> "Angle":
        return Angle.of_radians(math.atan2(self.y, self.x))

    def perpendicular(self) -> "Vector":
        """Rotates the vector 90 degrees counter-clockwise."""
        return Vector(-self.y, self.x)

    def is_close(self, other: "Vector", epsilon: float = DEFAULT_EPSILON) -> bool:
        return (self - other).length() <= epsilon


@dataclass(frozen=True)
class Point:
    """A 2D position on the field."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, vector: Vector) -> "Point":
        return Point(self.x + vector.x, self.y + vector.y)

    def __sub__(self, other):
        # Point - Point gives the displacement, Point - Vector gives a Point
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return Point(self.x - other.x, self.y - other.y)

    def to_vector(self) -> Vector:
        return Vector(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close(self, other: "Point", epsilon: float = DEFAULT_EPSILON) -> bool:
        return self.distance_to(other) <= epsilon


@dataclass(frozen=True)
class Angle:
    """An angle in radians, always normalized to [-pi, pi]."""

    radians: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "radians", math.remainder(self.radians, math.tau))

    @classmethod
    def of_radians(cls, radians: float) -> "Angle":
        return cls(radians)

    @classmethod
    def of_degrees(cls, degrees: float) -> "Angle":
        return cls(math.radians(degrees))

    @classmethod
    def zero(cls) -> "Angle":
        return cls(0.0)

    def to_radians(self) -> float:
        return self.radians

    def to_degrees(self) -> float:
        return math.degrees(self.radians)

    def __add__(self, other: "Angle") -> "Angle":
        return Angle(self.radians + other.radians)

    def __sub__(self, other: "Angle") -> "Angle":
        return Angle(self.radians - other.radians)

    def __neg__(self) -> "Angle":
        return Angle(-self.radians)

    def abs(self) -> "Angle":
        return Angle(abs(self.radians))

    def to_unit_vector(self) -> Vector:
        return Vector(math.cos(self.radians), math.sin(self.radians))

    def is_close(self, other: "Angle", epsilon: float = DEFAULT_EPSILON) -> bool:
        return abs((self - other).radians) <= epsilon
