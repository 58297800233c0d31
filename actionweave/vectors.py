"""Small immutable 2D and 3D float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]
    ONE: ClassVar[Vec2]
    NEG_ONE: ClassVar[Vec2]
    X: ClassVar[Vec2]
    Y: ClassVar[Vec2]
    NEG_X: ClassVar[Vec2]
    NEG_Y: ClassVar[Vec2]

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def clamp(self, low: Vec2, high: Vec2) -> Vec2:
        """Clamp each component between the matching components of `low` and `high`."""
        return Vec2(*_clamp_components(self, low, high))

    def normalize(self) -> Vec2:
        """Return the vector scaled to unit length."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize {self!r}")
        return Vec2(self.x / length, self.y / length)


@dataclass(frozen=True)
class Vec3:
    """A three-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    NEG_ONE: ClassVar[Vec3]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def clamp(self, low: Vec3, high: Vec3) -> Vec3:
        """Clamp each component between the matching components of `low` and `high`."""
        return Vec3(*_clamp_components(self, low, high))


def _clamp_components(value, low, high):
    result = []
    for component, lo, hi in zip(value, low, high):
        if lo > hi:
            raise ValueError(f"clamp bounds are inverted: {low!r} > {high!r}")
        result.append(min(max(component, lo), hi))
    return result


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)
Vec2.NEG_ONE = Vec2(-1.0, -1.0)
Vec2.X = Vec2(1.0, 0.0)
Vec2.Y = Vec2(0.0, 1.0)
Vec2.NEG_X = Vec2(-1.0, 0.0)
Vec2.NEG_Y = Vec2(0.0, -1.0)

Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.NEG_ONE = Vec3(-1.0, -1.0, -1.0)