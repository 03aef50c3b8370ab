"""Immutable 3D vector value used for positions and directions.

Usage:
    a = Vec3(1.0, 0.0, 0.0)
    b = Vec3(0.0, 2.0, 0.0)
    (a - b).length_squared()  # 5.0
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec3:
    """Three-component float vector. Y is the vertical axis."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def of(cls, values: tuple[float, float, float] | list[float]) -> Vec3:
        """Build from any three-element sequence."""
        if len(values) != 3:
            raise ValueError("Vec3 requires exactly three components")
        x, y, z = values
        return cls(float(x), float(y), float(z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_squared_to(self, other: Vec3) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def normalized(self, fallback: Vec3 | None = None) -> Vec3:
        """Unit vector in the same direction.

        Args:
            fallback: Returned for zero-length vectors (defaults to zero vector).
        """
        magnitude = self.length()
        if magnitude == 0.0:
            return fallback if fallback is not None else Vec3.zero()
        inv = 1.0 / magnitude
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)
