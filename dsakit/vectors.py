"""Three-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Vector3"]


@dataclass(frozen=True)
class Vector3:
    """A vector with components along i, j and k."""

    i: float = 0.0
    j: float = 0.0
    k: float = 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.i * self.i + self.j * self.j + self.k * self.k)

    def dot(self, other: Vector3) -> float:
        return self.i * other.i + self.j * other.j + self.k * other.k

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.j * other.k - self.k * other.j,
            self.k * other.i - self.i * other.k,
            self.i * other.j - self.j * other.i,
        )

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.i + other.i, self.j + other.j, self.k + other.k)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.i - other.i, self.j - other.j, self.k - other.k)

    def __str__(self) -> str:
        return f"<{self.i:g},{self.j:g},{self.k:g}>"