"""Three-component vectors used for positions, velocities and accelerations."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vec3:
    """A mutable 3D vector; in-place operators modify the vector itself."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self * scalar

    def __truediv__(self, scalar: float) -> Vec3:
        if scalar == 0:
            raise ZeroDivisionError("division of a Vec3 by zero")
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iadd__(self, other: Vec3) -> Vec3:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vec3) -> Vec3:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar: float) -> Vec3:
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __itruediv__(self, scalar: float) -> Vec3:
        if scalar == 0:
            raise ZeroDivisionError("division of a Vec3 by zero")
        self.x /= scalar
        self.y /= scalar
        self.z /= scalar
        return self

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    def cross(self, other: Vec3) -> Vec3:
        """Return the vector (cross) product ``self x other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction, or zero for a zero vector."""
        n = self.norm()
        if n > 0:
            return Vec3(self.x / n, self.y / n, self.z / n)
        return Vec3()

    def change_norm(self, amount: float) -> Vec3:
        """Return a vector in the same direction whose length is ``amount``."""
        n = self.norm()
        if n == 0:
            raise ValueError("cannot change the norm of a zero vector")
        coeff = amount / n
        return Vec3(self.x * coeff, self.y * coeff, self.z * coeff)

    def limit_norm(self, max_norm: float) -> Vec3:
        """Return the vector scaled down to ``max_norm`` if it is longer."""
        if self.norm() > max_norm:
            return self.change_norm(max_norm)
        return self.copy()

    def copy(self) -> Vec3:
        """Return an independent copy."""
        return Vec3(self.x, self.y, self.z)