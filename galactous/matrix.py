"""Column-major 4x4 matrices for view and projection transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass

from galactous.vector import Vec3

_PI = 3.14159
_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


@dataclass(frozen=True)
class Mat4:
    """An immutable 4x4 matrix stored as 16 floats in column-major order."""

    values: tuple[float, ...] = _IDENTITY

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != 16:
            raise ValueError(f"a Mat4 needs 16 values, got {len(values)}")
        object.__setattr__(self, "values", values)

    @classmethod
    def identity(cls) -> Mat4:
        """Return the identity matrix."""
        return cls(_IDENTITY)

    @classmethod
    def perspective(cls, fov: float, aspect: float, near: float, far: float) -> Mat4:
        """Return a perspective projection; ``fov`` is the vertical angle in degrees."""
        if aspect == 0:
            raise ValueError("aspect ratio must not be zero")
        if near == far:
            raise ValueError("near and far planes must differ")
        f = 1.0 / math.tan(fov * 0.5 * _PI / 180.0)
        values = [0.0] * 16
        values[0] = f / aspect
        values[5] = f
        values[10] = (far + near) / (near - far)
        values[11] = -1.0
        values[14] = (2.0 * far * near) / (near - far)
        return cls(tuple(values))

    @classmethod
    def look_at(cls, eye: Vec3, center: Vec3, up: Vec3) -> Mat4:
        """Return the view matrix of a camera at ``eye`` looking at ``center``."""
        z = eye - center
        z_len = z.norm()
        if z_len == 0:
            raise ValueError("eye and center must differ")
        z = z / z_len
        x = up.cross(z)
        x_len = x.norm()
        if x_len == 0:
            raise ValueError("up vector must not be parallel to the viewing direction")
        x = x / x_len
        y = z.cross(x)
        return cls((
            x.x, y.x, z.x, 0.0,
            x.y, y.y, z.y, 0.0,
            x.z, y.z, z.z, 0.0,
            -(x.x * eye.x + x.y * eye.y + x.z * eye.z),
            -(y.x * eye.x + y.y * eye.y + y.z * eye.z),
            -(z.x * eye.x + z.y * eye.y + z.z * eye.z),
            1.0,
        ))

    def transform(self, x: float, y: float, z: float, w: float = 1.0) -> tuple[float, float, float, float]:
        """Multiply the column vector ``(x, y, z, w)`` by this matrix."""
        vec = (x, y, z, w)
        m = self.values
        return tuple(
            sum(m[col * 4 + row] * component for col, component in enumerate(vec))
            for row in range(4)
        )