"""A 3D camera that looks at a target and can orbit, zoom and move."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from galactous.matrix import Mat4
from galactous.vector import Vec3

_SENSITIVITY = 0.1
_PITCH_LIMIT = 1.5
_MIN_FOV = 1.0
_MAX_FOV = 179.0


@dataclass
class Camera:
    """Position, target and lens settings of the viewing camera."""

    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 250.0, 50.0))
    target: Vec3 = field(default_factory=Vec3)
    up: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    fov: float = 45.0
    aspect_ratio: float = 800.0 / 600.0
    near_plane: float = 0.1
    far_plane: float = 10000.0

    def __post_init__(self) -> None:
        self.position = self.position.copy()
        self.target = self.target.copy()
        self.up = self.up.copy()

    def view_matrix(self) -> Mat4:
        """Return the view matrix for the current position and target."""
        return Mat4.look_at(self.position, self.target, self.up)

    def projection_matrix(self) -> Mat4:
        """Return the perspective projection for the current lens."""
        return Mat4.perspective(self.fov, self.aspect_ratio, self.near_plane, self.far_plane)

    def set_position(self, x: float, y: float, z: float) -> None:
        self.position = Vec3(x, y, z)

    def set_target(self, x: float, y: float, z: float) -> None:
        self.target = Vec3(x, y, z)

    def orbit(self, angle_x: float, angle_y: float) -> None:
        """Place the camera on a sphere around the origin at the given angles (radians)."""
        radius = self.position.norm()
        self.position = Vec3(
            radius * math.cos(angle_y) * math.cos(angle_x),
            radius * math.sin(angle_y),
            radius * math.cos(angle_y) * math.sin(angle_x),
        )

    def zoom(self, factor: float) -> None:
        """Narrow the field of view by ``factor`` degrees, kept within [1, 179]."""
        self.fov = min(max(self.fov - factor, _MIN_FOV), _MAX_FOV)

    def turn_around_target(self, x_offset: float, y_offset: float) -> None:
        """Rotate around the target, keeping the distance and limiting the pitch."""
        d = self.position - self.target
        distance = d.norm()
        if distance == 0:
            raise ValueError("camera position coincides with its target")
        yaw = math.atan2(d.z, d.x) + x_offset * _SENSITIVITY
        pitch = math.asin(max(-1.0, min(1.0, d.y / distance))) - y_offset * _SENSITIVITY
        pitch = min(max(pitch, -_PITCH_LIMIT), _PITCH_LIMIT)
        self.position = Vec3(
            self.target.x + distance * math.cos(pitch) * math.cos(yaw),
            self.target.y + distance * math.sin(pitch),
            self.target.z + distance * math.cos(pitch) * math.sin(yaw),
        )

    def direction(self) -> Vec3:
        """Return the (unnormalised) vector from the position to the target."""
        return self.target - self.position

    @staticmethod
    def _coefficient(distance: float) -> float:
        return distance if distance > 10 else 10.0

    def go_forward(self, distance: float) -> None:
        """Move position and target together along the viewing direction."""
        step = self.direction() * (distance * self._coefficient(distance))
        self.position += step
        self.target += step

    def go_backward(self, distance: float) -> None:
        """Move position and target together against the viewing direction."""
        step = self.direction() * (distance * self._coefficient(distance))
        self.position -= step
        self.target -= step

    def go_left(self, distance: float) -> None:
        """Shift the position sideways in the horizontal plane; the target stays."""
        direction = self.direction()
        amount = distance * self._coefficient(distance)
        self.position.x -= amount * direction.z
        self.position.z += amount * direction.x

    def go_right(self, distance: float) -> None:
        """Shift the position sideways in the horizontal plane; the target stays."""
        direction = self.direction()
        amount = distance * self._coefficient(distance)
        self.position.x += amount * direction.z
        self.position.z -= amount * direction.x