"""Orbit camera looking at the origin."""

from __future__ import annotations

import math

MIN_PITCH = 5.0
MAX_PITCH = 85.0
MIN_DISTANCE = 15.0
MAX_DISTANCE = 60.0


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


class Camera:
    """Camera on a sphere around the origin, described by a radius and two angles."""

    def __init__(self) -> None:
        self.r = 0.0
        self.angle_x = 0.0
        self.angle_y = 0.0

    @property
    def position(self) -> tuple[float, float, float]:
        ax = math.radians(self.angle_x)
        ay = math.radians(self.angle_y)
        return (
            self.r * math.cos(ay) * math.cos(ax),
            self.r * math.sin(ax),
            self.r * math.sin(ay) * math.cos(ax),
        )

    def set_position(self, position) -> None:
        """Derive radius and angles from a point; the point must not be on the y axis."""
        x, y, z = position
        horizontal = math.hypot(x, z)
        if horizontal == 0:
            raise ValueError("camera position must not lie on the vertical axis")
        self.r = math.hypot(x, y, z)
        self.angle_y = math.degrees(math.acos(_clamp_unit(horizontal / self.r)))
        self.angle_x = math.degrees(math.acos(_clamp_unit(x / horizontal)))

    def rotate_left_right(self, degree: float) -> None:
        self.angle_y += degree

    def rotate_up_down(self, degree: float) -> None:
        """Change angle_x, ignoring changes that leave the allowed range."""
        new_angle = self.angle_x + degree
        if MIN_PITCH <= new_angle <= MAX_PITCH:
            self.angle_x = new_angle

    def zoom_in_out(self, distance: float) -> None:
        """Change the radius, ignoring changes that leave the allowed range."""
        new_r = self.r + distance
        if MIN_DISTANCE <= new_r <= MAX_DISTANCE:
            self.r = new_r

    def look_at(self):
        """Return (eye, center, up) for a look-at view matrix."""
        return self.position, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)