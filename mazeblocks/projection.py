"""Projection settings for the scene view: perspective or zoomable orthographic."""

from __future__ import annotations

from dataclasses import dataclass

FIELD_OF_VIEW = 25.0
NEAR_PLANE = 0.2
FAR_PLANE = 70.0
ORTHO_HALF_EXTENT = 10.0
MIN_SCALE = 0.3
MAX_SCALE = 2.3
ZOOM_FACTOR = 0.05


@dataclass(frozen=True)
class Perspective:
    """Arguments of a perspective projection."""

    fovy: float
    aspect: float
    near: float
    far: float


@dataclass(frozen=True)
class Orthographic:
    """Clipping volume of an orthographic projection."""

    left: float
    right: float
    bottom: float
    top: float
    near: float
    far: float


@dataclass
class Projection:
    """Current projection mode and orthographic zoom scale."""

    orthographic: bool = False
    scale: float = MIN_SCALE

    def toggle(self) -> bool:
        """Switch between perspective and orthographic; return the new mode."""
        self.orthographic = not self.orthographic
        return self.orthographic

    def zoom(self, distance: float) -> float:
        """Change the orthographic scale, clamped to its allowed range."""
        self.scale = min(MAX_SCALE, max(MIN_SCALE, self.scale + distance * ZOOM_FACTOR))
        return self.scale

    def parameters(self, width: int, height: int) -> Perspective | Orthographic:
        """Projection for a window of the given size, keeping its aspect ratio."""
        if height == 0:
            raise ValueError("window height must not be zero")
        aspect = width / height
        if not self.orthographic:
            return Perspective(FIELD_OF_VIEW, aspect, NEAR_PLANE, FAR_PLANE)
        half = ORTHO_HALF_EXTENT * self.scale
        if aspect >= 1.0:
            return Orthographic(
                -aspect * half, aspect * half, -half, half, NEAR_PLANE, FAR_PLANE
            )
        return Orthographic(
            -half, half, -half / aspect, half / aspect, NEAR_PLANE, FAR_PLANE
        )