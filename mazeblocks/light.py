"""Point light description and the lighting parameters it applies."""

from __future__ import annotations

from dataclasses import dataclass

Vec4 = tuple[float, float, float, float]


@dataclass(frozen=True)
class LightParameters:
    global_ambient: Vec4
    local_viewer: bool
    ambient: Vec4
    diffuse: Vec4
    specular: Vec4
    position: Vec4


_APPLIED = LightParameters(
    global_ambient=(0.2, 0.2, 0.2, 1.0),
    local_viewer=False,
    ambient=(0.4, 0.0, 0.0, 1.0),
    diffuse=(1.0, 0.0, 0.0, 1.0),
    specular=(1.0, 1.0, 1.0, 1.0),
    position=(20.0, 20.0, 15.0, 0.0),
)


@dataclass
class Light:
    position: Vec4 = (0.0, 0.0, 0.0, 0.0)
    ambient: Vec4 = (0.0, 0.0, 0.0, 0.0)
    diffuse: Vec4 = (0.0, 0.0, 0.0, 0.0)
    specular: Vec4 = (0.0, 0.0, 0.0, 0.0)

    def parameters(self) -> LightParameters:
        """Parameters applied when the light is switched on: a fixed red directional light."""
        return _APPLIED