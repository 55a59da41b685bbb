"""A drawable object: a mesh with a material placed in the scene."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from mazeblocks.material import PhongMaterial
from mazeblocks.mesh import Mesh

Vec3 = tuple[float, float, float]


@dataclass
class GraphicObject:
    """Scene object with a world position, a heading, a colour, a material and a mesh.

    Material and mesh are shared between copies; they are not duplicated.
    """

    position: Vec3 = (0.0, 0.0, 0.0)
    angle: float = 0.0
    color: Vec3 = (0.0, 0.0, 0.0)
    material: PhongMaterial | None = None
    mesh: Mesh | None = None

    def model_matrix(self) -> tuple[float, ...]:
        """Column-major 4x4 model matrix; only the position is applied."""
        x, y, z = self.position
        return (
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            float(x), float(y), float(z), 1.0,
        )

    def copy(self) -> "GraphicObject":
        """Return a new object with the same settings, sharing material and mesh."""
        return dataclasses.replace(self)