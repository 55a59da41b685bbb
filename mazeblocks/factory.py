"""Factory that builds game objects from a JSON description of meshes and materials."""

from __future__ import annotations

import json
from pathlib import Path

from mazeblocks.game_object import GameObject, GameObjectType
from mazeblocks.graphic_object import GraphicObject
from mazeblocks.material import PhongMaterial
from mazeblocks.mesh import Mesh, MeshFormatError

_DESCRIPTION_KEYS = {
    "LightObject": GameObjectType.LIGHT_OBJECT,
    "HeavyObject": GameObjectType.HEAVY_OBJECT,
    "BorderObject": GameObjectType.BORDER_OBJECT,
    "Player": GameObjectType.PLAYER,
    "Bomb": GameObjectType.BOMB,
    "Monster": GameObjectType.MONSTER,
}


class FactoryError(Exception):
    """Raised when a game object description cannot be loaded."""


def _vec4(node, name: str) -> tuple[float, float, float, float]:
    try:
        values = node[name]
    except (KeyError, TypeError) as exc:
        raise FactoryError(f"material is missing '{name}'") from exc
    if not isinstance(values, list) or len(values) < 4:
        raise FactoryError(f"material '{name}' must be a list of four numbers")
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values[:4]):
        raise FactoryError(f"material '{name}' must be a list of four numbers")
    return tuple(float(v) for v in values[:4])


def material_from_json(node) -> PhongMaterial:
    """Build a material from a mapping with four colour lists and a shininess number."""
    if not isinstance(node, dict):
        raise FactoryError("material must be an object")
    shininess = node.get("shininess")
    if not isinstance(shininess, (int, float)) or isinstance(shininess, bool):
        raise FactoryError("material 'shininess' must be a number")
    return PhongMaterial(
        ambient=_vec4(node, "ambient"),
        diffuse=_vec4(node, "diffuse"),
        specular=_vec4(node, "specular"),
        emission=_vec4(node, "emission"),
        shininess=float(shininess),
    )


class GameObjectFactory:
    """Holds one mesh and one material per object type and creates objects from them."""

    def __init__(self) -> None:
        self.meshes: dict[GameObjectType, Mesh] = {}
        self.materials: dict[GameObjectType, PhongMaterial] = {}

    def load(self, path) -> None:
        """Read a JSON description file; mesh paths are taken as they are written."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise FactoryError(f"cannot open file {path}") from exc
        try:
            description = json.loads(text)
        except json.JSONDecodeError as exc:
            raise FactoryError(f"invalid file format: {exc}") from exc
        self.load_description(description)

    def load_description(self, description, base_dir=None) -> None:
        """Load meshes and materials for every known type present in the description.

        Relative mesh paths are resolved against base_dir when it is given.
        """
        if not isinstance(description, dict):
            raise FactoryError("description must be a JSON object")
        for key, object_type in _DESCRIPTION_KEYS.items():
            if key not in description:
                continue
            entry = description[key]
            if not isinstance(entry, dict) or not isinstance(entry.get("mesh"), str):
                raise FactoryError(f"'{key}' needs a 'mesh' path")
            if "material" not in entry:
                raise FactoryError(f"'{key}' needs a 'material'")
            mesh_path = Path(entry["mesh"])
            if base_dir is not None and not mesh_path.is_absolute():
                mesh_path = Path(base_dir) / mesh_path
            try:
                mesh = Mesh.load(mesh_path)
            except (OSError, MeshFormatError) as exc:
                raise FactoryError(f"cannot load mesh for '{key}': {exc}") from exc
            material = material_from_json(entry["material"])
            self.meshes[object_type] = mesh
            self.materials[object_type] = material

    def create(self, object_type: GameObjectType, x: int, y: int) -> GameObject:
        """Create an object of the given type at cell (x, y)."""
        graphic = GraphicObject(
            mesh=self.meshes.get(object_type),
            material=self.materials.get(object_type),
        )
        obj = GameObject(position=(x, y), object_type=object_type)
        obj.set_graphic_object(graphic)
        return obj