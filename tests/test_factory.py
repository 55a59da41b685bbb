import json

import pytest

from mazeblocks.factory import FactoryError, GameObjectFactory, material_from_json
from mazeblocks.game_object import GameObjectType

TRIANGLE_OBJ = """
v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vn 0 0 1
f 1/1/1 2/1/1 3/1/1
"""


def _material(shine=12.0):
    return {
        "diffuse": [0.5, 0.5, 0.5, 1.0],
        "ambient": [0.1, 0.2, 0.3, 1.0],
        "specular": [1.0, 1.0, 1.0, 1.0],
        "emission": [0.0, 0.0, 0.0, 1.0],
        "shininess": shine,
    }


@pytest.fixture
def mesh_file(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(TRIANGLE_OBJ, encoding="utf-8")
    return path


def test_material_from_json_values():
    material = material_from_json(_material())
    assert material.ambient == (0.1, 0.2, 0.3, 1.0)
    assert material.diffuse == (0.5, 0.5, 0.5, 1.0)
    assert material.specular == (1.0, 1.0, 1.0, 1.0)
    assert material.emission == (0.0, 0.0, 0.0, 1.0)
    assert material.shininess == 12.0


def test_material_from_json_rejects_short_vector():
    node = _material()
    node["diffuse"] = [1.0, 1.0]
    with pytest.raises(FactoryError):
        material_from_json(node)


def test_material_from_json_rejects_missing_shininess():
    node = _material()
    del node["shininess"]
    with pytest.raises(FactoryError):
        material_from_json(node)


def test_load_file_and_create(tmp_path, mesh_file):
    description = {"Player": {"mesh": str(mesh_file), "material": _material(3.0)}}
    path = tmp_path / "objects.json"
    path.write_text(json.dumps(description), encoding="utf-8")
    factory = GameObjectFactory()
    factory.load(path)
    assert set(factory.meshes) == {GameObjectType.PLAYER}
    player = factory.create(GameObjectType.PLAYER, 1, 1)
    assert player.position == (1, 1)
    assert player.object_type is GameObjectType.PLAYER
    assert player.graphic_object.mesh is factory.meshes[GameObjectType.PLAYER]
    assert player.graphic_object.material.shininess == 3.0
    assert len(player.graphic_object.mesh.indices) == 3


def test_created_objects_share_mesh(tmp_path, mesh_file):
    factory = GameObjectFactory()
    factory.load_description(
        {"HeavyObject": {"mesh": mesh_file.name, "material": _material()}},
        tmp_path,
    )
    first = factory.create(GameObjectType.HEAVY_OBJECT, 2, 3)
    second = factory.create(GameObjectType.HEAVY_OBJECT, 4, 5)
    assert first.graphic_object.mesh is second.graphic_object.mesh
    assert first.graphic_object is not second.graphic_object
    assert first.graphic_object.position == (2 - 10, 0.0, 3 - 10)


def test_create_unknown_type_has_no_mesh():
    factory = GameObjectFactory()
    obj = factory.create(GameObjectType.BOMB, 0, 0)
    assert obj.graphic_object.mesh is None
    assert obj.graphic_object.material is None
    assert obj.object_type is GameObjectType.BOMB


def test_unknown_keys_are_ignored(tmp_path, mesh_file):
    factory = GameObjectFactory()
    factory.load_description(
        {"Tree": {"mesh": "missing.obj"},
         "Monster": {"mesh": mesh_file.name, "material": _material()}},
        tmp_path,
    )
    assert list(factory.meshes) == [GameObjectType.MONSTER]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FactoryError):
        GameObjectFactory().load(tmp_path / "absent.json")


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(FactoryError):
        GameObjectFactory().load(path)


def test_missing_mesh_field_raises():
    with pytest.raises(FactoryError):
        GameObjectFactory().load_description({"Bomb": {"material": _material()}})


def test_missing_mesh_file_raises(tmp_path):
    with pytest.raises(FactoryError):
        GameObjectFactory().load_description(
            {"Bomb": {"mesh": "nowhere.obj", "material": _material()}}, tmp_path
        )