"""The playing field: a grid of game objects, the player, camera and light."""

from __future__ import annotations

from dataclasses import dataclass, field

from mazeblocks.camera import Camera
from mazeblocks.factory import GameObjectFactory
from mazeblocks.game_object import GameObject, GameObjectType
from mazeblocks.light import Light
from mazeblocks.maze import LIGHT_WALL, WALL

MAP_SIZE = 21
BORDER = 3
PLAYER_START = (1, 1)
CAMERA_START = (30.0, 15.0, 17.5)

_CELL_TYPES = {
    LIGHT_WALL: GameObjectType.LIGHT_OBJECT,
    WALL: GameObjectType.HEAVY_OBJECT,
    BORDER: GameObjectType.BORDER_OBJECT,
}

PASSABILITY_MAP: tuple[tuple[int, ...], ...] = (
    (3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3),
    (3, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 3),
    (3, 0, 2, 1, 2, 0, 2, 0, 2, 2, 2, 1, 2, 0, 2, 0, 2, 0, 2, 2, 3),
    (3, 0, 2, 0, 2, 0, 0, 0, 2, 0, 2, 0, 0, 0, 2, 0, 1, 0, 0, 0, 3),
    (3, 0, 1, 0, 2, 2, 1, 2, 2, 0, 2, 0, 2, 2, 2, 1, 2, 0, 2, 0, 3),
    (3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 2, 0, 2, 0, 3),
    (3, 0, 2, 2, 1, 1, 2, 0, 2, 0, 2, 2, 2, 2, 2, 0, 2, 2, 2, 0, 3),
    (3, 0, 2, 0, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 3),
    (3, 0, 2, 0, 2, 2, 2, 0, 2, 0, 2, 2, 1, 2, 2, 2, 1, 2, 2, 0, 3),
    (3, 0, 0, 0, 2, 0, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 0, 0, 1, 0, 3),
    (3, 2, 2, 2, 2, 0, 2, 2, 2, 0, 2, 0, 2, 2, 2, 2, 2, 2, 2, 0, 3),
    (3, 0, 0, 0, 2, 0, 0, 0, 1, 0, 2, 0, 0, 0, 2, 0, 0, 0, 0, 0, 3),
    (3, 0, 2, 0, 2, 2, 2, 0, 2, 1, 2, 0, 2, 2, 2, 0, 2, 2, 2, 2, 3),
    (3, 0, 2, 0, 0, 0, 2, 0, 0, 0, 2, 0, 0, 0, 2, 0, 2, 0, 0, 0, 3),
    (3, 2, 2, 2, 2, 0, 2, 2, 2, 0, 2, 2, 2, 0, 1, 0, 2, 2, 2, 0, 3),
    (3, 0, 0, 0, 0, 0, 2, 0, 2, 0, 0, 0, 2, 0, 1, 0, 0, 0, 2, 0, 3),
    (3, 0, 2, 0, 2, 1, 2, 0, 2, 0, 2, 2, 2, 0, 2, 2, 2, 0, 2, 0, 3),
    (3, 0, 1, 0, 1, 0, 0, 0, 0, 0, 2, 0, 0, 0, 2, 0, 0, 0, 0, 0, 3),
    (3, 0, 2, 1, 2, 0, 2, 2, 2, 2, 2, 0, 2, 0, 2, 0, 2, 2, 2, 2, 3),
    (3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2, 0, 0, 0, 0, 0, 3),
    (3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3),
)


def make_map(maze) -> list[list[int]]:
    """Cut a 21x21 map out of a generated maze and surround it with border cells."""
    last = MAP_SIZE - 1
    if len(maze) < last or any(len(row) < last for row in maze[:last]):
        raise ValueError(f"maze must be at least {last}x{last}")
    return [
        [
            BORDER if i in (0, last) or j in (0, last) else maze[i][j]
            for j in range(MAP_SIZE)
        ]
        for i in range(MAP_SIZE)
    ]


def _default_light() -> Light:
    white = (1.0, 1.0, 1.0, 1.0)
    return Light(
        position=(20.0, 20.0, 15.0, 1.0), ambient=white, diffuse=white, specular=white
    )


def _default_camera() -> Camera:
    camera = Camera()
    camera.set_position(CAMERA_START)
    return camera


@dataclass
class World:
    """Map objects indexed [x][y] (None for free cells), the player, camera and light."""

    objects: list[list[GameObject | None]]
    player: GameObject
    camera: Camera = field(default_factory=_default_camera)
    light: Light = field(default_factory=_default_light)

    @classmethod
    def build(cls, factory: GameObjectFactory, grid=None) -> "World":
        """Create map objects from cell codes (1 light, 2 heavy, 3 border, else free)."""
        if grid is None:
            grid = PASSABILITY_MAP
        objects = [
            [
                factory.create(_CELL_TYPES[cell], x, y) if cell in _CELL_TYPES else None
                for y, cell in enumerate(row)
            ]
            for x, row in enumerate(grid)
        ]
        player = factory.create(GameObjectType.PLAYER, *PLAYER_START)
        return cls(objects=objects, player=player)

    def object_at(self, x: int, y: int) -> GameObject | None:
        """Return the object in cell (x, y), or None if the cell is free."""
        if not 0 <= x < len(self.objects) or not 0 <= y < len(self.objects[x]):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.objects[x][y]