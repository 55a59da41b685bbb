"""Game objects on the logical map grid and their smooth movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from mazeblocks.graphic_object import GraphicObject

MOVE_SPEED = 0.3
GRID_OFFSET = 10


class MoveDirection(Enum):
    STOP = "stop"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class GameObjectType(Enum):
    LIGHT_OBJECT = "light_object"
    HEAVY_OBJECT = "heavy_object"
    BORDER_OBJECT = "border_object"
    PLAYER = "player"
    BOMB = "bomb"
    MONSTER = "monster"


def _world_position(x: int, y: int) -> tuple[float, float, float]:
    return (float(x - GRID_OFFSET), 0.0, float(y - GRID_OFFSET))


@dataclass
class GameObject:
    """An object at integer map coordinates, drawn through its own graphic object."""

    position: tuple[int, int] = (0, 0)
    graphic_object: GraphicObject = field(default_factory=GraphicObject)
    state: MoveDirection = MoveDirection.STOP
    progress: float = 0.0
    speed: float = 0.0
    object_type: GameObjectType | None = None

    def set_graphic_object(self, graphic_object: GraphicObject) -> None:
        """Take a copy of the graphic object and place it at this object's cell."""
        self.graphic_object = graphic_object.copy()
        self.graphic_object.position = _world_position(*self.position)

    def place(self, x: int, y: int) -> None:
        """Move both the logical position and the drawn position to a cell at once."""
        self.position = (x, y)
        self.graphic_object.position = _world_position(x, y)

    def move(self, direction: MoveDirection) -> None:
        """Start moving in the given direction."""
        self.speed = MOVE_SPEED
        self.state = direction
        self.progress = 0.0

    def is_moving(self) -> bool:
        return self.state is not MoveDirection.STOP

    def simulate(self, target, delta_time: float) -> None:
        """Advance the drawn position towards a target cell; stop on arrival."""
        if self.state is MoveDirection.STOP:
            return
        tx, ty = target
        current = self.graphic_object.position
        goal = _world_position(tx, ty)
        distance = math.dist(current, goal)
        step = self.speed * delta_time
        fraction = 1.0 if distance == 0 else min(1.0, step / distance)
        self.graphic_object.position = tuple(
            c + (g - c) * fraction for c, g in zip(current, goal)
        )
        if distance <= step:
            self.graphic_object.position = goal
            self.state = MoveDirection.STOP
            self.position = (tx, ty)