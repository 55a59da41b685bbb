"""Frame timing and the per-frame game logic: player movement and cube pushing."""

from __future__ import annotations

import time

from mazeblocks.factory import GameObjectFactory
from mazeblocks.game_object import GameObjectType, MoveDirection
from mazeblocks.world import World

PLAYER_SPEED_FACTOR = 10

_OFFSETS = {
    MoveDirection.LEFT: (0, 1),
    MoveDirection.RIGHT: (0, -1),
    MoveDirection.UP: (-1, 0),
    MoveDirection.DOWN: (1, 0),
    MoveDirection.STOP: (0, 0),
}


def _neighbour(cell, direction: MoveDirection) -> tuple[int, int]:
    dx, dy = _OFFSETS[direction]
    return cell[0] + dx, cell[1] + dy


class FrameClock:
    """Measures time between simulation steps and frames per second."""

    def __init__(self, clock=time.perf_counter) -> None:
        self._clock = clock
        start = clock()
        self._last = start
        self._last_fps = start
        self.frame_count = 0
        self.fps = 0

    def tick(self) -> float:
        """Return the seconds passed since the previous tick."""
        now = self._clock()
        delta = now - self._last
        self._last = now
        return delta

    def frame(self) -> int:
        """Count a drawn frame; the FPS value is refreshed once per second."""
        now = self._clock()
        self.frame_count += 1
        elapsed = now - self._last_fps
        if elapsed >= 1.0:
            self.fps = int(self.frame_count / elapsed)
            self.frame_count = 0
            self._last_fps = now
        return self.fps


def move_player(world: World, target, delta_time: float) -> None:
    world.player.simulate(target, delta_time * PLAYER_SPEED_FACTOR)


def push_cube(
    world: World,
    factory: GameObjectFactory,
    target,
    direction: MoveDirection,
    delta_time: float,
) -> None:
    """Push the light cube at target one cell further if that cell is free."""
    tx, ty = target
    cube = world.object_at(tx, ty)
    nx, ny = _neighbour(target, direction)
    if world.object_at(nx, ny) is not None:
        return
    cube.place(nx, ny)
    world.objects[nx][ny] = cube
    world.objects[tx][ty] = None
    cube.simulate((nx, ny), delta_time)
    move_player(world, (tx, ty), delta_time)
    world.objects[nx][ny] = factory.create(GameObjectType.LIGHT_OBJECT, nx, ny)


def simulate_world(world: World, factory: GameObjectFactory, delta_time: float) -> None:
    """Advance a moving player: walk into free cells, push light cubes, stop at nothing else."""
    direction = world.player.state
    if direction is MoveDirection.STOP:
        return
    target = _neighbour(world.player.position, direction)
    obstacle = world.object_at(*target)
    if obstacle is None:
        move_player(world, target, delta_time)
    elif obstacle.object_type is GameObjectType.LIGHT_OBJECT:
        push_cube(world, factory, target, direction, delta_time)