"""Random maze generation using Eller's row-by-row algorithm."""

from __future__ import annotations

import random

PATH = 0
LIGHT_WALL = 1
WALL = 2
MAX_SIDE = 10000


def _initial_cell(i: int, j: int, rows: int, cols: int) -> int:
    odd_i = i % 2 == 1
    odd_j = j % 2 == 1
    if odd_i and odd_j:
        return PATH
    if odd_i and 0 < j < cols - 1:
        return PATH
    if odd_j and 0 < i < rows - 1:
        return PATH
    return WALL


def generate_maze(
    width: int, height: int, rng: random.Random | None = None
) -> list[list[int]]:
    """Generate a (2*height+1) x (2*width+1) grid of PATH, LIGHT_WALL and WALL cells.

    About a tenth of the wall cells are turned into light (pushable) walls.
    """
    if width < 1 or height < 1:
        raise ValueError("Width and height must be at least 1.")
    if width > MAX_SIDE or height > MAX_SIDE:
        raise ValueError("Width and height are too large.")
    if rng is None:
        rng = random.Random()

    rows = height * 2 + 1
    cols = width * 2 + 1
    maze = [[_initial_cell(i, j, rows, cols) for j in range(cols)] for i in range(rows)]
    wall_count = sum(row.count(WALL) for row in maze)

    sets = [0] * width
    next_set = 1
    for i in range(height):
        cell_row = i * 2 + 1
        below = i * 2 + 2

        for j, current in enumerate(sets):
            if current == 0:
                sets[j] = next_set
                next_set += 1

        for j in range(width - 1):
            if rng.randint(0, 2) == 1 or sets[j] == sets[j + 1]:
                maze[cell_row][j * 2 + 2] = WALL
            else:
                old, new = sets[j + 1], sets[j]
                sets = [new if s == old else s for s in sets]

        for j in range(width):
            bottom_wall = rng.randint(0, 2)
            if bottom_wall == 1 and sets.count(sets[j]) != 1:
                maze[below][j * 2 + 1] = WALL

        if i != height - 1:
            for j in range(width):
                has_hole = any(
                    s == sets[j] and maze[below][col * 2 + 1] == PATH
                    for col, s in enumerate(sets)
                )
                if not has_hole:
                    maze[below][j * 2 + 1] = PATH
            sets = [
                0 if maze[below][j * 2 + 1] == WALL else s for j, s in enumerate(sets)
            ]

    for j in range(width - 1):
        if sets[j] != sets[j + 1]:
            maze[rows - 2][j * 2 + 2] = PATH

    walls = [
        (i, j) for i, row in enumerate(maze) for j, value in enumerate(row) if value == WALL
    ]
    for _ in range(int(wall_count * 0.1)):
        index = rng.randint(0, wall_count - 1)
        if index < len(walls):
            row, col = walls[index]
            maze[row][col] = LIGHT_WALL

    return maze


def format_maze(maze: list[list[int]]) -> str:
    """Render a maze as one line of digits per row."""
    return "".join("".join(str(value) for value in row) + "\n" for row in maze)