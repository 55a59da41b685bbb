# mazeblocks

The model behind a small 3D block-pushing maze game. It handles maze generation, the game
logic and the scene data. The package uses only the standard library.

## Modules

- **`mazeblocks.maze`**
  - `generate_maze(width, height, rng=None)` builds a `(2*height+1) × (2*width+1)` grid with
    Eller's algorithm.
  - Cell values: `PATH` (0), `LIGHT_WALL` (1, a pushable block) and `WALL` (2).
  - After the maze is carved, up to about a tenth of the wall cells are turned into light
    blocks. The cells are chosen at random and may repeat.
  - Pass a `random.Random` as `rng` to get a result you can reproduce.
  - Sizes below 1 or above 10000 raise `ValueError`.
  - `format_maze(maze)` renders a grid as one line of digits per row.
- **`mazeblocks.camera`**
  - `Camera` is an orbit camera around the origin. It is described by `r`, `angle_x` and
    `angle_y`, and its `position` is computed from those three values.
  - `set_position(point)` derives the radius and angles from a point.
  - `rotate_left_right(degree)` changes `angle_y`.
  - `rotate_up_down(degree)` and `zoom_in_out(distance)` ignore any change that would leave
    5–85° or a radius of 15–60.
  - `look_at()` returns `(eye, center, up)`.
- **`mazeblocks.material`**
  - `PhongMaterial` holds `ambient`, `diffuse`, `specular` and `emission` colours and a
    `shininess` value.
  - `PhongMaterial.from_text(text)` and `PhongMaterial.load(path)` read the text format. It
    is made of the words `diffuse:`, `ambient:`, `specular:` and `emission:`, each followed
    by four numbers, and `shininess:` followed by one number.
- **`mazeblocks.light`**
  - `Light` stores a position and ambient, diffuse and specular colours.
  - `Light.parameters()` returns the fixed lighting values that are applied, whatever the
    light stores: a red directional light at `(20, 20, 15)` over a global ambient of 0.2.
- **`mazeblocks.mesh`**
  - `Mesh.parse(text)` and `Mesh.load(path)` read triangulated Wavefront OBJ data: `v`,
    `vt`, `vn`, and `f` with three `v/vt/vn` corners.
  - Identical corners share one `Vertex`. The mesh keeps `vertices` and triangle `indices`.
  - Malformed data raises `MeshFormatError`.
- **`mazeblocks.graphic_object`**
  - `GraphicObject` carries a position, angle, colour, material and mesh.
  - `model_matrix()` returns a column-major 4×4 translation matrix. Only the position is
    used.
  - `copy()` returns a copy that shares the material and the mesh.
- **`mazeblocks.game_object`**
  - `GameObject` sits on an integer grid cell and has a `GameObjectType`. Its drawn position
    is the cell offset by −10 on x and z.
  - `move(direction)` starts a movement with a `MoveDirection`.
  - `simulate(target, delta_time)` moves the drawn position towards a target cell. On
    arrival it stops the object and updates the cell.
  - `place(x, y)` moves the object to a cell at once.
- **`mazeblocks.factory`**
  - `GameObjectFactory.load(path)` reads a JSON description. `load_description(description,
    base_dir=None)` takes the description as an already parsed mapping.
  - `create(object_type, x, y)` builds an object from the loaded mesh and material for that
    type.
  - `material_from_json(node)` builds a `PhongMaterial` from a JSON object.
  - Problems with the description raise `FactoryError`.
- **`mazeblocks.world`**
  - `make_map(maze)` cuts a 21×21 level out of a generated maze and surrounds it with border
    cells (3).
  - `World.build(factory, grid=None)` creates an object for each cell: 1 gives a light
    object, 2 a heavy object, 3 a border object, and any other value leaves the cell free.
    The player starts at `(1, 1)`.
  - Without a grid, `World.build` uses the built-in level `PASSABILITY_MAP`.
  - `object_at(x, y)` returns the object in a cell, or `None` for a free cell.
- **`mazeblocks.simulation`**
  - `simulate_world(world, factory, delta_time)` advances a moving player by one frame. The
    player walks into free cells. A light block in its way is pushed into the free cell
    beyond it; a new light object is created at the block's new cell. Any other obstacle
    stops nothing and is not entered.
  - `move_player` and `push_cube` are the two steps that `simulate_world` uses.
  - `FrameClock.tick()` returns the seconds since the last tick.
  - `FrameClock.frame()` counts frames and refreshes `fps` once per second.
- **`mazeblocks.projection`**
  - `Projection` switches between perspective and orthographic modes with `toggle()`.
  - `zoom(distance)` changes the orthographic scale, clamped to 0.3–2.3.
  - `parameters(width, height)` returns a `Perspective` or an `Orthographic` record that
    keeps the window's aspect ratio.
- **`mazeblocks.color_cycle`**
  - `GradientCycle` and `ColorSwitcher` are frame-stepped colour animations.
  - `step()` returns the colour to draw.
  - `key_pressed(key)` skips ahead one palette entry and returns a `"Key code is N"` line.

## Object description format

```json
{
  "Player": {
    "mesh": "meshes/Sphere.obj",
    "material": {
      "diffuse": [0.8, 0.8, 0.8, 1.0],
      "ambient": [0.2, 0.2, 0.2, 1.0],
      "specular": [1.0, 1.0, 1.0, 1.0],
      "emission": [0.0, 0.0, 0.0, 1.0],
      "shininess": 64
    }
  }
}
```

The recognised keys are `LightObject`, `HeavyObject`, `BorderObject`, `Player`, `Bomb` and
`Monster`.

`load` opens mesh paths exactly as they are written. `load_description` resolves relative
paths against `base_dir` when one is given.

## Example

```python
import random

from mazeblocks.factory import GameObjectFactory
from mazeblocks.game_object import MoveDirection
from mazeblocks.maze import format_maze, generate_maze
from mazeblocks.simulation import FrameClock, simulate_world
from mazeblocks.world import World, make_map

maze = generate_maze(20, 20, random.Random(7))
print(format_maze(maze))
level = make_map(maze)  # 21×21, bordered with 3s

factory = GameObjectFactory()
factory.load("data/GameObjectsDescription.json")
world = World.build(factory, level)

clock = FrameClock()
world.player.move(MoveDirection.DOWN)
simulate_world(world, factory, clock.tick())
```

## What it does not do

The package has no window, no rendering and no keyboard or mouse handling. It has no
command to run either. It computes the maze, the game state, the mesh and material data,
and the camera, light and projection parameters. Drawing them and feeding input to
`GameObject.move`, `Camera` and `Projection` is left to the program that uses the package.