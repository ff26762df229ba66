# mobagen

A small, dependency-free library of 2D game logic and game AI.

It has three parts:

- **Core math and data structures**: `Point2D`, `Vector2`, `Transform`,
  `Polygon` (with the `circle`, `square` and `hexagon` shapes), `Grid2D`,
  `BinaryTree`, the colour types `Color32` and `Colorf`, and the named
  colours in `Palette`.
- **Catch the Cat** (`mobagen.catchthecat`): a hexagonal board on which a
  cat tries to reach the border while a catcher blocks cells. Both players
  are agents (`Cat`, `Catcher`) that plan with a weighted shortest-path
  search.
- **Chess** (`mobagen.chess`): a packed board (`WorldState`), move
  generation for every piece, a material-based evaluation and a three-ply
  search that picks the next move.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Points, vectors and shapes

```python
from mobagen.point2d import Point2D
from mobagen.vector2 import Vector2
from mobagen.transform import Transform
from mobagen.polygon import hexagon

p = Point2D(2, 3).up()               # Point2D(2, 2): y grows downwards
v = Vector2.up().rotate(90)          # rotate by degrees
print(v.magnitude(), v.angle_degree())

points = hexagon().drawable_points(Transform())
edges = hexagon().edges(Transform())  # closed loop of integer segments
```

`Point2D` is a frozen integer coordinate; points compare with `<` by the sum
of their coordinates. `Vector2` is a frozen float vector whose equality is
approximate (squared distance below `1e-6`), so it is not hashable.
`Transform` holds `position`, `scale` and `rotation` (the vector pointing
up).

## Data structures

- `mobagen.grid2d.Grid2D(width, height, fill)` stores cells in one flat list,
  indexed with `(x, y)` tuples or `Point2D`. Out-of-range cells raise
  `IndexError`; `resize` truncates or pads with the fill value.
- `mobagen.tree.BinaryTree` is an unbalanced search tree: `add(value)` puts
  equal values to the right, and iterating yields the values in sorted order.

## Colours

`mobagen.colors.Color32` has byte components `r`, `g`, `b`, `a` (alpha 255 is
opaque) and packs as `0xAABBGGRR` with `from_packed` / `packed()`. Indexing
returns alpha, red, green, blue for 0 to 3. `lerp`, `light()`, `dark()` and
`random_color` make new colours. `Colorf` has float components;
`Colorf.hsv_to_rgb(h, s, v, hdr=True)` and `Colorf.rgb_to_hsv(color)` convert
to and from hue, saturation and value. `Palette` holds named colours such as
`Palette.RED` and `Palette.LIGHT_BLUE`.

## Catch the Cat

```python
from mobagen.catchthecat.world import World

world = World.random(11)   # odd side length, cat starts in the centre
while not (world.cat_won or world.catcher_won):
    world.step()           # cat and catcher take turns
print(world.render())      # C cat, # blocked, . free
```

The map is centred on `(0, 0)`. The cat wins when it reaches the border; the
catcher wins when all six neighbours of the cat are blocked. An agent that
proposes an illegal move loses at once. Calling `step()` again after a win
starts a new random board. `update(delta_time)` steps on a timer while
`is_simulating` is set.

A `World` can also be built directly from a side size, whose turn it is, the
cat position and a list of blocked cells. The hex directions (`ne`, `nw`, `e`,
`w`, `se`, `sw`), `neighbors` and `is_neighbor` are in
`mobagen.catchthecat.hexgrid`.

## Chess

```python
from mobagen.chess.state import WorldState
from mobagen.chess.search import next_move
from mobagen.chess.heuristics import material_score

state = WorldState()
state.reset()
print(state)

move = next_move(state)          # the board passed in is left unchanged
state.move(move.origin, move.target)
print(material_score(state))     # positive means White is ahead
```

The board is stored as 32 bytes, two squares per byte; rank 0 is White's back
rank and White moves first. `WorldState.move` raises `IllegalMoveError` when
the piece is off the board, belongs to the wrong side, or the target holds a
piece of the same side. Per-piece move generation is in
`mobagen.chess.pieces`; king moves, check counting (`is_in_check`) and
whole-side move listing (`list_moves`) are in `mobagen.chess.moves`.
`next_move` raises `ValueError` when a ply has no moves to explore.

## What it does not do

- There is no window, drawing or interactive play: the games run only
  through the API above, and the only picture is `World.render()` /
  `str(WorldState)` text.
- There is no command-line program.
- Chess rules are simplified: no castling, en passant or promotion, and moves
  are not checked for leaving the own king in check.