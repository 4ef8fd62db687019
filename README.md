# mobagen

`mobagen` is a small library with no dependencies. It has two parts:

- **2D helpers**: integer points, float vectors, transforms, outline polygons,
  RGBA colours with the usual named colours, and inclusive random ranges.
- **Chess**: a compact board that packs each piece into four bits, move
  generation for every piece, a material-and-mobility evaluation, and a
  three-ply look-ahead that picks the next move.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Chess

```python
from mobagen.chess.board import WorldState
from mobagen.chess.heuristics import material_score
from mobagen.chess.search import next_move

state = WorldState()
state.reset()
print(state)                  # the board, rank 8 at the top, files A to H below
print(material_score(state))  # a positive score favours white

move = next_move(state)
state.move(move.origin, move.target)
```

- `mobagen.chess.board` holds `WorldState`, `PieceData`, `PieceType`,
  `PieceColor`, `Move`, `MoveType` and `MoveState`. `WorldState.piece_at`
  returns `PieceData.wrong()` for squares off the board. `WorldState.move`
  raises `IllegalMoveError` when the source square is off the board, when it
  holds a piece of the side that is not to move, or when the target holds a
  piece of the same colour. `WorldState.copy` gives an independent board.
- Piece moves take a board and a `mobagen.point2d.Point2D` origin and return a
  set of target squares:
  `mobagen.chess.sliders` (`bishop_attack_moves`, `rook_attack_moves`,
  `queen_attack_moves` and their `*_cover_moves`),
  `mobagen.chess.knight` (`knight_attack_moves`, `knight_cover_moves`),
  `mobagen.chess.pawn` (`pawn_possible_moves`, `pawn_attack_moves`,
  `pawn_cover_moves`, plus `count_doubles` and `is_isolated`), and
  `mobagen.chess.king` (`king_attack_moves`, `king_cover_moves_naive`).
  Attack moves reach empty or enemy squares; cover moves reach empty or
  friendly squares. A square that does not hold the right piece gives an
  empty set.
- `mobagen.chess.king` also offers `find_king`, `is_in_check` (the number of
  opposing moves that land on the king), `list_moves` for a side, and
  `list_places_king_cannot_go`.
- `mobagen.chess.search.next_move` raises `ValueError` when a line runs out
  of moves before the third ply.

Castling, en passant and promotion are not generated.

## 2D helpers

```python
from mobagen.point2d import Point2D
from mobagen.vector2 import Vector2
from mobagen.transform import Transform
from mobagen.polygon import hexagon
from mobagen.color import Color32, Colorf, named_color

Point2D(1, 2) + Point2D.RIGHT            # Point2D(x=2, y=2)
Vector2.up().rotate(90)                  # roughly Vector2(1, 0)
points = hexagon().drawable_points(Transform(position=Vector2(100, 100),
                                             scale=Vector2(10, 10)))
red = named_color("Red")                 # Color32(r=255, g=0, b=0, a=255)
hex(red.packed())                        # '0xff0000ff', laid out as 0xAABBGGRR
Colorf.hsv_to_rgb(0.0, 1.0, 1.0)         # Colorf(r=1.0, g=0.0, b=0.0, a=1.0)
```

- `Point2D` is frozen and hashable, with `up`, `down`, `left`, `right` and
  `is_on_border`. Note that up is `y - 1`.
- `Vector2` is frozen and compares approximately. It supports arithmetic,
  rotation, angles, magnitude, distance and `normalized`.
- `Polygon.draw` and `draw_line` in `mobagen.polygon` draw onto any object
  that has `set_draw_color(r, g, b, a)` and `draw_line(x1, y1, x2, y2)`.
- `mobagen.randomness.random_range` returns an integer for two integers and a
  float otherwise. Both ends are inclusive.

## What this package does not do

There is no game loop, window, input handling or scene management. There is
no playable game and no command-line entry point either. Drawing goes only as
far as `mobagen.polygon` calling a renderer object that you supply. The
`mobagen.catchthecat` package is empty.