"""Level maps: path directions and the walls and floors they carve out."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

START_LEVEL = 0

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


class CellDirection(enum.Enum):
    """The direction enemies move in when leaving a cell."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def vector(self) -> Vec2:
        dx, dy = self.value
        return (float(dx), float(dy))

    def clockwise(self) -> CellDirection:
        return _CLOCKWISE[self]

    def counter_clockwise(self) -> CellDirection:
        return _COUNTER_CLOCKWISE[self]

    def flip(self) -> CellDirection:
        return _FLIPPED[self]

    def sprite_offset(self, is_trap_door: bool) -> tuple[Vec3, Vec3]:
        """Return (translation, scale) placing a tower sprite against its surface."""
        if is_trap_door:
            return ((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
        return _SPRITE_OFFSETS[self]


_CLOCKWISE = {
    CellDirection.UP: CellDirection.RIGHT,
    CellDirection.DOWN: CellDirection.LEFT,
    CellDirection.LEFT: CellDirection.UP,
    CellDirection.RIGHT: CellDirection.DOWN,
}
_COUNTER_CLOCKWISE = {after: before for before, after in _CLOCKWISE.items()}
_FLIPPED = {
    CellDirection.UP: CellDirection.DOWN,
    CellDirection.DOWN: CellDirection.UP,
    CellDirection.LEFT: CellDirection.RIGHT,
    CellDirection.RIGHT: CellDirection.LEFT,
}
_SPRITE_OFFSETS = {
    CellDirection.UP: ((0.0, -5.0, 0.0), (1.0, 1.0, 1.0)),
    CellDirection.DOWN: ((0.0, 5.0, 0.0), (1.0, 1.0, 1.0)),
    CellDirection.RIGHT: ((-5.0, 0.0, 0.0), (-1.0, 1.0, 1.0)),
    CellDirection.LEFT: ((5.0, 0.0, 0.0), (1.0, 1.0, 1.0)),
}
_CHAR_DIRECTIONS = {
    ">": CellDirection.RIGHT,
    "^": CellDirection.UP,
    "<": CellDirection.LEFT,
    "v": CellDirection.DOWN,
    "x": CellDirection.UP,
    "X": CellDirection.UP,
}


def parse_direction(char: str) -> CellDirection:
    """Map one map character to its direction."""
    try:
        return _CHAR_DIRECTIONS[char]
    except KeyError:
        raise ValueError(f"unknown map character {char!r}") from None


@dataclass
class Level:
    """Everything needed to lay out a level.

    ``walls[x][y]`` is the vertical edge on the left of cell (x, y);
    ``floors[x][y]`` is the horizontal edge below it.
    """

    path: list[tuple[Vec2, CellDirection]] = field(default_factory=list)
    width: int = 0
    height: int = 0
    walls: list[list[bool]] = field(default_factory=list)
    floors: list[list[bool]] = field(default_factory=list)


def parse_level(map_str: str) -> Level:
    """Build a level from a rectangular grid of direction characters.

    The bottom line is row 0. The path starts at the bottom-left cell and
    follows the directions until it leaves the grid, opening each edge it
    crosses.
    """
    rows = [
        [parse_direction(char) for char in line]
        for line in reversed(map_str.splitlines())
    ]
    if not rows:
        raise ValueError("level map is empty")

    height = len(rows)
    width = len(rows[0])
    level = Level(
        path=[],
        width=width,
        height=height,
        walls=[[True] * height for _ in range(width + 1)],
        floors=[[True] * (height + 1) for _ in range(width)],
    )

    x = y = 0
    visited: set[tuple[int, int]] = set()
    while 0 <= x < width and 0 <= y < height:
        if (x, y) in visited:
            raise ValueError(f"path loops back to cell ({x}, {y})")
        visited.add((x, y))
        row = rows[y]
        if x >= len(row):
            raise ValueError(f"row {y} is shorter than the first row")
        direction = row[x]
        level.path.append(((float(x), float(y)), direction))

        if direction is CellDirection.UP:
            level.floors[x][y + 1] = False
        elif direction is CellDirection.DOWN:
            level.floors[x][y] = False
        elif direction is CellDirection.LEFT:
            level.walls[x][y] = False
        else:
            level.walls[x + 1][y] = False

        dx, dy = direction.value
        level.path.append(((x + dx / 2, y + dy / 2), direction))
        x += dx
        y += dy
    return level