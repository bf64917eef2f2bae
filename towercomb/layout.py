"""Turn a parsed level into the tiles, walls, floors and path nodes of its scene."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass, field

from towercomb.animation import AnimationFrameQueue
from towercomb.level import CellDirection, Level

LEVEL_SCALING = 10.0
WALL_TOTAL_WIDTH = 0.10
PICKABLE_SIZE = 2.0
FLOOR_TOTAL_HEIGHT = 0.10

TILE_VARIANTS = 8
TILE_DEPTH = -10.0
SPAWNER_FRAMES = (0, 1, 2, 3, 4)
SPAWNER_SIZE = LEVEL_SCALING * 0.8
SPAWNER_ALPHA = 0.95

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


class WallDirection(enum.Enum):
    """Which side of a wall line a wall piece faces."""

    LEFT = "left"
    RIGHT = "right"


class GeneralPosition(enum.Enum):
    """Whether an edge separates cells vertically or horizontally."""

    UP_DOWN = "up_down"
    LEFT_RIGHT = "left_right"


class ExactPosition(enum.Enum):
    """The exact surface a piece of architecture presents."""

    FLOOR = "floor"
    CEILING = "ceiling"
    LEFT_WALL = "left_wall"
    RIGHT_WALL = "right_wall"

    @classmethod
    def wall(cls, direction: WallDirection) -> ExactPosition:
        return cls.LEFT_WALL if direction is WallDirection.LEFT else cls.RIGHT_WALL

    @property
    def wall_direction(self) -> WallDirection | None:
        if self is ExactPosition.LEFT_WALL:
            return WallDirection.LEFT
        if self is ExactPosition.RIGHT_WALL:
            return WallDirection.RIGHT
        return None

    @property
    def general_position(self) -> GeneralPosition:
        if self.wall_direction is None:
            return GeneralPosition.UP_DOWN
        return GeneralPosition.LEFT_RIGHT


@dataclass(frozen=True)
class AdjacentId:
    """Identifies one grid edge; both faces of the edge share it."""

    unit_x: int
    unit_y: int
    general_position: GeneralPosition


@dataclass(frozen=True)
class Adjacent:
    """The edge a piece belongs to and the face it presents."""

    id: AdjacentId
    exact_position: ExactPosition


@dataclass(frozen=True)
class Piece:
    """One static, pickable piece of level architecture."""

    position: ExactPosition
    x: float
    y: float
    adjacent: Adjacent
    collider: Vec2
    friction: float
    pickable_size: Vec2
    anchor: str
    sprite_index: int
    sprite_offset: Vec3
    sprite_rotation: float = 0.0

    @property
    def wall_direction(self) -> WallDirection | None:
        return self.position.wall_direction


@dataclass
class PathNode:
    """A point on the enemies' path, with its direction and the one before it."""

    x: float
    y: float
    direction: CellDirection
    prev_direction: CellDirection
    is_start: bool = False
    is_end: bool = False
    animation: AnimationFrameQueue | None = None


@dataclass(frozen=True)
class FloorTile:
    """A background tile drawn behind the level grid."""

    x: float
    y: float
    atlas_index: int
    size: float = LEVEL_SCALING
    z: float = TILE_DEPTH


@dataclass
class LevelLayout:
    """Everything spawned for a level."""

    tiles: list[FloorTile] = field(default_factory=list)
    pieces: list[Piece] = field(default_factory=list)
    nodes: list[PathNode] = field(default_factory=list)

    @property
    def start(self) -> PathNode:
        return next(node for node in self.nodes if node.is_start)

    @property
    def end(self) -> PathNode:
        return next(node for node in self.nodes if node.is_end)

    def pieces_at(self, position: ExactPosition) -> list[Piece]:
        return [piece for piece in self.pieces if piece.position is position]

    def pieces_with_id(self, adjacent_id: AdjacentId) -> list[Piece]:
        """All pieces on the given edge, one for each of its faces."""
        return [piece for piece in self.pieces if piece.adjacent.id == adjacent_id]


def _adjacent(unit_x: int, unit_y: int, exact: ExactPosition) -> Adjacent:
    return Adjacent(AdjacentId(unit_x, unit_y, exact.general_position), exact)


def _wall(x: float, y: float, direction: WallDirection, unit_x: int, unit_y: int) -> Piece:
    exact = ExactPosition.wall(direction)
    return Piece(
        position=exact,
        x=x,
        y=y,
        adjacent=_adjacent(unit_x, unit_y, exact),
        collider=(WALL_TOTAL_WIDTH / 2.0 * LEVEL_SCALING, LEVEL_SCALING),
        friction=0.3,
        pickable_size=(PICKABLE_SIZE, LEVEL_SCALING),
        anchor="center_left" if direction is WallDirection.LEFT else "center_right",
        sprite_index=2,
        sprite_offset=(0.0, 0.0, 0.1),
        sprite_rotation=math.pi / 2.0,
    )


def _ceiling(x: float, y: float, unit_x: int, unit_y: int) -> Piece:
    return Piece(
        position=ExactPosition.CEILING,
        x=x,
        y=y,
        adjacent=_adjacent(unit_x, unit_y, ExactPosition.CEILING),
        collider=(LEVEL_SCALING, WALL_TOTAL_WIDTH / 2.0 * LEVEL_SCALING),
        friction=0.0,
        pickable_size=(LEVEL_SCALING, PICKABLE_SIZE),
        anchor="top_center",
        sprite_index=1,
        sprite_offset=(0.0, -0.06, 0.0),
    )


def _floor(x: float, y: float, unit_x: int, unit_y: int) -> Piece:
    return Piece(
        position=ExactPosition.FLOOR,
        x=x,
        y=y,
        adjacent=_adjacent(unit_x, unit_y, ExactPosition.FLOOR),
        collider=(LEVEL_SCALING, WALL_TOTAL_WIDTH / 4.0 * LEVEL_SCALING),
        friction=0.3,
        pickable_size=(LEVEL_SCALING, PICKABLE_SIZE),
        anchor="bottom_center",
        sprite_index=0,
        sprite_offset=(0.0, 0.06, 0.0),
    )


def _tiles(level: Level, rng: random.Random) -> list[FloorTile]:
    return [
        FloorTile(
            x=x * LEVEL_SCALING - LEVEL_SCALING / 2.0,
            y=y * LEVEL_SCALING - LEVEL_SCALING / 2.0,
            atlas_index=rng.randrange(TILE_VARIANTS),
        )
        for x in range(level.width + 1)
        for y in range(level.height + 1)
    ]


def _wall_pieces(level: Level) -> list[Piece]:
    pieces = []
    for x, column in enumerate(level.walls):
        for y, present in enumerate(column):
            if not present:
                continue
            pieces.append(
                _wall((x - 0.5 - WALL_TOTAL_WIDTH / 4.0) * LEVEL_SCALING,
                      y * LEVEL_SCALING, WallDirection.RIGHT, x, y)
            )
            pieces.append(
                _wall((x - 0.5 + WALL_TOTAL_WIDTH / 4.0) * LEVEL_SCALING,
                      y * LEVEL_SCALING, WallDirection.LEFT, x, y)
            )
    return pieces


def _floor_pieces(level: Level) -> list[Piece]:
    pieces = []
    for x, column in enumerate(level.floors):
        for y, present in enumerate(column):
            if not present:
                continue
            pieces.append(
                _ceiling(x * LEVEL_SCALING,
                         (y - 0.5 - FLOOR_TOTAL_HEIGHT / 4.0) * LEVEL_SCALING, x, y)
            )
            pieces.append(
                _floor(x * LEVEL_SCALING,
                       (y - 0.5 + FLOOR_TOTAL_HEIGHT / 4.0) * LEVEL_SCALING, x, y)
            )
    return pieces


def _path_nodes(level: Level) -> list[PathNode]:
    if len(level.path) < 2:
        raise ValueError("a level path needs at least a start and an end point")

    (start_pos, start_dir), *middle, (end_pos, end_dir) = level.path
    nodes = [
        PathNode(
            start_pos[0] * LEVEL_SCALING,
            start_pos[1] * LEVEL_SCALING,
            start_dir,
            start_dir,
            is_start=True,
            animation=AnimationFrameQueue(SPAWNER_FRAMES),
        )
    ]
    last_direction = start_dir
    for (x, y), direction in middle:
        nodes.append(
            PathNode(x * LEVEL_SCALING, y * LEVEL_SCALING, direction, last_direction)
        )
        last_direction = direction
    nodes.append(
        PathNode(end_pos[0] * LEVEL_SCALING, end_pos[1] * LEVEL_SCALING,
                 end_dir, end_dir, is_end=True)
    )
    return nodes


def build_layout(level: Level, rng: random.Random | None = None) -> LevelLayout:
    """Lay out tiles, architecture and path nodes for ``level``."""
    rng = rng if rng is not None else random.Random()
    return LevelLayout(
        tiles=_tiles(level, rng),
        pieces=_wall_pieces(level) + _floor_pieces(level),
        nodes=_path_nodes(level),
    )