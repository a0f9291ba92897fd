"""Grid model for the mirror and splitter contraption."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Tuple


Position = Tuple[int, int]


class ParseError(ValueError):
    """Raised when contraption text cannot be turned into a grid."""


class Direction(Enum):
    """Cardinal directions for a travelling ray."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    @staticmethod
    def from_name(name: str) -> "Direction":
        name = name.upper()
        try:
            return Direction[name]
        except KeyError as exc:
            raise ValueError(f"Unknown direction: {name}") from exc

    def advance(self, position: Position) -> Position:
        dx, dy = self.vector
        return position[0] + dx, position[1] + dy

    def reverse(self) -> "Direction":
        mapping = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.RIGHT: Direction.LEFT,
            Direction.LEFT: Direction.RIGHT,
        }
        return mapping[self]


class TileKind(Enum):
    """Optical behaviour of a single tile, keyed by its input character."""

    EMPTY = "."
    MIRROR_FORWARD = "/"
    MIRROR_BACKWARD = "\\"
    SPLITTER_HORIZONTAL = "-"
    SPLITTER_VERTICAL = "|"

    @property
    def symbol(self) -> str:
        return self.value

    @staticmethod
    def from_symbol(symbol: str) -> "TileKind":
        try:
            return TileKind(symbol)
        except ValueError as exc:
            raise ParseError(f"{symbol!r}: invalid tile char") from exc

    def deflect(self, direction: Direction) -> Tuple[Direction, ...]:
        """Directions leaving this tile for a ray arriving in ``direction``."""

        if self is TileKind.MIRROR_FORWARD:
            mapping = {
                Direction.UP: Direction.RIGHT,
                Direction.RIGHT: Direction.UP,
                Direction.DOWN: Direction.LEFT,
                Direction.LEFT: Direction.DOWN,
            }
            return (mapping[direction],)
        if self is TileKind.MIRROR_BACKWARD:
            mapping = {
                Direction.UP: Direction.LEFT,
                Direction.LEFT: Direction.UP,
                Direction.DOWN: Direction.RIGHT,
                Direction.RIGHT: Direction.DOWN,
            }
            return (mapping[direction],)
        if self is TileKind.SPLITTER_HORIZONTAL and direction in (Direction.UP, Direction.DOWN):
            return Direction.LEFT, Direction.RIGHT
        if self is TileKind.SPLITTER_VERTICAL and direction in (Direction.LEFT, Direction.RIGHT):
            return Direction.UP, Direction.DOWN
        return (direction,)

    @property
    def is_splitter(self) -> bool:
        return self in (TileKind.SPLITTER_HORIZONTAL, TileKind.SPLITTER_VERTICAL)


@dataclass(frozen=True)
class Grid:
    """Immutable rectangular field of tiles addressed by ``(x, y)``."""

    width: int
    height: int
    tiles: Tuple[Tuple[TileKind, ...], ...]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        rows: List[str] = [line.rstrip("\r\n") for line in lines]
        while rows and not rows[-1].strip():
            rows.pop()
        if not rows:
            raise ParseError("contraption input is empty")

        width = len(rows[0])
        tiles: List[Tuple[TileKind, ...]] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ParseError(
                    f"row {y} has width {len(row)}, expected {width} (ragged input)"
                )
            parsed = []
            for x, symbol in enumerate(row):
                try:
                    parsed.append(TileKind.from_symbol(symbol))
                except ParseError as exc:
                    raise ParseError(f"{exc} at ({x}, {y})") from None
            tiles.append(tuple(parsed))
        return cls(width=width, height=len(tiles), tiles=tuple(tiles))

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        return cls.from_lines(text.splitlines())

    @property
    def tile_count(self) -> int:
        return self.width * self.height

    def inside(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, position: Position) -> Optional[TileKind]:
        if not self.inside(position):
            return None
        x, y = position
        return self.tiles[y][x]

    def clone(self) -> "Grid":
        return Grid(
            width=self.width,
            height=self.height,
            tiles=tuple(tuple(row) for row in self.tiles),
        )

    def to_text(self) -> str:
        return "\n".join("".join(tile.symbol for tile in row) for row in self.tiles)


class GridLoader:
    """Load contraption layouts stored as plain text files."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def resolve(self, name: str) -> Path:
        candidate = Path(name).expanduser()
        if candidate.is_file():
            return candidate
        path = self.root / f"{name}.txt"
        if not path.exists():
            raise FileNotFoundError(path)
        return path

    def load(self, name: str) -> Grid:
        path = self.resolve(name)
        return Grid.from_text(path.read_text())

    def available(self) -> List[str]:
        if not self.root.is_dir():
            return []
        return sorted(path.stem for path in self.root.glob("*.txt"))
