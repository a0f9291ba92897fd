"""Beam propagation and energization accounting for a single trial."""

from __future__ import annotations

import logging
from typing import Dict, List, Set, Tuple

import numpy as np

from .grid import Direction, Grid, Position


logger = logging.getLogger(__name__)

START_POSITION: Position = (0, 0)
START_DIRECTION = Direction.RIGHT

# Plane of the visited table used for each direction.
DIRECTION_INDEX: Dict[Direction, int] = {
    direction: index for index, direction in enumerate(Direction)
}


class Illumination:
    """Runtime state of one trial: energization counters and visited states.

    The grid is only ever read. Counters and the visited table are dense
    arrays owned by this object, so independent trials never share mutable
    state and can run side by side on the same :class:`Grid`.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        shape = (self.grid.height, self.grid.width)
        self.energized = np.zeros(shape, dtype=np.int64)
        self.visited = np.zeros((len(DIRECTION_INDEX),) + shape, dtype=bool)
        self.split_count = 0
        self.exit_count = 0

    def clone(self) -> "Illumination":
        return Illumination(self.grid)

    def illuminate(self, position: Position, direction: Direction) -> None:
        """Propagate a ray entering ``position`` while travelling ``direction``.

        Pending ray states are kept on an explicit stack. A state is dropped
        when it leaves the grid or when the same ``(direction, position)``
        pair was already processed during this trial, which bounds the work
        by ``4 * width * height`` states.
        """

        pending: List[Tuple[Direction, Position]] = [(direction, position)]
        while pending:
            direction, position = pending.pop()
            tile = self.grid.get(position)
            if tile is None:
                self.exit_count += 1
                continue

            x, y = position
            plane = DIRECTION_INDEX[direction]
            if self.visited[plane, y, x]:
                continue
            self.visited[plane, y, x] = True
            self.energized[y, x] += 1

            outputs = tile.deflect(direction)
            if len(outputs) > 1:
                self.split_count += 1
            # Reversed so the first output is explored first.
            for out_dir in reversed(outputs):
                pending.append((out_dir, out_dir.advance(position)))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Illumination settled: %d energized, %d states visited",
                self.energized_count(),
                self.visited_count,
            )

    @property
    def visited_count(self) -> int:
        return int(np.count_nonzero(self.visited))

    def energized_count(self) -> int:
        return int(np.count_nonzero(self.energized))

    def energized_positions(self) -> Set[Position]:
        ys, xs = np.nonzero(self.energized)
        return {(int(x), int(y)) for x, y in zip(xs, ys)}

    def energized_map(self) -> str:
        return "\n".join(
            "".join("#" if count > 0 else "." for count in row)
            for row in self.energized
        )

    def summary(self) -> Dict[str, object]:
        return {
            "dimensions": f"{self.grid.width}x{self.grid.height}",
            "energized": self.energized_count(),
            "visited_states": self.visited_count,
            "splits": self.split_count,
            "exits": self.exit_count,
        }


def energize(
    grid: Grid,
    position: Position = START_POSITION,
    direction: Direction = START_DIRECTION,
) -> int:
    """Run a fresh trial from ``position`` and return the energized tile count."""

    illumination = Illumination(grid)
    illumination.illuminate(position, direction)
    return illumination.energized_count()
