"""Layout constants for rendering a contraption."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

# Tile metrics
TILE_SIZE: int = 32
BOARD_OUTER_PADDING: int = 16
GLYPH_FONT_SIZE: int = 18

# Colors expressed as RGB tuples
BACKGROUND_COLOR: Tuple[int, int, int] = (12, 14, 26)
TILE_COLOR: Tuple[int, int, int] = (20, 24, 44)
ENERGIZED_COLOR: Tuple[int, int, int] = (255, 94, 0)
GRID_LINE_COLOR: Tuple[int, int, int] = (58, 64, 96)
GLYPH_COLOR: Tuple[int, int, int] = (232, 236, 244)

# Energized tiles visited this many times or more are drawn at full brightness.
ENERGY_SATURATION: int = 4

GLYPH_TEXT: Dict[str, str] = {
    ".": "",
    "/": "/",
    "\\": "\\",
    "-": "-",
    "|": "|",
}


@dataclass(frozen=True)
class BoardGeometry:
    """Pixel rectangles for the board and the whole window."""

    board: Tuple[int, int, int, int]
    window: Tuple[int, int]


def compute_geometry(grid_width: int, grid_height: int, tile_size: int = TILE_SIZE) -> BoardGeometry:
    """Compute the board rectangle and window size for a grid."""

    board_width = grid_width * tile_size
    board_height = grid_height * tile_size
    board_rect = (BOARD_OUTER_PADDING, BOARD_OUTER_PADDING, board_width, board_height)
    window = (
        board_width + 2 * BOARD_OUTER_PADDING,
        board_height + 2 * BOARD_OUTER_PADDING,
    )
    return BoardGeometry(board=board_rect, window=window)
