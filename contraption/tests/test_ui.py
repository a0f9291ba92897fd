"""Headless rendering tests for the pygame toolkit."""

from __future__ import annotations

from pathlib import Path

from contraption.engine import Illumination
from contraption.grid import Direction, Grid
from contraption.ui import ContraptionUI, compute_geometry, ensure_pygame, render_to_file
from contraption.ui import layout


def make_illumination() -> Illumination:
    grid = Grid.from_lines(["..|.", "....", "...."])
    illumination = Illumination(grid)
    illumination.illuminate((0, 0), Direction.RIGHT)
    return illumination


def pixel(surface, position, cell_size):
    color = surface.get_at((position[0] * cell_size + 3, position[1] * cell_size + 3))
    return (color.r, color.g, color.b)


def test_energized_tiles_are_highlighted():
    illumination = make_illumination()
    ui = ContraptionUI(illumination, cell_size=24)
    surface = ui.render()

    assert surface.get_size() == (4 * 24, 3 * 24)
    assert pixel(surface, (0, 0), 24) == ui.tile_color((0, 0))
    assert pixel(surface, (0, 0), 24) != layout.TILE_COLOR
    assert pixel(surface, (2, 1), 24) != layout.TILE_COLOR
    assert pixel(surface, (3, 0), 24) == layout.TILE_COLOR
    assert pixel(surface, (0, 2), 24) == layout.TILE_COLOR


def test_tile_color_saturates_with_visits():
    illumination = make_illumination()
    ui = ContraptionUI(illumination, cell_size=16)

    illumination.energized[1, 1] = layout.ENERGY_SATURATION * 3
    assert ui.tile_color((1, 1)) == layout.ENERGIZED_COLOR


def test_renders_onto_a_provided_surface():
    pygame = ensure_pygame()
    surface = pygame.Surface((64, 48))
    ui = ContraptionUI(make_illumination(), cell_size=16, surface=surface)

    assert ui.render() is surface


def test_render_to_file(tmp_path: Path):
    path = render_to_file(make_illumination(), tmp_path / "snapshot.bmp", cell_size=8)

    assert path.exists()
    loaded = ensure_pygame().image.load(str(path))
    assert loaded.get_size() == (32, 24)


def test_geometry_pads_the_board():
    geometry = compute_geometry(4, 3, tile_size=10)

    assert geometry.board[2:] == (40, 30)
    assert geometry.window == (40 + 2 * layout.BOARD_OUTER_PADDING, 30 + 2 * layout.BOARD_OUTER_PADDING)
