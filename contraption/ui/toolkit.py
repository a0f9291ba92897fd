"""Minimal pygame renderer for an energized contraption.

Rendering is deterministic and does not need a display, so snapshots can be
produced on headless machines. Only :meth:`ContraptionUI.show` opens a window.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from ..engine import Illumination
from ..grid import Position
from . import layout


# Imported lazily so callers can pick SDL drivers before pygame initialises.
_PYGAME = None


def ensure_pygame():
    global _PYGAME
    if _PYGAME is None:
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
        _PYGAME = __import__("pygame")
        _PYGAME.font.init()
    return _PYGAME


def blend(
    base: Tuple[int, int, int], accent: Tuple[int, int, int], amount: float
) -> Tuple[int, int, int]:
    amount = max(0.0, min(1.0, amount))
    return tuple(int(round(b + (a - b) * amount)) for b, a in zip(base, accent))


class ContraptionUI:
    """Draws tiles, energization and optical elements onto a pygame surface."""

    def __init__(
        self,
        illumination: Illumination,
        *,
        cell_size: int = layout.TILE_SIZE,
        surface=None,
    ) -> None:
        pygame = ensure_pygame()
        self.illumination = illumination
        self.cell_size = cell_size
        grid = illumination.grid
        self.surface = surface or pygame.Surface(
            (grid.width * cell_size, grid.height * cell_size)
        )
        # The default font keeps glyph rendering identical across machines.
        self.font = pygame.font.Font(pygame.font.get_default_font(), layout.GLYPH_FONT_SIZE)

    def tile_color(self, position: Position) -> Tuple[int, int, int]:
        x, y = position
        count = int(self.illumination.energized[y, x])
        if count <= 0:
            return layout.TILE_COLOR
        # Any energized tile starts at half brightness.
        amount = 0.5 + 0.5 * min(count, layout.ENERGY_SATURATION) / layout.ENERGY_SATURATION
        return blend(layout.TILE_COLOR, layout.ENERGIZED_COLOR, amount)

    def render(self):
        self.surface.fill(layout.BACKGROUND_COLOR)
        grid = self.illumination.grid
        for y in range(grid.height):
            for x in range(grid.width):
                self._fill_cell((x, y), self.tile_color((x, y)))
        self._draw_grid()
        for y, row in enumerate(grid.tiles):
            for x, tile in enumerate(row):
                text = layout.GLYPH_TEXT[tile.symbol]
                if text:
                    self._draw_text((x, y), text)
        return self.surface

    def save(self, path: Path) -> Path:
        pygame = ensure_pygame()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        pygame.image.save(self.render(), str(path))
        return path

    def show(self, caption: str = "Contraption") -> None:  # pragma: no cover - needs a display
        pygame = ensure_pygame()
        pygame.display.init()
        grid = self.illumination.grid
        geometry = layout.compute_geometry(grid.width, grid.height, self.cell_size)
        screen = pygame.display.set_mode(geometry.window)
        pygame.display.set_caption(caption)
        clock = pygame.time.Clock()
        try:
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                screen.fill(layout.BACKGROUND_COLOR)
                screen.blit(self.render(), geometry.board[:2])
                pygame.display.flip()
                clock.tick(30)
        finally:
            pygame.display.quit()

    def _draw_grid(self) -> None:
        pygame = ensure_pygame()
        grid = self.illumination.grid
        for x in range(grid.width):
            for y in range(grid.height):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size,
                    self.cell_size,
                )
                pygame.draw.rect(self.surface, layout.GRID_LINE_COLOR, rect, 1)

    def _fill_cell(self, position: Position, color: Tuple[int, int, int]) -> None:
        pygame = ensure_pygame()
        rect = pygame.Rect(
            position[0] * self.cell_size,
            position[1] * self.cell_size,
            self.cell_size,
            self.cell_size,
        )
        self.surface.fill(color, rect)

    def _draw_text(self, position: Position, text: str) -> None:
        label = self.font.render(text, True, layout.GLYPH_COLOR)
        rect = label.get_rect()
        rect.center = (
            position[0] * self.cell_size + self.cell_size // 2,
            position[1] * self.cell_size + self.cell_size // 2,
        )
        self.surface.blit(label, rect)


def render_to_file(
    illumination: Illumination, path: Path, *, cell_size: Optional[int] = None
) -> Path:
    ui = ContraptionUI(illumination, cell_size=cell_size or layout.TILE_SIZE)
    return ui.save(path)


__all__ = ["ContraptionUI", "ensure_pygame", "render_to_file"]
