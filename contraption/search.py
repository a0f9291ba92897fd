"""Boundary enumeration and the parallel maximization search."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional

from joblib import Parallel, delayed

from .config import resolve_settings
from .engine import Illumination
from .grid import Direction, Grid, Position


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundaryEntry:
    """Ray injected at a grid edge, travelling inward."""

    position: Position
    direction: Direction


@dataclass(frozen=True)
class TrialResult:
    entry: BoundaryEntry
    energized: int


def edges(grid: Grid) -> List[BoundaryEntry]:
    """Every inward facing entry along the four edges of ``grid``.

    Corner tiles appear once per edge they sit on, so the result always holds
    ``2 * width + 2 * height`` entries.
    """

    bottom = grid.height - 1
    right = grid.width - 1
    entries: List[BoundaryEntry] = []
    for x in range(grid.width):
        entries.append(BoundaryEntry((x, 0), Direction.DOWN))
    for y in range(grid.height):
        entries.append(BoundaryEntry((0, y), Direction.RIGHT))
    for x in range(grid.width):
        entries.append(BoundaryEntry((x, bottom), Direction.UP))
    for y in reversed(range(grid.height)):
        entries.append(BoundaryEntry((right, y), Direction.LEFT))
    return entries


def run_trial(grid: Grid, entry: BoundaryEntry) -> int:
    illumination = Illumination(grid)
    illumination.illuminate(entry.position, entry.direction)
    return illumination.energized_count()


def best_entry(
    grid: Grid,
    *,
    entries: Optional[Iterable[BoundaryEntry]] = None,
    workers: Optional[int] = None,
    batch_size: Optional[int] = None,
    backend: Optional[str] = None,
) -> TrialResult:
    """Run one independent trial per entry and return the strongest one.

    Each trial builds its own :class:`Illumination` inside the worker, so the
    only thing shared between workers is the immutable grid. An exception in
    any trial is re-raised here instead of dropping that candidate.
    """

    candidates = list(edges(grid) if entries is None else entries)
    if not candidates:
        raise ValueError("No boundary entries to search")

    settings = resolve_settings(workers=workers, batch_size=batch_size, backend=backend)
    logger.info(
        "Searching %d entries on a %dx%d grid (workers=%d, in-flight=%d, backend=%s)",
        len(candidates),
        grid.width,
        grid.height,
        settings.workers,
        settings.pre_dispatch,
        settings.backend,
    )
    started = time.perf_counter()
    counts = Parallel(
        n_jobs=settings.workers,
        backend=settings.backend,
        pre_dispatch=settings.pre_dispatch,
    )(delayed(run_trial)(grid, entry) for entry in candidates)

    best: Optional[TrialResult] = None
    for entry, energized in zip(candidates, counts):
        if best is None or energized > best.energized:
            best = TrialResult(entry=entry, energized=energized)
    logger.info(
        "Search finished in %.3fs: %d tiles from %s heading %s",
        time.perf_counter() - started,
        best.energized,
        best.entry.position,
        best.entry.direction.name,
    )
    return best


def max_energization(
    grid: Grid,
    *,
    entries: Optional[Iterable[BoundaryEntry]] = None,
    workers: Optional[int] = None,
    batch_size: Optional[int] = None,
    backend: Optional[str] = None,
) -> int:
    """Highest energized tile count over all boundary entries."""

    result = best_entry(
        grid,
        entries=entries,
        workers=workers,
        batch_size=batch_size,
        backend=backend,
    )
    return result.energized
