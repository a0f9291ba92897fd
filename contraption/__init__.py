"""Light beam energization simulator for mirror and splitter contraptions."""

from .engine import Illumination, energize
from .grid import Direction, Grid, GridLoader, ParseError, TileKind
from .search import BoundaryEntry, TrialResult, best_entry, edges, max_energization, run_trial

__all__ = [
    "BoundaryEntry",
    "Direction",
    "Grid",
    "GridLoader",
    "Illumination",
    "ParseError",
    "TileKind",
    "TrialResult",
    "best_entry",
    "edges",
    "energize",
    "max_energization",
    "run_trial",
]
