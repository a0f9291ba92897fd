"""Command line entry point for the contraption simulator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .config import BACKENDS, resolve_input_root
from .engine import START_DIRECTION, START_POSITION, Illumination
from .grid import Direction, Grid, GridLoader
from .search import best_entry


logger = logging.getLogger(__name__)

MODES = ("energize", "maximize")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contraption",
        description="Simulate light beams through a contraption of mirrors and splitters.",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="energize",
        help="energize: count tiles lit from a single entry; "
        "maximize: best count over every boundary entry.",
    )
    parser.add_argument(
        "--input",
        help="Layout file path or the name of a bundled input. Reads stdin when omitted.",
    )
    parser.add_argument(
        "--list-inputs",
        action="store_true",
        help="Print the bundled inputs and exit.",
    )
    parser.add_argument(
        "--start",
        nargs=2,
        type=int,
        metavar=("X", "Y"),
        default=list(START_POSITION),
        help="Entry tile for energize mode (default: 0 0).",
    )
    parser.add_argument(
        "--direction",
        default=START_DIRECTION.name,
        help="Entry direction for energize mode (default: RIGHT).",
    )
    parser.add_argument("--workers", type=int, help="Concurrent trials in maximize mode.")
    parser.add_argument(
        "--batch-size",
        type=int,
        help="Trials dispatched ahead of free workers in maximize mode.",
    )
    parser.add_argument("--backend", choices=BACKENDS, help="joblib backend for maximize mode.")
    parser.add_argument("--map", action="store_true", help="Print the energized map.")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of the count.")
    parser.add_argument("--render", type=Path, help="Save an image of the energized contraption.")
    parser.add_argument("--show", action="store_true", help="Open a window with the energized contraption.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def read_grid(source: Optional[str], loader: GridLoader) -> Grid:
    if source:
        return loader.load(source)
    return Grid.from_lines(sys.stdin)


def _entry_payload(position: Sequence[int], direction: Direction) -> Dict[str, object]:
    return {"position": list(position), "direction": direction.name}


def run(args: argparse.Namespace) -> int:
    loader = GridLoader(resolve_input_root())
    if args.list_inputs:
        print("Available inputs:")
        for name in loader.available():
            print(f"  {name}")
        return 0

    grid = read_grid(args.input, loader)
    logger.debug("Loaded %dx%d contraption", grid.width, grid.height)

    if args.mode == "energize":
        position = tuple(args.start)
        direction = Direction.from_name(args.direction)
        illumination = Illumination(grid)
        illumination.illuminate(position, direction)
        result = illumination.energized_count()
        payload: Dict[str, object] = dict(illumination.summary())
        payload["entry"] = _entry_payload(position, direction)
    else:
        best = best_entry(
            grid,
            workers=args.workers,
            batch_size=args.batch_size,
            backend=args.backend,
        )
        result = best.energized
        payload = {
            "dimensions": f"{grid.width}x{grid.height}",
            "energized": best.energized,
            "entry": _entry_payload(best.entry.position, best.entry.direction),
        }
        illumination = None
        if args.map or args.render or args.show:
            illumination = Illumination(grid)
            illumination.illuminate(best.entry.position, best.entry.direction)

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(result)
    if args.map:
        print(illumination.energized_map())

    if args.render or args.show:
        from .ui import ContraptionUI

        ui = ContraptionUI(illumination)
        if args.render:
            saved = ui.save(args.render)
            logger.info("Saved render to %s", saved)
        if args.show:
            ui.show()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return run(args)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - manual invocation entry point
    sys.exit(main())
