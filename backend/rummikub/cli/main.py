"""Solve Rummikub boards given on the command line.

Each argument is one board: a space-separated list of tiles such as
"1R 2R 3R 7B 7U J". Boards are solved in order; an unparseable board stops
the run with exit status 1.

Usage:
    rummikub-solve "1R 2R 3R 4R 5R 6R" "1R J 1O"
    rummikub-solve --max-solutions 5 "1B 2B 3B 1U 2U 3U J J"
"""

from __future__ import annotations

import argparse
import sys
from itertools import islice
from typing import TYPE_CHECKING, TextIO

import structlog
from pydantic import ValidationError

from rummikub.cli.settings import SolverCliSettings
from rummikub.logic.exceptions import TileError
from rummikub.logic.search import iter_decompositions
from rummikub.logic.tile_counts import parse_tiles
from shared.logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger()

BOARD_SEPARATOR = "* * *"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Enumerate every way to lay out a Rummikub board as melds.")
    parser.add_argument("boards", nargs="*", metavar="BOARD", help="space-separated tiles, e.g. '1R 2R 3R J'")
    parser.add_argument(
        "--max-solutions",
        type=int,
        default=None,
        help="print at most this many solutions per board (0 = all)",
    )
    parser.add_argument("--log-dir", default=None, help="also write logs to a file in this directory")
    return parser


def solve_boards(boards: Sequence[str], *, max_solutions: int = 0, out: TextIO | None = None) -> int:
    """Solve and print each board. Return the process exit status."""
    out = out if out is not None else sys.stdout
    for board in boards:
        try:
            tiles = parse_tiles(board)
        except TileError as exc:
            logger.error("board rejected", board=board, error=str(exc))
            print(f"error: {exc}", file=sys.stderr)
            return 1

        print(f"Trying to solve board: {tiles}", file=out)
        solutions = iter_decompositions(tiles)
        if max_solutions:
            solutions = islice(solutions, max_solutions)
        count = 0
        for solution in solutions:
            print(f"Solution: {solution}", file=out)
            count += 1
        print(BOARD_SEPARATOR, file=out)
        logger.info("board solved", tile_count=tiles.total_count(), printed_solutions=count)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    overrides = {}
    if args.max_solutions is not None:
        overrides["max_solutions"] = args.max_solutions
    if args.log_dir is not None:
        overrides["log_dir"] = args.log_dir
    try:
        settings = SolverCliSettings(**overrides)
    except ValidationError as exc:
        errors = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors())
        parser.error(errors)

    setup_logging(log_dir=settings.log_dir)
    return solve_boards(args.boards, max_solutions=settings.max_solutions)


if __name__ == "__main__":
    sys.exit(main())
