"""
Candidate melds and the admissibility test.

A candidate is a tuple of distinct tile kinds. It is tested against the
residual tiles of the current search path: each member consumes a natural
copy when one is left, otherwise a joker stands in for it.
"""

from __future__ import annotations

from itertools import combinations
from typing import TYPE_CHECKING, NamedTuple

from rummikub.logic.tiles import JOKER, MAX_RANK, Color, tile_color, tile_index, tile_rank

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rummikub.logic.tile_counts import TileCounts

MIN_NATURAL_TILES = 2
MIN_RUN_LENGTH = 3

# Highest rank a run may start from.
_MAX_RUN_START_RANK = MAX_RANK - 2

# Fixed group color sets per starting color. Orange and Red never start a
# group: their groups are reached from Blue with a joker for the missing color.
_BLACK_GROUP_COLORS: tuple[tuple[Color, ...], ...] = tuple(
    (Color.BLACK, *combo)
    for size in (2, 3)
    for combo in combinations((Color.BLUE, Color.ORANGE, Color.RED), size)
)
_BLUE_GROUP_COLORS: tuple[tuple[Color, ...], ...] = ((Color.BLUE, Color.ORANGE, Color.RED),)


class MeldFit(NamedTuple):
    """Outcome of testing a candidate meld against residual tiles."""

    residual: TileCounts
    naturals: int

    @property
    def admissible(self) -> bool:
        return self.naturals >= MIN_NATURAL_TILES


def fit_meld(residual: TileCounts, candidate: tuple[int, ...]) -> MeldFit | None:
    """Consume one tile per candidate member from a copy of `residual`.

    Returns None when a member has neither a natural copy nor a spare joker.
    """
    remaining = residual.copy()
    naturals = 0
    for tile in candidate:
        count = remaining.get_count(tile)
        if count > 0:
            remaining.set_count(tile, count - 1)
            naturals += 1
            continue
        jokers = remaining.get_count(JOKER)
        if jokers == 0:
            return None
        remaining.set_count(JOKER, jokers - 1)
    return MeldFit(remaining, naturals)


def run_prefixes(tile: int) -> Iterator[tuple[int, ...]]:
    """Yield growing same-color runs starting at `tile`, the 2-tile prefix first.

    Runs only start at ranks up to 11. The caller stops consuming as soon as
    a prefix is infeasible; ranks are never skipped.
    """
    rank = tile_rank(tile)
    if rank > _MAX_RUN_START_RANK:
        return
    color = tile_color(tile)
    run = (tile, tile_index(rank + 1, color))
    yield run
    for next_rank in range(rank + 2, MAX_RANK + 1):
        run = (*run, tile_index(next_rank, color))
        yield run


def group_candidates(tile: int) -> Iterator[tuple[int, ...]]:
    """Yield the fixed group candidates tried while the scan is at `tile`."""
    rank = tile_rank(tile)
    color_sets = _BLACK_GROUP_COLORS if tile_color(tile) == Color.BLACK else _BLUE_GROUP_COLORS
    for colors in color_sets:
        yield tuple(tile_index(rank, color) for color in colors)
