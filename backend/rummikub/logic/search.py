"""
Exhaustive backtracking search for board decompositions.

The scan walks tile kinds in canonical order. At each kind with tiles left
it tries every run and group whose lowest natural member is that kind,
recursing on the residual tiles with the scan position unchanged so a second
copy of the same kind can start another meld. A path succeeds once every
number tile is placed; jokers may be left over.
"""

from __future__ import annotations

from itertools import pairwise
from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from rummikub.logic.melds import MIN_RUN_LENGTH, fit_meld, group_candidates, run_prefixes
from rummikub.logic.tile_counts import TileCounts, format_tiles
from rummikub.logic.tiles import JOKER, MAX_RANK, NUM_NUMBER_TILES, is_joker, next_tile

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = structlog.get_logger()

_MIN_MELD_TILES = 3
_MAX_MELD_TILES = MAX_RANK


class Meld(BaseModel):
    """
    Immutable run or group.

    Tiles are number kinds in canonical order. A member filled by a joker is
    recorded as the kind it stands for.
    """

    model_config = ConfigDict(frozen=True)

    tiles: tuple[int, ...]

    @field_validator("tiles")
    @classmethod
    def _validate_tiles(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if not (_MIN_MELD_TILES <= len(v) <= _MAX_MELD_TILES):
            raise ValueError(f"meld must have {_MIN_MELD_TILES}-{_MAX_MELD_TILES} tiles, got {len(v)}")
        if any(not (0 <= tile < NUM_NUMBER_TILES) for tile in v):
            raise ValueError(f"meld tiles must be number tiles, got {v}")
        if any(a >= b for a, b in pairwise(v)):
            raise ValueError(f"meld tiles must be distinct and in canonical order, got {v}")
        return v

    def to_counts(self) -> TileCounts:
        """Return a fresh, independent TileCounts holding this meld's tiles."""
        return TileCounts(self.tiles)

    def __str__(self) -> str:
        return format_tiles(self.to_counts())


class Decomposition(BaseModel):
    """A complete placement of all number tiles into melds."""

    model_config = ConfigDict(frozen=True)

    melds: tuple[Meld, ...] = ()
    leftover_jokers: int = Field(default=0, ge=0)

    def __str__(self) -> str:
        leftover = f"leftover jokers: {self.leftover_jokers}"
        if not self.melds:
            return leftover
        rendered = ", ".join(f"({meld})" for meld in self.melds)
        return f"{rendered} {leftover}"


def solve(tiles: TileCounts) -> list[Decomposition]:
    """Return every decomposition of `tiles`, in deterministic order.

    An unsolvable board yields an empty list. `tiles` is not modified.
    """
    solutions = list(iter_decompositions(tiles))
    logger.debug("board solved", tile_count=tiles.total_count(), solution_count=len(solutions))
    return solutions


def iter_decompositions(tiles: TileCounts) -> Iterator[Decomposition]:
    """Lazily yield decompositions in the same order as solve()."""
    yield from _search(tiles.copy(), 0, [])


def _search(residual: TileCounts, cursor: int | None, melds: list[Meld]) -> Iterator[Decomposition]:
    while cursor is not None and residual.get_count(cursor) == 0:
        cursor = next_tile(cursor)

    if cursor is None:
        yield Decomposition(melds=tuple(melds))
        return

    if is_joker(cursor):
        yield Decomposition(melds=tuple(melds), leftover_jokers=residual.get_count(JOKER))
        return

    for run in run_prefixes(cursor):
        fit = fit_meld(residual, run)
        if fit is None:
            break
        # The 2-tile prefix only gates extension; it is never placed as a meld.
        if len(run) >= MIN_RUN_LENGTH and fit.admissible:
            yield from _place(fit.residual, cursor, melds, run)

    for group in group_candidates(cursor):
        fit = fit_meld(residual, group)
        if fit is not None and fit.admissible:
            yield from _place(fit.residual, cursor, melds, group)


def _place(
    residual: TileCounts,
    cursor: int,
    melds: list[Meld],
    candidate: tuple[int, ...],
) -> Iterator[Decomposition]:
    melds.append(Meld(tiles=candidate))
    try:
        yield from _search(residual, cursor, melds)
    finally:
        melds.pop()
