"""
Counted tile multiset packed into a single integer.

A two-deck set holds at most two copies of any kind, so each kind gets a
2-bit field at bit offset `tile * 2`:

    00 -> 0 copies
    01 -> 1 copy
    10 -> 2 copies
    11 -> never written

All 53 kinds fit in 106 bits. Python ints are immutable, so copying a
TileCounts copies one reference and sibling search branches never alias.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rummikub.logic.exceptions import TileCapacityError
from rummikub.logic.tiles import NUM_TILE_KINDS, all_tiles, format_tile, parse_tile

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

MAX_COPIES = 2

_BITS_PER_TILE = 2
_FIELD_MASK = 0b11


class TileCounts:
    """Multiset of tile kinds with 0, 1 or 2 copies each."""

    __slots__ = ("_bits",)

    def __init__(self, tiles: Iterable[int] = ()) -> None:
        self._bits = 0
        for tile in tiles:
            self.add_tile(tile)

    def copy(self) -> TileCounts:
        clone = TileCounts.__new__(TileCounts)
        clone._bits = self._bits
        return clone

    def get_count(self, tile: int) -> int:
        _check_tile(tile)
        return (self._bits >> (tile * _BITS_PER_TILE)) & _FIELD_MASK

    def set_count(self, tile: int, count: int) -> None:
        """Set the number of copies of `tile`.

        Raises ValueError for counts outside 0-2. Callers reaching this with
        a bad count have a bookkeeping bug; it is not an input error.
        """
        _check_tile(tile)
        if not (0 <= count <= MAX_COPIES):
            raise ValueError(f"tile count must be in [0, {MAX_COPIES}], got {count}")
        shift = tile * _BITS_PER_TILE
        self._bits = (self._bits & ~(_FIELD_MASK << shift)) | (count << shift)

    def add_tile(self, tile: int) -> None:
        """Add one copy of `tile`; raise TileCapacityError if two are already held."""
        count = self.get_count(tile)
        if count >= MAX_COPIES:
            raise TileCapacityError(tile, format_tile(tile))
        self.set_count(tile, count + 1)

    def total_count(self) -> int:
        return sum(self.get_count(tile) for tile in all_tiles())

    def __iter__(self) -> Iterator[int]:
        """Yield tiles in canonical order, each repeated per its count."""
        for tile in all_tiles():
            for _ in range(self.get_count(tile)):
                yield tile

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileCounts):
            return NotImplemented
        return self._bits == other._bits

    def __str__(self) -> str:
        return format_tiles(self)

    def __repr__(self) -> str:
        return f"TileCounts({format_tiles(self)!r})"


def _check_tile(tile: int) -> None:
    if not (0 <= tile < NUM_TILE_KINDS):
        raise ValueError(f"tile must be in [0, {NUM_TILE_KINDS - 1}], got {tile}")


def parse_tiles(text: str) -> TileCounts:
    """
    Parse a whitespace-separated list of tile tokens.

    Raises InvalidTileError for an unparseable token and TileCapacityError
    for a third copy of any kind. Nothing is returned on failure.
    """
    counts = TileCounts()
    for token in text.split():
        counts.add_tile(parse_tile(token))
    return counts


def format_tiles(counts: TileCounts) -> str:
    """Render tiles in canonical order, separated by single spaces."""
    return " ".join(format_tile(tile) for tile in counts)
