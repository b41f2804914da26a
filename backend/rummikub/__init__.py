"""
Rummikub board solver.

Dependency direction: cli imports from logic; logic never imports from cli.
"""

from rummikub.logic.exceptions import (
    InvalidTileError,
    TileCapacityError,
    TileError,
)
from rummikub.logic.search import (
    Decomposition,
    Meld,
    iter_decompositions,
    solve,
)
from rummikub.logic.tile_counts import (
    TileCounts,
    format_tiles,
    parse_tiles,
)
from rummikub.logic.tiles import (
    JOKER,
    NUM_TILE_KINDS,
    Color,
    format_tile,
    next_tile,
    parse_tile,
    tile_index,
)

__all__ = [
    "JOKER",
    "NUM_TILE_KINDS",
    "Color",
    "Decomposition",
    "InvalidTileError",
    "Meld",
    "TileCapacityError",
    "TileCounts",
    "TileError",
    "format_tile",
    "format_tiles",
    "iter_decompositions",
    "next_tile",
    "parse_tile",
    "parse_tiles",
    "solve",
    "tile_index",
]
