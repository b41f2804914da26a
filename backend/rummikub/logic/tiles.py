"""
Tile catalog for Rummikub boards.

Every tile kind is identified by its canonical index (0-52):

    tile  = (rank - 1) * 4 + color      (number tiles, 0-51)
    JOKER = 52

Number kinds are ordered by (rank, color) and the joker sorts last.
The search scans kinds in this order, so a run is always found from its
lowest-rank tile and a group from its lowest color.
"""

import re
from collections.abc import Iterator
from enum import IntEnum

from rummikub.logic.exceptions import InvalidTileError

MIN_RANK = 1
MAX_RANK = 13
NUM_COLORS = 4

NUM_NUMBER_TILES = MAX_RANK * NUM_COLORS  # 52
JOKER = NUM_NUMBER_TILES  # 52
NUM_TILE_KINDS = NUM_NUMBER_TILES + 1  # 53

JOKER_TOKEN = "J"


class Color(IntEnum):
    """Tile colors in canonical order."""

    BLACK = 0
    BLUE = 1
    ORANGE = 2
    RED = 3

    @property
    def letter(self) -> str:
        return _COLOR_LETTERS[self]


_COLOR_LETTERS = {
    Color.BLACK: "B",
    Color.BLUE: "U",
    Color.ORANGE: "O",
    Color.RED: "R",
}
_LETTER_COLORS = {letter: color for color, letter in _COLOR_LETTERS.items()}

_TILE_TOKEN_RE = re.compile(r"([0-9]{1,2})([BUOR])", re.IGNORECASE)


def tile_index(rank: int, color: Color) -> int:
    """Return the canonical index of the number tile (rank, color)."""
    if not (MIN_RANK <= rank <= MAX_RANK):
        raise ValueError(f"rank must be in [{MIN_RANK}, {MAX_RANK}], got {rank}")
    return (rank - MIN_RANK) * NUM_COLORS + Color(color)


def is_joker(tile: int) -> bool:
    return tile == JOKER


def tile_rank(tile: int) -> int:
    """Rank (1-13) of a number tile."""
    if not (0 <= tile < NUM_NUMBER_TILES):
        raise ValueError(f"tile must be a number tile in [0, {NUM_NUMBER_TILES - 1}], got {tile}")
    return tile // NUM_COLORS + MIN_RANK


def tile_color(tile: int) -> Color:
    """Color of a number tile."""
    if not (0 <= tile < NUM_NUMBER_TILES):
        raise ValueError(f"tile must be a number tile in [0, {NUM_NUMBER_TILES - 1}], got {tile}")
    return Color(tile % NUM_COLORS)


def next_tile(tile: int) -> int | None:
    """Return the kind after `tile` in canonical order, or None after the joker."""
    if tile == JOKER:
        return None
    return tile + 1


def all_tiles() -> Iterator[int]:
    """Iterate over all 53 kinds, joker last."""
    return iter(range(NUM_TILE_KINDS))


def parse_tile(token: str) -> int:
    """
    Parse a single tile token.

    Accepts "J"/"j" for the joker, otherwise one or two decimal digits
    (rank 1-13) followed by a color letter: B(lack), U (blue), O(range), R(ed).
    Letters are case-insensitive.
    """
    if token.upper() == JOKER_TOKEN:
        return JOKER

    match = _TILE_TOKEN_RE.fullmatch(token)
    if match is None:
        raise InvalidTileError(token)

    rank = int(match.group(1))
    if not (MIN_RANK <= rank <= MAX_RANK):
        raise InvalidTileError(token)
    return tile_index(rank, _LETTER_COLORS[match.group(2).upper()])


def format_tile(tile: int) -> str:
    """Render a tile in the token form accepted by parse_tile."""
    if tile == JOKER:
        return JOKER_TOKEN
    return f"{tile_rank(tile)}{tile_color(tile).letter}"
