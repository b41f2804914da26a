"""Typed exceptions for tile input errors.

Both subclasses of TileError describe bad external input (a board string
or an extra tile) and are meant to be caught at the caller boundary.
Programming errors such as an out-of-range count passed to
TileCounts.set_count raise ValueError instead and are not TileErrors.
"""


class TileError(Exception):
    """Base exception for recoverable tile input errors."""


class InvalidTileError(TileError):
    """A token is not a valid tile.

    Attributes:
        token: The offending text, as given.

    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid tile: {token!r}")


class TileCapacityError(TileError):
    """A third copy of a tile kind was added.

    Attributes:
        tile: Canonical index of the kind that is already at capacity.
        token: The same kind in tile-token form (e.g. "7R", "J").

    """

    def __init__(self, tile: int, token: str) -> None:
        self.tile = tile
        self.token = token
        super().__init__(f"already have two of tile {token}")
