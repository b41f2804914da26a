"""Unit tests for the tile catalog: canonical index, successor, and token parsing."""

import pytest

from rummikub.logic.exceptions import InvalidTileError
from rummikub.logic.tiles import (
    JOKER,
    NUM_NUMBER_TILES,
    NUM_TILE_KINDS,
    Color,
    all_tiles,
    format_tile,
    is_joker,
    next_tile,
    parse_tile,
    tile_color,
    tile_index,
    tile_rank,
)


class TestTileIndex:
    def test_there_are_53_kinds(self):
        assert len(list(all_tiles())) == NUM_TILE_KINDS == 53

    def test_joker_is_last(self):
        assert list(all_tiles())[-1] == JOKER
        assert is_joker(JOKER)
        assert not any(is_joker(tile) for tile in range(NUM_NUMBER_TILES))

    def test_number_tiles_exclude_joker(self):
        assert list(all_tiles())[:NUM_NUMBER_TILES] == list(range(52))

    def test_index_is_bijective_and_ordered(self):
        pairs = [(rank, color) for rank in range(1, 14) for color in Color]
        indices = [tile_index(rank, color) for rank, color in pairs]
        assert indices == list(range(52))

    def test_rank_and_color_invert_index(self):
        for tile in range(NUM_NUMBER_TILES):
            assert tile_index(tile_rank(tile), tile_color(tile)) == tile

    def test_lowest_and_highest_number_tiles(self):
        assert tile_index(1, Color.BLACK) == 0
        assert tile_index(13, Color.RED) == 51

    @pytest.mark.parametrize("rank", [0, 14, -1])
    def test_rank_out_of_range_rejected(self, rank):
        with pytest.raises(ValueError, match="rank must be in"):
            tile_index(rank, Color.RED)

    def test_joker_has_no_rank(self):
        with pytest.raises(ValueError, match="number tile"):
            tile_rank(JOKER)


class TestNextTile:
    def test_successor_chain_visits_every_kind(self):
        seen = [0]
        tile = next_tile(0)
        while tile is not None:
            seen.append(tile)
            tile = next_tile(tile)
        assert seen == list(all_tiles())

    def test_color_wraps_to_next_rank(self):
        assert next_tile(tile_index(3, Color.RED)) == tile_index(4, Color.BLACK)

    def test_highest_number_tile_is_followed_by_joker(self):
        assert next_tile(tile_index(13, Color.RED)) == JOKER

    def test_joker_has_no_successor(self):
        assert next_tile(JOKER) is None


class TestParseTile:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("J", JOKER),
            ("j", JOKER),
            ("1B", tile_index(1, Color.BLACK)),
            ("5u", tile_index(5, Color.BLUE)),
            ("7O", tile_index(7, Color.ORANGE)),
            ("13r", tile_index(13, Color.RED)),
            ("01R", tile_index(1, Color.RED)),
        ],
    )
    def test_valid_tokens(self, token, expected):
        assert parse_tile(token) == expected

    @pytest.mark.parametrize("token", ["0R", "14B", "99U", "R", "1", "1X", "1RR", "x1R", "123R", "+1R", "1 R", "", "JJ"])
    def test_invalid_tokens_name_the_token(self, token):
        with pytest.raises(InvalidTileError) as exc_info:
            parse_tile(token)
        assert exc_info.value.token == token
        assert repr(token) in str(exc_info.value)

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(InvalidTileError):
            parse_tile("٣R")  # Arabic-Indic digit three


class TestFormatTile:
    def test_joker(self):
        assert format_tile(JOKER) == "J"

    def test_number_tiles_use_uppercase_letters(self):
        assert format_tile(tile_index(10, Color.BLUE)) == "10U"
        assert format_tile(tile_index(2, Color.BLACK)) == "2B"

    def test_format_then_parse_is_identity(self):
        for tile in all_tiles():
            assert parse_tile(format_tile(tile)) == tile

    def test_color_letters(self):
        assert [color.letter for color in Color] == ["B", "U", "O", "R"]
