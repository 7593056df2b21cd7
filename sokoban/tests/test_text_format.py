"""
Tests for the plain-text level format.

Tests:
- Level blocks, titles and names
- Malformed input and invalid levels, with level ordinals
- Serialization round trip
"""

import pytest

from .. import config
from ..level import (
    InvalidLevel,
    LevelFormat,
    MalformedInput,
    ParseError,
    Position,
    format_text_levelset,
    parse_text_level,
    parse_text_levelset,
)
from .conftest import TWO_LEVELS


class TestLevelBlocks:
    """Tests for splitting a file into levels."""

    def test_two_levels_in_order(self):
        """Levels come back in file order with names below them."""
        collection = parse_text_levelset(TWO_LEVELS)
        assert len(collection) == 2
        assert collection.title == "Two Levels"
        assert collection.format == LevelFormat.TEXT
        assert [level.name for level in collection.levels] == ["One", "Two"]
        assert collection.levels[1].player == Position(4, 1)

    def test_names_above_levels(self):
        """A name directly above the first level makes names precede levels."""
        source = (
            "; Set\n"
            "\n"
            "; Alpha\n"
            "#####\n#@$.#\n#####\n"
            "\n"
            "; Beta\n"
            "######\n#.$ @#\n######\n"
        )
        collection = parse_text_levelset(source)
        assert [level.name for level in collection.levels] == ["Alpha", "Beta"]

    def test_title_line_names_level(self):
        """'Title:' lines name levels like comments do."""
        source = "#####\n#@$.#\n#####\nTitle: Opening\nAuthor: someone\n"
        level = parse_text_level(source)
        assert level.name == "Opening"

    def test_header_text_ignored(self):
        """Free text lines starting with a letter or digit are not rows."""
        source = "Author: A. Person\n1997\n\n#####\n#@$.#\n#####\n"
        collection = parse_text_levelset(source)
        assert len(collection) == 1
        assert collection.levels[0].name == ""

    def test_unnamed_level(self):
        level = parse_text_level("#####\n#@$.#\n#####\n")
        assert level.name == ""

    def test_floor_synonyms(self):
        """'-' and '_' read as floor."""
        dashed = parse_text_level("######\n#@-$.#\n######\n")
        spaced = parse_text_level("######\n#@ $.#\n######\n")
        assert dashed == spaced

    def test_bytes_with_bom(self):
        """UTF-8 byte input with a byte order mark is accepted."""
        raw = "\ufeff#####\n#@$.#\n#####\n".encode("utf-8")
        level = parse_text_level(raw)
        assert level.player == Position(1, 1)

    def test_crlf_line_endings(self):
        level = parse_text_level("#####\r\n#@$.#\r\n#####\r\n")
        assert level.width == 5


class TestTextErrors:
    """Tests for malformed and invalid text levels."""

    def test_unknown_glyph_reports_ordinal(self):
        """An unknown glyph in the second level names that level."""
        source = TWO_LEVELS.replace("#.$ @#", "#.$x@#")
        with pytest.raises(MalformedInput) as exc:
            parse_text_levelset(source)
        assert exc.value.ordinal == 2
        assert exc.value.name == "Two"
        assert "'x'" in str(exc.value)

    def test_two_players_invalid(self):
        """Two player glyphs in one block yield InvalidLevel with its ordinal."""
        source = TWO_LEVELS.replace("#.$ @#", "#.$@@#")
        with pytest.raises(InvalidLevel) as exc:
            parse_text_levelset(source)
        assert exc.value.ordinal == 2
        assert "level 2 (Two)" in str(exc.value)

    def test_no_player(self):
        with pytest.raises(InvalidLevel) as exc:
            parse_text_level("#####\n# $.#\n#####\n")
        assert "No player" in exc.value.errors

    def test_box_target_mismatch(self):
        with pytest.raises(InvalidLevel) as exc:
            parse_text_level("######\n#@$$.#\n######\n")
        assert "Too few targets - 2 required" in exc.value.errors

    def test_zero_levels(self):
        """A file without level blocks is invalid as a whole."""
        with pytest.raises(InvalidLevel) as exc:
            parse_text_levelset("; Empty set\n\n; nothing here\n")
        assert exc.value.ordinal is None

    def test_errors_are_parse_errors(self):
        """Both error kinds share one base class."""
        assert issubclass(MalformedInput, ParseError)
        assert issubclass(InvalidLevel, ParseError)

    def test_invalid_utf8(self):
        with pytest.raises(MalformedInput):
            parse_text_levelset(b"#####\n#@$.#\xff\n#####\n")

    def test_size_limit(self, monkeypatch):
        """Levels wider than the configured maximum are rejected."""
        monkeypatch.setattr(config, "MAX_WIDTH", 4)
        with pytest.raises(MalformedInput) as exc:
            parse_text_level("#####\n#@$.#\n#####\n")
        assert "exceeds limit" in str(exc.value)

    def test_parse_single_rejects_many(self):
        with pytest.raises(MalformedInput):
            parse_text_level(TWO_LEVELS)

    def test_letter_led_row_inside_level(self):
        """A row starting with an unknown letter is a glyph error, not free text."""
        with pytest.raises(MalformedInput) as exc:
            parse_text_levelset("#######\n#@$ .##\nX######\n")
        assert exc.value.ordinal == 1
        assert "'X' at column 0, row 2" in str(exc.value)

    def test_letter_led_row_does_not_split_level(self):
        """A corrupt middle row fails the level instead of cutting it in two."""
        with pytest.raises(MalformedInput) as exc:
            parse_text_levelset(TWO_LEVELS.replace("#.$ @#", "#.$ @#\nx    #"))
        assert exc.value.ordinal == 2
        assert exc.value.name == "Two"

    def test_field_lines_after_levels(self):
        """'Field: value' lines between levels are still free text."""
        source = "#####\n#@$.#\n#####\nAuthor: someone\n\n######\n#.$ @#\n######\n"
        assert len(parse_text_levelset(source)) == 2


class TestTextRoundTrip:
    """Tests for serializing levels back to text."""

    def test_round_trip_levelset(self):
        """Serialize then reparse yields equal grids, names and title."""
        original = parse_text_levelset(TWO_LEVELS)
        text = format_text_levelset(original.levels, title=original.title)
        reparsed = parse_text_levelset(text)

        assert reparsed.levels == original.levels
        assert [l.name for l in reparsed.levels] == ["One", "Two"]
        assert reparsed.title == "Two Levels"

    def test_round_trip_ragged_level(self):
        source = "  ####\n###  #\n#@$.##\n#####\n; Ragged"
        level = parse_text_level(source)
        again = parse_text_level(format_text_levelset([level]))
        assert again == level
        assert again.name == "Ragged"
