"""
Tests for the grid model and glyph table.
"""

import pytest

from ..level.grid import Cell, GridModel, Position
from ..level import glyphs
from ..level import parse_text_level


class TestCell:
    """Tests for terrain cells."""

    def test_walkable_cells(self):
        """Floor and targets can be walked on; walls and filler cannot."""
        assert Cell.FLOOR.walkable
        assert Cell.TARGET.walkable
        assert not Cell.WALL.walkable
        assert not Cell.OUTSIDE.walkable

    def test_position_moved(self):
        """Positions move by a delta and stay immutable."""
        pos = Position(2, 3)
        assert pos.moved(1, -1) == Position(3, 2)
        assert pos == (2, 3)


class TestGridQueries:
    """Tests for GridModel queries."""

    def test_dimensions_and_positions(self, plain_push_grid):
        """Parsed grid exposes size, player, boxes and targets."""
        grid = plain_push_grid
        assert (grid.width, grid.height) == (5, 3)
        assert grid.player == Position(1, 1)
        assert grid.boxes == frozenset({Position(2, 1)})
        assert grid.targets() == frozenset({Position(3, 1)})
        assert grid.initial_player_position == grid.player
        assert grid.initial_box_positions == grid.boxes

    def test_cell_at(self, plain_push_grid):
        """Box and player cells read as their underlying terrain."""
        grid = plain_push_grid
        assert grid.cell_at(0, 0) == Cell.WALL
        assert grid.cell_at(1, 1) == Cell.FLOOR
        assert grid.cell_at(2, 1) == Cell.FLOOR
        assert grid.cell_at(3, 1) == Cell.TARGET

    def test_out_of_bounds_is_outside(self, plain_push_grid):
        """Out-of-bounds queries never fail."""
        grid = plain_push_grid
        assert grid.cell_at(-1, 0) == Cell.OUTSIDE
        assert grid.cell_at(5, 1) == Cell.OUTSIDE
        assert not grid.in_bounds(0, 3)
        assert not grid.is_walkable(99, 99)

    def test_ragged_rows_padded_with_outside(self):
        """Short rows are filled with non-walkable filler."""
        grid = parse_text_level("######\n#@$.#\n######\n")
        assert grid.width == 6
        assert grid.cell_at(5, 1) == Cell.OUTSIDE
        assert not grid.is_walkable(5, 1)

    def test_leading_spaces_are_floor(self):
        """Blanks before the first wall are floor, not filler."""
        grid = parse_text_level(" #####\n #@$.#\n #####\n")
        assert grid.cell_at(0, 1) == Cell.FLOOR
        assert grid.player == Position(2, 1)

    def test_rows(self, plain_push_grid):
        """Rows split the terrain top to bottom."""
        rows = plain_push_grid.rows()
        assert len(rows) == 3
        assert rows[1] == (Cell.WALL, Cell.FLOOR, Cell.FLOOR, Cell.TARGET, Cell.WALL)


class TestGridEquality:
    """Tests for GridModel comparison."""

    def test_name_ignored(self):
        """Names are metadata and do not affect equality."""
        a = parse_text_level("#####\n#@$.#\n#####\n; First")
        b = parse_text_level("#####\n#@$.#\n#####\n; Second")
        assert a.name != b.name
        assert a == b
        assert hash(a) == hash(b)

    def test_different_layout_not_equal(self, plain_push_grid, blocked_grid):
        assert plain_push_grid != blocked_grid

    def test_terrain_size_checked(self):
        """Terrain must match width * height."""
        with pytest.raises(ValueError):
            GridModel(
                width=2,
                height=2,
                terrain=(Cell.FLOOR,),
                boxes=frozenset(),
                player=Position(0, 0),
            )


class TestGlyphs:
    """Tests for the glyph table."""

    @pytest.mark.parametrize("ch,cell,box,player", [
        ("#", Cell.WALL, False, False),
        (" ", Cell.FLOOR, False, False),
        (".", Cell.TARGET, False, False),
        ("$", Cell.FLOOR, True, False),
        ("*", Cell.TARGET, True, False),
        ("@", Cell.FLOOR, False, True),
        ("+", Cell.TARGET, False, True),
        ("-", Cell.FLOOR, False, False),
        ("_", Cell.FLOOR, False, False),
    ])
    def test_decode(self, ch, cell, box, player):
        glyph = glyphs.decode(ch)
        assert (glyph.cell, glyph.box, glyph.player) == (cell, box, player)

    def test_unknown_glyph(self):
        assert not glyphs.is_glyph("x")
        with pytest.raises(KeyError):
            glyphs.decode("x")

    def test_encode(self):
        """Encoding picks the occupied glyph before the terrain one."""
        assert glyphs.encode(Cell.TARGET, box=True) == "*"
        assert glyphs.encode(Cell.TARGET, player=True) == "+"
        assert glyphs.encode(Cell.FLOOR, box=True) == "$"
        assert glyphs.encode(Cell.WALL) == "#"
        assert glyphs.encode(Cell.OUTSIDE) == " "

    def test_to_text(self):
        """Serialization trims filler and reproduces the source rows."""
        source = "  ####\n###  #\n#@$.##\n#####"
        grid = parse_text_level(source)
        assert grid.to_text() == source
        assert str(grid) == source
