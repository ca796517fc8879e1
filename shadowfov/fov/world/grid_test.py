"""Tests for the tile grid and its ASCII loader."""

import pytest

from fov.world.grid import Grid


class TestFromRows:
    def test_parses_walls_and_start(self):
        grid, start = Grid.from_rows([
            "#....",
            "..@..",
            "....#",
        ])
        assert (grid.cols, grid.rows) == (5, 3)
        assert grid.walls == {(0, 0), (4, 2)}
        assert start == (2, 1)

    def test_start_is_optional(self):
        _, start = Grid.from_rows(["...", "..."])
        assert start is None

    def test_blank_lines_and_newlines_ignored(self):
        grid, _ = Grid.from_rows(["..#\n", "", "...\n"])
        assert (grid.cols, grid.rows) == (3, 2)
        assert grid.walls == {(2, 0)}

    def test_custom_glyphs(self):
        grid, start = Grid.from_rows(["X_o"], wall="X", floor="_", observer="o")
        assert grid.walls == {(0, 0)}
        assert start == (2, 0)

    def test_ragged_rows_rejected(self):
        with pytest.raises(ValueError, match="width"):
            Grid.from_rows(["....", "..."])

    def test_unknown_glyph_rejected(self):
        with pytest.raises(ValueError, match="Unknown map glyph"):
            Grid.from_rows(["..?.."])

    def test_two_observers_rejected(self):
        with pytest.raises(ValueError, match="more than one observer"):
            Grid.from_rows(["@..@"])

    def test_empty_map_rejected(self):
        with pytest.raises(ValueError, match="no rows"):
            Grid.from_rows([])


class TestGrid:
    def test_invalid_dimensions(self):
        with pytest.raises(ValueError):
            Grid(0, 5)
        with pytest.raises(ValueError):
            Grid(5, -1)

    def test_bounds(self):
        grid = Grid(4, 3)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(3, 2)
        assert not grid.in_bounds(4, 0)
        assert not grid.in_bounds(0, 3)
        assert not grid.in_bounds(-1, 1)

    def test_opacity_and_passability(self):
        grid = Grid(4, 3, walls={(1, 1)})
        assert grid.is_opaque(1, 1)
        assert not grid.is_opaque(2, 1)
        assert not grid.is_passable(1, 1)
        assert grid.is_passable(2, 1)
        assert not grid.is_passable(9, 9)

    def test_index_is_row_major(self):
        assert Grid(4, 3).index(3, 1) == (1, 3)

    def test_toggle_wall(self):
        grid = Grid(4, 3)
        assert grid.toggle_wall(2, 2)
        assert grid.is_opaque(2, 2)
        assert grid.toggle_wall(2, 2)
        assert not grid.is_opaque(2, 2)

    def test_toggle_out_of_bounds_is_noop(self):
        grid = Grid(4, 3)
        assert not grid.toggle_wall(7, 7)
        assert grid.walls == set()

    def test_pixel_conversions(self):
        grid = Grid(4, 3, tile_size=10)
        assert grid.to_px(2, 1) == (20, 10)
        assert grid.center_px(2, 1) == (25, 15)
        assert grid.from_px(29, 11) == (2, 1)
        assert tuple(grid.tile_rect(2, 1)) == (20, 10, 10, 10)
