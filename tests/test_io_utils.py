"""Tests for the maze loader and run output helpers."""

import json

import pytest

from config import Config
from io_utils import (
    MazeFileError,
    load_maze,
    make_run_dir,
    parse_maze_text,
    save_config,
    save_summary,
)
from maze import Coordinate


TINY = """# comment line
5, 5
2, 2
1, 1, 0, 1, 1
1, 1, 0, 1, 1
1, 0, 0, 0, 1
1, 1, 1, 1, 1
1, 1, 1, 1, 1
"""


class TestParseMazeText:
    """Tests for parse_maze_text."""

    def test_dimensions_and_start(self):
        grid, start = parse_maze_text(TINY)
        assert grid.width() == 5
        assert grid.height() == 5
        assert start == Coordinate(2, 2)

    def test_rows_are_flipped(self):
        grid, _ = parse_maze_text(TINY)
        # top file row holds the exit
        assert grid.passable(2, 4)
        assert grid.passable(1, 2)
        assert not grid.passable(0, 4)
        assert not grid.passable(2, 0)

    def test_non_rectangular_size(self):
        text = "2, 3\n0, 0\n0, 1, 1\n1, 1, 0\n"
        grid, start = parse_maze_text(text)
        assert grid.width() == 3
        assert grid.height() == 2
        assert start == Coordinate(0, 1)
        assert grid.passable(0, 1)
        assert grid.passable(2, 0)
        assert not grid.passable(2, 1)

    def test_blank_lines_and_spaces_ignored(self):
        text = "\n  1 ,2  \n\n 0, 1\n# row\n 1 , 0 \n"
        grid, start = parse_maze_text(text)
        assert start == Coordinate(1, 0)
        assert grid.passable(1, 0)
        assert not grid.passable(0, 0)

    def test_missing_rows_are_walls(self):
        grid, _ = parse_maze_text("3, 2\n0, 0\n0, 0\n")
        assert grid.passable(0, 2)
        assert not grid.passable(0, 1)
        assert not grid.passable(1, 0)

    def test_empty_text(self):
        with pytest.raises(MazeFileError, match="empty"):
            parse_maze_text("# nothing here\n")

    def test_missing_start(self):
        with pytest.raises(MazeFileError, match="start"):
            parse_maze_text("2, 2\n")

    def test_non_integer(self):
        with pytest.raises(MazeFileError, match="Line 1"):
            parse_maze_text("two, 2\n0, 0\n")

    def test_short_row(self):
        with pytest.raises(MazeFileError, match="expected 3 values"):
            parse_maze_text("1, 3\n0, 0\n0, 0\n")

    def test_non_positive_size(self):
        with pytest.raises(MazeFileError, match="positive"):
            parse_maze_text("0, 3\n0, 0\n")

    def test_start_outside(self):
        with pytest.raises(MazeFileError, match="outside"):
            parse_maze_text("2, 2\n0, 5\n0, 0\n0, 0\n")

    def test_start_is_wall(self):
        with pytest.raises(MazeFileError, match="is a wall"):
            parse_maze_text("3, 3\n1, 1\n1,1,1\n1,1,1\n1,1,1\n")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_maze_text("")


class TestLoadMaze:
    """Tests for load_maze."""

    def test_load_sample(self, mazes_dir):
        grid, start = load_maze(mazes_dir / "tiny.csv")
        expected_grid, expected_start = parse_maze_text(TINY)
        assert start == expected_start
        assert (grid.cells == expected_grid.cells).all()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_maze(tmp_path / "nope.csv")

    def test_error_names_file(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("x, y\n")
        with pytest.raises(MazeFileError, match="bad.csv"):
            load_maze(path)


class TestRunOutputs:
    """Tests for run directory and JSON writers."""

    def test_make_run_dir_unique(self, tmp_path, open_3x3):
        a = make_run_dir("mazes/tiny.csv", open_3x3, base=str(tmp_path))
        b = make_run_dir("mazes/tiny.csv", open_3x3, base=str(tmp_path))
        assert a != b
        assert a.is_dir()
        assert a.name.startswith("run_tiny_3x3_")

    def test_save_config_and_summary(self, tmp_path):
        save_config(Config(maze_path="m.csv"), tmp_path)
        save_summary({"walks": {"Array": {"solved": True}}}, tmp_path)

        cfg = json.loads((tmp_path / "config.json").read_text())
        assert cfg["maze_path"] == "m.csv"
        assert cfg["history_names"] == ["LinkedList", "Array"]

        summary = json.loads((tmp_path / "summary.json").read_text())
        assert summary["walks"]["Array"]["solved"] is True
