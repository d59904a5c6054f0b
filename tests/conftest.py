"""Pytest configuration and fixtures."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from maze import Coordinate, Grid

MAZES_DIR = Path(__file__).resolve().parent.parent / "mazes"

HISTORY_NAMES = ["LinkedList", "Array"]


@pytest.fixture
def mazes_dir() -> Path:
    return MAZES_DIR


@pytest.fixture(params=HISTORY_NAMES)
def history_name(request) -> str:
    """Run a test once per history implementation."""
    return request.param


@pytest.fixture
def open_3x3() -> Grid:
    return Grid([[True] * 3 for _ in range(3)])


@pytest.fixture
def t_junction() -> Grid:
    """Left branch is a dead end, the exit is straight up from (2, 2)."""
    return Grid.from_rows([
        "##.##",
        "##.##",
        "#...#",
        "#####",
        "#####",
    ])


@pytest.fixture
def sealed_corridor() -> Grid:
    return Grid.from_rows([
        "#####",
        "#...#",
        "#####",
    ])


@pytest.fixture
def walled_in() -> Grid:
    return Grid.from_rows([
        "###",
        "#.#",
        "###",
    ])


@pytest.fixture
def center() -> Coordinate:
    return Coordinate(1, 1)
