# io_utils.py
from dataclasses import asdict
from pathlib import Path
from datetime import datetime
import csv
import io
import json
from typing import Any, Iterator, List, Tuple
from config import Config
from maze import Coordinate, Grid
import numpy as np
import uuid


class MazeFileError(ValueError):
    """Raised when a maze file cannot be parsed or is inconsistent."""


def _records(text: str) -> Iterator[Tuple[int, List[str]]]:
    """Yield (line_number, trimmed fields), skipping blank and '#' comment lines."""
    reader = csv.reader(io.StringIO(text))
    for fields in reader:
        line_no = reader.line_num
        fields = [f.strip() for f in fields]
        if not fields or all(f == "" for f in fields):
            continue
        if fields[0].startswith("#"):
            continue
        yield line_no, fields


def _ints(fields: List[str], line_no: int, n: int) -> List[int]:
    if len(fields) < n:
        raise MazeFileError(f"Line {line_no}: expected {n} values, got {len(fields)}")
    try:
        return [int(f) for f in fields[:n]]
    except ValueError as e:
        raise MazeFileError(f"Line {line_no}: {e}") from e


def parse_maze_text(text: str) -> Tuple[Grid, Coordinate]:
    """
    Parse a maze description.

    Format (comma separated, '#' comment lines allowed)::

        rows, cols
        start_row, start_col
        <rows lines of cols integers, 0 = open, anything else = wall>

    File rows are listed top to bottom; the returned Grid has y pointing up,
    so file row r becomes y = rows - r - 1. Rows missing at the end of the
    file stay walls.
    """
    records = _records(text)

    try:
        line_no, fields = next(records)
    except StopIteration:
        raise MazeFileError("Maze file is empty") from None
    rows, cols = _ints(fields, line_no, 2)
    if rows <= 0 or cols <= 0:
        raise MazeFileError(f"Line {line_no}: maze size must be positive, got {rows}x{cols}")

    try:
        line_no, fields = next(records)
    except StopIteration:
        raise MazeFileError("Maze file has no start position line") from None
    start_row, start_col = _ints(fields, line_no, 2)
    start = Coordinate(start_col, rows - start_row - 1)

    cells = np.zeros((cols, rows), dtype=bool)
    for i, (line_no, fields) in zip(range(rows), records):
        values = _ints(fields, line_no, cols)
        y = rows - i - 1
        for x, v in enumerate(values):
            cells[x, y] = v == 0

    grid = Grid(cells)
    if not grid.contains(start):
        raise MazeFileError(
            f"Start (row={start_row}, col={start_col}) is outside the {rows}x{cols} maze"
        )
    if not grid.passable(start.x, start.y):
        raise MazeFileError(
            f"Start (row={start_row}, col={start_col}) is a wall"
        )
    return grid, start


def load_maze(path: str | Path) -> Tuple[Grid, Coordinate]:
    """Read and parse a maze file. See parse_maze_text for the format."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Maze file not found: {path}")
    with path.open("r", encoding="utf-8", newline="") as f:
        text = f.read()
    try:
        return parse_maze_text(text)
    except MazeFileError as e:
        raise MazeFileError(f"{path}: {e}") from e


def make_run_dir(
    maze_path: str | Path,
    grid: Grid,
    base: str = "outputs",
) -> Path:
    """
    Create (if needed) and return a unique directory for this run.

    Folder name encodes the maze file stem and size, plus a timestamp and a
    short UUID suffix so repeated runs never overwrite each other, e.g.::

        outputs/run_labyrinth_15x11_20261019-213012_ab12cd34/
    """
    base_path = Path(base)
    base_path.mkdir(parents=True, exist_ok=True)

    parts = [
        Path(maze_path).stem,
        f"{grid.width()}x{grid.height()}",
    ]
    base_name = "run_" + "_".join(parts)

    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    uid = uuid.uuid4().hex[:8]
    run_dir = base_path / f"{base_name}_{ts}_{uid}"

    # exist_ok=False => raise if directory somehow already exists
    run_dir.mkdir(exist_ok=False)
    return run_dir


def save_config(cfg: Config, run_dir: Path, filename: str = "config.json") -> None:
    """Serialize the Config of this run into JSON, for reproducibility."""
    data: dict[str, Any] = asdict(cfg)
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def save_summary(summary: dict[str, Any], run_dir: Path, filename: str = "summary.json") -> None:
    """
    Save the nested summary metrics of a run as JSON.

    Keys are nested ("walks.LinkedList.runtime", ...) so the file can be
    flattened into CSV columns the same way batch_run.py does.
    """
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)
