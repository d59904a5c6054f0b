"""Tests for the benchmark runner."""

import csv

from batch_run import (
    flatten_dict,
    iter_param_combinations,
    main_batch,
    run_one,
    run_single_experiment,
)


class TestHelpers:
    """Tests for parameter grid and flattening helpers."""

    def test_iter_param_combinations(self):
        combos = list(iter_param_combinations({"a": [1, 2], "b": ["x", "y", "z"]}))
        assert len(combos) == 6
        assert {"a": 2, "b": "z"} in combos

    def test_flatten_dict(self):
        assert flatten_dict({"a": {"b": 1, "c": {"d": 2}}, "e": 3}) == {
            "a.b": 1,
            "a.c.d": 2,
            "e": 3,
        }


class TestExperiments:
    """Tests for single benchmark runs."""

    def test_run_single_experiment(self, mazes_dir, history_name):
        metrics = run_single_experiment(
            purpose="test",
            maze_path=str(mazes_dir / "tiny.csv"),
            history_name=history_name,
            max_steps=1000,
            repeat=0,
        )
        assert metrics["maze.width"] == 5
        assert metrics["maze.open_cells"] == 5
        assert metrics["walk.solved"] is True
        assert metrics["walk.backtracks"] == 1
        assert metrics["walk.steps"] == 4
        assert metrics["walk.final_x"] == 2
        assert metrics["walk.final_y"] == 4
        assert metrics["history.implementation"] == history_name
        assert metrics["history.push_count"] == 3
        assert metrics["history.pop_count"] == 1
        assert metrics["history.remaining"] == 2

    def test_run_one_merges_params(self, mazes_dir):
        params = {
            "purpose": "test",
            "maze_path": str(mazes_dir / "closed.csv"),
            "history_name": "Array",
            "max_steps": 1000,
            "repeat": 3,
        }
        row = run_one(params)
        assert row["purpose"] == "test"
        assert row["repeat"] == 3
        assert row["walk.solved"] is False

    def test_run_one_failure_returns_none(self, tmp_path, capsys):
        row = run_one({
            "purpose": "test",
            "maze_path": str(tmp_path / "missing.csv"),
            "history_name": "Array",
            "max_steps": 1000,
            "repeat": 0,
        })
        assert row is None
        assert "[ERROR]" in capsys.readouterr().out

    def test_main_batch_single_job_writes_csv(self, mazes_dir, tmp_path):
        grid = {
            "purpose": ["test"],
            "maze_path": [str(mazes_dir / "tiny.csv")],
            "history_name": ["LinkedList"],
            "max_steps": [1000],
            "repeat": [0],
        }
        out_path = main_batch(grid=grid, out_dir=tmp_path)

        with out_path.open(newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 1
        assert list(rows[0].keys())[0] == "purpose"
        assert rows[0]["walk.solved"] == "True"
        assert rows[0]["history_name"] == "LinkedList"

    def test_main_batch_empty_grid(self, tmp_path):
        assert main_batch(grid={"repeat": []}, out_dir=tmp_path) is None
