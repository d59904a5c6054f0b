"""Tests for the single-run entry point."""

import json

import main
from config import Config


def test_main_compares_both_histories(mazes_dir, tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(
        main,
        "Config",
        lambda: Config(maze_path=str(mazes_dir / "tiny.csv"), output_base=str(tmp_path)),
    )
    main.main()

    out = capsys.readouterr().out
    assert "LinkedList: solved=True" in out
    assert "Array: solved=True" in out
    assert "is slower than" in out

    (run_dir,) = list(tmp_path.iterdir())
    assert (run_dir / "maze.png").exists()
    summary = json.loads((run_dir / "summary.json").read_text())
    assert summary["maze"]["start"] == [2, 2]
    assert summary["walks"]["LinkedList"]["backtracks"] == 1
    assert summary["walks"]["Array"]["final_position"] == [2, 4]


def test_main_cancelled_dialog(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "Config", lambda: Config(maze_path=None, output_base=str(tmp_path)))
    monkeypatch.setattr(main, "ask_maze_path", lambda: None)
    main.main()
    assert list(tmp_path.iterdir()) == []


def test_main_names_the_slower_history(mazes_dir, tmp_path, monkeypatch, capsys):
    runtimes = {"LinkedList": 0.001, "Array": 0.003}

    class FixedTimeWalker(main.MazeWalker):
        def walk(self):
            solved = super().walk()
            self.last_runtime = runtimes[self.history_name]
            return solved

    monkeypatch.setattr(main, "MazeWalker", FixedTimeWalker)
    monkeypatch.setattr(
        main,
        "Config",
        lambda: Config(maze_path=str(mazes_dir / "tiny.csv"), output_base=str(tmp_path), draw=False),
    )
    main.main()

    out = capsys.readouterr().out
    assert "Array is slower than LinkedList by 0.002000 s." in out
    assert "-0.00" not in out
