from pathlib import Path
from typing import Optional

from config import Config
from io_utils import load_maze, make_run_dir, save_config, save_summary
from viz import draw_maze
from walker import MazeWalker


def ask_maze_path() -> Optional[str]:
    """Let the user pick a maze file; None if the dialog is cancelled."""
    import tkinter as tk
    from tkinter import filedialog

    root = tk.Tk()
    root.withdraw()
    try:
        path = filedialog.askopenfilename(
            title="Choose a maze file",
            initialdir=str(Path.cwd()),
            filetypes=[("Maze CSV", "*.csv"), ("All files", "*.*")],
        )
    finally:
        root.destroy()
    return path or None


def main() -> None:
    """
    Single-run entry point: solve one maze once per history implementation.

    Typical usage:
      1. Open config.py and edit the Config defaults
         (maze file, history implementations, logging, ...).
      2. Run:
             python main.py
      3. Inspect the output folder under outputs/ (maze.png, summary.json).
    """

    # ------------------------------------------------------------------
    # 1) Configuration and maze
    # ------------------------------------------------------------------
    cfg = Config()

    maze_path = cfg.maze_path
    if maze_path is None:
        maze_path = ask_maze_path()
        if maze_path is None:
            return
        cfg.maze_path = maze_path

    grid, start = load_maze(maze_path)

    # ------------------------------------------------------------------
    # 2) Output directory + config.json
    # ------------------------------------------------------------------
    run_dir = make_run_dir(maze_path, grid, base=cfg.output_base)
    save_config(cfg, run_dir)

    # ------------------------------------------------------------------
    # 3) One fresh walker per history implementation, same grid/start
    # ------------------------------------------------------------------
    walkers = []
    for name in cfg.history_names:
        walker = MazeWalker(
            grid=grid,
            start=start,
            history_name=name,
            log_events=cfg.log_events,
            max_steps=cfg.max_steps,
        )
        solved = walker.walk()
        print(f"{name}: solved={solved}, runtime={walker.last_runtime:.6f} s")
        walkers.append((walker, solved))

    if len(walkers) >= 2:
        (a, _), (b, _) = walkers[0], walkers[1]
        diff = a.last_runtime - b.last_runtime
        slower, faster = (a, b) if diff >= 0 else (b, a)
        print(
            f"{slower.history_name} is slower than {faster.history_name} by {abs(diff):.6f} s."
        )

    # ------------------------------------------------------------------
    # 4) Summary
    # ------------------------------------------------------------------
    summary: dict = {
        "maze": {
            "path": str(maze_path),
            "width": grid.width(),
            "height": grid.height(),
            "start": [start.x, start.y],
        },
        "walks": {},
    }
    for walker, solved in walkers:
        summary["walks"][walker.history_name] = {
            "solved": solved,
            "final_position": [walker.position.x, walker.position.y],
            "steps": walker.steps,
            "backtracks": walker.backtracks,
            "runtime": walker.last_runtime,
            "history_left": walker.history.count(),
            "push_count": walker.history.push_count,
            "pop_count": walker.history.pop_count,
        }
    save_summary(summary, run_dir)

    # ------------------------------------------------------------------
    # 5) Picture of the first walk
    # ------------------------------------------------------------------
    if cfg.draw and walkers:
        first, solved = walkers[0]
        draw_maze(
            grid,
            start,
            out_path=run_dir / "maze.png",
            trail=first.trail,
            title=f"{Path(maze_path).stem}: {'solved' if solved else 'no exit found'}",
        )

    print(f"Run directory: {run_dir}")


if __name__ == "__main__":
    main()
