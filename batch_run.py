#!/usr/bin/env python3
"""
Batch benchmark runner.

Walks many mazes many times with every history implementation and
collects one CSV row per walk, so the implementations can be compared
on runtime.

High-level behavior
-------------------

1. Build the parameter grid from batch_config.PARAM_GRID
   (maze files, history implementations, step cap, repeat index, purpose).
2. For each combination:
   - Load the maze and build a fresh MazeWalker.
   - walk() once and collect its metrics.
3. Use multiprocessing to spread runs over CPU cores.
4. Flatten the metrics + parameters into a single row.
5. Append rows to `outputs_batch/batch_results.csv`.

If `outputs_batch/batch_results.csv` already exists its header is reused
and new rows are appended with the same columns.

Usage
-----

From the repo root:

    python batch_run.py

then plot with plot_utils.py.
"""

import csv
import itertools
import multiprocessing as mp
from pathlib import Path
from typing import Dict, Any, List, Optional
import traceback

from batch_config import CPU_COUNT, PARAM_GRID
from io_utils import load_maze
from walker import MazeWalker


def iter_param_combinations(grid: Dict[str, List[Any]]):
    """Yield dicts for each combination in the parameter grid."""
    keys = list(grid.keys())
    value_lists = [grid[k] for k in keys]
    for combo in itertools.product(*value_lists):
        yield dict(zip(keys, combo))


def flatten_dict(
    d: Dict[str, Any],
    parent_key: str = "",
    sep: str = ".",
) -> Dict[str, Any]:
    """
    Turn nested dicts into a flat dict with dotted keys:

        {"a": {"b": 1}, "c": 2}  ->  {"a.b": 1, "c": 2}
    """
    items: Dict[str, Any] = {}
    for k, v in d.items():
        new_key = f"{parent_key}{sep}{k}" if parent_key else k
        if isinstance(v, dict):
            items.update(flatten_dict(v, new_key, sep=sep))
        else:
            items[new_key] = v
    return items


def run_single_experiment(
    purpose: str,                # meta label, only for the CSV
    maze_path: str,
    history_name: str,
    max_steps: Optional[int],
    repeat: int,                 # repetition index, only for the CSV
) -> Dict[str, Any]:
    """Walk one maze once and return a flat dict of metrics."""
    grid, start = load_maze(maze_path)

    walker = MazeWalker(
        grid=grid,
        start=start,
        history_name=history_name,
        max_steps=max_steps,
    )
    solved = walker.walk()

    summary: Dict[str, Any] = {
        "maze": {
            "width": grid.width(),
            "height": grid.height(),
            "open_cells": int(grid.cells.sum()),
        },
        "walk": {
            "solved": solved,
            "steps": walker.steps,
            "backtracks": walker.backtracks,
            "runtime": walker.last_runtime,
            "final_x": walker.position.x,
            "final_y": walker.position.y,
        },
        "history": {
            "implementation": walker.history.name,
            "push_count": walker.history.push_count,
            "pop_count": walker.history.pop_count,
            "remaining": walker.history.count(),
        },
    }
    return flatten_dict(summary)


def run_one(params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Worker function for each process.

    Returns the merged {params..., metrics...} dict, or None (after printing
    the error) when the run fails.
    """
    params = dict(params)

    try:
        metrics = run_single_experiment(**params)
    except Exception as e:
        print(f"[ERROR] run_single_experiment failed for params={params}: {e}")
        traceback.print_exc()
        return None

    merged: Dict[str, Any] = {**params, **metrics}
    return merged


def _read_header(out_path: Path) -> Optional[List[str]]:
    with out_path.open("r", newline="") as f:
        reader = csv.reader(f)
        try:
            header = next(reader)
        except StopIteration:
            header = []
    return header or None


def main_batch(
    grid: Dict[str, List[Any]] = PARAM_GRID,
    out_dir: str | Path = "outputs_batch",
    cpu_count: Optional[int] = CPU_COUNT,
) -> Optional[Path]:
    combos = list(iter_param_combinations(grid))
    total = len(combos)
    if total == 0:
        print("No parameter combinations to run. Check PARAM_GRID.")
        return None

    print(f"Total experiments to run: {total}")

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "batch_results.csv"

    fieldnames = None
    if out_path.exists():
        print(f"Appending to existing CSV: {out_path}")
        fieldnames = _read_header(out_path)

    # No header yet: run the first job synchronously to infer the columns.
    start_index = 0
    if fieldnames is None:
        print("Running first job synchronously to infer CSV columns...")
        first_row = None
        while first_row is None and start_index < total:
            first_row = run_one(combos[start_index])
            start_index += 1
        if first_row is None:
            print("[ERROR] Every experiment failed; nothing written.")
            return None

        fieldnames = sorted(first_row.keys())
        # 'purpose' first
        if "purpose" in fieldnames:
            fieldnames.remove("purpose")
            fieldnames = ["purpose"] + fieldnames

        with out_path.open("w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            writer.writeheader()
            writer.writerow(first_row)
            f.flush()
        print(f"Created new CSV and wrote first row to {out_path}")
    else:
        print(f"Using existing header with {len(fieldnames)} columns.")

    remaining = combos[start_index:]
    if not remaining:
        print("No remaining experiments to run; done.")
        return out_path

    num_procs = min(cpu_count, mp.cpu_count()) if cpu_count else mp.cpu_count()
    print(f"Running remaining {len(remaining)} experiments using {num_procs} processes ...")

    done = start_index
    with out_path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        with mp.Pool(processes=num_procs) as pool:
            for row in pool.imap_unordered(run_one, remaining):
                done += 1
                if row is None:
                    # already reported by run_one
                    continue

                writer.writerow(row)
                f.flush()
                if done % 10 == 0 or done == total:
                    print(f"Completed {done}/{total} experiments")

    print(f"All done. Results in {out_path}")
    return out_path


if __name__ == "__main__":
    main_batch()
