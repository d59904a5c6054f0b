# batch_config.py
from __future__ import annotations

from typing import Dict, List, Any

# ---------------------------------------------------------------------------
# CPU usage for batch_run.py
# ---------------------------------------------------------------------------
# If CPU_COUNT is None, batch_run.py will use mp.cpu_count().
# Otherwise, it will use exactly this many worker processes.
#
# Runtimes are wall-clock per walk, so fewer workers than cores gives
# less noisy numbers.
CPU_COUNT: int | None = 2

# ---------------------------------------------------------------------------
# Parameter grid for batch_run.py
# ---------------------------------------------------------------------------
# PARAM_GRID will run all permutations (Cartesian product) of the values.
#
# Example:
#   "maze_path": ["mazes/tiny.csv", "mazes/labyrinth.csv"]
#   "history_name": ["LinkedList", "Array"]
# will walk each of the 2 mazes with each of the 2 histories.
#
# Be careful: experiment count grows exponentially in the number of values
# per key, i.e.  prod(len(v) for v in PARAM_GRID.values()).
PARAM_GRID: Dict[str, List[Any]] = {
    # --- meta ---
    "purpose": ["history_comparison"],  # free-text label for this batch

    # --- mazes ---
    "maze_path": ["mazes/tiny.csv", "mazes/labyrinth.csv", "mazes/closed.csv"],

    # --- history implementation (see history/) ---
    #   "LinkedList" - doubly linked list, one node per entry
    #   "Array"      - Python list used as a growable array
    "history_name": ["LinkedList", "Array"],

    # cap on heuristic steps per walk, protects against mazes with loops
    "max_steps": [100_000],

    # --- repetitions ---
    "repeat": [i for i in range(20)],  # identical runs, to get a runtime distribution
}
