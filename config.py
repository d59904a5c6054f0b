# config.py
from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass
class Config:
    # maze file to solve; None opens a file dialog (main.py only)
    maze_path: Optional[str] = "mazes/labyrinth.csv"

    # history implementations to compare, run in this order on the same maze
    history_names: Tuple[str, ...] = ("LinkedList", "Array")

    # print every move / return to the terminal
    log_events: bool = False

    # cap on heuristic steps per walk (None = run until exit or stuck)
    max_steps: Optional[int] = 100_000

    # where run folders are created
    output_base: str = "outputs"

    # render maze.png with the trail of the first walker
    draw: bool = True
