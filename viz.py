# viz.py
from __future__ import annotations
from typing import Sequence
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

from maze import Coordinate, Grid


def maze_image(grid: Grid) -> np.ndarray:
    """RGB image of the grid, image[y, x], for imshow(origin="lower")."""
    bgcolor = np.array([0.96, 0.96, 0.96])     # light gray open cells
    wall_color = np.array([0.30, 0.30, 0.30])  # dark gray

    img = np.zeros((grid.height(), grid.width(), 3), dtype=float)
    img[:, :, :] = wall_color
    img[grid.cells.T] = bgcolor
    return img


def draw_maze(
    grid: Grid,
    start: Coordinate,
    out_path: str | Path,
    trail: Sequence[Coordinate] = (),
    title: str = "Left-hand maze walk",
) -> None:
    """
    Draw a snapshot of the maze:
      - open cells: light background
      - walls: dark gray
      - start: purple star
      - trail: blue line through every visited cell, in order
      - final position: green cross
    """
    width, height = grid.width(), grid.height()
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(max(3.0, width / 2.0), max(3.0, height / 2.0)))
    ax.imshow(maze_image(grid), origin="lower")

    # Grid lines (subtle)
    ax.set_xticks(np.arange(-0.5, width, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, height, 1), minor=True)
    ax.grid(which="minor", color="0.85", linestyle="-", linewidth=0.4)

    handles = []

    if len(trail) > 1:
        (h_trail,) = ax.plot(
            [p.x for p in trail],
            [p.y for p in trail],
            color="#1f77b4",      # blue
            linewidth=1.5,
            alpha=0.8,
            label="trail",
        )
        handles.append(h_trail)

    h_start = ax.scatter(
        [start.x],
        [start.y],
        marker="*",
        s=150,
        c="#9467bd",          # purple
        edgecolors="white",
        linewidths=1.0,
        label="start",
    )
    handles.append(h_start)

    if trail:
        end = trail[-1]
        h_end = ax.scatter(
            [end.x],
            [end.y],
            marker="x",
            s=80,
            c="#2ca02c",       # green
            linewidths=1.5,
            label="final position",
        )
        handles.append(h_end)

    ax.set_xlim(-0.5, width - 0.5)
    ax.set_ylim(-0.5, height - 0.5)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    fig.suptitle(title, fontsize=14, y=0.98)

    handles.append(Patch(facecolor=np.array([0.30, 0.30, 0.30]), edgecolor="black", label="wall"))
    fig.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, 0.93),
        ncol=len(handles),
        fontsize=8,
        frameon=False,
    )

    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.88])
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
