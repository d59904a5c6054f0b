# walker.py
from __future__ import annotations

from dataclasses import dataclass, field
from time import perf_counter
from typing import Callable, List, Optional

from maze import Coordinate, Direction, Grid, invert, rotate
from history import History, make_history


@dataclass(frozen=True)
class MoveEvent:
    """
    One successful step of the walker.

    kind is "move" for a recorded forward step and "return" for an
    unrecorded backtracking step.
    """
    kind: str
    direction: Direction
    position: Coordinate


@dataclass
class MazeWalker:
    """
    Left-hand-rule maze walker with an explicit backtracking history.

    A walker is single use: walk() consumes its position and history, and
    calling it again resumes where the previous call stopped. Build a new
    walker for every traversal.
    """
    grid: Grid
    start: Coordinate
    history_name: str = "LinkedList"

    # control terminal logging
    log_events: bool = False

    # optional observer for every successful move
    on_event: Optional[Callable[[MoveEvent], None]] = None

    # upper bound on heuristic steps per walk(); None = unbounded
    max_steps: Optional[int] = None

    # metrics
    steps: int = 0
    backtracks: int = 0
    last_runtime: float = 0.0
    trail: List[Coordinate] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid.contains(self.start):
            raise ValueError(
                f"Start {self.start} is outside the {self.grid.width()}x{self.grid.height()} grid"
            )
        if not self.grid.passable(self.start.x, self.start.y):
            raise ValueError(f"Start {self.start} is a wall")
        self.history: History = make_history(self.history_name)
        self.position: Coordinate = self.start
        self.trail = [self.start]
        self._log(f"[INIT] Walker on {self.grid!r} from {self.start}, history={self.history_name}")

    # ---------- logging helper ---------- #

    def _log(self, msg: str) -> None:
        if self.log_events:
            print(msg)

    # ---------------- movement rules ---------------- #

    def can_move(self, direction: Direction) -> bool:
        x, y = self.position.x, self.position.y
        if direction is Direction.UP:
            return y < self.grid.height() - 1 and self.grid.passable(x, y + 1)
        if direction is Direction.RIGHT:
            return x < self.grid.width() - 1 and self.grid.passable(x + 1, y)
        if direction is Direction.DOWN:
            return y > 0 and self.grid.passable(x, y - 1)
        if direction is Direction.LEFT:
            return x > 0 and self.grid.passable(x - 1, y)
        return False

    def path_count(self) -> int:
        return sum(
            self.can_move(d)
            for d in (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
        )

    def dead_end(self) -> bool:
        return self.path_count() == 1

    def corridor(self) -> bool:
        return self.path_count() == 2

    def at_exit(self) -> bool:
        return self.position != self.start and self.grid.on_boundary(self.position)

    def move(self, direction: Direction, record: bool = True) -> bool:
        """
        Step one cell in `direction` if possible.
        Recorded moves are pushed onto the history; returns False (and does
        nothing) when the way is blocked.
        """
        if not self.can_move(direction):
            return False

        self.position = self.position.neighbor(direction)
        if record:
            self.history.push(direction)

        self.steps += 1
        self.trail.append(self.position)
        self._log(f"[MOVE] {direction.name.lower()} -> {self.position}")

        if self.on_event is not None:
            kind = "move" if record else "return"
            self.on_event(MoveEvent(kind=kind, direction=direction, position=self.position))
        return True

    # ---------------- backtracking ---------------- #

    def backtrack(self) -> Direction:
        """
        Undo recorded moves until standing on a junction (3+ open paths).

        Returns the direction originally taken away from that junction, or
        Direction.NONE if the history ran out first.
        """
        if self.history.count() == 0:
            return Direction.NONE

        direction = self._undo_last()
        while self.path_count() < 3:
            if self.history.count() == 0:
                return Direction.NONE
            direction = self._undo_last()

        return direction

    def _undo_last(self) -> Direction:
        self._log("--RETURN--")
        direction = self.history.pop()
        self.backtracks += 1
        self.move(invert(direction), record=False)
        return direction

    # ---------------- heuristic step ---------------- #

    def left_hand_move(self) -> bool:
        if self.history.count() > 0:
            prev = self.history.peek()
            if (
                self.move(rotate(prev))
                or self.move(prev)
                or self.move(rotate(prev, clockwise=True))
            ):
                return True

            last = self.backtrack()
            if last is Direction.NONE:
                return False
            # next branch clockwise from the one that dead-ended
            return self.move(rotate(last, clockwise=True))

        direction = Direction.UP
        return (
            self.move(rotate(direction))
            or self.move(direction)
            or self.move(rotate(direction, clockwise=True))
            or self.move(invert(direction))
        )

    def walk(self) -> bool:
        """Run the left-hand rule until an exit is reached or no move is left."""
        t0 = perf_counter()

        n = 0
        while not self.at_exit():
            if self.max_steps is not None and n >= self.max_steps:
                self._log(f"[WARN] Stopped after max_steps={self.max_steps}")
                break
            if not self.left_hand_move():
                break
            n += 1

        self.last_runtime = perf_counter() - t0
        solved = self.at_exit()
        self._log(
            f"[DONE] solved={solved} at {self.position}, steps={self.steps}, "
            f"backtracks={self.backtracks}, history={self.history.count()}"
        )
        return solved
