import heapq
import itertools
import math
import time
from dataclasses import dataclass, field
from typing import List

from gridsearch.grid import Cell

# up, down, left, right; this order decides every tie-break
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Marks "not yet in the frontier" in a key history; sorts after any real (key, step) pair
_ABSENT = (math.inf, math.inf)


class StableFrontier:
    """Binary heap that pops in the order of an open list re-sorted with a stable sort before every pop.

    With a stable sort, two cells whose keys tie keep the relative order they
    had after the previous sort. That order goes back through every earlier
    key each cell held, so an entry's heap key is its key history, newest
    first: (key, step it was set, previous key, step, ..., _ABSENT, insertion seq).
    Keys may only decrease. `step` is the number of pops done when the key was set.
    """
    def __init__(self):
        self._heap = []
        self._history = {}     # {cell index: (key, step, key, step, ...)}
        self._first_seq = {}   # {cell index: order of first insertion}
        self._counter = itertools.count()

    def __len__(self):
        return len(self._heap)

    def push(self, idx, key, step):
        """Inserts cell `idx` or lowers its key. Re-pushing an unchanged key is a no-op."""
        history = self._history.get(idx, ())
        if history and history[0] == key:
            return
        if idx not in self._first_seq:
            self._first_seq[idx] = next(self._counter)
        # only the last change before a sort is seen by that sort
        if history and history[1] == step:
            history = history[2:]
        history = (key, step) + history
        self._history[idx] = history
        heapq.heappush(self._heap, (history + _ABSENT + (self._first_seq[idx],), idx))

    def pop(self):
        """Removes the next entry and returns (key, cell index). Superseded entries still come out, later."""
        full_key, idx = heapq.heappop(self._heap)
        return full_key[0], idx


@dataclass
class SearchOutcome:
    """Result of one strategy call."""
    path: List[Cell] = field(default_factory=list)
    visitation_order: List[Cell] = field(default_factory=list)
    path_cost: float = math.inf
    elapsed_time: float = 0.0     # seconds, informational only
    found: bool = False
    algorithm: str = ""

    @property
    def visited_count(self) -> int:
        return len(self.visitation_order)

    def path_positions(self):
        return [cell.position for cell in self.path]

    def visited_positions(self):
        return [cell.position for cell in self.visitation_order]


def neighbors(cell, grid):
    """Returns the in-bounds, unblocked cells adjacent to `cell` (up, down, left, right)."""
    out = []
    for dr, dc in DIRECTIONS:
        row, col = cell.row + dr, cell.col + dc
        if not grid.in_bounds(row, col):
            continue
        neighbor = grid.cells[row * grid.cols + col]
        if not neighbor.blocked:
            out.append(neighbor)
    return out


def manhattan_distance(a, b):
    """Manhattan distance between two cells."""
    return abs(a.row - b.row) + abs(a.col - b.col)


def reconstruct_path(grid, end_cell):
    """Reconstructs the start-to-end path by following predecessor indices back from `end_cell`."""
    path = [end_cell]
    current = end_cell
    while current.predecessor is not None:
        current = grid.cells[current.predecessor]
        path.append(current)
    path.reverse()
    return path


def found_outcome(grid, end_cell, visitation_order, started_at, algorithm, cost_from_path=False):
    """Builds the outcome of a successful search and marks the path cells.

    Args:
        cost_from_path: report len(path) - 1 instead of the end cell's
            tentative cost. Used by strategies that do not guarantee a
            shortest path.
    """
    path = reconstruct_path(grid, end_cell)
    for cell in path:
        cell.on_path = True
    path_cost = len(path) - 1 if cost_from_path else end_cell.tentative_cost
    return SearchOutcome(
        path=path,
        visitation_order=visitation_order,
        path_cost=path_cost,
        elapsed_time=time.perf_counter() - started_at,
        found=True,
        algorithm=algorithm,
    )


def failed_outcome(visitation_order, started_at, algorithm):
    """Builds the outcome of a search whose frontier ran dry."""
    return SearchOutcome(
        path=[],
        visitation_order=visitation_order,
        path_cost=math.inf,
        elapsed_time=time.perf_counter() - started_at,
        found=False,
        algorithm=algorithm,
    )
