import os
from collections import deque
from pathlib import Path

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from gridsearch.grid import create_grid

STRATEGIES = ["dijkstra", "astar", "bfs", "dfs", "greedy"]
OPTIMAL_STRATEGIES = ["dijkstra", "astar", "bfs"]
CASES_DIR = Path(__file__).resolve().parent.parent / "Test_Cases_Grid"


def build_grid(rows, cols, start, end, walls=()):
    """Returns (grid, start_cell, end_cell) with the given walls set."""
    grid = create_grid(rows, cols)
    for r, c in walls:
        grid.set_wall(r, c)
    return grid, grid.set_start(*start), grid.set_end(*end)


def oracle_distance(rows, cols, walls, start, end):
    """Plain BFS over coordinates, independent of the engine. None when unreachable."""
    walls = set(walls)
    dist = {start: 0}
    q = deque([start])
    while q:
        r, c = q.popleft()
        if (r, c) == end:
            return dist[(r, c)]
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in walls and (nr, nc) not in dist:
                dist[(nr, nc)] = dist[(r, c)] + 1
                q.append((nr, nc))
    return None


@pytest.fixture
def cases_dir():
    return CASES_DIR
