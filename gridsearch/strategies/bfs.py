import time
from collections import deque

from gridsearch.grid import reset_search_state
from gridsearch.strategies.common import neighbors, found_outcome, failed_outcome


def run_bfs(grid, start, end):
    """Breadth-First Search; cells are marked visited when enqueued."""
    started_at = time.perf_counter()
    reset_search_state(grid)

    start.visited = True
    start.tentative_cost = 0
    q = deque([start])
    visitation_order = []

    while q:
        node = q.popleft()
        if node.blocked:
            continue
        visitation_order.append(node)

        if node is end:
            return found_outcome(grid, end, visitation_order, started_at, "bfs")

        idx = grid.index_of(node)
        for neighbor in neighbors(node, grid):
            if not neighbor.visited:
                neighbor.visited = True
                neighbor.tentative_cost = node.tentative_cost + 1
                neighbor.predecessor = idx
                q.append(neighbor)

    return failed_outcome(visitation_order, started_at, "bfs")
