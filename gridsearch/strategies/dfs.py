import time

from gridsearch.grid import reset_search_state
from gridsearch.strategies.common import neighbors, found_outcome, failed_outcome


def run_dfs(grid, start, end):
    """Depth-First Search: returns a SearchOutcome whose path_cost is the length of the path it found.

    A neighbour's tentative cost is written every time it is pushed, so the
    last pusher wins; its predecessor is written once, when it is expanded.
    """
    started_at = time.perf_counter()
    reset_search_state(grid)

    start.tentative_cost = 0
    stack = [(grid.index_of(start), None)]  # (cell index, parent index)
    visitation_order = []

    while stack:
        idx, parent = stack.pop()
        node = grid.cells[idx]
        if node.visited or node.blocked:
            continue
        node.visited = True
        visitation_order.append(node)
        if parent is not None:
            node.predecessor = parent

        if node is end:
            return found_outcome(grid, end, visitation_order, started_at, "dfs", cost_from_path=True)

        # the last neighbour pushed is expanded first
        for neighbor in neighbors(node, grid):
            if not neighbor.visited:
                neighbor.tentative_cost = node.tentative_cost + 1
                stack.append((grid.index_of(neighbor), idx))

    return failed_outcome(visitation_order, started_at, "dfs")
