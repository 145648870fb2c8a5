import math
import time

from gridsearch.grid import reset_search_state
from gridsearch.strategies.common import StableFrontier, neighbors, found_outcome, failed_outcome


def run_dijkstra(grid, start, end):
    """
    Dijkstra's algorithm - uninformed shortest path search over the grid.
    Args:
        grid: Grid to search; its per-search fields are reset first
        start: start Cell (must belong to `grid`)
        end: end Cell (must belong to `grid`)
    Returns:
        SearchOutcome with path_cost equal to the end cell's tentative cost
    """
    started_at = time.perf_counter()
    reset_search_state(grid)
    start.tentative_cost = 0

    # Every cell starts in the queue in row-major order, so equal costs pop row by row
    frontier = StableFrontier()
    for idx, cell in enumerate(grid.cells):
        frontier.push(idx, cell.tentative_cost, 0)
    visitation_order = []

    while frontier:
        cost, idx = frontier.pop()
        node = grid.cells[idx]
        if node.visited or node.blocked:
            continue
        # Everything left in the queue is unreachable
        if cost == math.inf:
            break

        node.visited = True
        visitation_order.append(node)

        if node is end:
            return found_outcome(grid, end, visitation_order, started_at, "dijkstra")

        step = len(visitation_order)
        for neighbor in neighbors(node, grid):
            if neighbor.visited:
                continue
            new_cost = node.tentative_cost + 1
            if neighbor.tentative_cost > new_cost:
                neighbor.tentative_cost = new_cost
                neighbor.predecessor = idx
                frontier.push(grid.index_of(neighbor), new_cost, step)

    return failed_outcome(visitation_order, started_at, "dijkstra")
