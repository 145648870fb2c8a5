import time

from gridsearch.grid import reset_search_state
from gridsearch.strategies.common import (
    StableFrontier, manhattan_distance, neighbors, found_outcome, failed_outcome,
)


def run_astar(grid, start, end):
    """
    Performs A* search from start to end using Manhattan distance as heuristic.
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
    start.heuristic_cost = manhattan_distance(start, end)
    start.total_priority = start.heuristic_cost

    visitation_order = []
    frontier = StableFrontier()
    frontier.push(grid.index_of(start), start.total_priority, 0)

    while frontier:
        _f, idx = frontier.pop()
        node = grid.cells[idx]
        if node.visited or node.blocked:
            continue
        node.visited = True
        visitation_order.append(node)

        if node is end:
            return found_outcome(grid, end, visitation_order, started_at, "astar")

        step = len(visitation_order)
        for neighbor in neighbors(node, grid):
            if neighbor.visited:
                continue
            tentative_g = node.tentative_cost + 1
            if tentative_g < neighbor.tentative_cost:
                neighbor.predecessor = idx
                neighbor.tentative_cost = tentative_g
                neighbor.heuristic_cost = manhattan_distance(neighbor, end)
                neighbor.total_priority = tentative_g + neighbor.heuristic_cost
                frontier.push(grid.index_of(neighbor), neighbor.total_priority, step)

    return failed_outcome(visitation_order, started_at, "astar")
