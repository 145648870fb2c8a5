import time

from gridsearch.grid import reset_search_state
from gridsearch.strategies.common import (
    StableFrontier, manhattan_distance, neighbors, found_outcome, failed_outcome,
)


def run_greedy(grid, start, end):
    """Greedy Best-First Search ordered by Manhattan distance to the end cell alone."""
    started_at = time.perf_counter()
    reset_search_state(grid)

    start.tentative_cost = 0
    start.heuristic_cost = manhattan_distance(start, end)
    start.total_priority = start.heuristic_cost

    visitation_order = []
    frontier = StableFrontier()
    frontier.push(grid.index_of(start), start.heuristic_cost, 0)

    while frontier:
        _h, idx = frontier.pop()
        node = grid.cells[idx]
        if node.visited or node.blocked:
            continue
        node.visited = True
        visitation_order.append(node)

        if node is end:
            return found_outcome(grid, end, visitation_order, started_at, "greedy", cost_from_path=True)

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
                # a cell's heuristic never changes, so it keeps its first place in the queue
                frontier.push(grid.index_of(neighbor), neighbor.heuristic_cost, step)

    return failed_outcome(visitation_order, started_at, "greedy")
