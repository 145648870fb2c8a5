"""Package exposing the grid search strategies and the runner that dispatches between them."""
from enum import Enum

from gridsearch.errors import InvalidEndpoints, UnknownStrategy
from .dijkstra import run_dijkstra
from .astar import run_astar
from .bfs import run_bfs
from .dfs import run_dfs
from .greedy import run_greedy
from .common import SearchOutcome, manhattan_distance, neighbors, reconstruct_path


class Strategy(str, Enum):
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    BFS = "bfs"
    DFS = "dfs"
    GREEDY = "greedy"

    @classmethod
    def parse(cls, name):
        """Maps a user supplied name (any case) to a Strategy, raising UnknownStrategy otherwise."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownStrategy(name, [s.value for s in cls]) from None


def validate_endpoints(grid, start, end):
    """Fails fast when start/end cannot be searched between on this grid."""
    for label, cell in (("start", start), ("end", end)):
        if cell is None:
            raise InvalidEndpoints(f"No {label} cell given")
        if not grid.owns(cell):
            raise InvalidEndpoints(f"The {label} cell {cell!r} does not belong to this grid")
        if cell.blocked:
            raise InvalidEndpoints(f"The {label} cell {cell!r} is blocked")

    flagged_starts = [cell for cell in grid.cells if cell.is_start]
    flagged_ends = [cell for cell in grid.cells if cell.is_end]
    if len(flagged_starts) > 1 or len(flagged_ends) > 1:
        raise InvalidEndpoints(
            f"Grid has {len(flagged_starts)} start and {len(flagged_ends)} end cells flagged, expected one of each"
        )
    if flagged_starts and flagged_starts[0] is not start:
        raise InvalidEndpoints(f"Grid start is {flagged_starts[0]!r} but the search was given {start!r}")
    if flagged_ends and flagged_ends[0] is not end:
        raise InvalidEndpoints(f"Grid end is {flagged_ends[0]!r} but the search was given {end!r}")


def run(strategy_name, grid, start, end):
    """Runs the named strategy on `grid` from `start` to `end`.

    Args:
        strategy_name: one of "dijkstra", "astar", "bfs", "dfs", "greedy" (or a Strategy)
        grid: Grid to search, mutated in place
        start: start Cell of `grid`
        end: end Cell of `grid`
    Returns:
        SearchOutcome
    Raises:
        UnknownStrategy: the name is not one of the five strategies
        InvalidEndpoints: start/end are blocked, foreign to the grid or disagree with its flags
    """
    strategy = Strategy.parse(strategy_name)
    validate_endpoints(grid, start, end)

    if strategy is Strategy.DIJKSTRA:
        return run_dijkstra(grid, start, end)
    elif strategy is Strategy.ASTAR:
        return run_astar(grid, start, end)
    elif strategy is Strategy.BFS:
        return run_bfs(grid, start, end)
    elif strategy is Strategy.DFS:
        return run_dfs(grid, start, end)
    else:
        return run_greedy(grid, start, end)


__all__ = [
    "Strategy",
    "SearchOutcome",
    "run",
    "validate_endpoints",
    "run_dijkstra",
    "run_astar",
    "run_bfs",
    "run_dfs",
    "run_greedy",
    "neighbors",
    "manhattan_distance",
    "reconstruct_path",
]
