"""Grid path-search engine: five interchangeable strategies over a 4-connected grid."""
from gridsearch.errors import GridSearchError, InvalidEndpoints, ScenarioFormatError, UnknownStrategy
from gridsearch.grid import Cell, Grid, create_default_grid, create_grid, reset_search_state
from gridsearch.strategies import SearchOutcome, Strategy, run

__all__ = [
    "Cell",
    "Grid",
    "create_grid",
    "create_default_grid",
    "reset_search_state",
    "Strategy",
    "SearchOutcome",
    "run",
    "GridSearchError",
    "UnknownStrategy",
    "InvalidEndpoints",
    "ScenarioFormatError",
]
