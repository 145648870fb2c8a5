import math
from dataclasses import dataclass, field, asdict
from typing import List, Tuple

import pandas as pd

from gridsearch import constants
from gridsearch.grid import create_grid
from gridsearch.metrics import execute_with_metrics, format_bytes
from gridsearch.strategies import Strategy, run

Position = Tuple[int, int]  # (row, col)

RESULT_COLUMNS = [
    "scenario_id", "algorithm", "success", "path_length",
    "nodes_explored", "execution_time", "efficiency", "peak_memory",
]


@dataclass
class Scenario:
    scenario_id: str
    name: str
    rows: int
    cols: int
    start: Position
    end: Position
    walls: List[Position] = field(default_factory=list)
    description: str = ""
    difficulty: str = "easy"      # easy | medium | hard
    category: str = "open"        # maze | open | obstacles | narrow

    def build_grid(self):
        """Builds a fresh grid for this scenario. Returns (grid, start_cell, end_cell)."""
        grid = create_grid(self.rows, self.cols)
        for row, col in self.walls:
            grid.set_wall(row, col)
        start = grid.set_start(*self.start)
        end = grid.set_end(*self.end)
        return grid, start, end


@dataclass
class ScenarioResult:
    scenario_id: str
    algorithm: str
    success: bool
    path_length: float
    nodes_explored: int
    execution_time: float         # milliseconds
    efficiency: float             # % of explored cells that ended on the path
    peak_memory: int = 0          # bytes, tracemalloc peak of the strategy call


def result_from_outcome(scenario_id, outcome, run_metrics=None):
    """Condenses a SearchOutcome into a ScenarioResult row."""
    if outcome.found and outcome.visited_count:
        efficiency = round(100.0 * len(outcome.path) / outcome.visited_count, 2)
    else:
        efficiency = 0.0
    return ScenarioResult(
        scenario_id=scenario_id,
        algorithm=outcome.algorithm,
        success=outcome.found,
        path_length=outcome.path_cost if outcome.found else math.inf,
        nodes_explored=outcome.visited_count,
        execution_time=outcome.elapsed_time * 1000,
        efficiency=efficiency,
        peak_memory=run_metrics.peak_bytes if run_metrics is not None else 0,
    )


def evaluate_scenario(scenario, strategies=constants.STRATEGY_NAMES):
    """Runs each strategy on its own freshly built grid of `scenario`."""
    results = []
    for name in strategies:
        strategy = Strategy.parse(name)
        grid, start, end = scenario.build_grid()
        outcome, run_metrics = execute_with_metrics(run, strategy, grid, start, end)
        results.append(result_from_outcome(scenario.scenario_id, outcome, run_metrics))
    return results


def evaluate_scenarios(scenarios, strategies=constants.STRATEGY_NAMES):
    """Evaluates every scenario with every strategy.

    Returns:
        pd.DataFrame: one row per (scenario, algorithm) with the RESULT_COLUMNS columns
    """
    rows = []
    for scenario in scenarios:
        rows.extend(asdict(r) for r in evaluate_scenario(scenario, strategies))
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def summarize(results_df):
    """Aggregates an evaluate_scenarios() table per algorithm."""
    if results_df.empty:
        return pd.DataFrame(columns=["success_rate", "mean_nodes_explored", "mean_efficiency", "mean_time_ms", "peak_py_mem"])
    summary = results_df.groupby("algorithm", sort=False).agg(
        success_rate=("success", "mean"),
        mean_nodes_explored=("nodes_explored", "mean"),
        mean_efficiency=("efficiency", "mean"),
        mean_time_ms=("execution_time", "mean"),
        peak_memory=("peak_memory", "max"),
    )
    summary["success_rate"] = summary["success_rate"] * 100
    summary = summary.round(3)
    summary["peak_py_mem"] = summary.pop("peak_memory").map(format_bytes)
    return summary


def readable_results(results_df):
    """Copy of an evaluate_scenarios() table with peak memory shown as KB/MB text."""
    readable = results_df.copy()
    readable["peak_memory"] = readable["peak_memory"].map(format_bytes)
    return readable.rename(columns={"peak_memory": "peak_py_mem"})
