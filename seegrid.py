import argparse
import sys

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from gridsearch.errors import GridSearchError
from gridsearch.file_reader import parse_scenario_file
from gridsearch.strategies import run


def visit_matrix(grid, outcome):
    """Matrix of visitation ranks (1 = first committed cell), NaN for unvisited cells."""
    ranks = np.full((grid.rows, grid.cols), np.nan)
    for rank, cell in enumerate(outcome.visitation_order, start=1):
        ranks[cell.row, cell.col] = rank
    return ranks


def draw_outcome(grid, outcome, ax=None, title=None):
    """Draws walls, visitation order, path and endpoints of a finished search."""
    if ax is None:
        _fig, ax = plt.subplots(figsize=(max(4, grid.cols * 0.3), max(3, grid.rows * 0.3)))

    walls = np.array([[1 if grid.cells[r * grid.cols + c].blocked else 0 for c in range(grid.cols)]
                      for r in range(grid.rows)])
    ax.imshow(walls, cmap=ListedColormap(["white", "#222222"]), vmin=0, vmax=1, interpolation="nearest")

    # Visitation order from light to dark
    ranks = visit_matrix(grid, outcome)
    if outcome.visited_count:
        ax.imshow(np.ma.masked_invalid(ranks), cmap="Blues", alpha=0.6, interpolation="nearest",
                  vmin=0, vmax=outcome.visited_count)

    if outcome.found:
        rows = [cell.row for cell in outcome.path]
        cols = [cell.col for cell in outcome.path]
        ax.plot(cols, rows, color="crimson", linewidth=2.5, zorder=3)

    start, end = grid.start_cell(), grid.end_cell()
    if start is not None:
        ax.scatter(start.col, start.row, s=120, color="lightgreen", edgecolor="darkgreen", linewidth=2, zorder=4)
    if end is not None:
        ax.scatter(end.col, end.row, s=120, color="lightcoral", edgecolor="darkred", linewidth=2, zorder=4)

    ax.set_xticks(np.arange(-0.5, grid.cols, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, grid.rows, 1), minor=True)
    ax.grid(which="minor", color="lightgray", linewidth=0.5)
    ax.tick_params(which="both", length=0, labelbottom=False, labelleft=False)

    status = f"distance {outcome.path_cost}" if outcome.found else "no path"
    label = title or outcome.algorithm
    ax.set_title(f"{label}: {status}, {outcome.visited_count} cells visited", fontsize=12, fontweight="bold")
    return ax


def save_outcome_plot(grid, outcome, out_path, title=None):
    fig, ax = plt.subplots(figsize=(max(4, grid.cols * 0.3), max(3, grid.rows * 0.3)))
    draw_outcome(grid, outcome, ax=ax, title=title)
    fig.tight_layout()
    fig.savefig(out_path, dpi=120)
    plt.close(fig)
    return out_path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Visualize a grid search")
    parser.add_argument("filename", help="Scenario file")
    parser.add_argument("method", help="dijkstra, astar, bfs, dfs or greedy")
    parser.add_argument("--out", help="Save to this PNG instead of opening a window")
    args = parser.parse_args(argv)

    try:
        scenario = parse_scenario_file(args.filename)
        grid, start, end = scenario.build_grid()
        outcome = run(args.method, grid, start, end)
    except GridSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read {args.filename}: {e}", file=sys.stderr)
        return 1

    title = f"{scenario.name} ({outcome.algorithm})"
    if args.out:
        save_outcome_plot(grid, outcome, args.out, title=title)
        print(f"Plot written to {args.out}")
    else:
        draw_outcome(grid, outcome, title=title)
        plt.tight_layout()
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
