import argparse
import sys

from gridsearch.errors import GridSearchError
from gridsearch.file_reader import parse_scenario_file
from gridsearch.metrics import execute_with_metrics
from gridsearch.strategies import Strategy, run


def format_path(outcome):
    return " -> ".join(f"({cell.row},{cell.col})" for cell in outcome.path)


def main(filename, method, metrics_mode="none", show_grid=False, plot_path=None):
    """Runs one strategy on a scenario file and prints the result.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the normal output

    Returns the process exit status.
    """
    try:
        strategy = Strategy.parse(method)
        scenario = parse_scenario_file(filename)
        grid, start, end = scenario.build_grid()
        outcome, run_metrics = execute_with_metrics(run, strategy, grid, start, end)
    except GridSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read {filename}: {e}", file=sys.stderr)
        return 1

    # --- Output ---
    # <filename> <method>
    # Start: (r,c)  End: (r,c)  Grid: RxC
    # distance, cells visited, path
    print(f"{filename} {strategy.value}")
    print(f"Start: ({start.row},{start.col})  End: ({end.row},{end.col})  Grid: {grid.rows}x{grid.cols}")
    if outcome.found:
        print(f"Path found, distance:{outcome.path_cost}")
        print(f"Number of cells visited:{outcome.visited_count}")
        print(format_path(outcome))
    else:
        print("No path found")
        print(f"Number of cells visited:{outcome.visited_count}")

    if show_grid:
        print(grid.render_text())

    if plot_path:
        # matplotlib is only pulled in when a picture is requested
        import seegrid
        seegrid.save_outcome_plot(grid, outcome, plot_path, title=f"{scenario.name} ({strategy.value})")
        print(f"Plot written to {plot_path}")

    # Metrics (printed separately so the normal output format stays intact)
    if metrics_mode in ("stderr", "stdout"):
        line = run_metrics.describe(strategy.value, outcome)
        if metrics_mode == "stdout":
            print(line)
        else:
            print(line, file=sys.stderr)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Run a grid path search on a scenario file")
    parser.add_argument("filename", help="Scenario file (see Test_Cases_Grid/)")
    parser.add_argument("method", help="One of: " + ", ".join(s.value for s in Strategy))
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--metrics", "-m", dest="metrics_mode", action="store_const", const="stderr",
                       default="none", help="Print a metrics line to stderr")
    group.add_argument("--metrics-stdout", dest="metrics_mode", action="store_const", const="stdout",
                       help="Print the metrics line to stdout")
    parser.add_argument("--show-grid", action="store_true", help="Print the searched grid as text")
    parser.add_argument("--plot", metavar="PNG", help="Save a matplotlib picture of the search")
    return parser


if __name__ == "__main__":
    # e.g., python search.py Test_Cases_Grid/maze.txt astar --metrics
    args = build_parser().parse_args()
    sys.exit(main(args.filename, args.method, args.metrics_mode, args.show_grid, args.plot))
