import argparse
import sys

import pandas as pd

from gridsearch import constants
from gridsearch.errors import GridSearchError
from gridsearch.file_reader import load_scenarios, parse_scenario_file
from gridsearch.scenarios import evaluate_scenarios, readable_results, summarize


def main(argv=None):
    """Benchmarks the strategies over scenario files and prints per-run and per-algorithm tables."""
    parser = argparse.ArgumentParser(description="Compare grid search strategies over scenario files")
    parser.add_argument("files", nargs="*",
                        help=f"Scenario files (default: every .txt in {constants.TEST_CASE_FOLDER}/)")
    parser.add_argument("--strategies", nargs="+", default=list(constants.STRATEGY_NAMES),
                        help="Strategies to run (default: all five)")
    parser.add_argument("--csv", help="Also write the per-run table to this CSV file")
    args = parser.parse_args(argv)

    try:
        if args.files:
            scenarios = [parse_scenario_file(f) for f in args.files]
        else:
            scenarios = load_scenarios(constants.TEST_CASE_FOLDER)
        results = evaluate_scenarios(scenarios, args.strategies)
    except GridSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if results.empty:
        print("No scenarios to compare")
        return 0

    with pd.option_context("display.max_rows", None, "display.width", 120):
        print(readable_results(results).to_string(index=False))
        print()
        print(summarize(results).to_string())

    if args.csv:
        results.to_csv(args.csv, index=False)
        print(f"\nResults written to {args.csv}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
