import time
import tracemalloc
from dataclasses import dataclass

import psutil

BYTE_UNITS = ("KB", "MB", "GB", "TB")


def format_bytes(n_bytes: int) -> str:
    """Human-readable size: plain bytes under 1 KB, otherwise the largest unit below 1024 with 2 decimals."""
    if n_bytes < 1024:
        return f"{n_bytes} B"
    size = float(n_bytes)
    for unit in BYTE_UNITS:
        size /= 1024.0
        if size < 1024 or unit == BYTE_UNITS[-1]:
            return f"{size:.2f} {unit}"


@dataclass
class RunMetrics:
    runtime_s: float
    peak_bytes: int    # peak Python allocations seen by tracemalloc
    rss_bytes: int     # process resident set size once the call returned

    @property
    def runtime_ms(self):
        return self.runtime_s * 1000

    def describe(self, method, outcome):
        """Single 'Metrics: key=value ...' line for one search run."""
        return (
            f"Metrics: method={method} nodes_expanded={outcome.visited_count} "
            f"path_cost={outcome.path_cost if outcome.found else 'N/A'} "
            f"runtime_ms={self.runtime_ms:.3f} peak_py_mem={format_bytes(self.peak_bytes)} "
            f"rss_now={format_bytes(self.rss_bytes)}"
        )


def execute_with_metrics(run_fn, *args, **kwargs):
    """Calls run_fn(*args, **kwargs) under tracemalloc.

    Returns: (result, RunMetrics). Exceptions from run_fn propagate once tracing is stopped.
    """
    tracemalloc.start()
    try:
        t0 = time.perf_counter()
        result = run_fn(*args, **kwargs)
        runtime_s = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    return result, RunMetrics(runtime_s, peak, psutil.Process().memory_info().rss)
