"""
Timing Module - Stopwatch, benchmarks and process memory readings.
"""

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

import numpy as np
import psutil

logger = logging.getLogger(__name__)


def measure_time(func: Callable[[], Any]) -> float:
    """Run func once and return the elapsed time in milliseconds."""
    start = time.perf_counter()
    func()
    return (time.perf_counter() - start) * 1000


def current_rss_mb() -> float:
    """Resident set size of this process in megabytes."""
    return psutil.Process(os.getpid()).memory_info().rss / (1024 * 1024)


class PerformanceTimer:
    """
    Stopwatch with labelled records.

    Example:
        timer = PerformanceTimer()
        timer.start()
        run_something()
        timer.record("something", timer.stop())
        print(timer.report())
    """

    def __init__(self):
        self._start_time: float = 0.0
        self._results: Dict[str, float] = {}

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> float:
        """Milliseconds since the last start()."""
        return (time.perf_counter() - self._start_time) * 1000

    def record(self, label: str, time_ms: float) -> None:
        self._results[label] = time_ms

    def results(self) -> Dict[str, float]:
        return dict(self._results)

    def clear(self) -> None:
        self._results.clear()

    def report(self) -> str:
        """Table of recorded times."""
        lines = [
            "========== Performance Report ==========",
            f"{'Test Item':<30}{'Time (ms)':>15}",
            "-" * 45,
        ]
        for label, time_ms in self._results.items():
            lines.append(f"{label:<30}{time_ms:>15.3f}")
        lines.append("=" * 45)
        return "\n".join(lines)


@dataclass
class BenchmarkResult:
    """
    Statistics over repeated runs of one callable.

    Attributes:
        test_name: Label of the benchmark
        iterations: Number of timed runs
        all_times: Each run in milliseconds
        rss_delta_mb: Change in process RSS across the whole benchmark
    """
    test_name: str
    iterations: int
    all_times: List[float] = field(default_factory=list)
    rss_delta_mb: float = 0.0

    @property
    def avg_time(self) -> float:
        return float(np.mean(self.all_times)) if self.all_times else 0.0

    @property
    def min_time(self) -> float:
        return float(np.min(self.all_times)) if self.all_times else 0.0

    @property
    def max_time(self) -> float:
        return float(np.max(self.all_times)) if self.all_times else 0.0

    @property
    def std_dev(self) -> float:
        """Population standard deviation."""
        return float(np.std(self.all_times)) if self.all_times else 0.0

    @property
    def median(self) -> float:
        return float(np.median(self.all_times)) if self.all_times else 0.0


def run_benchmark(test_name: str, func: Callable[[], Any], iterations: int = 100) -> BenchmarkResult:
    """
    Time func over several iterations.

    Args:
        test_name: Label for the result
        func: Zero-argument callable to time
        iterations: Number of runs (must be positive)

    Returns:
        BenchmarkResult with every run time recorded
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")

    rss_before = current_rss_mb()
    times = [measure_time(func) for _ in range(iterations)]
    result = BenchmarkResult(
        test_name=test_name,
        iterations=iterations,
        all_times=times,
        rss_delta_mb=current_rss_mb() - rss_before,
    )
    logger.debug(
        f"Benchmark {test_name}: avg {result.avg_time:.3f}ms over {iterations} runs"
    )
    return result
