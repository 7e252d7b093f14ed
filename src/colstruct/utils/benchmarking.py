# src/colstruct/utils/benchmarking.py

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from statistics import median
from typing import Dict, List, Optional


@dataclass
class StageTimings:
    """Timing samples collected for one pipeline stage."""

    name: str
    times: List[float] = field(default_factory=list)

    def add(self, elapsed: float) -> None:
        self.times.append(elapsed)

    @property
    def count(self) -> int:
        return len(self.times)

    @property
    def total_time(self) -> float:
        return sum(self.times)

    @property
    def avg_time(self) -> float:
        return self.total_time / self.count if self.count > 0 else 0.0

    @property
    def median_time(self) -> float:
        return median(self.times) if self.times else 0.0

    def __str__(self) -> str:
        if not self.times:
            return f"{self.name}: No timing data"
        return (
            f"{self.name}: Total: {self.total_time:.2f}s, Count: {self.count}, "
            f"Avg: {self.avg_time:.4f}s, Median: {self.median_time:.4f}s, "
            f"Min: {min(self.times):.4f}s, Max: {max(self.times):.4f}s"
        )


class PerformanceStats:
    """Collect and report per-stage timings."""

    def __init__(self) -> None:
        self.stats: Dict[str, StageTimings] = {}

    def get_stats(self, name: str) -> StageTimings:
        """Get or create stats for a stage."""
        if name not in self.stats:
            self.stats[name] = StageTimings(name=name)
        return self.stats[name]

    def add_timing(self, name: str, elapsed: float) -> None:
        self.get_stats(name).add(elapsed)

    def merge(self, other: "PerformanceStats") -> None:
        """Fold timings gathered elsewhere (e.g. in a worker) into this object."""
        for name, timings in other.stats.items():
            self.get_stats(name).times.extend(timings.times)

    def report(self) -> str:
        """Generate a performance report."""
        if not self.stats:
            return "No performance data collected"

        lines = []
        total_time = sum(s.total_time for s in self.stats.values())
        for name in sorted(self.stats):
            stats = self.stats[name]
            pct = (stats.total_time / total_time) * 100 if total_time > 0 else 0
            lines.append(f"{stats} ({pct:.1f}%)")
        return "\n".join(lines)


@contextmanager
def timer(name: str, stats: Optional[PerformanceStats] = None):
    """Context manager timing a block, optionally recording into ``stats``."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if stats is not None:
            stats.add_timing(name, time.perf_counter() - start)
