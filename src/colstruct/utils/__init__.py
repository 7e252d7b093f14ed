from .benchmarking import PerformanceStats, StageTimings, timer

__all__ = [
    'PerformanceStats',
    'StageTimings',
    'timer'
]
