#!/usr/bin/env python3
# src/colstruct/batch.py
"""
Batch processing of many structure records through a chain of pipeline stages.

Each record is processed independently; a failure rejects only that record
and is reported in the batch result.
"""

from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union
import logging

from tqdm import tqdm

from .domain.implementations.pipeline_stages import ChainedStage
from .domain.interfaces.pipeline_stage import PipelineStage
from .utils.benchmarking import PerformanceStats, timer

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Configure console (and optional file) logging for the package."""
    package_logger = logging.getLogger("colstruct")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.setLevel(level)
    return package_logger


@dataclass
class RecordFailure:
    """A record rejected by one of the stages."""

    key: str
    error_type: str
    message: str


@dataclass
class BatchResult:
    """Outputs, failures and timings of a batch run."""

    outputs: List[Tuple[str, Any]] = field(default_factory=list)
    failures: List[RecordFailure] = field(default_factory=list)
    stats: PerformanceStats = field(default_factory=PerformanceStats)

    @property
    def values(self) -> List[Any]:
        return [value for _, value in self.outputs]

    @property
    def failed_keys(self) -> List[str]:
        return [failure.key for failure in self.failures]


def process_record(
    args: Tuple[str, Any, Sequence[PipelineStage]],
) -> Tuple[str, List[Any], Optional[RecordFailure], PerformanceStats]:
    """Run one record through every stage.

    Args:
        args: Tuple containing (key, record, stages)

    Returns:
        Tuple of (key, outputs, failure or None, timings)
    """
    key, value, stages = args
    stats = PerformanceStats()
    values = [value]
    try:
        for stage in stages:
            with timer(stage.name, stats):
                values = [out for v in values for out in stage.apply(v)]
            if not values:
                break
    except Exception as e:
        logger.warning(f"Rejected record {key}: {type(e).__name__}: {e}")
        return key, [], RecordFailure(key, type(e).__name__, str(e)), stats
    return key, values, None, stats


class BatchRunner:
    """Applies a chain of stages to (key, record) pairs."""

    def __init__(
        self,
        stages: Union[PipelineStage, Sequence[PipelineStage]],
        n_workers: int = 1,
        show_progress: bool = False,
    ):
        """
        Initialize runner.

        Args:
            stages: A stage, or stages applied in order
            n_workers: Number of worker processes; 1 runs in-process
            show_progress: Whether to display a tqdm progress bar
        """
        if isinstance(stages, PipelineStage):
            stages = [stages]
        self.stages: List[PipelineStage] = ChainedStage(stages).stages
        if not self.stages:
            raise ValueError("At least one stage is required")
        self.n_workers = max(1, n_workers)
        self.show_progress = show_progress

    def run(self, records: Iterable[Tuple[str, Any]]) -> BatchResult:
        """
        Process every record.

        Args:
            records: Iterable of (key, record) pairs

        Returns:
            BatchResult; with several workers, outputs follow completion order
        """
        records = list(records)
        result = BatchResult()
        logger.info(
            f"Processing {len(records)} records through "
            f"{' -> '.join(stage.name for stage in self.stages)}"
        )

        for key, values, failure, stats in self._iter_results(records):
            result.outputs.extend((key, value) for value in values)
            if failure is not None:
                result.failures.append(failure)
            result.stats.merge(stats)

        logger.info(
            f"Finished: {len(result.outputs)} outputs, {len(result.failures)} rejected records"
        )
        logger.debug(result.stats.report())
        return result

    def _iter_results(self, records: List[Tuple[str, Any]]):
        tasks = [(key, value, self.stages) for key, value in records]
        if self.n_workers == 1:
            for task in tqdm(tasks, disable=not self.show_progress, desc="Records"):
                yield process_record(task)
            return

        with ProcessPoolExecutor(max_workers=self.n_workers) as executor:
            futures = [executor.submit(process_record, task) for task in tasks]
            for future in tqdm(
                as_completed(futures),
                total=len(futures),
                disable=not self.show_progress,
                desc="Records",
            ):
                yield future.result()
