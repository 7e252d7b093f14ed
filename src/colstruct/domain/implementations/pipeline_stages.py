"""Concrete pipeline stage flavors.

Stages running in a process pool must be picklable, so pass module-level
functions, ``functools.partial`` objects or bound methods rather than lambdas.
"""

from typing import Callable, Iterable, List, Optional, Sequence

from ..interfaces.pipeline_stage import PipelineStage, I, O


class MapStage(PipelineStage[I, O]):
    """Record -> record."""

    def __init__(self, func: Callable[[I], O], name: Optional[str] = None):
        self._func = func
        self._name = name

    @property
    def name(self) -> str:
        return self._name or getattr(self._func, "__name__", type(self).__name__)

    def apply(self, value: I) -> Iterable[O]:
        return [self._func(value)]


class FilterStage(PipelineStage[I, I]):
    """Keep a record when ``predicate`` holds."""

    def __init__(self, predicate: Callable[[I], bool], name: Optional[str] = None):
        self._predicate = predicate
        self._name = name

    @property
    def name(self) -> str:
        return self._name or getattr(self._predicate, "__name__", type(self).__name__)

    def apply(self, value: I) -> Iterable[I]:
        return [value] if self._predicate(value) else []


class OptionalStage(PipelineStage[I, O]):
    """Record -> optional record; a None result drops the record."""

    def __init__(self, func: Callable[[I], Optional[O]], name: Optional[str] = None):
        self._func = func
        self._name = name

    @property
    def name(self) -> str:
        return self._name or getattr(self._func, "__name__", type(self).__name__)

    def apply(self, value: I) -> Iterable[O]:
        result = self._func(value)
        return [] if result is None else [result]


class FlatMapStage(PipelineStage[I, O]):
    """Record -> zero or more records."""

    def __init__(self, func: Callable[[I], Iterable[O]], name: Optional[str] = None):
        self._func = func
        self._name = name

    @property
    def name(self) -> str:
        return self._name or getattr(self._func, "__name__", type(self).__name__)

    def apply(self, value: I) -> Iterable[O]:
        return list(self._func(value))


class ChainedStage(PipelineStage):
    """Sequential composition of stages."""

    def __init__(self, stages: Sequence[PipelineStage]):
        flattened: List[PipelineStage] = []
        for stage in stages:
            if isinstance(stage, ChainedStage):
                flattened.extend(stage.stages)
            else:
                flattened.append(stage)
        self.stages = flattened

    @property
    def name(self) -> str:
        return " -> ".join(stage.name for stage in self.stages)

    def apply(self, value) -> Iterable:
        values = [value]
        for stage in self.stages:
            values = [out for v in values for out in stage.apply(v)]
            if not values:
                break
        return values
