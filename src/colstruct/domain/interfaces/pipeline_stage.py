"""Generic abstraction for a per-record transformation step."""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, TypeVar

I = TypeVar("I")
O = TypeVar("O")
R = TypeVar("R")


class PipelineStage(ABC, Generic[I, O]):
    """
    One step applied independently to every record of a collection.

    A stage turns one input value into zero or more outputs, which covers
    record -> record, record -> optional record and record -> many records
    transforms with a single contract.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def apply(self, value: I) -> Iterable[O]:
        """Transform one input value into zero or more outputs."""
        pass

    def then(self, other: "PipelineStage[O, R]") -> "PipelineStage[I, R]":
        """Compose this stage with ``other`` applied to each output."""
        from ..implementations.pipeline_stages import ChainedStage

        return ChainedStage([self, other])

    def __call__(self, value: I) -> List[O]:
        return list(self.apply(value))
