"""Domain models for backbone coordinate windows."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Fragment:
    """Contiguous window of backbone coordinates.

    Attributes:
        start: Offset of the first point within the source sequence
        coordinates: Array of shape (length, 3)
    """

    start: int
    coordinates: np.ndarray

    def __len__(self) -> int:
        return len(self.coordinates)


@dataclass(frozen=True, eq=False)
class Segment:
    """Backbone trace of one chain, or a window of it, with its sequence."""

    structure_id: str
    chain_id: str
    coordinates: np.ndarray
    sequence: str = ""
    start: int = 0
    is_fragment: bool = False

    @property
    def key(self) -> str:
        """``<structure>.<chain>``, with ``.<start>`` appended for fragments."""
        key = f"{self.structure_id}.{self.chain_id}"
        if self.is_fragment:
            key = f"{key}.{self.start}"
        return key

    def __len__(self) -> int:
        return len(self.coordinates)
