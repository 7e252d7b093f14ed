"""Interface for pairwise sequence similarity engines."""

from abc import ABC, abstractmethod


class SequenceAligner(ABC):
    """Abstract base class for local sequence alignment backends."""

    @abstractmethod
    def similarity(self, reference: str, candidate: str) -> float:
        """
        Align two protein sequences and score their similarity.

        Args:
            reference: Reference sequence (one-letter amino-acid codes)
            candidate: Candidate sequence (one-letter amino-acid codes)

        Returns:
            Normalized similarity within [0, 1]
        """
        pass
