"""Service for filtering sequences by similarity to a reference sequence."""

from typing import Optional, Union
import logging

from ..domain.interfaces.sequence_aligner import SequenceAligner
from ..domain.models.fragment import Segment
from ..exceptions import InvalidSequenceError

logger = logging.getLogger(__name__)

# 20 standard residues, ambiguity codes B/Z/J/X, selenocysteine and pyrrolysine
AMINO_ACID_LETTERS = frozenset("ACDEFGHIKLMNPQRSTVWYBZJXUO")


def validate_sequence(sequence: str) -> str:
    """
    Check that a sequence only uses amino-acid one-letter codes.

    Args:
        sequence: Protein sequence, case-insensitive

    Returns:
        The upper-case sequence

    Raises:
        InvalidSequenceError: If the sequence is empty or holds other letters
    """
    if not isinstance(sequence, str) or not sequence:
        raise InvalidSequenceError("Sequence must be a non-empty string")
    upper = sequence.upper()
    invalid = sorted(set(upper) - AMINO_ACID_LETTERS)
    if invalid:
        raise InvalidSequenceError(
            f"Sequence contains invalid residue letters: {''.join(invalid)}"
        )
    return upper


class SimilarityFilter:
    """Passes sequences whose similarity to a reference meets a threshold."""

    def __init__(
        self,
        reference: str,
        min_similarity: float,
        aligner: Optional[SequenceAligner] = None,
    ):
        """
        Initialize filter.

        Args:
            reference: Reference protein sequence
            min_similarity: Inclusive lower bound on similarity, in [0, 1]
            aligner: Alignment backend; defaults to the Biopython local aligner

        Raises:
            InvalidSequenceError: If the reference is not a protein sequence
            ValueError: If min_similarity is outside [0, 1]
        """
        if not 0.0 <= min_similarity <= 1.0:
            raise ValueError(f"min_similarity must be within [0, 1], got {min_similarity}")
        if aligner is None:
            from ..infrastructure.adapters.biopython_aligner import BiopythonLocalAligner

            aligner = BiopythonLocalAligner()

        self.reference = validate_sequence(reference)
        self.min_similarity = min_similarity
        self._aligner = aligner

    def score(self, candidate: str) -> float:
        """
        Similarity of ``candidate`` to the reference.

        Raises:
            InvalidSequenceError: If the candidate is not a protein sequence
        """
        return self._aligner.similarity(self.reference, validate_sequence(candidate))

    def passes(self, candidate: str) -> bool:
        score = self.score(candidate)
        logger.debug(f"Similarity {score:.3f} (threshold {self.min_similarity})")
        return score >= self.min_similarity

    def __call__(self, item: Union[str, Segment]) -> bool:
        """Predicate form usable as a pipeline filter on strings or segments."""
        sequence = item.sequence if isinstance(item, Segment) else item
        return self.passes(sequence)
