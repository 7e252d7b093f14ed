"""Adapter for Biopython local pairwise alignment."""

from typing import Optional
import logging

from Bio.Align import PairwiseAligner, substitution_matrices

from ...domain.interfaces.sequence_aligner import SequenceAligner

logger = logging.getLogger(__name__)


class BiopythonLocalAligner(SequenceAligner):
    """Smith-Waterman style scoring through ``Bio.Align.PairwiseAligner``.

    Similarity is the local alignment score divided by the mean of the two
    self-alignment scores, clipped to [0, 1].
    """

    def __init__(
        self,
        gap_open: float = 8.0,
        gap_extend: float = 1.0,
        matrix: str = "BLOSUM62",
    ):
        """
        Initialize aligner settings.

        Args:
            gap_open: Penalty for opening a gap (positive number)
            gap_extend: Penalty for extending a gap (positive number)
            matrix: Name of a matrix shipped with Bio.Align.substitution_matrices
        """
        self.gap_open = gap_open
        self.gap_extend = gap_extend
        self.matrix = matrix
        self._aligner: Optional[PairwiseAligner] = None

    def __getstate__(self):
        state = self.__dict__.copy()
        state["_aligner"] = None
        return state

    @property
    def aligner(self) -> PairwiseAligner:
        if self._aligner is None:
            aligner = PairwiseAligner()
            aligner.mode = "local"
            aligner.substitution_matrix = substitution_matrices.load(self.matrix)
            aligner.open_gap_score = -self.gap_open
            aligner.extend_gap_score = -self.gap_extend
            self._aligner = aligner
        return self._aligner

    def similarity(self, reference: str, candidate: str) -> float:
        reference = self._to_matrix_alphabet(reference)
        candidate = self._to_matrix_alphabet(candidate)

        score = self.aligner.score(reference, candidate)
        max_score = (
            self.aligner.score(reference, reference)
            + self.aligner.score(candidate, candidate)
        ) / 2
        if max_score <= 0:
            return 0.0
        return min(1.0, max(0.0, float(score) / max_score))

    def _to_matrix_alphabet(self, sequence: str) -> str:
        """Replace residues the matrix does not score (e.g. U, O, J) with X."""
        alphabet = self.aligner.substitution_matrix.alphabet
        if all(letter in alphabet for letter in sequence):
            return sequence
        return "".join(letter if letter in alphabet else "X" for letter in sequence)
