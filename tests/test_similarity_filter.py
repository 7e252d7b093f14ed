import pickle

import numpy as np
import pytest

from colstruct import InvalidSequenceError, Segment, SimilarityFilter
from colstruct.domain.interfaces import SequenceAligner
from colstruct.infrastructure.adapters import BiopythonLocalAligner
from colstruct.services.similarity_filter import validate_sequence


class FixedScoreAligner(SequenceAligner):
    """Aligner returning a preset score per candidate."""

    def __init__(self, scores):
        self.scores = scores

    def similarity(self, reference, candidate):
        return self.scores[candidate]


class TestValidateSequence:
    def test_upper_cases(self):
        assert validate_sequence("acdK") == "ACDK"

    @pytest.mark.parametrize("sequence", ["", "AC1D", "ACD-E", "A C"])
    def test_invalid(self, sequence):
        with pytest.raises(InvalidSequenceError):
            validate_sequence(sequence)

    def test_extended_letters(self):
        assert validate_sequence("BZJXUO") == "BZJXUO"

    def test_not_a_decode_error(self):
        from colstruct import DecodeError

        assert not issubclass(InvalidSequenceError, DecodeError)


class TestSimilarityFilter:
    """Threshold behavior with a preset aligner."""

    @pytest.fixture
    def aligner(self):
        return FixedScoreAligner({"AAAA": 0.5, "CCCC": 0.49, "DDDD": 0.9})

    def test_inclusive_threshold(self, aligner):
        similarity = SimilarityFilter("ACDE", 0.5, aligner)
        assert similarity.passes("AAAA")
        assert not similarity.passes("CCCC")
        assert similarity.passes("DDDD")

    def test_segment_predicate(self, aligner):
        similarity = SimilarityFilter("ACDE", 0.5, aligner)
        segment = Segment("1ABC", "A", np.zeros((4, 3)), sequence="aaaa")
        assert similarity(segment)
        assert not similarity("CCCC")

    def test_invalid_candidate_raises(self, aligner):
        similarity = SimilarityFilter("ACDE", 0.5, aligner)
        with pytest.raises(InvalidSequenceError):
            similarity.passes("AB#D")

    def test_invalid_reference_raises(self, aligner):
        with pytest.raises(InvalidSequenceError):
            SimilarityFilter("12", 0.5, aligner)

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_invalid_threshold(self, aligner, threshold):
        with pytest.raises(ValueError):
            SimilarityFilter("ACDE", threshold, aligner)


class TestBiopythonLocalAligner:
    """Scores computed with Bio.Align.PairwiseAligner."""

    def test_identical_sequences(self):
        aligner = BiopythonLocalAligner()
        assert aligner.similarity("MKTAYIAKQR", "MKTAYIAKQR") == pytest.approx(1.0)

    def test_unrelated_sequences_score_lower(self):
        aligner = BiopythonLocalAligner()
        related = aligner.similarity("MKTAYIAKQRQISFVKSHFSRQ", "MKTAYIAKQRQISFVKSHFSRQLE")
        unrelated = aligner.similarity("MKTAYIAKQRQISFVKSHFSRQ", "GGGGPPPPGGGGPPPP")
        assert 0.0 <= unrelated < related <= 1.0

    def test_letters_outside_matrix(self):
        aligner = BiopythonLocalAligner()
        score = aligner.similarity("MKTUAYO", "MKTUAYO")
        assert 0.0 < score <= 1.0

    def test_default_filter_uses_biopython(self):
        similarity = SimilarityFilter("MKTAYIAKQR", 0.9)
        assert similarity.passes("mktayiakqr")

    def test_picklable(self):
        aligner = BiopythonLocalAligner(gap_open=10, gap_extend=0.5)
        aligner.similarity("ACDE", "ACDE")
        restored = pickle.loads(pickle.dumps(aligner))
        assert restored.gap_open == 10
        assert restored.similarity("ACDE", "ACDE") == pytest.approx(1.0)
