"""Abstract seams between the analysis core and its collaborators."""

from .sequence_aligner import SequenceAligner
from .pipeline_stage import PipelineStage

__all__ = [
    "SequenceAligner",
    "PipelineStage",
]
