"""Adapters for external libraries and services."""

from .biopython_aligner import BiopythonLocalAligner

__all__ = [
    "BiopythonLocalAligner",
]
