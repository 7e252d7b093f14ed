"""Infrastructure implementations of core interfaces and adapters."""

from .adapters.biopython_aligner import BiopythonLocalAligner

__all__ = [
    "BiopythonLocalAligner",
]
