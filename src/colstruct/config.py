# src/colstruct/config.py
"""Explicit configuration for record analysis."""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class AnalysisConfig:
    """Analysis parameters, constructed once and passed to every entry point.

    Attributes:
        contact_cutoff: Maximum contact distance in Angstrom
        fragment_size: Window length for backbone fragments; None or a
            non-positive value emits each chain as a single fragment
        min_similarity: Minimum normalized similarity for sequence filtering
        max_resolution: Keep records with resolution strictly below this value
        max_rfree: Keep records with R-free strictly below this value
        gap_open: Gap opening penalty for the local aligner
        gap_extend: Gap extension penalty for the local aligner
        substitution_matrix: Name of a Biopython substitution matrix
        backbone_atom_name: Atom name representing a residue on the backbone
        backbone_element: Element of the backbone representative atom
    """

    contact_cutoff: float = 5.0
    fragment_size: Optional[int] = None
    min_similarity: float = 0.0
    max_resolution: Optional[float] = None
    max_rfree: Optional[float] = None
    gap_open: float = 8.0
    gap_extend: float = 1.0
    substitution_matrix: str = "BLOSUM62"
    backbone_atom_name: str = "CA"
    backbone_element: str = "C"

    def __post_init__(self):
        if self.contact_cutoff <= 0:
            raise ValueError(
                f"contact_cutoff must be positive, got {self.contact_cutoff}"
            )
        if not 0.0 <= self.min_similarity <= 1.0:
            raise ValueError(
                f"min_similarity must be within [0, 1], got {self.min_similarity}"
            )
        if self.gap_open < 0 or self.gap_extend < 0:
            raise ValueError("Gap penalties must be non-negative")

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "AnalysisConfig":
        """
        Build a configuration from a plain mapping.

        Args:
            values: Mapping of field names to values

        Returns:
            AnalysisConfig instance

        Raises:
            ValueError: If the mapping contains unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**dict(values))
