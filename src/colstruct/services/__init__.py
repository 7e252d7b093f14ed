"""Core analysis services."""

from .structure_decoder import StructureDecoder
from .atom_selector import AtomSelector, select_atoms
from .contact_service import ContactService
from .frequency_counter import (
    FrequencyCounter,
    group_atom_key,
    group_atom_name_key,
    element_key,
    atom_name_key,
    group_name_key,
)
from .fragment_extractor import FragmentExtractor
from .similarity_filter import SimilarityFilter, validate_sequence
from .structure_analysis import StructureAnalysisService

__all__ = [
    "StructureDecoder",
    "AtomSelector",
    "select_atoms",
    "ContactService",
    "FrequencyCounter",
    "group_atom_key",
    "group_atom_name_key",
    "element_key",
    "atom_name_key",
    "group_name_key",
    "FragmentExtractor",
    "SimilarityFilter",
    "validate_sequence",
    "StructureAnalysisService",
]
