"""Decode and analyze columnar macromolecular structure records."""

from .config import AnalysisConfig
from .exceptions import ColstructError, DecodeError, InvalidSequenceError
from .domain.models import (
    StructureRecord,
    GroupType,
    Entity,
    Atom,
    Group,
    Chain,
    Structure,
    AtomSelection,
    ContactPair,
    ContactSet,
    Fragment,
    Segment,
)
from .domain.implementations import (
    ContactGrid,
    MapStage,
    FilterStage,
    OptionalStage,
    FlatMapStage,
)
from .services import (
    StructureDecoder,
    AtomSelector,
    ContactService,
    FrequencyCounter,
    FragmentExtractor,
    SimilarityFilter,
    StructureAnalysisService,
)
from .batch import BatchRunner, BatchResult, RecordFailure, setup_logging

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "ColstructError",
    "DecodeError",
    "InvalidSequenceError",
    "StructureRecord",
    "GroupType",
    "Entity",
    "Atom",
    "Group",
    "Chain",
    "Structure",
    "AtomSelection",
    "ContactPair",
    "ContactSet",
    "Fragment",
    "Segment",
    "ContactGrid",
    "MapStage",
    "FilterStage",
    "OptionalStage",
    "FlatMapStage",
    "StructureDecoder",
    "AtomSelector",
    "ContactService",
    "FrequencyCounter",
    "FragmentExtractor",
    "SimilarityFilter",
    "StructureAnalysisService",
    "BatchRunner",
    "BatchResult",
    "RecordFailure",
    "setup_logging",
]
