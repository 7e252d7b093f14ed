"""Core domain models, interfaces and implementations."""

from .models import (
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
from .interfaces import SequenceAligner, PipelineStage
from .implementations import ContactGrid

__all__ = [
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
    "SequenceAligner",
    "PipelineStage",
    "ContactGrid",
]
