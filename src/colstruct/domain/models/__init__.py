"""Domain model classes."""

from .structure_record import StructureRecord, GroupType, Entity
from .atom import Atom, Group, Chain
from .structure import Structure
from .atom_selection import AtomSelection
from .contact import ContactPair, ContactSet
from .fragment import Fragment, Segment

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
]
