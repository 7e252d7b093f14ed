#!/usr/bin/env python3
# src/colstruct/domain/models/atom.py

"""
Domain models for the decoded atom / group / chain hierarchy.

Chains own groups and groups own atoms. Back-references (atom -> group,
group -> chain) are plain lookups. Child collections are filled once by
``StructureDecoder`` and only exposed as tuples afterwards.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import math


@dataclass(frozen=True, eq=False)
class Chain:
    """A chain of model 0 and the groups it owns, in record order."""

    chain_id: str
    index: int = 0
    chain_name: str = ""
    entity_type: str = ""
    _groups: List["Group"] = field(default_factory=list, init=False, repr=False)

    @property
    def groups(self) -> Tuple["Group", ...]:
        return tuple(self._groups)

    @property
    def atoms(self) -> List["Atom"]:
        return [atom for group in self._groups for atom in group.atoms]

    def __len__(self) -> int:
        return len(self._groups)


@dataclass(frozen=True, eq=False)
class Group:
    """A residue (or ligand / water molecule) within a chain."""

    name: str
    category: str = ""
    sequence_index: int = 0
    single_letter_code: str = "?"
    chain: Optional[Chain] = field(default=None, repr=False)
    _atoms: List["Atom"] = field(default_factory=list, init=False, repr=False)

    @property
    def atoms(self) -> Tuple["Atom", ...]:
        return tuple(self._atoms)

    @property
    def chain_id(self) -> str:
        return self.chain.chain_id if self.chain is not None else ""

    def get_atom(self, name: str) -> Optional["Atom"]:
        """Return the first atom called ``name``, or None."""
        for atom in self._atoms:
            if atom.name == name:
                return atom
        return None


@dataclass(frozen=True, eq=False)
class Atom:
    """Represents an atom in a decoded structure."""

    name: str
    element: str
    coordinates: Tuple[float, float, float]
    charge: int = 0
    serial: int = 0
    group: Optional[Group] = field(default=None, repr=False)

    @property
    def x(self) -> float:
        return self.coordinates[0]

    @property
    def y(self) -> float:
        return self.coordinates[1]

    @property
    def z(self) -> float:
        return self.coordinates[2]

    @property
    def residue_name(self) -> str:
        return self.group.name if self.group is not None else ""

    @property
    def chain(self) -> Optional[Chain]:
        return self.group.chain if self.group is not None else None

    @property
    def group_atom_name(self) -> str:
        """Conjoined residue and atom name, e.g. ``ALA_CA``."""
        return f"{self.residue_name}_{self.name}"

    def distance(self, other: "Atom") -> float:
        """Euclidean distance to another atom."""
        return math.dist(self.coordinates, other.coordinates)
