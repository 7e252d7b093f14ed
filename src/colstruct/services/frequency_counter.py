"""Service for counting atoms by a composite key."""

from collections import Counter
from typing import Callable, Dict, Hashable, Sequence, Tuple

from ..domain.models.atom import Atom

KeyFunction = Callable[[Atom], Hashable]


def group_atom_key(atom: Atom) -> Tuple[str, str]:
    """(residue name, atom name), e.g. ``("ALA", "CA")``."""
    return atom.residue_name, atom.name


def group_atom_name_key(atom: Atom) -> str:
    """Conjoined ``RES_ATOM`` string, e.g. ``"ALA_CA"``."""
    return atom.group_atom_name


def element_key(atom: Atom) -> str:
    return atom.element


def atom_name_key(atom: Atom) -> str:
    return atom.name


def group_name_key(atom: Atom) -> str:
    return atom.residue_name


class FrequencyCounter:
    """Aggregates occurrence counts of atoms under a key-derivation rule."""

    def __init__(self, key: KeyFunction = group_atom_key):
        """
        Initialize counter.

        Args:
            key: Function deriving a hashable key from an atom
        """
        self._key = key

    def count(self, atoms: Sequence[Atom]) -> Dict[Hashable, int]:
        """
        Count atoms per key.

        Args:
            atoms: Atoms to count, typically pre-filtered by AtomSelector

        Returns:
            Mapping of each observed key to its count; counts sum to len(atoms)
        """
        return dict(Counter(self._key(atom) for atom in atoms))
