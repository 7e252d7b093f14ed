"""Service for filtering decoded atoms by an AtomSelection."""

from typing import Callable, List, Optional, Sequence

from ..domain.models.atom import Atom
from ..domain.models.atom_selection import AtomSelection

AtomPredicate = Callable[[Atom], bool]


class AtomSelector:
    """Keeps atoms satisfying every active predicate of a selection."""

    def __init__(self, selection: Optional[AtomSelection] = None):
        self.selection = selection or AtomSelection()
        self._predicates = self._build_predicates(self.selection)

    def select(self, atoms: Sequence[Atom]) -> List[Atom]:
        """
        Filter atoms, preserving their input order.

        Args:
            atoms: Decoded atoms

        Returns:
            The atoms matching all active predicates; every atom when no
            predicate is active
        """
        if not self._predicates:
            return list(atoms)
        return [atom for atom in atoms if all(p(atom) for p in self._predicates)]

    def matches(self, atom: Atom) -> bool:
        return all(p(atom) for p in self._predicates)

    @staticmethod
    def _build_predicates(selection: AtomSelection) -> List[AtomPredicate]:
        predicates: List[AtomPredicate] = []
        if selection.atom_names is not None:
            names = selection.atom_names
            predicates.append(lambda atom: atom.name in names)
        if selection.elements is not None:
            elements = selection.elements
            predicates.append(lambda atom: atom.element.upper() in elements)
        if selection.group_names is not None:
            group_names = selection.group_names
            predicates.append(lambda atom: atom.residue_name in group_names)
        if selection.charged:
            predicates.append(lambda atom: atom.charge != 0)
        if selection.group_type is not None:
            group_type = selection.group_type
            predicates.append(
                lambda atom: atom.group is not None and atom.group.category == group_type
            )
        if selection.group_atom_names is not None:
            group_atom_names = selection.group_atom_names
            predicates.append(lambda atom: atom.group_atom_name in group_atom_names)
        return predicates


def select_atoms(atoms: Sequence[Atom], selection: Optional[AtomSelection] = None) -> List[Atom]:
    """Filter ``atoms`` with ``selection``; see AtomSelector.select."""
    return AtomSelector(selection).select(atoms)
