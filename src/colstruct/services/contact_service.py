"""Service for atom contact searches."""

from typing import Optional, Sequence

from ..domain.implementations.contact_grid import ContactGrid
from ..domain.models.atom import Atom
from ..domain.models.contact import ContactSet


class ContactService:
    """Finds contacts within one list of atoms or between two lists."""

    def __init__(self, cutoff: float = 5.0):
        if cutoff <= 0:
            raise ValueError(f"Cutoff must be positive, got {cutoff}")
        self.cutoff = cutoff

    def find_contacts(
        self,
        atoms: Sequence[Atom],
        other_atoms: Optional[Sequence[Atom]] = None,
        cutoff: Optional[float] = None,
    ) -> ContactSet:
        """
        Find atom pairs within the cutoff.

        Args:
            atoms: First (or only) list of atoms
            other_atoms: Optional second list for two-list mode
            cutoff: Overrides the service cutoff for this call

        Returns:
            ContactSet of unique unordered pairs
        """
        grid = ContactGrid(cutoff if cutoff is not None else self.cutoff)
        grid.add_atoms(atoms, other_atoms)
        return grid.get_contacts()
