#!/usr/bin/env python3
# src/colstruct/domain/implementations/contact_grid.py

"""
Spatial grid for finding atom contacts within a distance cutoff.

Space is split into cubic cells whose edge equals the cutoff, so any two atoms
within the cutoff sit in the same or in adjacent cells. Distances are only
computed between atoms of neighbouring cells.
"""

from collections import defaultdict
from itertools import product
from typing import Dict, List, Optional, Sequence, Tuple
import logging

import numpy as np

from ..models.atom import Atom
from ..models.contact import ContactSet

logger = logging.getLogger(__name__)

Cell = Tuple[int, int, int]

_ALL_OFFSETS: Tuple[Cell, ...] = tuple(product((-1, 0, 1), repeat=3))
# Offsets strictly after (0, 0, 0) in lexicographic order; visiting only these
# reaches every neighbouring pair of cells exactly once.
_FORWARD_OFFSETS: Tuple[Cell, ...] = tuple(o for o in _ALL_OFFSETS if o > (0, 0, 0))


def _coordinates(atoms: Sequence[Atom]) -> np.ndarray:
    return np.array([atom.coordinates for atom in atoms], dtype=float).reshape(-1, 3)


def _distances(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Euclidean distance matrix between two coordinate arrays."""
    return np.sqrt(((a[:, np.newaxis, :] - b[np.newaxis, :, :]) ** 2).sum(axis=2))


def _shift(cell: Cell, offset: Cell) -> Cell:
    return (cell[0] + offset[0], cell[1] + offset[1], cell[2] + offset[2])


class ContactGrid:
    """Grid-based contact search in single-list or two-list mode.

    Usage mirrors a build-then-query sequence::

        grid = ContactGrid(cutoff=4.0)
        grid.add_atoms(atoms)              # contacts within one list
        grid.add_atoms(atoms, others)      # or contacts between two lists
        contacts = grid.get_contacts()
    """

    def __init__(self, cutoff: float):
        """
        Initialize an empty grid.

        Args:
            cutoff: Maximum contact distance, also used as the cell size

        Raises:
            ValueError: If cutoff is not positive
        """
        if cutoff <= 0:
            raise ValueError(f"Cutoff must be positive, got {cutoff}")
        self.cutoff = float(cutoff)
        self._atoms_one: List[Atom] = []
        self._atoms_two: Optional[List[Atom]] = None

    @property
    def is_two_list(self) -> bool:
        return self._atoms_two is not None

    def add_atoms(
        self, atoms: Sequence[Atom], other_atoms: Optional[Sequence[Atom]] = None
    ) -> None:
        """
        Load the atoms to search.

        Args:
            atoms: First (or only) list of atoms
            other_atoms: Optional second list; when given, only pairs with one
                atom from each list are reported
        """
        self._atoms_one = list(atoms)
        self._atoms_two = list(other_atoms) if other_atoms is not None else None

    def get_contacts(self) -> ContactSet:
        """
        Find all pairs within the cutoff (inclusive).

        Returns:
            ContactSet, empty when either list is empty
        """
        contacts = ContactSet()
        if not self._atoms_one or (self.is_two_list and not self._atoms_two):
            return contacts

        if self.is_two_list:
            self._two_list_contacts(contacts)
        else:
            self._single_list_contacts(contacts)

        logger.debug(
            f"Found {len(contacts)} contacts within {self.cutoff} A "
            f"({'two-list' if self.is_two_list else 'single-list'} mode)"
        )
        return contacts

    def _assign_cells(self, coords: np.ndarray, origin: np.ndarray) -> Dict[Cell, np.ndarray]:
        """Map each occupied cell to the indices of the atoms it holds."""
        cells = np.floor((coords - origin) / self.cutoff).astype(int)
        grid: Dict[Cell, List[int]] = defaultdict(list)
        for idx, cell in enumerate(map(tuple, cells)):
            grid[cell].append(idx)
        return {cell: np.array(indices) for cell, indices in grid.items()}

    def _single_list_contacts(self, contacts: ContactSet) -> None:
        atoms = self._atoms_one
        coords = _coordinates(atoms)
        grid = self._assign_cells(coords, coords.min(axis=0))

        for cell, indices in grid.items():
            if len(indices) > 1:
                dist = _distances(coords[indices], coords[indices])
                rows, cols = np.triu_indices(len(indices), k=1)
                for r, c in zip(rows, cols):
                    if dist[r, c] <= self.cutoff:
                        contacts.add(atoms[indices[r]], atoms[indices[c]], float(dist[r, c]))

            for offset in _FORWARD_OFFSETS:
                neighbours = grid.get(_shift(cell, offset))
                if neighbours is None:
                    continue
                self._add_between(
                    contacts, atoms, indices, atoms, neighbours, coords, coords
                )

    def _two_list_contacts(self, contacts: ContactSet) -> None:
        atoms_one, atoms_two = self._atoms_one, self._atoms_two
        coords_one = _coordinates(atoms_one)
        coords_two = _coordinates(atoms_two)
        origin = np.minimum(coords_one.min(axis=0), coords_two.min(axis=0))
        grid_one = self._assign_cells(coords_one, origin)
        grid_two = self._assign_cells(coords_two, origin)

        for cell, indices in grid_one.items():
            for offset in _ALL_OFFSETS:
                neighbours = grid_two.get(_shift(cell, offset))
                if neighbours is None:
                    continue
                self._add_between(
                    contacts, atoms_one, indices, atoms_two, neighbours, coords_one, coords_two
                )

    def _add_between(
        self,
        contacts: ContactSet,
        atoms_a: Sequence[Atom],
        indices_a: np.ndarray,
        atoms_b: Sequence[Atom],
        indices_b: np.ndarray,
        coords_a: np.ndarray,
        coords_b: np.ndarray,
    ) -> None:
        dist = _distances(coords_a[indices_a], coords_b[indices_b])
        for r, c in zip(*np.nonzero(dist <= self.cutoff)):
            contacts.add(atoms_a[indices_a[r]], atoms_b[indices_b[c]], float(dist[r, c]))
