"""Decoded structure: the navigable hierarchy built from one record."""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .atom import Atom, Chain


@dataclass(frozen=True, eq=False)
class Structure:
    """Model-0 hierarchy of one record plus its quality metadata."""

    structure_id: str
    chains: Tuple[Chain, ...]
    atoms: Tuple[Atom, ...]
    resolution: Optional[float] = None
    r_free: Optional[float] = None

    def get_chain(self, chain_id: str) -> Optional[Chain]:
        for chain in self.chains:
            if chain.chain_id == chain_id:
                return chain
        return None

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        return np.array([atom.coordinates for atom in self.atoms], dtype=float).reshape(-1, 3)

    def __len__(self) -> int:
        return len(self.atoms)
