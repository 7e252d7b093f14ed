# src/colstruct/services/fragment_extractor.py
"""Service for cutting backbone traces into overlapping fixed-length windows."""

from typing import List, Optional, Sequence, Tuple
import logging

import numpy as np

from ..domain.models.atom import Chain
from ..domain.models.fragment import Fragment, Segment
from ..domain.models.structure import Structure

logger = logging.getLogger(__name__)

POLYMER = "polymer"


class FragmentExtractor:
    """Extracts backbone traces and sliding windows over them."""

    def __init__(self, atom_name: str = "CA", element: str = "C"):
        """
        Initialize extractor.

        Args:
            atom_name: Name of the atom representing each residue
            element: Element of the representative atom
        """
        self.atom_name = atom_name
        self.element = element.upper()

    def extract(
        self, points: Sequence[Sequence[float]], frag_size: Optional[int] = None
    ) -> List[Fragment]:
        """
        Cut a coordinate sequence into overlapping windows.

        Args:
            points: Ordered backbone coordinates, one per residue
            frag_size: Window length; None or a non-positive value returns the
                whole sequence as a single fragment

        Returns:
            Fragments sliding by one position, max(0, N - W + 1) of them;
            an empty input yields no fragments
        """
        coords = np.asarray(points, dtype=float).reshape(-1, 3)
        n_points = len(coords)
        if n_points == 0:
            return []
        if frag_size is None or frag_size <= 0:
            return [Fragment(start=0, coordinates=coords)]
        return [
            Fragment(start=start, coordinates=coords[start:start + frag_size])
            for start in range(n_points - frag_size + 1)
        ]

    def backbone(self, chain: Chain) -> Tuple[np.ndarray, str]:
        """
        Collect the representative atom of every residue that has one.

        Args:
            chain: Decoded chain

        Returns:
            Tuple of (coordinates of shape (n, 3), one-letter sequence of the
            same n residues)
        """
        coords = []
        letters = []
        for group in chain.groups:
            for atom in group.atoms:
                if atom.name == self.atom_name and atom.element.upper() == self.element:
                    coords.append(atom.coordinates)
                    letters.append(group.single_letter_code)
                    break
        return np.array(coords, dtype=float).reshape(-1, 3), "".join(letters)

    def get_segments(
        self, structure: Structure, frag_size: Optional[int] = None
    ) -> List[Segment]:
        """
        Backbone segments of every polymer chain, optionally fragmented.

        Chains typed as non-polymer, and chains without any representative
        atom, produce nothing.

        Args:
            structure: Decoded structure
            frag_size: Window length; None keeps one segment per chain

        Returns:
            List of Segment objects in chain order
        """
        segments: List[Segment] = []
        for chain in structure.chains:
            if chain.entity_type and chain.entity_type != POLYMER:
                continue
            coords, sequence = self.backbone(chain)
            if len(coords) == 0:
                continue

            if frag_size is None:
                segments.append(
                    Segment(
                        structure_id=structure.structure_id,
                        chain_id=chain.chain_id,
                        coordinates=coords,
                        sequence=sequence,
                    )
                )
                continue

            for fragment in self.extract(coords, frag_size):
                segments.append(
                    Segment(
                        structure_id=structure.structure_id,
                        chain_id=chain.chain_id,
                        coordinates=fragment.coordinates,
                        sequence=sequence[fragment.start:fragment.start + len(fragment)],
                        start=fragment.start,
                        is_fragment=True,
                    )
                )

        logger.debug(f"{structure.structure_id}: {len(segments)} backbone segments")
        return segments
