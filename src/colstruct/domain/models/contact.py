"""Domain models for atom contacts."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Tuple

import networkx as nx

from .atom import Atom


@dataclass(frozen=True)
class ContactPair:
    """Unordered pair of distinct atoms within a distance cutoff."""

    first: Atom
    second: Atom
    distance: float

    @property
    def atoms(self) -> Tuple[Atom, Atom]:
        return self.first, self.second

    def involves(self, atom: Atom) -> bool:
        return atom is self.first or atom is self.second

    def partner(self, atom: Atom) -> Atom:
        """Return the other atom of the pair."""
        if atom is self.first:
            return self.second
        if atom is self.second:
            return self.first
        raise ValueError(f"Atom {atom.name} is not part of this contact")


def _pair_key(a: Atom, b: Atom) -> FrozenSet[Atom]:
    return frozenset((a, b))


class ContactSet:
    """Set of contacts keyed by unordered atom pair, in discovery order."""

    def __init__(self):
        self._contacts: Dict[FrozenSet[Atom], ContactPair] = {}

    def add(self, a: Atom, b: Atom, distance: float) -> bool:
        """
        Add a contact between two atoms.

        Args:
            a: First atom
            b: Second atom
            distance: Distance between the atoms

        Returns:
            True if the pair was new, False if it was already present or
            both arguments are the same atom
        """
        if a is b:
            return False
        key = _pair_key(a, b)
        if key in self._contacts:
            return False
        self._contacts[key] = ContactPair(a, b, distance)
        return True

    def has_contact(self, a: Atom, b: Atom) -> bool:
        return _pair_key(a, b) in self._contacts

    def get(self, a: Atom, b: Atom) -> ContactPair:
        return self._contacts[_pair_key(a, b)]

    def contacts_of(self, atom: Atom) -> List[Atom]:
        """All atoms in contact with ``atom``."""
        return [c.partner(atom) for c in self._contacts.values() if c.involves(atom)]

    def __contains__(self, pair) -> bool:
        a, b = pair
        return self.has_contact(a, b)

    def __iter__(self) -> Iterator[ContactPair]:
        return iter(self._contacts.values())

    def __len__(self) -> int:
        return len(self._contacts)

    def to_graph(self) -> nx.Graph:
        """Create a NetworkX graph with atoms as nodes and contacts as edges.

        Nodes are keyed by atom serial, so atoms should come from one record.
        """
        G = nx.Graph()
        for contact in self._contacts.values():
            for atom in contact.atoms:
                if atom.serial not in G:
                    G.add_node(
                        atom.serial,
                        name=atom.name,
                        element=atom.element,
                        coord=atom.coordinates,
                        residue_name=atom.residue_name,
                    )
            G.add_edge(
                contact.first.serial, contact.second.serial, distance=contact.distance
            )
        return G
