"""Domain model describing which atoms to keep from a decoded structure."""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional


def _as_set(values: Optional[Iterable[str]]) -> Optional[FrozenSet[str]]:
    if values is None:
        return None
    if isinstance(values, str):
        values = [values]
    values = frozenset(values)
    return values or None


@dataclass(frozen=True)
class AtomSelection:
    """Conjunction of independently optional atom predicates.

    Every field left as None (or given as an empty collection or string)
    imposes no constraint. ``charged`` keeps atoms whose formal charge is non-zero.
    """

    atom_names: Optional[FrozenSet[str]] = None
    elements: Optional[FrozenSet[str]] = None
    group_names: Optional[FrozenSet[str]] = None
    group_atom_names: Optional[FrozenSet[str]] = None
    charged: bool = False
    group_type: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "atom_names", _as_set(self.atom_names))
        object.__setattr__(self, "group_names", _as_set(self.group_names))
        object.__setattr__(self, "group_atom_names", _as_set(self.group_atom_names))
        elements = _as_set(self.elements)
        if elements is not None:
            elements = frozenset(e.upper() for e in elements)
        object.__setattr__(self, "elements", elements)
        object.__setattr__(self, "group_type", self.group_type or None)

    @property
    def is_empty(self) -> bool:
        """True when no predicate is active."""
        return (
            self.atom_names is None
            and self.elements is None
            and self.group_names is None
            and self.group_atom_names is None
            and not self.charged
            and self.group_type is None
        )
