#!/usr/bin/env python3
# src/colstruct/domain/models/structure_record.py

"""
Columnar structure record: parallel index-aligned arrays describing one entry.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple

import numpy as np

from ...exceptions import DecodeError


@dataclass(frozen=True)
class GroupType:
    """Atom-type table shared by every group of the same chemical type."""

    group_name: str
    atom_names: Tuple[str, ...]
    elements: Tuple[str, ...]
    charges: Tuple[int, ...]
    single_letter_code: str = "?"
    chem_comp_type: str = ""

    @property
    def num_atoms(self) -> int:
        return len(self.atom_names)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "GroupType":
        """Build a group type from an MMTF ``groupList`` entry."""
        try:
            return cls(
                group_name=values["groupName"],
                atom_names=tuple(values["atomNameList"]),
                elements=tuple(values["elementList"]),
                charges=tuple(int(c) for c in values["formalChargeList"]),
                single_letter_code=values.get("singleLetterCode", "?"),
                chem_comp_type=values.get("chemCompType", ""),
            )
        except KeyError as e:
            raise DecodeError(f"Group type is missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Group type has a malformed field: {e}") from e


@dataclass(frozen=True)
class Entity:
    """A distinct molecule in the record and the chains that instantiate it."""

    entity_type: str
    chain_indices: Tuple[int, ...]
    sequence: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "Entity":
        """Build an entity from an MMTF ``entityList`` entry."""
        return cls(
            entity_type=values.get("type", ""),
            chain_indices=tuple(values.get("chainIndexList", ())),
            sequence=values.get("sequence", ""),
            description=values.get("description", ""),
        )


_REQUIRED_KEYS = (
    "chainsPerModel",
    "groupsPerChain",
    "groupTypeList",
    "groupList",
    "chainIdList",
    "xCoordList",
    "yCoordList",
    "zCoordList",
)


@dataclass(frozen=True, eq=False)
class StructureRecord:
    """Read-only columnar representation of one macromolecular structure.

    Coordinates are flat arrays spanning every model, chain and group in
    record order. ``group_type_indices`` holds one entry per group pointing
    into ``group_types``.
    """

    structure_id: str
    chains_per_model: Tuple[int, ...]
    groups_per_chain: Tuple[int, ...]
    group_type_indices: Tuple[int, ...]
    chain_ids: Tuple[str, ...]
    group_types: Tuple[GroupType, ...]
    x_coords: np.ndarray
    y_coords: np.ndarray
    z_coords: np.ndarray
    atom_ids: Optional[Tuple[int, ...]] = None
    chain_names: Tuple[str, ...] = ()
    entities: Tuple[Entity, ...] = ()
    resolution: Optional[float] = None
    r_free: Optional[float] = None
    r_work: Optional[float] = None

    @property
    def num_models(self) -> int:
        return len(self.chains_per_model)

    @property
    def num_atoms(self) -> int:
        return len(self.x_coords)

    def entity_type(self, chain_index: int) -> Optional[str]:
        """Return the type of the entity listing ``chain_index``, if any."""
        for entity in self.entities:
            if chain_index in entity.chain_indices:
                return entity.entity_type
        return None

    def entity_sequence(self, chain_index: int) -> Optional[str]:
        """Return the sequence of the entity listing ``chain_index``, if any."""
        for entity in self.entities:
            if chain_index in entity.chain_indices:
                return entity.sequence or None
        return None

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "StructureRecord":
        """
        Build a record from an already-deserialized MMTF-style mapping.

        Args:
            values: Mapping with camelCase MMTF keys; array fields must already
                be decoded to plain sequences

        Returns:
            StructureRecord instance

        Raises:
            DecodeError: If a required key is missing or a value is malformed
        """
        missing = [key for key in _REQUIRED_KEYS if key not in values]
        if missing:
            raise DecodeError(f"Record is missing required keys: {', '.join(missing)}")

        atom_ids = values.get("atomIdList")
        try:
            return cls(
                structure_id=str(values.get("structureId", "")),
                chains_per_model=_int_tuple(values["chainsPerModel"]),
                groups_per_chain=_int_tuple(values["groupsPerChain"]),
                group_type_indices=_int_tuple(values["groupTypeList"]),
                chain_ids=tuple(values["chainIdList"]),
                group_types=tuple(GroupType.from_dict(g) for g in values["groupList"]),
                x_coords=np.asarray(values["xCoordList"], dtype=float),
                y_coords=np.asarray(values["yCoordList"], dtype=float),
                z_coords=np.asarray(values["zCoordList"], dtype=float),
                atom_ids=_int_tuple(atom_ids) if atom_ids is not None else None,
                chain_names=tuple(values.get("chainNameList", ())),
                entities=tuple(Entity.from_dict(e) for e in values.get("entityList", ())),
                resolution=values.get("resolution"),
                r_free=values.get("rFree"),
                r_work=values.get("rWork"),
            )
        except DecodeError:
            raise
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Record has a malformed field: {e}") from e


def _int_tuple(values: Sequence[Any]) -> Tuple[int, ...]:
    return tuple(int(v) for v in values)
