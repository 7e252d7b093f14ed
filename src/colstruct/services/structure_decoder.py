# src/colstruct/services/structure_decoder.py
"""Service for building the atom hierarchy of a columnar structure record."""

from typing import List
import logging

from ..domain.models.atom import Atom, Chain, Group
from ..domain.models.structure import Structure
from ..domain.models.structure_record import StructureRecord
from ..exceptions import DecodeError

logger = logging.getLogger(__name__)


class StructureDecoder:
    """
    Decodes the first model of a StructureRecord into chains, groups and atoms.

    Only model 0 is decoded. Later models of multi-model records are not
    available through this service.
    """

    def decode(self, record: StructureRecord) -> Structure:
        """
        Build the chain / group / atom hierarchy for model 0.

        Args:
            record: Columnar structure record

        Returns:
            Structure whose atoms are in record order

        Raises:
            DecodeError: If the record arrays are inconsistent
        """
        self._validate(record)

        chains: List[Chain] = []
        atoms: List[Atom] = []
        num_chains = record.chains_per_model[0] if record.chains_per_model else 0
        group_offset = 0
        atom_cursor = 0

        for chain_index in range(num_chains):
            entity_type = record.entity_type(chain_index)
            chain = Chain(
                chain_id=record.chain_ids[chain_index],
                index=chain_index,
                chain_name=(
                    record.chain_names[chain_index]
                    if chain_index < len(record.chain_names)
                    else ""
                ),
                entity_type=entity_type or "",
            )

            for i in range(record.groups_per_chain[chain_index]):
                group_type_index = record.group_type_indices[group_offset + i]
                group_type = record.group_types[group_type_index]
                group = Group(
                    name=group_type.group_name,
                    category=entity_type or group_type.chem_comp_type or "",
                    sequence_index=i,
                    single_letter_code=group_type.single_letter_code,
                    chain=chain,
                )

                for j in range(group_type.num_atoms):
                    atom = Atom(
                        name=group_type.atom_names[j],
                        element=group_type.elements[j],
                        coordinates=(
                            float(record.x_coords[atom_cursor]),
                            float(record.y_coords[atom_cursor]),
                            float(record.z_coords[atom_cursor]),
                        ),
                        charge=int(group_type.charges[j]),
                        serial=(
                            record.atom_ids[atom_cursor]
                            if record.atom_ids is not None
                            else atom_cursor + 1
                        ),
                        group=group,
                    )
                    group._atoms.append(atom)
                    atoms.append(atom)
                    atom_cursor += 1

                chain._groups.append(group)

            group_offset += record.groups_per_chain[chain_index]
            chains.append(chain)

        logger.debug(
            f"Decoded {record.structure_id}: {len(chains)} chains, {len(atoms)} atoms"
        )
        return Structure(
            structure_id=record.structure_id,
            chains=tuple(chains),
            atoms=tuple(atoms),
            resolution=record.resolution,
            r_free=record.r_free,
        )

    def get_atoms(self, record: StructureRecord) -> List[Atom]:
        """Decode a record and return its model-0 atoms in record order."""
        return list(self.decode(record).atoms)

    def _validate(self, record: StructureRecord) -> None:
        """Check array consistency before any atom is built."""
        name = record.structure_id or "<unnamed>"
        num_coords = len(record.x_coords)
        if len(record.y_coords) != num_coords or len(record.z_coords) != num_coords:
            raise DecodeError(
                f"{name}: coordinate arrays differ in length "
                f"({num_coords}, {len(record.y_coords)}, {len(record.z_coords)})"
            )
        if record.atom_ids is not None and len(record.atom_ids) != num_coords:
            raise DecodeError(
                f"{name}: {len(record.atom_ids)} atom ids for {num_coords} coordinates"
            )

        if any(count < 0 for count in record.chains_per_model):
            raise DecodeError(f"{name}: negative chain count in {record.chains_per_model}")
        if any(count < 0 for count in record.groups_per_chain):
            raise DecodeError(f"{name}: negative group count in {record.groups_per_chain}")

        num_chains = sum(record.chains_per_model)
        if len(record.groups_per_chain) != num_chains:
            raise DecodeError(
                f"{name}: {len(record.groups_per_chain)} group counts for {num_chains} chains"
            )
        if len(record.chain_ids) != num_chains:
            raise DecodeError(
                f"{name}: {len(record.chain_ids)} chain ids for {num_chains} chains"
            )

        num_groups = sum(record.groups_per_chain)
        if len(record.group_type_indices) != num_groups:
            raise DecodeError(
                f"{name}: {len(record.group_type_indices)} group types for {num_groups} groups"
            )

        implied_atoms = 0
        num_types = len(record.group_types)
        for group_type_index in record.group_type_indices:
            if not 0 <= group_type_index < num_types:
                raise DecodeError(
                    f"{name}: missing atom-type table {group_type_index} "
                    f"({num_types} tables available)"
                )
            group_type = record.group_types[group_type_index]
            if not (
                len(group_type.atom_names)
                == len(group_type.elements)
                == len(group_type.charges)
            ):
                raise DecodeError(
                    f"{name}: atom-type table for {group_type.group_name} has "
                    f"inconsistent name / element / charge arrays"
                )
            implied_atoms += group_type.num_atoms

        if implied_atoms != num_coords:
            raise DecodeError(
                f"{name}: atom-type tables imply {implied_atoms} atoms "
                f"but {num_coords} coordinates are present"
            )
