#!/usr/bin/env python3
# src/colstruct/services/structure_analysis.py
"""
Record-level analyses combining decoding, selection and the core algorithms.

Every method is a pure function of one record and is meant to be handed to a
collection runner as a map, filter or flat-map step.
"""

from functools import partial
from typing import Dict, Hashable, List, Optional
import logging
import math

from ..config import AnalysisConfig
from ..domain.implementations.pipeline_stages import (
    FilterStage,
    FlatMapStage,
    MapStage,
    OptionalStage,
)
from ..domain.interfaces.sequence_aligner import SequenceAligner
from ..domain.models.atom import Atom
from ..domain.models.atom_selection import AtomSelection
from ..domain.models.contact import ContactPair
from ..domain.models.fragment import Segment
from ..domain.models.structure import Structure
from ..domain.models.structure_record import StructureRecord
from .atom_selector import AtomSelector
from .contact_service import ContactService
from .fragment_extractor import FragmentExtractor
from .frequency_counter import FrequencyCounter, KeyFunction, group_atom_key
from .similarity_filter import SimilarityFilter
from .structure_decoder import StructureDecoder

logger = logging.getLogger(__name__)


def _below(value: Optional[float], maximum: float) -> bool:
    if value is None:
        return False
    value = float(value)
    return not math.isnan(value) and value < maximum


class StructureAnalysisService:
    """Service exposing the per-record analyses of a StructureRecord."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """Initialize service with an explicit configuration."""
        self.config = config or AnalysisConfig()
        self._decoder = StructureDecoder()
        self._contacts = ContactService(self.config.contact_cutoff)
        self._extractor = FragmentExtractor(
            atom_name=self.config.backbone_atom_name,
            element=self.config.backbone_element,
        )

    def decode(self, record: StructureRecord) -> Structure:
        return self._decoder.decode(record)

    def find_atoms(
        self, record: StructureRecord, selection: Optional[AtomSelection] = None
    ) -> List[Atom]:
        """Decode a record and keep the atoms matching ``selection``."""
        return AtomSelector(selection).select(self._decoder.get_atoms(record))

    def find_contacts(
        self,
        record: StructureRecord,
        selection_one: Optional[AtomSelection] = None,
        selection_two: Optional[AtomSelection] = None,
        cutoff: Optional[float] = None,
    ) -> List[ContactPair]:
        """
        Find contacts in one record.

        Args:
            record: Columnar structure record
            selection_one: Selection for the first (or only) atom list
            selection_two: Selection for the second list; None searches
                within the first list only
            cutoff: Overrides the configured contact cutoff

        Returns:
            List of ContactPair objects
        """
        atoms = self._decoder.get_atoms(record)
        atoms_one = AtomSelector(selection_one).select(atoms)
        atoms_two = (
            AtomSelector(selection_two).select(atoms) if selection_two is not None else None
        )
        contacts = self._contacts.find_contacts(atoms_one, atoms_two, cutoff)
        logger.debug(f"{record.structure_id}: {len(contacts)} contacts")
        return list(contacts)

    def count_atoms(
        self,
        record: StructureRecord,
        selection: Optional[AtomSelection] = None,
        key: KeyFunction = group_atom_key,
    ) -> Dict[Hashable, int]:
        """Count the selected atoms of a record per key."""
        return FrequencyCounter(key).count(self.find_atoms(record, selection))

    def get_calpha_segments(self, record: StructureRecord) -> List[Segment]:
        """One backbone segment per polymer chain of model 0."""
        return self._extractor.get_segments(self._decoder.decode(record), None)

    def get_fragments(
        self, record: StructureRecord, frag_size: Optional[int] = None
    ) -> List[Segment]:
        """
        Overlapping backbone windows of every polymer chain.

        Args:
            record: Columnar structure record
            frag_size: Window length; falls back to the configured size.
                When both are unset, or non-positive, each chain is one window.
        """
        size = frag_size if frag_size is not None else self.config.fragment_size
        structure = self._decoder.decode(record)
        return self._extractor.get_segments(structure, size if size is not None else 0)

    def filter_resolution(
        self, record: StructureRecord, max_resolution: Optional[float] = None
    ) -> Optional[StructureRecord]:
        """Keep the record if its resolution is strictly below the maximum."""
        maximum = max_resolution if max_resolution is not None else self.config.max_resolution
        if maximum is None:
            return record
        return record if _below(record.resolution, maximum) else None

    def filter_rfree(
        self, record: StructureRecord, max_rfree: Optional[float] = None
    ) -> Optional[StructureRecord]:
        """Keep the record if its R-free is strictly below the maximum."""
        maximum = max_rfree if max_rfree is not None else self.config.max_rfree
        if maximum is None:
            return record
        return record if _below(record.r_free, maximum) else None

    def similarity_filter(
        self, reference: str, aligner: Optional[SequenceAligner] = None
    ) -> SimilarityFilter:
        """Build a SimilarityFilter from the configured threshold and scoring."""
        if aligner is None:
            from ..infrastructure.adapters.biopython_aligner import BiopythonLocalAligner

            aligner = BiopythonLocalAligner(
                gap_open=self.config.gap_open,
                gap_extend=self.config.gap_extend,
                matrix=self.config.substitution_matrix,
            )
        return SimilarityFilter(reference, self.config.min_similarity, aligner)

    # Stage factories for BatchRunner

    def quality_stage(self) -> OptionalStage:
        return OptionalStage(self._filter_quality, name="filter_quality")

    def atoms_stage(self, selection: Optional[AtomSelection] = None) -> FlatMapStage:
        return FlatMapStage(partial(self.find_atoms, selection=selection), name="find_atoms")

    def contacts_stage(
        self,
        selection_one: Optional[AtomSelection] = None,
        selection_two: Optional[AtomSelection] = None,
    ) -> FlatMapStage:
        return FlatMapStage(
            partial(
                self.find_contacts,
                selection_one=selection_one,
                selection_two=selection_two,
            ),
            name="find_contacts",
        )

    def counts_stage(
        self,
        selection: Optional[AtomSelection] = None,
        key: KeyFunction = group_atom_key,
    ) -> MapStage:
        return MapStage(partial(self.count_atoms, selection=selection, key=key), name="count_atoms")

    def segments_stage(self) -> FlatMapStage:
        return FlatMapStage(self.get_calpha_segments, name="calpha_segments")

    def fragments_stage(self, frag_size: Optional[int] = None) -> FlatMapStage:
        return FlatMapStage(partial(self.get_fragments, frag_size=frag_size), name="fragments")

    def similarity_stage(
        self, reference: str, aligner: Optional[SequenceAligner] = None
    ) -> FilterStage:
        return FilterStage(self.similarity_filter(reference, aligner), name="sequence_similarity")

    def _filter_quality(self, record: StructureRecord) -> Optional[StructureRecord]:
        kept = self.filter_resolution(record)
        return self.filter_rfree(kept) if kept is not None else None
