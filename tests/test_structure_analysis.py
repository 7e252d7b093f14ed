import dataclasses
import math

import pytest

from colstruct import (
    AnalysisConfig,
    AtomSelection,
    ContactPair,
    StructureAnalysisService,
)
from colstruct.services.frequency_counter import element_key

CALPHA = AtomSelection(atom_names={"CA"}, elements={"C"})


@pytest.fixture
def service():
    return StructureAnalysisService(AnalysisConfig(contact_cutoff=4.0))


class TestRecordAnalyses:
    """Per-record analyses on the shared test record."""

    def test_find_atoms(self, service, record):
        assert len(service.find_atoms(record)) == 15
        assert len(service.find_atoms(record, CALPHA)) == 3

    def test_calpha_contacts(self, service, record):
        contacts = service.find_contacts(record, CALPHA)
        assert len(contacts) == 2
        assert all(isinstance(c, ContactPair) for c in contacts)
        assert all(c.distance == pytest.approx(3.8) for c in contacts)

    def test_cutoff_override(self, service, record):
        assert len(service.find_contacts(record, CALPHA, cutoff=3.0)) == 0
        assert len(service.find_contacts(record, CALPHA, cutoff=8.0)) == 3

    def test_two_list_contacts(self, service, record):
        charged = AtomSelection(charged=True)
        contacts = service.find_contacts(record, CALPHA, charged, cutoff=4.5)
        assert len(contacts) == 1
        pair = contacts[0]
        assert pair.first.group_atom_name == "LYS_CA"
        assert pair.second.group_atom_name == "LYS_NZ"
        assert pair.distance == pytest.approx(4.0)

    def test_empty_selection_has_no_contacts(self, service, record):
        assert service.find_contacts(record, AtomSelection(atom_names={"FE"})) == []

    def test_count_atoms(self, service, record):
        counts = service.count_atoms(record, AtomSelection(group_type="polymer"), element_key)
        assert counts == {"N": 4, "C": 7, "O": 3}

    def test_calpha_segments(self, service, record):
        segments = service.get_calpha_segments(record)
        assert [s.key for s in segments] == ["1ABC.A"]
        assert segments[0].sequence == "AGK"

    def test_fragments(self, service, record):
        assert len(service.get_fragments(record, 2)) == 2
        assert len(service.get_fragments(record, 5)) == 0
        # No size configured: one window per chain
        assert len(service.get_fragments(record)) == 1

    def test_configured_fragment_size(self, record):
        service = StructureAnalysisService(AnalysisConfig(fragment_size=2))
        assert [s.key for s in service.get_fragments(record)] == ["1ABC.A.0", "1ABC.A.1"]


class TestQualityFilters:
    def test_resolution(self, service, record):
        assert service.filter_resolution(record, 2.0) is record
        assert service.filter_resolution(record, 1.5) is None
        # Strictly below
        assert service.filter_resolution(record, 1.8) is None

    def test_rfree(self, service, record):
        assert service.filter_rfree(record, 0.25) is record
        assert service.filter_rfree(record, 0.2) is None

    def test_missing_values_are_dropped(self, service, record):
        unknown = dataclasses.replace(record, resolution=None, r_free=math.nan)
        assert service.filter_resolution(unknown, 3.0) is None
        assert service.filter_rfree(unknown, 0.3) is None

    def test_no_maximum_keeps_record(self, service, record):
        unknown = dataclasses.replace(record, resolution=None)
        assert service.filter_resolution(unknown) is unknown

    def test_configured_maximum(self, record):
        service = StructureAnalysisService(AnalysisConfig(max_resolution=1.5, max_rfree=0.3))
        assert service.filter_resolution(record) is None
        assert service.filter_rfree(record) is record
        assert service.quality_stage()(record) == []


class TestSimilarity:
    def test_configured_filter(self, record):
        service = StructureAnalysisService(AnalysisConfig(min_similarity=0.9))
        similarity = service.similarity_filter("AGK")
        segments = service.get_calpha_segments(record)
        assert similarity(segments[0])

    def test_similarity_stage(self, record):
        service = StructureAnalysisService(AnalysisConfig(min_similarity=0.9))
        stage = service.segments_stage().then(service.similarity_stage("WWWWWWWW"))
        assert stage(record) == []
