import pytest

from colstruct import AtomSelection, AtomSelector, StructureDecoder
from colstruct.services.atom_selector import select_atoms


@pytest.fixture
def atoms(record):
    return StructureDecoder().get_atoms(record)


class TestAtomSelection:
    def test_normalization(self):
        selection = AtomSelection(atom_names="CA", elements=["c", "n"], group_names=[])
        assert selection.atom_names == frozenset({"CA"})
        assert selection.elements == frozenset({"C", "N"})
        assert selection.group_names is None
        assert not selection.is_empty

    def test_empty(self):
        assert AtomSelection().is_empty
        assert AtomSelection(atom_names=[], elements=set()).is_empty
        assert AtomSelection(group_type="").group_type is None
        assert AtomSelection(group_type="").is_empty


class TestAtomSelector:
    """Tests for the conjunction of atom predicates."""

    def test_no_filters_keeps_everything(self, atoms):
        assert AtomSelector().select(atoms) == atoms
        assert AtomSelector(AtomSelection()).select(atoms) == atoms

    def test_atom_names(self, atoms):
        selected = AtomSelector(AtomSelection(atom_names={"CA"})).select(atoms)
        assert [a.residue_name for a in selected] == ["ALA", "GLY", "LYS"]

    def test_elements(self, atoms):
        selected = select_atoms(atoms, AtomSelection(elements={"N"}))
        assert [a.name for a in selected] == ["N", "N", "N", "NZ"]

    def test_element_case_insensitive(self, atoms):
        assert len(select_atoms(atoms, AtomSelection(elements={"o"}))) == 4

    def test_group_names(self, atoms):
        selected = select_atoms(atoms, AtomSelection(group_names={"GLY", "HOH"}))
        assert len(selected) == 5

    def test_charged(self, atoms):
        selected = select_atoms(atoms, AtomSelection(charged=True))
        assert [a.group_atom_name for a in selected] == ["LYS_NZ"]

    def test_group_type(self, atoms):
        polymer = select_atoms(atoms, AtomSelection(group_type="polymer"))
        water = select_atoms(atoms, AtomSelection(group_type="water"))
        assert len(polymer) == 14
        assert len(water) == 1
        assert water[0].residue_name == "HOH"

    def test_group_atom_names(self, atoms):
        selected = select_atoms(atoms, AtomSelection(group_atom_names={"ALA_CB", "LYS_CA"}))
        assert [a.group_atom_name for a in selected] == ["ALA_CB", "LYS_CA"]

    def test_conjunction(self, atoms):
        selection = AtomSelection(atom_names={"CA", "O"}, group_names={"GLY", "HOH"})
        selected = select_atoms(atoms, selection)
        assert [a.group_atom_name for a in selected] == ["GLY_CA", "GLY_O", "HOH_O"]

    def test_preserves_order_and_subset(self, atoms):
        selected = select_atoms(atoms, AtomSelection(elements={"C"}))
        indices = [atoms.index(a) for a in selected]
        assert indices == sorted(indices)
        assert all(a in atoms for a in selected)

    def test_empty_group_type_keeps_everything(self, atoms):
        assert select_atoms(atoms, AtomSelection(group_type="")) == atoms

    def test_no_match(self, atoms):
        assert select_atoms(atoms, AtomSelection(atom_names={"FE"})) == []

    def test_matches(self, atoms):
        selector = AtomSelector(AtomSelection(atom_names={"CA"}))
        assert selector.matches(atoms[1])
        assert not selector.matches(atoms[0])
