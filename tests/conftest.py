import copy

import pytest

from colstruct import StructureRecord

GROUP_LIST = [
    {
        "groupName": "ALA",
        "atomNameList": ["N", "CA", "C", "O", "CB"],
        "elementList": ["N", "C", "C", "O", "C"],
        "formalChargeList": [0, 0, 0, 0, 0],
        "singleLetterCode": "A",
        "chemCompType": "L-PEPTIDE LINKING",
    },
    {
        "groupName": "GLY",
        "atomNameList": ["N", "CA", "C", "O"],
        "elementList": ["N", "C", "C", "O"],
        "formalChargeList": [0, 0, 0, 0],
        "singleLetterCode": "G",
        "chemCompType": "PEPTIDE LINKING",
    },
    {
        "groupName": "LYS",
        "atomNameList": ["N", "CA", "C", "O", "NZ"],
        "elementList": ["N", "C", "C", "O", "N"],
        "formalChargeList": [0, 0, 0, 0, 1],
        "singleLetterCode": "K",
        "chemCompType": "L-PEPTIDE LINKING",
    },
    {
        "groupName": "HOH",
        "atomNameList": ["O"],
        "elementList": ["O"],
        "formalChargeList": [0],
        "singleLetterCode": "?",
        "chemCompType": "NON-POLYMER",
    },
]

# Chain A: ALA, GLY, LYS laid out along x; chain B: one water far away
MODEL_COORDS = [
    # ALA
    (-1.2, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (1.2, 0.0, 0.0),
    (1.2, 1.2, 0.0),
    (0.0, -1.5, 0.0),
    # GLY
    (2.6, 0.0, 0.0),
    (3.8, 0.0, 0.0),
    (5.0, 0.0, 0.0),
    (5.0, 1.2, 0.0),
    # LYS
    (6.4, 0.0, 0.0),
    (7.6, 0.0, 0.0),
    (8.8, 0.0, 0.0),
    (8.8, 1.2, 0.0),
    (7.6, -4.0, 0.0),
    # HOH
    (20.0, 20.0, 20.0),
]

ATOMS_PER_MODEL = len(MODEL_COORDS)


def make_record_dict(num_models: int = 1) -> dict:
    """MMTF-style mapping for a small two-chain entry repeated per model."""
    coords = []
    for model in range(num_models):
        # Later models are shifted so they are easy to tell apart
        coords.extend((x + 100.0 * model, y, z) for x, y, z in MODEL_COORDS)

    return {
        "structureId": "1ABC",
        "chainsPerModel": [2] * num_models,
        "groupsPerChain": [3, 1] * num_models,
        "groupTypeList": [0, 1, 2, 3] * num_models,
        "groupList": copy.deepcopy(GROUP_LIST),
        "chainIdList": ["A", "B"] * num_models,
        "chainNameList": ["A", "A"] * num_models,
        "xCoordList": [c[0] for c in coords],
        "yCoordList": [c[1] for c in coords],
        "zCoordList": [c[2] for c in coords],
        "entityList": [
            {
                "type": "polymer",
                "chainIndexList": [0],
                "sequence": "AGK",
                "description": "Test peptide",
            },
            {
                "type": "water",
                "chainIndexList": [1],
                "sequence": "",
                "description": "water",
            },
        ],
        "resolution": 1.8,
        "rFree": 0.21,
        "rWork": 0.18,
    }


@pytest.fixture
def record_dict():
    return make_record_dict()


@pytest.fixture
def record(record_dict):
    return StructureRecord.from_dict(record_dict)


@pytest.fixture
def multi_model_record():
    return StructureRecord.from_dict(make_record_dict(num_models=2))
