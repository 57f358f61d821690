from emr_scribe.structures.evidence_line import EvidenceLine
from tests.helper import is_namedtuple


def test_class():
    tested = EvidenceLine
    fields = {
        "id": str,
        "text": str,
    }
    assert is_namedtuple(tested, fields)


def test_load_from_json():
    tested = EvidenceLine
    result = tested.load_from_json([])
    assert result == []

    result = tested.load_from_json(
        [
            {"id": "E1", "text": "theText1"},
            {"id": "E2"},
            {"id": 3, "text": "theText3"},
            {"text": "theText4"},
            "E5",
            {"id": "E6", "text": None},
            {"id": "E7", "text": 5},
            {"id": "E8", "text": ["theText8"]},
        ]
    )
    expected = [
        EvidenceLine(id="E1", text="theText1"),
        EvidenceLine(id="E2", text=""),
        EvidenceLine(id="E6", text=""),
        EvidenceLine(id="E7", text=""),
        EvidenceLine(id="E8", text=""),
    ]
    assert result == expected


def test_to_json():
    tested = EvidenceLine(id="E7", text="theText")
    result = tested.to_json()
    expected = {"id": "E7", "text": "theText"}
    assert result == expected
