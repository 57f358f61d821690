from emr_scribe.structures.evidence_block import EvidenceBlock
from emr_scribe.structures.evidence_line import EvidenceLine
from emr_scribe.structures.semantic_label import SemanticLabel
from tests.helper import is_namedtuple


def test_class():
    tested = EvidenceBlock
    fields = {
        "id": str,
        "timestamp": str,
        "semantic_label": SemanticLabel,
        "text": str,
    }
    assert is_namedtuple(tested, fields)


def test_display_label():
    tested = EvidenceBlock(id="E1", timestamp="09:10", semantic_label=SemanticLabel.PAST_HISTORY, text="theText")
    tests = [
        ("zh", "既往史"),
        ("en", "Past History"),
    ]
    for language, expected in tests:
        result = tested.display_label(language)
        assert result == expected, f"---> {language}"


def test_to_evidence_line():
    tested = EvidenceBlock(id="E1", timestamp="09:10", semantic_label=SemanticLabel.SYMPTOM, text="theText")
    result = tested.to_evidence_line()
    expected = EvidenceLine(id="E1", text="theText")
    assert result == expected


def test_to_json():
    tested = EvidenceBlock(id="E2", timestamp="09:11", semantic_label=SemanticLabel.CHIEF_COMPLAINT, text="theText")
    result = tested.to_json()
    expected = {
        "id": "E2",
        "timestamp": "09:11",
        "semanticLabel": "chiefComplaint",
        "text": "theText",
    }
    assert result == expected
