from emr_scribe.structures.medical_emr import MedicalEmr
from tests.helper import is_namedtuple


def test_class():
    tested = MedicalEmr
    fields = {
        "chief_complaint": str,
        "present_illness": str,
        "past_history": str,
        "summary": str,
    }
    assert is_namedtuple(tested, fields)


def test_empty():
    tested = MedicalEmr
    result = tested.empty()
    expected = MedicalEmr(chief_complaint="", present_illness="", past_history="", summary="")
    assert result == expected


def test_to_json():
    tested = MedicalEmr(
        chief_complaint="theChiefComplaint",
        present_illness="thePresentIllness",
        past_history="thePastHistory",
        summary="theSummary",
    )
    result = tested.to_json()
    expected = {
        "chiefComplaint": "theChiefComplaint",
        "presentIllness": "thePresentIllness",
        "pastHistory": "thePastHistory",
        "summary": "theSummary",
    }
    assert result == expected
