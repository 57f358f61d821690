from emr_scribe.structures.speaker import Speaker


def test_enum():
    tested = Speaker
    assert len(tested) == 2
    assert tested.DOCTOR.value == "doctor"
    assert tested.PATIENT.value == "patient"
