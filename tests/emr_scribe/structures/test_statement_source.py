from emr_scribe.structures.statement_source import StatementSource


def test_enum():
    tested = StatementSource
    assert len(tested) == 3
    assert tested.TEXT.value == "text"
    assert tested.VOICE.value == "voice"
    assert tested.IMAGE.value == "image"
