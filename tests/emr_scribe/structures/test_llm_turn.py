from emr_scribe.structures.llm_turn import LlmTurn
from tests.helper import is_namedtuple


def test_class():
    tested = LlmTurn
    fields = {"role": str, "text": list[str]}
    assert is_namedtuple(tested, fields)


def test_to_dict():
    tested = LlmTurn(role="theRole", text=["text1", "text2"])
    expected = {"role": "theRole", "text": ["text1", "text2"]}
    assert tested.to_dict() == expected
