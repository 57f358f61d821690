from time import time
from unittest.mock import patch, call

from emr_scribe.libraries.authenticator import Authenticator


def test_signature():
    tested = Authenticator
    tests = [
        ("theSecret", "1746790419", "bd189b8f78205d26ae45fa93a26973dd1df36765bb1fad87ae8020beaf1e97e2"),
        ("theSecret", "1746790478", "a036f24eb483cc3a0196ae701caa5a617e2cbd38c2475ac47a3aafe2aa748ad3"),
    ]
    for secret, timestamp, expected in tests:
        result = tested.signature(secret, timestamp)
        assert result == expected


@patch("emr_scribe.libraries.authenticator.time", wraps=time)
def test_check(mock_time):
    def reset_mocks():
        mock_time.reset_mock()

    tested = Authenticator

    tests = [
        (
            "theSecret",
            {"ts": "1746790419", "sig": "bd189b8f78205d26ae45fa93a26973dd1df36765bb1fad87ae8020beaf1e97e2"},
            60,
            True,
            True,
        ),  # good
        (
            "theSecret",
            {"ts": "1746790419", "sig": "bd189b8f78205d26ae45fa93a26973dd1df36765bb1fad87ae8020beaf1e97ex"},
            60,
            True,
            False,
        ),  # incorrect
        (
            "TheSecret",
            {"ts": "1746790419", "sig": "bd189b8f78205d26ae45fa93a26973dd1df36765bb1fad87ae8020beaf1e97e2"},
            60,
            True,
            False,
        ),  # other secret
        (
            "theSecret",
            {"ts": "1746790419", "sig": "bd189b8f78205d26ae45fa93a26973dd1df36765bb1fad87ae8020beaf1e97e2"},
            59,
            True,
            False,
        ),  # too old
        (
            "theSecret",
            {"sig": "bd189b8f78205d26ae45fa93a26973dd1df36765bb1fad87ae8020beaf1e97e2"},
            60,
            False,
            False,
        ),  # missing ts
        ("theSecret", {"ts": "1746790419"}, 60, False, False),  # missing sig
        ("theSecret", {"ts": "17467904x9", "sig": "theSig"}, 60, False, False),  # invalid ts
        (
            "",
            {"ts": "1746790419", "sig": "bd189b8f78205d26ae45fa93a26973dd1df36765bb1fad87ae8020beaf1e97e2"},
            60,
            False,
            False,
        ),  # no secret
    ]

    for idx, (secret, params, expiration, exp_calls, expected) in enumerate(tests):
        mock_time.side_effect = [1746790478.775192]

        result = tested.check(secret, expiration, params)
        assert result is expected, f"---> {idx}"

        calls = []
        if exp_calls:
            calls = [call()]
        assert mock_time.mock_calls == calls
        reset_mocks()
