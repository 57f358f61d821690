from emr_scribe.structures.settings import Settings
from emr_scribe.structures.vendor_key import VendorKey
from tests.helper import is_namedtuple


def test_class():
    tested = Settings
    fields = {
        "api_signing_key": str,
        "llm_text": VendorKey,
        "llm_timeout": int,
    }
    assert is_namedtuple(tested, fields)


def test_from_dictionary():
    tested = Settings
    tests = [
        (
            {},
            Settings(
                api_signing_key="",
                llm_text=VendorKey(
                    vendor="OpenAI",
                    api_key="",
                    model="deepseek-chat",
                    url="https://api.deepseek.com/v1/chat/completions",
                ),
                llm_timeout=60,
            ),
        ),
        (
            {
                "APISigningKey": "theSigningKey",
                "KeyTextLLM": " theKey ",
                "TimeoutTextLLM": "120",
            },
            Settings(
                api_signing_key="theSigningKey",
                llm_text=VendorKey(
                    vendor="OpenAI",
                    api_key="theKey",
                    model="deepseek-chat",
                    url="https://api.deepseek.com/v1/chat/completions",
                ),
                llm_timeout=120,
            ),
        ),
        (
            {
                "APISigningKey": "theSigningKey",
                "VendorTextLLM": "Google",
                "KeyTextLLM": "theKey",
                "TimeoutTextLLM": "1",
            },
            Settings(
                api_signing_key="theSigningKey",
                llm_text=VendorKey(
                    vendor="Google",
                    api_key="theKey",
                    model="models/gemini-2.0-flash",
                    url="https://generativelanguage.googleapis.com/v1beta",
                ),
                llm_timeout=5,
            ),
        ),
        (
            {
                "VendorTextLLM": "OpenAI",
                "KeyTextLLM": "theKey",
                "ModelTextLLM": "theModel",
                "UrlTextLLM": "https://the.url/v1/chat/completions",
                "TimeoutTextLLM": "9999",
            },
            Settings(
                api_signing_key="",
                llm_text=VendorKey(
                    vendor="OpenAI",
                    api_key="theKey",
                    model="theModel",
                    url="https://the.url/v1/chat/completions",
                ),
                llm_timeout=300,
            ),
        ),
    ]
    for dictionary, expected in tests:
        result = tested.from_dictionary(dictionary)
        assert result == expected


def test_default_model():
    tested = Settings
    tests = [
        ("Google", "models/gemini-2.0-flash"),
        ("google", "models/gemini-2.0-flash"),
        ("OpenAI", "deepseek-chat"),
        ("other", "deepseek-chat"),
    ]
    for vendor, expected in tests:
        result = tested.default_model(vendor)
        assert result == expected, f"---> {vendor}"


def test_default_url():
    tested = Settings
    tests = [
        ("Google", "https://generativelanguage.googleapis.com/v1beta"),
        ("OpenAI", "https://api.deepseek.com/v1/chat/completions"),
    ]
    for vendor, expected in tests:
        result = tested.default_url(vendor)
        assert result == expected, f"---> {vendor}"


def test_clamp_int():
    tested = Settings
    tests = [
        (None, 60),
        ("", 60),
        ("abc", 60),
        ("-3", 60),
        ("3", 5),
        (3, 5),
        ("45", 45),
        (45, 45),
        (301, 300),
    ]
    for value, expected in tests:
        result = tested.clamp_int(value, 5, 300, 60)
        assert result == expected, f"---> {value}"


def test_has_llm_key():
    tests = [
        ("theKey", True),
        ("", False),
    ]
    for api_key, expected in tests:
        tested = Settings(
            api_signing_key="theSigningKey",
            llm_text=VendorKey(vendor="OpenAI", api_key=api_key, model="theModel", url="theUrl"),
            llm_timeout=60,
        )
        result = tested.has_llm_key()
        assert result is expected
