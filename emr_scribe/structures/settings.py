from __future__ import annotations

from typing import NamedTuple

from emr_scribe.libraries.constants import Constants
from emr_scribe.structures.vendor_key import VendorKey


class Settings(NamedTuple):
    api_signing_key: str
    llm_text: VendorKey
    llm_timeout: int

    @classmethod
    def from_dictionary(cls, dictionary: dict) -> Settings:
        vendor = dictionary.get(Constants.SECRET_TEXT_LLM_VENDOR) or Constants.VENDOR_OPENAI
        return Settings(
            api_signing_key=dictionary.get(Constants.SECRET_API_SIGNING_KEY) or "",
            llm_text=VendorKey(
                vendor=vendor,
                api_key=(dictionary.get(Constants.SECRET_TEXT_LLM_KEY) or "").strip(),
                model=dictionary.get(Constants.SECRET_TEXT_LLM_MODEL) or cls.default_model(vendor),
                url=dictionary.get(Constants.SECRET_TEXT_LLM_URL) or cls.default_url(vendor),
            ),
            llm_timeout=cls.clamp_int(
                dictionary.get(Constants.SECRET_LLM_TIMEOUT),
                Constants.LLM_TIMEOUT_MIN,
                Constants.LLM_TIMEOUT_MAX,
                Constants.LLM_TIMEOUT_DEFAULT,
            ),
        )

    @classmethod
    def default_model(cls, vendor: str) -> str:
        if vendor.upper() == Constants.VENDOR_GOOGLE.upper():
            return Constants.GOOGLE_CHAT_TEXT
        return Constants.OPENAI_COMPATIBLE_CHAT_TEXT

    @classmethod
    def default_url(cls, vendor: str) -> str:
        if vendor.upper() == Constants.VENDOR_GOOGLE.upper():
            return Constants.GOOGLE_API_URL
        return Constants.OPENAI_COMPATIBLE_API_URL

    @classmethod
    def clamp_int(cls, value: int | str | None, low: int, high: int, default: int) -> int:
        if isinstance(value, str) and value.isdigit():
            value = int(value)
        if isinstance(value, int):
            return min(max(value, low), high)
        return default

    def has_llm_key(self) -> bool:
        return bool(self.llm_text.api_key)
