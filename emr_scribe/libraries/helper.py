from emr_scribe.libraries.constants import Constants
from emr_scribe.libraries.memory_log import MemoryLog
from emr_scribe.llms.llm_base import LlmBase
from emr_scribe.llms.llm_google import LlmGoogle
from emr_scribe.llms.llm_openai import LlmOpenai
from emr_scribe.structures.settings import Settings


class Helper:
    @classmethod
    def chatter(cls, settings: Settings, memory_log: MemoryLog) -> LlmBase:
        vendor_key = settings.llm_text
        if vendor_key.vendor.upper() == Constants.VENDOR_GOOGLE.upper():
            return LlmGoogle(memory_log, vendor_key.api_key, vendor_key.model, vendor_key.url)
        return LlmOpenai(memory_log, vendor_key.api_key, vendor_key.model, vendor_key.url)

    @classmethod
    def language_or_default(cls, language: object) -> str:
        if language in (Constants.LANGUAGE_CHINESE, Constants.LANGUAGE_ENGLISH):
            return str(language)
        return Constants.LANGUAGE_CHINESE
