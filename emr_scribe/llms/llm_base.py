from __future__ import annotations

import json
import re
from time import time

from logger import log

from emr_scribe.libraries.memory_log import MemoryLog
from emr_scribe.structures.http_response import HttpResponse
from emr_scribe.structures.json_extract import JsonExtract
from emr_scribe.structures.llm_turn import LlmTurn


class LlmBase:
    ROLE_SYSTEM = "system"
    ROLE_USER = "user"

    def __init__(self, memory_log: MemoryLog, api_key: str, model: str, url: str):
        self.memory_log = memory_log
        self.api_key = api_key
        self.model = model
        self.url = url
        self.temperature = 0.0
        self.prompts: list[LlmTurn] = []

    def add_prompt(self, prompt: LlmTurn) -> None:
        if prompt.role == self.ROLE_SYSTEM:
            self.prompts = [prompt] + [p for p in self.prompts if p.role != self.ROLE_SYSTEM]
        elif prompt.role == self.ROLE_USER:
            self.prompts.append(prompt)

    def set_system_prompt(self, text: list[str]) -> None:
        self.add_prompt(LlmTurn(role=self.ROLE_SYSTEM, text=text))

    def set_user_prompt(self, text: list[str]) -> None:
        self.add_prompt(LlmTurn(role=self.ROLE_USER, text=text))

    def request(self, timeout: int | None) -> HttpResponse:
        raise NotImplementedError()

    def chat(self, timeout: int | None) -> HttpResponse:
        # one request, no retry
        self.memory_log.log("-- CHAT BEGINS --")
        start = time()
        response = self.request(timeout)
        self.memory_log.add_consumption(response.tokens)
        self.memory_log.log(f"--- CHAT ENDS - {response.code} - {int((time() - start) * 1000)}ms ---")
        return response

    @classmethod
    def as_dict(cls, value) -> dict:
        return value if isinstance(value, dict) else {}

    @classmethod
    def first_dict(cls, values) -> dict:
        if isinstance(values, list) and values:
            return cls.as_dict(values[0])
        return {}

    @classmethod
    def as_text(cls, value) -> str:
        return value if isinstance(value, str) else ""

    @classmethod
    def as_count(cls, value) -> int:
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        return 0

    @classmethod
    def extract_json_from(cls, content: str) -> JsonExtract:
        text = content.strip()
        if not text:
            return JsonExtract(error="empty response", has_error=True, content=None)

        # the model may or may not wrap its JSON in a markdown block
        pattern_json = re.compile(r"```(?:json)?\s*\n?(.*?)\n?\s*```", re.DOTALL | re.IGNORECASE)
        if embedded := pattern_json.search(text):
            text = embedded.group(1)
        try:
            return JsonExtract(error="", has_error=False, content=json.loads(text))
        except json.JSONDecodeError as e:
            log.info(e)
            log.info("---->")
            log.info(text)
            log.info("<----")
            return JsonExtract(error=str(e), has_error=True, content=None)
