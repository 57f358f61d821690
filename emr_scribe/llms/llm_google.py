from __future__ import annotations

import json
from http import HTTPStatus

from requests import post as requests_post

from emr_scribe.llms.llm_base import LlmBase
from emr_scribe.structures.http_response import HttpResponse
from emr_scribe.structures.token_counts import TokenCounts


class LlmGoogle(LlmBase):
    def to_dict(self) -> dict:
        system = [prompt for prompt in self.prompts if prompt.role == self.ROLE_SYSTEM]
        contents = [
            {"role": prompt.role, "parts": [{"text": "\n".join(prompt.text)}]}
            for prompt in self.prompts
            if prompt.role != self.ROLE_SYSTEM
        ]
        result: dict = {
            "contents": contents,
            "generationConfig": {"temperature": self.temperature},
        }
        if system:
            result["systemInstruction"] = {"parts": [{"text": "\n".join(system[0].text)}]}
        return result

    def request(self, timeout: int | None) -> HttpResponse:
        url = f"{self.url}/{self.model}:generateContent?key={self.api_key}"
        headers = {"Content-Type": "application/json"}
        request = requests_post(
            url,
            headers=headers,
            params={},
            data=json.dumps(self.to_dict()),
            verify=True,
            timeout=timeout,
        )
        response = HttpResponse(
            code=request.status_code,
            response=request.text,
            tokens=TokenCounts(prompt=0, generated=0),
        )
        if response.code != HTTPStatus.OK.value:
            return response

        self.memory_log.log(response.response)
        try:
            content = json.loads(response.response)
        except json.JSONDecodeError:
            return HttpResponse(code=response.code, response="", tokens=response.tokens)
        if not isinstance(content, dict):
            return HttpResponse(code=response.code, response="", tokens=response.tokens)

        candidate = self.first_dict(content.get("candidates"))
        part = self.first_dict(self.as_dict(candidate.get("content")).get("parts"))
        usage = self.as_dict(content.get("usageMetadata"))
        return HttpResponse(
            code=response.code,
            response=self.as_text(part.get("text")),
            tokens=TokenCounts(
                prompt=self.as_count(usage.get("promptTokenCount")),
                generated=self.as_count(usage.get("candidatesTokenCount")),
            ),
        )
