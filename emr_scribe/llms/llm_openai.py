from __future__ import annotations

import json
from http import HTTPStatus

from requests import post as requests_post

from emr_scribe.llms.llm_base import LlmBase
from emr_scribe.structures.http_response import HttpResponse
from emr_scribe.structures.token_counts import TokenCounts


class LlmOpenai(LlmBase):
    """Chat completions of OpenAI and of the compatible services (DeepSeek...)."""

    ROLES = {
        LlmBase.ROLE_SYSTEM: "system",
        LlmBase.ROLE_USER: "user",
    }

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": self.ROLES[prompt.role], "content": "\n".join(prompt.text)}
                for prompt in self.prompts
            ],
            "temperature": self.temperature,
        }

    def post(self, url: str, params: dict, data: str, timeout: int | None = None) -> HttpResponse:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        request = requests_post(
            url,
            headers=headers,
            params=params,
            data=data,
            verify=True,
            timeout=timeout,
        )
        return HttpResponse(code=request.status_code, response=request.text, tokens=TokenCounts(prompt=0, generated=0))

    def request(self, timeout: int | None) -> HttpResponse:
        response = self.post(self.url, {}, json.dumps(self.to_dict()), timeout)
        if response.code != HTTPStatus.OK.value:
            return response

        self.memory_log.log(response.response)
        try:
            content = json.loads(response.response)
        except json.JSONDecodeError:
            return HttpResponse(code=response.code, response="", tokens=response.tokens)
        if not isinstance(content, dict):
            return HttpResponse(code=response.code, response="", tokens=response.tokens)

        message = self.as_dict(self.first_dict(content.get("choices")).get("message"))
        usage = self.as_dict(content.get("usage"))
        return HttpResponse(
            code=response.code,
            response=self.as_text(message.get("content")),
            tokens=TokenCounts(
                prompt=self.as_count(usage.get("prompt_tokens")),
                generated=self.as_count(usage.get("completion_tokens")),
            ),
        )
