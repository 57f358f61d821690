from __future__ import annotations

from typing import NamedTuple


class LlmTurn(NamedTuple):
    role: str
    text: list[str]

    def to_dict(self) -> dict:
        return {
            "role": self.role,
            "text": self.text,
        }
