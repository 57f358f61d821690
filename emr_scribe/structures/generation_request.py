from __future__ import annotations

from typing import NamedTuple

from emr_scribe.structures.evidence_line import EvidenceLine


class GenerationRequest(NamedTuple):
    conversation_text: str
    history_text: str
    evidence: list[EvidenceLine]

    @classmethod
    def load_from_json(cls, json_object: dict) -> GenerationRequest:
        conversation = json_object.get("conversation")
        history = json_object.get("history")
        evidence = json_object.get("evidence")
        return GenerationRequest(
            conversation_text=conversation.strip() if isinstance(conversation, str) else "",
            history_text=history.strip() if isinstance(history, str) else "",
            evidence=EvidenceLine.load_from_json(evidence) if isinstance(evidence, list) else [],
        )

    def valid_ids(self) -> set[str]:
        return {line.id for line in self.evidence}

    def to_json(self) -> dict:
        return {
            "conversation": self.conversation_text,
            "history": self.history_text,
            "evidence": [line.to_json() for line in self.evidence],
        }
