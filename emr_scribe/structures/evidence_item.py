from __future__ import annotations

from typing import NamedTuple


class EvidenceItem(NamedTuple):
    text: str
    evidence_ids: list[str]

    @classmethod
    def load_from_json(cls, json_object: dict) -> EvidenceItem:
        return EvidenceItem(
            text=json_object.get("text", ""),
            evidence_ids=json_object.get("evidenceIds", []),
        )

    def to_json(self) -> dict:
        return {
            "text": self.text,
            "evidenceIds": self.evidence_ids,
        }
