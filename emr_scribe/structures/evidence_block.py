from __future__ import annotations

from typing import NamedTuple

from emr_scribe.structures.evidence_line import EvidenceLine
from emr_scribe.structures.semantic_label import SemanticLabel


class EvidenceBlock(NamedTuple):
    id: str
    timestamp: str
    semantic_label: SemanticLabel
    text: str

    def display_label(self, language: str) -> str:
        return SemanticLabel.display_names(language)[self.semantic_label]

    def to_evidence_line(self) -> EvidenceLine:
        return EvidenceLine(id=self.id, text=self.text)

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "semanticLabel": self.semantic_label.value,
            "text": self.text,
        }
