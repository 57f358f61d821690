from __future__ import annotations

from typing import NamedTuple

from emr_scribe.structures.evidence_item import EvidenceItem


class StructuredRecord(NamedTuple):
    chief_complaint: EvidenceItem
    present_illness: EvidenceItem
    past_history: EvidenceItem
    diagnostic_assessment: EvidenceItem
    summary: str

    @classmethod
    def load_from_json(cls, json_object: dict) -> StructuredRecord:
        # expects the extraction envelope, already validated
        return StructuredRecord(
            chief_complaint=EvidenceItem.load_from_json(json_object["chief_complaint"]),
            present_illness=EvidenceItem.load_from_json(json_object["present_illness"]),
            past_history=EvidenceItem.load_from_json(json_object["past_history"]),
            diagnostic_assessment=EvidenceItem.load_from_json(json_object["diagnostic_assessment"]),
            summary=json_object["summary"],
        )

    def to_json(self) -> dict:
        return {
            "chiefComplaint": self.chief_complaint.to_json(),
            "presentIllness": self.present_illness.to_json(),
            "pastHistory": self.past_history.to_json(),
            "diagnosticAssessment": self.diagnostic_assessment.to_json(),
            "summary": self.summary,
        }
