from __future__ import annotations

from typing import NamedTuple


class MedicalEmr(NamedTuple):
    chief_complaint: str
    present_illness: str
    past_history: str
    summary: str

    @classmethod
    def empty(cls) -> MedicalEmr:
        return MedicalEmr(chief_complaint="", present_illness="", past_history="", summary="")

    def to_json(self) -> dict:
        return {
            "chiefComplaint": self.chief_complaint,
            "presentIllness": self.present_illness,
            "pastHistory": self.past_history,
            "summary": self.summary,
        }
