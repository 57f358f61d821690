from __future__ import annotations

from typing import NamedTuple


class EmrDraft(NamedTuple):
    chief_complaint: str
    present_illness: str
    doctor_questions: list[str]
    patient_responses: list[str]
    reported_symptoms: list[str]

    def to_json(self) -> dict:
        return {
            "chiefComplaint": self.chief_complaint,
            "presentIllness": self.present_illness,
            "doctorQuestions": self.doctor_questions,
            "patientResponses": self.patient_responses,
            "reportedSymptoms": self.reported_symptoms,
        }
