from enum import Enum


class SemanticLabel(Enum):
    CHIEF_COMPLAINT = "chiefComplaint"
    PAST_HISTORY = "pastHistory"
    SYMPTOM = "symptom"
    EVIDENCE = "evidence"

    @classmethod
    def display_names(cls, language: str) -> dict:
        if language == "en":
            return {
                cls.CHIEF_COMPLAINT: "Chief Complaint",
                cls.PAST_HISTORY: "Past History",
                cls.SYMPTOM: "Symptoms",
                cls.EVIDENCE: "Evidence",
            }
        return {
            cls.CHIEF_COMPLAINT: "主诉相关",
            cls.PAST_HISTORY: "既往史",
            cls.SYMPTOM: "症状",
            cls.EVIDENCE: "证据",
        }
