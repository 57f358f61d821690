import re

from emr_scribe.libraries.constants import Constants
from emr_scribe.structures.speaker import Speaker
from emr_scribe.structures.turn import Turn


class ConversationParser:
    MARKER_PATTERN = re.compile(r"(医生|患者|\bdoctor\b|\bpatient\b)\s*[:：]", re.IGNORECASE)
    SPEAKERS = {
        "医生": Speaker.DOCTOR,
        "患者": Speaker.PATIENT,
        "doctor": Speaker.DOCTOR,
        "patient": Speaker.PATIENT,
    }
    MARKERS = {
        Constants.LANGUAGE_CHINESE: {Speaker.DOCTOR: "医生：", Speaker.PATIENT: "患者："},
        Constants.LANGUAGE_ENGLISH: {Speaker.DOCTOR: "Doctor: ", Speaker.PATIENT: "Patient: "},
    }

    @classmethod
    def parse(cls, raw_text: str) -> list[Turn]:
        if not raw_text or not raw_text.strip():
            return []

        text = raw_text.strip()
        matches = list(cls.MARKER_PATTERN.finditer(text))
        result: list[Turn] = []
        for idx, match in enumerate(matches):
            end = len(text)
            if idx + 1 < len(matches):
                end = matches[idx + 1].start()
            content = text[match.end() : end].strip()
            if content:
                result.append(
                    Turn(
                        turn_id=len(result) + 1,
                        speaker=cls.SPEAKERS[match.group(1).lower()],
                        text=content,
                    )
                )
        return result

    @classmethod
    def to_transcript(cls, turns: list[Turn], language: str) -> str:
        markers = cls.MARKERS.get(language, cls.MARKERS[Constants.LANGUAGE_CHINESE])
        return "\n".join(f"{markers[turn.speaker]}{turn.text}" for turn in turns)
