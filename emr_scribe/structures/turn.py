from __future__ import annotations

from typing import NamedTuple

from emr_scribe.structures.speaker import Speaker


class Turn(NamedTuple):
    turn_id: int
    speaker: Speaker
    text: str

    @classmethod
    def load_from_json(cls, json_list: list) -> list[Turn]:
        return [
            Turn(
                turn_id=json_object.get("turnId", 0),
                speaker=Speaker(json_object.get("speaker", Speaker.PATIENT.value)),
                text=json_object.get("text", ""),
            )
            for json_object in json_list
        ]

    def to_json(self) -> dict:
        return {
            "turnId": self.turn_id,
            "speaker": self.speaker.value,
            "text": self.text,
        }
