from __future__ import annotations

from typing import NamedTuple


class EvidenceLine(NamedTuple):
    id: str
    text: str

    @classmethod
    def load_from_json(cls, json_list: list) -> list[EvidenceLine]:
        # entries without a string id cannot be cited
        return [
            EvidenceLine(
                id=json_object["id"],
                text=json_object["text"] if isinstance(json_object.get("text"), str) else "",
            )
            for json_object in json_list
            if isinstance(json_object, dict) and isinstance(json_object.get("id"), str)
        ]

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
        }
