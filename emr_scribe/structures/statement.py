from __future__ import annotations

from typing import NamedTuple

from emr_scribe.structures.statement_source import StatementSource


class Statement(NamedTuple):
    text: str
    source: StatementSource = StatementSource.TEXT

    @classmethod
    def load_from_json(cls, json_list: list) -> list[Statement]:
        sources = {source.value: source for source in StatementSource}
        return [
            Statement(
                text=json_object["text"].strip(),
                source=sources.get(json_object.get("source"), StatementSource.TEXT),
            )
            for json_object in json_list
            if isinstance(json_object, dict) and isinstance(json_object.get("text"), str)
        ]

    def to_json(self) -> dict:
        return {
            "text": self.text,
            "source": self.source.value,
        }
