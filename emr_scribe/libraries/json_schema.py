EVIDENCE_ITEM_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "text": {"type": "string", "description": "the content of the section, in written medical language"},
        "evidenceIds": {
            "type": "array",
            "description": "the identifiers of the evidence lines supporting the section, like E1",
            "items": {"type": "string"},
        },
    },
    "required": ["text", "evidenceIds"],
    "additionalProperties": False,
}

JSON_SCHEMAS: dict[str, dict] = {
    "structured_record": {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "properties": {
            "chief_complaint": EVIDENCE_ITEM_SCHEMA,
            "present_illness": EVIDENCE_ITEM_SCHEMA,
            "past_history": EVIDENCE_ITEM_SCHEMA,
            "diagnostic_assessment": EVIDENCE_ITEM_SCHEMA,
            "summary": {"type": "string", "description": "objective overview of the encounter"},
        },
        "required": ["chief_complaint", "present_illness", "past_history", "diagnostic_assessment", "summary"],
        "additionalProperties": False,
    },
}


class JsonSchema:
    @classmethod
    def get(cls, keys: list[str]) -> list[dict]:
        return [JSON_SCHEMAS[key] for key in keys if key in JSON_SCHEMAS]
