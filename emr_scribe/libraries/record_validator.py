from jsonschema import Draft7Validator

from emr_scribe.libraries.generation_errors import ShapeInvalidError
from emr_scribe.libraries.json_schema import JsonSchema
from emr_scribe.structures.evidence_item import EvidenceItem
from emr_scribe.structures.structured_record import StructuredRecord


class RecordValidator:
    SCHEMA_KEY = "structured_record"

    @classmethod
    def schema_errors(cls, candidate: object) -> list[str]:
        result: list = []
        for error in Draft7Validator(JsonSchema.get([cls.SCHEMA_KEY])[0]).iter_errors(candidate):
            message = error.message
            if error.path:
                message = f"{error.message}, in path {list(error.path)}"
            result.append(message)
        return result

    @classmethod
    def filter_references(cls, references: list[str], valid_ids: set[str]) -> list[str]:
        # unknown references are dropped, never a reason to reject
        result: list[str] = []
        for reference in references:
            cleaned = reference.strip()
            if cleaned and cleaned in valid_ids and cleaned not in result:
                result.append(cleaned)
        return result

    @classmethod
    def sanitized_item(cls, item: EvidenceItem, valid_ids: set[str]) -> EvidenceItem:
        return EvidenceItem(text=item.text, evidence_ids=cls.filter_references(item.evidence_ids, valid_ids))

    @classmethod
    def validate(cls, candidate: object, valid_ids: set[str]) -> StructuredRecord:
        """
        Accept the candidate as a whole or reject it as a whole.

        Raises ShapeInvalidError when the candidate does not match the structured record schema;
        otherwise returns the record with only the evidence references found in valid_ids.
        """
        if problems := cls.schema_errors(candidate):
            raise ShapeInvalidError("structured record shape invalid", payload=candidate, errors=problems)

        assert isinstance(candidate, dict)
        record = StructuredRecord.load_from_json(candidate)
        return StructuredRecord(
            chief_complaint=cls.sanitized_item(record.chief_complaint, valid_ids),
            present_illness=cls.sanitized_item(record.present_illness, valid_ids),
            past_history=cls.sanitized_item(record.past_history, valid_ids),
            diagnostic_assessment=cls.sanitized_item(record.diagnostic_assessment, valid_ids),
            summary=record.summary,
        )
