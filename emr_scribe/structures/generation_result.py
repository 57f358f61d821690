from __future__ import annotations

from typing import NamedTuple

from emr_scribe.structures.error_kind import ErrorKind
from emr_scribe.structures.generation_state import GenerationState
from emr_scribe.structures.medical_emr import MedicalEmr
from emr_scribe.structures.structured_record import StructuredRecord


class GenerationResult(NamedTuple):
    state: GenerationState
    record: StructuredRecord | None
    medical_emr: MedicalEmr | None
    error_kind: ErrorKind | None
    message: str

    @classmethod
    def with_record(cls, record: StructuredRecord) -> GenerationResult:
        return GenerationResult(
            state=GenerationState.SUCCEEDED,
            record=record,
            medical_emr=None,
            error_kind=None,
            message="",
        )

    @classmethod
    def with_medical_emr(cls, medical_emr: MedicalEmr) -> GenerationResult:
        return GenerationResult(
            state=GenerationState.SUCCEEDED,
            record=None,
            medical_emr=medical_emr,
            error_kind=None,
            message="",
        )

    @classmethod
    def with_error(cls, error_kind: ErrorKind, message: str) -> GenerationResult:
        return GenerationResult(
            state=GenerationState.FAILED,
            record=None,
            medical_emr=None,
            error_kind=error_kind,
            message=message,
        )

    @property
    def succeeded(self) -> bool:
        return self.state == GenerationState.SUCCEEDED
