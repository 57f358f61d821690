import json

from emr_scribe.libraries.conversation_parser import ConversationParser
from emr_scribe.libraries.evidence_indexer import EvidenceIndexer
from emr_scribe.libraries.generation_errors import GenerationError, InputMissingError, ShapeInvalidError
from emr_scribe.libraries.medical_rewrite import MedicalRewrite
from emr_scribe.libraries.memory_log import MemoryLog
from emr_scribe.libraries.record_extractor import RecordExtractor
from emr_scribe.libraries.record_validator import RecordValidator
from emr_scribe.structures.evidence_block import EvidenceBlock
from emr_scribe.structures.generation_request import GenerationRequest
from emr_scribe.structures.generation_result import GenerationResult
from emr_scribe.structures.generation_state import GenerationState
from emr_scribe.structures.settings import Settings
from emr_scribe.structures.statement import Statement


class Orchestrator:
    """
    Run one generation request against a snapshot of the statement log.

    Nothing is shared between two requests but the read-only snapshots they are given,
    and nothing is raised: every failure comes back as a failed GenerationResult.
    """

    def __init__(self, settings: Settings, memory_log: MemoryLog):
        self.settings = settings
        self.memory_log = memory_log

    @classmethod
    def snapshot(cls, statements: list[Statement]) -> tuple[Statement, ...]:
        return tuple(statements)

    @classmethod
    def conversation_text(cls, statements: tuple[Statement, ...]) -> str:
        return "\n".join(statement.text for statement in statements if statement.text).strip()

    @classmethod
    def request_from(
        cls,
        statements: tuple[Statement, ...],
        history: str,
        blocks: list[EvidenceBlock],
    ) -> GenerationRequest:
        return GenerationRequest(
            conversation_text=cls.conversation_text(statements),
            history_text=history.strip(),
            evidence=[block.to_evidence_line() for block in blocks],
        )

    def rewrite(self, statements: list[Statement]) -> GenerationResult:
        snapshot = self.snapshot(statements)
        text = self.conversation_text(snapshot)
        if not text:
            return self.failure(InputMissingError("conversation is required"))

        turns = ConversationParser.parse(text)
        self.memory_log.log(f"rule engine over {len(turns)} turns")
        return GenerationResult.with_medical_emr(MedicalRewrite.from_turns(turns))

    def extract(self, statements: list[Statement], history: str, timeout: int | None) -> GenerationResult:
        snapshot = self.snapshot(statements)
        blocks = EvidenceIndexer.index(list(snapshot))
        return self.extract_request(self.request_from(snapshot, history, blocks), timeout)

    def extract_request(self, request: GenerationRequest, timeout: int | None) -> GenerationResult:
        self.memory_log.log(f"state: {GenerationState.REQUESTING.value}")
        try:
            if not request.conversation_text:
                raise InputMissingError("conversation is required")
            payload = RecordExtractor(self.settings, self.memory_log).extract(request, timeout)
            record = RecordValidator.validate(payload, request.valid_ids())
        except GenerationError as e:
            return self.failure(e)

        self.memory_log.log(f"state: {GenerationState.SUCCEEDED.value}")
        return GenerationResult.with_record(record)

    def failure(self, error: GenerationError) -> GenerationResult:
        self.memory_log.output(f"{error.kind.value}: {error}")
        if isinstance(error, ShapeInvalidError):
            for problem in error.errors:
                self.memory_log.log(f"schema: {problem}")
        if error.payload is not None:
            payload = error.payload
            if not isinstance(payload, str):
                payload = json.dumps(payload, ensure_ascii=False, default=str)
            self.memory_log.log(f"payload: {payload}")
        self.memory_log.log(f"state: {GenerationState.FAILED.value}")
        return GenerationResult.with_error(error.kind, error.user_message)
