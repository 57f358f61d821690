from emr_scribe.libraries.constants import Constants
from emr_scribe.libraries.evidence_indexer import EvidenceIndexer
from emr_scribe.libraries.orchestrator import Orchestrator
from emr_scribe.structures.error_kind import ErrorKind
from emr_scribe.structures.evidence_block import EvidenceBlock
from emr_scribe.structures.evidence_item import EvidenceItem
from emr_scribe.structures.generation_result import GenerationResult
from emr_scribe.structures.generation_state import GenerationState
from emr_scribe.structures.medical_emr import MedicalEmr
from emr_scribe.structures.statement import Statement
from emr_scribe.structures.statement_source import StatementSource
from emr_scribe.structures.structured_record import StructuredRecord


class DraftBoard:
    """
    What the clinician sees: the statement log, its evidence timeline and the last good records.

    A record is only ever replaced by the record of a successful request; a failure leaves it untouched.
    Not triggering a second generation while one is requesting is up to the user of the board.
    """

    WARNINGS = {
        Constants.LANGUAGE_CHINESE: {
            ErrorKind.INPUT_MISSING: "请先采集问诊内容",
            ErrorKind.CONFIGURATION_MISSING: "服务未配置，请联系管理员",
            None: "结构化病历生成失败，请重试",
        },
        Constants.LANGUAGE_ENGLISH: {
            ErrorKind.INPUT_MISSING: "Please collect the intake dialogue first",
            ErrorKind.CONFIGURATION_MISSING: "The service is not configured, please contact the administrator",
            None: "The structured record could not be generated, please retry",
        },
    }

    def __init__(self, language: str):
        self.language = language
        self.statements: list[Statement] = []
        self.blocks: list[EvidenceBlock] = []
        self.record: StructuredRecord | None = None
        self.medical_emr: MedicalEmr | None = None
        self.state = GenerationState.IDLE
        self.warning = ""

    def add_statement(self, text: str, source: StatementSource = StatementSource.TEXT) -> EvidenceBlock | None:
        trimmed = text.strip()
        if not trimmed:
            return None
        self.statements.append(Statement(text=trimmed, source=source))
        self.blocks = EvidenceIndexer.index(self.statements, self.blocks)
        self.warning = ""
        return self.blocks[-1]

    def add_image(self, file_name: str) -> EvidenceBlock | None:
        return self.add_statement(f"{Constants.IMAGE_STATEMENT_PREFIX}{file_name}", StatementSource.IMAGE)

    def clear(self) -> None:
        self.statements = []
        self.blocks = []
        self.warning = ""

    def cited_blocks(self, item: EvidenceItem) -> list[EvidenceBlock]:
        by_id = {block.id: block for block in self.blocks}
        return [by_id[reference] for reference in item.evidence_ids if reference in by_id]

    def generate_structured(
        self,
        orchestrator: Orchestrator,
        history: str = "",
        timeout: int | None = None,
    ) -> GenerationResult:
        self.state = GenerationState.REQUESTING
        self.warning = ""
        return self.apply(orchestrator.extract(self.statements, history, timeout))

    def generate_rewrite(self, orchestrator: Orchestrator) -> GenerationResult:
        self.state = GenerationState.REQUESTING
        self.warning = ""
        return self.apply(orchestrator.rewrite(self.statements))

    def apply(self, result: GenerationResult) -> GenerationResult:
        self.state = result.state
        if result.succeeded:
            if result.record is not None:
                self.record = result.record
            if result.medical_emr is not None:
                self.medical_emr = result.medical_emr
        else:
            warnings = self.WARNINGS.get(self.language, self.WARNINGS[Constants.LANGUAGE_CHINESE])
            self.warning = warnings.get(result.error_kind, warnings[None])
        return result
