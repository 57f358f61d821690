from emr_scribe.libraries.constants import Constants
from emr_scribe.libraries.rule_tables import LABEL_RULES
from emr_scribe.structures.evidence_block import EvidenceBlock
from emr_scribe.structures.semantic_label import SemanticLabel
from emr_scribe.structures.statement import Statement


class EvidenceIndexer:
    @classmethod
    def evidence_id(cls, position: int) -> str:
        return f"{Constants.EVIDENCE_ID_PREFIX}{position}"

    @classmethod
    def timestamp(cls, position: int) -> str:
        # display aid only, not derived from the wall clock
        total_minutes = (Constants.EVIDENCE_BASE_MINUTES + position) % Constants.MINUTES_PER_DAY
        return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"

    @classmethod
    def semantic_label(cls, text: str) -> SemanticLabel:
        for rule in LABEL_RULES:
            if rule.matches(text):
                return rule.label
        return SemanticLabel.EVIDENCE

    @classmethod
    def block_for(cls, position: int, text: str) -> EvidenceBlock:
        return EvidenceBlock(
            id=cls.evidence_id(position),
            timestamp=cls.timestamp(position),
            semantic_label=cls.semantic_label(text),
            text=text,
        )

    @classmethod
    def index(cls, statements: list[Statement], previous: list[EvidenceBlock] | None = None) -> list[EvidenceBlock]:
        """
        Build the evidence blocks of the statement log, in arrival order.

        The blocks of `previous` are kept as long as they describe the same statements,
        so a grown log never changes the id or the label of an already indexed statement.
        """
        result: list[EvidenceBlock] = []
        reusable = previous or []
        for idx, statement in enumerate(statements):
            if idx < len(reusable) and reusable[idx].text == statement.text:
                result.append(reusable[idx])
                continue
            reusable = []
            result.append(cls.block_for(idx + 1, statement.text))
        return result

    @classmethod
    def valid_ids(cls, blocks: list[EvidenceBlock]) -> set[str]:
        return {block.id for block in blocks}
