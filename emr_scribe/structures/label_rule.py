from re import Pattern
from typing import NamedTuple

from emr_scribe.structures.semantic_label import SemanticLabel


class LabelRule(NamedTuple):
    label: SemanticLabel
    pattern: Pattern

    def matches(self, text: str) -> bool:
        return bool(self.pattern.search(text))
