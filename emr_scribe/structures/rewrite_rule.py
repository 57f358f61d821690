from re import Pattern
from typing import NamedTuple


class RewriteRule(NamedTuple):
    pattern: Pattern
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)
