from __future__ import annotations

from datetime import datetime, UTC

from logger import log

from emr_scribe.structures.token_counts import TokenCounts

ENTRIES: dict[str, dict[str, list[str]]] = {}  # logs per generation request, then per label
PROMPTS: dict[str, TokenCounts] = {}  # token consumptions per generation request


class MemoryLog:
    @classmethod
    def token_counts(cls, request_uuid: str) -> TokenCounts:
        return PROMPTS.get(request_uuid) or TokenCounts(prompt=0, generated=0)

    @classmethod
    def end_session(cls, request_uuid: str) -> str:
        if request_uuid not in ENTRIES:
            return ""

        counts = cls.token_counts(request_uuid)
        ENTRIES[request_uuid]["TOKENS"] = [f"TOTAL Tokens: {counts.prompt} / {counts.generated}"]
        PROMPTS.pop(request_uuid, None)
        return "\n\n\n\n".join(
            [
                "\n".join(l)
                for l in sorted(
                    [e for e in ENTRIES.pop(request_uuid).values() if e],
                    key=lambda v: v[0],
                )
            ]
        )

    @classmethod
    def dev_null_instance(cls) -> MemoryLog:
        return cls("", "local")

    def __init__(self, request_uuid: str, label: str) -> None:
        self.request_uuid = request_uuid
        self.label = label
        self.counts = TokenCounts(prompt=0, generated=0)
        if self.request_uuid not in ENTRIES:
            ENTRIES[self.request_uuid] = {}
            PROMPTS[self.request_uuid] = TokenCounts(prompt=0, generated=0)
        if label not in ENTRIES[self.request_uuid]:
            ENTRIES[self.request_uuid][self.label] = []

    def log(self, message: str) -> None:
        ENTRIES[self.request_uuid][self.label].append(f"{datetime.now(UTC).isoformat()}: {message}")

    def output(self, message: str) -> None:
        self.log(message)
        log.info(message)

    def add_consumption(self, counts: TokenCounts) -> None:
        self.counts.add(counts)
        PROMPTS[self.request_uuid].add(counts)
