from typing import NamedTuple

from emr_scribe.structures.token_counts import TokenCounts


class HttpResponse(NamedTuple):
    code: int
    response: str
    tokens: TokenCounts
