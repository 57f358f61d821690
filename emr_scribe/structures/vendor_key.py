from typing import NamedTuple


class VendorKey(NamedTuple):
    vendor: str
    api_key: str
    model: str
    url: str
