from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol


RawRecord = Dict[str, Any]


class UpstreamError(Exception):
    """The data provider could not produce an answer.

    Covers transport failures, non-success statuses and bodies that are not
    the JSON the provider documents.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class UpstreamAuthError(UpstreamError):
    pass


class PropertyProvider(Protocol):
    """Pluggable property data source.

    Both operations return ``None`` when the provider answered but nothing
    matched, and raise ``UpstreamError`` when it could not answer at all.
    """

    name: str

    def lookup_property_by_address(self, address: str) -> Optional[RawRecord]:
        ...

    def list_properties_by_location(
        self, location: str, limit: int
    ) -> Optional[List[RawRecord]]:
        ...
