from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, Union

from reba.normalize import normalize, normalize_list
from reba.providers.base import PropertyProvider, UpstreamError
from reba.providers.demo import demo_records, no_match_listing, no_match_record
from reba.query import NeighborhoodSearch, ParsedQuery, PropertySearch, classify
from reba.schema import CanonicalProperty, PropertySummary


DEFAULT_LIMIT = 10
NO_AREA_RESULTS_MESSAGE = "No properties found in this area"

logger = logging.getLogger("reba.service")

Card = Union[CanonicalProperty, PropertySummary]


def fallback_warning(reason: str) -> str:
    return f"Unable to fetch live data: {reason}. Showing demo data instead."


@dataclass
class SearchResult:
    query: ParsedQuery
    properties: List[Card] = field(default_factory=list)
    warning: Optional[str] = None
    demo: bool = False

    @property
    def kind(self) -> str:
        return self.query.kind

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "query": self.query.to_dict(),
            "properties": [p.to_dict() for p in self.properties],
            "warning": self.warning,
            "demo": self.demo,
        }


def _is_demo(provider: PropertyProvider) -> bool:
    return getattr(provider, "name", "") == "demo"


def lookup_property(address: str, provider: PropertyProvider) -> SearchResult:
    parsed = PropertySearch(address=address)
    try:
        record = provider.lookup_property_by_address(address)
    except UpstreamError as exc:
        logger.warning("property lookup failed, serving demo data: %s", exc)
        return SearchResult(
            query=parsed,
            properties=[normalize(demo_records()[0])],
            warning=fallback_warning(str(exc)),
            demo=True,
        )
    if not record:
        logger.info("no property found, serving placeholder record")
        return SearchResult(query=parsed, properties=[normalize(no_match_record(address))], demo=True)
    return SearchResult(query=parsed, properties=[normalize(record)], demo=_is_demo(provider))


def list_properties(
    location: str, provider: PropertyProvider, limit: int = DEFAULT_LIMIT
) -> SearchResult:
    parsed = NeighborhoodSearch(location=location)
    try:
        records = provider.list_properties_by_location(location, limit)
    except UpstreamError as exc:
        logger.warning("property list failed, serving demo data: %s", exc)
        return SearchResult(
            query=parsed,
            properties=normalize_list(demo_records()),
            warning=fallback_warning(str(exc)),
            demo=True,
        )
    if records is None:
        logger.info("location not resolved, serving placeholder listing")
        return SearchResult(
            query=parsed, properties=normalize_list([no_match_listing(location)]), demo=True
        )
    return SearchResult(query=parsed, properties=normalize_list(records), demo=_is_demo(provider))


def search(query: str, provider: PropertyProvider, limit: int = DEFAULT_LIMIT) -> SearchResult:
    parsed = classify(query)
    logger.debug("parsed query: %s", parsed.to_dict())
    if isinstance(parsed, NeighborhoodSearch):
        return list_properties(parsed.location, provider, limit=limit)
    return lookup_property(parsed.address, provider)


class OutputPort(Protocol):
    def render(self, prop: CanonicalProperty) -> None:
        ...

    def render_list(self, properties: Sequence[PropertySummary]) -> None:
        ...

    def render_error(self, message: str) -> None:
        ...


def present(result: SearchResult, port: OutputPort) -> None:
    """Push a search result through a display port.

    The warning, if any, goes out before the cards so fallback data is never
    shown without its notice.
    """

    if result.warning:
        port.render_error(result.warning)
    if result.kind == "neighborhood":
        if not result.properties:
            port.render_error(NO_AREA_RESULTS_MESSAGE)
            return
        port.render_list(result.properties)
        return
    if not result.properties:
        port.render_error("No property data available")
        return
    port.render(result.properties[0])
