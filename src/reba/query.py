from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union


NEIGHBORHOOD_TRIGGERS = (
    "homes for sale",
    "houses for sale",
    "properties in",
    "real estate in",
)

_LOCATION_RE = re.compile(r"(?:in|near)\s+([^,]+(?:,\s*[^,]+)?)", flags=re.IGNORECASE)

_HOUSE_NUMBER_RE = re.compile(
    r"(\d+)\s+([^,]+)(?:,\s*([^,]+))?(?:,\s*([^,]+))?", flags=re.IGNORECASE
)
_SHOW_ME_RE = re.compile(r"show\s+me\s+(.+)", flags=re.IGNORECASE)
_PROPERTY_INFO_RE = re.compile(
    r"property\s+(?:information|info|details)\s+(?:for|about|on)\s+(.+)",
    flags=re.IGNORECASE,
)
_WHAT_IS_RE = re.compile(
    r"what\s+(?:is|are)\s+(?:the\s+)?(?:details|information)\s+(?:for|about|on)\s+(.+)",
    flags=re.IGNORECASE,
)

_LEADING_PHRASE_RE = re.compile(
    r"^(show me |property information for |what is the information on )",
    flags=re.IGNORECASE,
)


@dataclass(frozen=True)
class PropertySearch:
    address: str
    kind: str = "property"

    def to_dict(self) -> dict:
        return {"type": self.kind, "address": self.address}


@dataclass(frozen=True)
class NeighborhoodSearch:
    location: str
    kind: str = "neighborhood"

    def to_dict(self) -> dict:
        return {"type": self.kind, "location": self.location}


ParsedQuery = Union[PropertySearch, NeighborhoodSearch]

Extractor = Callable[["re.Match[str]"], str]


def _whole_match(m: "re.Match[str]") -> str:
    return m.group(0)


def _remainder(m: "re.Match[str]") -> str:
    return m.group(1)


# Ordered (pattern, extractor) table; first match wins. The house-number rule
# keeps the full match so the street and city clauses survive.
ADDRESS_RULES: List[Tuple["re.Pattern[str]", Extractor]] = [
    (_HOUSE_NUMBER_RE, _whole_match),
    (_SHOW_ME_RE, _remainder),
    (_PROPERTY_INFO_RE, _remainder),
    (_WHAT_IS_RE, _remainder),
]


def is_neighborhood_phrasing(query: str) -> bool:
    lowered = query.lower()
    return any(trigger in lowered for trigger in NEIGHBORHOOD_TRIGGERS)


def extract_location(query: str) -> Optional[str]:
    m = _LOCATION_RE.search(query)
    if not m:
        return None
    location = m.group(1).strip()
    return location or None


def extract_address(query: str) -> Optional[str]:
    for pattern, extractor in ADDRESS_RULES:
        m = pattern.search(query)
        if not m:
            continue
        address = _LEADING_PHRASE_RE.sub("", extractor(m)).strip()
        if address:
            return address
    return None


def classify(query: str) -> ParsedQuery:
    """Decide between a single-property lookup and an area listing.

    Neighborhood phrasing is checked before any address rule, so a query
    such as "homes for sale near 5th Avenue" is an area search. Anything
    that matches no rule degrades to a property search on the whole string.
    """

    text = (query or "").strip()
    if not text:
        raise ValueError("query must not be empty")

    if is_neighborhood_phrasing(text):
        location = extract_location(text)
        if location:
            return NeighborhoodSearch(location=location)

    address = extract_address(text)
    if address:
        return PropertySearch(address=address)

    return PropertySearch(address=text)
