"""Package initializer for `reba`."""

from .normalize import format_address, normalize, normalize_list
from .query import NeighborhoodSearch, PropertySearch, classify
from .service import SearchResult, search

__all__ = [
    "NeighborhoodSearch",
    "PropertySearch",
    "SearchResult",
    "classify",
    "format_address",
    "normalize",
    "normalize_list",
    "search",
]
