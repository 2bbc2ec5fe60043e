from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from reba.api.schemas import PropertyListResponse, PropertyResponse, SearchResponse
from reba.config import MAX_LIST_LIMIT, get_settings
from reba.providers import get_provider
from reba.service import list_properties, lookup_property, search


router = APIRouter(tags=["property"])

logger = logging.getLogger("reba.api")


def _required(value: Optional[str], message: str) -> str:
    text = (value or "").strip()
    if not text:
        raise HTTPException(status_code=400, detail=message)
    return text


@router.get("/property", response_model=PropertyResponse)
def property_lookup(address: Optional[str] = None):
    address = _required(address, "Address is required")
    logger.debug("property lookup: %s", address)
    result = lookup_property(address, get_provider())
    return {
        "property": result.properties[0].to_dict(),
        "warning": result.warning,
        "demo": result.demo,
    }


@router.get("/properties/list", response_model=PropertyListResponse)
def properties_list(
    location: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_LIST_LIMIT),
):
    location = _required(location, "Location is required")
    if limit is None:
        limit = get_settings().default_limit
    logger.debug("property list: %s limit=%s", location, limit)
    result = list_properties(location, get_provider(), limit=limit)
    return {
        "properties": [p.to_dict() for p in result.properties],
        "warning": result.warning,
        "demo": result.demo,
    }


@router.get("/search", response_model=SearchResponse)
def free_text_search(
    q: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_LIST_LIMIT),
):
    query = _required(q, "Query is required")
    if limit is None:
        limit = get_settings().default_limit
    result = search(query, get_provider(), limit=limit)
    return result.to_dict()
