from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from .base import PropertyProvider, RawRecord, UpstreamAuthError, UpstreamError


AUTOCOMPLETE_PATH = "/locations/v2/auto-complete"
DETAIL_PATH = "/properties/v2/detail"
LIST_FOR_SALE_PATH = "/properties/v2/list-for-sale"

AUTH_ERROR_MESSAGE = "API key is invalid or expired. Please check your RapidAPI key."
CONFIG_ERROR_MESSAGE = "RapidAPI host or key is not usable"

logger = logging.getLogger("reba.provider")


def _dig(obj: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(obj, Mapping):
            return None
        obj = obj.get(key)
    return obj


def _first(*values: Any) -> Any:
    # Falsy values fall through, matching how the provider leaves gaps.
    for value in values:
        if value:
            return value
    return None


def _compact(record: Dict[str, Any]) -> RawRecord:
    return {k: v for k, v in record.items() if v is not None}


def shape_detail(prop: Mapping[str, Any], suggestion: Mapping[str, Any]) -> RawRecord:
    """Reshape a ``properties/v2/detail`` record into the loose record shape.

    The provider's address may already be a nested object; otherwise it is
    assembled from top-level keys with the autocomplete suggestion as backup.
    """

    address = prop.get("address") or {
        "streetAddress": _first(prop.get("street"), suggestion.get("line")),
        "city": _first(prop.get("city"), suggestion.get("city")),
        "state": _first(prop.get("state_code"), suggestion.get("state_code")),
        "zipcode": _first(prop.get("postal_code"), suggestion.get("postal_code")),
    }
    if isinstance(address, Mapping) and "line" in address:
        address = {
            "streetAddress": address.get("line"),
            "city": address.get("city"),
            "state": address.get("state_code"),
            "zipcode": address.get("postal_code"),
        }
    return _compact(
        {
            "address": address,
            "price": _first(
                prop.get("price"), prop.get("list_price"), _dig(prop, "estimate", "estimate")
            ),
            "bedrooms": _first(prop.get("beds"), prop.get("beds_max"), prop.get("beds_min")),
            "bathrooms": _first(
                prop.get("baths"), prop.get("baths_max"), prop.get("baths_min")
            ),
            "livingArea": _first(prop.get("sqft"), prop.get("sqft_max"), prop.get("sqft_min")),
            "yearBuilt": prop.get("year_built"),
            "propertyType": _first(prop.get("prop_type"), prop.get("property_type")),
            "taxAssessment": prop.get("tax_assessed_value"),
            "propertyTax": _first(prop.get("tax_amount"), prop.get("annual_tax")),
            "status": _first(prop.get("prop_status"), prop.get("status")),
            "mlsNumber": _first(prop.get("listing_id"), _dig(prop, "mls", "id")),
            "daysOnMarket": prop.get("days_on_market"),
            "description": prop.get("description"),
            "lotSize": prop.get("lot_sqft"),
            "hoaFee": prop.get("hoa_fee"),
        }
    )


def shape_listing(prop: Mapping[str, Any]) -> RawRecord:
    address = prop.get("address")
    if isinstance(address, Mapping):
        address = {
            "streetAddress": address.get("line"),
            "city": address.get("city"),
            "state": address.get("state_code"),
            "zipcode": address.get("postal_code"),
        }
    return _compact(
        {
            "address": address,
            "price": _first(prop.get("price"), prop.get("list_price")),
            "bedrooms": prop.get("beds"),
            "bathrooms": prop.get("baths"),
            "livingArea": prop.get("sqft"),
            "yearBuilt": prop.get("year_built"),
            "propertyType": prop.get("prop_type"),
            "status": prop.get("prop_status"),
            "daysOnMarket": prop.get("days_on_market"),
            "thumbnail": prop.get("thumbnail"),
        }
    )


class RealtyProvider(PropertyProvider):
    """Client for the RapidAPI "realty-in-us" property API.

    Each operation is two sequential calls: an autocomplete lookup that
    resolves free text to an id or a city/state pair, then the detail or
    listing call. There is no retry; the httpx timeout bounds each call.
    """

    name = "realty"

    def __init__(
        self,
        api_key: str,
        host: str = "realty-in-us.p.rapidapi.com",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.host = host
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        # a bad host or a non-ASCII key fails here, before any request
        try:
            return httpx.Client(
                base_url=f"https://{self.host}",
                headers={"X-RapidAPI-Key": self.api_key, "X-RapidAPI-Host": self.host},
                timeout=self.timeout,
                transport=self._transport,
            )
        except (httpx.InvalidURL, ValueError) as exc:
            logger.warning(
                "upstream client misconfigured: host=%s error=%s",
                self.host,
                exc.__class__.__name__,
            )
            raise UpstreamError(CONFIG_ERROR_MESSAGE) from exc

    def _get(self, client: httpx.Client, path: str, params: Dict[str, str]) -> Any:
        try:
            response = client.get(path, params=params)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            logger.warning("upstream request failed: path=%s error=%s", path, exc)
            raise UpstreamError(str(exc) or exc.__class__.__name__) from exc
        if response.status_code in (401, 403):
            raise UpstreamAuthError(AUTH_ERROR_MESSAGE, status_code=response.status_code)
        if response.status_code >= 400:
            logger.warning(
                "upstream returned error status: path=%s status=%s",
                path,
                response.status_code,
            )
            raise UpstreamError(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError("Upstream returned a malformed response body") from exc

    def _autocomplete(self, client: httpx.Client, text: str) -> Optional[Mapping[str, Any]]:
        data = self._get(client, AUTOCOMPLETE_PATH, {"input": text, "limit": "1"})
        suggestions = _dig(data, "autocomplete")
        if isinstance(suggestions, list) and suggestions and isinstance(suggestions[0], Mapping):
            return suggestions[0]
        return None

    def _require_key(self) -> None:
        if not self.api_key:
            raise UpstreamAuthError("RAPIDAPI_KEY is not configured")

    def lookup_property_by_address(self, address: str) -> Optional[RawRecord]:
        self._require_key()
        with self._client() as client:
            suggestion = self._autocomplete(client, address)
            if suggestion is None:
                logger.info("no autocomplete match for property lookup")
                return None
            if not (suggestion.get("area_type") == "address" or suggestion.get("_id")):
                return None
            property_id = suggestion.get("_id") or suggestion.get("mpr_id")
            if not property_id:
                return None
            data = self._get(client, DETAIL_PATH, {"property_id": str(property_id)})
        properties = _dig(data, "properties")
        if isinstance(properties, list) and properties and isinstance(properties[0], Mapping):
            prop = properties[0]
        elif isinstance(data, Mapping):
            prop = data
        else:
            raise UpstreamError("Upstream returned a malformed response body")
        logger.info("property details received: property_id=%s", property_id)
        return shape_detail(prop, suggestion)

    def list_properties_by_location(
        self, location: str, limit: int
    ) -> Optional[List[RawRecord]]:
        self._require_key()
        with self._client() as client:
            place = self._autocomplete(client, location)
            if place is None:
                logger.info("no autocomplete match for location listing")
                return None
            data = self._get(
                client,
                LIST_FOR_SALE_PATH,
                {
                    "city": str(place.get("city") or ""),
                    "state_code": str(place.get("state_code") or ""),
                    "offset": "0",
                    "limit": str(limit),
                    "sort": "newest",
                },
            )
        listings = _dig(data, "properties") or []
        if not isinstance(listings, list):
            raise UpstreamError("Upstream returned a malformed response body")
        logger.info("property list received: count=%s", len(listings))
        return [shape_listing(p) for p in listings if isinstance(p, Mapping)]
