from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from reba.schema import PLACEHOLDER, CanonicalProperty, PropertySummary


ADDRESS_PLACEHOLDER = "Address not available"
LIST_STATUS_DEFAULT = "Active"

_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]+")
# enough digits to hold any finite float at 0.001
_FORMAT_PRECISION = 400

_STREET_KEYS = ("streetAddress", "street")
_CITY_KEYS = ("city",)
_STATE_KEYS = ("state",)
_ZIP_KEYS = ("zipcode", "zip")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def first_present(record: Mapping[str, Any], aliases: Iterable[str]) -> Any:
    """Return the value of the first alias that is present and non-empty."""

    for key in aliases:
        value = record.get(key)
        if not _is_blank(value):
            return value
    return None


def parse_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        cleaned = _NON_NUMERIC_RE.sub("", value)
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def format_currency(number: float) -> str:
    dollars = int(Decimal(str(number)).to_integral_value(rounding=ROUND_HALF_UP))
    if dollars < 0:
        return f"-${-dollars:,}"
    return f"${dollars:,}"


def format_number(number: float) -> str:
    with localcontext() as ctx:
        ctx.prec = _FORMAT_PRECISION
        ctx.rounding = ROUND_HALF_UP
        rounded = Decimal(str(number)).quantize(Decimal("0.001"))
        text = f"{rounded:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _address_parts(source: Mapping[str, Any]) -> List[str]:
    parts = []
    for keys in (_STREET_KEYS, _CITY_KEYS, _STATE_KEYS, _ZIP_KEYS):
        value = first_present(source, keys)
        if value is not None:
            parts.append(str(value).strip())
    return parts


def format_address(record: Mapping[str, Any]) -> str:
    """Build one display line from whichever address shape the record uses.

    Shapes are tried in order: a preformatted ``address`` string, a nested
    ``address`` mapping, then street/city/state/zip keys on the record
    itself. The first shape present wins even if it turns out empty.
    """

    address = record.get("address")
    if isinstance(address, str):
        return address
    if isinstance(address, Mapping):
        return ", ".join(_address_parts(address)) or ADDRESS_PLACEHOLDER
    if first_present(record, _STREET_KEYS) is not None:
        return ", ".join(_address_parts(record)) or ADDRESS_PLACEHOLDER
    return ADDRESS_PLACEHOLDER


@dataclass(frozen=True)
class FieldSpec:
    name: str
    aliases: Tuple[str, ...]
    kind: str = "raw"
    suffix: str = ""
    placeholder: str = PLACEHOLDER

    def resolve(self, record: Mapping[str, Any], placeholder: Optional[str] = None) -> Any:
        fallback = self.placeholder if placeholder is None else placeholder
        value = first_present(record, self.aliases)
        if value is None:
            return fallback
        if self.kind == "raw":
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                return fallback
            if isinstance(value, float) and not math.isfinite(value):
                return fallback
            return value.strip() if isinstance(value, str) else value
        number = parse_number(value)
        if number is None:
            return fallback
        if self.kind == "currency":
            return format_currency(number) + self.suffix
        return format_number(number) + self.suffix


FIELD_SPECS: Dict[str, FieldSpec] = {
    spec.name: spec
    for spec in (
        FieldSpec("price", ("price", "listPrice", "estimatedValue", "zestimate"), "currency"),
        FieldSpec("bedrooms", ("bedrooms", "beds", "bedroomCount")),
        FieldSpec("bathrooms", ("bathrooms", "baths", "bathroomCount")),
        FieldSpec(
            "living_area_sqft",
            ("livingArea", "sqft", "squareFeet", "finishedSqFt"),
            "number",
        ),
        FieldSpec("year_built", ("yearBuilt", "year_built")),
        FieldSpec("property_type", ("propertyType", "homeType", "property_type")),
        FieldSpec(
            "tax_assessment",
            ("taxAssessment", "taxAssessedValue", "tax_assessment"),
            "currency",
        ),
        FieldSpec(
            "annual_property_tax",
            ("propertyTax", "annualTax", "property_tax", "taxAnnualAmount"),
            "currency",
        ),
        FieldSpec(
            "lot_size_sqft",
            ("lotSize", "lot_size", "lotAreaValue"),
            "number",
            suffix=" sq ft",
        ),
        FieldSpec("status", ("status", "listingStatus", "homeStatus")),
        FieldSpec("mls_number", ("mlsNumber", "mls", "listing_id")),
        FieldSpec("days_on_market", ("daysOnMarket", "days_on_market", "timeOnZillow")),
        FieldSpec("hoa_fee_monthly", ("hoaFee",), "currency", suffix="/mo"),
    )
}

# Field subset shown for each listing in an area search.
LIST_FIELDS = ("price", "bedrooms", "bathrooms", "living_area_sqft", "status")


def _as_mapping(record: Any) -> Mapping[str, Any]:
    if isinstance(record, Mapping):
        return record
    return {}


def normalize(record: Mapping[str, Any]) -> CanonicalProperty:
    record = _as_mapping(record)
    data: Dict[str, Any] = {"address": format_address(record)}
    for name, spec in FIELD_SPECS.items():
        data[name] = spec.resolve(record)
    description = record.get("description")
    if not _is_blank(description):
        data["description"] = str(description)
    return CanonicalProperty(**data)


def normalize_summary(record: Mapping[str, Any]) -> PropertySummary:
    record = _as_mapping(record)
    data: Dict[str, Any] = {"address": format_address(record)}
    for name in LIST_FIELDS:
        placeholder = LIST_STATUS_DEFAULT if name == "status" else None
        data[name] = FIELD_SPECS[name].resolve(record, placeholder=placeholder)
    return PropertySummary(**data)


def normalize_list(records: Optional[Iterable[Any]]) -> List[PropertySummary]:
    return [
        normalize_summary(record)
        for record in (records or [])
        if isinstance(record, Mapping)
    ]
