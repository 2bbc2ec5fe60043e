from __future__ import annotations

import html
from typing import Callable, List, Sequence, Tuple

from reba.schema import CanonicalProperty, PropertySummary


DETAIL_LABELS: List[Tuple[str, str]] = [
    ("bedrooms", "Bedrooms"),
    ("bathrooms", "Bathrooms"),
    ("living_area_sqft", "Square Feet"),
    ("year_built", "Year Built"),
    ("property_type", "Property Type"),
    ("tax_assessment", "Tax Assessment"),
    ("annual_property_tax", "Annual Taxes"),
    ("lot_size_sqft", "Lot Size"),
    ("status", "Status"),
    ("mls_number", "MLS #"),
    ("days_on_market", "Days on Market"),
    ("hoa_fee_monthly", "HOA Fees"),
]

SUMMARY_LABELS: List[Tuple[str, str]] = [
    ("bedrooms", "Bedrooms"),
    ("bathrooms", "Bathrooms"),
    ("living_area_sqft", "Square Feet"),
    ("status", "Status"),
]


class TextPort:
    """Plain-text cards, one line per detail."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write

    def _card(self, prop: PropertySummary, labels: Sequence[Tuple[str, str]]) -> None:
        self._write(f"{prop.address}  {prop.price}")
        for attr, label in labels:
            self._write(f"  {label}: {getattr(prop, attr)}")

    def render(self, prop: CanonicalProperty) -> None:
        self._card(prop, DETAIL_LABELS)
        if prop.description:
            self._write(f"  Description: {prop.description}")

    def render_list(self, properties: Sequence[PropertySummary]) -> None:
        for idx, prop in enumerate(properties):
            if idx:
                self._write("")
            self._card(prop, SUMMARY_LABELS)

    def render_error(self, message: str) -> None:
        self._write(f"! {message}")


class HtmlPort:
    """Collects escaped HTML fragments for server-side rendered pages."""

    def __init__(self) -> None:
        self.errors: List[str] = []
        self.cards: List[str] = []

    def _card(self, prop: PropertySummary, labels: Sequence[Tuple[str, str]], extra: str = "") -> str:
        items = "".join(
            '<div class="detail-item">'
            f'<div class="detail-label">{html.escape(label)}</div>'
            f'<div class="detail-value">{html.escape(str(getattr(prop, attr)))}</div>'
            "</div>"
            for attr, label in labels
        )
        return (
            '<div class="property-card">'
            '<div class="property-header">'
            f'<h2 class="property-address">{html.escape(prop.address)}</h2>'
            f'<div class="property-price">{html.escape(prop.price)}</div>'
            "</div>"
            f'<div class="property-details">{items}</div>'
            f"{extra}"
            "</div>"
        )

    def render(self, prop: CanonicalProperty) -> None:
        extra = ""
        if prop.description:
            extra = (
                '<div class="property-description"><h3>Description</h3>'
                f"{html.escape(prop.description)}</div>"
            )
        self.cards.append(self._card(prop, DETAIL_LABELS, extra))

    def render_list(self, properties: Sequence[PropertySummary]) -> None:
        for prop in properties:
            self.cards.append(self._card(prop, SUMMARY_LABELS))

    def render_error(self, message: str) -> None:
        self.errors.append(html.escape(message))
