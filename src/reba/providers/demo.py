from __future__ import annotations

import copy
from typing import List, Optional

from .base import PropertyProvider, RawRecord


DEMO_PROPERTIES: List[RawRecord] = [
    {
        "address": "123 Main Street, Miami, FL 33101",
        "price": 450000,
        "bedrooms": 3,
        "bathrooms": 2,
        "livingArea": 1850,
        "yearBuilt": 2018,
        "propertyType": "Single Family",
        "taxAssessment": 425000,
        "propertyTax": 5200,
        "status": "For Sale",
        "description": "Beautiful modern home with updated kitchen and spacious backyard.",
    },
    {
        "address": "456 Ocean Drive, Miami Beach, FL 33139",
        "price": 1250000,
        "bedrooms": 4,
        "bathrooms": 3,
        "livingArea": 2400,
        "yearBuilt": 2020,
        "propertyType": "Condo",
        "taxAssessment": 1150000,
        "propertyTax": 14500,
        "status": "For Sale",
        "description": "Luxury oceanfront condo with stunning views and premium amenities.",
    },
]

NO_MATCH_DESCRIPTION = (
    "Demo property - API connection established but no matching property found."
)


def demo_records() -> List[RawRecord]:
    return copy.deepcopy(DEMO_PROPERTIES)


def no_match_record(address: str) -> RawRecord:
    """Placeholder returned when the provider finds nothing at an address."""

    return {
        "address": address,
        "price": 450000,
        "bedrooms": 3,
        "bathrooms": 2,
        "livingArea": 1850,
        "yearBuilt": 2018,
        "propertyType": "Single Family",
        "taxAssessment": 425000,
        "propertyTax": 5200,
        "status": "Demo Data",
        "description": NO_MATCH_DESCRIPTION,
    }


def no_match_listing(location: str) -> RawRecord:
    return {
        "address": f"123 Main St, {location}",
        "price": 450000,
        "bedrooms": 3,
        "bathrooms": 2,
        "livingArea": 1850,
        "status": "Demo Data",
    }


class DemoProvider(PropertyProvider):
    """Offline provider backed by the fixed demo records."""

    name = "demo"

    def lookup_property_by_address(self, address: str) -> Optional[RawRecord]:
        return demo_records()[0]

    def list_properties_by_location(
        self, location: str, limit: int
    ) -> Optional[List[RawRecord]]:
        return demo_records()[: max(0, limit)]
