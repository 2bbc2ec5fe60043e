from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


PLACEHOLDER = "N/A"

DisplayValue = Union[int, float, str]


class PropertySummary(BaseModel):
    """One listing card in an area search.

    Values are display-ready: currency and area fields are formatted text,
    counts are passed through as the provider sent them, and anything the
    provider left out is ``"N/A"``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    address: str
    price: str = PLACEHOLDER
    bedrooms: DisplayValue = PLACEHOLDER
    bathrooms: DisplayValue = PLACEHOLDER
    living_area_sqft: str = Field(default=PLACEHOLDER, alias="livingAreaSqFt")
    status: DisplayValue = PLACEHOLDER

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CanonicalProperty(PropertySummary):
    year_built: DisplayValue = Field(default=PLACEHOLDER, alias="yearBuilt")
    property_type: DisplayValue = Field(default=PLACEHOLDER, alias="propertyType")
    tax_assessment: str = Field(default=PLACEHOLDER, alias="taxAssessment")
    annual_property_tax: str = Field(default=PLACEHOLDER, alias="annualPropertyTax")
    lot_size_sqft: str = Field(default=PLACEHOLDER, alias="lotSizeSqFt")
    mls_number: DisplayValue = Field(default=PLACEHOLDER, alias="mlsNumber")
    days_on_market: DisplayValue = Field(default=PLACEHOLDER, alias="daysOnMarket")
    hoa_fee_monthly: str = Field(default=PLACEHOLDER, alias="hoaFeeMonthly")
    # No placeholder: omitted from output when the provider has none.
    description: Optional[str] = None
