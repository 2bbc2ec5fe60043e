import logging

from reba.normalize import normalize, normalize_list
from reba.providers.base import UpstreamAuthError, UpstreamError
from reba.providers.demo import DEMO_PROPERTIES, DemoProvider, NO_MATCH_DESCRIPTION
from reba.query import NeighborhoodSearch, PropertySearch
from reba.service import list_properties, lookup_property, search


class FailingProvider:
    name = "failing"

    def __init__(self, exc):
        self.exc = exc
        self.calls = []

    def lookup_property_by_address(self, address):
        self.calls.append(("lookup", address))
        raise self.exc

    def list_properties_by_location(self, location, limit):
        self.calls.append(("list", location, limit))
        raise self.exc


class StaticProvider:
    name = "static"

    def __init__(self, record=None, records=None):
        self.record = record
        self.records = records
        self.calls = []

    def lookup_property_by_address(self, address):
        self.calls.append(("lookup", address))
        return self.record

    def list_properties_by_location(self, location, limit):
        self.calls.append(("list", location, limit))
        return self.records


def test_upstream_failure_serves_demo_with_reason(caplog):
    provider = FailingProvider(UpstreamError("Request failed with status code 502"))
    with caplog.at_level(logging.WARNING, logger="reba.service"):
        result = search("123 Main Street, Miami, FL", provider)

    assert result.query == PropertySearch(address="123 Main Street, Miami, FL")
    assert result.properties == [normalize(DEMO_PROPERTIES[0])]
    assert result.demo is True
    assert result.warning == (
        "Unable to fetch live data: Request failed with status code 502. "
        "Showing demo data instead."
    )
    assert "Request failed with status code 502" in caplog.text


def test_auth_failure_is_also_degraded():
    provider = FailingProvider(UpstreamAuthError("API key is invalid or expired."))
    result = lookup_property("1 A St", provider)
    assert result.warning.startswith("Unable to fetch live data: API key is invalid")
    assert result.properties[0].address == "123 Main Street, Miami, FL 33101"


def test_list_failure_serves_both_demo_records():
    provider = FailingProvider(UpstreamError("timed out"))
    result = search("homes for sale in Miami", provider, limit=7)

    assert provider.calls == [("list", "Miami", 7)]
    assert result.kind == "neighborhood"
    assert result.properties == normalize_list(DEMO_PROPERTIES)
    assert "timed out" in result.warning


def test_no_match_uses_placeholder_record_without_warning():
    result = lookup_property("99 Nowhere Rd", StaticProvider(record=None))
    prop = result.properties[0]
    assert prop.address == "99 Nowhere Rd"
    assert prop.status == "Demo Data"
    assert prop.description == NO_MATCH_DESCRIPTION
    assert result.warning is None
    assert result.demo is True


def test_unresolved_location_uses_placeholder_listing():
    result = list_properties("Atlantis", StaticProvider(records=None))
    assert [p.address for p in result.properties] == ["123 Main St, Atlantis"]
    assert result.properties[0].status == "Demo Data"
    assert result.warning is None


def test_empty_listing_is_passed_through():
    result = list_properties("Quiet Town", StaticProvider(records=[]))
    assert result.properties == []
    assert result.demo is False


def test_live_record_is_normalized():
    provider = StaticProvider(record={"listPrice": "$300,000", "street": "8 Pine St", "city": "Ames"})
    result = search("show me 8 Pine St", provider)
    assert provider.calls == [("lookup", "8 Pine St")]
    assert result.properties[0].price == "$300,000"
    assert result.properties[0].address == "8 Pine St, Ames"
    assert result.demo is False


def test_to_dict_shape():
    result = search("homes for sale in Miami", DemoProvider(), limit=1)
    data = result.to_dict()
    assert data["kind"] == "neighborhood"
    assert data["query"] == NeighborhoodSearch(location="Miami").to_dict()
    assert len(data["properties"]) == 1
    assert data["properties"][0]["price"] == "$450,000"
    assert data["warning"] is None
    assert data["demo"] is True
