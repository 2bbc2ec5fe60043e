from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from reba.api.app import app, health
from reba.providers.base import UpstreamAuthError
from reba.providers.demo import DemoProvider


class AuthFailingProvider:
    name = "realty"

    def lookup_property_by_address(self, address):
        raise UpstreamAuthError("API key is invalid or expired. Please check your RapidAPI key.")

    def list_properties_by_location(self, location, limit):
        raise UpstreamAuthError("API key is invalid or expired. Please check your RapidAPI key.")


class RecordingProvider(DemoProvider):
    name = "recording"

    def __init__(self):
        self.limits = []

    def list_properties_by_location(self, location, limit):
        self.limits.append(limit)
        return super().list_properties_by_location(location, limit)


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def use_provider(monkeypatch):
    import reba.api.routes.property as routes

    def _use(provider):
        monkeypatch.setattr(routes, "get_provider", lambda: provider)
        return provider

    return _use


def test_routes_exist():
    paths = set(app.openapi()["paths"])
    assert {"/api/health", "/api/property", "/api/properties/list", "/api/search"} <= paths


def test_health(client):
    assert health() == {"status": "OK", "message": "REBA API is running"}
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "OK"


def test_property_requires_address(client):
    resp = client.get("/api/property", params={"address": "  "})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Address is required"}


def test_list_requires_location(client):
    resp = client.get("/api/properties/list")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Location is required"}


def test_property_lookup_demo(client, use_provider):
    use_provider(DemoProvider())
    resp = client.get("/api/property", params={"address": "123 Main Street"})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["property"]["price"] == "$450,000"
    assert data["property"]["livingAreaSqFt"] == "1,850"
    assert data["warning"] is None
    assert data["demo"] is True


def test_property_lookup_auth_failure_degrades(client, use_provider):
    use_provider(AuthFailingProvider())
    resp = client.get("/api/property", params={"address": "1 A St"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["warning"].startswith("Unable to fetch live data: API key is invalid")
    assert data["property"]["address"] == "123 Main Street, Miami, FL 33101"


def test_list_uses_default_and_explicit_limit(client, use_provider):
    provider = use_provider(RecordingProvider())
    resp = client.get("/api/properties/list", params={"location": "Miami"})
    assert resp.status_code == 200
    assert len(resp.json()["properties"]) == 2
    resp = client.get("/api/properties/list", params={"location": "Miami", "limit": 1})
    assert len(resp.json()["properties"]) == 1
    assert provider.limits == [10, 1]


def test_list_rejects_out_of_range_limit(client, use_provider):
    use_provider(DemoProvider())
    resp = client.get("/api/properties/list", params={"location": "Miami", "limit": 500})
    assert resp.status_code == 422
    assert "limit" in resp.json()["error"]


def test_search_classifies_query(client, use_provider):
    use_provider(DemoProvider())
    resp = client.get("/api/search", params={"q": "Homes for sale in Beverly Hills"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["kind"] == "neighborhood"
    assert data["query"] == {"type": "neighborhood", "location": "Beverly Hills"}
    assert set(data["properties"][0]) == {
        "address",
        "price",
        "bedrooms",
        "bathrooms",
        "livingAreaSqFt",
        "status",
    }


def test_search_requires_query(client):
    resp = client.get("/api/search", params={"q": ""})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Query is required"}


def test_cors_allows_configured_origin(client):
    resp = client.get("/api/health", headers={"Origin": "https://rebaapp.com"})
    assert resp.headers["access-control-allow-origin"] == "https://rebaapp.com"


def test_startup_banner_is_info(caplog):
    with caplog.at_level(logging.INFO, logger="reba.api"):
        with TestClient(app):
            pass
    banners = [r for r in caplog.records if r.getMessage().startswith("REBA API starting")]
    assert [r.levelno for r in banners] == [logging.INFO]
