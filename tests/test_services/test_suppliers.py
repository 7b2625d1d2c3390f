import json

from hotel_catalog.config import Settings
from hotel_catalog.suppliers import (
    AcmeAdapter,
    PaperfliesAdapter,
    PatagoniaAdapter,
    default_endpoints,
)


def test_identify():
    assert AcmeAdapter().identify() == "acme"
    assert PatagoniaAdapter().identify() == "patagonia"
    assert PaperfliesAdapter().identify() == "paperflies"


def test_normalize_each_supplier_schema():
    acme = AcmeAdapter().normalize({"Id": "h1", "Name": "Acme name", "DestinationId": 5})
    patagonia = PatagoniaAdapter().normalize({"id": "h1", "name": "Patagonia name", "destination": 5})
    paperflies = PaperfliesAdapter().normalize({"hotel_id": "h1", "hotel_name": "Paperflies name"})

    assert (acme.id, acme.name) == ("h1", "Acme name")
    assert (patagonia.id, patagonia.name) == ("h1", "Patagonia name")
    assert (paperflies.id, paperflies.name) == ("h1", "Paperflies name")


def test_normalize_non_object_returns_none():
    assert AcmeAdapter().normalize("garbage") is None
    assert PatagoniaAdapter().normalize(None) is None
    assert PaperfliesAdapter().normalize([1, 2]) is None


def test_default_endpoints_follow_settings(monkeypatch):
    monkeypatch.setenv("ACME_URL", "https://suppliers.test/acme")

    endpoints = default_endpoints(Settings())

    assert [adapter.identify() for adapter, _ in endpoints] == ["acme", "patagonia", "paperflies"]
    assert endpoints[0][1] == "https://suppliers.test/acme"
    assert endpoints[2][1].endswith("/paperflies")


def test_oversized_coordinates_degrade_to_none():
    huge = json.loads("1" + "0" * 400)

    acme = AcmeAdapter().normalize({"Id": "h1", "Latitude": huge, "Longitude": huge})
    patagonia = PatagoniaAdapter().normalize({"id": "h1", "lat": huge, "lng": -huge})

    assert acme.location.lat is None
    assert acme.location.lng is None
    assert patagonia.location.lat is None
    assert patagonia.location.lng is None
