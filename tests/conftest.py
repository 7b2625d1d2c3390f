import httpx
import pytest
from httpx import ASGITransport

ACME_URL = "https://suppliers.test/acme"
PATAGONIA_URL = "https://suppliers.test/patagonia"
PAPERFLIES_URL = "https://suppliers.test/paperflies"

ACME_PAYLOAD = [
    {
        "Id": "iJhz",
        "DestinationId": 5432,
        "Name": "Beach Villas Singapore",
        "Latitude": 1.264751,
        "Longitude": 103.824006,
        "Address": " 8 Sentosa Gateway, Beach Villas ",
        "City": "Singapore",
        "Country": "SG",
        "Description": "  This 5 star hotel is located on the coastline of Singapore.",
        "Facilities": ["Pool", "BusinessCenter", "WiFi "],
    },
    {
        "Id": "SjyX",
        "DestinationId": 5432,
        "Name": "InterContinental Singapore Robertson Quay",
        "Latitude": "",
        "Longitude": "",
        "City": "Singapore",
        "Country": "SG",
        "Description": "Enjoy sophisticated waterfront living.",
        "Facilities": ["Pool", "WiFi "],
    },
]

PATAGONIA_PAYLOAD = [
    {
        "id": "iJhz",
        "destination": 5432,
        "name": "Beach Villas Singapore",
        "lat": 1.264751,
        "lng": 103.824006,
        "address": "8 Sentosa Gateway, Beach Villas, 098269",
        "info": "Located at the western tip of Resorts World Sentosa.",
        "amenities": ["Aircon", "Tv"],
        "images": {
            "rooms": [{"url": "https://img.test/iJhz/2.jpg", "description": "Double room"}],
            "amenities": [{"url": "https://img.test/iJhz/0.jpg", "description": "RWS"}],
        },
    },
    {
        "id": "f8c9",
        "destination": 1122,
        "name": "Hilton Tokyo Shinjuku",
        "lat": 35.6926,
        "lng": 139.690965,
        "address": None,
        "info": None,
        "amenities": None,
        "images": {"rooms": [], "amenities": []},
    },
]

PAPERFLIES_PAYLOAD = [
    {
        "hotel_id": "iJhz",
        "destination_id": 5432,
        "hotel_name": "Beach Villas Singapore",
        "location": {"address": "8 Sentosa Gateway, Beach Villas, 098269", "country": "Singapore"},
        "details": "Surrounded by tropical gardens.",
        "amenities": {"general": ["outdoor pool", "business center"], "room": ["tv", "kettle"]},
        "images": {
            "rooms": [{"link": "https://img.test/iJhz/2.jpg", "caption": "Double room"}],
            "site": [{"link": "https://img.test/iJhz/1.jpg", "caption": "Front"}],
        },
        "booking_conditions": ["Pets are not allowed."],
    },
    {
        "hotel_id": "SjyX",
        "destination_id": 5432,
        "hotel_name": "InterContinental",
        "location": {"address": "1 Nanson Road, Singapore 238909", "country": "Singapore"},
        "details": "InterContinental Singapore Robertson Quay is luxury's preferred address.",
        "amenities": {"general": ["outdoor pool"], "room": ["aircon", "minibar"]},
        "images": {"rooms": [], "site": []},
        "booking_conditions": [],
    },
]


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("ACME_URL", ACME_URL)
    monkeypatch.setenv("PATAGONIA_URL", PATAGONIA_URL)
    monkeypatch.setenv("PAPERFLIES_URL", PAPERFLIES_URL)
    monkeypatch.setenv("SKIP_FAILED_SUPPLIERS", "false")


@pytest.fixture
async def client(mock_env):
    from hotel_catalog.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
