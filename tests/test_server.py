import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from pm25_intent import server

client = TestClient(server.app)

API_URL = "https://pm25.test/rest/getPm25byLocation"

MOCK_PM25_SUCCESS = {
    "status": 200,
    "errMsg": "success",
    "data": {"pm25": ["35.0", 34.0]},
}


@pytest.fixture(autouse=True)
def _test_config(monkeypatch):
    monkeypatch.setattr(server, "PM25_API_URL", API_URL)
    monkeypatch.setattr(server, "PM25_PROFILE", "thai")
    monkeypatch.setattr(server, "DEFAULT_LATITUDE", None)
    monkeypatch.setattr(server, "DEFAULT_LONGITUDE", None)
    monkeypatch.setattr(server, "LOCATION_INTERVAL", 0)


def test_health_endpoint_returns_200():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "api_url": API_URL, "profile": "thai"}


def test_list_intents():
    response = client.get("/intents")
    assert response.status_code == 200
    assert response.json() == [
        {"id": "pm25", "title": "เช็คค่าฝุ่นปัจจุบัน", "locale": "th"},
        {"id": "pm25-english", "title": "Check Current PM2.5 Level", "locale": "en"},
    ]


@respx.mock
def test_perform_with_device_coordinate():
    route = respx.get(API_URL).mock(
        return_value=httpx.Response(200, json=MOCK_PM25_SUCCESS)
    )

    response = client.post(
        "/intents/pm25-english/perform",
        json={"latitude": 13.75, "longitude": 100.5},
    )

    assert response.status_code == 200
    assert response.json() == {
        "intent": "pm25-english",
        "dialog": "Current PM2.5 level is 35.0 µg/m³, which is in the moderate range",
    }
    assert route.calls.last.request.url.params["lat"] == "13.750000"


@respx.mock
def test_perform_uses_default_coordinate(monkeypatch):
    monkeypatch.setattr(server, "DEFAULT_LATITUDE", 18.79)
    monkeypatch.setattr(server, "DEFAULT_LONGITUDE", 98.98)
    route = respx.get(API_URL).mock(
        return_value=httpx.Response(200, json=MOCK_PM25_SUCCESS)
    )

    response = client.post("/intents/pm25/perform")

    assert response.status_code == 200
    assert response.json()["dialog"] == (
        "ระดับ PM2.5 ในปัจจุบันอยู่ที่ 35.0 µg/m³ ซึ่งอยู่ในเกณฑ์ปานกลาง"
    )
    assert route.calls.last.request.url.params["lng"] == "98.980000"


@respx.mock
def test_perform_with_us_aqi_profile(monkeypatch):
    monkeypatch.setattr(server, "PM25_PROFILE", "us_aqi")
    respx.get(API_URL).mock(return_value=httpx.Response(200, json=MOCK_PM25_SUCCESS))

    response = client.post(
        "/intents/pm25-english/perform",
        json={"latitude": 13.75, "longitude": 100.5},
    )

    assert response.json()["dialog"].endswith("which is in the moderate range")


def test_perform_without_any_coordinate_reports_location_failure():
    response = client.post("/intents/pm25-english/perform")

    assert response.status_code == 200
    assert response.json()["dialog"] == "Could not determine your location."


@respx.mock
def test_perform_upstream_error_still_returns_dialog():
    respx.get(API_URL).mock(return_value=httpx.Response(500))

    response = client.post(
        "/intents/pm25-english/perform",
        json={"latitude": 13.75, "longitude": 100.5},
    )

    assert response.status_code == 200
    assert response.json()["dialog"] == (
        "Unable to check PM2.5 (network error): server returned an error"
    )


def test_unknown_intent_returns_404():
    response = client.post("/intents/weather/perform")
    assert response.status_code == 404
    assert response.json() == {"error": "Unknown intent 'weather'."}


@pytest.mark.parametrize(
    "body",
    [
        {"latitude": 13.75},
        {"latitude": 95.0, "longitude": 100.5},
        {"latitude": "north", "longitude": 100.5},
    ],
)
def test_invalid_body_returns_400(body):
    response = client.post("/intents/pm25/perform", json=body)
    assert response.status_code == 400
    assert "error" in response.json()


# ── Startup validation ────────────────────────────────────────────────────────

def test_startup_with_valid_config():
    with TestClient(server.app) as started:
        assert started.get("/health").status_code == 200


@pytest.mark.parametrize(
    "setting, value",
    [("PM25_LOCALE", "fr"), ("PM25_PROFILE", "who")],
)
def test_startup_rejects_unknown_setting(monkeypatch, setting, value):
    monkeypatch.setattr(server, setting, value)

    with pytest.raises(ValueError):
        with TestClient(server.app):
            pass
