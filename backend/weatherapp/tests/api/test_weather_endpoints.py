from __future__ import annotations

from fastapi.testclient import TestClient

from weatherapp.api.main import create_app
from weatherapp.domain.errors import UpstreamError


def test_health(api_factory):
    client, _ = api_factory({})
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_forecast_returns_city_record(api_factory, make_city):
    client, provider = api_factory({"London": make_city("London", sunrise="07:26:01")})
    response = client.get("/forecast/London")
    assert response.status_code == 200
    data = response.json()
    assert data["address"] == "London"
    assert data["current_conditions"]["sunrise"] == "07:26:01"
    assert data["days"] == []
    assert provider.calls == ["London"]


def test_forecast_blank_city_is_bad_request(api_factory):
    client, provider = api_factory({})
    response = client.get("/forecast/%20")
    assert response.status_code == 400
    assert provider.calls == []


def test_forecast_forwards_upstream_status(api_factory):
    client, _ = api_factory({"London": UpstreamError("401 Unauthorized", 401)})
    response = client.get("/forecast/London")
    assert response.status_code == 401


def test_forecast_unexpected_error_is_500(api_factory):
    client, _ = api_factory({"London": KeyError("boom")})
    response = client.get("/forecast/London")
    assert response.status_code == 500


def test_compare_daylight(api_factory, make_city):
    client, _ = api_factory(
        {
            "London": make_city("London", sunrise="07:00:00", sunset="18:00:00"),
            "Paris": make_city("Paris", sunrise="07:30:00", sunset="19:00:00"),
        }
    )
    response = client.get("/compare-daylight/London/Paris")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Paris has the longest day"


def test_compare_daylight_tie(api_factory, make_city):
    client, _ = api_factory({"A": make_city("A"), "B": make_city("B")})
    response = client.get("/compare-daylight/A/B")
    assert response.status_code == 200
    assert response.text == "Both cities have equal daylight hours"


def test_compare_daylight_blank_city(api_factory):
    client, provider = api_factory({})
    response = client.get("/compare-daylight/%20/Paris")
    assert response.status_code == 400
    assert response.text == "City names cannot be empty"
    assert provider.calls == []


def test_compare_daylight_unknown_city_is_404(api_factory, make_city):
    client, _ = api_factory({"London": make_city("London")})
    response = client.get("/compare-daylight/London/Atlantis")
    assert response.status_code == 404


def test_compare_daylight_missing_sunrise_is_500(api_factory, make_city):
    client, _ = api_factory({"London": make_city("London", sunrise=None), "Paris": make_city("Paris")})
    response = client.get("/compare-daylight/London/Paris")
    assert response.status_code == 500
    assert response.text == "An unexpected error occurred: Missing sunrise/sunset data for London"


def test_compare_daylight_upstream_error(api_factory, make_city):
    client, _ = api_factory({"London": make_city("London"), "Paris": UpstreamError("429 Too Many Requests", 429)})
    response = client.get("/compare-daylight/London/Paris")
    assert response.status_code == 429
    assert response.text == "Error accessing weather data: 429 Too Many Requests"


def test_check_rain(api_factory, make_city):
    client, _ = api_factory(
        {
            "London": make_city("London", conditions="Light rain showers"),
            "Paris": make_city("Paris", conditions="Clear sky"),
        }
    )
    response = client.get("/check-rain/London/Paris")
    assert response.status_code == 200
    assert response.text == "It is raining in London"


def test_check_rain_without_conditions(api_factory, make_city):
    client, _ = api_factory(
        {
            "London": make_city("London", with_current=False),
            "Paris": make_city("Paris", conditions="Overcast"),
        }
    )
    response = client.get("/check-rain/London/Paris")
    assert response.status_code == 200
    assert response.text == "It is not raining in either city"


def test_check_rain_upstream_error(api_factory):
    client, _ = api_factory({"London": UpstreamError("503 weather service unreachable", 503)})
    response = client.get("/check-rain/London/Paris")
    assert response.status_code == 503
    assert response.text.startswith("Error accessing weather data:")


def test_app_without_api_key_reports_configuration_error(monkeypatch):
    monkeypatch.delenv("VISUALCROSSING_API_KEY", raising=False)
    with TestClient(create_app()) as client:
        response = client.get("/forecast/London")
    assert response.status_code == 500
    assert "VISUALCROSSING_API_KEY" in response.json()["detail"]
