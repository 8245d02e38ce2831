from __future__ import annotations

from typing import Dict, Optional, Union

import pytest
from fastapi.testclient import TestClient

from weatherapp.api.main import create_app
from weatherapp.domain.models import CityInfo, CurrentConditions


class StaticWeatherProvider:
    def __init__(self, cities: Dict[str, Union[CityInfo, Exception, None]]) -> None:
        self._cities = cities
        self.calls: list = []

    def forecast_by_city(self, city: Optional[str]) -> Optional[CityInfo]:
        self.calls.append(city)
        result = self._cities.get(city)
        if isinstance(result, Exception):
            raise result
        return result


def build_city(
    address: str = "London",
    *,
    conditions: Optional[str] = "Clear",
    sunrise: Optional[str] = "06:00:00",
    sunset: Optional[str] = "18:00:00",
    with_current: bool = True,
) -> CityInfo:
    current = None
    if with_current:
        current = CurrentConditions(conditions=conditions, sunrise=sunrise, sunset=sunset, temp=12.5)
    return CityInfo(
        address=address,
        resolved_address=f"{address}, Somewhere",
        description="Similar temperatures continuing",
        current_conditions=current,
    )


@pytest.fixture()
def make_city():
    return build_city


@pytest.fixture()
def make_provider():
    return StaticWeatherProvider


@pytest.fixture()
def api_factory():
    clients = []

    def _build(cities):
        provider = StaticWeatherProvider(cities)
        client = TestClient(create_app(provider=provider))
        clients.append(client)
        return client, provider

    yield _build
    for client in clients:
        client.close()
