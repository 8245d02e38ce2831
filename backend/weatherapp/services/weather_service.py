from __future__ import annotations

from typing import Optional

from weatherapp.domain.models import CityInfo
from weatherapp.providers.weather.base import WeatherProvider


class WeatherService:
    def __init__(self, provider: WeatherProvider) -> None:
        self.provider = provider

    def forecast_by_city(self, city: Optional[str]) -> Optional[CityInfo]:
        return self.provider.forecast_by_city(city)
