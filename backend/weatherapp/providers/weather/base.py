from __future__ import annotations

from typing import Optional, Protocol

from weatherapp.domain.models import CityInfo


class WeatherProvider(Protocol):
    """Contract for per-city weather lookups."""

    def forecast_by_city(self, city: str) -> Optional[CityInfo]:
        raise NotImplementedError
