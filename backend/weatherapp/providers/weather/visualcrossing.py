from __future__ import annotations

from typing import Optional

from weatherapp.domain.models import CityInfo, CurrentConditions, DayForecast
from weatherapp.infra.weather.visualcrossing_client import VisualCrossingClient

from .base import WeatherProvider


class VisualCrossingWeatherProvider(WeatherProvider):
    def __init__(self, client: Optional[VisualCrossingClient] = None):
        self.client = client or VisualCrossingClient()

    def forecast_by_city(self, city: str) -> Optional[CityInfo]:
        payload = self.client.fetch_timeline(city)
        if payload is None:
            return None
        return self._map_city(payload)

    def _map_city(self, payload: dict) -> CityInfo:
        current = payload.get("currentConditions")
        return CityInfo(
            address=payload.get("address"),
            resolved_address=payload.get("resolvedAddress"),
            description=payload.get("description"),
            current_conditions=self._map_current(current) if current else None,
            days=[self._map_day(day) for day in payload.get("days") or []],
        )

    @staticmethod
    def _map_current(payload: dict) -> CurrentConditions:
        return CurrentConditions(
            datetime=payload.get("datetime"),
            temp=_to_float(payload.get("temp")),
            feelslike=_to_float(payload.get("feelslike")),
            humidity=_to_float(payload.get("humidity")),
            conditions=payload.get("conditions"),
            sunrise=payload.get("sunrise"),
            sunset=payload.get("sunset"),
        )

    @staticmethod
    def _map_day(payload: dict) -> DayForecast:
        return DayForecast(
            datetime=payload.get("datetime"),
            temp=_to_float(payload.get("temp")),
            tempmax=_to_float(payload.get("tempmax")),
            tempmin=_to_float(payload.get("tempmin")),
            conditions=payload.get("conditions"),
            description=payload.get("description"),
            sunrise=payload.get("sunrise"),
            sunset=payload.get("sunset"),
        )


def _to_float(value) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
