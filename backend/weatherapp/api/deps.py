from __future__ import annotations

from fastapi import HTTPException, Request

from weatherapp.providers.weather.visualcrossing import VisualCrossingWeatherProvider
from weatherapp.services.weather_service import WeatherService


def get_weather_service(request: Request) -> WeatherService:
    provider = getattr(request.app.state, "weather_provider", None)
    if provider is None:
        try:
            provider = VisualCrossingWeatherProvider()
        except RuntimeError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        request.app.state.weather_provider = provider
    return WeatherService(provider)
