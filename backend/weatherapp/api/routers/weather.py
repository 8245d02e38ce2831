from __future__ import annotations

import logging
from typing import Callable

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from weatherapp.api.deps import get_weather_service
from weatherapp.domain.errors import UpstreamError
from weatherapp.domain.models import CityInfo
from weatherapp.services import weather_comparison
from weatherapp.services.weather_service import WeatherService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["weather"])

EMPTY_CITY_MESSAGE = "City names cannot be empty"


@router.get("/forecast/{city}")
def forecast_by_city(city: str, service: WeatherService = Depends(get_weather_service)):
    if not city.strip():
        return Response(status_code=400)
    try:
        return service.forecast_by_city(city)
    except UpstreamError as exc:
        logger.warning("forecast for %r failed upstream: %s", city, exc)
        return Response(status_code=exc.status_code)
    except Exception:
        logger.exception("forecast for %r failed", city)
        return Response(status_code=500)


@router.get("/compare-daylight/{city1}/{city2}", response_class=PlainTextResponse)
def compare_daylight(city1: str, city2: str, service: WeatherService = Depends(get_weather_service)):
    return _compare(service, city1, city2, weather_comparison.compare_daylight)


@router.get("/check-rain/{city1}/{city2}", response_class=PlainTextResponse)
def check_rain(city1: str, city2: str, service: WeatherService = Depends(get_weather_service)):
    return _compare(service, city1, city2, weather_comparison.check_rain)


def _compare(
    service: WeatherService,
    city1: str,
    city2: str,
    operation: Callable[[CityInfo, CityInfo, str, str], str],
) -> Response:
    if not city1.strip() or not city2.strip():
        return PlainTextResponse(EMPTY_CITY_MESSAGE, status_code=400)
    try:
        city1_info = service.forecast_by_city(city1)
        city2_info = service.forecast_by_city(city2)
        if city1_info is None or city2_info is None:
            return Response(status_code=404)
        return PlainTextResponse(operation(city1_info, city2_info, city1, city2))
    except UpstreamError as exc:
        logger.warning("comparison %r/%r failed upstream: %s", city1, city2, exc)
        return PlainTextResponse(f"Error accessing weather data: {exc}", status_code=exc.status_code)
    except Exception as exc:
        logger.exception("comparison %r/%r failed", city1, city2)
        return PlainTextResponse(f"An unexpected error occurred: {exc}", status_code=500)
