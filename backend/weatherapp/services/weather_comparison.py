from __future__ import annotations

from typing import Optional

from weatherapp.domain.comparison import compare_daylight as format_daylight
from weatherapp.domain.comparison import compare_rain as format_rain
from weatherapp.domain.daylight import DaylightWindow
from weatherapp.domain.errors import MissingDataError
from weatherapp.domain.models import CityInfo
from weatherapp.domain.rain import is_raining

UNKNOWN_CONDITIONS = "Unknown"


def extract_daylight(city_info: CityInfo, city_name: str) -> DaylightWindow:
    current = city_info.current_conditions
    if current is None:
        raise MissingDataError(f"No weather conditions available for {city_name}")
    if current.sunrise is None or current.sunset is None:
        raise MissingDataError(f"Missing sunrise/sunset data for {city_name}")
    return DaylightWindow.parse(current.sunrise, current.sunset)


def extract_conditions(city_info: CityInfo) -> str:
    current = city_info.current_conditions
    if current is None or current.conditions is None:
        return UNKNOWN_CONDITIONS
    return current.conditions


def compare_daylight(
    city1_info: CityInfo,
    city2_info: CityInfo,
    city1: Optional[str] = None,
    city2: Optional[str] = None,
) -> str:
    """Report which of two cities has the longer day.

    City names default to the upstream ``address`` when not given. Raises
    ``MissingDataError`` when sunrise or sunset is absent and ``ParseError``
    when either is not ``HH:MM:SS``.
    """
    name1 = city1 or city1_info.address or "city1"
    name2 = city2 or city2_info.address or "city2"
    minutes1 = extract_daylight(city1_info, name1).daylight_minutes
    minutes2 = extract_daylight(city2_info, name2).daylight_minutes
    return format_daylight(minutes1, minutes2, name1, name2)


def check_rain(
    city1_info: CityInfo,
    city2_info: CityInfo,
    city1: Optional[str] = None,
    city2: Optional[str] = None,
) -> str:
    name1 = city1 or city1_info.address or "city1"
    name2 = city2 or city2_info.address or "city2"
    raining1 = is_raining(extract_conditions(city1_info))
    raining2 = is_raining(extract_conditions(city2_info))
    return format_rain(raining1, raining2, name1, name2)
