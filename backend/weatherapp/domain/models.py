from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class CurrentConditions:
    datetime: Optional[str] = None
    temp: Optional[float] = None
    feelslike: Optional[float] = None
    humidity: Optional[float] = None
    conditions: Optional[str] = None
    sunrise: Optional[str] = None
    sunset: Optional[str] = None


@dataclass(frozen=True)
class DayForecast:
    datetime: Optional[str] = None
    temp: Optional[float] = None
    tempmax: Optional[float] = None
    tempmin: Optional[float] = None
    conditions: Optional[str] = None
    description: Optional[str] = None
    sunrise: Optional[str] = None
    sunset: Optional[str] = None


@dataclass(frozen=True)
class CityInfo:
    address: Optional[str] = None
    resolved_address: Optional[str] = None
    description: Optional[str] = None
    current_conditions: Optional[CurrentConditions] = None
    days: List[DayForecast] = field(default_factory=list)
