from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from weatherapp.domain.errors import ParseError

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")


@dataclass(frozen=True)
class TimeOfDay:
    hour: int
    minute: int
    second: int = 0

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ParseError(f"hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ParseError(f"minute out of range: {self.minute}")
        if not 0 <= self.second <= 59:
            raise ParseError(f"second out of range: {self.second}")

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


def parse_time_of_day(value: Optional[str]) -> TimeOfDay:
    """Parse a zero-padded 24-hour ``HH:MM:SS`` string."""
    if not value:
        raise ParseError("time value is empty")
    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise ParseError(f"invalid time '{value}', expected HH:MM:SS")
    hour, minute, second = (int(part) for part in match.groups())
    return TimeOfDay(hour=hour, minute=minute, second=second)


def daylight_minutes(sunrise: TimeOfDay, sunset: TimeOfDay) -> int:
    """Minutes between sunrise and sunset, seconds ignored.

    A sunset earlier on the clock than sunrise is taken to fall on the next
    day, so the result is always in ``[0, 1440)``. Malformed upstream data
    with sunset before sunrise is normalized the same way; windows longer than
    a day cannot be expressed.
    """
    minutes = sunset.total_minutes - sunrise.total_minutes
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes


@dataclass(frozen=True)
class DaylightWindow:
    sunrise: TimeOfDay
    sunset: TimeOfDay

    @classmethod
    def parse(cls, sunrise: Optional[str], sunset: Optional[str]) -> "DaylightWindow":
        return cls(sunrise=parse_time_of_day(sunrise), sunset=parse_time_of_day(sunset))

    @property
    def daylight_minutes(self) -> int:
        return daylight_minutes(self.sunrise, self.sunset)
