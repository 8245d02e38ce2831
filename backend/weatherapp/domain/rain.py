from __future__ import annotations

from typing import Optional

RAIN_KEYWORDS = frozenset(
    {
        "rain",
        "drizzle",
        "shower",
        "thunderstorm",
        "precipitation",
        "downpour",
        "rainfall",
        "raining",
        "stormy",
    }
)


def is_raining(conditions: Optional[str]) -> bool:
    if not conditions:
        return False
    lowered = conditions.lower()
    return any(keyword in lowered for keyword in RAIN_KEYWORDS)
