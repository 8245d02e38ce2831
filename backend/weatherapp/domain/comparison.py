from __future__ import annotations

from enum import Enum


class DaylightVerdict(str, Enum):
    FIRST_LONGER = "first_longer"
    SECOND_LONGER = "second_longer"
    EQUAL = "equal"


class RainVerdict(str, Enum):
    FIRST_RAINING = "first_raining"
    SECOND_RAINING = "second_raining"
    BOTH_RAINING = "both_raining"
    NEITHER_RAINING = "neither_raining"


EQUAL_DAYLIGHT_MESSAGE = "Both cities have equal daylight hours"
NO_RAIN_MESSAGE = "It is not raining in either city"


def daylight_verdict(minutes1: int, minutes2: int) -> DaylightVerdict:
    if minutes1 > minutes2:
        return DaylightVerdict.FIRST_LONGER
    if minutes2 > minutes1:
        return DaylightVerdict.SECOND_LONGER
    if minutes1 == minutes2:
        return DaylightVerdict.EQUAL
    raise ValueError(f"daylight minutes are not comparable: {minutes1!r}, {minutes2!r}")


def rain_verdict(is_raining1: bool, is_raining2: bool) -> RainVerdict:
    verdicts = {
        (True, True): RainVerdict.BOTH_RAINING,
        (True, False): RainVerdict.FIRST_RAINING,
        (False, True): RainVerdict.SECOND_RAINING,
        (False, False): RainVerdict.NEITHER_RAINING,
    }
    return verdicts[(bool(is_raining1), bool(is_raining2))]


def compare_daylight(minutes1: int, minutes2: int, name1: str, name2: str) -> str:
    verdict = daylight_verdict(minutes1, minutes2)
    messages = {
        DaylightVerdict.FIRST_LONGER: f"{name1} has the longest day",
        DaylightVerdict.SECOND_LONGER: f"{name2} has the longest day",
        DaylightVerdict.EQUAL: EQUAL_DAYLIGHT_MESSAGE,
    }
    return messages[verdict]


def compare_rain(is_raining1: bool, is_raining2: bool, name1: str, name2: str) -> str:
    verdict = rain_verdict(is_raining1, is_raining2)
    messages = {
        RainVerdict.BOTH_RAINING: f"It is raining in both {name1} and {name2}",
        RainVerdict.FIRST_RAINING: f"It is raining in {name1}",
        RainVerdict.SECOND_RAINING: f"It is raining in {name2}",
        RainVerdict.NEITHER_RAINING: NO_RAIN_MESSAGE,
    }
    return messages[verdict]
