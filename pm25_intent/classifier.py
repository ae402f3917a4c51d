"""
Air-quality classification for PM2.5 readings.

A breakpoint profile is an ordered list of half-open ``[low, high)`` bands.
The first band whose upper bound exceeds the reading wins; the last band is a
catch-all with an infinite upper bound. Two profiles are shipped:

- ``thai``: the five-band scale used by the Thai-language shortcut.
- ``us_aqi``: the six-band scale following the US AQI PM2.5 categories.

Which one is authoritative is not settled, so the active profile is chosen by
name through ``PM25_PROFILE``.
"""

import math
from dataclasses import dataclass, field
from enum import Enum

from .locales import Locale


class AirQualityCategory(str, Enum):
    very_good = "very_good"
    good = "good"
    moderate = "moderate"
    beginning_to_affect_health = "beginning_to_affect_health"
    affects_health = "affects_health"
    unhealthy_for_sensitive_groups = "unhealthy_for_sensitive_groups"
    unhealthy = "unhealthy"
    very_unhealthy = "very_unhealthy"
    hazardous = "hazardous"


@dataclass(frozen=True)
class Breakpoint:
    low: float
    high: float
    category: AirQualityCategory


@dataclass(frozen=True)
class BreakpointProfile:
    name: str
    breakpoints: tuple
    labels: dict = field(default_factory=dict)

    def label(self, category: AirQualityCategory, locale: Locale | str) -> str:
        return self.labels[Locale(locale)][category]


_C = AirQualityCategory

THAI_PROFILE = BreakpointProfile(
    name="thai",
    breakpoints=(
        Breakpoint(0.0, 15.1, _C.very_good),
        Breakpoint(15.1, 25.0, _C.good),
        Breakpoint(25.0, 37.5, _C.moderate),
        Breakpoint(37.5, 75.0, _C.beginning_to_affect_health),
        Breakpoint(75.0, math.inf, _C.affects_health),
    ),
    labels={
        Locale.thai: {
            _C.very_good: "ดีมาก",
            _C.good: "ดี",
            _C.moderate: "ปานกลาง",
            _C.beginning_to_affect_health: "เริ่มมีผลกระทบต่อสุขภาพ",
            _C.affects_health: "มีผลกระทบต่อสุขภาพ",
        },
        Locale.english: {
            _C.very_good: "very good",
            _C.good: "good",
            _C.moderate: "moderate",
            _C.beginning_to_affect_health: "beginning to affect health",
            _C.affects_health: "affects health",
        },
    },
)

US_AQI_PROFILE = BreakpointProfile(
    name="us_aqi",
    breakpoints=(
        Breakpoint(0.0, 12.0, _C.good),
        Breakpoint(12.0, 35.5, _C.moderate),
        Breakpoint(35.5, 55.5, _C.unhealthy_for_sensitive_groups),
        Breakpoint(55.5, 150.5, _C.unhealthy),
        Breakpoint(150.5, 250.5, _C.very_unhealthy),
        Breakpoint(250.5, math.inf, _C.hazardous),
    ),
    labels={
        Locale.thai: {
            _C.good: "ดี",
            _C.moderate: "ปานกลาง",
            _C.unhealthy_for_sensitive_groups: "มีผลต่อกลุ่มเสี่ยง",
            _C.unhealthy: "มีผลต่อสุขภาพ",
            _C.very_unhealthy: "มีผลต่อสุขภาพมาก",
            _C.hazardous: "อันตราย",
        },
        Locale.english: {
            _C.good: "good",
            _C.moderate: "moderate",
            _C.unhealthy_for_sensitive_groups: "unhealthy for sensitive groups",
            _C.unhealthy: "unhealthy",
            _C.very_unhealthy: "very unhealthy",
            _C.hazardous: "hazardous",
        },
    },
)

PROFILES = {
    THAI_PROFILE.name: THAI_PROFILE,
    US_AQI_PROFILE.name: US_AQI_PROFILE,
}


def get_profile(name: str) -> BreakpointProfile:
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(
            f"Unknown breakpoint profile {name!r}; expected one of {sorted(PROFILES)}"
        ) from None


def classify(pm25: float, profile: BreakpointProfile = THAI_PROFILE) -> AirQualityCategory:
    """Map a PM2.5 value in µg/m³ to a category. Never raises."""
    breakpoints = profile.breakpoints
    if math.isnan(pm25):
        return breakpoints[0].category
    for breakpoint in breakpoints:
        # Ascending order: anything below the first band (negatives) lands in it
        if pm25 < breakpoint.high:
            return breakpoint.category
    return breakpoints[-1].category
