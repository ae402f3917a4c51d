import math

import pytest

from pm25_intent.classifier import (
    PROFILES,
    THAI_PROFILE,
    US_AQI_PROFILE,
    AirQualityCategory,
    classify,
    get_profile,
)
from pm25_intent.locales import Locale


# ── Thai profile (5 bands) ────────────────────────────────────────────────────

@pytest.mark.parametrize("value", [0.0, 5.0, 15.0, 15.09])
def test_thai_lowest_band_is_half_open(value):
    assert classify(value, THAI_PROFILE) == AirQualityCategory.very_good


def test_thai_boundary_belongs_to_next_band():
    assert classify(15.1, THAI_PROFILE) == AirQualityCategory.good


@pytest.mark.parametrize(
    "value, expected",
    [
        (24.99, AirQualityCategory.good),
        (25.0, AirQualityCategory.moderate),
        (35.0, AirQualityCategory.moderate),
        (37.5, AirQualityCategory.beginning_to_affect_health),
        (74.9, AirQualityCategory.beginning_to_affect_health),
        (75.0, AirQualityCategory.affects_health),
        (1000.0, AirQualityCategory.affects_health),
    ],
)
def test_thai_bands(value, expected):
    assert classify(value, THAI_PROFILE) == expected


# ── US AQI profile (6 bands) ──────────────────────────────────────────────────

@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, AirQualityCategory.good),
        (11.9, AirQualityCategory.good),
        (12.0, AirQualityCategory.moderate),
        (35.4, AirQualityCategory.moderate),
        (35.5, AirQualityCategory.unhealthy_for_sensitive_groups),
        (55.5, AirQualityCategory.unhealthy),
        (150.4, AirQualityCategory.unhealthy),
        (150.5, AirQualityCategory.very_unhealthy),
        (250.4, AirQualityCategory.very_unhealthy),
    ],
)
def test_us_aqi_bands(value, expected):
    assert classify(value, US_AQI_PROFILE) == expected


@pytest.mark.parametrize("value", [250.5, 300.0, 999.9, math.inf])
def test_us_aqi_top_band_is_catch_all(value):
    assert classify(value, US_AQI_PROFILE) == AirQualityCategory.hazardous


# ── Edge cases ────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("profile", [THAI_PROFILE, US_AQI_PROFILE])
def test_negative_and_nan_fall_into_lowest_band(profile):
    lowest = profile.breakpoints[0].category
    assert classify(-1.0, profile) == lowest
    assert classify(float("nan"), profile) == lowest


@pytest.mark.parametrize("profile", [THAI_PROFILE, US_AQI_PROFILE])
def test_breakpoints_are_contiguous_and_ascending(profile):
    bps = profile.breakpoints
    assert bps[0].low == 0.0
    assert bps[-1].high == math.inf
    for lower, upper in zip(bps, bps[1:]):
        assert lower.high == upper.low
        assert lower.low < lower.high


@pytest.mark.parametrize("profile", [THAI_PROFILE, US_AQI_PROFILE])
def test_every_category_has_a_label_in_each_locale(profile):
    for locale in Locale:
        for bp in profile.breakpoints:
            assert profile.label(bp.category, locale)


def test_labels():
    assert THAI_PROFILE.label(AirQualityCategory.moderate, "th") == "ปานกลาง"
    assert THAI_PROFILE.label(AirQualityCategory.moderate, "en") == "moderate"
    assert US_AQI_PROFILE.label(AirQualityCategory.hazardous, Locale.english) == "hazardous"


def test_get_profile_by_name():
    assert get_profile("thai") is THAI_PROFILE
    assert get_profile("us_aqi") is US_AQI_PROFILE
    assert set(PROFILES) == {"thai", "us_aqi"}


def test_get_profile_unknown_name():
    with pytest.raises(ValueError, match="Unknown breakpoint profile"):
        get_profile("who")
