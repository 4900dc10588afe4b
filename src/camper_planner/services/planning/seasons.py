"""Season resolution and seasonal touring conditions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...models.domain import SEASONS

logger = logging.getLogger(__name__)

DEFAULT_SEASON = "summer"


@dataclass(slots=True, frozen=True)
class SeasonalFactors:
    season: str
    temperature_min_c: int
    temperature_max_c: int
    precipitation: str
    tourist_density: str
    campsite_availability: str
    driving_conditions: str
    advice: tuple[str, ...]
    warnings: tuple[str, ...]


SEASONAL_FACTORS: dict[str, SeasonalFactors] = {
    "spring": SeasonalFactors(
        season="spring",
        temperature_min_c=8,
        temperature_max_c=18,
        precipitation="medium",
        tourist_density="medium",
        campsite_availability="good",
        driving_conditions="good",
        advice=(
            "Good touring weather, but pack layers",
            "Some mountain passes may still be closed",
            "Booking campsites in advance is recommended",
        ),
        warnings=(
            "Variable weather conditions possible",
            "Some seasonal businesses may not be open yet",
        ),
    ),
    "summer": SeasonalFactors(
        season="summer",
        temperature_min_c=15,
        temperature_max_c=28,
        precipitation="low",
        tourist_density="high",
        campsite_availability="limited",
        driving_conditions="excellent",
        advice=(
            "Book accommodation well in advance",
            "Start driving early to avoid heat and traffic",
            "Stay hydrated and use sun protection",
        ),
        warnings=(
            "Peak tourist season, expect crowds and higher prices",
            "Extreme heat possible in southern regions",
        ),
    ),
    "autumn": SeasonalFactors(
        season="autumn",
        temperature_min_c=5,
        temperature_max_c=15,
        precipitation="medium",
        tourist_density="low",
        campsite_availability="good",
        driving_conditions="good",
        advice=(
            "Fewer crowds on the road and at campsites",
            "Pack warm clothing for cooler evenings",
        ),
        warnings=("Some campsites may close for winter", "Daylight hours are decreasing"),
    ),
    "winter": SeasonalFactors(
        season="winter",
        temperature_min_c=-5,
        temperature_max_c=8,
        precipitation="high",
        tourist_density="low",
        campsite_availability="poor",
        driving_conditions="challenging",
        advice=(
            "Favour southern routes and cities",
            "Book heated accommodation",
            "Carry winter driving equipment",
        ),
        warnings=(
            "Many campsites closed in northern regions",
            "Snow and ice possible, check road conditions",
            "Shorter daylight hours limit driving time",
        ),
    ),
}


def season_from_date(value: date) -> str:
    month = value.month
    if 3 <= month <= 5:
        return "spring"
    if 6 <= month <= 8:
        return "summer"
    if 9 <= month <= 11:
        return "autumn"
    return "winter"


def resolve_season(season: Optional[str] = None, start_date: Optional[date] = None) -> str:
    """Explicit season wins, then the start date, then summer."""

    if season:
        normalized = season.strip().lower()
        if normalized in SEASONS:
            return normalized
        logger.debug("Unknown season '%s', falling back to %s", season, DEFAULT_SEASON)
        return DEFAULT_SEASON
    if start_date is not None:
        return season_from_date(start_date)
    return DEFAULT_SEASON


def seasonal_factors(season: str) -> SeasonalFactors:
    return SEASONAL_FACTORS.get(season, SEASONAL_FACTORS[DEFAULT_SEASON])
