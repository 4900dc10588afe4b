"""Per-vehicle, per-season daily driving limits."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ...models.domain import DrivingLimits, VehicleProfile

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class StyleLimits:
    max_hours: float
    max_km_per_day: float


@dataclass(slots=True, frozen=True)
class SeasonalAdjustment:
    distance_multiplier: float
    speed_multiplier: float


VEHICLE_BASE_LIMITS: dict[str, DrivingLimits] = {
    "motorhome": DrivingLimits(
        max_daily_distance_km=300.0,
        max_daily_driving_hours=6.0,
        recommended_break_interval_hours=2.0,
        break_duration_minutes=20.0,
        average_speed_kmh=65.0,
    ),
    "caravan": DrivingLimits(
        max_daily_distance_km=350.0,
        max_daily_driving_hours=7.0,
        recommended_break_interval_hours=2.5,
        break_duration_minutes=15.0,
        average_speed_kmh=70.0,
    ),
    "campervan": DrivingLimits(
        max_daily_distance_km=400.0,
        max_daily_driving_hours=8.0,
        recommended_break_interval_hours=3.0,
        break_duration_minutes=15.0,
        average_speed_kmh=75.0,
    ),
}
FALLBACK_CATEGORY = "motorhome"

SEASONAL_ADJUSTMENTS: dict[str, SeasonalAdjustment] = {
    "winter": SeasonalAdjustment(distance_multiplier=0.7, speed_multiplier=0.8),
    "spring": SeasonalAdjustment(distance_multiplier=0.9, speed_multiplier=0.95),
    "summer": SeasonalAdjustment(distance_multiplier=1.0, speed_multiplier=1.0),
    "autumn": SeasonalAdjustment(distance_multiplier=0.85, speed_multiplier=0.9),
}

STYLE_LIMITS: dict[str, StyleLimits] = {
    "relaxed": StyleLimits(max_hours=4.0, max_km_per_day=200.0),
    "moderate": StyleLimits(max_hours=6.0, max_km_per_day=300.0),
    "intensive": StyleLimits(max_hours=8.0, max_km_per_day=400.0),
}
NEUTRAL_STYLE = "moderate"
FALLBACK_STYLE = "relaxed"


def style_limits(style: Optional[str]) -> StyleLimits:
    """Vehicle-independent hours/km pair for a driving style."""
    if style is None:
        return STYLE_LIMITS[NEUTRAL_STYLE]
    if style not in STYLE_LIMITS:
        logger.debug("Unknown driving style '%s', using %s limits", style, FALLBACK_STYLE)
        return STYLE_LIMITS[FALLBACK_STYLE]
    return STYLE_LIMITS[style]


def size_multiplier(vehicle: Optional[VehicleProfile]) -> float:
    if vehicle is None:
        return 1.0
    if vehicle.length_m > 8 or vehicle.weight_kg > 4000:
        return 0.8
    if vehicle.length_m > 7 or vehicle.weight_kg > 3500:
        return 0.9
    return 1.0


def base_limits(vehicle: Optional[VehicleProfile]) -> DrivingLimits:
    category = vehicle.category if vehicle is not None else FALLBACK_CATEGORY
    if category not in VEHICLE_BASE_LIMITS:
        logger.debug("Unknown vehicle category '%s', using %s limits", category, FALLBACK_CATEGORY)
        category = FALLBACK_CATEGORY
    return VEHICLE_BASE_LIMITS[category]


def compute_limits(
    vehicle: Optional[VehicleProfile] = None,
    season: str = "summer",
    driving_style: Optional[str] = None,
) -> DrivingLimits:
    """Compose vehicle base limits with season, size and driving style multipliers.

    Values keep full precision; use ``DrivingLimits.rounded()`` for display.
    """

    base = base_limits(vehicle)
    seasonal = SEASONAL_ADJUSTMENTS.get(season, SEASONAL_ADJUSTMENTS["summer"])
    size = size_multiplier(vehicle)
    style = style_limits(driving_style)
    neutral = STYLE_LIMITS[NEUTRAL_STYLE]
    style_distance = style.max_km_per_day / neutral.max_km_per_day
    style_hours = style.max_hours / neutral.max_hours

    return DrivingLimits(
        max_daily_distance_km=base.max_daily_distance_km * seasonal.distance_multiplier * size * style_distance,
        max_daily_driving_hours=base.max_daily_driving_hours * seasonal.distance_multiplier * size * style_hours,
        recommended_break_interval_hours=base.recommended_break_interval_hours,
        break_duration_minutes=base.break_duration_minutes,
        average_speed_kmh=base.average_speed_kmh * seasonal.speed_multiplier,
    )
