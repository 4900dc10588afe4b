"""Feasibility scoring for single stages and whole trips."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import DailyStage, DrivingLimits, FeasibilityRating, Stop, VehicleProfile
from .metrics import longest_intensive_streak

MAX_SCORE = 100.0
MIN_SCORE = 0.0
INTENSIVE_STREAK_DAYS = 3


@dataclass(slots=True, frozen=True)
class StageAssessment:
    rating: FeasibilityRating
    score: float
    warnings: tuple[str, ...]
    recommendations: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class TripContext:
    limits: DrivingLimits
    season: str
    stops: Sequence[Stop]
    vehicle: Optional[VehicleProfile] = None
    estimated_days: Optional[int] = None
    leg_distances: Sequence[float] = ()


@dataclass(slots=True, frozen=True)
class TripAssessment:
    rating: FeasibilityRating
    score: float
    warnings: tuple[str, ...]


def clamp_score(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def rate_ratio(ratio: float) -> FeasibilityRating:
    if ratio <= 0.7:
        return "excellent"
    if ratio <= 0.9:
        return "good"
    if ratio <= 1.1:
        return "challenging"
    return "unrealistic"


def rate_score(score: float) -> FeasibilityRating:
    if score >= 85:
        return "excellent"
    if score >= 70:
        return "good"
    if score >= 50:
        return "challenging"
    return "unrealistic"


def distance_penalty(ratio: float) -> float:
    if ratio > 1.2:
        return 40.0
    if ratio > 1.0:
        return 20.0
    if ratio > 0.9:
        return 10.0
    return 0.0


def _distance_ratio(distance: float, limits: DrivingLimits) -> float:
    if limits.max_daily_distance_km <= 0:
        return float("inf") if distance > 0 else 0.0
    return distance / limits.max_daily_distance_km


def _stage_warnings(stage: DailyStage, limits: DrivingLimits, season: str) -> list[str]:
    warnings: list[str] = []
    if stage.distance_km > limits.max_daily_distance_km:
        warnings.append(
            f"Daily distance of {stage.distance_km:.0f}km exceeds recommended limit of "
            f"{limits.max_daily_distance_km:.0f}km"
        )
    if stage.driving_hours > limits.max_daily_driving_hours:
        warnings.append(
            f"Driving time of {stage.driving_hours:.1f}h exceeds recommended limit of "
            f"{limits.max_daily_driving_hours:.1f}h"
        )
    if stage.distance_km > limits.max_daily_distance_km * 1.2:
        warnings.append("Very long driving day, consider splitting the route with an extra stop")
    if season == "winter" and stage.distance_km > limits.max_daily_distance_km * 0.8:
        warnings.append("Winter driving conditions, allow extra time and reduce the daily distance")
    return warnings


def _stage_recommendations(stage: DailyStage, limits: DrivingLimits, season: str) -> list[str]:
    recommendations: list[str] = []
    if stage.driving_hours > settings.long_day_hours:
        recommendations.append("Plan several rest stops for this long driving day")
    if stage.distance_km < limits.max_daily_distance_km * 0.5:
        recommendations.append("Light driving day, a good opportunity for sightseeing")
    if season == "summer" and stage.distance_km > limits.max_daily_distance_km * 0.8:
        recommendations.append("Start early to avoid afternoon heat and traffic")
    if season == "winter":
        recommendations.append("Check weather and road conditions before departure")
    return recommendations


def score_stage(stage: DailyStage, limits: DrivingLimits, season: str = "summer") -> StageAssessment:
    """Rate one stage by the ratio of its distance to the daily limit."""

    ratio = _distance_ratio(stage.distance_km, limits)
    return StageAssessment(
        rating=rate_ratio(ratio),
        score=clamp_score(MAX_SCORE - distance_penalty(ratio)),
        warnings=tuple(_stage_warnings(stage, limits, season)),
        recommendations=tuple(_stage_recommendations(stage, limits, season)),
    )


def score_trip(stages: Sequence[DailyStage], context: TripContext) -> TripAssessment:
    """Start at 100 and subtract one penalty per condition that applies.

    Rest stages only break intensive streaks. The distance ratio uses the longest leg, or the
    longest driving stage when no legs are given, so adding distance never
    raises the score.
    """

    driving = [stage for stage in stages if stage.day_type != "rest"]
    score = MAX_SCORE
    warnings: list[str] = []

    if driving:
        if context.leg_distances:
            longest = max(context.leg_distances)
        else:
            longest = max(stage.distance_km for stage in driving)
        ratio = _distance_ratio(longest, context.limits)
        score -= distance_penalty(ratio)
        if ratio > 1.0:
            warnings.append("Daily distances exceed recommended limits")
        elif ratio > 0.9:
            warnings.append("Daily distances are close to recommended limits")

    for stage in driving:
        if stage.feasibility == "unrealistic":
            warnings.append(f"Day {stage.day}: unrealistic driving distance")

    if longest_intensive_streak(stages) >= INTENSIVE_STREAK_DAYS:
        warnings.append("Multiple consecutive intensive driving days detected")

    if context.season == "winter":
        score -= 15
        warnings.append("Winter travel conditions apply")
    elif context.season == "autumn":
        score -= 5
        warnings.append("Autumn weather may shorten driving days")

    if context.vehicle is not None and context.vehicle.length_m > 8:
        score -= 10
        warnings.append("Large vehicle may face road restrictions")

    estimated_days = context.estimated_days if context.estimated_days is not None else len(driving)
    if estimated_days > 21:
        score -= 10
        warnings.append("Trip longer than three weeks, plan for fatigue and vehicle servicing")
    elif estimated_days > 14:
        score -= 5
        warnings.append("Trip longer than two weeks, build in recovery time")

    if any(stop.latitude > settings.extreme_latitude_deg for stop in context.stops):
        score -= 15
        warnings.append("Route reaches arctic latitudes")

    final_score = clamp_score(score)
    return TripAssessment(rating=rate_score(final_score), score=final_score, warnings=tuple(warnings))
