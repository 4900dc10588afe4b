"""Summary metrics describing how demanding a trip is."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import ComfortLevel, DailyStage, Suitability, TripMetrics

INTENSIVE_DAY_KM = 300.0
INTENSIVE_DAY_HOURS = 6.0


def is_intensive_day(stage: DailyStage) -> bool:
    return stage.distance_km > INTENSIVE_DAY_KM or stage.driving_hours > INTENSIVE_DAY_HOURS


def recommended_rest_days(stages: Sequence[DailyStage]) -> int:
    """One rest day per three intensive driving days."""
    intensive = sum(1 for stage in stages if stage.day_type != "rest" and is_intensive_day(stage))
    return intensive // 3


def longest_intensive_streak(stages: Sequence[DailyStage]) -> int:
    longest = 0
    current = 0
    for stage in stages:
        if stage.day_type == "rest":
            current = 0
            continue
        if is_intensive_day(stage):
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def _comfort_level(average_km: float, feasibility_score: float) -> ComfortLevel:
    if average_km < 200 and feasibility_score > 80:
        return "relaxed"
    if average_km < 300 and feasibility_score > 60:
        return "moderate"
    if average_km < 400 and feasibility_score > 40:
        return "intensive"
    return "extreme"


def calculate_trip_metrics(
    stages: Sequence[DailyStage],
    feasibility_score: float,
    rest_days: int,
) -> TripMetrics:
    driving = [stage for stage in stages if stage.day_type != "rest"]
    driving_days = max(1, len(driving))
    total_days = len(driving) + rest_days
    average_km = sum(stage.distance_km for stage in driving) / driving_days

    hard_days = sum(1 for stage in driving if stage.feasibility in ("challenging", "unrealistic"))
    difficulty = min(100.0, (hard_days / driving_days) * 100 + (average_km / 500) * 50)
    comfort = _comfort_level(average_km, feasibility_score)

    return TripMetrics(
        driving_intensity_km=round(average_km, 1),
        rest_ratio=round(rest_days / total_days, 2) if total_days else 0.0,
        difficulty_score=round(difficulty, 1),
        comfort_level=comfort,
        suitability=Suitability(
            beginners=comfort == "relaxed" and difficulty < 30,
            families=comfort != "extreme" and difficulty < 50,
            experienced=True,
            seniors=comfort == "relaxed" and feasibility_score > 70,
        ),
    )
