"""Rule-based meal, rest, sightseeing and overnight stops within a stage."""

from __future__ import annotations

import math

from ...config import settings
from ...models.domain import DailyStage, PlannedStop

POINT_OF_INTEREST_KEYWORDS = ("castle", "museum", "cathedral", "palace", "historic", "scenic")
SIGHTSEEING_HOURS = 2.0
OVERNIGHT_HOURS = 12.0


def is_point_of_interest(name: str) -> bool:
    lowered = (name or "").lower()
    return any(keyword in lowered for keyword in POINT_OF_INTEREST_KEYWORDS)


def plan_stops(stage: DailyStage, is_last_day: bool = False) -> tuple[PlannedStop, ...]:
    hours = stage.driving_hours
    stops: list[PlannedStop] = []

    if hours > settings.long_day_hours:
        stops.append(
            PlannedStop(
                stop_type="lunch",
                duration_hours=settings.lunch_stop_hours,
                reason=f"Lunch break for a driving day over {settings.long_day_hours:g} hours",
                label="Lunch break",
            )
        )

    if hours > settings.extended_day_hours:
        extra = math.ceil(hours - settings.extended_day_hours)
        for index in range(extra):
            stops.append(
                PlannedStop(
                    stop_type="rest",
                    duration_hours=settings.rest_stop_hours,
                    reason=f"Short rest, driving time exceeds {settings.extended_day_hours:g} hours",
                    label=f"Rest stop {index + 1}",
                )
            )

    for waypoint in stage.waypoints:
        if is_point_of_interest(waypoint.name):
            stops.append(
                PlannedStop(
                    stop_type="sightseeing",
                    duration_hours=SIGHTSEEING_HOURS,
                    reason="Recommended sightseeing stop at a point of interest",
                    label=waypoint.name,
                )
            )

    if not is_last_day:
        stops.append(
            PlannedStop(
                stop_type="overnight",
                duration_hours=OVERNIGHT_HOURS,
                reason=f"Overnight at {stage.accommodation} near {stage.end.name}",
                label=stage.end.name,
            )
        )
    return tuple(stops)
