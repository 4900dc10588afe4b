"""Greedy split of an ordered stop list into daily driving stages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Sequence

from ...errors import PlanningValidationError
from ...models.domain import DailyStage, DrivingLimits, Stop
from ..geospatial import distance_km

MIN_STOPS = 2


@dataclass(slots=True, frozen=True)
class Leg:
    start: Stop
    end: Stop
    distance_km: float


def build_legs(stops: Sequence[Stop], leg_distances: Optional[Sequence[float]] = None) -> list[Leg]:
    """Pair consecutive stops, using routed distances where supplied."""

    if len(stops) < MIN_STOPS:
        raise PlanningValidationError("Add at least two stops to build a plan.")
    if leg_distances is not None and len(leg_distances) != len(stops) - 1:
        raise PlanningValidationError(
            f"Expected {len(stops) - 1} leg distances for {len(stops)} stops, got {len(leg_distances)}."
        )

    legs: list[Leg] = []
    for index in range(len(stops) - 1):
        start, end = stops[index], stops[index + 1]
        if leg_distances is not None:
            leg_distance = float(leg_distances[index])
            if leg_distance < 0:
                raise PlanningValidationError(f"Leg distance {index + 1} is negative.")
        else:
            leg_distance = distance_km(start, end)
        legs.append(Leg(start=start, end=end, distance_km=leg_distance))
    return legs


def _close_day(day: int, legs: Sequence[Leg], limits: DrivingLimits, start_date: Optional[date]) -> DailyStage:
    distance = sum(leg.distance_km for leg in legs)
    return DailyStage(
        day=day,
        start=legs[0].start,
        end=legs[-1].end,
        distance_km=distance,
        driving_hours=distance / limits.average_speed_kmh,
        date=start_date + timedelta(days=day - 1) if start_date else None,
        waypoints=tuple(leg.end for leg in legs),
    )


def segment_stages(
    stops: Sequence[Stop],
    limits: DrivingLimits,
    leg_distances: Optional[Sequence[float]] = None,
    start_date: Optional[date] = None,
) -> list[DailyStage]:
    """Forward-greedy bin packing of legs into days by distance.

    A day is closed when the next leg would push it past the daily limit.
    A single leg longer than the limit becomes a day on its own; it is never
    split. No rebalancing is attempted, so the final day may be short.
    """

    legs = build_legs(stops, leg_distances)
    stages: list[DailyStage] = []
    current: list[Leg] = []
    accumulated = 0.0

    for leg in legs:
        if current and accumulated + leg.distance_km > limits.max_daily_distance_km:
            stages.append(_close_day(len(stages) + 1, current, limits, start_date))
            current = []
            accumulated = 0.0
        current.append(leg)
        accumulated += leg.distance_km

    stages.append(_close_day(len(stages) + 1, current, limits, start_date))
    return stages
