"""Itinerary planning orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Optional, Sequence

from ...errors import PlanningValidationError
from ...models.domain import (
    ChannelCrossing,
    DailyStage,
    DrivingLimits,
    Itinerary,
    PlannedStop,
    Stop,
    VehicleProfile,
)
from ..crossings.selector import terminals_for
from ..geospatial import validate_coordinate
from .feasibility import TripContext, score_stage, score_trip
from .limits import compute_limits
from .metrics import calculate_trip_metrics, recommended_rest_days
from .recommendations import generate_recommendations
from .seasons import resolve_season
from .segmenter import MIN_STOPS, build_legs, segment_stages
from .stops import OVERNIGHT_HOURS, plan_stops

logger = logging.getLogger(__name__)

REST_DAY_NOTE = "Rest day: explore the area, relax or catch up on laundry"


@dataclass(slots=True, frozen=True)
class PlanningInput:
    """Everything one planning pass needs.

    ``leg_distances`` replaces great-circle distances leg by leg and applies
    to the final stop sequence, i.e. after crossing terminals are inserted.
    """

    stops: Sequence[Stop]
    vehicle: Optional[VehicleProfile] = None
    season: Optional[str] = None
    start_date: Optional[date] = None
    driving_style: Optional[str] = None
    rest_day_frequency: int = 0
    crossing: Optional[ChannelCrossing] = None
    leg_distances: Optional[Sequence[float]] = None


def _validate(request: PlanningInput) -> None:
    if len(request.stops) < MIN_STOPS:
        raise PlanningValidationError("Add at least two stops to build a plan.")
    for index, stop in enumerate(request.stops, start=1):
        validate_coordinate(stop.latitude, stop.longitude, label=f"Stop {index} ({stop.name})")
    if request.rest_day_frequency < 0:
        raise PlanningValidationError("Rest day frequency must be zero or a positive number of driving days.")


def _arrival_id(crossing: ChannelCrossing) -> str:
    return f"{crossing.crossing_id}-arrive"


def build_route_stops(stops: Sequence[Stop], crossing: Optional[ChannelCrossing]) -> list[Stop]:
    """Insert the crossing's two terminals right after the start stop."""

    route = list(stops)
    if crossing is None:
        return route

    near, far = terminals_for(crossing, route[0])
    facility = "Tunnel" if crossing.mode == "tunnel" else "Ferry"
    depart = Stop(
        stop_id=f"{crossing.crossing_id}-depart",
        latitude=near.latitude,
        longitude=near.longitude,
        name=f"{near.name} ({facility} Terminal)",
        role="intermediate",
    )
    arrive = Stop(
        stop_id=_arrival_id(crossing),
        latitude=far.latitude,
        longitude=far.longitude,
        name=f"{far.name} (Arrival)",
        role="intermediate",
    )
    return [route[0], depart, arrive, *route[1:]]


def _tag_crossing_day(stages: list[DailyStage], crossing: Optional[ChannelCrossing]) -> list[DailyStage]:
    if crossing is None:
        return stages
    # the stage whose legs end at the arrival terminal contains the crossing itself
    arrival_id = _arrival_id(crossing)
    for index, stage in enumerate(stages):
        if any(stop.stop_id == arrival_id for stop in stage.waypoints):
            note = "This day includes a channel crossing, allow extra time for check-in and boarding"
            stages[index] = replace(
                stage,
                day_type="crossing",
                crossing_id=crossing.crossing_id,
                recommendations=(note, *stage.recommendations),
            )
            break
    return stages


def _annotate(stages: list[DailyStage], limits: DrivingLimits, season: str) -> list[DailyStage]:
    accommodation = "hotel" if season == "winter" else "campsite"
    annotated: list[DailyStage] = []
    last_index = len(stages) - 1
    for index, stage in enumerate(stages):
        assessment = score_stage(stage, limits, season)
        stage = replace(
            stage,
            feasibility=assessment.rating,
            warnings=assessment.warnings,
            recommendations=assessment.recommendations,
            accommodation=accommodation,
        )
        stage = replace(stage, planned_stops=plan_stops(stage, is_last_day=index == last_index))
        annotated.append(stage)
    return annotated


def _rest_stage(after: DailyStage) -> DailyStage:
    return DailyStage(
        day=after.day,
        start=after.end,
        end=after.end,
        distance_km=0.0,
        driving_hours=0.0,
        feasibility="excellent",
        planned_stops=(
            PlannedStop(
                stop_type="overnight",
                duration_hours=OVERNIGHT_HOURS,
                reason=f"Second night at {after.accommodation} near {after.end.name}",
                label=after.end.name,
            ),
        ),
        recommendations=(REST_DAY_NOTE,),
        day_type="rest",
        accommodation=after.accommodation,
    )


def _insert_rest_days(stages: list[DailyStage], frequency: int) -> list[DailyStage]:
    if frequency <= 0:
        return stages
    result: list[DailyStage] = []
    since_rest = 0
    for index, stage in enumerate(stages):
        result.append(stage)
        since_rest += 1
        if since_rest >= frequency and index < len(stages) - 1:
            result.append(_rest_stage(stage))
            since_rest = 0
    return result


def _renumber(stages: list[DailyStage], start_date: Optional[date]) -> list[DailyStage]:
    return [
        replace(
            stage,
            day=day,
            date=start_date + timedelta(days=day - 1) if start_date else None,
        )
        for day, stage in enumerate(stages, start=1)
    ]


def plan_trip(request: PlanningInput) -> Itinerary:
    """Build a complete itinerary from scratch.

    Pure function of its input: callers recompute on every change instead of
    patching an earlier result.
    """

    _validate(request)

    season = resolve_season(request.season, request.start_date)
    route = build_route_stops(request.stops, request.crossing)
    limits = compute_limits(request.vehicle, season, request.driving_style)

    legs = build_legs(route, request.leg_distances)
    stages = segment_stages(route, limits, request.leg_distances, request.start_date)
    stages = _annotate(stages, limits, season)
    stages = _tag_crossing_day(stages, request.crossing)

    driving_count = len(stages)
    if request.rest_day_frequency > 0:
        stages = _insert_rest_days(stages, request.rest_day_frequency)
        rest_days = len(stages) - driving_count
    else:
        rest_days = recommended_rest_days(stages)
    stages = _renumber(stages, request.start_date)
    total_days = driving_count + rest_days

    assessment = score_trip(
        stages,
        TripContext(
            limits=limits,
            season=season,
            stops=route,
            vehicle=request.vehicle,
            estimated_days=total_days,
            leg_distances=[leg.distance_km for leg in legs],
        ),
    )
    warnings = list(assessment.warnings)
    if request.crossing is not None and request.crossing.overnight:
        warnings.append(f"The {request.crossing.name} is an overnight crossing, you will sleep on board")

    total_distance = sum(stage.distance_km for stage in stages)
    itinerary = Itinerary(
        stages=tuple(stages),
        total_days=total_days,
        total_distance_km=total_distance,
        total_driving_hours=sum(stage.driving_hours for stage in stages),
        rest_days=rest_days,
        feasibility=assessment.rating,
        feasibility_score=assessment.score,
        limits=limits,
        season=season,
        warnings=tuple(warnings),
        start_date=request.start_date,
        end_date=request.start_date + timedelta(days=total_days - 1) if request.start_date else None,
        crossing=request.crossing,
        stops=tuple(route),
    )

    metrics = calculate_trip_metrics(stages, assessment.score, rest_days)
    recommendations = generate_recommendations(itinerary, metrics, season, request.vehicle)

    logger.info(
        "Planned %d driving days over %.0f km (%s, score %.0f, season %s)",
        driving_count,
        total_distance,
        assessment.rating,
        assessment.score,
        season,
    )
    return replace(itinerary, metrics=metrics, recommendations=tuple(recommendations))
