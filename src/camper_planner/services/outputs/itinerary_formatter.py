"""Serializers for planned itineraries."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ...models.domain import ChannelCrossing, DailyStage, Itinerary, Stop
from ..crossings.selector import RankedCrossing
from ..planning.seasons import seasonal_factors


def _stop_to_json(stop: Stop) -> dict:
    return {
        "stop_id": stop.stop_id,
        "name": stop.name,
        "latitude": stop.latitude,
        "longitude": stop.longitude,
        "role": stop.role,
        "notes": stop.notes,
    }


def _stage_to_json(stage: DailyStage) -> dict:
    return {
        "day": stage.day,
        "date": stage.date,
        "day_type": stage.day_type,
        "start": _stop_to_json(stage.start),
        "end": _stop_to_json(stage.end),
        "distance_km": round(stage.distance_km, 1),
        "driving_hours": round(stage.driving_hours, 1),
        "feasibility": stage.feasibility,
        "accommodation": stage.accommodation,
        "crossing_id": stage.crossing_id,
        "waypoints": [_stop_to_json(stop) for stop in stage.waypoints],
        "planned_stops": [asdict(planned) for planned in stage.planned_stops],
        "warnings": list(stage.warnings),
        "recommendations": list(stage.recommendations),
    }


def itinerary_to_json(itinerary: Itinerary) -> dict:
    """Response payload; distances and hours are rounded for display only."""

    factors = seasonal_factors(itinerary.season)
    return {
        "season": itinerary.season,
        "start_date": itinerary.start_date,
        "end_date": itinerary.end_date,
        "total_days": itinerary.total_days,
        "total_distance_km": round(itinerary.total_distance_km, 1),
        "total_driving_hours": round(itinerary.total_driving_hours, 1),
        "rest_days": itinerary.rest_days,
        "feasibility": itinerary.feasibility,
        "feasibility_score": itinerary.feasibility_score,
        "limits": asdict(itinerary.limits.rounded()),
        "stages": [_stage_to_json(stage) for stage in itinerary.stages],
        "warnings": list(itinerary.warnings),
        "recommendations": [asdict(item) for item in itinerary.recommendations],
        "metrics": asdict(itinerary.metrics) if itinerary.metrics is not None else None,
        "seasonal_factors": {
            **asdict(factors),
            "advice": list(factors.advice),
            "warnings": list(factors.warnings),
        },
        "crossing_id": itinerary.crossing.crossing_id if itinerary.crossing else None,
    }


def itinerary_to_csv(itinerary: Itinerary) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "day",
        "date",
        "day_type",
        "start",
        "end",
        "distance_km",
        "driving_hours",
        "feasibility",
        "accommodation",
        "planned_stops",
        "warnings",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for stage in itinerary.stages:
        writer.writerow(
            {
                "day": stage.day,
                "date": stage.date.isoformat() if stage.date else "",
                "day_type": stage.day_type,
                "start": stage.start.name,
                "end": stage.end.name,
                "distance_km": round(stage.distance_km, 1),
                "driving_hours": round(stage.driving_hours, 1),
                "feasibility": stage.feasibility,
                "accommodation": stage.accommodation,
                "planned_stops": "; ".join(planned.stop_type for planned in stage.planned_stops),
                "warnings": "; ".join(stage.warnings),
            }
        )
    return buffer.getvalue()


def crossing_to_json(crossing: ChannelCrossing) -> dict:
    payload = asdict(crossing)
    for key in ("operators", "vehicle_types", "booking_urls"):
        payload[key] = list(payload[key])
    return payload


def ranked_crossing_to_json(ranked: RankedCrossing) -> dict:
    return {
        **crossing_to_json(ranked.crossing),
        "drive_to_port_km": round(ranked.drive_to_port_km, 1),
        "drive_from_port_km": round(ranked.drive_from_port_km, 1),
        "estimated_hours": round(ranked.estimated_hours, 2),
    }
