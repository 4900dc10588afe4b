"""Itinerary planning endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from ...errors import PlanningValidationError
from ...models.domain import Stop, VehicleProfile
from ...schemas.planning import ItineraryResponse, PlanRequest
from ...services.crossings import get_crossing
from ...services.outputs.itinerary_formatter import itinerary_to_csv, itinerary_to_json
from ...services.planning.service import PlanningInput, plan_trip

router = APIRouter(prefix="/plans", tags=["plans"])


def _to_input(payload: PlanRequest) -> PlanningInput:
    crossing = None
    if payload.crossing_id:
        crossing = get_crossing(payload.crossing_id)
        if crossing is None:
            raise PlanningValidationError(f"Unknown crossing '{payload.crossing_id}'.")
    vehicle = None
    if payload.vehicle is not None:
        vehicle = VehicleProfile(
            category=payload.vehicle.category,
            length_m=payload.vehicle.length_m,
            weight_kg=payload.vehicle.weight_kg,
        )
    return PlanningInput(
        stops=[
            Stop(
                stop_id=stop.stop_id,
                latitude=stop.latitude,
                longitude=stop.longitude,
                name=stop.name,
                role=stop.role,
                notes=stop.notes,
            )
            for stop in payload.stops
        ],
        vehicle=vehicle,
        season=payload.season,
        start_date=payload.start_date,
        driving_style=payload.driving_style,
        rest_day_frequency=payload.rest_day_frequency,
        crossing=crossing,
        leg_distances=payload.leg_distances_km,
    )


@router.post("", response_model=ItineraryResponse, status_code=status.HTTP_200_OK)
def create_plan(payload: PlanRequest) -> ItineraryResponse:
    try:
        itinerary = plan_trip(_to_input(payload))
        return ItineraryResponse.model_validate(itinerary_to_json(itinerary))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception("Error planning itinerary: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to plan itinerary: {exc}",
        ) from exc


@router.post("/export", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def export_plan(payload: PlanRequest) -> PlainTextResponse:
    """Daily stages as CSV, one row per day."""
    try:
        itinerary = plan_trip(_to_input(payload))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception("Error exporting itinerary: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export itinerary: {exc}",
        ) from exc
    return PlainTextResponse(
        itinerary_to_csv(itinerary),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="itinerary.csv"'},
    )
