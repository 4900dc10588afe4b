"""Channel crossing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...models.domain import VehicleProfile
from ...schemas.crossings import (
    CrossingCheckRequest,
    CrossingCheckResponse,
    CrossingListResponse,
    CrossingRankRequest,
    CrossingRankResponse,
    PointModel,
)
from ...services.crossings import (
    is_mainland_europe,
    is_uk_or_ireland,
    load_crossings,
    needs_crossing,
    rank_crossings_detailed,
)
from ...services.outputs.itinerary_formatter import crossing_to_json, ranked_crossing_to_json

router = APIRouter(prefix="/crossings", tags=["crossings"])


def _region(point: PointModel) -> str:
    if is_uk_or_ireland(point.latitude, point.longitude):
        return "uk_ireland"
    if is_mainland_europe(point.latitude, point.longitude):
        return "mainland_europe"
    return "other"


@router.get("", response_model=CrossingListResponse, status_code=status.HTTP_200_OK)
def list_crossings() -> CrossingListResponse:
    try:
        crossings = load_crossings()
    except (OSError, ValueError) as exc:
        logging.exception("Error loading crossing table: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load crossings: {exc}",
        ) from exc
    return CrossingListResponse.model_validate({"crossings": [crossing_to_json(item) for item in crossings]})


@router.post("/check", response_model=CrossingCheckResponse, status_code=status.HTTP_200_OK)
def check_crossing(payload: CrossingCheckRequest) -> CrossingCheckResponse:
    return CrossingCheckResponse(
        needs_crossing=needs_crossing(payload.start, payload.end),
        start_region=_region(payload.start),
        end_region=_region(payload.end),
    )


@router.post("/rank", response_model=CrossingRankResponse, status_code=status.HTTP_200_OK)
def rank(payload: CrossingRankRequest) -> CrossingRankResponse:
    vehicle = None
    if payload.vehicle is not None:
        vehicle = VehicleProfile(
            category=payload.vehicle.category,
            length_m=payload.vehicle.length_m,
            weight_kg=payload.vehicle.weight_kg,
        )
    try:
        ranked = rank_crossings_detailed(payload.start, payload.end, vehicle)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception("Error ranking crossings: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to rank crossings: {exc}",
        ) from exc
    return CrossingRankResponse.model_validate(
        {
            "needs_crossing": needs_crossing(payload.start, payload.end),
            "crossings": [ranked_crossing_to_json(item) for item in ranked],
        }
    )
