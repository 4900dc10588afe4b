"""Channel crossing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .planning import VehicleModel


class PointModel(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class CrossingCheckRequest(BaseModel):
    start: PointModel
    end: PointModel


class CrossingCheckResponse(BaseModel):
    needs_crossing: bool
    start_region: str
    end_region: str


class CrossingRankRequest(BaseModel):
    start: PointModel
    end: PointModel
    vehicle: Optional[VehicleModel] = Field(
        default=None,
        description="When given, crossings that cannot carry this vehicle are excluded.",
    )


class TerminalModel(BaseModel):
    name: str
    latitude: float
    longitude: float
    country: str


class CrossingModel(BaseModel):
    crossing_id: str
    name: str
    mode: str
    departure: TerminalModel
    arrival: TerminalModel
    duration_minutes: int
    frequency: str
    operators: List[str]
    vehicle_types: List[str]
    max_vehicle_length_m: Optional[float] = None
    cost_low: float
    cost_high: float
    currency: str
    region: str
    overnight: bool
    booking_urls: List[str]
    notes: str


class RankedCrossingModel(CrossingModel):
    drive_to_port_km: float
    drive_from_port_km: float
    estimated_hours: float


class CrossingListResponse(BaseModel):
    crossings: List[CrossingModel]


class CrossingRankResponse(BaseModel):
    needs_crossing: bool
    crossings: List[RankedCrossingModel]
