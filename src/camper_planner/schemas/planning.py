"""Planning request/response schemas."""

from __future__ import annotations

import datetime as dt
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class StopModel(BaseModel):
    stop_id: str
    name: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    role: Literal["start", "intermediate", "end"] = "intermediate"
    notes: Optional[str] = None


class VehicleModel(BaseModel):
    category: str = Field(..., description="motorhome, caravan or campervan; unknown values plan conservatively.")
    length_m: float = Field(6.0, gt=0)
    weight_kg: float = Field(3000.0, gt=0)


class PlanRequest(BaseModel):
    stops: List[StopModel]
    vehicle: Optional[VehicleModel] = None
    season: Optional[Literal["spring", "summer", "autumn", "winter"]] = None
    start_date: Optional[dt.date] = None
    driving_style: Optional[str] = Field(default=None, description="relaxed, moderate or intensive.")
    rest_day_frequency: int = Field(default=0, ge=0, description="Insert a rest day after this many driving days.")
    crossing_id: Optional[str] = Field(default=None, description="Selected channel crossing, if any.")
    leg_distances_km: Optional[List[float]] = Field(
        default=None,
        description="Routed distances per leg; replaces great-circle distances when supplied.",
    )


class DrivingLimitsModel(BaseModel):
    max_daily_distance_km: float
    max_daily_driving_hours: float
    recommended_break_interval_hours: float
    break_duration_minutes: float
    average_speed_kmh: float


class PlannedStopModel(BaseModel):
    stop_type: str
    duration_hours: float
    reason: str
    label: str


class DailyStageModel(BaseModel):
    day: int
    date: Optional[dt.date] = None
    day_type: str
    start: StopModel
    end: StopModel
    distance_km: float
    driving_hours: float
    feasibility: str
    accommodation: str
    crossing_id: Optional[str] = None
    waypoints: List[StopModel]
    planned_stops: List[PlannedStopModel]
    warnings: List[str]
    recommendations: List[str]


class RecommendationModel(BaseModel):
    type: str
    priority: str
    title: str
    description: str
    action: str
    impact: str


class SuitabilityModel(BaseModel):
    beginners: bool
    families: bool
    experienced: bool
    seniors: bool


class TripMetricsModel(BaseModel):
    driving_intensity_km: float
    rest_ratio: float
    difficulty_score: float
    comfort_level: str
    suitability: SuitabilityModel


class SeasonalFactorsModel(BaseModel):
    season: str
    temperature_min_c: int
    temperature_max_c: int
    precipitation: str
    tourist_density: str
    campsite_availability: str
    driving_conditions: str
    advice: List[str]
    warnings: List[str]


class ItineraryResponse(BaseModel):
    season: str
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    total_days: int
    total_distance_km: float
    total_driving_hours: float
    rest_days: int
    feasibility: str
    feasibility_score: float
    limits: DrivingLimitsModel
    stages: List[DailyStageModel]
    warnings: List[str]
    recommendations: List[RecommendationModel]
    metrics: Optional[TripMetricsModel] = None
    seasonal_factors: SeasonalFactorsModel
    crossing_id: Optional[str] = None
