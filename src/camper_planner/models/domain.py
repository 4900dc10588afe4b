"""Domain models for stops, vehicles, crossings and planned itineraries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Optional

Season = Literal["spring", "summer", "autumn", "winter"]
StopRole = Literal["start", "intermediate", "end"]
FeasibilityRating = Literal["excellent", "good", "challenging", "unrealistic"]
PlannedStopType = Literal["lunch", "rest", "overnight", "sightseeing"]
DayType = Literal["driving", "rest", "crossing"]
Accommodation = Literal["campsite", "hotel"]
RecommendationType = Literal["safety", "comfort", "cost", "timing", "season", "route"]
RecommendationPriority = Literal["high", "medium", "low"]
ComfortLevel = Literal["relaxed", "moderate", "intensive", "extreme"]

SEASONS: tuple[str, ...] = ("spring", "summer", "autumn", "winter")


@dataclass(slots=True, frozen=True)
class Stop:
    """A caller-supplied point on the route."""

    stop_id: str
    latitude: float
    longitude: float
    name: str
    role: StopRole = "intermediate"
    notes: Optional[str] = None


@dataclass(slots=True, frozen=True)
class VehicleProfile:
    """``category`` is free text; categories without a limits table plan as a motorhome."""

    category: str
    length_m: float = 6.0
    weight_kg: float = 3000.0


@dataclass(slots=True, frozen=True)
class DrivingLimits:
    """Per-day driving allowance for one vehicle, season and driving style."""

    max_daily_distance_km: float
    max_daily_driving_hours: float
    recommended_break_interval_hours: float
    break_duration_minutes: float
    average_speed_kmh: float

    def rounded(self) -> "DrivingLimits":
        """Display precision copy: whole km, one-decimal hours, whole km/h."""
        return DrivingLimits(
            max_daily_distance_km=float(round(self.max_daily_distance_km)),
            max_daily_driving_hours=round(self.max_daily_driving_hours, 1),
            recommended_break_interval_hours=self.recommended_break_interval_hours,
            break_duration_minutes=self.break_duration_minutes,
            average_speed_kmh=float(round(self.average_speed_kmh)),
        )


@dataclass(slots=True, frozen=True)
class PlannedStop:
    stop_type: PlannedStopType
    duration_hours: float
    reason: str
    label: str


@dataclass(slots=True, frozen=True)
class DailyStage:
    day: int
    start: Stop
    end: Stop
    distance_km: float
    driving_hours: float
    date: Optional[date] = None
    feasibility: FeasibilityRating = "excellent"
    waypoints: tuple[Stop, ...] = ()
    planned_stops: tuple[PlannedStop, ...] = ()
    warnings: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    day_type: DayType = "driving"
    crossing_id: Optional[str] = None
    accommodation: Accommodation = "campsite"


@dataclass(slots=True, frozen=True)
class PlanningRecommendation:
    type: RecommendationType
    priority: RecommendationPriority
    title: str
    description: str
    action: str
    impact: str


@dataclass(slots=True, frozen=True)
class Suitability:
    beginners: bool
    families: bool
    experienced: bool
    seniors: bool


@dataclass(slots=True, frozen=True)
class TripMetrics:
    driving_intensity_km: float
    rest_ratio: float
    difficulty_score: float
    comfort_level: ComfortLevel
    suitability: Suitability


@dataclass(slots=True, frozen=True)
class CrossingTerminal:
    name: str
    latitude: float
    longitude: float
    country: str


@dataclass(slots=True, frozen=True)
class ChannelCrossing:
    """Static ferry or tunnel link between UK/Ireland and mainland Europe."""

    crossing_id: str
    name: str
    mode: Literal["ferry", "tunnel"]
    departure: CrossingTerminal
    arrival: CrossingTerminal
    duration_minutes: int
    frequency: str
    operators: tuple[str, ...]
    vehicle_types: tuple[str, ...]
    cost_low: float
    cost_high: float
    currency: str
    region: Literal["short", "western", "northern"]
    overnight: bool
    max_vehicle_length_m: Optional[float] = None
    booking_urls: tuple[str, ...] = ()
    notes: str = ""


@dataclass(slots=True, frozen=True)
class Itinerary:
    stages: tuple[DailyStage, ...]
    total_days: int
    total_distance_km: float
    total_driving_hours: float
    rest_days: int
    feasibility: FeasibilityRating
    feasibility_score: float
    limits: DrivingLimits
    season: Season
    warnings: tuple[str, ...] = ()
    recommendations: tuple[PlanningRecommendation, ...] = ()
    metrics: Optional[TripMetrics] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    crossing: Optional[ChannelCrossing] = None
    stops: tuple[Stop, ...] = field(default=())

    @property
    def driving_stages(self) -> tuple[DailyStage, ...]:
        return tuple(stage for stage in self.stages if stage.day_type != "rest")
