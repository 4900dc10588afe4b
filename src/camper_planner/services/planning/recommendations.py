"""Rule-based travel advice for an assembled itinerary.

Rules are evaluated in table order and every rule whose predicate holds
appends one recommendation. Nothing is re-sorted, so the output order is the
table order. Extend the engine by passing a different ``rules`` sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ...config import settings
from ...models.domain import (
    Itinerary,
    PlanningRecommendation,
    TripMetrics,
    VehicleProfile,
)


@dataclass(slots=True, frozen=True)
class RecommendationContext:
    itinerary: Itinerary
    metrics: TripMetrics
    season: str
    vehicle: Optional[VehicleProfile]

    @property
    def average_daily_km(self) -> float:
        driving = self.itinerary.driving_stages
        if not driving:
            return 0.0
        return sum(stage.distance_km for stage in driving) / len(driving)


@dataclass(slots=True, frozen=True)
class RecommendationRule:
    name: str
    predicate: Callable[[RecommendationContext], bool]
    factory: Callable[[RecommendationContext], PlanningRecommendation]


def _is_large_vehicle(ctx: RecommendationContext) -> bool:
    return ctx.vehicle is not None and ctx.vehicle.length_m > 8


def _reaches_arctic(ctx: RecommendationContext) -> bool:
    return any(stop.latitude > settings.extreme_latitude_deg for stop in ctx.itinerary.stops)


def _overnight_crossing(ctx: RecommendationContext) -> bool:
    return ctx.itinerary.crossing is not None and ctx.itinerary.crossing.overnight


RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        name="large_vehicle",
        predicate=_is_large_vehicle,
        factory=lambda ctx: PlanningRecommendation(
            type="safety",
            priority="high",
            title="Large Vehicle Restrictions",
            description=f"A {ctx.vehicle.length_m:g}m vehicle is barred from some narrow, mountain and town-centre roads",
            action="Check length, height and weight restrictions along the route and avoid narrow mountain roads",
            impact="Avoid dead ends, fines and vehicle damage",
        ),
    ),
    RecommendationRule(
        name="winter",
        predicate=lambda ctx: ctx.season == "winter",
        factory=lambda ctx: PlanningRecommendation(
            type="season",
            priority="high",
            title="Winter Travel Considerations",
            description="Winter conditions require special equipment and shorter driving days",
            action="Fit winter tyres, carry snow chains, check road conditions and reduce daily distances",
            impact="Safe winter travel",
        ),
    ),
    RecommendationRule(
        name="summer_heat",
        predicate=lambda ctx: ctx.season == "summer",
        factory=lambda ctx: PlanningRecommendation(
            type="comfort",
            priority="medium",
            title="Summer Heat",
            description="High temperatures make long afternoon drives tiring",
            action="Start early, rest in the hottest hours and keep water on board",
            impact="More comfortable driving days",
        ),
    ),
    RecommendationRule(
        name="long_daily_distance",
        predicate=lambda ctx: ctx.average_daily_km > 350,
        factory=lambda ctx: PlanningRecommendation(
            type="comfort",
            priority="medium",
            title="Long Daily Distances",
            description=f"Average of {ctx.average_daily_km:.0f}km per driving day",
            action="Add rest days or extra overnight stops",
            impact="Less fatigue and more time at each destination",
        ),
    ),
    RecommendationRule(
        name="arctic",
        predicate=_reaches_arctic,
        factory=lambda ctx: PlanningRecommendation(
            type="route",
            priority="high",
            title="Arctic Preparedness",
            description=f"The route goes beyond {settings.extreme_latitude_deg:g}° latitude",
            action="Plan fuel and supplies for long empty stretches and prepare for cold nights",
            impact="Self-sufficient travel in remote northern regions",
        ),
    ),
    RecommendationRule(
        name="high_difficulty",
        predicate=lambda ctx: ctx.metrics.difficulty_score > 70,
        factory=lambda ctx: PlanningRecommendation(
            type="safety",
            priority="high",
            title="High Difficulty Trip",
            description="This trip has challenging daily stages that may be tiring",
            action="Add rest days between intensive driving periods",
            impact="Improved safety and enjoyment",
        ),
    ),
    RecommendationRule(
        name="intensive_schedule",
        predicate=lambda ctx: ctx.metrics.comfort_level in ("intensive", "extreme"),
        factory=lambda ctx: PlanningRecommendation(
            type="comfort",
            priority="medium",
            title="Intensive Driving Schedule",
            description="Multiple long driving days may be exhausting",
            action="Reduce daily distances or add overnight stops",
            impact="A more relaxed travel experience",
        ),
    ),
    RecommendationRule(
        name="hotel_costs",
        predicate=lambda ctx: any(stage.accommodation == "hotel" for stage in ctx.itinerary.stages),
        factory=lambda ctx: PlanningRecommendation(
            type="cost",
            priority="low",
            title="Accommodation Cost Optimization",
            description="Hotel stays increase trip costs significantly",
            action="Use campsites or legal aires where they are open",
            impact="Reduced accommodation costs",
        ),
    ),
    RecommendationRule(
        name="extended_trip",
        predicate=lambda ctx: len(ctx.itinerary.driving_stages) > 14,
        factory=lambda ctx: PlanningRecommendation(
            type="timing",
            priority="medium",
            title="Extended Trip Duration",
            description="Long trips require careful planning and preparation",
            action="Plan for vehicle maintenance and keep adequate supplies",
            impact="Smooth extended travel",
        ),
    ),
    RecommendationRule(
        name="overnight_crossing",
        predicate=_overnight_crossing,
        factory=lambda ctx: PlanningRecommendation(
            type="timing",
            priority="low",
            title="Overnight Crossing",
            description=f"The {ctx.itinerary.crossing.name} sailing is typically overnight",
            action="Book a cabin and plan a short first driving day after arrival",
            impact="Arrive rested",
        ),
    ),
)


def generate_recommendations(
    itinerary: Itinerary,
    metrics: TripMetrics,
    season: str,
    vehicle: Optional[VehicleProfile] = None,
    rules: Sequence[RecommendationRule] = RULES,
) -> list[PlanningRecommendation]:
    ctx = RecommendationContext(itinerary=itinerary, metrics=metrics, season=season, vehicle=vehicle)
    return [rule.factory(ctx) for rule in rules if rule.predicate(ctx)]
