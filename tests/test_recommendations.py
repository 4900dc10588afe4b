from camper_planner.models.domain import (
    DailyStage,
    DrivingLimits,
    Itinerary,
    PlanningRecommendation,
    Stop,
    Suitability,
    TripMetrics,
    VehicleProfile,
)
from camper_planner.services.crossings import get_crossing
from camper_planner.services.planning.recommendations import (
    RULES,
    RecommendationRule,
    generate_recommendations,
)


def _metrics(difficulty: float = 10.0, comfort: str = "relaxed") -> TripMetrics:
    return TripMetrics(
        driving_intensity_km=150.0,
        rest_ratio=0.0,
        difficulty_score=difficulty,
        comfort_level=comfort,
        suitability=Suitability(beginners=True, families=True, experienced=True, seniors=True),
    )


def _itinerary(distances=(150.0,), lat: float = 48.0, accommodation: str = "campsite", crossing=None) -> Itinerary:
    start = Stop(stop_id="A", latitude=lat, longitude=10.0, name="A")
    end = Stop(stop_id="B", latitude=lat, longitude=11.0, name="B")
    stages = tuple(
        DailyStage(
            day=index + 1,
            start=start,
            end=end,
            distance_km=distance,
            driving_hours=distance / 65.0,
            accommodation=accommodation,
        )
        for index, distance in enumerate(distances)
    )
    return Itinerary(
        stages=stages,
        total_days=len(stages),
        total_distance_km=sum(distances),
        total_driving_hours=sum(distances) / 65.0,
        rest_days=0,
        feasibility="excellent",
        feasibility_score=100.0,
        limits=DrivingLimits(300.0, 6.0, 2.0, 20.0, 65.0),
        season="spring",
        crossing=crossing,
        stops=(start, end),
    )


def _titles(recommendations) -> list[str]:
    return [item.title for item in recommendations]


def test_quiet_trip_has_no_recommendations():
    assert generate_recommendations(_itinerary(), _metrics(), "spring") == []


def test_rules_fire_independently_in_table_order():
    vehicle = VehicleProfile(category="motorhome", length_m=9.0)
    recommendations = generate_recommendations(
        _itinerary(accommodation="hotel"), _metrics(), "winter", vehicle
    )
    assert _titles(recommendations) == [
        "Large Vehicle Restrictions",
        "Winter Travel Considerations",
        "Accommodation Cost Optimization",
    ]
    assert (recommendations[0].type, recommendations[0].priority) == ("safety", "high")
    assert (recommendations[1].type, recommendations[1].priority) == ("season", "high")


def test_summer_heat_rule():
    recommendations = generate_recommendations(_itinerary(), _metrics(), "summer")
    assert [(item.type, item.priority) for item in recommendations] == [("comfort", "medium")]


def test_long_average_distance_rule():
    recommendations = generate_recommendations(_itinerary(distances=(400.0, 320.0)), _metrics(), "spring")
    assert _titles(recommendations) == ["Long Daily Distances"]
    assert "360km" in recommendations[0].description


def test_arctic_rule():
    recommendations = generate_recommendations(_itinerary(lat=70.0), _metrics(), "spring")
    assert len(recommendations) == 1
    assert recommendations[0].type == "route"
    assert recommendations[0].priority == "high"
    assert recommendations[0].title == "Arctic Preparedness"


def test_metric_driven_rules():
    recommendations = generate_recommendations(_itinerary(), _metrics(difficulty=80.0, comfort="extreme"), "spring")
    assert _titles(recommendations) == ["High Difficulty Trip", "Intensive Driving Schedule"]


def test_extended_trip_rule():
    recommendations = generate_recommendations(_itinerary(distances=(100.0,) * 15), _metrics(), "spring")
    assert _titles(recommendations) == ["Extended Trip Duration"]


def test_overnight_crossing_rule():
    itinerary = _itinerary(crossing=get_crossing("portsmouth-caen"))
    assert _titles(generate_recommendations(itinerary, _metrics(), "spring")) == ["Overnight Crossing"]


def test_custom_rule_table():
    rule = RecommendationRule(
        name="always",
        predicate=lambda ctx: True,
        factory=lambda ctx: PlanningRecommendation(
            type="timing",
            priority="low",
            title="Check Opening Hours",
            description="",
            action="",
            impact="",
        ),
    )
    recommendations = generate_recommendations(_itinerary(), _metrics(), "summer", rules=(*RULES, rule))
    assert _titles(recommendations)[-1] == "Check Opening Hours"
