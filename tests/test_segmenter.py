from datetime import date

import pytest

from camper_planner.errors import PlanningValidationError
from camper_planner.models.domain import DrivingLimits, Stop
from camper_planner.services.geospatial import distance_km
from camper_planner.services.planning.segmenter import build_legs, segment_stages


def _limits(max_km: float = 300.0, speed: float = 65.0) -> DrivingLimits:
    return DrivingLimits(
        max_daily_distance_km=max_km,
        max_daily_driving_hours=6.0,
        recommended_break_interval_hours=2.0,
        break_duration_minutes=20.0,
        average_speed_kmh=speed,
    )


def _stops(count: int) -> list[Stop]:
    return [
        Stop(stop_id=f"S{index}", latitude=45.0 + index, longitude=7.0, name=f"Town {index}")
        for index in range(count)
    ]


def test_fewer_than_two_stops_rejected():
    with pytest.raises(PlanningValidationError, match="at least two stops"):
        segment_stages(_stops(1), _limits())


def test_leg_distance_count_must_match():
    with pytest.raises(PlanningValidationError):
        build_legs(_stops(3), [100.0])


def test_negative_leg_distance_rejected():
    with pytest.raises(PlanningValidationError):
        build_legs(_stops(2), [-1.0])


def test_greedy_closes_day_before_exceeding_limit():
    stages = segment_stages(_stops(5), _limits(), [100.0, 100.0, 150.0, 50.0])
    assert [stage.distance_km for stage in stages] == [200.0, 200.0]
    assert stages[0].end.stop_id == "S2"
    assert stages[1].start.stop_id == "S2"
    assert [stop.stop_id for stop in stages[0].waypoints] == ["S1", "S2"]


def test_short_final_day_is_not_rebalanced():
    stages = segment_stages(_stops(3), _limits(), [290.0, 20.0])
    assert [stage.distance_km for stage in stages] == [290.0, 20.0]


def test_oversized_leg_becomes_single_day():
    stages = segment_stages(_stops(2), _limits(), [900.0])
    assert len(stages) == 1
    assert stages[0].distance_km == 900.0


def test_driving_hours_follow_average_speed():
    stages = segment_stages(_stops(2), _limits(speed=50.0), [200.0])
    assert stages[0].driving_hours == pytest.approx(4.0)


def test_great_circle_distances_are_conserved():
    stops = _stops(6)
    stages = segment_stages(stops, _limits())
    expected = sum(distance_km(a, b) for a, b in zip(stops, stops[1:]))
    assert sum(stage.distance_km for stage in stages) == pytest.approx(expected, abs=1e-6)


def test_days_and_dates_are_contiguous():
    stages = segment_stages(_stops(6), _limits(), [250.0] * 5, start_date=date(2025, 6, 1))
    assert [stage.day for stage in stages] == [1, 2, 3, 4, 5]
    assert stages[0].date == date(2025, 6, 1)
    assert stages[-1].date == date(2025, 6, 5)
