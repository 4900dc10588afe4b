import json
from pathlib import Path

import pytest

from camper_planner.models.domain import Stop, VehicleProfile
from camper_planner.services.crossings import (
    get_crossing,
    is_mainland_europe,
    is_uk_or_ireland,
    load_crossings,
    needs_crossing,
    rank_crossings,
    rank_crossings_detailed,
)
from camper_planner.services.crossings.selector import estimate_crossing, is_compatible, terminals_for

LONDON = Stop(stop_id="london", latitude=51.5, longitude=-0.1, name="London")
PARIS = Stop(stop_id="paris", latitude=48.85, longitude=2.35, name="Paris")
DUBLIN = Stop(stop_id="dublin", latitude=53.35, longitude=-6.26, name="Dublin")
MADRID = Stop(stop_id="madrid", latitude=40.42, longitude=-3.70, name="Madrid")
BERLIN = Stop(stop_id="berlin", latitude=52.52, longitude=13.40, name="Berlin")
EDINBURGH = Stop(stop_id="edinburgh", latitude=55.95, longitude=-3.19, name="Edinburgh")
NEW_YORK = Stop(stop_id="nyc", latitude=40.71, longitude=-74.0, name="New York")


@pytest.fixture(autouse=True)
def clear_crossing_cache():
    load_crossings.cache_clear()
    yield
    load_crossings.cache_clear()


def test_bundled_table_loads():
    crossings = load_crossings()
    assert len(crossings) == 12
    assert len({crossing.crossing_id for crossing in crossings}) == 12


def test_get_crossing():
    eurotunnel = get_crossing("eurotunnel")
    assert eurotunnel is not None
    assert eurotunnel.mode == "tunnel"
    assert eurotunnel.max_vehicle_length_m == 18.0
    assert get_crossing("atlantis-express") is None


def test_missing_table_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_crossings(tmp_path / "missing.json")


def test_malformed_table_raises(tmp_path: Path):
    path = tmp_path / "crossings.json"
    path.write_text(json.dumps({"id": "not-a-list"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_crossings(path)

    entry = tmp_path / "entry.json"
    entry.write_text(json.dumps([{"id": "half"}]), encoding="utf-8")
    with pytest.raises(ValueError, match="Malformed crossing entry"):
        load_crossings(entry)


def test_region_classification():
    assert is_uk_or_ireland(LONDON.latitude, LONDON.longitude)
    assert is_uk_or_ireland(DUBLIN.latitude, DUBLIN.longitude)
    assert is_mainland_europe(PARIS.latitude, PARIS.longitude)
    assert not is_mainland_europe(LONDON.latitude, LONDON.longitude)
    assert not is_uk_or_ireland(NEW_YORK.latitude, NEW_YORK.longitude)
    assert not is_mainland_europe(NEW_YORK.latitude, NEW_YORK.longitude)


def test_london_paris_needs_crossing():
    assert needs_crossing(LONDON, PARIS)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (LONDON, PARIS, True),
        (DUBLIN, MADRID, True),
        (EDINBURGH, BERLIN, True),
        (LONDON, EDINBURGH, False),
        (PARIS, BERLIN, False),
        (LONDON, NEW_YORK, False),
    ],
)
def test_needs_crossing_is_symmetric(a, b, expected):
    assert needs_crossing(a, b) is expected
    assert needs_crossing(b, a) is expected


def test_terminals_follow_travel_direction():
    crossing = get_crossing("dover-calais")
    near, far = terminals_for(crossing, LONDON)
    assert (near.name, far.name) == ("Dover", "Calais")
    near, far = terminals_for(crossing, PARIS)
    assert (near.name, far.name) == ("Calais", "Dover")


def test_estimate_adds_drive_and_crossing_time():
    crossing = get_crossing("dover-calais")
    estimate = estimate_crossing(crossing, LONDON, PARIS)
    drive = (estimate.drive_to_port_km + estimate.drive_from_port_km) / 80.0
    assert estimate.estimated_hours == pytest.approx(drive + 1.5)


def test_short_straits_rank_first_for_london_paris():
    ranked = rank_crossings(LONDON, PARIS)
    assert len(ranked) == 12
    assert [crossing.crossing_id for crossing in ranked[:2]] == ["eurotunnel", "dover-calais"]


def test_ranking_is_sorted_and_stable():
    first = rank_crossings_detailed(LONDON, PARIS)
    second = rank_crossings_detailed(LONDON, PARIS)
    assert [item.crossing.crossing_id for item in first] == [item.crossing.crossing_id for item in second]
    hours = [item.estimated_hours for item in first]
    assert hours == sorted(hours)


def test_ties_keep_table_order():
    crossing = get_crossing("dover-calais")
    ranked = rank_crossings(LONDON, PARIS, crossings=[crossing, crossing])
    assert ranked == [crossing, crossing]


def test_vehicle_filter_excludes_incompatible_crossings():
    caravan = VehicleProfile(category="caravan", length_m=7.0)
    ranked = rank_crossings(LONDON, PARIS, vehicle=caravan)
    assert "eurotunnel" not in {crossing.crossing_id for crossing in ranked}
    assert all(is_compatible(crossing, caravan) for crossing in ranked)
    assert ranked[0].crossing_id == "dover-calais"


def test_vehicle_filter_respects_length_limit():
    long_motorhome = VehicleProfile(category="motorhome", length_m=19.0)
    ranked = rank_crossings(LONDON, PARIS, vehicle=long_motorhome)
    assert "eurotunnel" not in {crossing.crossing_id for crossing in ranked}
    assert len(ranked) == 11
