import pytest
from fastapi.testclient import TestClient

from camper_planner.main import create_app
from camper_planner.services.crossings import load_crossings

LONDON = {"latitude": 51.5074, "longitude": -0.1278}
PARIS = {"latitude": 48.8566, "longitude": 2.3522}


def _stop(stop_id: str, point: dict, role: str = "intermediate") -> dict:
    return {"stop_id": stop_id, "name": stop_id.title(), "role": role, **point}


@pytest.fixture(autouse=True)
def clear_crossing_cache():
    load_crossings.cache_clear()
    yield
    load_crossings.cache_clear()


@pytest.fixture
def api_client() -> TestClient:
    return TestClient(create_app())


def test_health(api_client: TestClient):
    response = api_client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root_lists_service(api_client: TestClient):
    payload = api_client.get("/").json()
    assert payload["status"] == "running"
    assert payload["health"] == "/api/health"


def test_plan_london_to_paris(api_client: TestClient):
    response = api_client.post(
        "/api/plans",
        json={
            "stops": [_stop("london", LONDON, "start"), _stop("paris", PARIS, "end")],
            "vehicle": {"category": "motorhome", "length_m": 7.0, "weight_kg": 3400},
            "start_date": "2025-07-01",
            "crossing_id": "dover-calais",
        },
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["season"] == "summer"
    assert payload["crossing_id"] == "dover-calais"
    assert payload["total_days"] == len(payload["stages"]) + payload["rest_days"]
    assert payload["stages"][0]["day_type"] == "crossing"
    assert payload["stages"][0]["date"] == "2025-07-01"
    assert payload["limits"]["max_daily_distance_km"] == 300.0
    assert payload["seasonal_factors"]["season"] == "summer"
    assert 0 <= payload["feasibility_score"] <= 100
    assert payload["metrics"]["suitability"]["experienced"] is True


def test_plan_with_single_stop_is_bad_request(api_client: TestClient):
    response = api_client.post("/api/plans", json={"stops": [_stop("london", LONDON)]})
    assert response.status_code == 400
    assert "at least two stops" in response.json()["detail"]


def test_plan_with_unknown_crossing_is_bad_request(api_client: TestClient):
    response = api_client.post(
        "/api/plans",
        json={"stops": [_stop("london", LONDON), _stop("paris", PARIS)], "crossing_id": "atlantis-express"},
    )
    assert response.status_code == 400
    assert "atlantis-express" in response.json()["detail"]


def test_plan_with_mismatched_leg_distances_is_bad_request(api_client: TestClient):
    response = api_client.post(
        "/api/plans",
        json={"stops": [_stop("london", LONDON), _stop("paris", PARIS)], "leg_distances_km": [100.0, 200.0]},
    )
    assert response.status_code == 400


def test_plan_rejects_out_of_range_latitude(api_client: TestClient):
    response = api_client.post(
        "/api/plans",
        json={"stops": [_stop("london", LONDON), _stop("nowhere", {"latitude": 95.0, "longitude": 0.0})]},
    )
    assert response.status_code == 422


def test_export_plan_as_csv(api_client: TestClient):
    response = api_client.post(
        "/api/plans/export",
        json={"stops": [_stop("london", LONDON), _stop("paris", PARIS)], "leg_distances_km": [250.0]},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().splitlines()
    assert lines[0].startswith("day,date,day_type,start,end,distance_km")
    assert len(lines) == 2


def test_list_crossings(api_client: TestClient):
    response = api_client.get("/api/crossings")
    assert response.status_code == 200
    crossings = response.json()["crossings"]
    assert len(crossings) == 12
    assert crossings[0]["crossing_id"] == "dover-calais"


def test_check_crossing(api_client: TestClient):
    response = api_client.post("/api/crossings/check", json={"start": LONDON, "end": PARIS})
    assert response.status_code == 200
    assert response.json() == {
        "needs_crossing": True,
        "start_region": "uk_ireland",
        "end_region": "mainland_europe",
    }


def test_rank_crossings_filters_by_vehicle(api_client: TestClient):
    response = api_client.post(
        "/api/crossings/rank",
        json={"start": LONDON, "end": PARIS, "vehicle": {"category": "caravan"}},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["needs_crossing"] is True
    ids = [crossing["crossing_id"] for crossing in payload["crossings"]]
    assert "eurotunnel" not in ids
    hours = [crossing["estimated_hours"] for crossing in payload["crossings"]]
    assert hours == sorted(hours)
