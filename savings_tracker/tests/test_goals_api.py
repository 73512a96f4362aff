from __future__ import annotations

from flask.testing import FlaskClient


def goal_payload(**overrides) -> dict:
    payload = {
        "name": "Emergency fund",
        "target_amount": 1000,
        "selected_days": [1, 3, 5],
        "declared_daily_amount": 50,
        "time_value": 2,
        "time_unit": "months",
    }
    payload.update(overrides)
    return payload


def create(client: FlaskClient, **overrides) -> dict:
    resp = client.post("/api/goals", json=goal_payload(**overrides))
    assert resp.status_code == 201
    return resp.get_json()


def test_estimate_endpoint_weekly_cadence(client):
    resp = client.post(
        "/api/estimate",
        json={"goal_amount": 1000, "periodic_amount": 100, "selected_days": [1, 3, 5]},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["kind"] == "prospective"
    assert body["remaining_deposits_needed"] == 10
    assert body["total_weeks"] == 4
    assert body["total_days"] == 28
    assert body["display_text"] == "4 weeks"
    assert body["end_date"] is not None


def test_estimate_endpoint_no_estimate_is_not_an_error(client):
    resp = client.post("/api/estimate", json={"goal_amount": 1000, "periodic_amount": 0})

    assert resp.status_code == 200
    assert resp.get_json()["kind"] == "no_estimate"


def test_estimate_endpoint_rejects_out_of_range_day(client):
    resp = client.post(
        "/api/estimate",
        json={"goal_amount": 1000, "periodic_amount": 100, "selected_days": [7]},
    )

    assert resp.status_code == 400
    assert "outside" in resp.get_json()["detail"]


def test_estimate_endpoint_rejects_malformed_payload(client):
    resp = client.post("/api/estimate", json={"goal_amount": "lots"})

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_create_goal_returns_prospective_summary(client):
    body = create(client)

    assert body["is_current"] is True
    assert body["goal"]["selected_days"] == [1, 3, 5]
    assert body["deposit_count"] == 0
    assert body["estimate"]["kind"] == "prospective"
    assert body["estimate"]["remaining_deposits_needed"] == 20
    assert body["estimated_time_text"] == "2 months"
    assert body["target_period_text"] == "2 months (Your Target)"


def test_create_goal_with_bad_cadence_is_422(client):
    resp = client.post("/api/goals", json=goal_payload(selected_days=[0, 9]))

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_create_goal_requires_positive_target(client):
    resp = client.post("/api/goals", json=goal_payload(target_amount=0))

    assert resp.status_code == 422


def test_deposit_flow_end_to_end(client):
    goal = create(client, declared_daily_amount=None)
    goal_id = goal["goal"]["id"]
    assert goal["estimate"]["kind"] == "no_estimate"
    assert goal["estimated_time_text"] == "-"

    resp = client.post(f"/api/goals/{goal_id}/deposits", json={"amount": 100})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["current_savings"] == 100
    assert body["remaining_amount"] == 900
    assert body["days_remaining"] == 21
    assert body["estimated_time_text"] == "3 weeks"

    projection = client.get(f"/api/goals/{goal_id}/projection").get_json()
    assert projection["kind"] == "adaptive"
    assert projection["remaining_deposits_needed"] == 9
    assert projection["total_days"] == 21

    deposit_id = body["goal"]["deposits"][0]["id"]
    resp = client.delete(f"/api/goals/{goal_id}/deposits/{deposit_id}")
    assert resp.status_code == 200
    assert resp.get_json()["current_savings"] == 0


def test_deposit_must_be_positive(client):
    goal_id = create(client)["goal"]["id"]

    resp = client.post(f"/api/goals/{goal_id}/deposits", json={"amount": -5})

    assert resp.status_code == 422


def test_reaching_goal_reports_zero_days(client):
    goal_id = create(client)["goal"]["id"]

    body = client.post(f"/api/goals/{goal_id}/deposits", json={"amount": 1500}).get_json()

    assert body["goal_reached"] is True
    assert body["progress_percent"] == 100
    assert body["estimate"]["kind"] == "already_met"
    assert body["days_remaining"] == 0


def test_current_goal_selection(client):
    empty = client.get("/api/goals/current").get_json()
    assert empty == {"goal": None}

    first = create(client, name="First")["goal"]["id"]
    second = create(client, name="Second")["goal"]["id"]
    assert client.get("/api/goals/current").get_json()["goal"]["goal"]["id"] == second

    resp = client.post(f"/api/goals/{first}/select")
    assert resp.status_code == 200

    listing = client.get("/api/goals").get_json()
    assert listing["current_goal_id"] == first
    assert [g["goal"]["name"] for g in listing["goals"]] == ["First", "Second"]
    assert [g["is_current"] for g in listing["goals"]] == [True, False]


def test_update_and_delete_goal(client):
    goal_id = create(client)["goal"]["id"]
    client.post(f"/api/goals/{goal_id}/deposits", json={"amount": 100})

    resp = client.put(f"/api/goals/{goal_id}", json=goal_payload(name="Renamed", target_amount=2000))
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["goal"]["name"] == "Renamed"
    assert body["deposit_count"] == 1

    assert client.delete(f"/api/goals/{goal_id}").status_code == 204
    assert client.get(f"/api/goals/{goal_id}").status_code == 404


def test_unknown_goal_and_deposit_are_404(client):
    assert client.get("/api/goals/missing").status_code == 404
    assert client.get("/api/goals/missing/projection").status_code == 404
    assert client.post("/api/goals/missing/deposits", json={"amount": 5}).status_code == 404

    goal_id = create(client)["goal"]["id"]
    resp = client.delete(f"/api/goals/{goal_id}/deposits/missing")
    assert resp.status_code == 404
    assert "missing" in resp.get_json()["detail"]


def test_null_body_is_422(client):
    resp = client.post("/api/goals", data="null", content_type="application/json")

    assert resp.status_code == 422
    assert "detail" in resp.get_json()
