from datetime import datetime, timedelta

from fastapi.testclient import TestClient


def test_generate_adapt_complete_flow(client: TestClient, user, make_athlete, make_result, auth_headers):
    athlete = make_athlete(user)

    # Generate
    r_gen = client.post(
        "/api/plans/generate",
        json={"athlete_id": athlete.id, "sport": "football", "difficulty": "intermediate"},
        headers=auth_headers,
    )
    assert r_gen.status_code == 201, r_gen.text
    plan = r_gen.json()
    assert plan["weekly_volume"] == 180
    assert plan["weekly_intensity"] == 6
    assert len(plan["workouts"]) == 12
    assert plan["workouts"][0]["exercises"][0] == {
        "name": "Squats",
        "sets": 3,
        "reps": 12,
        "duration": None,
        "intensity": "moderate",
        "notes": None,
    }

    # Active plan
    r_active = client.get(f"/api/plans/athlete/{athlete.id}/active", headers=auth_headers)
    assert r_active.status_code == 200
    assert r_active.json()["id"] == plan["id"]

    # Not enough data to adapt yet
    r_early = client.post(f"/api/plans/{plan['id']}/adapt", headers=auth_headers)
    assert r_early.status_code == 400
    assert r_early.json() == {"detail": "not enough data"}

    # Adapt after improving results
    now = datetime.utcnow()
    make_result(athlete, 50, now - timedelta(days=6), percentile=55)
    make_result(athlete, 56, now - timedelta(days=1), percentile=65)
    r_adapt = client.post(f"/api/plans/{plan['id']}/adapt", headers=auth_headers)
    assert r_adapt.status_code == 200, r_adapt.text
    adapted = r_adapt.json()
    assert adapted["plan"]["weekly_intensity"] == 6.6
    assert adapted["plan"]["weekly_volume"] == 198
    assert adapted["adaptation_summary"]["trend"] == "improving"
    assert adapted["plan"]["performance_history"][0]["test_type"] == "squats"

    # Complete a workout
    workout_id = plan["workouts"][0]["id"]
    r_done = client.post(f"/api/plans/workouts/{workout_id}/complete", headers=auth_headers)
    assert r_done.status_code == 200
    assert r_done.json()["completed"] is True


def test_generate_validation_errors(client: TestClient, user, make_athlete, auth_headers):
    athlete = make_athlete(user)
    base = {"athlete_id": athlete.id, "sport": "football", "difficulty": "elite"}

    r = client.post("/api/plans/generate", json=dict(base, weekly_volume=30), headers=auth_headers)
    assert r.status_code == 400
    assert r.json() == {"detail": "weekly_volume_out_of_range"}

    r = client.post("/api/plans/generate", json=dict(base, available_days=[2, 2]), headers=auth_headers)
    assert r.status_code == 400

    r = client.post("/api/plans/generate", json=dict(base, difficulty="legendary"), headers=auth_headers)
    assert r.status_code == 422


def test_regenerating_keeps_one_active_plan(client: TestClient, user, make_athlete, auth_headers):
    athlete = make_athlete(user)
    body = {"athlete_id": athlete.id, "sport": "football", "difficulty": "beginner"}

    first = client.post("/api/plans/generate", json=body, headers=auth_headers).json()
    second = client.post(
        "/api/plans/generate", json=dict(body, available_days=[6, 7]), headers=auth_headers
    ).json()

    active = client.get(f"/api/plans/athlete/{athlete.id}/active", headers=auth_headers).json()
    assert active["id"] == second["id"] != first["id"]
    assert len(active["workouts"]) == 8


def test_days_scheduled_in_ascending_order(client: TestClient, user, make_athlete, auth_headers):
    athlete = make_athlete(user)
    body = {"athlete_id": athlete.id, "sport": "football", "difficulty": "beginner", "available_days": [5, 1, 3]}

    plan = client.post("/api/plans/generate", json=body, headers=auth_headers).json()

    first_week = [w for w in plan["workouts"] if w["week_number"] == 1]
    assert [(w["day_number"], w["workout_type"]) for w in first_week] == [
        (1, "strength"),
        (3, "cardio"),
        (5, "skill"),
    ]


def test_foreign_athlete_and_plan(client: TestClient, make_user, make_athlete, auth_headers):
    athlete = make_athlete(make_user())

    r = client.post(
        "/api/plans/generate",
        json={"athlete_id": athlete.id, "sport": "football", "difficulty": "beginner"},
        headers=auth_headers,
    )
    assert r.status_code == 404

    assert client.post("/api/plans/999/adapt", headers=auth_headers).status_code == 404
    assert client.get(f"/api/plans/athlete/{athlete.id}/active", headers=auth_headers).status_code == 404


def test_dashboard_endpoints(client: TestClient, user, make_athlete, make_result, auth_headers):
    athlete = make_athlete(user, sport="rugby")
    make_result(athlete, 72, datetime(2026, 3, 1), average_form_score=88)

    r_stats = client.get("/api/dashboard/stats", headers=auth_headers)
    assert r_stats.status_code == 200
    assert r_stats.json()["total_athletes"] == 1

    r_board = client.get("/api/dashboard/leaderboard", params={"sport": "rugby"}, headers=auth_headers)
    assert r_board.status_code == 200
    entries = r_board.json()["entries"]
    assert entries[0]["rank"] == 1
    assert entries[0]["score"] == 72
    assert entries[0]["athlete"]["name"] == "Alex Runner"

    r_form = client.get("/api/dashboard/leaderboard/squats", headers=auth_headers)
    assert r_form.json()["ranking_key"] == "average_form_score"
    assert r_form.json()["entries"][0]["score"] == 88

    r_plank = client.get("/api/dashboard/leaderboard/plank", headers=auth_headers)
    assert r_plank.status_code == 400

    r_ach = client.get("/api/dashboard/achievements", headers=auth_headers)
    assert r_ach.status_code == 200
    assert r_ach.json() == [
        {"athlete_id": athlete.id, "title": "Top Performer", "athlete": "Alex Runner", "sport": "rugby", "score": 72}
    ]


def test_health(client: TestClient):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy"}
