from datetime import date, datetime, timedelta

from fastapi.testclient import TestClient

from fitassess.models import TestType


ATHLETE = {
    "first_name": "Sam",
    "last_name": "Jumper",
    "date_of_birth": "2004-05-01",
    "gender": "female",
    "sport": "volleyball",
    "school": "North High",
}


def test_requires_authentication(client: TestClient):
    r = client.get("/api/athletes")
    assert r.status_code == 401


def test_rejects_bad_token(client: TestClient, user, make_token):
    r = client.get("/api/athletes", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401

    refresh = make_token(user.id, token_type="refresh")
    r = client.get("/api/athletes", headers={"Authorization": f"Bearer {refresh}"})
    assert r.status_code == 401

    forged = make_token(user.id, secret="other-secret")
    r = client.get("/api/athletes", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401


def test_athlete_crud_flow(client: TestClient, auth_headers):
    # Create
    r_create = client.post("/api/athletes", json=ATHLETE, headers=auth_headers)
    assert r_create.status_code == 201, r_create.text
    created = r_create.json()
    assert created["first_name"] == "Sam"
    assert created["is_active"] is True
    aid = created["id"]

    # List
    r_list = client.get("/api/athletes", headers=auth_headers)
    assert [a["id"] for a in r_list.json()] == [aid]

    # Search
    r_search = client.get("/api/athletes", params={"search": "jump"}, headers=auth_headers)
    assert [a["id"] for a in r_search.json()] == [aid]

    # Update
    r_upd = client.patch(f"/api/athletes/{aid}", json={"club": "Spikers"}, headers=auth_headers)
    assert r_upd.status_code == 200
    assert r_upd.json()["club"] == "Spikers"
    assert r_upd.json()["sport"] == "volleyball"

    # Soft delete
    r_del = client.delete(f"/api/athletes/{aid}", headers=auth_headers)
    assert r_del.status_code == 204
    assert client.get("/api/athletes", headers=auth_headers).json() == []
    r_all = client.get("/api/athletes", params={"include_inactive": True}, headers=auth_headers)
    assert r_all.json()[0]["is_active"] is False

    # Restore
    r_restore = client.post(f"/api/athletes/{aid}/restore", headers=auth_headers)
    assert r_restore.status_code == 200
    assert r_restore.json()["is_active"] is True

    # Restoring an active athlete is not possible
    r_again = client.post(f"/api/athletes/{aid}/restore", headers=auth_headers)
    assert r_again.status_code == 404


def test_future_birth_date_rejected(client: TestClient, auth_headers):
    payload = dict(ATHLETE, date_of_birth="2999-01-01")
    r = client.post("/api/athletes", json=payload, headers=auth_headers)
    assert r.status_code == 422


def test_future_birth_date_rejected_on_update(client: TestClient, user, make_athlete, auth_headers):
    athlete = make_athlete(user)
    future = (date.today() + timedelta(days=400)).isoformat()

    r = client.patch(f"/api/athletes/{athlete.id}", json={"date_of_birth": future}, headers=auth_headers)
    assert r.status_code == 422

    r = client.get(f"/api/athletes/{athlete.id}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["date_of_birth"] == "2000-01-01"


def test_other_users_athlete_is_hidden(client: TestClient, make_user, make_athlete, auth_headers):
    stranger = make_user()
    athlete = make_athlete(stranger)

    assert client.get(f"/api/athletes/{athlete.id}", headers=auth_headers).status_code == 404
    r = client.patch(f"/api/athletes/{athlete.id}", json={"club": "x"}, headers=auth_headers)
    assert r.status_code == 404
    assert r.json() == {"detail": "athlete_not_found"}


def test_athlete_stats(client: TestClient, user, make_athlete, make_result, auth_headers):
    athlete = make_athlete(user)
    make_result(athlete, 60, datetime(2026, 3, 1), average_form_score=80)
    make_result(athlete, 70, datetime(2026, 3, 2), average_form_score=90)
    make_result(athlete, 50, datetime(2026, 3, 3), test_type=TestType.PLANK, average_form_score=75)

    r = client.get(f"/api/athletes/{athlete.id}/stats", headers=auth_headers)

    assert r.status_code == 200
    stats = r.json()
    assert stats["total_tests"] == 3
    assert stats["test_types"] == 2
    squats = next(s for s in stats["by_test_type"] if s["test_type"] == "squats")
    assert squats["total_tests"] == 2
    assert squats["average_form_score"] == 85
    assert squats["total_reps"] == 40
