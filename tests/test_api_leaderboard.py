"""HTTP tests for /api/score, /api/rank and /api/leaderboard."""

from sqlalchemy.exc import OperationalError

from flappy_face.api.dependencies import get_leaderboard_store
from flappy_face.app import app


def _submit(client, username, score):
    return client.post("/api/score", json={"username": username, "score": score})


def test_submit_score_returns_best(client, clock):
    response = _submit(client, "  Alice ", 10.7)
    assert response.status_code == 200
    assert response.json() == {"ok": True, "username": "alice", "best": 10}


def test_example_flow(client, clock):
    assert _submit(client, "alice", 10).json()["best"] == 10
    assert _submit(client, "alice", 5).json()["best"] == 10
    assert _submit(client, "bob", 15).json()["best"] == 15

    rows = client.get("/api/leaderboard").json()["rows"]
    assert rows[0]["username"] == "bob"
    assert rows[0]["best"] == 15
    assert rows[0]["updated_at"].endswith("Z")

    rank = client.get("/api/rank", params={"username": "alice"}).json()
    assert rank == {"ok": True, "username": "alice", "rank": 2, "total": 2, "best": 10}


def test_leaderboard_row_shape(client, clock):
    _submit(client, "alice", 3)
    rows = client.get("/api/leaderboard").json()["rows"]
    assert rows == [
        {"username": "alice", "best": 3, "updated_at": "2024-01-01T00:00:01.000Z"}
    ]


def test_leaderboard_limit_is_clamped(client, clock):
    for index in range(55):
        _submit(client, f"user{index}", index)

    assert len(client.get("/api/leaderboard").json()["rows"]) == 20
    assert len(client.get("/api/leaderboard", params={"limit": 3}).json()["rows"]) == 3
    assert len(client.get("/api/leaderboard", params={"limit": 0}).json()["rows"]) == 1
    assert len(client.get("/api/leaderboard", params={"limit": 999}).json()["rows"]) == 50
    assert len(client.get("/api/leaderboard", params={"limit": "lots"}).json()["rows"]) == 20


def test_rank_for_unknown_user_reports_total(client, clock):
    _submit(client, "alice", 1)
    _submit(client, "bob", 2)
    body = client.get("/api/rank", params={"username": "carol"}).json()
    assert body == {"ok": True, "username": "carol", "rank": None, "total": 2, "best": None}


def test_total_counts_distinct_normalized_usernames(client, clock):
    for username in ["Alice", "alice", " ALICE ", "bob"]:
        _submit(client, username, 1)
    assert client.get("/api/rank", params={"username": "bob"}).json()["total"] == 2


def test_tie_break_prefers_first_to_reach_score(client, clock):
    _submit(client, "alice", 10)
    _submit(client, "bob", 10)
    _submit(client, "alice", 10)
    assert client.get("/api/rank", params={"username": "alice"}).json()["rank"] == 1
    assert client.get("/api/rank", params={"username": "bob"}).json()["rank"] == 2


def test_invalid_scores_are_rejected(client):
    for payload in [
        {"username": "alice", "score": -1},
        {"username": "alice", "score": "abc"},
        {"username": "alice", "score": True},
        {"username": "alice"},
        {"username": "", "score": 5},
        {"score": 5},
    ]:
        response = client.post("/api/score", json=payload)
        assert response.status_code == 400, payload
        body = response.json()
        assert body["ok"] is False
        assert body["error"]

    assert client.get("/api/leaderboard").json()["rows"] == []


def test_malformed_body_is_a_400(client):
    assert client.post("/api/score", json=[1, 2]).status_code == 400
    response = client.post(
        "/api/score", content=b"not json", headers={"content-type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["ok"] is False


def test_rank_requires_username(client):
    response = client.get("/api/rank")
    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "username required"}


def test_storage_failure_is_a_generic_500(client):
    def broken_store():
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    app.dependency_overrides[get_leaderboard_store] = broken_store
    response = client.get("/api/leaderboard")
    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "internal server error"}
