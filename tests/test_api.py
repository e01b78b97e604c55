import pytest
from httpx import ASGITransport, AsyncClient

from pybanker.api import create_app
from pybanker.config import EngineSettings


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    app = create_app(EngineSettings())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


def _players() -> list[dict]:
    return [
        {"id": "a", "name": "Alice Adams", "display_name": "Alice", "handicap": 0},
        {"id": "b", "name": "Bob Brown", "display_name": "Bob", "handicap": 0},
        {"id": "c", "name": "Cara Cole", "display_name": "Cara", "handicap": 0},
    ]


def _entries(a: int = 4, b: int = 5, c: int = 5) -> list[dict]:
    return [
        {"player_id": "a", "score": a},
        {"player_id": "b", "score": b},
        {"player_id": "c", "score": c},
    ]


async def _new_game(client: AsyncClient) -> dict:
    resp = await client.post(
        "/games",
        json={"course_id": 1, "players": _players(), "banker_order": ["a", "b", "c"]},
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_courses(client: AsyncClient):
    resp = await client.get("/courses")
    assert resp.status_code == 200
    courses = {course["id"]: course for course in resp.json()}
    assert len(courses) == 6
    assert courses[4]["hole_count"] == 18

    resp = await client.get("/courses/1")
    assert resp.status_code == 200
    assert len(resp.json()["holes"]) == 9

    resp = await client.get("/courses/42")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_create_game(client: AsyncClient):
    body = await _new_game(client)
    assert body["game"]["current_hole"] == 1
    assert body["current_banker_id"] == "a"
    assert body["default_wager"] == 1
    assert body["running_totals"] == {"a": 0, "b": 0, "c": 0}

    resp = await client.get(f"/games/{body['game']['id']}")
    assert resp.status_code == 200
    assert resp.json()["game"]["banker_order"] == ["a", "b", "c"]


@pytest.mark.anyio
async def test_create_game_rejects_bad_roster(client: AsyncClient):
    resp = await client.post("/games", json={"course_id": 1, "players": _players()[:1]})
    assert resp.status_code == 400

    resp = await client.post(
        "/games",
        json={"course_id": 1, "players": _players(), "banker_order": ["a", "b"]},
    )
    assert resp.status_code == 422

    resp = await client.post("/games", json={"course_id": 99, "players": _players()})
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_save_hole_and_step_back(client: AsyncClient):
    game_id = (await _new_game(client))["game"]["id"]

    resp = await client.post(f"/games/{game_id}/holes", json={"entries": _entries(), "default_wager": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["game"]["current_hole"] == 2
    assert body["current_banker_id"] == "b"
    assert body["default_wager"] == 2
    # Alice banked hole 1 and beat both opponents for 2 each.
    assert body["running_totals"] == {"a": 4, "b": -2, "c": -2}

    resp = await client.post(f"/games/{game_id}/previous")
    assert resp.status_code == 200
    body = resp.json()
    assert body["game"]["current_hole"] == 1
    assert body["current_banker_id"] == "a"
    assert "1" in body["game"]["hole_scores"]


@pytest.mark.anyio
async def test_save_hole_rejects_missing_scores(client: AsyncClient):
    game_id = (await _new_game(client))["game"]["id"]
    resp = await client.post(f"/games/{game_id}/holes", json={"entries": _entries()[:2]})
    assert resp.status_code == 400
    assert "c" in resp.json()["detail"]

    resp = await client.get(f"/games/{game_id}")
    assert resp.json()["game"]["hole_scores"] == {}


@pytest.mark.anyio
async def test_banker_override_must_be_on_roster(client: AsyncClient):
    game_id = (await _new_game(client))["game"]["id"]
    resp = await client.post(
        f"/games/{game_id}/holes",
        json={"entries": _entries(), "banker_override": "zed"},
    )
    assert resp.status_code == 422


@pytest.mark.anyio
async def test_full_round_and_summary(client: AsyncClient):
    game_id = (await _new_game(client))["game"]["id"]
    for _ in range(9):
        resp = await client.post(f"/games/{game_id}/holes", json={"entries": _entries(a=4, b=5, c=5)})
        assert resp.status_code == 200

    body = resp.json()
    assert body["game"]["status"] == "completed"
    assert body["game"]["current_hole"] == 9
    assert body["current_banker_id"] is None

    resp = await client.post(f"/games/{game_id}/holes", json={"entries": _entries()})
    assert resp.status_code == 409

    resp = await client.get(f"/games/{game_id}/summary")
    assert resp.status_code == 200
    summary = resp.json()
    assert summary["status"] == "completed"
    assert [entry["player_id"] for entry in summary["leaderboard"]][0] == "a"
    totals = {entry["player_id"]: entry["total_winnings"] for entry in summary["leaderboard"]}
    # Alice banks holes 1, 4, 7 (+2 each) and beats each other banker (+1 each on six holes).
    assert totals["a"] == 12
    assert sum(totals.values()) == 0
    assert body["running_totals"] == totals
    assert len(summary["holes"]) == 9
    assert summary["stats"] == {"holes_played": 9, "total_bet": 9, "total_matches": 18}
    scorecard = {entry["player_id"]: entry for entry in summary["scorecard"]}
    assert (scorecard["a"]["strokes"], scorecard["a"]["par"], scorecard["a"]["to_par"]) == (36, 35, 1)
    assert scorecard["c"]["to_par"] == 10


@pytest.mark.anyio
async def test_unknown_game(client: AsyncClient):
    resp = await client.get("/games/missing")
    assert resp.status_code == 404
    resp = await client.get("/games/missing/summary")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_completed_game_running_totals_match_leaderboard(client: AsyncClient):
    resp = await client.post(
        "/games",
        json={"course_id": 1, "players": _players()[:2], "banker_order": ["a", "b"]},
    )
    game_id = resp.json()["game"]["id"]
    for _ in range(9):
        resp = await client.post(
            f"/games/{game_id}/holes",
            json={"entries": _entries()[:2], "default_wager": 1, "banker_override": "a"},
        )
        assert resp.status_code == 200

    assert resp.json()["game"]["status"] == "completed"
    assert resp.json()["running_totals"] == {"a": 9, "b": -9}

    resp = await client.get(f"/games/{game_id}")
    assert resp.json()["running_totals"] == {"a": 9, "b": -9}

    summary = (await client.get(f"/games/{game_id}/summary")).json()
    totals = {entry["player_id"]: entry["total_winnings"] for entry in summary["leaderboard"]}
    assert totals == {"a": 9, "b": -9}
