"""Tests for the FastAPI Tic-Tac-Toe interface."""

from __future__ import annotations

import time

from fastapi.testclient import TestClient

from tictactoe import ui
from tictactoe.ui import app


client = TestClient(app)
ui.AI_THINK_DELAY = 0.0


def _wait_for_ai(game_id: str) -> dict:
    deadline = time.monotonic() + 2.0
    while True:
        state = client.get(f"/api/game/{game_id}").json()
        if not state["aiPending"] or time.monotonic() > deadline:
            return state
        time.sleep(0.005)


def test_config_exposes_display_strings():
    response = client.get("/api/config")
    assert response.status_code == 200
    payload = response.json()
    assert payload["title"] == ui.CONFIG.app_name
    assert payload["version"] == ui.CONFIG.version


def test_create_game_and_play_row():
    response = client.post("/api/game", json={})
    assert response.status_code == 200
    payload = response.json()
    assert payload["size"] == 3
    assert payload["board"] == [""] * 9
    assert payload["currentPlayer"] == "X"
    assert payload["status"] == "Turn: X"

    game_id = payload["id"]
    for index in (0, 4, 1, 7, 2):
        state = client.post(f"/api/game/{game_id}/move", json={"index": index}).json()

    assert state["winner"] == "X"
    assert state["winningLine"] == [0, 1, 2]
    assert state["gameOver"] is True
    assert state["scores"] == {"X": 1, "O": 0, "draws": 0}


def test_occupied_cell_is_silent_noop():
    game_id = client.post("/api/game", json={}).json()["id"]
    first = client.post(f"/api/game/{game_id}/move", json={"index": 4}).json()
    again = client.post(f"/api/game/{game_id}/move", json={"index": 4})
    assert again.status_code == 200
    assert again.json() == first


def test_index_outside_board_rejected():
    game_id = client.post("/api/game", json={}).json()["id"]
    response = client.post(f"/api/game/{game_id}/move", json={"index": 9})
    assert response.status_code == 400
    assert response.json()["detail"]


def test_ai_game_blocks_and_replies():
    payload = client.post("/api/game", json={"mode": "AI", "aiPlaysAs": "O"}).json()
    game_id = payload["id"]

    client.post(f"/api/game/{game_id}/move", json={"index": 0})
    state = _wait_for_ai(game_id)
    assert state["board"].count("O") == 1
    assert state["currentPlayer"] == "X"


def test_controls_reset_board_and_keep_score():
    game_id = client.post("/api/game", json={}).json()["id"]
    for index in (0, 4, 1, 7, 2):
        client.post(f"/api/game/{game_id}/move", json={"index": index})

    state = client.post(f"/api/game/{game_id}/size", json={"size": 4}).json()
    assert state["size"] == 4
    assert state["board"] == [""] * 16
    assert state["scores"]["X"] == 1

    state = client.post(f"/api/game/{game_id}/reset-all").json()
    assert state["scores"] == {"X": 0, "O": 0, "draws": 0}


def test_ai_side_switch_lets_ai_open():
    game_id = client.post("/api/game", json={"mode": "AI"}).json()["id"]
    state = client.post(f"/api/game/{game_id}/ai-side", json={"side": "X"}).json()
    assert state["aiPlaysAs"] == "X"
    state = _wait_for_ai(game_id)
    assert state["board"].count("X") == 1


def test_rejects_unsupported_size():
    assert client.post("/api/game", json={"size": 6}).status_code == 422
    game_id = client.post("/api/game", json={}).json()["id"]
    response = client.post(f"/api/game/{game_id}/size", json={"size": 2})
    assert response.status_code == 422


def test_rejects_unknown_mode():
    game_id = client.post("/api/game", json={}).json()["id"]
    response = client.post(f"/api/game/{game_id}/mode", json={"mode": "ONLINE"})
    assert response.status_code == 422


def test_missing_game_returns_404():
    assert client.get("/api/game/missing").status_code == 404
    assert client.post("/api/game/missing/reset-round").status_code == 404


def test_delete_game():
    game_id = client.post("/api/game", json={}).json()["id"]
    assert client.delete(f"/api/game/{game_id}").status_code == 200
    assert client.get(f"/api/game/{game_id}").status_code == 404
