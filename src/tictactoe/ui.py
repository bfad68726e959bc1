"""FastAPI JSON interface for playing Tic-Tac-Toe from a browser front end."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Callable, Dict, List, Literal, Optional, Tuple

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import load_config
from .controller import GameController
from .session import DEFAULT_SIZE, GameSession, new_session, status_text

logger = logging.getLogger(__name__)

CONFIG = load_config()

ALLOWED_SIZES: Tuple[int, ...] = (3, 4, 5)
AI_THINK_DELAY: float = CONFIG.ai_delay

SESSIONS: Dict[str, GameController] = {}
SESSIONS_LOCK = threading.Lock()

app = FastAPI(
    title=CONFIG.app_name,
    version=CONFIG.version,
    description="Play Tic-Tac-Toe locally against a friend or a simple AI",
)


def _ensure_supported_size(value: int) -> int:
    if value not in ALLOWED_SIZES:
        raise ValueError(
            f"Unsupported board size {value}. "
            f"Choose one of {', '.join(map(str, ALLOWED_SIZES))}."
        )
    return value


class NewGameRequest(BaseModel):
    """Request payload for starting a new session."""

    model_config = ConfigDict(populate_by_name=True)

    size: int = Field(default=DEFAULT_SIZE, description="Board side length")
    mode: Literal["HUMAN", "AI"] = "HUMAN"
    ai_plays_as: Literal["X", "O"] = Field(default="O", alias="aiPlaysAs")

    @field_validator("size")
    @classmethod
    def ensure_supported_size(cls, value: int) -> int:
        return _ensure_supported_size(value)


class MoveRequest(BaseModel):
    index: int = Field(ge=0, description="Row-major cell index")


class ModeRequest(BaseModel):
    mode: Literal["HUMAN", "AI"]


class SideRequest(BaseModel):
    side: Literal["X", "O"]


class SizeRequest(BaseModel):
    size: int

    @field_validator("size")
    @classmethod
    def ensure_supported_size(cls, value: int) -> int:
        return _ensure_supported_size(value)


def _create_session(request: NewGameRequest) -> Tuple[str, GameController]:
    """Create a new controller and register it for later access."""

    state = new_session(request.size, request.mode, request.ai_plays_as)
    controller = GameController(state=state, ai_delay=AI_THINK_DELAY)
    game_id = uuid.uuid4().hex
    with SESSIONS_LOCK:
        SESSIONS[game_id] = controller
    logger.info(
        "Created game %s (%dx%d, %s)", game_id, request.size, request.size, request.mode
    )
    return game_id, controller


def _get_session(game_id: str) -> GameController:
    with SESSIONS_LOCK:
        controller = SESSIONS.get(game_id)
    if controller is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return controller


def _serialize_session(game_id: str, controller: GameController) -> Dict[str, object]:
    with controller.lock:
        state: GameSession = controller.state
        pending = controller.ai_pending
    board: List[str] = [c if c in ("X", "O") else "" for c in state.board]
    return {
        "id": game_id,
        "size": state.size,
        "board": board,
        "currentPlayer": state.current_player,
        "mode": state.mode,
        "aiPlaysAs": state.ai_player,
        "winner": state.winner,
        "winningLine": list(state.winning_line),
        "drawn": state.outcome.drawn,
        "gameOver": state.is_over,
        "status": status_text(state),
        "scores": {"X": state.score.x, "O": state.score.o, "draws": state.score.draws},
        "aiPending": pending,
    }


def _apply(
    game_id: str, action: Callable[[GameController], object]
) -> Dict[str, object]:
    controller = _get_session(game_id)
    try:
        action(controller)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _serialize_session(game_id, controller)


@app.get("/api/config")
def get_config() -> Dict[str, str]:
    return {
        "title": CONFIG.app_name,
        "version": CONFIG.version,
        "environment": CONFIG.environment,
    }


@app.post("/api/game")
def create_game(request: NewGameRequest) -> Dict[str, object]:
    game_id, controller = _create_session(request)
    return _serialize_session(game_id, controller)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    return _serialize_session(game_id, _get_session(game_id))


@app.delete("/api/game/{game_id}")
def delete_game(game_id: str) -> Dict[str, str]:
    with SESSIONS_LOCK:
        controller: Optional[GameController] = SESSIONS.pop(game_id, None)
    if controller is None:
        raise HTTPException(status_code=404, detail="Game not found")
    controller.close()
    logger.info("Dropped game %s", game_id)
    return {"id": game_id}


@app.post("/api/game/{game_id}/move")
def make_move(game_id: str, request: MoveRequest) -> Dict[str, object]:
    return _apply(game_id, lambda c: c.human_move(request.index))


@app.post("/api/game/{game_id}/reset-round")
def reset_round(game_id: str) -> Dict[str, object]:
    return _apply(game_id, lambda c: c.reset_round())


@app.post("/api/game/{game_id}/reset-all")
def reset_all(game_id: str) -> Dict[str, object]:
    return _apply(game_id, lambda c: c.reset_all())


@app.post("/api/game/{game_id}/mode")
def change_mode(game_id: str, request: ModeRequest) -> Dict[str, object]:
    return _apply(game_id, lambda c: c.change_mode(request.mode))


@app.post("/api/game/{game_id}/ai-side")
def change_ai_side(game_id: str, request: SideRequest) -> Dict[str, object]:
    return _apply(game_id, lambda c: c.change_ai_side(request.side))


@app.post("/api/game/{game_id}/size")
def change_board_size(game_id: str, request: SizeRequest) -> Dict[str, object]:
    return _apply(game_id, lambda c: c.change_board_size(request.size))
