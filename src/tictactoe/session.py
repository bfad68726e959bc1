"""Immutable game session and the pure transitions that drive it."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple
import random

from .ai import select_move
from .board import (
    IN_PROGRESS,
    O,
    PLAYERS,
    X,
    Board,
    Outcome,
    Player,
    WinningLine,
    board_size,
    empty_board,
    evaluate,
    place,
)

HUMAN = "HUMAN"
AI = "AI"
MODES: Tuple[str, str] = (HUMAN, AI)

DEFAULT_SIZE = 3


@dataclass(frozen=True)
class Score:
    x: int = 0
    o: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> "Score":
        if outcome.winner == X:
            return replace(self, x=self.x + 1)
        if outcome.winner == O:
            return replace(self, o=self.o + 1)
        if outcome.drawn:
            return replace(self, draws=self.draws + 1)
        return self


@dataclass(frozen=True)
class GameSession:
    """
    One continuous play sequence: the current round plus the running score.

    Whose turn it is follows from the board: X opens and players alternate,
    so X is to move exactly when both symbols appear equally often.
    ``board`` defaults to an empty board of ``size``; when given, its side
    length must equal ``size``. ``outcome`` is always evaluated from the board.
    """

    size: int = DEFAULT_SIZE
    board: Optional[Board] = None
    mode: str = HUMAN
    ai_player: Player = O
    score: Score = field(default_factory=Score)
    outcome: Outcome = field(default=IN_PROGRESS, init=False)

    def __post_init__(self) -> None:
        if self.board is None:
            object.__setattr__(self, "board", empty_board(self.size))
        elif board_size(self.board) != self.size:
            raise ValueError(
                f"Board of {len(self.board)} cells does not match size {self.size}"
            )
        _check_mode(self.mode)
        _check_player(self.ai_player)
        object.__setattr__(self, "outcome", evaluate(self.board))

    @property
    def current_player(self) -> Player:
        return X if self.board.count(X) == self.board.count(O) else O

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    @property
    def winning_line(self) -> WinningLine:
        return self.outcome.line

    @property
    def is_over(self) -> bool:
        return self.outcome.is_over


def _check_mode(mode: str) -> str:
    if mode not in MODES:
        raise ValueError(f"Unknown mode {mode!r}")
    return mode


def _check_player(player: Player) -> Player:
    if player not in PLAYERS:
        raise ValueError(f"Unknown player {player!r}")
    return player


def new_session(
    size: int = DEFAULT_SIZE, mode: str = HUMAN, ai_player: Player = O
) -> GameSession:
    return GameSession(size=size, board=empty_board(size), mode=mode, ai_player=ai_player)


def apply_move(session: GameSession, index: int) -> GameSession:
    """
    Place the current player's symbol at ``index``.

    Occupied cells and finished rounds leave the session untouched (the same
    object is returned). The score moves only on the transition into a
    finished round, so it is counted once per round.
    """
    if not 0 <= index < len(session.board):
        raise ValueError(
            f"Cell index {index} out of range for a {session.size}x{session.size} board"
        )
    if session.is_over or session.board[index] in PLAYERS:
        return session

    moved = replace(session, board=place(session.board, index, session.current_player))
    if moved.is_over:
        moved = replace(moved, score=moved.score.record(moved.outcome))
    return moved


def is_ai_turn(session: GameSession) -> bool:
    return (
        session.mode == AI
        and session.outcome.in_progress
        and session.current_player == session.ai_player
    )


def play_ai_turn(
    session: GameSession, rng: Optional[random.Random] = None
) -> GameSession:
    if not is_ai_turn(session):
        return session
    idx = select_move(session.board, session.ai_player, session.size, rng)
    if idx is None:
        return session
    return apply_move(session, idx)


def reset_round(session: GameSession) -> GameSession:
    return replace(session, board=empty_board(session.size))


def reset_all(session: GameSession) -> GameSession:
    return replace(reset_round(session), score=Score())


def change_mode(session: GameSession, mode: str) -> GameSession:
    return reset_round(replace(session, mode=mode))


def change_ai_side(session: GameSession, player: Player) -> GameSession:
    return reset_round(replace(session, ai_player=player))


def change_board_size(session: GameSession, size: int) -> GameSession:
    # empty_board rejects sizes below the minimum
    return replace(session, size=size, board=empty_board(size))


def status_text(session: GameSession) -> str:
    if session.winner:
        return f"Winner: {session.winner}"
    if session.outcome.drawn:
        return "It's a draw!"
    return f"Turn: {session.current_player}"
