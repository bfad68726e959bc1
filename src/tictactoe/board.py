"""Board representation and win/draw detection for N x N Tic-Tac-Toe."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from math import isqrt
from typing import List, Optional, Tuple

Player = str  # "X" or "O"

X: Player = "X"
O: Player = "O"
EMPTY = " "
PLAYERS: Tuple[Player, Player] = (X, O)

MIN_SIZE = 3

# Row-major: cell (r, c) lives at r * size + c
Board = Tuple[str, ...]
WinningLine = Tuple[int, ...]


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a board: in progress, won, or drawn."""

    winner: Optional[Player] = None
    line: WinningLine = ()
    drawn: bool = False

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.drawn

    @property
    def in_progress(self) -> bool:
        return not self.is_over


IN_PROGRESS = Outcome()
DRAW = Outcome(drawn=True)


def opponent(player: Player) -> Player:
    if player not in PLAYERS:
        raise ValueError(f"Unknown player {player!r}")
    return O if player == X else X


def _check_size(size: int) -> int:
    if size < MIN_SIZE:
        raise ValueError(f"Board size must be at least {MIN_SIZE}, got {size}")
    return size


def empty_board(size: int) -> Board:
    return (EMPTY,) * (_check_size(size) * size)


def board_size(board: Board) -> int:
    """Side length of ``board``; it must hold a perfect square of cells."""

    size = isqrt(len(board))
    if size * size != len(board):
        raise ValueError(f"Board of {len(board)} cells is not square")
    return _check_size(size)


@lru_cache(maxsize=None)
def winning_lines(size: int) -> Tuple[WinningLine, ...]:
    """
    All 2N+2 winning lines for a board of side ``size``.

    Order is fixed: rows, then columns, then the main diagonal, then the
    anti-diagonal. ``evaluate`` reports the first completed line in this order.
    """
    _check_size(size)
    lines: List[WinningLine] = []
    for r in range(size):
        lines.append(tuple(r * size + c for c in range(size)))
    for c in range(size):
        lines.append(tuple(r * size + c for r in range(size)))
    lines.append(tuple(i * (size + 1) for i in range(size)))
    lines.append(tuple(i * (size - 1) for i in range(1, size + 1)))
    return tuple(lines)


def is_full(board: Board) -> bool:
    return all(c != EMPTY for c in board)


def empty_cells(board: Board) -> List[int]:
    return [i for i, c in enumerate(board) if c == EMPTY]


def place(board: Board, index: int, player: Player) -> Board:
    """Return a copy of ``board`` with ``player`` written at ``index``."""

    if player not in PLAYERS:
        raise ValueError(f"Unknown player {player!r}")
    if not 0 <= index < len(board):
        raise ValueError(f"Cell index {index} out of range for {len(board)} cells")
    cells = list(board)
    cells[index] = player
    return tuple(cells)


def evaluate(board: Board) -> Outcome:
    # Win is checked before fullness so a winning last move never reads as a draw
    for line in winning_lines(board_size(board)):
        v = board[line[0]]
        if v != EMPTY and all(board[i] == v for i in line[1:]):
            return Outcome(winner=v, line=line)
    if is_full(board):
        return DRAW
    return IN_PROGRESS
