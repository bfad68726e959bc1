"""Greedy one-ply AI: win if possible, otherwise block, otherwise play at random."""

from __future__ import annotations

from typing import Optional
import random

from .board import Board, Player, board_size, empty_cells, evaluate, opponent, place


def _find_winning_cell(board: Board, player: Player) -> Optional[int]:
    # Ascending index order; the lowest completing cell wins the tie
    for idx in empty_cells(board):
        if evaluate(place(board, idx, player)).winner == player:
            return idx
    return None


def select_move(
    board: Board,
    ai_player: Player,
    size: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Optional[int]:
    """
    Pick the AI's next cell, or ``None`` when the board is full.

    Priority: complete a line for ``ai_player``, else occupy the cell that
    would complete a line for the opponent, else a uniformly random empty
    cell. There is no look-ahead past the next move.
    """
    human = opponent(ai_player)
    actual = board_size(board)
    if size is not None and size != actual:
        raise ValueError(f"Board has size {actual}, caller claims {size}")

    empties = empty_cells(board)
    if not empties:
        return None

    win_idx = _find_winning_cell(board, ai_player)
    if win_idx is not None:
        return win_idx

    block_idx = _find_winning_cell(board, human)
    if block_idx is not None:
        return block_idx

    return (rng or random).choice(empties)
