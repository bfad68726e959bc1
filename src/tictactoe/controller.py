"""Mutable shell around a ``GameSession`` that paces and cancels AI moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional
import logging
import random
import threading

from . import session as rules
from .board import Player
from .session import GameSession

logger = logging.getLogger(__name__)

DEFAULT_AI_DELAY = 0.4


@dataclass
class GameController:
    """
    Owns the single mutable reference to a session.

    Every transition runs under ``lock``. At most one AI move is pending at a
    time; any control action cancels it, and a timer that fires after its
    generation has been superseded does nothing.
    """

    state: GameSession = field(default_factory=rules.new_session)
    ai_delay: float = DEFAULT_AI_DELAY
    rng: random.Random = field(default_factory=random.Random, repr=False)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _timer: Optional[threading.Timer] = field(default=None, init=False, repr=False)
    _generation: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        with self.lock:
            self._schedule_ai_if_due()

    # ---- readers ----

    @property
    def ai_pending(self) -> bool:
        return self._timer is not None

    def snapshot(self) -> GameSession:
        with self.lock:
            return self.state

    # ---- human input ----

    def human_move(self, index: int) -> GameSession:
        with self.lock:
            # The AI owns this turn; clicks are ignored until it has moved
            if rules.is_ai_turn(self.state):
                return self.state
            self._commit(rules.apply_move(self.state, index))
            self._schedule_ai_if_due()
            return self.state

    # ---- controls ----

    def reset_round(self) -> GameSession:
        return self._control(rules.reset_round)

    def reset_all(self) -> GameSession:
        return self._control(rules.reset_all)

    def change_mode(self, mode: str) -> GameSession:
        return self._control(lambda s: rules.change_mode(s, mode))

    def change_ai_side(self, player: Player) -> GameSession:
        return self._control(lambda s: rules.change_ai_side(s, player))

    def change_board_size(self, size: int) -> GameSession:
        return self._control(lambda s: rules.change_board_size(s, size))

    def close(self) -> None:
        with self.lock:
            self._cancel_pending()

    # ---- internals ----

    def _control(
        self, transition: Callable[[GameSession], GameSession]
    ) -> GameSession:
        with self.lock:
            new_state = transition(self.state)
            self._cancel_pending()
            self.state = new_state
            self._schedule_ai_if_due()
            return self.state

    def _commit(self, new_state: GameSession) -> None:
        if new_state is self.state:
            return
        if new_state.is_over and not self.state.is_over:
            logger.info("Round over: %s", rules.status_text(new_state))
        self.state = new_state

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            logger.debug("Cancelled pending AI move")

    def _schedule_ai_if_due(self) -> None:
        if self._timer is not None or not rules.is_ai_turn(self.state):
            return
        generation = self._generation
        timer = threading.Timer(self.ai_delay, self._run_ai_turn, args=(generation,))
        timer.daemon = True
        self._timer = timer
        logger.debug("Scheduled AI move in %.2fs", self.ai_delay)
        timer.start()

    def _run_ai_turn(self, generation: int) -> None:
        with self.lock:
            if generation != self._generation:
                return
            self._timer = None
            before = self.state
            self._commit(rules.play_ai_turn(self.state, self.rng))
            if self.state is not before:
                logger.debug("AI played as %s", before.ai_player)
            self._schedule_ai_if_due()
