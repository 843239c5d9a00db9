"""Serialized game loop.

Ticks and commands arrive from two sources (a timer and the keyboard) but are
funnelled through one FIFO queue.  Each event is applied to the current
snapshot to produce the next one, and the loop's state is replaced only after
the transition has fully completed.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Optional, Union

from .config import GameConfig
from .game_state import Command, GameState, apply_command, new_game, tick
from .render import RenderSink, render_frame
from .spawner import Spawner


LOGGER = logging.getLogger(__name__)


class _Tick:
    __slots__ = ()

    def __repr__(self) -> str:
        return "TICK"


TICK = _Tick()

Event = Union[Command, _Tick]


class GameLoop:
    """Own the authoritative :class:`GameState` and apply events in order."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        spawner: Optional[Spawner] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.spawner = spawner or Spawner(seed=self.config.random_seed)
        self._events: Deque[Event] = deque()
        self._drop_timer = 0.0
        self._state = new_game(self.config.grid_size, self.spawner)
        LOGGER.info(
            "Game started on a %dx%d grid", self._state.board.width, self._state.board.height
        )
        if self._state.is_game_over:
            LOGGER.info("Game over: no legal spawn on an empty board")

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def pending(self) -> int:
        return len(self._events)

    def restart(self) -> GameState:
        """Drop queued events and start a new game."""

        self._events.clear()
        self._drop_timer = 0.0
        self._state = new_game(self.config.grid_size, self.spawner)
        LOGGER.info("Game restarted")
        return self._state

    # Event intake -----------------------------------------------------
    def post(self, event: Event) -> None:
        """Queue ``event`` to be applied by :meth:`run_pending`."""

        if not isinstance(event, _Tick):
            event = Command(event)
        self._events.append(event)

    def post_tick(self) -> None:
        self._events.append(TICK)

    def advance(self, elapsed_ms: float) -> int:
        """Account for ``elapsed_ms`` of wall time and queue the ticks it covers.

        Returns the number of ticks queued.
        """

        self._drop_timer += elapsed_ms
        queued = 0
        while self._drop_timer >= self.config.tick_interval_ms:
            self._drop_timer -= self.config.tick_interval_ms
            self.post_tick()
            queued += 1
        return queued

    # Event processing -------------------------------------------------
    def _apply(self, event: Event) -> GameState:
        state = self._state
        if isinstance(event, _Tick):
            result = tick(state, self.spawner)
            if result.pieces != state.pieces:
                self._log_landing(state, result)
            return result
        result = apply_command(state, event)
        if result is state and not state.is_game_over:
            LOGGER.debug("Rejected %s", event.value)
        return result

    def _log_landing(self, before: GameState, after: GameState) -> None:
        LOGGER.debug("Piece %d landed", after.pieces)
        cleared = after.lines_cleared - before.lines_cleared
        if cleared:
            LOGGER.info("Cleared %d row(s). Total: %d", cleared, after.lines_cleared)
        if after.is_game_over:
            LOGGER.info("Game over after %d pieces", after.pieces)

    def run_pending(self) -> GameState:
        """Apply every queued event in arrival order and return the final state."""

        while self._events:
            event = self._events.popleft()
            self._state = self._apply(event)
        return self._state

    def step(self) -> GameState:
        """Queue a single tick and process everything pending."""

        self.post_tick()
        return self.run_pending()

    def send(self, command: Command) -> GameState:
        """Queue ``command`` and process everything pending."""

        self.post(command)
        return self.run_pending()

    def render(self, sink: RenderSink) -> None:
        render_frame(self._state, sink)


__all__ = ["GameLoop", "TICK", "Event"]
