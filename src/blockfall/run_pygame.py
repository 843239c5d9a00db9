"""Simple pygame front-end for the engine.

This module glues the :class:`~blockfall.loop.GameLoop` to a pygame window:
key presses become commands, the frame clock drives the gravity timer, and
every frame is drawn through a :class:`PygameSink`.

Run with: ``python -m blockfall.run_pygame``
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Dict, Optional

import pygame

from .config import CELL_EDGE, FPS, TICK_INTERVAL_MS, GameConfig
from .game_state import Command
from .geometry import GridCoordinate
from .loop import GameLoop
from .shapes import BlockColor


LOGGER = logging.getLogger(__name__)

BACKGROUND = pygame.Color("black")
OUTLINE = pygame.Color("white")

# Arrow keys move, space rotates.
KEY_COMMANDS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_UP: Command.MOVE_UP,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_SPACE: Command.ROTATE,
}


def command_for_key(key: int) -> Optional[Command]:
    """Return the command bound to ``key`` or ``None`` for unbound keys."""

    return KEY_COMMANDS.get(key)


class PygameSink:
    """Render sink drawing filled, outlined squares onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, cell_edge: int = CELL_EDGE) -> None:
        self.surface = surface
        self.cell_edge = cell_edge

    def clear_surface(self) -> None:
        self.surface.fill(BACKGROUND)

    def draw_cell(self, position: GridCoordinate, color: BlockColor) -> None:
        edge = self.cell_edge
        rect = pygame.Rect(position.x * edge, position.y * edge, edge, edge)
        pygame.draw.rect(self.surface, pygame.Color(color.value), rect)
        pygame.draw.rect(self.surface, OUTLINE, rect, 1)


def handle_key(event: pygame.event.Event, loop: GameLoop) -> None:
    """Queue the command for a key-down ``event``; other keys are ignored."""

    command = command_for_key(event.key)
    if command is not None:
        loop.post(command)


class GameRunner:
    """Manage the game loop with start/pause/resume/stop controls."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self._running = False
        self._paused = False
        self._task: asyncio.Task | None = None
        self._screen: pygame.Surface | None = None
        self._loop: GameLoop | None = None
        self._clock: pygame.time.Clock | None = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def game(self) -> GameLoop | None:
        return self._loop

    async def _run_loop(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode(
            (self.config.surface_width, self.config.surface_height)
        )
        pygame.display.set_caption("Blockfall")
        self._clock = pygame.time.Clock()

        # The grid is fixed from the surface pygame actually gave us.
        width, height = self._screen.get_size()
        config = GameConfig.from_surface(
            width,
            height,
            cell_edge=self.config.cell_edge,
            tick_interval_ms=self.config.tick_interval_ms,
            fps=self.config.fps,
            random_seed=self.config.random_seed,
        )
        self._loop = GameLoop(config)
        sink = PygameSink(self._screen, config.cell_edge)
        game_over_shown = False

        self._running = True
        while self._running:
            dt = self._clock.tick(config.fps)
            # Even when paused, process events so the window remains responsive
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN and not self._paused:
                    handle_key(event, self._loop)

            if not self._paused:
                self._loop.advance(dt)
                state = self._loop.run_pending()
                if state.is_game_over and not game_over_shown:
                    game_over_shown = True
                    pygame.display.set_caption("Blockfall - Game over")

            self._loop.render(sink)
            pygame.display.flip()

            # Yield to the host event loop to keep the UI responsive
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Game stopped")

    def start(self) -> None:
        if self._task and not self._task.done():
            LOGGER.info("Game already running")
            return
        self._paused = False
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop (plain Python); run synchronously
            asyncio.run(self._run_loop())
        else:
            self._task = loop.create_task(self._run_loop())

    def pause(self) -> None:
        if not self._running:
            LOGGER.info("Pause ignored: game not running")
            return
        self._paused = True
        LOGGER.info("Paused")

    def resume(self) -> None:
        if not self._running:
            LOGGER.info("Resume ignored: game not running")
            return
        self._paused = False
        LOGGER.info("Resumed")

    async def stop_async(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._task:
            await self._task

    def stop(self) -> None:
        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        # The loop checks the flag once per frame and exits promptly.
        self._running = False


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Blockfall in a pygame window.")
    parser.add_argument("--width", type=int, default=200, help="Window width in pixels.")
    parser.add_argument("--height", type=int, default=400, help="Window height in pixels.")
    parser.add_argument("--cell-edge", type=int, default=CELL_EDGE, help="Cell edge in pixels.")
    parser.add_argument(
        "--tick-ms",
        type=float,
        default=TICK_INTERVAL_MS,
        help="Milliseconds between gravity steps.",
    )
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for spawning.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    config = GameConfig(
        surface_width=args.width,
        surface_height=args.height,
        cell_edge=args.cell_edge,
        tick_interval_ms=args.tick_ms,
        fps=args.fps,
        random_seed=args.seed,
    )
    GameRunner(config).start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
