"""High level game state and the transitions applied to it.

``GameState`` is an immutable snapshot.  :func:`tick` and
:func:`apply_command` take a snapshot and return the next one, so the loop can
swap its single authoritative state in one assignment.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional

from .board import Board, StaticCell
from .geometry import GridSize
from .piece import ActivePiece
from .spawner import Spawner


class GameStatus(str, Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class Command(str, Enum):
    """Logical player commands."""

    MOVE_LEFT = "move_left"
    MOVE_UP = "move_up"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    ROTATE = "rotate"


_COMMAND_TRANSFORMS: Dict[Command, Callable[[ActivePiece], ActivePiece]] = {
    Command.MOVE_LEFT: ActivePiece.moved_left,
    Command.MOVE_UP: ActivePiece.moved_up,
    Command.MOVE_RIGHT: ActivePiece.moved_right,
    Command.MOVE_DOWN: ActivePiece.dropped,
    Command.ROTATE: ActivePiece.rotated,
}


@dataclass(frozen=True)
class GameState:
    """Snapshot of a game session.

    ``active`` is ``None`` once no legal spawn was found, which is the only
    terminal condition.
    """

    board: Board = field(default_factory=Board)
    active: Optional[ActivePiece] = None
    pieces: int = 0
    lines_cleared: int = 0

    @property
    def status(self) -> GameStatus:
        return GameStatus.RUNNING if self.active is not None else GameStatus.GAME_OVER

    @property
    def is_game_over(self) -> bool:
        return self.active is None

    def cells(self) -> FrozenSet[StaticCell]:
        """Return settled cells plus the active piece's cells."""

        if self.active is None:
            return self.board.cells
        return self.board.cells | self.active.static_cells()


def new_game(size: GridSize, spawner: Spawner) -> GameState:
    """Return a fresh state with an empty board and a spawned piece."""

    board = Board(size)
    return GameState(board=board, active=spawner.spawn(board))


def land(state: GameState, spawner: Spawner) -> GameState:
    """Merge the active piece into the board, clear rows and respawn."""

    if state.active is None:
        return state
    merged = state.board.merge(state.active.static_cells())
    rows = merged.complete_rows()
    board = merged.clear_rows(rows)
    return GameState(
        board=board,
        active=spawner.spawn(board),
        pieces=state.pieces + 1,
        lines_cleared=state.lines_cleared + len(rows),
    )


def tick(state: GameState, spawner: Spawner) -> GameState:
    """Apply one gravity step.

    Returns ``state`` itself once the game is over.
    """

    if state.active is None:
        return state
    dropped = state.active.dropped()
    if dropped.is_invalid(state.board):
        return land(state, spawner)
    return replace(state, active=dropped)


def apply_command(state: GameState, command: Command) -> GameState:
    """Apply ``command`` if the resulting placement is valid.

    Rejected commands and commands issued after game over return ``state``
    unchanged.

    Raises:
        ValueError: If ``command`` is not a :class:`Command`.
    """

    try:
        transform = _COMMAND_TRANSFORMS[Command(command)]
    except ValueError:
        raise ValueError(f"Unknown command: {command!r}") from None
    if state.active is None:
        return state
    candidate = transform(state.active)
    if candidate.is_invalid(state.board):
        return state
    return replace(state, active=candidate)


__all__ = [
    "Command",
    "GameState",
    "GameStatus",
    "apply_command",
    "land",
    "new_game",
    "tick",
]
