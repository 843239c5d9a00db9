"""Rules engine for a falling-block puzzle game."""

from .board import Board, StaticCell
from .config import GameConfig
from .game_state import Command, GameState, GameStatus, apply_command, new_game, tick
from .geometry import GridCoordinate, GridSize
from .loop import GameLoop
from .piece import ActivePiece
from .render import RenderSink, format_grid, render_frame, render_grid
from .rotation import IDENTITY, ORIENTATIONS, QUARTER_TURN, next_orientation
from .shapes import SHAPE_TEMPLATES, BlockColor, ShapeTemplate
from .spawner import Spawner, enumerate_legal_placements

__all__ = [
    "ActivePiece",
    "BlockColor",
    "Board",
    "Command",
    "GameConfig",
    "GameLoop",
    "GameState",
    "GameStatus",
    "GridCoordinate",
    "GridSize",
    "IDENTITY",
    "ORIENTATIONS",
    "QUARTER_TURN",
    "RenderSink",
    "SHAPE_TEMPLATES",
    "ShapeTemplate",
    "Spawner",
    "StaticCell",
    "apply_command",
    "enumerate_legal_placements",
    "format_grid",
    "new_game",
    "next_orientation",
    "render_frame",
    "render_grid",
    "tick",
]
