# -*- coding: utf-8 -*-
"""
Rule engine for a 2048-style sliding-tile merging puzzle.
"""

from .config import EngineConfig, default_config
from .core import (
    Board,
    Direction,
    MoveResult,
    apply_move,
    as_board,
    can_move,
    create_empty_board,
    has_legal_move,
    illegal_directions,
    is_done,
    legal_directions,
    make_rng,
    new_game,
    preview_moves,
    reduce_row,
    rotate,
    slide_and_merge,
    spawn_outcomes,
    spawn_tile,
)
from .envs import GameOverError, GameSession, GameState, StepResult

__version__ = "1.0.0"

__all__ = [
    "Board",
    "Direction",
    "MoveResult",
    "EngineConfig",
    "default_config",
    "as_board",
    "create_empty_board",
    "rotate",
    "reduce_row",
    "slide_and_merge",
    "apply_move",
    "preview_moves",
    "spawn_tile",
    "spawn_outcomes",
    "new_game",
    "make_rng",
    "has_legal_move",
    "is_done",
    "can_move",
    "legal_directions",
    "illegal_directions",
    "GameSession",
    "GameState",
    "StepResult",
    "GameOverError",
]
