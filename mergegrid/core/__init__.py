# -*- coding: utf-8 -*-
"""
This module provides the rules of a sliding-tile merging game.

It includes the immutable board and the move directions, row reduction, directional moves, tile spawning,
the terminal check and per-direction move legality.
"""

from .board import Board, Direction, as_board, create_empty_board, rotate
from .gameboard import (
    MoveResult,
    apply_move,
    has_legal_move,
    is_done,
    make_rng,
    new_game,
    preview_moves,
    reduce_row,
    slide_and_merge,
    spawn_outcomes,
    spawn_tile,
)
from .gamemove import can_move, illegal_directions, legal_directions, legal_directions_mask

__all__ = [
    "Board",
    "Direction",
    "MoveResult",
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
    "legal_directions_mask",
]
