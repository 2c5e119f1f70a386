"""
Move legality for the sliding-tile merging game: which directions would change a board.
"""

from typing import Sequence

from numpy import ndarray

from mergegrid.core.board import Board, Direction, as_board, rotate


def _slides_left(cells: ndarray) -> bool:
    """Whether a leftward slide changes the grid: a tile right of an empty cell, or an equal pair."""
    near, far = cells[:, :-1], cells[:, 1:]
    return bool(((near == 0) & (far != 0)).any() or ((near != 0) & (near == far)).any())


def legal_directions_mask(board: Board | ndarray | Sequence[Sequence[int]]) -> dict[Direction, bool]:
    """
    Get the legality of all four directions.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The board to inspect.

    Returns
    -------
    dict[Direction, bool]
        True for each direction whose slide would change the board.

    Notes
    -----
    Each direction is checked as a leftward slide after the same pre-rotation ``apply_move`` uses.
    """
    board = as_board(board)
    return {direction: _slides_left(rotate(board, direction.rotations[0]).cells) for direction in Direction}


def can_move(board: Board | ndarray | Sequence[Sequence[int]], direction: Direction | int | str) -> bool:
    """
    Check if a slide in one direction would change the board.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The board to inspect.
    direction : Direction | int | str
        The direction to check.

    Returns
    -------
    bool
        True if a tile can slide into an empty cell or merge with an equal neighbour in that direction.
    """
    return legal_directions_mask(board)[Direction.parse(direction)]


def legal_directions(board: Board | ndarray | Sequence[Sequence[int]]) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The board to inspect.

    Returns
    -------
    list[Direction]
        Legal directions, in ``Direction`` order.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if mask[direction]]


def illegal_directions(board: Board | ndarray | Sequence[Sequence[int]]) -> list[Direction]:
    """
    Determine the directions that leave the board unchanged.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The board to inspect.

    Returns
    -------
    list[Direction]
        Blocked directions, in ``Direction`` order.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if not mask[direction]]
