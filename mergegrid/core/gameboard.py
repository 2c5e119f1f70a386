"""
Core rules of the sliding-tile merging game: row reduction, directional moves, tile spawning and the
terminal check.
"""

import logging
from typing import NamedTuple, Sequence

from numpy import any as np_any
from numpy import argwhere, asarray, int64, ndarray, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from mergegrid.config import EngineConfig, default_config
from mergegrid.core.board import Board, Direction, as_board, create_empty_board, rotate

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Module-level generator used when the caller doesn't inject one.
_GENERATOR = default_rng(PCG64DXSM())

# ##>: Rules used when the caller doesn't pass a configuration.
_DEFAULT_CONFIG = default_config()


class MoveResult(NamedTuple):
    """
    Outcome of a slide.

    Attributes
    ----------
    board : Board
        The board after sliding and merging, before any spawn.
    score_delta : int
        Sum of the tiles created by merges during the slide.
    """

    board: Board
    score_delta: int


def make_rng(seed: int | None = None) -> Generator:
    """
    Create a random generator for spawning tiles.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible games.

    Returns
    -------
    Generator
        A PCG64DXSM-backed generator.
    """
    return Generator(PCG64DXSM(seed))


def reduce_row(row: Sequence[int] | ndarray) -> tuple[ndarray, int]:
    """
    Compress a row toward index 0 and merge adjacent equal tiles.

    Parameters
    ----------
    row : Sequence[int] | ndarray
        A 1D sequence of tiles, zero meaning empty.

    Returns
    -------
    reduced : ndarray
        The row after compression and merging, padded with zeros to its original length.
    score : int
        The total value of the merged tiles.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging runs from the start of the row towards the end.
    - Each tile can only be merged once per call, so ``[2, 2, 2]`` gives ``[4, 2, 0]``.
    """
    line = asarray(row, dtype=int64)
    reduced = zeros_like(line)

    # ##: Handle rows without anything to merge.
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        reduced[: len(non_zero)] = non_zero
        return reduced, 0

    # ##: Iterate over the row and merge values.
    merged = []
    score = 0
    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            value = int(non_zero[i]) * 2
            merged.append(value)
            score += value
            i += 2
        else:
            merged.append(int(non_zero[i]))
            i += 1

    reduced[: len(merged)] = merged
    return reduced, score


def slide_and_merge(cells: ndarray) -> tuple[int, ndarray]:
    """
    Slide every row of a grid to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    cells : ndarray
        The game grid as a 2D array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated : ndarray
        A new grid after sliding and merging.

    Notes
    -----
    For other directions, rotate the grid before calling this function.
    """
    cells = asarray(cells, dtype=int64)
    result = zeros_like(cells)
    score = 0

    for i, row in enumerate(cells):
        merged_row, score_row = reduce_row(row)
        score += score_row
        result[i] = merged_row

    return score, result


def apply_move(board: Board | ndarray | Sequence[Sequence[int]], direction: Direction | int | str) -> MoveResult:
    """
    Slide all tiles of a board in one direction.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The current board. It is never modified.
    direction : Direction | int | str
        The slide direction.

    Returns
    -------
    MoveResult
        The new board and the score gained. A board equal to the input means the move is blocked.

    Raises
    ------
    ValueError
        If the board is malformed or the direction unknown.

    Notes
    -----
    Every direction is turned into a leftward slide: the board is rotated so the direction's forward edge
    becomes the left edge, each row is reduced, then the board is rotated back.
    """
    board = as_board(board)
    pre, post = Direction.parse(direction).rotations

    score, updated = slide_and_merge(rotate(board, pre).cells)
    return MoveResult(rotate(Board(updated), post), score)


def preview_moves(board: Board | ndarray | Sequence[Sequence[int]]) -> dict[Direction, MoveResult]:
    """
    Compute the outcome of every direction without committing any.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The current board.

    Returns
    -------
    dict[Direction, MoveResult]
        The slide result for each direction.
    """
    board = as_board(board)
    return {direction: apply_move(board, direction) for direction in Direction}


def spawn_tile(
    board: Board | ndarray | Sequence[Sequence[int]],
    rng: Generator | None = None,
    config: EngineConfig | None = None,
) -> Board:
    """
    Place a new tile on a random empty cell.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The current board. It is never modified.
    rng : Generator, optional
        Source of randomness. The module-level generator is used when omitted.
    config : EngineConfig, optional
        Rules giving the spawn probabilities (90% for 2, 10% for 4 by default).

    Returns
    -------
    Board
        A new board with one more tile, or the input board if it has no empty cell.

    Notes
    -----
    The cell is drawn uniformly among empty cells, then the value is drawn from the spawn probabilities.
    """
    board = as_board(board)
    rng = rng if rng is not None else _GENERATOR
    config = config if config is not None else _DEFAULT_CONFIG

    # ##: Only if there are still available places.
    available_cells = argwhere(board.cells == 0)
    if len(available_cells) == 0:
        _logger.debug('No empty cell on %dx%d board, spawn skipped', board.size, board.size)
        return board

    row, col = available_cells[rng.integers(len(available_cells))]
    value = int(rng.choice(config.tile_values, p=config.tile_weights))

    cells = board.cells.copy()
    cells[row, col] = value
    _logger.debug('Spawned %d at (%d, %d)', value, row, col)
    return Board(cells)


def spawn_outcomes(
    board: Board | ndarray | Sequence[Sequence[int]], config: EngineConfig | None = None
) -> list[tuple[Board, float]]:
    """
    Enumerate every board a spawn can produce.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The board after a move, before the spawn.
    config : EngineConfig, optional
        Rules giving the spawn probabilities.

    Returns
    -------
    list[tuple[Board, float]]
        Each possible board with the probability of reaching it.

    Notes
    -----
    - A full board yields the board itself with probability 1.
    - The probability of an outcome is ``P(value) / number_of_empty_cells``.
    """
    board = as_board(board)
    config = config if config is not None else _DEFAULT_CONFIG

    empty_cells = argwhere(board.cells == 0)
    if len(empty_cells) == 0:
        return [(board, 1.0)]

    outcomes = []
    for cell in empty_cells:
        for value, prob in config.tile_probs.items():
            cells = board.cells.copy()
            cells[tuple(cell)] = value
            outcomes.append((Board(cells), prob / len(empty_cells)))
    return outcomes


def new_game(rng: Generator | None = None, config: EngineConfig | None = None) -> Board:
    """
    Create an opening board: an empty grid with the configured number of spawned tiles.

    Parameters
    ----------
    rng : Generator, optional
        Source of randomness.
    config : EngineConfig, optional
        Rules giving the grid size and the number of opening tiles.

    Returns
    -------
    Board
        The opening board.
    """
    config = config if config is not None else _DEFAULT_CONFIG
    board = create_empty_board(config.size)
    for _ in range(config.start_tiles):
        board = spawn_tile(board, rng=rng, config=config)
    return board


def has_legal_move(board: Board | ndarray | Sequence[Sequence[int]]) -> bool:
    """
    Check whether any move can still change the board.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The board to inspect.

    Returns
    -------
    bool
        True if a cell is empty, or a cell equals its right neighbour or the cell below it.

    Notes
    -----
    Merges are symmetric, so comparing each cell with the next column and the next row finds every
    adjacent equal pair.
    """
    cells = as_board(board).cells
    return bool(
        np_any(cells == 0) or np_any(cells[:, :-1] == cells[:, 1:]) or np_any(cells[:-1] == cells[1:])
    )


def is_done(board: Board | ndarray | Sequence[Sequence[int]]) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The board to inspect.

    Returns
    -------
    bool
        True if the board is full and no adjacent cells have the same value.
    """
    return not has_legal_move(board)
