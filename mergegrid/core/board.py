"""
Board value type and move directions for the sliding-tile merging puzzle.
"""

from __future__ import annotations

from enum import IntEnum
from numbers import Integral
from typing import Iterator, Sequence

from numpy import argwhere, array_equal, asarray, count_nonzero, int64, integer, issubdtype, ndarray, rot90, zeros


class Direction(IntEnum):
    """
    The four slide directions.

    The integer value of a member is the number of counter-clockwise quarter turns that bring its forward
    edge onto the left edge of the board.
    As clockwise ``rotations`` this gives UP (3, 1) and DOWN (1, 3); reading the counts 1 and 3 as clockwise
    turns instead would slide UP tiles downward.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def rotations(self) -> tuple[int, int]:
        """
        Clockwise quarter turns applied before and after a leftward slide.

        Returns
        -------
        tuple[int, int]
            The ``(pre, post)`` pair, with ``pre + post`` a multiple of four.
        """
        return (-self.value) % 4, self.value % 4

    @classmethod
    def parse(cls, value: Direction | int | str) -> Direction:
        """
        Convert a member, its integer value or its (case-insensitive) name into a direction.

        Parameters
        ----------
        value : Direction | int | str
            Value to convert.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the value doesn't name one of the four directions.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f'Unknown direction: {value!r}') from None
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ValueError(f'Unknown direction: {value!r}')
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f'Unknown direction: {value!r}') from None


class Board:
    """
    Immutable N x N grid of tiles.

    Zero marks an empty cell, any positive value is a tile. The backing array is read-only, so a board can be
    shared freely between history entries and callers.
    Cells are stored as int64, so tiles must stay below 2**62 for merges not to overflow.
    """

    __slots__ = ('_cells',)

    def __init__(self, cells: Board | ndarray | Sequence[Sequence[int]]):
        if isinstance(cells, Board):
            cells = cells.cells
        raw = asarray(cells)
        if not issubdtype(raw.dtype, integer):
            raise ValueError(f'Board cells must be integers, received dtype {raw.dtype}')
        grid = raw.astype(int64)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1] or grid.shape[0] == 0:
            raise ValueError(f'Board must be a non-empty square grid, received shape {grid.shape}')
        if (grid < 0).any():
            raise ValueError('Board cells must be non-negative')
        grid.flags.writeable = False
        self._cells = grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Build a board from a list of rows."""
        return cls(rows)

    @property
    def cells(self) -> ndarray:
        """Read-only view of the grid."""
        return self._cells

    @property
    def size(self) -> int:
        """Dimension N of the grid."""
        return int(self._cells.shape[0])

    @property
    def tile_count(self) -> int:
        """Number of occupied cells."""
        return int(count_nonzero(self._cells))

    @property
    def is_empty(self) -> bool:
        """Whether no cell holds a tile."""
        return self.tile_count == 0

    @property
    def is_full(self) -> bool:
        """Whether every cell holds a tile."""
        return bool(self._cells.all())

    @property
    def max_tile(self) -> int:
        """Largest tile on the board, zero if the board is empty."""
        return int(self._cells.max())

    @property
    def total(self) -> int:
        """Sum of all tiles."""
        return int(self._cells.sum())

    def empty_cells(self) -> list[tuple[int, int]]:
        """
        Positions of empty cells.

        Returns
        -------
        list[tuple[int, int]]
            ``(row, col)`` pairs in row-major order.
        """
        return [(int(row), int(col)) for row, col in argwhere(self._cells == 0)]

    def to_list(self) -> list[list[int]]:
        """Copy of the grid as nested lists of Python integers."""
        return self._cells.tolist()

    def __getitem__(self, key):
        value = self._cells[key]
        if isinstance(value, ndarray):
            return value
        return int(value)

    def __iter__(self) -> Iterator[ndarray]:
        return iter(self._cells)

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.size, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f'Board({self.to_list()!r})'

    def __str__(self) -> str:
        width = max(len(str(self.max_tile)), 1)
        return '\n'.join(' '.join(str(value).rjust(width) for value in row) for row in self.to_list())


def as_board(value: Board | ndarray | Sequence[Sequence[int]]) -> Board:
    """
    Coerce a board-like value into a ``Board``.

    Parameters
    ----------
    value : Board | ndarray | Sequence[Sequence[int]]
        An existing board, a 2D array or nested lists.

    Returns
    -------
    Board
        The same object if it is already a board, a new validated board otherwise.
    """
    if isinstance(value, Board):
        return value
    return Board(value)


def create_empty_board(size: int = 4) -> Board:
    """
    Create a board with no tiles.

    Parameters
    ----------
    size : int, optional
        Dimension of the square grid (default is 4).

    Returns
    -------
    Board
        An all-zero ``size`` x ``size`` board.

    Raises
    ------
    ValueError
        If size isn't a positive integer.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f'Board size must be a positive integer, got {size!r}')
    return Board(zeros((size, size), dtype=int64))


def rotate(board: Board | ndarray | Sequence[Sequence[int]], turns: int = 1) -> Board:
    """
    Rotate a board clockwise by quarter turns.

    Parameters
    ----------
    board : Board | ndarray | Sequence[Sequence[int]]
        The board to rotate.
    turns : int, optional
        Number of clockwise quarter turns, taken modulo 4; negative values turn counter-clockwise.

    Returns
    -------
    Board
        The rotated board.

    Notes
    -----
    One quarter turn moves cell ``(r, c)`` to ``(c, N - 1 - r)``, so four turns give back the original board.
    """
    board = as_board(board)
    turns %= 4
    if turns == 0:
        return board
    return Board(rot90(board.cells, k=-turns))
