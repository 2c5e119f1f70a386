"""Headless game session driving the merge engine through a whole game."""

import logging
from enum import Enum
from typing import NamedTuple

from numpy.random import Generator

from mergegrid.config import EngineConfig, default_config
from mergegrid.core.board import Board, Direction, create_empty_board
from mergegrid.core.gameboard import apply_move, has_legal_move, make_rng, new_game, spawn_tile
from mergegrid.core.gamemove import legal_directions

logger = logging.getLogger(__name__)


class GameState(str, Enum):
    """Lifecycle of a session."""

    EMPTY = 'empty'
    PLAYING = 'playing'
    GAME_OVER = 'game_over'


class GameOverError(RuntimeError):
    """Raised when a move is requested after the game has ended."""


class StepResult(NamedTuple):
    """
    Outcome of a move played in a session.

    Attributes
    ----------
    board : Board
        The current board after the move (and the spawn, if the move changed the board).
    score_delta : int
        Score gained by the move.
    changed : bool
        Whether the move changed the board. A blocked move spawns nothing.
    done : bool
        Whether the game is over after this move.
    """

    board: Board
    score_delta: int
    changed: bool
    done: bool


class GameSession:
    """
    A single game of the sliding-tile merging puzzle.

    The session owns the current board, the running score and the game-over flag. Each committed move is
    followed by one spawn and a terminal check; blocked moves are no-ops.
    """

    def __init__(self, config: EngineConfig | None = None, rng: Generator | None = None, seed: int | None = None):
        """
        Create a session in the ``EMPTY`` state.

        Parameters
        ----------
        config : EngineConfig, optional
            Rules of the game (default is the classic 4x4 setup).
        rng : Generator, optional
            Source of randomness for spawns. Takes precedence over ``seed``.
        seed : int, optional
            Seed used to build a generator when ``rng`` is omitted.
        """
        self.config = config if config is not None else default_config()
        self._rng = rng if rng is not None else make_rng(seed)
        self._board = create_empty_board(self.config.size)
        self._score = 0
        self._moves = 0
        self._state = GameState.EMPTY

    @property
    def board(self) -> Board:
        """The current board."""
        return self._board

    @property
    def score(self) -> int:
        """Sum of the score deltas of all committed moves."""
        return self._score

    @property
    def moves(self) -> int:
        """Number of committed moves."""
        return self._moves

    @property
    def state(self) -> GameState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_finished(self) -> bool:
        """Whether the game is over."""
        return self._state is GameState.GAME_OVER

    @property
    def legal_directions(self) -> list[Direction]:
        """Directions that would change the current board."""
        return legal_directions(self._board)

    def reset(self, seed: int | None = None) -> Board:
        """
        Start a new game.

        Parameters
        ----------
        seed : int, optional
            Reseed the session's generator before spawning the opening tiles.

        Returns
        -------
        Board
            The opening board.

        Notes
        -----
        With ``check_on_start`` enabled, an opening board without any legal move ends the game at once.
        """
        if seed is not None:
            self._rng = make_rng(seed)

        self._board = new_game(rng=self._rng, config=self.config)
        self._score = 0
        self._moves = 0
        self._state = GameState.PLAYING
        logger.info('New %dx%d game started', self.config.size, self.config.size)

        if self.config.check_on_start and not has_legal_move(self._board):
            self._finish()
        return self._board

    def step(self, direction: Direction | int | str) -> StepResult:
        """
        Play one move.

        Parameters
        ----------
        direction : Direction | int | str
            The slide direction.

        Returns
        -------
        StepResult
            The board after the move, the score gained, whether the board changed and whether the game is over.

        Raises
        ------
        RuntimeError
            If the game hasn't been started with ``reset``.
        GameOverError
            If the game is already over.
        ValueError
            If the direction is unknown.
        """
        if self._state is GameState.EMPTY:
            raise RuntimeError('Game not started, call reset() first')
        if self._state is GameState.GAME_OVER:
            raise GameOverError(f'Game is over (score={self._score}, moves={self._moves})')

        direction = Direction.parse(direction)
        moved, score_delta = apply_move(self._board, direction)
        if moved == self._board:
            logger.debug('Move %s is blocked', direction.name)
            return StepResult(self._board, 0, False, False)

        # ##: Commit the move, then spawn and check for the end of the game.
        self._score += score_delta
        self._moves += 1
        self._board = spawn_tile(moved, rng=self._rng, config=self.config)

        if not has_legal_move(self._board):
            self._finish()
        return StepResult(self._board, score_delta, True, self.is_finished)

    def render(self) -> str:
        """
        Render the board and the score as text.

        Returns
        -------
        str
            The board, one row per line, followed by the score.
        """
        return f'{self._board}\nscore: {self._score}'

    def _finish(self):
        self._state = GameState.GAME_OVER
        logger.info('Game over: score=%d, moves=%d, max tile=%d', self._score, self._moves, self._board.max_tile)
