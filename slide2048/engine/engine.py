"""Grid engine holding the state of one game of 2048."""

import logging
from enum import Enum
from typing import NamedTuple

from numpy import array_equal, count_nonzero, int64, ndarray, zeros

from slide2048.config import GameConfig
from slide2048.core.gameboard import is_done, is_won, move_board, spawn_tile
from slide2048.core.gamemove import Direction, legal_moves
from slide2048.core.randomness import NumpyRandomSource, RandomSource

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """Status of a game. ``WON`` and ``OVER`` are terminal."""

    ACTIVE = 'active'
    WON = 'won'
    OVER = 'over'


class MoveResult(NamedTuple):
    """
    Outcome of a move request.

    Attributes
    ----------
    grid : ndarray
        Copy of the grid after the request.
    score : int
        Score after the request.
    status : GameStatus
        Status after the request.
    moved : bool
        False when the request was rejected or changed no cell.
    reward : int
        Score gained by this move.
    new_best : bool
        True when this move raised the best score.
    """

    grid: ndarray
    score: int
    status: GameStatus
    moved: bool
    reward: int = 0
    new_best: bool = False


class GridEngine:
    """
    2048 grid engine.

    The engine owns the grid, the score, the best score and the game status. It performs no I/O:
    callers read its state and decide what to draw or persist.
    """

    def __init__(
        self, config: GameConfig | None = None, random_source: RandomSource | None = None, best_score: int = 0
    ):
        """
        Create an engine and start a first game.

        Parameters
        ----------
        config : GameConfig, optional
            Rules of the game (default 4x4, target 2048).
        random_source : RandomSource, optional
            Source used to spawn tiles (default: unseeded NumPy generator).
        best_score : int, optional
            Best score carried over from previous sessions.
        """
        self.config = config or GameConfig()
        self.config.validate()
        if best_score < 0:
            raise ValueError(f'best_score must be >= 0, got {best_score}')

        self._random = random_source or NumpyRandomSource()
        self._grid: ndarray = zeros((self.config.size, self.config.size), dtype=int64)
        self._score = 0
        self._best_score = best_score
        self._status = GameStatus.ACTIVE

        self.initialize()

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def grid(self) -> ndarray:
        """Copy of the current grid."""
        return self._grid.copy()

    @property
    def score(self) -> int:
        return self._score

    @property
    def best_score(self) -> int:
        return self._best_score

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_terminal(self) -> bool:
        return self._status is not GameStatus.ACTIVE

    @property
    def legal_moves(self) -> list[Direction]:
        """Directions that would change the grid; empty once the game is over or won."""
        if self.is_terminal:
            return []
        return legal_moves(self._grid)

    def initialize(self) -> None:
        """
        Start a new game.

        The grid is emptied, the score reset and the status set back to active before the starting tiles
        are spawned. The best score is kept.
        """
        self._grid = zeros((self.config.size, self.config.size), dtype=int64)
        self._score = 0
        self._status = GameStatus.ACTIVE

        for _ in range(self.config.start_tiles):
            spawn_tile(self._grid, self._random, self.config.probability_two)
        logger.debug('New game started with %d tiles', count_nonzero(self._grid))

    def apply_move(self, direction: Direction) -> MoveResult:
        """
        Slide the grid in a direction, spawn a tile and evaluate the game status.

        Parameters
        ----------
        direction : Direction
            The direction of the move.

        Returns
        -------
        MoveResult
            The new state. ``moved`` is False if the game is already won or over, or if the move changed
            no cell; the state is then left untouched.

        Notes
        -----
        - The win check runs before the game-over check.
        - A tile is spawned only after a move that changed the grid.
        """
        if not isinstance(direction, Direction):
            raise TypeError(f'direction must be a Direction, got {type(direction).__name__}')

        if self.is_terminal:
            logger.debug('Move %s rejected, game is %s', direction.name, self._status.value)
            return self._result(moved=False)

        new_grid, reward = move_board(self._grid, direction)
        if array_equal(new_grid, self._grid):
            logger.debug('Move %s changed nothing', direction.name)
            return self._result(moved=False)

        # ##: Update the grid in place and accumulate the score.
        self._grid[...] = new_grid
        self._score += reward

        new_best = self._score > self._best_score
        if new_best:
            self._best_score = self._score

        spawn_tile(self._grid, self._random, self.config.probability_two)

        if is_won(self._grid, self.config.target):
            self._status = GameStatus.WON
            logger.debug('Reached %d with score %d', self.config.target, self._score)
        elif is_done(self._grid):
            self._status = GameStatus.OVER
            logger.debug('No move left, final score %d', self._score)

        return self._result(moved=True, reward=reward, new_best=new_best)

    def _result(self, moved: bool, reward: int = 0, new_best: bool = False) -> MoveResult:
        return MoveResult(
            grid=self.grid,
            score=self._score,
            status=self._status,
            moved=moved,
            reward=reward,
            new_best=new_best,
        )

    def __repr__(self) -> str:
        rows = '\n'.join(' \t'.join(map(str, row)) for row in self._grid.tolist())
        return f'GridEngine(score={self._score}, best={self._best_score}, status={self._status.value})\n{rows}'
