"""
Interactive session joining the grid engine, the window and the best-score record.

The engine knows nothing about the window or the store: the session reads the engine state after every
command, redraws it and persists the best score when a move raises it.
"""

import logging
from typing import Any, Optional, Protocol

from numpy import ndarray

from slide2048.config import LayoutConfig
from slide2048.core.gamemove import Direction
from slide2048.engine import GameStatus, GridEngine, MoveResult
from slide2048.storage import BestScoreRecord
from slide2048.ui.controls import Command, key_action, swipe_direction

logger = logging.getLogger(__name__)

# ##: Banner shown on each terminal status.
MESSAGES = {
    GameStatus.WON: ("You win!", "game-won"),
    GameStatus.OVER: ("Game over!", "game-over"),
}


class Display(Protocol):
    """What the session needs from a window."""

    def show_grid(self, grid: ndarray, score: int, best: int): ...

    def show_message(self, text: str, kind: str): ...

    def hide_message(self): ...

    def screen_position(self, event: Any) -> tuple[float, float]: ...

    def close(self): ...


class PlaySession:
    """
    Drive a game from keyboard and pointer events.

    Parameters
    ----------
    engine : GridEngine
        The game state.
    window : Display
        Where the game is drawn.
    record : BestScoreRecord
        Where the best score is persisted.
    layout : LayoutConfig, optional
        Provides the swipe threshold.
    """

    def __init__(
        self, engine: GridEngine, window: Display, record: BestScoreRecord, layout: Optional[LayoutConfig] = None
    ):
        self.engine = engine
        self.window = window
        self.record = record
        self.layout = layout or LayoutConfig()
        self._press: tuple[float, float] | None = None

    def start(self):
        """Start a new game and draw it."""
        self.engine.initialize()
        self.window.hide_message()
        self._redraw()

    restart = start

    def move(self, direction: Direction) -> Optional[MoveResult]:
        """
        Apply a move and refresh the window.

        Parameters
        ----------
        direction : Direction
            Direction of the move.

        Returns
        -------
        MoveResult or None
            None when the input was ignored because the game is finished.
        """
        if self.engine.status is not GameStatus.ACTIVE:
            return None

        result = self.engine.apply_move(direction)
        if not result.moved:
            return result

        if result.new_best:
            self.record.save(result.score)

        self._redraw()
        if result.status in MESSAGES:
            text, kind = MESSAGES[result.status]
            logger.info('%s Score: %d', text, result.score)
            self.window.show_message(text, kind)
        return result

    def _redraw(self):
        self.window.show_grid(self.engine.grid, self.engine.score, self.engine.best_score)

    def on_key(self, event: Any):
        """Handle a ``key_press_event``."""
        action = key_action(getattr(event, 'key', None))
        if action is None:
            return None

        if action is Command.CLOSE:
            self.window.close()
            return None

        if action is Command.RESTART:
            self.restart()
            return None

        return self.move(action)

    def on_press(self, event: Any):
        """Remember where a swipe starts."""
        self._press = self.window.screen_position(event)

    def on_release(self, event: Any):
        """Finish a swipe and apply its direction."""
        start, self._press = self._press, None
        direction = swipe_direction(start, self.window.screen_position(event), self.layout.swipe_threshold)
        if direction is None:
            return None
        return self.move(direction)

    def on_restart(self, _event: Any = None):
        """Callback of the "New Game" button."""
        self.restart()
