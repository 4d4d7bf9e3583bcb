"""Sliding-tile 2048 game: a pure grid engine with a Matplotlib front end."""

from slide2048.core import Direction
from slide2048.engine import GameStatus, GridEngine, MoveResult

__version__ = "1.0.0"

__all__ = ["Direction", "GameStatus", "GridEngine", "MoveResult"]
