# -*- coding: utf-8 -*-
"""
Grid engine for the 2048 game.

This module provides the `GridEngine` class, which owns the grid, score, best score and status of a game and
applies moves to them.
"""

from .engine import GameStatus, GridEngine, MoveResult

__all__ = ["GameStatus", "GridEngine", "MoveResult"]
