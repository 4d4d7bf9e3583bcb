# -*- coding: utf-8 -*-
"""
Pure grid logic for the 2048 game.

It includes the compact-and-merge primitive, directional moves, tile spawning, win and game-over
checks, legal move detection and the random sources used to spawn tiles.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    WINNING_TILE,
    empty_cells,
    is_done,
    is_won,
    merge_line,
    move_board,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import Direction, legal_moves, legal_moves_mask
from .randomness import NumpyRandomSource, RandomSource

__all__ = [
    "TILE_SPAWN_PROBS",
    "WINNING_TILE",
    "Direction",
    "NumpyRandomSource",
    "RandomSource",
    "empty_cells",
    "is_done",
    "is_won",
    "legal_moves",
    "legal_moves_mask",
    "merge_line",
    "move_board",
    "slide_and_merge",
    "spawn_tile",
]
