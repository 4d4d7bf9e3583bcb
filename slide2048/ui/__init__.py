# -*- coding: utf-8 -*-
"""
Interactive front end: input translation, the Matplotlib window and the session wiring them to the engine.
"""

from .controls import Command, key_action, swipe_direction
from .session import PlaySession
from .windows import TilePlacement, WindowBoard, tile_layout

__all__ = ["Command", "PlaySession", "TilePlacement", "WindowBoard", "key_action", "swipe_direction", "tile_layout"]
