"""
Translate keyboard and pointer input into game commands.

Key names follow Matplotlib's ``key_press_event`` conventions. Pointer positions are screen coordinates,
with y growing downwards.
"""

from enum import Enum

from slide2048.core.gamemove import Direction

# ##: Arrow keys slide the tiles.
MOVE_KEYS = {
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
}


class Command(str, Enum):
    """Non-move actions bound to keys."""

    RESTART = 'restart'
    CLOSE = 'close'


COMMAND_KEYS = {
    'backspace': Command.RESTART,
    'r': Command.RESTART,
    'escape': Command.CLOSE,
}


def key_action(key: str | None) -> Direction | Command | None:
    """
    Map a key name to a move or a command.

    Parameters
    ----------
    key : str or None
        Matplotlib key name, e.g. ``"left"`` or ``"escape"``.

    Returns
    -------
    Direction, Command or None
        None for keys that are not bound.
    """
    if key is None:
        return None
    if key in MOVE_KEYS:
        return MOVE_KEYS[key]
    return COMMAND_KEYS.get(key)


def swipe_direction(
    start: tuple[float, float] | None, end: tuple[float, float], threshold: float = 0.0
) -> Direction | None:
    """
    Find the direction of a swipe gesture.

    Parameters
    ----------
    start : tuple[float, float] or None
        Screen position where the gesture began, or None if no press was seen.
    end : tuple[float, float]
        Screen position where the gesture ended.
    threshold : float, optional
        Minimum displacement along the dominant axis; shorter gestures are taps.

    Returns
    -------
    Direction or None
        The direction of the dominant axis, or None for taps and gestures without a start.

    Notes
    -----
    The displacement is measured from end to start: a finger moving left gives a positive horizontal
    difference. Ties between the axes count as vertical.
    """
    if start is None:
        return None

    diff_x = start[0] - end[0]
    diff_y = start[1] - end[1]

    if abs(diff_x) > abs(diff_y):
        if abs(diff_x) <= threshold:
            return None
        return Direction.LEFT if diff_x > 0 else Direction.RIGHT

    if abs(diff_y) <= threshold:
        return None
    return Direction.UP if diff_y > 0 else Direction.DOWN
