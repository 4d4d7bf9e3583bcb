"""
Move directions for the 2048 grid and helpers telling which of them would change a board.
"""

from enum import IntEnum

from numpy import ndarray


class Direction(IntEnum):
    """
    The four sliding directions.

    The value of each member is the number of counter-clockwise quarter turns that brings the direction
    back to a left slide, so ``rot90(board, k=direction)`` aligns any move with the left primitive.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, name: str) -> 'Direction':
        """
        Convert a direction name such as ``"left"`` into a member.

        Parameters
        ----------
        name : str
            Case-insensitive direction name.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the name does not match any direction.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError as error:
            raise ValueError(f'Unknown direction: {name!r}') from error


def legal_moves_mask(board: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move would change the board.

    Notes
    -----
    A direction is legal when a tile has an empty neighbour on that side or an equal non-zero
    neighbour along that axis.
    """
    # ##>: Horizontal and vertical merges are shared by opposite directions.
    left_cols, right_cols = board[:, :-1], board[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    top_rows, bottom_rows = board[:-1, :], board[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_moves(board: ndarray) -> list[Direction]:
    """
    List the directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        Legal directions, in (left, up, right, down) order.
    """
    mask = legal_moves_mask(board)
    return [direction for direction in Direction if mask[direction]]
