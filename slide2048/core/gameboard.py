"""
Grid transitions for the 2048 game: compact-and-merge, directional slides, tile spawning and
terminal checks.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, ndarray, rot90, zeros_like

from slide2048.core.gamemove import Direction
from slide2048.core.randomness import RandomSource

# ##>: Value of the tile that wins the game.
WINNING_TILE = 2048

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Compact a line towards its start and merge adjacent equal values.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row or column of the board, read in the sliding direction.

    Returns
    -------
    score : int
        Sum of the values produced by merges.
    merged_line : ndarray
        The dense merged values, without the trailing zero padding.

    Notes
    -----
    - Zeros are removed first, keeping the order of the remaining values.
    - A single left-to-right scan builds the result: a merged value is never merged again.
    """
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    # ##: Skip past both cells of a merged pair.
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=line.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide every row of the board to the left, merging as tiles meet.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    score : int
        Total value of all merges.
    updated_board : ndarray
        A new board; each row is padded with zeros on the right.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_line(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def move_board(board: ndarray, direction: Direction) -> tuple[ndarray, int]:
    """
    Slide the whole board in one direction without spawning a tile.

    Parameters
    ----------
    board : ndarray
        The game board. It is not modified.
    direction : Direction
        The direction of the move.

    Returns
    -------
    new_board : ndarray
        The board after sliding and merging.
    score : int
        Total value of all merges.

    Notes
    -----
    Rotating by ``direction`` quarter turns turns columns read top-to-bottom (up), reversed rows
    (right) and columns read bottom-to-top (down) into rows read left-to-right.
    """
    if not isinstance(direction, Direction):
        raise TypeError(f'direction must be a Direction, got {type(direction).__name__}')

    rotated = rot90(board, k=direction)
    score, updated = slide_and_merge(rotated)
    return rot90(updated, k=-direction).copy(), score


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """Positions of the empty cells in row-major order."""
    return [(int(row), int(col)) for row, col in argwhere(board == 0)]


def spawn_tile(
    board: ndarray, random_source: RandomSource, probability_two: float = TILE_SPAWN_PROBS[2]
) -> tuple[int, int] | None:
    """
    Place a new tile in a random empty cell.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**
    random_source : RandomSource
        Picks the cell and flips the coin deciding the tile value.
    probability_two : float, optional
        Probability that the new tile is a 2 rather than a 4.

    Returns
    -------
    tuple[int, int] or None
        The (row, col) of the new tile, or None when the board has no empty cell.
    """
    cells = empty_cells(board)
    if not cells:
        return None

    cell = cells[random_source.choice(len(cells))]
    board[cell] = 2 if random_source.coin(probability_two) else 4
    return cell


def is_won(board: ndarray, target: int = WINNING_TILE) -> bool:
    """Check whether any cell has reached the target tile."""
    return bool(np_any(board == target))


def is_done(board: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells have the same value.
    """
    return bool(
        np_all(board != 0) and not np_any(board[:-1] == board[1:]) and not np_any(board[:, :-1] == board[:, 1:])
    )
