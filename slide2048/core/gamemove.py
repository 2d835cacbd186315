"""
Move legality for the 2048 game: which directions would change the board, computed without sliding.
"""

from numpy import asarray, ndarray

from slide2048.addons.types import Direction


def legal_directions_mask(board: ndarray) -> dict[Direction, bool]:
    """
    Get the legality of all four directions in a single pass.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    dict[Direction, bool]
        True for every direction whose move would change the board.

    Notes
    -----
    A direction is legal if a tile has an empty cell on its side of the move, or if two adjacent tiles
    along that axis are equal.
    """
    board = asarray(board)

    # ##>: Horizontal neighbours, shared by left and right.
    left_cols, right_cols = board[:, :-1], board[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Vertical neighbours, shared by up and down.
    top_rows, bottom_rows = board[:-1, :], board[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return {
        Direction.LEFT: bool(left.any() or h_can_merge.any()),
        Direction.UP: bool(up.any() or v_can_merge.any()),
        Direction.RIGHT: bool(right.any() or h_can_merge.any()),
        Direction.DOWN: bool(down.any() or v_can_merge.any()),
    }


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Directions that would change the board, in declaration order.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if mask[direction]]


def illegal_directions(board: ndarray) -> list[Direction]:
    """
    Directions that would leave the board unchanged.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if not mask[direction]]


def can_move(board: ndarray) -> bool:
    """
    Check if a left slide would change the board.

    Parameters
    ----------
    board : ndarray
        The game board to check.

    Returns
    -------
    bool
        True if a left move is possible, False otherwise.
    """
    return legal_directions_mask(board)[Direction.LEFT]
