"""
Serialization of boards for display: row-major lists, text rendering and the game-over share message.
"""

from typing import Optional

from numpy import ndarray


def to_rows(board: ndarray) -> list[list[int]]:
    """
    Nested row-major view of a board, 0 meaning empty.
    """
    return [[int(value) for value in row] for row in board]


def flatten(board: ndarray) -> list[int]:
    """
    Flat row-major view of a board, 0 meaning empty.

    Example
    -------
    >>> import numpy as np
    >>> flatten(np.array([[2, 0], [0, 4]]))
    [2, 0, 0, 4]
    """
    return [int(value) for value in board.ravel()]


def render_text(board: ndarray) -> str:
    """
    Render a board as tab-separated rows, one line per row.
    """
    return '\n'.join(' \t'.join(map(str, row)) for row in to_rows(board))


def share_message(score: int, url: Optional[str] = None) -> str:
    """
    Message offered to the player when the game is over.

    Parameters
    ----------
    score : int
        Final score.
    url : str, optional
        Link appended to the message.

    Returns
    -------
    str
        The share message.
    """
    message = f'I scored {score} points in 2048!'
    if url:
        message = f'{message} {url}'
    return message
