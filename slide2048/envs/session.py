"""
Game session of the 2048 game: an immutable snapshot of the board, the score and the game-over flag.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from numpy import array, asarray, int64, ndarray
from numpy.random import Generator

from slide2048.addons.config import INITIAL_TILES
from slide2048.addons.types import Direction
from slide2048.core.gameboard import (
    create_empty_board,
    fill_cells,
    has_any_move_available,
    move,
    spawn_random_tile,
    validate_board,
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Session:
    """
    Snapshot of a game.

    The board is copied and made read-only on construction, so a session can be shared freely.
    """

    board: ndarray
    score: int = 0
    game_over: bool = False

    def __post_init__(self):
        board = asarray(self.board)
        validate_board(board)
        board = array(board, dtype=int64)
        board.flags.writeable = False
        object.__setattr__(self, 'board', board)


def board_score(board: ndarray) -> int:
    """
    Score of a board: the sum of all its tile values.
    """
    return int(board.sum())


def new_game(rng: Optional[Generator] = None) -> Session:
    """
    Start a new game.

    Parameters
    ----------
    rng : Generator, optional
        Random generator used to seed the initial tiles.

    Returns
    -------
    Session
        A board with two random tiles, a score of zero and the game running.
    """
    board = fill_cells(create_empty_board(), number_tile=INITIAL_TILES, rng=rng)
    _logger.info('New game started')
    return Session(board=board, score=0, game_over=False)


def apply_move(session: Session, direction: Direction, rng: Optional[Generator] = None) -> Session:
    """
    Apply a directional input to a session.

    Parameters
    ----------
    session : Session
        The current session. Not modified.
    direction : Direction
        The direction of the slide.
    rng : Generator, optional
        Random generator used to spawn the new tile.

    Returns
    -------
    Session
        The same session if the game is over or the move changes nothing, otherwise a new session.

    Notes
    -----
    - After an accepted move a tile is spawned, then the score is recomputed as the sum of all tiles.
    - The game-over check runs after the spawn, since the spawned tile can fill the last empty cell.
    """
    if session.game_over:
        _logger.debug('Ignoring %s: game is over', direction)
        return session

    result = move(session.board, direction)
    if not result.moved:
        _logger.debug('Rejected %s: board unchanged', direction)
        return session

    board = spawn_random_tile(result.board, rng=rng)
    game_over = not has_any_move_available(board)
    if game_over:
        _logger.info('Game over with score %d', board_score(board))

    return Session(board=board, score=board_score(board), game_over=game_over)
