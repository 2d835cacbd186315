"""
Board engine of the 2048 game: sliding, merging, tile spawning and terminal-state detection.

Boards are 4x4 ``int64`` arrays where 0 marks an empty cell. Every function returns a new array and leaves
its input untouched.
"""

from typing import Callable, Optional

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, array_equal, asarray, count_nonzero, fliplr, int64, integer, issubdtype, ndarray
from numpy import zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from slide2048.addons.config import BOARD_SIZE, TILE_SPAWN_PROBS
from slide2048.addons.types import Direction, MoveResult

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module-level generator, used when no generator is injected.
_GENERATOR = default_rng(PCG64DXSM())


def _transpose(board: ndarray) -> ndarray:
    return board.T


# ##>: Steps bringing each direction onto a left slide. Every step is its own inverse.
_ORIENTATIONS: dict[Direction, tuple[Callable[[ndarray], ndarray], ...]] = {
    Direction.LEFT: (),
    Direction.RIGHT: (fliplr,),
    Direction.UP: (_transpose,),
    Direction.DOWN: (_transpose, fliplr),
}


def create_empty_board() -> ndarray:
    """
    Create an empty game board.

    Returns
    -------
    ndarray
        A 4x4 board filled with zeros.
    """
    return zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)


def validate_board(board: ndarray) -> None:
    """
    Check that a board coming from outside the engine is well formed.

    Parameters
    ----------
    board : ndarray
        The board to check.

    Raises
    ------
    ValueError
        If the board is not an integer 4x4 array, holds negative values, or holds non-zero values that are not
        powers of two.
    """
    board = asarray(board)
    if not issubdtype(board.dtype, integer):
        raise ValueError(f'Board values must be integers, got dtype {board.dtype}')
    if board.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f'Board must have shape ({BOARD_SIZE}, {BOARD_SIZE}), got {board.shape}')
    if np_any(board < 0):
        raise ValueError('Board values must be non-negative')

    tiles = board[board != 0]
    if np_any(tiles < 2) or np_any(tiles & (tiles - 1)):
        raise ValueError(f'Tiles must be powers of two, got {sorted(set(tiles.tolist()))}')


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Compact a line towards its start and merge adjacent equal values.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row of the game board.

    Returns
    -------
    reward : int
        The sum of the values created by merging.
    merged_line : ndarray
        The compacted line, without padding.

    Notes
    -----
    - Zeros (empty cells) are removed before merging, preserving the order of the tiles.
    - The leftmost pair merges first and each tile merges at most once, so ``[2, 2, 2]`` gives ``[4, 2]``.
    """
    line = asarray(line)

    # ##: Handle empty lines.
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    reward = 0

    # ##: Iterate over the line and merge values.
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result.append(merged)
            reward += int(merged)
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return reward, array(result, dtype=line.dtype)


def slide_and_merge_line(line: ndarray) -> ndarray:
    """
    Slide a single line to the left.

    Parameters
    ----------
    line : ndarray
        A 1D array of length 4.

    Returns
    -------
    ndarray
        The new line, padded with trailing zeros.
    """
    line = asarray(line)
    _, merged = merge_line(line)
    result = zeros_like(line)
    result[: len(merged)] = merged
    return result


def slide_and_merge(board: ndarray) -> tuple[int, int, ndarray]:
    """
    Slide every row of the board to the left.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    reward : int
        The sum of all merged values.
    merges : int
        The number of merges performed.
    updated_board : ndarray
        The board after sliding and merging.
    """
    result = zeros_like(board)
    reward = 0

    for i, row in enumerate(board):
        row_reward, merged_row = merge_line(row)
        reward += row_reward
        result[i, : len(merged_row)] = merged_row

    # ##>: Each merge removes exactly one tile.
    merges = int(count_nonzero(board) - count_nonzero(result))
    return reward, merges, result


def move(board: ndarray, direction: Direction) -> MoveResult:
    """
    Slide the board in the given direction.

    Parameters
    ----------
    board : ndarray
        The current game board. Not modified.
    direction : Direction
        The direction of the slide.

    Returns
    -------
    MoveResult
        The new board, whether it differs from the input, and the merges performed.

    Notes
    -----
    The board is oriented so that the direction becomes a left slide, every row is slid, then the
    orientation steps are undone in reverse order. No tile is spawned.
    """
    board = asarray(board)
    steps = _ORIENTATIONS[Direction(direction)]

    oriented = board
    for step in steps:
        oriented = step(oriented)

    reward, merges, updated = slide_and_merge(oriented)
    for step in reversed(steps):
        updated = step(updated)

    # ##>: Orientation steps return views; hand back a fresh contiguous board.
    updated = updated.copy()
    return MoveResult(board=updated, moved=not array_equal(updated, board), merges=merges, reward=reward)


def spawn_random_tile(board: ndarray, rng: Optional[Generator] = None) -> ndarray:
    """
    Place a new tile (2 or 4) on a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current game board. Not modified.
    rng : Generator, optional
        Random generator, for reproducibility. The module-level generator is used when omitted.

    Returns
    -------
    ndarray
        A new board with one more tile, or an unchanged copy if the board is full.

    Notes
    -----
    The cell is chosen uniformly among the empty cells; the value is 2 with probability 0.9 and 4 with
    probability 0.1.
    """
    rng = rng if rng is not None else _GENERATOR
    state = array(board)

    # ##: Only if there are still available places.
    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        return state

    cell = available_cells[rng.integers(len(available_cells))]
    state[tuple(cell)] = rng.choice(_TILE_VALUES, p=_TILE_PROBS)
    return state


def fill_cells(board: ndarray, number_tile: int, rng: Optional[Generator] = None) -> ndarray:
    """
    Spawn several tiles one after another.

    Parameters
    ----------
    board : ndarray
        The current game board. Not modified.
    number_tile : int
        Number of new tiles to add.
    rng : Generator, optional
        Random generator, for reproducibility.

    Returns
    -------
    ndarray
        A new board with the tiles added. Stops early once the board is full.
    """
    state = array(board)
    for _ in range(number_tile):
        state = spawn_random_tile(state, rng=rng)
    return state


def has_any_move_available(board: ndarray) -> bool:
    """
    Check whether any move can still change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    bool
        True if there is an empty cell or two horizontally or vertically adjacent equal tiles.
    """
    board = asarray(board)
    if not np_all(board != 0):
        return True
    return bool(np_any(board[:-1] == board[1:]) or np_any(board[:, :-1] == board[:, 1:]))


def is_done(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    bool
        True if the board is full and no adjacent tiles are equal.
    """
    return not has_any_move_available(board)
