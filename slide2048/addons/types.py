# -*- coding: utf-8 -*-
"""
Set of types for the 2048 rules engine.
"""
from dataclasses import dataclass
from enum import Enum

from numpy import ndarray


class Direction(str, Enum):
    """
    Direction of a slide.

    The declaration order (left, up, right, down) matches the action indices used by the simulator.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'


@dataclass(frozen=True, eq=False)
class MoveResult:
    """
    Outcome of a single slide, before any tile is spawned.

    Attributes
    ----------
    board : ndarray
        The board after sliding and merging.
    moved : bool
        True if at least one cell differs from the board the move was applied to.
    merges : int
        Number of merges performed.
    reward : int
        Sum of the values produced by the merges.
    """

    board: ndarray
    moved: bool
    merges: int = 0
    reward: int = 0
