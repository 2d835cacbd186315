# -*- coding: utf-8 -*-
"""
Rules engine of the 2048 sliding-tile puzzle.
"""

from .addons import Direction, GameConfig, MoveResult
from .core import has_any_move_available, move, slide_and_merge_line, spawn_random_tile
from .envs import Session, TwentyFortyEight, apply_move, new_game

__all__ = [
    'Direction',
    'GameConfig',
    'MoveResult',
    'has_any_move_available',
    'move',
    'slide_and_merge_line',
    'spawn_random_tile',
    'Session',
    'TwentyFortyEight',
    'apply_move',
    'new_game',
]
