# -*- coding: utf-8 -*-
"""
Board engine of the 2048 game.

It provides the line and board slides, the direction-generic move, random tile spawning, terminal-state
detection and move legality checks.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    create_empty_board,
    fill_cells,
    has_any_move_available,
    is_done,
    merge_line,
    move,
    slide_and_merge,
    slide_and_merge_line,
    spawn_random_tile,
    validate_board,
)
from .gamemove import can_move, illegal_directions, legal_directions

__all__ = [
    'TILE_SPAWN_PROBS',
    'create_empty_board',
    'fill_cells',
    'has_any_move_available',
    'is_done',
    'merge_line',
    'move',
    'slide_and_merge',
    'slide_and_merge_line',
    'spawn_random_tile',
    'validate_board',
    'can_move',
    'illegal_directions',
    'legal_directions',
]
