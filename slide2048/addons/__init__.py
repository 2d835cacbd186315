# -*- coding: utf-8 -*-
"""
Types and configuration shared by the rules engine and the session controller.
"""

from .config import BOARD_SIZE, DEFAULT_CONFIG, INITIAL_TILES, TILE_SPAWN_PROBS, GameConfig, parse_direction
from .types import Direction, MoveResult

__all__ = [
    'BOARD_SIZE',
    'DEFAULT_CONFIG',
    'INITIAL_TILES',
    'TILE_SPAWN_PROBS',
    'GameConfig',
    'parse_direction',
    'Direction',
    'MoveResult',
]
