# -*- coding: utf-8 -*-
"""
Session layer of the 2048 game.

This module provides the immutable `Session` value with the pure `new_game` and `apply_move` functions, and the
`TwentyFortyEight` controller which owns the current session.
"""

from .session import Session, apply_move, board_score, new_game
from .twentyfortyeight import TwentyFortyEight

__all__ = ['Session', 'apply_move', 'board_score', 'new_game', 'TwentyFortyEight']
