# -*- coding: utf-8 -*-
"""
This module provides helpers to display game boards.

The Matplotlib window lives in `slide2048.utils.windows` and is imported from there, so that the rules engine does
not pull in Matplotlib.
"""

from .display import flatten, render_text, share_message, to_rows

__all__ = ['flatten', 'render_text', 'share_message', 'to_rows']
