# -*- coding: utf-8 -*-
"""
Matplotlib window for playing 2048 by hand.

The window draws the 4x4 grid, shows the score in its title and a banner once the game is over. Keyboard events are
forwarded to a handler registered by the caller.
"""
from typing import Callable, Optional, Sequence

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event

from slide2048.addons.config import BOARD_SIZE


class WindowBoard:
    """
    Render a 2048 board with Matplotlib.

    Methods
    -------
    show_board(rows, score, game_over, message)
        Redraw the tiles, the score and the game-over banner.
    register_key_handler(key_handler)
        Forward key presses to a function.
    show(block)
        Display the window.
    close()
        Close the window.
    """

    # ##: Tile colors, by value.
    COLORS = {
        0: '#CCC0B3',
        2: '#EEE4DA',
        4: '#EDE0C8',
        8: '#F2B179',
        16: '#F59563',
        32: '#F67C5F',
        64: '#F65E3B',
        128: '#EDCF72',
        256: '#EDCC61',
        512: '#EDC850',
        1024: '#EDC53F',
        2048: '#EDC22E',
    }
    DEFAULT_COLOR = '#3C3A32'

    def __init__(self, title: str = '2048'):
        """
        Create the window.

        Parameters
        ----------
        title : str
            Prefix of the window title; the score is appended to it.
        """
        self.title = title
        self.fig = plt.figure(figsize=(4, 4.6))
        self.fig.patch.set_facecolor('#BBADA0')
        self.fig.canvas.manager.set_window_title(title)
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.88, wspace=0.05, hspace=0.05)

        self.header = self.fig.text(0.5, 0.94, '', ha='center', va='center', fontsize='large', fontweight='bold')
        self.axes = [self.fig.add_subplot(BOARD_SIZE, BOARD_SIZE, index + 1) for index in range(BOARD_SIZE**2)]
        self.texts = []
        for ax in self.axes:
            ax.set_xticks([])
            ax.set_yticks([])
            self.texts.append(ax.text(0.5, 0.5, '', ha='center', va='center', fontsize='x-large', fontweight='bold'))

        self.closed = False
        self.fig.canvas.mpl_connect('close_event', self._close_handler)

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def show_board(self, rows: Sequence[Sequence[int]], score: int, game_over: bool = False, message: str = ''):
        """
        Redraw the board.

        Parameters
        ----------
        rows : sequence of sequences of int
            The board, row-major, 0 meaning empty.
        score : int
            The current score.
        game_over : bool
            Whether to show the game-over banner.
        message : str
            Text shown under the banner once the game is over.
        """
        values = [int(value) for row in rows for value in row]
        for ax, text, value in zip(self.axes, self.texts, values):
            text.set_text(str(value) if value != 0 else '')
            text.set_color('#776E65' if value in (2, 4) else '#F9F6F2')
            ax.set_facecolor(self.COLORS.get(value, self.DEFAULT_COLOR))

        self.fig.canvas.manager.set_window_title(f'{self.title} - Score: {score}')
        self.header.set_text(f'Game Over\n{message}' if game_over else f'Score: {score}')

        self.fig.canvas.draw_idle()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a function called on every key press in the window.
        """
        self.fig.canvas.mpl_connect('key_press_event', key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        plt.close(self.fig)
        self.closed = True
