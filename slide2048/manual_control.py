# -*- coding: utf-8 -*-
"""
Play 2048 with the keyboard.

Arrow keys slide the tiles, backspace starts a new game and escape closes the window.
"""
import logging
from argparse import ArgumentParser
from typing import Any, Optional, Sequence

from slide2048.envs import TwentyFortyEight
from slide2048.utils.windows import WindowBoard

_logger = logging.getLogger(__name__)


def redraw(game: TwentyFortyEight, window: WindowBoard):
    """
    Redraw the game board.

    Parameters
    ----------
    game: TwentyFortyEight
        The game controller

    window: WindowBoard
        Class to draw the game board
    """
    session = game.session
    window.show_board(
        rows=session.board, score=session.score, game_over=session.game_over, message=game.share_text or ''
    )


def key_handler(game: TwentyFortyEight, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: TwentyFortyEight
        The game controller

    window: WindowBoard
        Class to draw the game board

    event: Any
        Key event to handle
    """
    _logger.debug('Pressed %s', event.key)

    if event.key == game.config.quit_key:
        window.close()
        return

    if event.key == game.config.reset_key:
        game.reset()
        redraw(game, window)
        return

    if game.handle_input(event.key):
        redraw(game, window)
        if game.is_finished:
            _logger.info('%s', game.share_text)


def main(argv: Optional[Sequence[str]] = None):
    parser = ArgumentParser(description='Play 2048 with the keyboard')
    parser.add_argument('--seed', type=int, default=None, help='Seed of the tile spawner')
    parser.add_argument('--log-level', type=str, default='INFO', help='Logging level')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    game = TwentyFortyEight(seed=args.seed)
    window = WindowBoard(title='2048')
    window.register_key_handler(lambda event: key_handler(game, window, event))

    redraw(game, window)

    # ##: Blocking event loop.
    window.show(block=True)


if __name__ == '__main__':
    main()
