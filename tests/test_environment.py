"""
Tests for the 2048 game controller.

Tests cover the controller API, input handling through key bindings, the share message and serialized updates
from concurrent inputs.
"""

from threading import Thread
from unittest import TestCase, main

import numpy as np

from slide2048.addons.config import GameConfig
from slide2048.addons.types import Direction
from slide2048.envs.session import Session
from slide2048.envs.twentyfortyeight import TwentyFortyEight

CHECKERBOARD = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])


class TestControllerInterface(TestCase):
    """Test TwentyFortyEight API and state management."""

    def setUp(self):
        """Initialize a fresh controller before each test."""
        self.game = TwentyFortyEight(seed=0)

    def test_initial_state(self):
        """A new controller starts a running game with two tiles."""
        self.assertEqual(np.count_nonzero(self.game.observation), 2)
        self.assertEqual(self.game.score, 0)
        self.assertFalse(self.game.is_finished)
        self.assertIsNone(self.game.share_text)

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical initial board state."""
        first = self.game.reset(seed=42)
        second = self.game.reset(seed=42)
        self.assertEqual(first, second)

    def test_reset_returns_rows(self):
        rows = self.game.reset()
        self.assertEqual(len(rows), 4)
        self.assertTrue(all(len(row) == 4 for row in rows))
        self.assertEqual(sum(value != 0 for row in rows for value in row), 2)

    def test_step_return_signature(self):
        """Step returns the rows, the score and the game-over flag."""
        self.game._session = Session(board=[[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        rows, score, done = self.game.step(Direction.LEFT)

        self.assertEqual(rows[0][0], 4)
        self.assertIsInstance(score, int)
        self.assertEqual(score, sum(sum(row) for row in rows))
        self.assertFalse(done)

    def test_step_no_op(self):
        """A rejected move keeps the board and the score."""
        session = Session(board=[[2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], score=6)
        self.game._session = session

        rows, score, done = self.game.step(Direction.LEFT)
        self.assertIs(self.game.session, session)
        self.assertEqual(rows, [[2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(score, 6)
        self.assertFalse(done)

    def test_legal_moves(self):
        self.game._session = Session(board=[[2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(self.game.legal_moves, [Direction.RIGHT, Direction.DOWN])

    def test_render(self):
        self.game._session = Session(board=[[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 4]])
        lines = self.game.render().splitlines()
        self.assertEqual(len(lines), 4)
        self.assertEqual(lines[0], '2 \t0 \t0 \t0')
        self.assertEqual(lines[3], '0 \t0 \t0 \t4')


class TestInputHandling(TestCase):
    """Test raw tokens mapped through key bindings."""

    def setUp(self):
        self.game = TwentyFortyEight(seed=1)
        self.game._session = Session(board=[[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])

    def test_arrow_key(self):
        self.assertTrue(self.game.handle_input('ArrowLeft'))
        self.assertEqual(self.game.observation[0, 0], 2)

    def test_matplotlib_key_name(self):
        self.assertTrue(self.game.handle_input('down'))
        self.assertEqual(self.game.observation[3, 3], 2)

    def test_unknown_token_ignored(self):
        session = self.game.session
        self.assertFalse(self.game.handle_input('q'))
        self.assertFalse(self.game.handle_input(None))
        self.assertIs(self.game.session, session)

    def test_custom_bindings(self):
        game = TwentyFortyEight(seed=1, config=GameConfig(key_bindings={'a': Direction.LEFT}))
        game._session = self.game.session
        self.assertFalse(game.handle_input('left'))
        self.assertTrue(game.handle_input('a'))


class TestGameOver(TestCase):
    """Test the end of a game."""

    def test_share_text(self):
        game = TwentyFortyEight(seed=0)
        game._session = Session(board=CHECKERBOARD, score=48, game_over=True)
        self.assertTrue(game.is_finished)
        self.assertEqual(game.share_text, 'I scored 48 points in 2048!')

    def test_share_text_with_url(self):
        game = TwentyFortyEight(seed=0, config=GameConfig(share_url='https://example.com/2048'))
        game._session = Session(board=CHECKERBOARD, score=48, game_over=True)
        self.assertEqual(game.share_text, 'I scored 48 points in 2048! https://example.com/2048')

    def test_reset_after_game_over(self):
        game = TwentyFortyEight(seed=0)
        game._session = Session(board=CHECKERBOARD, score=48, game_over=True)

        game.reset()
        self.assertFalse(game.is_finished)
        self.assertEqual(game.score, 0)
        self.assertEqual(np.count_nonzero(game.observation), 2)

    def test_game_reaches_termination(self):
        """Playing the first legal move eventually ends the game."""
        game = TwentyFortyEight(seed=42)
        for _ in range(5000):
            legal = game.legal_moves
            if not legal:
                break
            _, _, done = game.step(legal[0])
            if done:
                break

        self.assertTrue(game.is_finished)
        self.assertEqual(game.legal_moves, [])


class TestConcurrentInputs(TestCase):
    """Test that concurrent inputs are applied one at a time."""

    def test_threads(self):
        game = TwentyFortyEight(seed=3)
        errors = []

        def press(offset: int):
            try:
                for index in range(50):
                    game.step(list(Direction)[(index + offset) % 4])
            except Exception as error:
                errors.append(error)

        threads = [Thread(target=press, args=(offset,)) for offset in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(errors, [])
        session = game.session
        self.assertEqual(session.score, int(session.board.sum()))
        self.assertEqual(session.game_over, not game.legal_moves)


if __name__ == '__main__':
    main()
