"""2048 game controller: owns the current session and applies inputs to it one at a time."""

import logging
from threading import Lock
from typing import Optional

from numpy import ndarray
from numpy.random import Generator, default_rng

from slide2048.addons.config import DEFAULT_CONFIG, GameConfig
from slide2048.addons.types import Direction
from slide2048.core.gamemove import legal_directions
from slide2048.envs.session import Session, apply_move, new_game
from slide2048.utils.display import render_text, share_message, to_rows

_logger = logging.getLogger(__name__)


class TwentyFortyEight:
    """
    2048 game controller.

    This class holds the current session and serializes updates to it: each input reads the latest committed
    session, computes the next one and commits it in a single locked step.
    """

    def __init__(self, seed: Optional[int] = None, config: Optional[GameConfig] = None):
        """
        Initialize the controller and start a game.

        Parameters
        ----------
        seed : int, optional
            Seed of the random generator used for tile spawning.
        config : GameConfig, optional
            Input bindings and share settings (default is ``DEFAULT_CONFIG``).
        """
        self.config = config if config is not None else DEFAULT_CONFIG
        self._lock = Lock()
        self._rng: Generator = default_rng(seed)
        self._session: Session = new_game(rng=self._rng)

    @property
    def session(self) -> Session:
        """The last committed session."""
        return self._session

    @property
    def observation(self) -> ndarray:
        """The current board, read-only."""
        return self._session.board

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def is_finished(self) -> bool:
        return self._session.game_over

    @property
    def legal_moves(self) -> list[Direction]:
        """Directions that would change the current board."""
        return legal_directions(self._session.board)

    @property
    def share_text(self) -> Optional[str]:
        """Share message once the game is over, None while it is running."""
        if not self._session.game_over:
            return None
        return share_message(self._session.score, url=self.config.share_url)

    def reset(self, seed: Optional[int] = None) -> list[list[int]]:
        """
        Start a new game.

        Parameters
        ----------
        seed : int, optional
            Reseed the random generator before seeding the new board.

        Returns
        -------
        list[list[int]]
            The new board, row-major.
        """
        with self._lock:
            if seed is not None:
                self._rng = default_rng(seed)
            self._session = new_game(rng=self._rng)
            return to_rows(self._session.board)

    def step(self, direction: Direction) -> tuple[list[list[int]], int, bool]:
        """
        Apply a direction to the current game.

        Parameters
        ----------
        direction : Direction
            The direction of the slide.

        Returns
        -------
        tuple[list[list[int]], int, bool]
            A tuple containing:
            - The board after the move and the spawn, row-major
            - The score (sum of all tiles)
            - Whether the game is over

        Notes
        -----
        A move that changes nothing leaves the session untouched: no tile is spawned and the score is kept.
        """
        with self._lock:
            self._session = apply_move(self._session, direction, rng=self._rng)
            session = self._session
        return to_rows(session.board), session.score, session.game_over

    def handle_input(self, token: str) -> bool:
        """
        Apply a raw input token, such as a key name.

        Parameters
        ----------
        token : str
            The input token, mapped through the configured key bindings.

        Returns
        -------
        bool
            True if the token was bound to a direction, False if it was ignored.
        """
        direction = self.config.parse_direction(token)
        if direction is None:
            _logger.debug('Ignoring unbound input %r', token)
            return False

        self.step(direction)
        return True

    def render(self) -> str:
        """
        Render the game board as text.
        """
        return render_text(self._session.board)
