# -*- coding: utf-8 -*-
"""
Configuration of the game: rules constants and input bindings.
"""
from dataclasses import dataclass, field
from typing import Optional

from slide2048.addons.types import Direction

# ##>: Board dimension. The rules engine only supports the classic 4x4 grid.
BOARD_SIZE = 4

# ##>: Tiles seeded on a new board.
INITIAL_TILES = 2

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def _default_bindings() -> dict[str, Direction]:
    bindings = {direction.value: direction for direction in Direction}

    # ##>: Browser-style key names.
    bindings.update(
        {
            'ArrowLeft': Direction.LEFT,
            'ArrowUp': Direction.UP,
            'ArrowRight': Direction.RIGHT,
            'ArrowDown': Direction.DOWN,
        }
    )
    return bindings


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration of the input surface around a game.
    """

    size: int = BOARD_SIZE

    # ##>: Input surface.
    key_bindings: dict[str, Direction] = field(default_factory=_default_bindings)
    reset_key: str = 'backspace'
    quit_key: str = 'escape'

    # ##>: Link appended to the game-over share message.
    share_url: Optional[str] = None

    def __post_init__(self):
        if self.size != BOARD_SIZE:
            raise ValueError(f'Only {BOARD_SIZE}x{BOARD_SIZE} boards are supported, got size={self.size}')
        unknown = [token for token, direction in self.key_bindings.items() if not isinstance(direction, Direction)]
        if unknown:
            raise ValueError(f'Key bindings must map to a Direction, invalid tokens: {unknown}')

    def parse_direction(self, token: str) -> Optional[Direction]:
        """Map an input token to a direction, ``None`` when the token is not bound."""
        return parse_direction(token, self.key_bindings)


def parse_direction(token: str, bindings: Optional[dict[str, Direction]] = None) -> Optional[Direction]:
    """
    Map a raw input token to a direction.

    Parameters
    ----------
    token : str
        Key name or logical direction name (e.g. ``'left'``, ``'ArrowLeft'``).
    bindings : dict, optional
        Token to direction mapping, by default the bindings of ``DEFAULT_CONFIG``.

    Returns
    -------
    Direction or None
        The bound direction, or None for an unrecognized token.
    """
    if isinstance(token, Direction):
        return token
    if bindings is None:
        bindings = DEFAULT_CONFIG.key_bindings
    return bindings.get(token)


DEFAULT_CONFIG = GameConfig()
