"""Game-state contract consumed by the MCTS engine.

The engine never looks at game rules. Everything it needs from a game
goes through the GameState interface below: parse a position, list its
legal actions, apply one, and classify terminal positions.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List, Optional


class GameResult(Enum):
    """Outcome of a finished two-player game."""
    FIRST_PLAYER_WIN = "first_player_win"
    SECOND_PLAYER_WIN = "second_player_win"
    DRAW = "draw"


class GameStateParseError(ValueError):
    """Raised when a position encoding cannot be parsed."""


class GameState(ABC):
    """Base class for positions the engine can search.

    Implementations must be immutable from the engine's point of view:
    apply_action returns a new position and never mutates self.
    """

    @classmethod
    @abstractmethod
    def from_string(cls, encoding: str) -> "GameState":
        """Parse a position from its string encoding.

        Raises:
            GameStateParseError: If the encoding is invalid
        """

    @abstractmethod
    def apply_action(self, action: Any) -> "GameState":
        """Return the successor position after `action`."""

    @abstractmethod
    def status_with_moves_left(self) -> bool:
        """Whether the game goes on, given that legal actions remain.

        Only called when generate_legal_actions() is non-empty. Returns
        False when the game must still be treated as over, e.g. a
        move-count draw.
        """

    @abstractmethod
    def result(self) -> GameResult:
        """Result of a terminal position."""

    @abstractmethod
    def generate_legal_actions(self) -> List[Any]:
        """Legal actions from this position. May be empty."""

    @abstractmethod
    def side_to_move(self) -> bool:
        """True if the first player is to move."""

    def is_terminal(self, actions: Optional[List[Any]] = None) -> bool:
        """Check if the game is over.

        Args:
            actions: Precomputed legal actions, to avoid generating them twice

        Returns:
            True if there are no legal actions or the game is otherwise over
        """
        if actions is None:
            actions = self.generate_legal_actions()
        return len(actions) == 0 or not self.status_with_moves_left()
