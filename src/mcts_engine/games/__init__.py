"""Game-state implementations."""

from .chess_state import ChessState, DRAW_PLY_LIMIT

__all__ = [
    "ChessState",
    "DRAW_PLY_LIMIT"
]
