"""Chess positions for the MCTS engine, built on python-chess."""

from dataclasses import dataclass
from typing import List, Optional

import chess

from ..game_state import GameResult, GameState, GameStateParseError

# Plies without a capture or pawn move before the game is scored a draw.
DRAW_PLY_LIMIT = 50


@dataclass
class ChessState(GameState):
    """Chess position with a no-progress counter and the last move played.

    The counter starts at zero for every parsed position, independent of
    the FEN halfmove clock. Threefold repetition is not detected, and
    a position without legal moves is scored as mate only if the side to
    move is in check.

    Attributes:
        board: python-chess board
        fifty_move_counter: Plies since the last capture or pawn move
        last_move: Move that produced this position (None if parsed)
    """
    board: chess.Board
    fifty_move_counter: int = 0
    last_move: Optional[chess.Move] = None

    @classmethod
    def from_string(cls, encoding: str) -> "ChessState":
        try:
            board = chess.Board(encoding)
        except ValueError as e:
            raise GameStateParseError(f"Invalid FEN {encoding!r}: {e}") from e
        if not board.is_valid():
            raise GameStateParseError(f"Impossible position {encoding!r}: {board.status()!r}")
        return cls(board=board)

    def apply_action(self, action: chess.Move) -> "ChessState":
        counter = self.fifty_move_counter + 1
        if self.board.is_capture(action) or self.board.piece_type_at(action.from_square) == chess.PAWN:
            counter = 0

        board = self.board.copy(stack=False)
        board.push(action)
        return ChessState(board=board, fifty_move_counter=counter, last_move=action)

    def status_with_moves_left(self) -> bool:
        return self.fifty_move_counter < DRAW_PLY_LIMIT

    def result(self) -> GameResult:
        if not self.board.is_check() or self.fifty_move_counter >= DRAW_PLY_LIMIT:
            return GameResult.DRAW
        if self.board.turn == chess.BLACK:
            return GameResult.FIRST_PLAYER_WIN
        return GameResult.SECOND_PLAYER_WIN

    def generate_legal_actions(self) -> List[chess.Move]:
        return list(self.board.legal_moves)

    def side_to_move(self) -> bool:
        return self.board.turn == chess.WHITE

    def fen(self) -> str:
        return self.board.fen()
