"""Pick a chess move for a FEN position with MCTS.

Usage:
    mcts-engine --fen "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1" \
        --iterations 20000 \
        --seed 7
"""

import argparse
import logging
import sys
from typing import List, Optional

import chess

from .config import load_config
from .game_state import GameStateParseError
from .games.chess_state import ChessState
from .mcts.search import MCTSSearch
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Choose a chess move with Monte Carlo Tree Search")
    parser.add_argument("--fen", type=str, default=chess.STARTING_FEN,
                        help="Position to search (default: starting position)")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML search config")
    parser.add_argument("--iterations", type=int, default=None,
                        help="MCTS iterations (overrides config)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (overrides config)")
    parser.add_argument("--exploration", type=float, default=None,
                        help="UCT exploration factor (default: sqrt(2))")
    parser.add_argument("--log-level", type=str.upper, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Optional log file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        config = load_config(
            args.config,
            iterations=args.iterations,
            seed=args.seed,
            exploration_factor=args.exploration
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Bad configuration: {e}")
        return 2

    search = MCTSSearch(ChessState, config)
    try:
        result = search.search(args.fen)
    except GameStateParseError as e:
        logger.error(str(e))
        return 2
    except ValueError as e:
        logger.error(f"Cannot search position: {e}")
        return 1

    print(result.action.uci())
    return 0


if __name__ == "__main__":
    sys.exit(main())
