"""Monte Carlo Tree Search engine for two-player, perfect-information games.

Core loop, repeated for a fixed number of iterations:
1. Select: follow maximal UCT from the root to a node with untried actions
2. Expand: add one random untried action as a new node
3. Simulate: play random moves until the game ends
4. Backpropagate: credit the result to every node back to the root

Components:
- game_state - GameState interface every game implements
- mcts/ - Arena-backed tree, UCT, backpropagation, search driver
- games/ - Chess positions on python-chess
"""

__version__ = "0.1.0"

from .game_state import GameResult, GameState, GameStateParseError
from .mcts.node import MCTSNode
from .mcts.tree import MCTSTree
from .mcts.search import MCTSSearch, SearchConfig, SearchResult, iterate
from .config import load_config

__all__ = [
    "GameResult",
    "GameState",
    "GameStateParseError",
    "MCTSNode",
    "MCTSTree",
    "MCTSSearch",
    "SearchConfig",
    "SearchResult",
    "iterate",
    "load_config"
]
