"""MCTS module: tree search for two-player games.

Selection follows UCT down the tree.
Expansion adds one random untried action.
Simulation plays random moves to the end of the game.
Backpropagation credits the result to every node on the path.
"""

from .node import MCTSNode
from .tree import MCTSTree, ROOT, DEFAULT_SEED, DEFAULT_MAX_ROLLOUT_PLIES
from .ucb import uct_score, DEFAULT_EXPLORATION
from .backprop import record_result
from .search import MCTSSearch, SearchConfig, SearchResult, iterate

__all__ = [
    "MCTSNode",
    "MCTSTree",
    "ROOT",
    "DEFAULT_SEED",
    "DEFAULT_MAX_ROLLOUT_PLIES",
    "uct_score",
    "DEFAULT_EXPLORATION",
    "record_result",
    "MCTSSearch",
    "SearchConfig",
    "SearchResult",
    "iterate"
]
