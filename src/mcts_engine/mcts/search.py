"""MCTS search driver.

One iteration of the search:

def iterate(tree):
    leaf = tree.select(ROOT)
    child = tree.expand(leaf)
    result = tree.simulate(child)
    tree.backpropagate(child, result)

After the iteration budget is spent, the move is read off the line that
pure exploitation (exploration factor 0) selects from the root.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, List, Optional, Type

from ..game_state import GameResult, GameState
from .tree import DEFAULT_MAX_ROLLOUT_PLIES, ROOT, MCTSTree

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for MCTS search."""
    iterations: int = 50000
    arena_capacity: int = 100000
    average_child_count: int = 30
    seed: Optional[int] = None
    # None means sqrt(2)
    exploration_factor: Optional[float] = None
    final_exploration_factor: float = 0.0
    max_rollout_plies: int = DEFAULT_MAX_ROLLOUT_PLIES
    log_interval: int = 1000

    def __post_init__(self):
        for name in ("iterations", "arena_capacity", "average_child_count", "max_rollout_plies",
                     "log_interval"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.exploration_factor is not None and self.exploration_factor < 0:
            raise ValueError(f"exploration_factor must be >= 0, got {self.exploration_factor}")
        if self.final_exploration_factor < 0:
            raise ValueError(
                f"final_exploration_factor must be >= 0, got {self.final_exploration_factor}"
            )


@dataclass
class SearchResult:
    """Outcome of one search.

    Attributes:
        action: Chosen action from the root position
        path: Arena indices of the best line, starting at a root child
        tree: The searched tree
        iterations: Iterations run
        elapsed: Wall-clock seconds spent searching
    """
    action: Any
    path: List[int]
    tree: MCTSTree = field(repr=False)
    iterations: int
    elapsed: float

    @property
    def line(self) -> List[Any]:
        """Actions along the best line."""
        return [self.tree.arena[index].action for index in self.path]


def iterate(tree: MCTSTree, exploration_factor: Optional[float] = None) -> GameResult:
    """Single MCTS iteration: select, expand, simulate, backpropagate.

    Returns:
        Result of the rollout
    """
    leaf = tree.select(ROOT, exploration_factor)
    child = tree.expand(leaf)
    result = tree.simulate(child)
    tree.backpropagate(child, result)
    return result


class MCTSSearch:
    """Runs a fixed number of MCTS iterations on a fresh tree per position."""

    def __init__(self, state_type: Type[GameState], config: Optional[SearchConfig] = None):
        self.state_type = state_type
        self.config = config or SearchConfig()

    def build_tree(self, position: str) -> MCTSTree:
        return MCTSTree.with_capacity(
            self.config.arena_capacity,
            self.config.seed,
            position,
            self.config.average_child_count,
            self.state_type,
            max_rollout_plies=self.config.max_rollout_plies
        )

    def search(self, position: str, iterations: Optional[int] = None) -> SearchResult:
        """Search a position and pick a move.

        Args:
            position: Position encoding understood by the state type
            iterations: Overrides config.iterations

        Returns:
            SearchResult with the chosen action

        Raises:
            GameStateParseError: If the position is invalid
            ValueError: If the position has no legal actions
        """
        num_iterations = self.config.iterations if iterations is None else iterations
        if num_iterations <= 0:
            raise ValueError(f"iterations must be positive, got {num_iterations}")
        start_time = time.time()

        tree = self.build_tree(position)
        if tree.root.is_terminal():
            raise ValueError("Root position has no legal actions")

        counts = {result: 0 for result in GameResult}
        for i in range(num_iterations):
            result = iterate(tree, self.config.exploration_factor)
            counts[result] += 1

            if (i + 1) % self.config.log_interval == 0:
                stats = tree.get_statistics()
                logger.info(
                    f"Iter {i + 1}/{num_iterations}: "
                    f"nodes={stats['total_nodes']}, "
                    f"max_depth={stats['max_depth']}, "
                    f"first={counts[GameResult.FIRST_PLAYER_WIN]}, "
                    f"second={counts[GameResult.SECOND_PLAYER_WIN]}, "
                    f"draws={counts[GameResult.DRAW]}"
                )

        path = tree.best_path(self.config.final_exploration_factor)
        action = tree.arena[path[0]].action
        elapsed = time.time() - start_time

        best = tree.arena[path[0]]
        logger.info(
            f"Chose {action} after {num_iterations} iterations in {elapsed:.2f}s "
            f"(wins={best.wins}, draws={best.draws}, sims={best.sims})"
        )

        return SearchResult(
            action=action,
            path=path,
            tree=tree,
            iterations=num_iterations,
            elapsed=elapsed
        )

    def best_action(self, position: str, iterations: Optional[int] = None) -> Any:
        """Search a position and return only the chosen action."""
        return self.search(position, iterations).action
