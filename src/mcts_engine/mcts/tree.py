"""Arena-backed MCTS tree.

All nodes live in one append-only list. A node is identified by its
position in that list, and parent/child links are plain indices, so the
tree can grow to millions of nodes without any reference cycles.
"""

import logging
from typing import Any, List, Optional, Type

import numpy as np

from ..game_state import GameResult, GameState
from .backprop import record_result
from .node import MCTSNode
from .ucb import uct_score

logger = logging.getLogger(__name__)

# Seed used when none is given. Unseeded trees are reproducible, not random.
DEFAULT_SEED = 0

# Rollouts longer than this many plies are scored as draws.
DEFAULT_MAX_ROLLOUT_PLIES = 200

ROOT = 0


class MCTSTree:
    """MCTS tree over a GameState implementation.

    Provides the four MCTS phases as separate operations so callers can
    drive the search loop themselves:

        leaf = tree.select(ROOT)
        child = tree.expand(leaf)
        result = tree.simulate(child)
        tree.backpropagate(child, result)

    Attributes:
        arena: Every node in the tree, indexed by node id
        arena_capacity: Expected number of nodes (sizing hint only)
        average_child_count: Expected children per node (sizing hint only)
        random_generator: Seeded generator for expansion and rollouts
        max_rollout_plies: Rollout length cap
    """

    def __init__(
        self,
        root_state: GameState,
        seed: Optional[int] = None,
        arena_capacity: int = 0,
        average_child_count: int = 0,
        max_rollout_plies: int = DEFAULT_MAX_ROLLOUT_PLIES
    ):
        self.arena: List[MCTSNode] = []
        self.arena_capacity = arena_capacity
        self.average_child_count = average_child_count
        self.max_rollout_plies = max_rollout_plies
        self.seed = DEFAULT_SEED if seed is None else seed
        self.random_generator = np.random.default_rng(self.seed)

        self.arena.append(MCTSNode(
            state=root_state,
            unexpanded=root_state.generate_legal_actions()
        ))
        logger.debug(
            f"Created tree with {len(self.arena[ROOT].unexpanded)} root actions "
            f"(seed={self.seed})"
        )

    @classmethod
    def with_capacity(
        cls,
        arena_capacity: int,
        seed: Optional[int],
        starting_position: str,
        average_child_count: int,
        state_type: Type[GameState],
        max_rollout_plies: int = DEFAULT_MAX_ROLLOUT_PLIES
    ) -> "MCTSTree":
        """Create a tree rooted at a parsed starting position.

        Args:
            arena_capacity: Expected number of nodes
            seed: RNG seed, DEFAULT_SEED if None
            starting_position: Position encoding understood by `state_type`
            average_child_count: Expected children per node
            state_type: GameState implementation used to parse the position
            max_rollout_plies: Rollout length cap

        Returns:
            Tree containing only the root node

        Raises:
            GameStateParseError: If the starting position is invalid
        """
        root_state = state_type.from_string(starting_position)
        return cls(
            root_state,
            seed=seed,
            arena_capacity=arena_capacity,
            average_child_count=average_child_count,
            max_rollout_plies=max_rollout_plies
        )

    def __len__(self) -> int:
        return len(self.arena)

    def node(self, index: int) -> MCTSNode:
        """Get node by arena index.

        Raises:
            IndexError: If `index` does not belong to this tree
        """
        if not 0 <= index < len(self.arena):
            raise IndexError(f"Node {index} not in tree of {len(self.arena)} nodes")
        return self.arena[index]

    @property
    def root(self) -> MCTSNode:
        return self.arena[ROOT]

    def uct(self, child: int, exploration_factor: Optional[float] = None) -> float:
        """UCT value of a node relative to its parent.

        Args:
            child: Arena index of a non-root node
            exploration_factor: c in the UCT formula, sqrt(2) if None

        Returns:
            UCT value

        Raises:
            ValueError: If `child` is the root
        """
        child_node = self.node(child)
        if child_node.parent is None:
            raise ValueError(f"Node {child} has no parent")
        return uct_score(child_node, self.arena[child_node.parent], exploration_factor)

    def get_max_uct_child(self, parent: int, exploration_factor: Optional[float] = None) -> int:
        """Child of `parent` with the highest UCT value.

        Children are scanned in creation order and only a strictly greater
        value replaces the current best, so ties go to the earlier child.

        Raises:
            ValueError: If `parent` has no expanded children
        """
        parent_node = self.node(parent)
        if not parent_node.expanded:
            raise ValueError(f"Node {parent} has no expanded children")

        best_value = float('-inf')
        best_child = parent_node.expanded[0]
        for child in parent_node.expanded:
            value = uct_score(self.arena[child], parent_node, exploration_factor)
            if value > best_value:
                best_value = value
                best_child = child

        return best_child

    def select(self, root: int = ROOT, exploration_factor: Optional[float] = None) -> int:
        """Descend by maximal UCT until a node worth expanding.

        Args:
            root: Index to start from
            exploration_factor: c in the UCT formula, sqrt(2) if None

        Returns:
            First node on the path with unexpanded actions, or a terminal node
        """
        current = root
        while self.node(current).is_fully_expanded():
            if not self.arena[current].expanded:
                return current
            current = self.get_max_uct_child(current, exploration_factor)

        return current

    def expand(self, leaf: int) -> int:
        """Materialize one random unexpanded action of `leaf`.

        Args:
            leaf: Node returned by select()

        Returns:
            Index of the new child, or `leaf` itself if it is terminal
        """
        leaf_node = self.node(leaf)
        if not leaf_node.unexpanded:
            return leaf

        choice = int(self.random_generator.integers(len(leaf_node.unexpanded)))
        action = leaf_node.unexpanded[choice]
        new_state = leaf_node.state.apply_action(action)

        self.arena.append(MCTSNode(
            state=new_state,
            parent=leaf,
            action=action,
            unexpanded=new_state.generate_legal_actions()
        ))
        child = len(self.arena) - 1

        del leaf_node.unexpanded[choice]
        leaf_node.expanded.append(child)

        return child

    def simulate(self, node: int) -> GameResult:
        """Play uniformly random moves from `node` until the game ends.

        The node's own state is left untouched and the tree is not
        modified. Rollouts reaching max_rollout_plies are scored as draws.

        Returns:
            Result of the rollout
        """
        state = self.node(node).state
        actions = state.generate_legal_actions()
        plies = 0
        while not state.is_terminal(actions):
            if plies >= self.max_rollout_plies:
                return GameResult.DRAW

            choice = int(self.random_generator.integers(len(actions)))
            state = state.apply_action(actions[choice])
            actions = state.generate_legal_actions()
            plies += 1

        return state.result()

    def backpropagate(self, node: int, result: GameResult) -> None:
        """Record a rollout result on `node` and every ancestor up to the root."""
        current: Optional[int] = node
        while current is not None:
            current_node = self.node(current)
            record_result(current_node, result)
            current = current_node.parent

    def trace_path(self, node: int) -> List[int]:
        """Indices from the root's child down to `node`.

        The root itself is not part of the path, so tracing the root gives
        an empty list.
        """
        path = []
        current = node
        while self.node(current).parent is not None:
            path.append(current)
            current = self.arena[current].parent

        path.reverse()
        return path

    def trace_actions(self, node: int) -> List[Any]:
        """Actions played from the root to reach `node`."""
        return [self.arena[index].action for index in self.trace_path(node)]

    def best_path(self, exploration_factor: float = 0.0) -> List[int]:
        """Best line found so far, starting at a root child.

        Uses pure exploitation by default. If the root still has
        unexpanded actions, the line is the best existing root child.

        Returns:
            Arena indices of the line, empty if the root has no children
        """
        path = self.trace_path(self.select(ROOT, exploration_factor))
        if not path and self.root.expanded:
            path = [self.get_max_uct_child(ROOT, exploration_factor)]
        return path

    def best_child(self, exploration_factor: float = 0.0) -> Optional[int]:
        """Root child on the best line, or None if the root has no children."""
        path = self.best_path(exploration_factor)
        if not path:
            return None
        return path[0]

    def depth(self, node: int) -> int:
        """Number of edges between `node` and the root."""
        return len(self.trace_path(node))

    def node_count(self) -> int:
        return len(self.arena)

    def get_statistics(self) -> dict:
        """Get tree statistics."""
        depths = [0] * len(self.arena)
        for index, node in enumerate(self.arena):
            # Parents always precede their children in the arena.
            if node.parent is not None:
                depths[index] = depths[node.parent] + 1

        return {
            "total_nodes": len(self.arena),
            "terminal_nodes": sum(1 for node in self.arena if node.is_terminal()),
            "max_depth": max(depths),
            "root_sims": self.root.sims,
            "root_wins": self.root.wins,
            "root_draws": self.root.draws
        }
