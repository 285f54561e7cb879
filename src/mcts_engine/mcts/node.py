"""MCTS node stored in the tree arena."""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..game_state import GameState


@dataclass
class MCTSNode:
    """One position in the search tree plus its rollout statistics.

    Nodes never hold references to other nodes. Parent and children are
    indices into the owning tree's arena.

    Attributes:
        state: Game position for this node
        parent: Arena index of the parent (None for root)
        action: Action that led here from the parent (None for root)
        expanded: Arena indices of children created so far
        unexpanded: Legal actions not yet turned into children
        wins: Rollouts won by the player who moved into this position
        draws: Rollouts that ended in a draw
        sims: Rollouts that passed through this node
    """
    state: GameState
    parent: Optional[int] = None
    action: Any = None
    expanded: List[int] = field(default_factory=list)
    unexpanded: List[Any] = field(default_factory=list)
    wins: int = 0
    draws: int = 0
    sims: int = 0

    @property
    def losses(self) -> int:
        """Rollouts lost, tracked implicitly."""
        return self.sims - self.wins - self.draws

    def is_root(self) -> bool:
        """Check if node is the root."""
        return self.parent is None

    def is_terminal(self) -> bool:
        """Check if node has neither children nor actions left to expand."""
        return not self.unexpanded and not self.expanded

    def is_fully_expanded(self) -> bool:
        return not self.unexpanded

    def win_rate(self) -> float:
        """Fraction of rollouts won (0 if never visited)."""
        if self.sims == 0:
            return 0.0
        return self.wins / self.sims

    def __repr__(self) -> str:
        return (f"MCTSNode(parent={self.parent}, wins={self.wins}, "
                f"draws={self.draws}, sims={self.sims}, "
                f"expanded={len(self.expanded)}, unexpanded={len(self.unexpanded)})")
