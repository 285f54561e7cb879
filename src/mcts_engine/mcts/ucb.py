"""UCT scoring for MCTS selection."""

import math
from typing import Optional

from .node import MCTSNode

# Theoretical optimum for rewards in [0, 1].
DEFAULT_EXPLORATION = math.sqrt(2.0)


def uct_score(
    child: MCTSNode,
    parent: MCTSNode,
    exploration_factor: Optional[float] = None
) -> float:
    """Compute UCT score.

    UCT = wins / sims + c * sqrt(ln(parent_sims) / sims)

    Args:
        child: Child node
        parent: Parent of `child`
        exploration_factor: c, defaults to sqrt(2)

    Returns:
        UCT score (inf for unvisited children)
    """
    if exploration_factor is None:
        exploration_factor = DEFAULT_EXPLORATION

    if child.sims == 0:
        return float('inf')

    exploitation = child.wins / child.sims
    exploration = exploration_factor * math.sqrt(
        math.log(parent.sims) / child.sims
    )

    return exploitation + exploration
