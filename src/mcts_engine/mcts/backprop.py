"""Backpropagation rule for MCTS statistics.

Each rollout updates every node on the path back to the root:
- Simulation count, always
- Draw count, on draws
- Win count, when the player who moved into the node won
"""

from ..game_state import GameResult
from .node import MCTSNode


def record_result(node: MCTSNode, result: GameResult) -> None:
    """Apply one rollout result to a single node.

    Wins are counted for the player who made the move leading to this
    position. That is the side NOT to move in the node's state.

    Args:
        node: Node on the backpropagation path
        result: Rollout outcome
    """
    if result is GameResult.DRAW:
        node.draws += 1
    else:
        first_player_won = result is GameResult.FIRST_PLAYER_WIN
        moved_into = not node.state.side_to_move()
        if first_player_won == moved_into:
            node.wins += 1

    node.sims += 1
