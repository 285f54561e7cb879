"""Pytest fixtures for testing."""

from dataclasses import dataclass, field
from typing import List

import pytest

from mcts_engine.game_state import GameResult, GameState, GameStateParseError
from mcts_engine.mcts.node import MCTSNode
from mcts_engine.mcts.tree import MCTSTree


@dataclass
class PlaceholderState(GameState):
    """Game state with just enough logic to test the tree, not rollouts.

    Parsed positions have no legal actions. Side to move follows depth
    parity, so the first player moves at even depths.
    """
    last_action_made: int = 0
    depth_counter: int = 0

    @classmethod
    def from_string(cls, encoding):
        return cls()

    def apply_action(self, action):
        return PlaceholderState(last_action_made=action, depth_counter=self.depth_counter + 1)

    def status_with_moves_left(self):
        return False

    def result(self):
        return GameResult.DRAW

    def generate_legal_actions(self):
        return []

    def side_to_move(self):
        return self.depth_counter % 2 == 0


@dataclass
class NimState(GameState):
    """Take 1-3 stones; whoever takes the last stone wins."""
    stones: int
    first_to_move: bool = True

    @classmethod
    def from_string(cls, encoding):
        try:
            stones = int(encoding)
        except ValueError as e:
            raise GameStateParseError(f"Not a stone count: {encoding!r}") from e
        if stones < 0:
            raise GameStateParseError(f"Negative stone count: {stones}")
        return cls(stones=stones)

    def apply_action(self, action):
        return NimState(stones=self.stones - action, first_to_move=not self.first_to_move)

    def status_with_moves_left(self):
        return True

    def result(self):
        # The player who just moved took the last stone.
        if self.first_to_move:
            return GameResult.SECOND_PLAYER_WIN
        return GameResult.FIRST_PLAYER_WIN

    def generate_legal_actions(self):
        return [take for take in (1, 2, 3) if take <= self.stones]

    def side_to_move(self):
        return self.first_to_move


@dataclass
class EndlessState(GameState):
    """Game that never ends. Every applied action is appended to `log`."""
    log: List[int] = field(default_factory=list)

    @classmethod
    def from_string(cls, encoding):
        return cls()

    def apply_action(self, action):
        self.log.append(action)
        return EndlessState(log=self.log)

    def status_with_moves_left(self):
        return True

    def result(self):
        raise AssertionError("endless game has no result")

    def generate_legal_actions(self):
        return [0, 1]

    def side_to_move(self):
        return len(self.log) % 2 == 0


def _add_node(tree, depth, parent, expanded, unexpanded, wins, sims):
    tree.arena.append(MCTSNode(
        state=PlaceholderState(last_action_made=0, depth_counter=depth),
        parent=parent,
        expanded=expanded,
        unexpanded=unexpanded,
        wins=wins,
        sims=sims
    ))


@pytest.fixture
def placeholder_state():
    return PlaceholderState


@pytest.fixture
def nim_state():
    return NimState


@pytest.fixture
def endless_state():
    return EndlessState


@pytest.fixture
def example_tree():
    """Hand-built 12-node tree with known statistics.

            0 (5/12)
           /        \\
       1 (5/8)        8 (2/4)
      /   |   \\       /    \\
  2 (1/2) 4 (0/1) 5 (2/4) 9 (1/1) 10 (1/2)
    |            /  \\            |
  3 (1/1)   6 (0/1) 7 (2/2)    11 (0/1)

    Node 3 still has actions 10 and 11 to expand. Draws are left out
    since they do not affect selection.
    """
    tree = MCTSTree.with_capacity(100, None, "", 10, PlaceholderState)
    tree.arena[0].wins = 5
    tree.arena[0].sims = 12
    tree.arena[0].expanded = [1, 8]

    _add_node(tree, 1, 0, [2, 4, 5], [], 5, 8)
    _add_node(tree, 2, 1, [3], [], 1, 2)
    _add_node(tree, 3, 2, [], [10, 11], 1, 1)
    _add_node(tree, 2, 1, [], [], 0, 1)
    _add_node(tree, 2, 1, [6, 7], [], 2, 4)
    _add_node(tree, 3, 5, [], [], 0, 1)
    _add_node(tree, 3, 5, [], [], 2, 2)
    _add_node(tree, 1, 0, [9, 10], [], 2, 4)
    _add_node(tree, 2, 8, [], [], 1, 1)
    _add_node(tree, 2, 8, [11], [], 1, 2)
    _add_node(tree, 3, 10, [], [], 0, 1)

    return tree
