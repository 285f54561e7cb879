"""Test the search driver end to end on Nim."""

import pytest

from mcts_engine.game_state import GameResult
from mcts_engine.mcts.search import MCTSSearch, SearchConfig, iterate
from mcts_engine.mcts.tree import MCTSTree


def test_iterate_grows_tree(nim_state):
    tree = MCTSTree.with_capacity(100, 0, "7", 3, nim_state)

    result = iterate(tree)

    assert isinstance(result, GameResult)
    assert len(tree) == 2
    assert tree.root.sims == 1
    assert tree.arena[1].sims == 1


def test_iterate_fully_expands_small_game(nim_state):
    """Nim from 2 has 3 nodes besides the root: take 2, take 1, then take 1."""
    tree = MCTSTree.with_capacity(100, 0, "2", 3, nim_state)
    for _ in range(20):
        iterate(tree)

    assert len(tree) == 4
    assert tree.root.sims == 20
    assert all(node.is_fully_expanded() for node in tree.arena)


def test_search_finds_winning_move(nim_state):
    """From 5 stones taking 1 leaves the opponent a lost position."""
    config = SearchConfig(iterations=3000, seed=1, log_interval=1000)
    result = MCTSSearch(nim_state, config).search("5")

    assert result.action == 1
    assert result.line[0] == 1
    assert result.iterations == 3000
    assert result.tree.root.sims == 3000
    assert result.path[0] in result.tree.root.expanded


def test_search_takes_immediate_win(nim_state):
    search = MCTSSearch(nim_state, SearchConfig(iterations=500, seed=3))
    assert search.best_action("3") == 3


def test_search_with_fewer_iterations_than_actions(nim_state):
    """Unexpanded root actions still leave a valid choice."""
    result = MCTSSearch(nim_state, SearchConfig(iterations=1)).search("9")
    assert result.action in (1, 2, 3)
    assert len(result.path) == 1


def test_search_is_reproducible(nim_state):
    config = SearchConfig(iterations=200, seed=9)
    first = MCTSSearch(nim_state, config).search("11")
    second = MCTSSearch(nim_state, config).search("11")

    assert first.path == second.path
    assert len(first.tree) == len(second.tree)


def test_search_terminal_root_raises(nim_state):
    with pytest.raises(ValueError):
        MCTSSearch(nim_state, SearchConfig(iterations=10)).search("0")


def test_search_bad_iterations_raises(nim_state):
    with pytest.raises(ValueError):
        MCTSSearch(nim_state).search("5", iterations=0)


@pytest.mark.parametrize("kwargs", [
    {"iterations": 0},
    {"arena_capacity": -1},
    {"average_child_count": 0},
    {"max_rollout_plies": 0},
    {"exploration_factor": -0.5},
    {"final_exploration_factor": -1.0},
    {"log_interval": 0},
])
def test_search_config_validation(kwargs):
    with pytest.raises(ValueError):
        SearchConfig(**kwargs)


def test_search_config_defaults():
    config = SearchConfig()
    assert config.iterations == 50000
    assert config.seed is None
    assert config.exploration_factor is None
    assert config.final_exploration_factor == 0.0
    assert config.max_rollout_plies == 200
