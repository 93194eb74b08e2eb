#!/usr/bin/env python3
"""Unit tests for the breadth-first state-space explorer.

Tests the explorer including:
- Move enumeration order
- Goal-directed search on the 4x4 board
- Depth limits and locked boards
- Unit-step exploration with revisit edges
- Solution path extraction
"""

import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from slidespace.errors import ValidationError
from slidespace.model.board import Board
from slidespace.model.state import Move
from slidespace.search.explorer import ExpansionPolicy, Explorer, explore, extract_path

SIMPLE_4X4 = {
    "W": 4,
    "H": 4,
    "blocks": [
        {"id": "A", "x": 1, "y": 1, "w": 2, "h": 1, "orientation": "H", "isTarget": True},
        {"id": "B", "x": 0, "y": 0, "w": 1, "h": 2, "orientation": "V"},
        {"id": "C", "x": 3, "y": 0, "w": 1, "h": 2, "orientation": "V"},
        {"id": "D", "x": 1, "y": 3, "w": 2, "h": 1, "orientation": "H"},
    ],
}

LOCKED = {
    "W": 2,
    "H": 1,
    "blocks": [
        {"id": "A", "x": 0, "y": 0, "w": 1, "h": 1, "orientation": "H", "isTarget": True},
        {"id": "B", "x": 1, "y": 0, "w": 1, "h": 1, "orientation": "H"},
    ],
}


def simple_board() -> Board:
    return Board.from_dict(SIMPLE_4X4, require_target=True)


def test_candidate_moves_order():
    """Moves are enumerated by block, then direction, then distance."""
    board = simple_board()
    explorer = Explorer(board)

    moves = explorer.candidate_moves(board.initial_configuration())

    assert moves == [
        Move("B", 0, 1, "down", 1),
        Move("B", 0, 2, "down", 2),
        Move("C", 3, 1, "down", 1),
        Move("C", 3, 2, "down", 2),
        Move("D", 0, 3, "left", 1),
        Move("D", 2, 3, "right", 1),
    ]

    print("✓ Candidate move order test passed")


def test_unit_step_candidates_are_single_cells():
    """Unit-step expansion only produces one-cell moves."""
    board = simple_board()
    explorer = Explorer(board, ExpansionPolicy.UNIT_STEP)

    moves = explorer.candidate_moves(board.initial_configuration())

    assert [move.label for move in moves] == ["B down", "C down", "D left", "D right"]
    assert all(move.distance == 1 for move in moves)

    print("✓ Unit-step candidate test passed")


def test_goal_search_finds_exit():
    """The target block exits after C slides down two cells."""
    board = simple_board()
    result = explore(board, depth_limit=8, stop_on_goal=True)

    assert result.solved_node_id == 17
    assert result.solution_path == [0, 4, 17]
    assert result.move_count == 2
    assert [move.label for move in result.solution_moves()] == ["C down", "A right"]

    solved = result.nodes[result.solved_node_id]
    x, _ = solved.configuration["A"]
    assert x + 2 == board.width
    assert result.depth_counts == {0: 1, 1: 6, 2: 11}
    assert result.nodes[4].children == [17]

    print("✓ Goal search test passed")


def test_goal_is_first_on_path():
    """No ancestor of the solved node satisfies the goal."""
    board = simple_board()
    result = explore(board, depth_limit=8, stop_on_goal=True)

    path = result.solution_path
    assert board.is_solved(result.nodes[path[-1]].configuration)
    for node_id in path[:-1]:
        assert not board.is_solved(result.nodes[node_id].configuration)

    print("✓ Goal first-on-path test passed")


def test_depth_limit_too_shallow():
    """With depth 1 the goal is out of reach and only first moves exist."""
    result = explore(simple_board(), depth_limit=1, stop_on_goal=True)

    assert result.solved_node_id is None
    assert result.solution_path == []
    assert result.move_count is None
    assert result.depth_counts == {0: 1, 1: 6}
    assert len(result.nodes) == 7

    print("✓ Depth limit test passed")


def test_locked_board():
    """A board with no legal moves yields only the root."""
    board = Board.from_dict(LOCKED, require_target=True)
    result = explore(board, depth_limit=5, stop_on_goal=True)

    assert len(result.nodes) == 1
    assert result.depth_counts == {0: 1}
    assert result.solved_node_id is None
    assert result.edges == []
    assert result.root.parent is None
    assert result.root.move is None
    assert result.root.label == "start"

    print("✓ Locked board test passed")


def test_configurations_stay_legal():
    """Every discovered configuration is in-bounds and overlap-free."""
    board = simple_board()
    for policy in ExpansionPolicy:
        result = explore(board, depth_limit=None, stop_on_goal=False, policy=policy)
        for node in result.nodes:
            assert node.configuration.is_legal(board.blocks, board.width, board.height)

    print("✓ Legal configuration test passed")


def test_bfs_layering_and_ids():
    """Ids follow creation order and every child sits one level below its parent."""
    result = explore(simple_board(), depth_limit=4, stop_on_goal=False)

    assert [node.id for node in result.nodes] == list(range(len(result.nodes)))
    for node in result.nodes[1:]:
        parent = result.nodes[node.parent]
        assert parent.depth == node.depth - 1
        assert node.id in parent.children
        assert node.depth <= 4

    depths = [node.depth for node in result.nodes]
    assert depths == sorted(depths)
    for depth, count in result.depth_counts.items():
        assert depths.count(depth) == count

    print("✓ BFS layering test passed")


def test_keys_are_unique():
    """No two nodes share a configuration key."""
    result = explore(simple_board(), depth_limit=None, stop_on_goal=False)

    keys = [node.key for node in result.nodes]
    assert len(keys) == len(set(keys))
    assert result.index == {key: i for i, key in enumerate(keys)}
    assert result.node_for(result.nodes[3].configuration) is result.nodes[3]

    print("✓ Unique key test passed")


def test_determinism():
    """Repeated runs produce identical results."""
    board = simple_board()
    for policy in ExpansionPolicy:
        first = explore(board, depth_limit=6, stop_on_goal=False, policy=policy)
        second = explore(board, depth_limit=6, stop_on_goal=False, policy=policy)
        assert first.to_dict() == second.to_dict()

    print("✓ Determinism test passed")


def test_slide_edges_form_tree():
    """Slide expansion records exactly one edge per non-root node."""
    result = explore(simple_board(), depth_limit=None, stop_on_goal=False)

    assert len(result.edges) == len(result.nodes) - 1
    assert sorted(result.edges) == sorted((node.parent, node.id) for node in result.nodes[1:])

    print("✓ Slide tree edge test passed")


def test_unit_step_keeps_revisit_edges():
    """Unit-step expansion records edges back to already-seen nodes."""
    board = simple_board()
    result = explore(board, depth_limit=None, stop_on_goal=False, policy=ExpansionPolicy.UNIT_STEP)

    assert len(result.edges) > len(result.nodes) - 1
    for node in result.nodes[1:]:
        assert (node.parent, node.id) in result.edges
        assert (node.id, node.parent) in result.edges

    explorer = Explorer(board, ExpansionPolicy.UNIT_STEP)
    for src, dst in result.edges:
        before = result.nodes[src].configuration
        after = result.nodes[dst].configuration
        assert after in [before.apply_move(move) for move in explorer.candidate_moves(before)]

    print("✓ Unit-step revisit edge test passed")


def test_unit_step_goal_search():
    """Unit steps need one extra move to free the target."""
    result = explore(simple_board(), depth_limit=8, stop_on_goal=True, policy=ExpansionPolicy.UNIT_STEP)

    assert result.move_count == 3
    assert [move.label for move in result.solution_moves()] == ["C down", "C down", "A right"]

    print("✓ Unit-step goal search test passed")


def test_target_already_at_exit():
    """A board placed with the target at the exit is solved at the root."""
    board = Board.from_dict({
        "W": 4,
        "H": 2,
        "blocks": [
            {"id": "A", "x": 2, "y": 0, "w": 2, "h": 1, "orientation": "H", "isTarget": True},
            {"id": "B", "x": 0, "y": 1, "w": 1, "h": 1, "orientation": "H"},
        ],
    })
    result = explore(board, depth_limit=3, stop_on_goal=True)

    assert result.solved_node_id == 0
    assert result.solution_path == [0]
    assert result.move_count == 0
    assert result.solution_moves() == []
    assert len(result.nodes) == 1
    assert result.depth_counts == {0: 1}

    result = explore(board, depth_limit=3, stop_on_goal=False)
    assert result.solved_node_id is None
    assert len(result.nodes) > 1

    print("✓ Solved root test passed")


def test_stop_on_goal_follows_policy_by_default():
    """Slides stop at the exit by default, unit steps keep exploring."""
    board = simple_board()

    assert explore(board, depth_limit=8).solved_node_id == 17

    result = explore(board, depth_limit=None, policy=ExpansionPolicy.UNIT_STEP)
    assert result.solved_node_id is None
    assert any(board.is_solved(node.configuration) for node in result.nodes)

    print("✓ Policy default stop test passed")


def test_free_block_unit_steps():
    """A free block steps along either axis and revisits create a cycle."""
    board = Board.from_dict({
        "W": 2,
        "H": 2,
        "blocks": [{"id": "F", "x": 0, "y": 0, "w": 1, "h": 1, "orientation": "F"}],
    })
    result = explore(board, depth_limit=None, stop_on_goal=False, policy=ExpansionPolicy.UNIT_STEP)

    assert [node.configuration["F"] for node in result.nodes] == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert result.depth_counts == {0: 1, 1: 2, 2: 1}
    assert result.edges == [(0, 1), (0, 2), (1, 0), (1, 3), (2, 3), (2, 0), (3, 2), (3, 1)]

    print("✓ Free block unit-step test passed")


def test_free_block_slides():
    """Slide expansion of a free block produces one move per reachable distance."""
    board = Board.from_dict({
        "W": 3,
        "H": 1,
        "blocks": [{"id": "F", "x": 0, "y": 0, "w": 1, "h": 1, "orientation": "F"}],
    })
    result = explore(board, depth_limit=None, stop_on_goal=False)

    assert len(result.nodes) == 3
    assert result.edges == [(0, 1), (0, 2)]
    assert [node.move.distance for node in result.nodes[1:]] == [1, 2]

    print("✓ Free block slide test passed")


def test_invalid_parameters_rejected():
    """Depth limits below one and goal searches without a target are rejected."""
    board = simple_board()
    with pytest.raises(ValidationError):
        explore(board, depth_limit=0)

    targetless = Board.from_dict({
        "W": 3,
        "H": 1,
        "blocks": [{"id": "B", "x": 0, "y": 0, "w": 1, "h": 1, "orientation": "H"}],
    })
    with pytest.raises(ValidationError):
        explore(targetless, depth_limit=3, stop_on_goal=True)

    result = explore(targetless, depth_limit=3, stop_on_goal=False)
    assert result.solved_node_id is None

    print("✓ Invalid parameter test passed")


def test_extract_path():
    """Path extraction walks parents and tolerates missing goals."""
    result = explore(simple_board(), depth_limit=3, stop_on_goal=False)

    assert extract_path(result.nodes, None) == []
    assert extract_path(result.nodes, len(result.nodes) + 5) == []
    assert extract_path(result.nodes, 0) == [0]

    deepest = result.nodes[-1]
    path = extract_path(result.nodes, deepest.id)
    assert path[0] == 0
    assert path[-1] == deepest.id
    assert len(path) == deepest.depth + 1
    for parent_id, child_id in zip(path, path[1:]):
        assert result.nodes[child_id].parent == parent_id

    print("✓ Path extraction test passed")


def run_all_tests():
    """Run all explorer tests."""
    print("=== Running Explorer Tests ===\n")

    test_candidate_moves_order()
    test_unit_step_candidates_are_single_cells()
    test_goal_search_finds_exit()
    test_goal_is_first_on_path()
    test_depth_limit_too_shallow()
    test_locked_board()
    test_configurations_stay_legal()
    test_bfs_layering_and_ids()
    test_keys_are_unique()
    test_determinism()
    test_slide_edges_form_tree()
    test_unit_step_keeps_revisit_edges()
    test_unit_step_goal_search()
    test_target_already_at_exit()
    test_stop_on_goal_follows_policy_by_default()
    test_free_block_unit_steps()
    test_free_block_slides()
    test_invalid_parameters_rejected()
    test_extract_path()

    print("\n=== All Explorer Tests Passed! ===")


if __name__ == "__main__":
    run_all_tests()
