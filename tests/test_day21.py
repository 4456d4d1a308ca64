import pytest

from aocdays.day21 import (
    DIRECTIONAL,
    NUMERIC,
    all_shortest_paths,
    complexity,
    get_cost,
    get_pad,
)

STEPS = {">": (0, 1), "<": (0, -1), "v": (1, 0), "^": (-1, 0)}


def _follow(pad, c1, presses):
    row, col = pad.position(c1)
    for press in presses[:-1]:
        d_row, d_col = STEPS[press]
        row, col = row + d_row, col + d_col
        assert (row, col) != pad.dead
    return row, col


@pytest.mark.parametrize(
    "pad, c1, c2",
    [
        (NUMERIC, "7", "A"),
        (NUMERIC, "A", "7"),
        (NUMERIC, "0", "9"),
        (DIRECTIONAL, "A", "<"),
        (DIRECTIONAL, "<", "^"),
    ],
)
def test_paths_reach_target_and_avoid_gap(pad, c1, c2):
    paths = all_shortest_paths(pad, c1, c2)
    assert paths
    assert len(set(paths)) == len(paths)
    lengths = {len(path) for path in paths}
    assert len(lengths) == 1
    for path in paths:
        assert path.endswith("A")
        assert _follow(pad, c1, path) == pad.position(c2)


def test_same_key_is_a_single_press():
    assert all_shortest_paths(NUMERIC, "5", "5") == ["A"]


def test_unknown_key_raises():
    with pytest.raises(ValueError):
        all_shortest_paths(DIRECTIONAL, "A", "7")


def test_get_pad_by_depth():
    assert get_pad(25) is NUMERIC
    assert get_pad(0) is DIRECTIONAL
    assert get_pad(24) is DIRECTIONAL


@pytest.mark.parametrize("key, depth", [("A", 0), ("<", 3), ("A", 25), ("7", 25)])
def test_same_key_costs_one(key, depth):
    assert get_cost(key, key, depth) == 1


def test_cost_on_bottom_pad():
    assert get_cost("A", "<", 0) == 4


@pytest.mark.parametrize("c1, c2", [("A", "<"), ("^", ">"), ("v", "A"), ("<", "A")])
def test_cost_grows_with_depth(c1, c2):
    assert get_cost(c1, c2, 1) >= get_cost(c1, c2, 0)


def test_complexity_is_additive():
    both = complexity(["029A", "980A"])
    assert both == complexity(["029A"]) + complexity(["980A"])


def test_complexity_is_multiple_of_code():
    assert complexity(["029A"]) % 29 == 0
    assert complexity(["029A"]) > 0