import pytest

from aocdays import day13
from aocdays.day13 import Game

EXAMPLE = [
    "Button A: X+94, Y+34",
    "Button B: X+22, Y+67",
    "Prize: X=8400, Y=5400",
    "",
    "Button A: X+26, Y+66",
    "Button B: X+67, Y+21",
    "Prize: X=12748, Y=12176",
]


def test_parse_games_reads_buttons_and_offsets_prize():
    games = day13.parse_games(EXAMPLE)
    assert len(games) == 2
    assert games[0].button_a == (94, 34)
    assert games[0].button_b == (22, 67)
    assert games[0].prize == (8400 + 10000000000000, 5400 + 10000000000000)
    assert games[1].button_a == (26, 66)


def test_parse_games_ignores_other_lines():
    assert day13.parse_games(["nothing here", ""]) == []


def test_fewest_tokens_example_machine():
    game = Game((8400, 5400), (94, 34), (22, 67))
    assert day13.fewest_tokens(game) == 280


def test_unwinnable_machine_costs_nothing():
    game = Game((12748, 12176), (26, 66), (67, 21))
    assert day13.fewest_tokens(game) == 0


def test_parallel_buttons_cost_nothing():
    game = Game((10, 10), (1, 1), (2, 2))
    assert day13.fewest_tokens(game) == 0


@pytest.mark.parametrize(("a", "b"), [(0, 0), (3, 0), (0, 5), (17, 29), (80, 40)])
def test_constructed_prize_round_trip(a, b):
    button_a, button_b = (94, 34), (22, 67)
    prize = (a * button_a[0] + b * button_b[0], a * button_a[1] + b * button_b[1])
    assert day13.fewest_tokens(Game(prize, button_a, button_b)) == 3 * a + b


def test_negative_presses_rejected():
    button_a, button_b = (3, 1), (1, 3)
    prize = (-1 * 3 + 4 * 1, -1 * 1 + 4 * 3)
    assert day13.fewest_tokens(Game(prize, button_a, button_b)) == 0