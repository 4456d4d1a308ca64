import logging

from aocdays import day10

RATING_EXAMPLE = [
    "..90..9",
    "...1.98",
    "...2..7",
    "6543456",
    "765.987",
    "876....",
    "987....",
]


def test_single_straight_trail():
    assert day10.trail_head_score(0, 0, ["0123456789"]) == 1


def test_reversed_trail_from_its_head():
    assert day10.trail_head_score(0, 9, ["9876543210"]) == 1


def test_rating_example():
    assert day10.trail_head_score(0, 3, RATING_EXAMPLE) == 13


def test_sum_matches_only_trailhead():
    assert day10.sum_scores(RATING_EXAMPLE) == day10.trail_head_score(0, 3, RATING_EXAMPLE)


def test_no_trailheads_sum_zero():
    assert day10.sum_scores(["5555", "9999"]) == 0


def test_two_heads_add_up():
    grid = ["0123456789", "0123456789"]
    single = day10.trail_head_score(0, 0, ["0123456789"])
    assert day10.sum_scores(grid) >= 2 * single


def test_dead_end_scores_zero():
    assert day10.trail_head_score(0, 0, ["01234"]) == 0


def test_main_logs_sum(tmp_path, caplog):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(RATING_EXAMPLE) + "\n", encoding="utf-8")
    caplog.set_level(logging.INFO)
    assert day10.main([str(path)]) == 0
    assert f"Sum of Scores: {day10.sum_scores(RATING_EXAMPLE)}" in caplog.text