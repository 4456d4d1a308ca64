import logging

from aocdays.day04 import check_x_mas, count_x_mas, main

EXAMPLE = [
    "MMMSXXMASM",
    "MSAMXMSMSA",
    "AMXSXMAAMM",
    "MSAMASMSMX",
    "XMASAMXAMM",
    "XXAMMXXAMA",
    "SMSMSASXSS",
    "SAXAMASAAA",
    "MAMMMXMMMM",
    "MXMXAXMASX",
]


def test_example_count():
    assert count_x_mas(EXAMPLE) == 9


def test_check_valid_cross():
    assert check_x_mas(["M.S", ".A.", "M.S"], 1, 1) is True
    assert check_x_mas(["M.M", ".A.", "S.S"], 1, 1) is True


def test_check_rejects_same_letter_diagonal():
    assert check_x_mas(["M.S", ".A.", "S.M"], 1, 1) is False


def test_check_rejects_wrong_letters():
    assert check_x_mas(["M.X", ".A.", "M.S"], 1, 1) is False


def test_check_at_edges_is_false():
    grid = ["M.S", ".A.", "M.S"]
    assert check_x_mas(grid, 0, 1) is False
    assert check_x_mas(grid, 1, 0) is False
    assert check_x_mas(grid, 2, 1) is False
    assert check_x_mas(grid, 1, 2) is False


def test_count_bounded_by_number_of_a():
    total_a = sum(line.count("A") for line in EXAMPLE)
    assert 0 <= count_x_mas(EXAMPLE) <= total_a


def test_grid_without_a_matches_empty():
    assert count_x_mas(["MMM", "SSS", "MMM"]) == count_x_mas([])


def test_main_logs_count(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    path = tmp_path / "in.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    assert "Count: 9" in caplog.messages