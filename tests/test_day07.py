import logging

import pytest

from aocdays import day07

EXAMPLE = [
    "190: 10 19",
    "3267: 81 40 27",
    "83: 17 5",
    "156: 15 6",
    "7290: 6 8 6 15",
    "161011: 16 10 13",
    "192: 17 8 14",
    "21037: 9 7 18 13",
    "292: 11 6 16 20",
]


def test_concat_joins_digits():
    assert day07.concat(12, 345) == 12345
    assert str(day07.concat(7, 0)) == "70"


def test_parse_equation_splits_target_and_operands():
    assert day07.parse_equation("3267: 81 40 27") == (3267, [81, 40, 27])


def test_parse_equation_without_colon_raises():
    with pytest.raises(ValueError):
        day07.parse_equation("3267 81 40 27")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("190: 10 19", True),
        ("3267: 81 40 27", True),
        ("83: 17 5", False),
        ("156: 15 6", True),
        ("7290: 6 8 6 15", True),
        ("161011: 16 10 13", False),
        ("192: 17 8 14", True),
        ("21037: 9 7 18 13", False),
        ("292: 11 6 16 20", True),
    ],
)
def test_calibration_solvable(line, expected):
    target, nums = day07.parse_equation(line)
    assert day07.test_calibration(nums, 0, target) is expected


def test_single_number_matches_only_itself():
    assert day07.test_calibration([42], 0, 42) is True
    assert day07.test_calibration([42], 0, 41) is False


def test_calibration_sum_of_example():
    assert day07.calibration_sum(EXAMPLE) == 11387


def test_calibration_sum_is_sum_of_valid_targets():
    valid = [
        day07.parse_equation(line)[0]
        for line in EXAMPLE
        if day07.test_calibration(day07.parse_equation(line)[1], 0, day07.parse_equation(line)[0])
    ]
    assert day07.calibration_sum(EXAMPLE) == sum(valid)


def test_main_logs_sum(tmp_path, caplog):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    caplog.set_level(logging.INFO)
    assert day07.main([str(path)]) == 0
    assert f"Sum: {day07.calibration_sum(EXAMPLE)}" in caplog.text