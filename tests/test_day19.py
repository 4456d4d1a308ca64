import pytest

from aocdays.day19 import (
    design_possible,
    number_of_designs,
    parse_towels,
    total_arrangements,
)

TOWEL_LINE = "r, wr, b, g, bwu, rb, gb, br"
TOWELS = ["r", "wr", "b", "g", "bwu", "rb", "gb", "br"]
DESIGNS = ["brwrr", "bggr", "gbbr", "rrbgbr", "ubwu", "bwurrg", "brgr", "bbrgwb"]


def test_parse_towels():
    assert parse_towels(TOWEL_LINE) == TOWELS


def test_parse_towels_comma_without_space_keeps_text():
    assert parse_towels("a,b") == ["a", "ab"]


def test_number_of_designs_small():
    assert number_of_designs("ab", ["a", "b", "ab"]) == 2


def test_empty_design_has_one_arrangement():
    assert number_of_designs("", TOWELS) == 1
    assert design_possible("", TOWELS) is True


@pytest.mark.parametrize("design", DESIGNS)
def test_possible_agrees_with_count(design):
    assert design_possible(design, TOWELS) == (number_of_designs(design, TOWELS) > 0)


def test_impossible_design():
    assert design_possible("ubwu", TOWELS) is False
    assert number_of_designs("ubwu", TOWELS) == 0


def test_towel_set_changes_result():
    assert design_possible("ab", ["a", "b"]) is True
    assert design_possible("ab", ["a"]) is False


def test_total_is_sum_of_counts():
    lines = [TOWEL_LINE, ""] + DESIGNS
    assert total_arrangements(lines) == sum(number_of_designs(d, TOWELS) for d in DESIGNS)


def test_total_example():
    assert total_arrangements([TOWEL_LINE, ""] + DESIGNS) == 16


def test_total_requires_towel_line():
    with pytest.raises(ValueError):
        total_arrangements([])