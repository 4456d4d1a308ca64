import logging

from aocdays import day08

T_EXAMPLE = [
    "T.........",
    "...T......",
    ".T........",
] + ["." * 10] * 7


def test_place_overlap_along_diagonal():
    assert day08.place_overlap(0, 0, 1, 1, 5, 5) == [(2, 2), (3, 3), (4, 4)]


def test_place_overlap_stays_in_bounds():
    points = day08.place_overlap(3, 4, 5, 7, 12, 12)
    assert points
    assert all(0 <= r < 12 and 0 <= c < 12 for r, c in points)


def test_place_overlap_symmetric_in_antennas():
    first = day08.place_overlap(2, 1, 4, 5, 10, 10)
    second = day08.place_overlap(4, 5, 2, 1, 10, 10)
    assert set(first) == set(second)


def test_antinodes_of_t_example():
    assert len(day08.antinodes(T_EXAMPLE)) == 9


def test_antinodes_include_antennas():
    points = day08.antinodes(T_EXAMPLE)
    assert {(0, 0), (1, 3), (2, 1)} <= points


def test_lone_antenna_has_only_itself():
    grid = ["....", ".a..", "...."]
    assert day08.antinodes(grid) == {(1, 1)}


def test_empty_map_has_no_antinodes():
    assert day08.antinodes(["....", "...."]) == set()


def test_main_logs_count(tmp_path, caplog):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(T_EXAMPLE) + "\n", encoding="utf-8")
    caplog.set_level(logging.INFO)
    assert day08.main([str(path)]) == 0
    assert f"Overlaps: {len(day08.antinodes(T_EXAMPLE))}" in caplog.text