import logging

import pytest

from aocdays.day02 import (
    count_safe,
    main,
    parse_reports,
    pass_report,
    passes_with_dampener,
)

EXAMPLE = [
    "7 6 4 2 1",
    "1 2 7 8 9",
    "9 7 6 2 1",
    "1 3 2 4 5",
    "8 6 4 4 1",
    "1 3 6 7 9",
]


def test_parse_reports():
    assert parse_reports(["7 6 4", "1 2"]) == [[7, 6, 4], [1, 2]]


def test_parse_reports_trailing_space_and_empty_line():
    assert parse_reports(["1 2 ", ""]) == [[1, 2], []]


def test_parse_reports_double_space_fails():
    with pytest.raises(ValueError):
        parse_reports(["1  2"])


@pytest.mark.parametrize(
    "report, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
        ([], True),
        ([5], True),
    ],
)
def test_pass_report(report, expected):
    assert pass_report(report) is expected


@pytest.mark.parametrize(
    "report, expected",
    [
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], True),
        ([8, 6, 4, 4, 1], True),
    ],
)
def test_passes_with_dampener(report, expected):
    assert passes_with_dampener(report) is expected


def test_dampener_never_rejects_passing_report():
    for report in parse_reports(EXAMPLE):
        if pass_report(report):
            assert passes_with_dampener(report)


def test_count_safe_example():
    assert count_safe(parse_reports(EXAMPLE)) == 4


def test_main_logs_count(tmp_path, caplog, capsys):
    caplog.set_level(logging.INFO)
    path = tmp_path / "in.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    assert "Passed: 4" in caplog.messages
    assert capsys.readouterr().out == "Done.\n"