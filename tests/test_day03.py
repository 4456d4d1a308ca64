import logging

from aocdays.day03 import main, sum_enabled_products

EXAMPLE = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_example():
    assert sum_enabled_products([EXAMPLE]) == 48


def test_sum_is_additive_across_instructions():
    combined = sum_enabled_products(["mul(2,3)mul(4,5)"])
    assert combined == sum_enabled_products(["mul(2,3)"]) + sum_enabled_products(["mul(4,5)"])


def test_disabled_state_carries_across_lines():
    assert sum_enabled_products(["don't()", "mul(2,3)"]) == sum_enabled_products([])


def test_do_reenables():
    assert sum_enabled_products(["don't()mul(9,9)do()mul(2,3)"]) == sum_enabled_products(
        ["mul(2,3)"]
    )


def test_four_digit_operands_are_ignored():
    assert sum_enabled_products(["mul(1234,5)mul( 2,3)"]) == sum_enabled_products([])


def test_main_logs_count(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    path = tmp_path / "in.txt"
    path.write_text(EXAMPLE + "\n")
    assert main([str(path)]) == 0
    assert "Count: 48" in caplog.messages
    assert caplog.messages[-1] == "Done!"