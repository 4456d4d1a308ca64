import logging

from aocdays.day22 import MODULUS, changes, evolve, main, max_bananas, mix, prune


def test_mix_is_xor_and_self_inverse():
    assert mix(mix(42, 15), 15) == 42
    assert mix(0, 77) == 77


def test_prune_keeps_below_modulus():
    assert prune(MODULUS) == 0
    assert prune(MODULUS + 5) == 5
    assert prune(123) == 123


def test_evolve_example():
    assert evolve(123) == 15887950


def test_evolve_stays_in_range():
    secret = 1
    for _ in range(100):
        secret = evolve(secret)
        assert 0 <= secret < MODULUS


def test_changes_shape_and_consistency():
    history = changes(123)
    assert len(history) == 2001
    assert history[0] == (3, None)
    secret = 123
    for previous, current in zip(history, history[1:]):
        secret = evolve(secret)
        assert current[0] == secret % 10
        assert current[1] == current[0] - previous[0]


def test_max_bananas_example():
    assert max_bananas([1, 2, 3, 2024]) == 23


def test_max_bananas_single_buyer_is_a_price():
    assert 0 <= max_bananas([123]) <= 9


def test_max_bananas_order_does_not_matter():
    assert max_bananas([1, 2, 3, 2024]) == max_bananas([2024, 3, 2, 1])


def test_max_bananas_at_least_any_single_buyer():
    together = max_bananas([1, 2, 3, 2024])
    assert all(together >= max_bananas([secret]) for secret in (1, 2, 3, 2024))


def test_max_bananas_of_nobody():
    assert max_bananas([]) == 0


def test_main_logs_bananas(tmp_path, caplog):
    path = tmp_path / "input.txt"
    path.write_text("1\n2\n3\n2024\n")
    caplog.set_level(logging.INFO)
    assert main([str(path)]) == 0
    assert "Bananas: 23" in caplog.text