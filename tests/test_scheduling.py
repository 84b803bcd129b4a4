import random

import pytest

from algodrills.scheduling import least_interval, least_interval_formula


def test_worked_example():
    tasks = ["A", "A", "A", "B", "B", "B"]
    assert least_interval(tasks, 2) == 8
    assert least_interval_formula(tasks, 2) == 8


def test_no_cooldown_is_task_count():
    tasks = list("AAABBBCCD")
    assert least_interval(tasks, 0) == len(tasks)
    assert least_interval_formula(tasks, 0) == len(tasks)


def test_single_task_kind():
    # k copies with cooldown n need (k - 1) * (n + 1) + 1 slots.
    assert least_interval(["A"] * 4, 3) == 3 * 4 + 1
    assert least_interval_formula(["A"] * 4, 3) == 3 * 4 + 1


def test_enough_variety_needs_no_idle():
    tasks = list("ABCDEFG")
    assert least_interval(tasks, 2) == len(tasks)
    assert least_interval_formula(tasks, 2) == len(tasks)


def test_greedy_rejects_non_uppercase():
    with pytest.raises(ValueError):
        least_interval(["a", "B"], 1)


def test_formula_rejects_non_uppercase():
    with pytest.raises(ValueError):
        least_interval_formula(["a", "B"], 1)


def test_solvers_agree_on_random_inputs():
    rng = random.Random(1234)
    for _ in range(200):
        length = rng.randint(1, 30)
        tasks = [rng.choice("ABCDEF") for _ in range(length)]
        n = rng.randint(0, 6)
        greedy = least_interval(tasks, n)
        assert greedy == least_interval_formula(tasks, n)
        assert greedy >= len(tasks)


def test_accepts_string_iterable():
    assert least_interval("AAABBB", 2) == least_interval(list("AAABBB"), 2)