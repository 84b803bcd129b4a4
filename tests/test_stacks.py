import pytest

from algodrills.stacks import (
    car_fleet,
    daily_temperatures,
    eval_rpn,
    generate_parentheses,
    is_valid_parentheses,
    largest_rectangle_area,
)


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_generated_parentheses_are_valid(n):
    for s in generate_parentheses(n):
        assert is_valid_parentheses(s)


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_truncated_strings_are_invalid(n):
    for s in generate_parentheses(n):
        assert not is_valid_parentheses(s[:-1])
        assert not is_valid_parentheses(s[1:])


def test_mismatched_and_foreign_characters_are_invalid():
    assert not is_valid_parentheses("(]")
    assert not is_valid_parentheses("(a)")
    assert not is_valid_parentheses("]")


def test_nested_mixed_brackets_valid():
    assert is_valid_parentheses("{[()]}()")
    assert is_valid_parentheses("")


def test_eval_rpn_example():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9


@pytest.mark.parametrize("value", [0, 7, -42, 123456])
def test_eval_rpn_single_number(value):
    assert eval_rpn([str(value)]) == value


@pytest.mark.parametrize("a,b", [(7, 2), (-7, 2), (7, -2), (-7, -2), (6, 3), (1, 5)])
def test_eval_rpn_division_truncates_toward_zero(a, b):
    q = eval_rpn([str(a), str(b), "/"])
    assert abs(q * b) <= abs(a)
    assert abs(a - q * b) < abs(b)
    assert q * a * b >= 0


def test_eval_rpn_operand_order():
    assert eval_rpn(["10", "4", "-"]) == 10 - 4


def test_eval_rpn_errors():
    with pytest.raises(ValueError):
        eval_rpn(["+"])
    with pytest.raises(ValueError):
        eval_rpn([])
    with pytest.raises(ValueError):
        eval_rpn(["x"])
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


@pytest.mark.parametrize(
    "temps",
    [[73, 74, 75, 71, 69, 72, 76, 73], [30, 40, 50, 60], [60, 50, 40], [50, 50, 51]],
)
def test_daily_temperatures_invariants(temps):
    result = daily_temperatures(temps)
    assert len(result) == len(temps)
    for i, wait in enumerate(result):
        if wait:
            assert temps[i + wait] > temps[i]
            assert all(t <= temps[i] for t in temps[i + 1 : i + wait])
        else:
            assert all(t <= temps[i] for t in temps[i + 1 :])


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4])
def test_generate_parentheses_shape(n):
    result = generate_parentheses(n)
    assert all(len(s) == 2 * n for s in result)
    assert len(set(result)) == len(result)
    assert result == sorted(result)


def test_car_fleet_example():
    assert car_fleet(12, [10, 8, 0, 5, 3], [2, 4, 1, 1, 3]) == 3


def test_car_fleet_single_car():
    assert car_fleet(10, [3], [3]) == 1


def test_car_fleet_same_speed_never_merge():
    positions = [0, 2, 4, 6]
    assert car_fleet(100, positions, [1] * len(positions)) == len(positions)


def test_car_fleet_bounded_by_cars():
    positions = [1, 4, 2, 9]
    assert 1 <= car_fleet(20, positions, [5, 1, 3, 2]) <= len(positions)


def test_car_fleet_length_mismatch():
    with pytest.raises(ValueError):
        car_fleet(10, [1, 2], [1])


def test_largest_rectangle_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


@pytest.mark.parametrize("heights", [[4], [1, 1, 1], [2, 4], [6, 2, 5, 4, 5, 1, 6]])
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


def test_largest_rectangle_empty():
    assert largest_rectangle_area([]) == 0