import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.problems import (
    bubble_sort_passes,
    count_good_numbers,
    count_subarrays_with_sum,
    main,
)


def test_bubble_sort_passes_sample():
    assert bubble_sort_passes([10, 1, 5, 2, 3]) == 3


def test_bubble_sort_passes_sorted_input_needs_one_pass():
    data = list(range(20))
    assert bubble_sort_passes(data) == bubble_sort_passes([data[0]])
    assert bubble_sort_passes(data) == len([data[0]])


def test_bubble_sort_passes_reversed_input_needs_n_passes():
    data = list(range(12, 0, -1))
    assert bubble_sort_passes(data) == len(data)


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=50))
def test_bubble_sort_passes_bounds(data):
    passes = bubble_sort_passes(data)
    assert 1 <= passes <= len(data)
    if data == sorted(data):
        assert passes == len(data[:1])


def test_count_subarrays_sample():
    assert count_subarrays_with_sum([1, 1, 1, 1], 2) == 3


def test_count_subarrays_single_element_runs():
    data = [4] * 9
    assert count_subarrays_with_sum(data, 4) == len(data)


def test_count_subarrays_whole_list():
    data = [3, 1, 4, 1, 5]
    assert count_subarrays_with_sum(data, sum(data)) >= 1
    assert count_subarrays_with_sum(data, sum(data) + 1) == len([])


def test_count_subarrays_empty():
    assert count_subarrays_with_sum([], 5) == len([])


@given(
    st.lists(st.integers(1, 20), min_size=1, max_size=40),
    st.integers(1, 100),
)
def test_count_subarrays_bounds(data, target):
    count = count_subarrays_with_sum(data, target)
    assert 0 <= count <= len(data)
    if target in data:
        assert count >= data.count(target)


def test_count_good_numbers_sample():
    assert count_good_numbers(range(1, 11)) == 8


def test_count_good_numbers_zeros_are_all_good():
    data = [0, 0, 0]
    assert count_good_numbers(data) == len(data)


def test_count_good_numbers_needs_two_other_values():
    assert count_good_numbers([0, 0]) == len([])
    assert count_good_numbers([5]) == len([])


@given(st.lists(st.integers(-50, 50), max_size=30))
def test_count_good_numbers_bounds_and_order_independence(data):
    count = count_good_numbers(data)
    assert 0 <= count <= len(data)
    assert count_good_numbers(list(reversed(data))) == count


@pytest.mark.parametrize(
    "problem, text, expected",
    [
        ("1377", "5\n10 1 5 2 3\n", lambda: bubble_sort_passes([10, 1, 5, 2, 3])),
        ("2003", "4 2\n1 1 1 1\n", lambda: count_subarrays_with_sum([1, 1, 1, 1], 2)),
        ("1253", "10\n1 2 3 4 5 6 7 8 9 10\n", lambda: count_good_numbers(range(1, 11))),
    ],
)
def test_main_prints_answer(monkeypatch, capsys, problem, text, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([problem]) == 0
    assert capsys.readouterr().out.strip() == str(expected())


def test_main_rejects_unknown_problem(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n"))
    with pytest.raises(SystemExit):
        main(["9999"])


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n1 2\n"))
    with pytest.raises(SystemExit):
        main(["1377"])


def test_main_rejects_non_numbers(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nx y\n"))
    with pytest.raises(SystemExit):
        main(["1253"])