import pytest

from drills.median import find_median_sorted_arrays


def test_example1():
    assert find_median_sorted_arrays([1, 3], [2]) == 2.0


def test_example2():
    assert find_median_sorted_arrays([1, 2], [3, 4]) == 2.5


def test_one_empty():
    assert find_median_sorted_arrays([], [5, 7, 9]) == 7.0


def test_even_total():
    assert find_median_sorted_arrays([0, 0], [0, 0]) == 0.0


def test_argument_order_does_not_matter():
    assert find_median_sorted_arrays([2], [1, 3]) == find_median_sorted_arrays([1, 3], [2]) == 2.0


def test_single_element():
    assert find_median_sorted_arrays([4], []) == 4.0


def test_both_empty_is_rejected():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])