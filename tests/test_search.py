import pytest

from arraykit.search import (
    is_sorted,
    kth_largest_element,
    largest_element,
    linear_search,
    missing_number,
    second_largest_element,
    single_element,
)

SAMPLE = [10, 324, 45, 90, 87]


def test_is_sorted():
    assert is_sorted([1, 2, 2, 5]) is True
    assert is_sorted(SAMPLE) is False
    assert is_sorted([]) is True
    assert is_sorted([3]) is True


def test_largest_element():
    assert largest_element(SAMPLE) == 324
    assert largest_element([-5, -2, -9]) == -2


def test_largest_element_empty():
    with pytest.raises(ValueError):
        largest_element([])


def test_second_largest_element():
    assert second_largest_element(SAMPLE) == 90
    assert second_largest_element([5, 5, 3]) == 3


def test_second_largest_none_when_all_equal():
    assert second_largest_element([7, 7, 7]) is None


def test_second_largest_empty():
    with pytest.raises(ValueError):
        second_largest_element([])


def test_kth_largest_element():
    data = list(SAMPLE)
    assert kth_largest_element(data, 4) == 45
    assert kth_largest_element(data, 1) == largest_element(data)
    assert kth_largest_element(data, len(data)) == min(data)
    assert data == SAMPLE


@pytest.mark.parametrize("k", [0, 6, -1])
def test_kth_largest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_largest_element(SAMPLE, k)


def test_linear_search():
    arr = [3, 4, 6, 8, 1, 5, 0]
    assert linear_search(arr, 8) == 3
    assert linear_search(arr, 42) == -1
    assert linear_search([2, 2], 2) == 0


def test_missing_number():
    assert missing_number([1, 2, 4]) == 3
    assert missing_number([2, 3]) == 1
    assert missing_number([1, 2, 3]) == 4


def test_single_element():
    assert single_element([4, 1, 2, 1, 2]) == 4
    assert single_element([1, 1, 9]) == 9


def test_single_element_none():
    with pytest.raises(ValueError):
        single_element([1, 1, 2, 2])