from collections import Counter

from arraykit.ksum import four_sum, three_sum, two_sum_pairs


def _check(groups, arr, target, size):
    available = Counter(arr)
    for group in groups:
        assert len(group) == size
        assert sum(group) == target
        assert list(group) == sorted(group)
        assert not Counter(group) - available
    assert len(set(groups)) == len(groups)


def test_two_sum_example():
    arr = [6, 3, 2, 6, 3, 9, -1, 4, -1]
    assert two_sum_pairs(arr, 5) == [(-1, 6), (2, 3)]


def test_two_sum_invariants():
    arr = [1, 5, 5, 0, 6, 4, 2, 3, 3, 7]
    result = two_sum_pairs(arr, 6)
    _check(result, arr, 6, 2)


def test_two_sum_input_not_modified():
    arr = [4, 1, 3, 2]
    two_sum_pairs(arr, 5)
    assert arr == [4, 1, 3, 2]


def test_two_sum_no_pair():
    assert not two_sum_pairs([1, 2], 10)


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4], 0) == [(-1, -1, 2), (-1, 0, 1)]


def test_three_sum_invariants():
    arr = [0, 0, 0, 0, 1, -1, 2, -2, 3, -3]
    result = three_sum(arr, 0)
    _check(result, arr, 0, 3)
    assert (0, 0, 0) in result


def test_three_sum_too_short():
    assert not three_sum([1, 2], 3)


def test_four_sum_example():
    result = four_sum([1, 0, -1, 0, -2, 2], 0)
    assert result == [(-2, -1, 1, 2), (-2, 0, 0, 2), (-1, 0, 0, 1)]


def test_four_sum_all_equal():
    arr = [2, 2, 2, 2, 2]
    assert four_sum(arr, 8) == [(2, 2, 2, 2)]


def test_four_sum_invariants():
    arr = [3, -1, 4, 0, -2, 5, 1, -3, 2]
    result = four_sum(arr, 4)
    _check(result, arr, 4, 4)