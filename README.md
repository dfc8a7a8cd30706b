# arraykit

A small collection of classic algorithms for lists of integers, matrices
and singly linked lists. Each algorithm is a plain Python function. Linked
lists are the one exception and use a small class. The package has no
dependencies.

The functions never change their arguments. Where a function produces a
reordered sequence or matrix, it returns a new list.

## Installation

```
pip install .
```

## Modules

### `arraykit.search`

- `is_sorted(arr)`: returns `True` if `arr` is in non-decreasing order.
- `largest_element(arr)`: returns the maximum value. Raises `ValueError` when `arr` is empty.
- `second_largest_element(arr)`: returns the largest value strictly below the maximum. Returns `None` if there is no such value. Raises `ValueError` when `arr` is empty.
- `kth_largest_element(arr, k)`: returns the k-th largest value. `k` is 1-based and duplicates are counted. Raises `ValueError` if `k` is out of range.
- `linear_search(arr, num)`: returns the index of the first occurrence of `num`, or `-1` if it is absent.
- `missing_number(arr)`: returns the first number missing from a sorted run that starts at 1. Returns `len(arr) + 1` if nothing is missing.
- `single_element(arr)`: returns the first value that occurs exactly once. Raises `ValueError` if there is none.

### `arraykit.rearrange`

- `left_rotate(arr)`, `left_rotate_by(arr, d)`, `right_rotate_by(arr, d)`: return a rotated copy. `d` is taken modulo the length of `arr`.
- `move_zeros(arr)`: moves every zero to the end and keeps the other values in their order.
- `remove_duplicates(arr)`: returns the distinct values in ascending order.
- `sort_012(arr)`: sorts a sequence that holds only 0, 1 and 2. Raises `ValueError` if any other value is present.
- `union(arr1, arr2)`: returns the sorted distinct values found in either input.

### `arraykit.subarrays`

- `longest_subarray_with_sum(arr, k)`: returns the length of the longest contiguous subarray that sums to `k`, or `0` if there is none.
- `max_consecutive_ones(arr)`: returns the length of the longest run of 1s.
- `count_subarrays_with_sum(nums, k)`: returns the number of contiguous subarrays that sum to `k`.
- `max_subarray(arr)`: Kadane's algorithm. Returns `(best_sum, subarray)`, where `subarray` is the earliest subarray that reaches the best sum. Raises `ValueError` when `arr` is empty.
- `longest_consecutive_sequence(arr)`: returns the length of the longest run of consecutive integers present in `arr`, in any order.
- `max_profit(prices)`: returns the best profit from one buy followed by one later sale, or `0`.

### `arraykit.ksum`

- `two_sum_pairs(arr, target)`: returns the distinct pairs that sum to `target`, as ascending tuples.
- `three_sum(arr, target)`: returns the distinct triplets that sum to `target`, as ascending tuples.
- `four_sum(arr, target)`: returns the distinct quadruplets that sum to `target`, as ascending tuples.

### `arraykit.sequences`

- `leaders(arr)`: returns the elements that are greater than everything to their right, in their original order.
- `majority_element(arr)`: Boyer–Moore vote. Returns the value that occurs more than `len(arr) // 2` times, or `None`.
- `next_permutation(arr)`: returns the next lexicographic permutation. After the last permutation it wraps round to the smallest.
- `rearrange_by_sign(arr)`: puts the positive values at even positions and the other values (zero included) at odd positions, keeping their order. Raises `ValueError` unless the two groups are the same size.

### `arraykit.matrix`

- `rotate_clockwise(matrix)`: returns the matrix rotated 90 degrees clockwise.
- `set_zeroes(matrix)`: returns a copy in which every row and every column that holds a zero is all zeros.
- `spiral_order(matrix)`: returns the elements in clockwise spiral order, starting at the top-left corner.

### `arraykit.linkedlist`

`LinkedList(values=())` is a singly linked list that keeps references to both its head and its tail. It supports:

- `append(value)`: adds a value at the end.
- `delete_head()`: removes the first node and returns its value, or `None` if the list is empty.
- `delete_tail()`: removes the last node and returns its value, or `None` if the list is empty.
- `delete_at(k)`: removes the k-th node (1-based) and returns its value. A position outside the list leaves it unchanged and returns `None`.
- iteration and `len()`.
- `str()`, which gives the form `10 -> 20 -> NULL`.

## Examples

```python
from arraykit.ksum import three_sum
from arraykit.matrix import spiral_order
from arraykit.subarrays import max_subarray
from arraykit.linkedlist import LinkedList

three_sum([-1, 0, 1, 2, -1, -4], 0)               # [(-1, -1, 2), (-1, 0, 1)]
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])   # [1, 2, 3, 6, 9, 8, 7, 4, 5]
max_subarray([1, 2, -1, 2, 2])                    # (6, [1, 2, -1, 2, 2])

items = LinkedList([10, 20, 30, 40])
items.delete_tail()
print(items)   # 10 -> 20 -> 30 -> NULL
```

## Scope

arraykit is a library only. It has no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```