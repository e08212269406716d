# leetsolve

Compact solutions to well-known algorithm problems, written as plain
Python functions and small classes. The package has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

## Modules

### `leetsolve.arrays`

- `two_sum(nums, target)`: indices of two entries adding up to `target`.
  The index of the later entry comes first; `[]` when there is no pair.
- `two_sum_sorted(numbers, target)`: 1-based positions of two entries of a
  sorted sequence adding up to `target`; `[]` when there is no pair.
- `search_rotated(nums, target)`: binary search in a rotated sorted
  sequence. Returns the index of `target`, or `-1` when absent. Raises
  `ValueError` for an empty sequence.

### `leetsolve.strings`

- `is_anagram(s, t)`: `True` when `t` uses exactly the characters of `s`.
- `length_of_longest_substring(s)`: length of the longest substring
  without repeated characters.

### `leetsolve.subsets`

- `subsets(nums)`: every subset of `nums`, depth first, taking each element
  before leaving it out (the full sequence first, the empty one last).

### `leetsolve.linked_list`

- `ListNode(val, next=None)`: a list node; iterating over a node yields the
  values from it to the end of the list.
- `build_list(values)`: builds a list, returning its head or `None` if
  `values` is empty.
- `list_values(head)`: the values as a Python list (`[]` for `None`).
- `reverse_list(head)`: reverses in place and returns the new head.
- `reorder_list(head)`: reorders in place as first, last, second, second to
  last, and so on. Raises `ValueError` for an empty list.

### `leetsolve.tree`

- `TreeNode(val, left=None, right=None)`: a binary tree node.
- `invert_tree(root)`: mirrors the tree in place and returns its root.

### `leetsolve.heaps`

- `last_stone_weight(stones)`: repeatedly smashes the two heaviest stones;
  returns the last weight, or `0` if none remains.
- `KthLargest(k, nums)`: tracks the k-th largest value of a stream. `add(val)`
  adds a value and returns the current k-th largest (`0` if the heap is
  empty). A negative `k` raises `ValueError`.
- `k_closest(points, k)`: the `k` points nearest the origin, nearest first,
  ties broken by position. Raises `ValueError` if `k` exceeds the number of
  points.

## Examples

```python
from leetsolve.arrays import two_sum, search_rotated
from leetsolve.strings import length_of_longest_substring
from leetsolve.linked_list import build_list, list_values, reorder_list
from leetsolve.heaps import KthLargest, last_stone_weight, k_closest

sorted(two_sum([2, 7, 11, 15], 9))           # [0, 1]
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)     # 4
length_of_longest_substring("pwwkew")        # 3

head = build_list([1, 2, 3, 4])
reorder_list(head)
list_values(head)                            # [1, 4, 2, 3]

last_stone_weight([2, 7, 4, 1, 8, 1])        # 1
k_closest([[1, 3], [-2, 2]], 1)              # [[-2, 2]]

stream = KthLargest(3, [4, 5, 8, 2])
stream.add(3)                                # 4
```

## What it does not do

This is a library only: it installs no command-line program, and the
modules must be imported and called from Python code.

## Running the tests

```
pip install .[test]
pytest
```