# algoset

A library of small, self-contained algorithms over plain Python data:
lists, strings, integers, singly linked lists and binary trees.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algoset.linked_list` | `ListNode` and operations on singly linked lists |
| `algoset.tree` | `TreeNode` and operations on binary trees |
| `algoset.text` | string algorithms |
| `algoset.numeric` | integer and floating-point puzzles, a primality test |
| `algoset.bits` | bitwise algorithms |
| `algoset.intervals` | merging and grouping intervals, a waiting-time queue, nested envelopes |
| `algoset.greedy` | greedy, heap and binary-search problems |
| `algoset.arrays` | in-place and whole-list transformations |
| `algoset.counting` | counting, prefix-sum, two-pointer and sliding-window problems |

## Examples

Linked lists are built from and read back into Python lists:

```python
from algoset.linked_list import ListNode, add_two_numbers, rotate_right

total = add_two_numbers(ListNode.from_values([2, 4, 3]), ListNode.from_values([5, 6, 4]))
print(total.to_list())            # [7, 0, 8]

rotated = rotate_right(ListNode.from_values([1, 2, 3, 4, 5]), 2)
print(rotated.to_list())          # [4, 5, 1, 2, 3]
```

Binary trees use level order with `None` for missing children:

```python
from algoset.tree import TreeNode, del_nodes

root = TreeNode.from_level_order([1, 2, 3, 4, 5, 6, 7])
forest = del_nodes(root, [3, 5])
print(sorted(tree.to_level_order() for tree in forest))  # [[1, 2, None, 4], [6], [7]]
```

Strings, lists and intervals work on ordinary values:

```python
from algoset.text import reverse_words, length_of_longest_substring
from algoset.intervals import merge_intervals
from algoset.counting import two_sum

print(reverse_words("  the sky   is blue "))                 # "blue is sky the"
print(length_of_longest_substring("abcabcbb"))               # 3
print(merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]))  # [[1, 6], [8, 10], [15, 18]]
print(two_sum([2, 7, 11, 15], 9))                            # [0, 1]
```

## Notes

Functions in `algoset.arrays` such as `rotate`, `move_zeroes`,
`next_permutation`, `wiggle_sort` and `reverse_string` change the list they
are given in place and return `None`. Linked-list functions such as
`delete_node`, `remove_nodes` and `rotate_right` relink or rewrite the nodes
they are given.

Inputs the algorithms cannot handle raise `ValueError`: for example
`two_sum` when no pair adds up to the target, `delete_node` on the last
node of a list, or `results_array` with a window size out of range.