# algodrills

A library of classic algorithm and data-structure exercises, each written as
plain, tested Python. It is for study and practice: every routine is small
enough to read in one sitting. The package has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algodrills.searching` | binary search (`find_num`, `find_left`, `find_right`), `find_peak_element`, `recursive_max` |
| `algodrills.merge_counting` | divide-and-conquer counting: `reverse_pairs`, `inversion_count`, `small_sum`, `small_sum_brute_force` |
| `algodrills.bits` | `to_binary32`, `single_number`, `single_number_pair`, `single_number_among`, `missing_number`, `bigger_of`, `xor_swap`, `count_ones`, `hamming_distance`, `range_bitwise_and`, `near_power_of_two`, `is_power_of_two`, `is_power_of_three`, `reverse_bits` |
| `algodrills.bit_arithmetic` | 32-bit `add`, `negate`, `minus`, `multiply`, `divide` built from bit operations |
| `algodrills.bitset` | `BitMap` (a set of `0..n-1`) and `Bitset` with constant-time `flip` |
| `algodrills.linked_list` | `ListNode`, `RandomNode`, `build_list`, `list_values`, and `reverse_list`, `merge_two_lists`, `add_two_numbers`, `partition`, `copy_random_list`, `intersection_node`, `detect_cycle`, `is_palindrome`, `reverse_k_group`, `sort_list`, `merge_k_lists` |
| `algodrills.tree` | `TreeNode`, `build_tree`, `preorder`, `inorder`, `postorder`, `postorder_two_stacks`, `level_order`, `zigzag_level_order`, `max_depth`, `min_depth`, `width_of_binary_tree`, `lowest_common_ancestor`, `lowest_common_ancestor_bst`, `path_sum`, `is_valid_bst`, `trim_bst`, `rob` |
| `algodrills.caches` | `LRUCache`, `AllOne`, `SetAllHashMap` |
| `algodrills.randomized` | `RandomizedSet`, `RandomizedCollection` (both accept an optional `random.Random`) |
| `algodrills.streams` | `FreqStack`, `MedianFinder` |
| `algodrills.heaps` | `max_cover`, `merge_intervals`, `halve_array` |
| `algodrills.hashing` | `contains_duplicate`, `two_sum` |
| `algodrills.recursion` | `permutations`, `hanoi_moves`, `hanota` |
| `algodrills.expression` | `calculate`, `decode_string`, `count_of_atoms` |
| `algodrills.nqueens` | `total_n_queens` (bitmask) and `total_n_queens_backtracking` |
| `algodrills.magical` | `gcd`, `lcm`, `nth_magical_number` |
| `algodrills.superpalindromes` | `superpalindromes_in_range`, `even_palindrome`, `odd_palindrome`, `is_palindrome_number` |

## Examples

```python
from algodrills.expression import calculate, decode_string, count_of_atoms
from algodrills.caches import LRUCache
from algodrills.linked_list import build_list, list_values, reverse_k_group
from algodrills.searching import find_left

calculate("2*(5+3*(8-2))/7")              # 6
decode_string("3[a]2[bc]")                # "aaabcbc"
find_left([1, 2, 2, 3, 3, 4, 5], 3)       # 3

cache = LRUCache(2)
cache.put(1, 0)
cache.put(2, 2)
cache.get(1)                              # 0
cache.put(3, 3)
cache.get(2)                              # -1

head = build_list([1, 2, 3, 4, 5])
list_values(reverse_k_group(head, 2))     # [2, 1, 4, 3, 5]
```

```python
from algodrills.nqueens import total_n_queens
from algodrills.bits import to_binary32

total_n_queens(8)                         # 92
to_binary32(-10)                          # "11111111111111111111111111110110"
```

## Behaviour worth knowing

- `calculate` truncates division toward zero and ignores spaces; it raises
  `ValueError` on unbalanced parentheses or unexpected characters.
- `two_sum` raises `ValueError` when no pair adds up to the target.
- `LRUCache.get` and `SetAllHashMap.get` return `-1` for an unknown key;
  `AllOne.dec` raises `KeyError` for one.
- `RandomizedSet.get_random`, `RandomizedCollection.get_random` and
  `FreqStack.pop` raise `IndexError` when empty; `MedianFinder.find_median`
  raises `ValueError` before any number is added.
- The functions in `bit_arithmetic` accept only 32-bit signed integers and
  wrap around like them; `divide` raises `ZeroDivisionError` for a zero
  divisor and returns `INT_MAX` for `INT_MIN / -1`.

## What this package does not do

It has no array sorting routines (selection, bubble, insertion, merge, quick,
heap, counting or radix sort) and no bounded queue, stack or circular deque
classes. Linked lists can be sorted with `linked_list.sort_list`, and the
Python standard library's `sorted`, `collections.deque` and `heapq` cover the
rest. There is no command-line tool.