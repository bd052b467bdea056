# algokit

A small library of classic algorithms. Each one is a plain Python function.
It covers searching, sorting, array puzzles and many dynamic-programming
problems. It has no runtime dependencies.

## Installation

```
pip install algokit
```

To run the test suite, install the test extra and run pytest:

```
pip install "algokit[test]"
pytest
```

## Modules

| Module | What it contains |
| --- | --- |
| `algokit.searching` | `linear_search`, `binary_search` |
| `algokit.sorting` | `exchange_sort`, `insertion_sort`, `merge_sort`, `sort_012`, `heap_sort`, `MinHeap` |
| `algokit.arrays` | `common_elements`, `find_duplicate`, `unique_paths`, `max_subarray_sum`, `kth_smallest`, `longest_zero_sum_subarray`, `min_max`, `merge_intervals`, `merge_sorted_in_place`, `negatives_first`, `reverse_range`, `rotate_right` |
| `algokit.knapsack` | `knapsack`, `count_coin_ways`, `min_coins`, `min_subset_sum_difference`, `count_subsets_with_sum`, `count_subsets_with_difference`, `perfect_sum`, `rod_cutting`, `has_subset_sum`, `can_partition_equally`, `target_sum_ways` |
| `algokit.chains` | `matrix_chain_cost`, `super_egg_drop` |
| `algokit.subsequences` | `longest_common_subsequence_length`, `longest_common_subsequence`, `longest_common_substring`, `longest_increasing_subsequence`, `longest_repeating_subsequence`, `shortest_common_supersequence_length`, `shortest_common_supersequence`, `is_interleaving` |
| `algokit.palindromes` | `longest_palindromic_subsequence`, `min_deletions_to_palindrome`, `min_insertions_to_palindrome`, `min_palindrome_cuts` |

## Examples

Searching and sorting:

```python
from algokit.searching import binary_search, linear_search
from algokit.sorting import MinHeap, heap_sort, merge_sort, sort_012

linear_search([2, 4, 0, 1, 9], 1)        # 3
linear_search([2, 4, 0, 1, 9], 7)        # None
binary_search([2, 3, 4, 10, 40], 10)     # 3
merge_sort([5, 1, 4])                    # [1, 4, 5]
sort_012([0, 1, 2, 0, 1, 2])             # [0, 0, 1, 1, 2, 2]
heap_sort([4, 13, 6, 34, 10])            # [4, 6, 10, 13, 34]

heap = MinHeap([3, 1, 2])
heap.extract_min()                       # 1
len(heap)                                # 2
```

Arrays:

```python
from algokit.arrays import common_elements, merge_intervals, max_subarray_sum

common_elements([1, 5, 10, 20, 40, 80],
                [6, 7, 20, 80, 100],
                [3, 4, 15, 20, 30, 70, 80, 120])   # [20, 80]
merge_intervals([[1, 3], [2, 6], [8, 10]])         # [(1, 6), (8, 10)]
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1])         # 6
```

Dynamic programming:

```python
from algokit.knapsack import knapsack, count_subsets_with_difference
from algokit.subsequences import longest_common_subsequence
from algokit.palindromes import longest_palindromic_subsequence

knapsack(50, [10, 20, 30], [60, 100, 120])             # 220
count_subsets_with_difference([1, 1, 2, 3], 1)         # 3
longest_common_subsequence("ABCDEF", "ABXYDVEYF")      # "ABDEF"
longest_palindromic_subsequence("agbgcgbcat")          # 7
```

## Behaviour notes

- The searches return `None` when the value is absent. `find_duplicate`
  returns `None` when no value repeats, and `min_coins` returns `None` when
  the amount cannot be made.
- The sorting and rearranging functions return a new list and leave their
  input alone. This covers `reverse_range` and `rotate_right`. The one
  exception is `merge_sorted_in_place`, which changes both of its list
  arguments and returns `None`.
- Invalid input raises an exception:
  - `ValueError` comes from `sort_012` for a value other than 0, 1 or 2, from
    `max_subarray_sum` and `min_max` on empty input, and from the knapsack
    functions for negative items or totals.
  - `IndexError` comes from `kth_smallest` for an out-of-range `k` and from
    `MinHeap.extract_min` on an empty heap.

## What it does not do

algokit is a library only. It installs no command-line program. It reads no
input files and does not print results. You call the functions from your own
code.