# dsakit

A collection of classic data-structure and algorithm routines: grids held
as lists of rows, in-place sorts, searching, a singly linked list, small
numeric helpers, combinatorial generators and string matching. Everything
works on ordinary Python values and needs nothing beyond the standard
library.

## Installation

```
pip install dsakit
```

For running the tests:

```
pip install "dsakit[test]"
pytest
```

## Modules

### `dsakit.matrix`

- `make_matrix(rows, cols, fill=1)` builds a `rows` x `cols` grid; negative
  dimensions raise `ValueError`.
- `format_matrix(matrix)` renders a grid as text, one line per row with
  cells separated by spaces.
- `transpose(matrix)` returns a new transposed grid.
- `transpose_in_place(matrix)` transposes a square grid in place.
- `wave(matrix)` reads the grid column by column, downwards on even
  columns and upwards on odd ones.

Ragged grids raise `ValueError`, as does a non-square grid passed to
`transpose_in_place`.

### `dsakit.sorting`

`bubble_sort`, `selection_sort`, `merge_sort` and `quick_sort` each sort a
mutable sequence in place and return `None`. `bubble_sort` stops early once
a pass makes no swap; `merge_sort` is stable; `quick_sort` uses the last
element of each range as pivot. `partition(items, start, end)` partitions
`items[start:end + 1]` around `items[end]` and returns the pivot's final
index.

### `dsakit.searching`

- `binary_search(items, target)` returns an index of `target` in a sorted
  sequence, or `-1`.
- `linear_search(items, target)` returns the index of the first match, or
  `-1`.

### `dsakit.linked_list`

- `Node(value, next=None)` is one cell of the list.
- `build_nodes(values)` chains values into nodes and returns the head (or
  `None` for no values).
- `LinkedList(values=())` supports iteration, `len()`, a `head` property,
  `insert_at_head`, `append`, `insert_at_position`, `delete_at_head`,
  `delete_at_tail`, `delete_at_position`, `delete_by_value` and `clear`.

Positions count from 1. A position of 0 or less raises `ValueError`; a
position past the end raises `IndexError`. Deleting from an empty list
raises `IndexError`, and `delete_by_value` raises `ValueError` when the
value is absent. `delete_at_head`, `delete_at_tail` and
`delete_at_position` return the value they removed.

### `dsakit.recursion`

`factorial`, `fibonacci`, `nth_stair`, `gcd`, `sum_to`, `sum_of_squares`,
`array_sum`, `min_element`, `max_element`, `reversed_items`, `count_up`,
`count_down`, `count_vowels` and `to_upper`. Negative arguments to
`factorial`, `fibonacci`, `sum_to` and `sum_of_squares` raise `ValueError`,
as does `nth_stair` below 1 and `min_element`/`max_element` on an empty
sequence. `count_vowels` counts lowercase `a e i o u`; `to_upper`
capitalises lowercase ASCII letters only.

### `dsakit.combinatorics`

- `generate_parentheses(n)`: every balanced string of `n` pairs.
- `permutations(items)` and `permutations_by_swap(items)`: every ordering,
  in two different generation orders.
- `subsequences(items)`, `subsets(text)` and `subset_sums(items)`: all
  `2**n` subsequences, as lists, as strings, or as their sums.
- `count_subsets_with_sum(items, target)`: how many subsets (by position)
  sum to `target`.
- `has_target_sum(items, target)`: whether some subset sums to `target`.
- `count_combinations_with_repetition(items, target)`: how many multisets
  of reusable items sum to `target`; items must all be positive, otherwise
  `ValueError`.

### `dsakit.strings`

`lps_table`, `longest_prefix_suffix`, `find_brute_force`, `find`
(Knuth-Morris-Pratt), `is_palindrome` and `reverse_string`. Both search
functions return the first index of the needle, or `-1`.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search
from dsakit.linked_list import LinkedList
from dsakit.combinatorics import generate_parentheses
from dsakit.strings import find
from dsakit.matrix import transpose, wave

data = [1, 3, 6, 79, 54, 2, 3, 4]
merge_sort(data)     # data is now [1, 2, 3, 3, 4, 6, 54, 79]

binary_search(sorted([1, 4, 6, 7, 8, 2, 5, 3]), 8)   # 7

items = LinkedList([30, 20, 10])
items.insert_at_position(40, 2)
list(items)          # [30, 40, 20, 10]
items.delete_by_value(20)
list(items)          # [30, 40, 10]

generate_parentheses(3)
# ['((()))', '(()())', '(())()', '()(())', '()()()']

find("hello world", "world")   # 6

transpose([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [[1, 4, 7], [2, 5, 8], [3, 6, 9]]
wave([[1, 2], [3, 4]])         # [1, 3, 4, 2]
```

## What it does not do

dsakit is a library only. It has no command-line program and does not read
values from standard input or print results; call the functions and use
what they return.