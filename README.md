# solvekit

Plain-Python solutions to well-known algorithm problems, grouped by topic.
The package uses only the standard library.

## Installation

```
pip install solvekit
```

To run the test suite:

```
pip install "solvekit[test]"
pytest
```

## Modules

### `solvekit.tree`

- `TreeNode(val=0, left=None, right=None)`: a binary tree node. Nodes compare
  by identity, not by value.
- `inorder_traversal(root)`: values in left, root, right order.
- `zigzag_level_order(root)`: values level by level, alternating
  left-to-right and right-to-left, starting left-to-right.
- `sorted_array_to_bst(nums)`: a height-balanced search tree built from an
  ascending sequence, each subtree rooted at its lower-middle element.
  Returns `None` for an empty sequence.
- `flatten(root)`: rewires the tree in place into a right-linked chain in
  preorder, with every `left` set to `None`.
- `max_depth(root)`: the number of nodes on the longest root-to-leaf path.
- `is_same_tree(p, q)`: whether two trees have the same shape and values.
- `is_symmetric(root)`: whether a tree is its own mirror image.

### `solvekit.grids`

- `flood_fill(image, sr, sc, color)`: recolours the 4-connected region
  around `(sr, sc)` in place and returns the same image.
- `max_area_of_island(grid)`: size of the largest 4-connected group of 1s.
- `oranges_rotting(grid)`: minutes until no fresh orange (`1`) is left as
  rotten ones (`2`) spread, or `-1` if some never rot. Updates the grid in place.
- `capture_surrounded_regions(board)`: turns every `"O"` region not linked
  to the border into `"X"`, in place.
- `set_zeroes(matrix)`: zeroes, in place, every row and column holding a zero.

### `solvekit.dynamic`

- `min_path_sum(grid)`: smallest right/down path sum; `0` for an empty grid.
- `unique_paths_with_obstacles(obstacle_grid)`: right/down paths avoiding
  non-zero cells.
- `unique_paths(m, n)`: right/down paths across an `m` by `n` grid; `0` when
  either side is not positive.
- `climb_stairs(n)`: ways to climb `n` steps one or two at a time.
- `fib(n)`, `tribonacci(n)`: Fibonacci (0, 1, ...) and Tribonacci (0, 1, 1, ...)
  numbers.
- `min_cost_climbing_stairs(cost)`: cheapest way past the top, starting on
  step 0 or 1.
- `coin_change(coins, amount)`: fewest coins making `amount`, or `-1`.

`climb_stairs`, `fib`, `tribonacci` and `coin_change` raise `ValueError` for a
negative argument.

### `solvekit.graphs`

- `can_finish(num_courses, prerequisites)`: whether all courses can be taken,
  given `[course, prerequisite]` pairs.
- `find_circle_num(is_connected)`: number of connected groups in a 0/1
  adjacency matrix.

### `solvekit.sequences`

- `max_sub_array(nums)`: largest sum of a contiguous run; raises `ValueError`
  for an empty sequence.
- `missing_number(nums)`: smallest non-negative integer absent from `nums`.
- `num_rabbits(answers)`: fewest rabbits consistent with the answers.
- `subarray_sum(nums, k)`: number of contiguous runs summing to `k`.
- `group_anagrams(strs)`: anagram groups, in order of first appearance.

### `solvekit.strings`

- `is_alien_sorted(words, order)`: whether `words` are sorted under the
  alphabet `order`.
- `longest_palindrome(s)`: the first longest palindromic substring.
- `length_of_longest_substring(s)`: longest run without a repeated character.
- `roman_to_int(s)`: value of a Roman numeral.
- `first_uniq_char(s)`: index of the first character that occurs once, or `-1`.

### `solvekit.structures`

- `RandomizedSet(rng=None)`: `insert(val)` and `remove(val)` return whether
  the set changed; `get_random()` picks a member uniformly and raises
  `IndexError` when empty. Supports `len()` and `in`. Pass a `random.Random`
  for reproducible choices.
- `TimeMap`: `set(key, value, timestamp)` and `get(key, timestamp)`, which
  returns the latest value set at or before `timestamp`, or `""`. Timestamps
  for a key are expected to be set in increasing order.
- `UndergroundSystem`: `check_in(passenger_id, station_name, t)`,
  `check_out(passenger_id, station_name, t)` and
  `get_average_time(start_station, end_station)`. Checking out without a
  check-in, or asking about a route with no completed trips, raises `KeyError`.
- `LRUCache(capacity)`: `get(key)` returns the value or `-1`; `put(key, value)`
  evicts the least recently used entry when full. A capacity below 1 raises
  `ValueError`. Supports `len()`.

## Examples

```python
from solvekit.tree import sorted_array_to_bst, inorder_traversal, max_depth
from solvekit.dynamic import coin_change
from solvekit.strings import roman_to_int
from solvekit.structures import LRUCache

root = sorted_array_to_bst([-10, -3, 0, 5, 9])
inorder_traversal(root)        # [-10, -3, 0, 5, 9]
max_depth(root)                # 3

coin_change([1, 2, 5], 11)     # 3
coin_change([2], 3)            # -1

roman_to_int("MCMXCIV")        # 1994

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                   # 1
cache.put(3, 3)                # evicts key 2
cache.get(2)                   # -1
```