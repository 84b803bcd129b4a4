# algodrills

A small collection of classic algorithm exercises as plain Python functions and
classes: backtracking, monotonic stacks, binary trees, grid search and task
scheduling. It uses only the standard library.

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

### `algodrills.backtracking`

- `combination_sum(candidates, target)`: every multiset of candidates, with
  reuse, summing to `target`.
- `combine(n, k)`: all `k`-element combinations of `1..n`, in lexicographic order.
- `letter_case_permutation(s)`: every string obtained by switching letter case;
  ASCII digits are kept, and for other characters the lower-case variant comes
  before the upper-case one.
- `permute(nums)`: all permutations, generated by swaps on a copy of the input.
- `permute_by_insertion(nums)`: all permutations, built by inserting the first
  element into each permutation of the rest.
- `subsets(nums)`: the power set, each subset in input order.

### `algodrills.islands`

- `num_islands(grid)` (breadth-first) and `num_islands_dfs(grid)` (depth-first
  with an explicit stack) count 4-connected groups of `"1"` cells. The grid is
  not modified.

### `algodrills.scheduling`

- `least_interval(tasks, n)` (greedy) and `least_interval_formula(tasks, n)`
  (closed form) give the fewest intervals needed to run the tasks with a
  cooldown of `n` between equal tasks. Tasks must be letters `"A"`–`"Z"`;
  anything else raises `ValueError`.

### `algodrills.queue_stack`

- `QueueStack`: a LIFO stack built on one FIFO queue, with `push`, `pop`, `top`,
  `empty` and `len()`. `pop` and `top` on an empty stack raise `IndexError`.

### `algodrills.stacks`

- `is_valid_parentheses(s)`: whether `()[]{}` brackets are balanced and properly
  nested; any other character makes the string invalid.
- `eval_rpn(tokens)`: evaluates integer reverse Polish notation with `+ - * /`,
  division truncating toward zero. Malformed input raises `ValueError`, division
  by zero raises `ZeroDivisionError`.
- `daily_temperatures(temperatures)`: days until a warmer day, or 0.
- `generate_parentheses(n)`: all well-formed strings of `n` bracket pairs.
- `car_fleet(target, position, speed)`: the number of fleets reaching `target`;
  `position` and `speed` must have equal length (otherwise `ValueError`).
- `largest_rectangle_area(heights)`: the largest rectangle in a histogram.

### `algodrills.min_stack`

- `MinStack`: a stack of integers with `push`, `pop`, `top`, `get_min` and
  `len()`, reporting its minimum in constant time. Operations on an empty stack
  raise `IndexError`.

### `algodrills.trees`

- `TreeNode(val, left, right)`: a binary tree node; nodes compare by identity.
- `build_tree(values)`: builds a tree from a level-order list where `None`
  marks a missing child.
- `is_balanced(root)`, `diameter(root)` (in edges), `invert_tree(root)` (in
  place, returns the root), `is_same_tree(p, q)`, `is_subtree(root, sub_root)`
  and `lowest_common_ancestor(root, p, q)` for binary search trees.

## Examples

```python
from algodrills.backtracking import combination_sum, subsets
from algodrills.stacks import eval_rpn, daily_temperatures
from algodrills.scheduling import least_interval
from algodrills.min_stack import MinStack
from algodrills.trees import build_tree, diameter, is_balanced

combination_sum([2, 3, 6, 7], 7)        # [[2, 2, 3], [7]]
subsets([1, 2])                         # [[], [1], [1, 2], [2]]

eval_rpn(["2", "1", "+", "3", "*"])     # 9
daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73])
                                        # [1, 1, 4, 2, 1, 1, 0, 0]

least_interval(list("AAABBB"), 2)       # 8

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
stack.get_min()                         # -3

root = build_tree([1, 2, 3, 4, 5])      # level-order, None marks a gap
diameter(root)                          # 3
is_balanced(root)                       # True
```

## What it does not do

This is a library only: there is no command-line tool, and nothing reads input
files or stores results. Call the functions from your own code.