# judgekit

Plain-Python solutions to a collection of classic algorithm puzzles.
Each one is a function that takes ordinary Python values (ints, strings,
lists, tuples) and returns the answer. Out-of-range or malformed input
raises `ValueError`; where a puzzle can have no answer, the function
returns `None`.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Modules

### `judgekit.dp`: dynamic programming

- `fibonacci_call_counts(n)`: `(zeros, ones)`, how often a naive recursive
  `fib(n)` reaches `fib(0)` and `fib(1)`; `n` from 0 to 40.
- `min_operations_to_one(n)`: fewest steps (divide by 3, divide by 2,
  subtract 1) that turn `n` into 1.
- `max_joy(losses, joys)`: greatest total joy from greeting people, health
  starting at 100 and required to stay above zero.
- `max_subarray_sum(values)`: largest sum of a non-empty contiguous run.
- `max_wine(amounts)`: most wine drinkable without three glasses in a row.
- `max_stair_score(scores)`: best score climbing one or two stairs at a
  time, never three in a row, ending on the top stair.
- `card_arrangements(digits)`: ways to read a digit string as cards
  numbered 1 to 34.
- `count_sum_123(n)`: ordered ways to write `n` (1 to 10) as a sum of 1, 2
  and 3.
- `stone_game_winner(n)`: `"SK"` or `"CY"` for the stone game in which
  taking the last stone loses.
- `tile_perimeter(n)`: perimeter of the rectangle made of the first `n`
  Fibonacci squares (`n` from 1 to 80).
- `max_consulting_profit(schedule)`: greatest pay from a list of
  `(days, pay)` jobs, one per start day, all finished in time.

### `judgekit.graphs`: grid and graph search

- `count_cabbage_worms(width, height, cabbages)`: number of 4-connected
  groups among `(x, y)` cabbage positions.
- `count_downhill_paths(grid)`: paths from the top-left to the
  bottom-right cell moving only to strictly lower neighbours.
- `can_reach_festival(home, stores, festival)`: whether the festival can be
  reached by hops of Manhattan distance at most 1000 through the stores.
- `max_path_letters(letters, edges)`: the letters read walking a tree from
  node 1 (nodes are numbered from 1), always stepping to the unvisited
  neighbour with the largest letter.

### `judgekit.flow`: maximum flow

- `max_flow(capacity, source, sink)`: maximum flow over a square capacity
  matrix, by breadth-first augmenting paths.
- `weakest_bridge_flow(segments)`: for each segment of five capacities
  (source to left, left to sink, middle link, source to right, right to
  sink), the better flow with the middle link pointed either way; returns
  the smallest of these.
- `reconstruct_matrix(row_sums, col_sums)`: a 0/1 matrix with the given row
  and column sums, or `None` if none exists.

### `judgekit.vectors`: point pairing

- `min_vector_matching(points)`: shortest length (a float) of the sum of
  the vectors joining an even number of points in pairs.
- `min_pairing_distance_sum(points)`: least total squared distance over all
  ways to split the points into pairs.

### `judgekit.arrays`: sequences, stacks and queues

- `max_lit_rows(rows, k)`: most rows of a `"0"`/`"1"` lamp grid fully lit
  after flipping exactly `k` columns.
- `majority_element(values)`: the value held by more than half of the
  items, or `None`.
- `stack_sequence_ops(target)`: the `"+"`/`"-"` push and pop steps that
  emit `target` from 1..n, or `None` if it cannot be done.
- `repunit_length(n)`: fewest ones in a number of only ones divisible by
  `n`; `n` must be coprime to 10.
- `merge_cost(sizes)`: cost of merging files one by one in ascending order
  of size.
- `max_stock_profit(prices)`: best profit buying one share a day and
  selling at later peaks.
- `queuestack(kinds, initial, inserts)`: values leaving a chain of queues
  (`0`) and stacks (`1`) as each insert is pushed through.

### `judgekit.text`: string utilities

- `capitalize_first(line)`: upper-cases the first character when it is an
  ASCII lower-case letter.
- `is_anagram(a, b)`: whether two strings use the same ASCII characters,
  ignoring letter case; non-ASCII characters are ignored.

## Example

    >>> from judgekit.dp import max_subarray_sum
    >>> max_subarray_sum([10, -4, 3, 1, 5, 6, -35, 12, 21, -1])
    33
    >>> from judgekit.arrays import repunit_length
    >>> repunit_length(3)
    3

## What it does not do

judgekit is a library only. It has no command-line tool and does not read
or write puzzle input and output formats; parse the input yourself and
pass the values to the functions.