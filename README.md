# algobox

A small collection of classic algorithms and data structures in plain Python,
with no third-party dependencies.

## What is inside

- `algobox.sorting`: `bubble_sort`, `bubble_sort_counting` (returns the
  sorted list and the number of comparisons), `heap_sort` and `merge_sort`.
  Each returns a new list and leaves its input alone.
- `algobox.searching`: `linear_search` (index of the first match, or `None`)
  and `largest` (raises `ValueError` on an empty input).
- `algobox.arrays`: `stock_span` and `frequencies` (counts in order of first
  appearance).
- `algobox.numbers`: `prime_check_steps` (returns a `PrimeCheck` with
  `is_prime` and `steps`), `is_prime_trial`, `square_root` (binary search
  refined to four decimals using only arithmetic), `is_vowel` and `pyramid`
  (the lines of a star pyramid).
- `algobox.linked_list`: `ListNode`, a `LinkedList` class with
  `insert_at_beginning`, `insert_after`, `insert_at_end`, `delete`, `search`
  and `sort`, the helpers `from_iterable` and `to_list`, and the node-level
  operations `delete_node`, `partition`, `reverse_list` and `rotate_right`.
- `algobox.tree`: `TreeNode` and `max_depth`.
- `algobox.containers`: `CircularQueue` (bounded, raises `QueueFull` /
  `QueueEmpty`), `Stack` (bounded, raises `StackOverflow` /
  `StackUnderflow`) and `OrderedSet` with `union`, `intersection` and
  `difference` that keep insertion order. Both bounded containers default to
  a capacity of 5.
- `algobox.greedy`: `select_activities`, `schedule_activities` (with
  `Activity`), `fractional_knapsack` (returns a `KnapsackResult` of
  `KnapsackStep`s and a total) and `huffman_codes`.
- `algobox.dynamic`: `count_parenthesizations` for expressions such as
  `"T|T&F^T"`, `lcs_length` and `word_subsets`.
- `algobox.games`: rock, paper, scissors with `Move`, `Outcome`, `play` and
  `random_move`.
- `algobox.network`: `tcp_request` / `serve_tcp_once` for a one-message TCP
  exchange, and `udp_request` / `serve_udp_once` for a UDP service that
  answers a number with the sum of its decimal digits (`digit_sum`). Numbers
  travel as one 32-bit signed little-endian integer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from algobox.sorting import merge_sort
from algobox.searching import linear_search
from algobox.dynamic import count_parenthesizations, lcs_length
from algobox.greedy import select_activities

merge_sort([12, 11, 13, 5, 6, 7])               # [5, 6, 7, 11, 12, 13]
linear_search([2, 3, 4, 10, 40], 10)            # 3
lcs_length("AGGTAB", "GXTXAYB")                 # 4
count_parenthesizations("T|T&F^T")              # 4
select_activities([1, 3, 0, 5, 8, 5], [2, 4, 6, 7, 9, 9])  # [0, 1, 3, 4]
```

## Commands

Play one round of rock, paper, scissors against the computer. The move
(`r`, `p` or `s`) is taken from the command line or asked for on standard
input; `--seed` fixes the computer's choice:

```
algobox-rps
algobox-rps r --seed 1
```

Run one networking exchange. The subcommands are `tcp-client`, `tcp-server`,
`udp-client` and `udp-server`; the port defaults to 8080, clients take
`--host` (default `127.0.0.1`) and servers take `--bind`. See every option
with:

```
algobox-net --help
```

## What it does not do

- There are no interactive menus: the stack, queue and sorting tools are
  library calls, not menu-driven programs, and there is no sorting-time
  benchmark table.
- The network servers are not long-running: each answers exactly one client
  and then exits.