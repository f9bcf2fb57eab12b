# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no runtime dependencies, plus a command with interactive menus.

## What is inside

- `dsakit.sorting`: `bubble_sort`, `bubble_sort_adaptive`, `insertion_sort`,
  `merge_sort`, `quick_sort` and `radix_sort`. Each takes any iterable and
  returns a new sorted list; the input is left alone. `radix_sort` accepts
  non-negative integers only and raises `ValueError` otherwise.
- `dsakit.stacks`: `ArrayStack` (fixed capacity, default 10), `LinkedStack`
  (unbounded), `TwoStackQueue` (a bounded FIFO queue built from two stacks)
  and a singly linked `LinkedList` that grows at its tail. Errors are raised
  as `StackOverflowError`, `StackUnderflowError`, `QueueFullError` and
  `QueueEmptyError`. Iterating a stack goes from top to bottom; iterating the
  queue goes from front to back.
- `dsakit.expressions`: `precedence`, `infix_to_postfix` (letter operands,
  parentheses, `+ - * / ^`) and `simple_infix_to_postfix` (the four arithmetic
  operators only, no parentheses; every other character is an operand).
- `dsakit.trees`: `TreeNode`, the generators `preorder`, `inorder` and
  `postorder`, `is_bst`, `search`, plus `BinarySearchTree` (equal keys go to
  the left) and the self-balancing `AVLTree` (duplicate keys are ignored).
- `dsakit.graphs`: `bfs` and `dfs` over a square adjacency matrix, returning
  the vertices reachable from a start vertex in visiting order.
- `dsakit.matrices`: `is_diagonally_dominant`, `is_magic_square`, `is_markov`
  and `max_path_sum` (best top-to-bottom path moving down or diagonally down,
  never less than zero).
- `dsakit.vectors`: the immutable `Vector3` with `magnitude`, `dot`, `cross`,
  `+` and `-`; `str()` gives `<i,j,k>`.
- `dsakit.numbers`: `dice_combinations` (modulo `DICE_MODULUS`), `to_base`
  (bases 2 to 16), `fibonacci_up_to`, `hanoi_moves`, `multiplication_table`,
  `star_diamond` and `describe_day`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.expressions import infix_to_postfix
from dsakit.trees import AVLTree
from dsakit.graphs import bfs
from dsakit.numbers import to_base, hanoi_moves

merge_sort([9, 1, 4, 14, 4, 15, 6])      # [1, 4, 4, 6, 9, 14, 15]
infix_to_postfix("(a-b/c)*(a/k-l)")     # 'abc/-ak/l-*'

tree = AVLTree([1, 2, 4, 5, 6, 3])
tree.preorder()                          # [4, 2, 1, 3, 5, 6]

graph = [
    [0, 1, 1, 1, 0, 0, 0],
    [1, 0, 1, 0, 0, 0, 0],
    [1, 1, 0, 1, 1, 0, 0],
    [1, 0, 1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]
bfs(graph, 1)                            # [1, 0, 2, 3, 4, 5, 6]

to_base(255, 16)                         # 'FF'
list(hanoi_moves(2))                     # [('A', 'B'), ('A', 'C'), ('B', 'C')]
```

## Command line

The `dsakit` command opens an interactive menu, read from standard input.
A subcommand picks the menu:

```
dsakit stack --capacity 10    # push, pop and display on a fixed-size stack
dsakit queue --size 5         # add, remove and display on a two-stack queue
dsakit vector                 # magnitude, dot, cross, A-B and A+B of 3-D vectors
```

Without `--size`, `dsakit queue` asks for the size first. The stack and queue
menus end with choice 4, the vector menu with `q`; the end of input also ends
any menu.

## What it does not do

The structures live in memory only: nothing is saved between runs, and the
command offers menus just for the stack, the queue and the vectors; the other
modules are used from Python.