# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of operations. It prints the operations it used, one per line.

## Operations

| Move  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

A rotation of a stack that holds exactly two elements is done, and recorded,
as the matching swap (`sa` or `sb`). A move on a stack too small for it does
nothing and is not recorded.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, or as one argument with the numbers
separated by spaces. The first number is the top of stack `a`.

```
$ pushswap 2 1 3
sa
$ pushswap "3 2 1"
ra
sa
```

- With no arguments, nothing is printed and the exit status is 0.
- If the input is already sorted, or holds a single number, nothing is printed.
- If an argument is not an integer, is outside the 32-bit signed range, is
  empty, or the same number text appears twice, `Error` is printed and the
  exit status is non-zero. Duplicates are found by comparing the text, so
  `1` and `01` are not taken as the same number.

Inputs of two to five numbers use dedicated short sequences. Larger inputs are
split into value ranges (2 for up to 10 numbers, 7 for up to 100, 10 beyond):
each range is pushed onto `b` in turn, and then the largest remaining element
of `b` is rotated to the top, the shorter way round, and pushed back onto `a`
until `b` is empty.

## Library use

```python
from pushswap.algorithm import solve
from pushswap.stacks import Stacks

moves = solve([5, 1, 4, 2, 3])
# ['ra', 'pb', 'ra', 'pb', 'rra', 'sa', 'pa', 'pa']

stacks = Stacks([2, 1, 3])
stacks.sa()
print(list(stacks.a))   # [1, 2, 3]
print(stacks.ops)       # ['sa']
```

`Stacks` keeps the two stacks as deques in `a` and `b` (index 0 is the top)
and the names of the moves made so far in `ops`. The combined moves `ss`,
`rr` and `rrr` call the single-stack move on `a` (and, for `ss`, on `b`), so
`ops` holds those names as well as the combined one.

`pushswap.algorithm` holds the sorting steps: `solve`, `select_algorithm`,
`sort_three`, `sort_four`, `sort_five`, `chunk_sort`, `generate_segments`,
`move_to_b`, `move_to_a` and the helpers `is_sorted`, `max_position` and
`in_range`.

`pushswap.parsing` checks and converts the raw arguments: `parse_arguments`
returns the integers and raises `InputError` (a `ValueError`) for bad input.
`is_int`, `atoi`, `split_words`, `has_duplicates` and `validate` are the
steps it is built from.

## What it does not do

The package only produces moves. It has no command that reads a list of moves
and checks that they sort a given input.

## Tests

```
pip install ".[test]"
pytest
```