# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations. The `push_swap` command prints the operations, one per
line, that take stack `a` from its starting order to ascending order with
`b` empty.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two items of `a`, `b`, or both |
| `pa` / `pb` | move the top item of `b` onto `a`, or of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both: the top item goes to the bottom |
| `rra` / `rrb` / `rrr` | reverse-rotate: the bottom item comes to the top |

`sb` does nothing when `b` holds fewer than two items, `pa` and `pb` do
nothing when the stack they take from is empty, and `rrr` does nothing
when `b` is empty. An operation that does nothing is not recorded.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments:

```
push_swap 3 2 1
```

or as one argument with the numbers separated by spaces:

```
push_swap "4 67 3 87 23"
```

The first number given is the top of stack `a`. With no arguments, or with
input that is already sorted, nothing is printed. A number may carry one
leading `+` or `-`; anything else that is not a decimal digit, a value
outside the 32-bit signed range, or a value given twice makes the command
print `Error` to standard error and exit with status 1.

Inputs of fewer than 500 numbers are sorted by repeatedly halving `a`
around its median and then bringing `b` back largest first; larger inputs
use a recursive quicksort over both stacks.

## Library

```python
from pushswap.sorting import push_swap
from pushswap.stacks import Stacks
from pushswap.parsing import parse_arguments, InputError

operations = push_swap([3, 2, 1])     # list of operation names

stacks = Stacks([2, 1, 3])
stacks.sa()
print(stacks.is_sorted_a())          # True
print(stacks.moves)                  # ['sa']

try:
    parse_arguments(["1", "1"])
except InputError:
    print("duplicate value")
```

- `pushswap.stacks.Stacks` holds `a` and `b` as lists, top first, has one
  method per operation, and records every operation it performs in
  `moves`. It also offers `is_sorted_a`, `is_sorted_b`, `max_b`,
  `median_a` and `median_b`.
- `pushswap.parsing` has `parse_number`, `check_unique` and
  `parse_arguments`; each raises `InputError` (a `ValueError`) on bad input.
- `pushswap.sorting` has `push_swap`, which returns the operations for a
  list of numbers, and `sort_stacks`, which sorts a `Stacks` in place.
- `pushswap.cli.main` is the command's entry point.

## What it does not do

The package only produces operations. There is no command that reads a
list of operations and checks whether it sorts a given input; to check a
result, replay the operations on a `Stacks` and call `is_sorted_a`.

## Tests

```
pip install ".[test]"
pytest
```