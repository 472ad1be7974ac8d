# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of instructions:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | push the top of `b` onto `a`, or of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to top) |

## Installation

```
pip install .
```

## Commands

### push_swap

`push_swap` reads integers from its arguments (separate arguments, or several
numbers in one quoted argument; the first number is the top of stack `a`) and
prints a sequence of instructions that sorts them in ascending order, one per
line:

```
push_swap 3 2 1
push_swap "5 1 4 2 3"
```

Nothing is printed if the numbers are already sorted. Up to five numbers are
sorted with dedicated short sequences; larger inputs are moved to `b` in
chunks of ranks and brought back largest first.

A token that is not an optional sign followed by digits, a token longer than
11 characters, a value outside the 32-bit signed range, or a repeated value
makes it print `Error` to standard error instead.

### checker

`checker` takes the same arguments, reads instructions from standard input,
one per line, runs them, and prints `OK` if stack `a` ends up non-empty and in
ascending order, or `KO` otherwise. Only stack `a` is judged.

```
push_swap 3 2 1 | checker 3 2 1
```

Details of its behaviour:

- If the numbers are already sorted it prints `OK` without reading input.
- Pushing from an empty stack and rotating a stack of fewer than two values
  do nothing.
- A final line without its trailing newline is still accepted if it is the
  start of an instruction name (for example `r` is read as `ra`).
- Bad numbers, an unknown instruction, an empty line, or a swap on fewer than
  two values print `Error` to standard error.

## Library use

```python
from pushswap.sorting import push_swap
from pushswap.checker import check

values = [3, 2, 1]
ops = push_swap(values)          # [Operation.SA, Operation.RRA]
assert check(values, ops)
```

Modules:

- `pushswap.stacks` — `Operation` (an enum of the eleven instructions),
  `Stack`, and `Stacks`, which holds `a` and `b`, applies operations with
  `Stacks.apply` and records them in `Stacks.history`; plus `is_sorted`,
  `minimum`, `maximum`, `next_min` and `search_less`.
- `pushswap.parsing` — `parse_stack` turns command-line arguments into a list
  of integers, raising `InputError` on bad input; also `split_arguments`,
  `check_tokens`, `parse_int`, `check_duplicates`, `needs_sorting`, `is_number`
  and `atoi32`.
- `pushswap.sorting` — `push_swap`, `normalize` (values to ranks), and the
  strategies `sort_small`, `sort_three`, `sort_four`, `sort_five`,
  `chunk_sort`, `search_chunks` and `bring_back`.
- `pushswap.checker` — `check`, `parse_instruction`, `read_instructions`,
  `read_lines` and the `checker` command's `main`.
- `pushswap.cli` — the `push_swap` command's `main`.
- `pushswap.chars`, `pushswap.textutil`, `pushswap.output` — small helpers
  with C-library semantics: character classification and `atoi`/`itoa`,
  string searching, splitting and trimming, and writing characters, strings
  and numbers to a text stream.

## Running the tests

```
pip install .[test]
pytest
```