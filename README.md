# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed instruction set. It prints the instructions it uses, one
per line. Applying them to the input leaves `a` sorted in ascending order
and `b` empty.

## Instructions

| Instruction  | Effect |
|--------------|--------|
| `sa`, `sb`   | swap the top two elements of `a` or `b` |
| `pa`, `pb`   | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`   | rotate `a` or `b` up: the top element goes to the bottom |
| `rra`, `rrb` | rotate `a` or `b` down: the bottom element goes to the top |

An instruction that cannot apply (for example `pa` with `b` empty, or a swap
on a stack with fewer than two elements) does nothing and is not printed.

## Command line

```
pip install .
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The same command can be run as `python -m pushswap.cli`.

You can give the numbers as separate arguments, as space-separated words
inside one argument, or as a mix of both. The first number given is the top
of stack `a`. Each word may start with whitespace and one `+` or `-` sign.

- With no arguments the command prints nothing and exits with status 0.
- If the input is already sorted, nothing is printed.
- `Error` is written to standard error, and the exit status is 1, in these cases:
  - a word is not a whole decimal number;
  - a number falls outside the 32-bit signed integer range;
  - a value is repeated;
  - an argument holds no words;
  - the single argument is blank.

The sort runs on the ranks of the values (0 for the smallest), chosen by
size:

- Two elements: at most one move.
- Three elements: at most two moves.
- Four or five elements: the smallest are parked on `b`, the remaining three
  are sorted, and the parked ones are pushed back.
- Larger inputs: pushed to `b` in ranked chunks (a quarter of the input up
  to 100 elements, an eighth up to 500, a twelfth beyond), then brought back
  to `a` largest first.

## Library

```python
from pushswap.sorting import solve
from pushswap.parsing import parse_input, InputError

print(solve([3, 2, 1]))                  # ['ra', 'sa']

ranks = parse_input(["42", "-7", "13"])  # [2, 0, 1]
try:
    parse_input(["1", "1"])
except InputError:
    ...
```

- `pushswap.parsing` provides the input pipeline:
  - `parse_int` reads one word as a 32-bit integer.
  - `split_args` splits arguments on spaces.
  - `has_duplicates` checks for repeated values.
  - `normalize` turns values into ranks.
  - `parse_input` combines these steps.
  - `input_is_empty` detects a single blank argument.

  All of these raise `InputError`, a subclass of `ValueError`, on bad input.
- `pushswap.stack.Machine(values, emit)` holds both stacks as `a` and `b`.
  - It runs the instructions `pa`, `pb`, `sa`, `sb`, `ra`, `rb`, `rra` and `rrb` one call at a time.
  - Each instruction that changes something is passed by name to `emit` (by default printed to standard output) and appended to `operations`.
- A `Stack` offers:
  - indexing, iteration and `len`;
  - `top`;
  - `is_sorted()`, `min_position()` and `max_position()`;
  - `min_value` and `max_value`.
- `pushswap.stack.is_sorted(values)` checks any iterable of integers.
- `pushswap.sorting` holds functions that drive a `Machine` directly:
  - `sort_three`
  - `sort_four_five`
  - `chunk_sort` (expects the ranks 0 to n-1 on `a`)
  - `sort_back`
  - `handle_sorting`
- `solve(values)` returns the instruction list without printing anything.

The package also has small general helpers:

- `pushswap.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`, `atoi`, `itoa`.
- `pushswap.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove` on byte buffers.
- `pushswap.text`: `split`, `strchr`, `strrchr`, `strdup`, `strlen`, `striteri`, `strmapi`, `strjoin`, `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `strtrim`, `substr`.
- `pushswap.linkedlist`: `Node` and `LinkedList` with `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` writing to a text stream.

## What it does not do

- There is no checker command that reads a list of instructions and reports whether they sort the input. You can replay instructions yourself by calling the matching `Machine` methods.
- The combined instructions `ss`, `rr` and `rrr` are neither provided nor emitted.

## Tests

```
pip install ".[test]"
pytest
```