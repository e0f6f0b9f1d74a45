# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small set of operations. It prints each operation it performs, one per
line, on standard output:

| Instruction  | Effect                                               |
|--------------|------------------------------------------------------|
| `sa`, `sb`   | swap the top two elements of stack a / b             |
| `pa`, `pb`   | move the top of b onto a / the top of a onto b       |
| `ra`, `rb`   | rotate stack a / b: the top element goes to bottom   |
| `rra`, `rrb` | reverse rotate a / b: the bottom element goes to top |

An operation that would change nothing (swapping or rotating a stack with
fewer than two elements, pushing from an empty stack) prints nothing.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, as a single quoted string, or mixed:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
push-swap 5 "1 4" 2 3
```

`python -m pushswap.cli` runs the same command.

The first number given is the top of stack `a`. The values are first replaced
by their ranks (0 for the smallest, and so on). Two numbers are handled with
at most one swap, three with a fixed sequence, four or five with a dedicated
routine that parks the two smallest on `b`, and anything else with a binary
radix sort over the ranks. Input that is already sorted, and an empty
argument list, produce no output.

The command writes `Error` to standard error and exits with status 1 when:

- the only argument is an empty string;
- the input holds anything other than digits, spaces, `+` and `-`;
- a sign is followed by a space or ends the input;
- a word is not one optional sign followed by digits (for example `5-3`);
- a value lies outside the signed 32-bit range;
- a value is repeated.

## Library use

```python
import io
from pushswap.cli import solve
from pushswap.parsing import parse_arguments

values = parse_arguments(["3 1 2"])
out = io.StringIO()
solve(values, out)
print(out.getvalue().split())   # ['ra']
```

- `pushswap.parsing` — `join_args`, `validate`, `word_count`, `parse_number`,
  `parse_numbers`, `check_duplicates` and `parse_arguments`. Failures raise
  `ArgumentError`, a subclass of `ValueError`.
- `pushswap.stacks.Stacks` — holds the deques `a` and `b` (top at index 0) and
  offers `swap`, `rotate`, `reverse_rotate` (each taking `"a"` or `"b"`),
  `push_a`, `push_b` and `is_sorted`. Each operation writes its instruction
  name to the stream the stacks were created with, standard output by default.
- `pushswap.sort` — `normalize`, `sort_three`, `sort_four_to_five` and
  `radix_sort`; the sorting routines expect stack `a` to hold ranks.
- `pushswap.cli` — `solve(values, stream)` sorts and returns the `Stacks`;
  `main(argv)` is the command and returns its exit status.

The `pushswap.libft` subpackage holds small helpers the rest is built on:

- `chars` — ASCII classification and case conversion (`is_digit`, `is_alpha`,
  `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`);
- `memory` — byte-buffer helpers (`memset`, `bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove`);
- `output` — `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` writing to a
  text stream;
- `strings` — `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`,
  `strlcat`, `strdup`; searches return an index or `None`, and the bounded
  copies return the resulting text with the would-be length;
- `transform` — `strjoin`, `substr`, `strtrim`, `split`, `itoa`, `atoi`,
  `strmapi`, `striteri`;
- `lists` — `Node` and `LinkedList`, a singly linked list with `add_front`,
  `add_back`, `last`, `pop_front`, `clear`, `iterate` and `map`.

## What it does not do

`pushswap` only produces instructions. It has no command that reads a list of
instructions back, applies them to the numbers and reports whether they sort
them; checking output has to be done by other means.

## Tests

```
pip install ".[test]"
pytest
```