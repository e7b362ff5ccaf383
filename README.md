# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. The program prints the sequence of operations that turns
stack `a` into ascending order (smallest on top).

## Operations

The operations are methods of `pushswap.stacks.Stacks`. Each one prints its
name on a line of its own when it moves something.

| Printed | Method                  | Effect                                        |
|---------|-------------------------|-----------------------------------------------|
| `sa`    | `swap_a()`              | swap the top two items of `a`                 |
| `sb`    | `swap_b()`              | swap the top two items of `b`                 |
| `ss`    | `swap_both()`           | `sa` and `sb` together                        |
| `pa`    | `push_a()`              | move the top of `b` onto `a`                  |
| `pb`    | `push_b()`              | move the top of `a` onto `b`                  |
| `ra`    | `rotate_a()`            | rotate `a` up (top item goes to the bottom)   |
| `rb`    | `rotate_b()`            | rotate `b` up                                 |
| `rb`    | `rotate_both()`         | rotate both stacks up (printed as `rb`)       |
| `rra`   | `reverse_rotate_a()`    | rotate `a` down (bottom item goes to the top) |
| `rrb`   | `reverse_rotate_b()`    | rotate `b` down                               |
| `rrr`   | `reverse_rotate_both()` | `rra` and `rrb` together                      |

The sorting strategies use only `sa`, `pa`, `pb`, `ra`, `rb`, `rra` and `rrb`.

## Installing

```
pip install .
```

## Command line

Give the numbers as separate arguments:

```
push-swap 3 2 1
```

or as a single space-separated argument:

```
push-swap "5 1 4 2 3"
```

Each operation is printed on its own line. Nothing is printed when the input
is already sorted. With no arguments the command exits with status 1 and
prints nothing.

Input is rejected by printing `Error` on standard output (the exit status is
still 0) when:

- an argument is not an optional sign followed by digits written exactly as
  the number would be printed, so `+5`, `05` and `-0` are refused;
- a value lies outside the 32-bit signed range;
- two arguments give the same number;
- the single argument, or the first of several, is empty, or the single
  argument holds only spaces.

An empty argument after the first is read as `0`.

Lists of up to three values are sorted directly, up to five by first moving
the smallest values to `b`, and longer lists by pushing ranked blocks to `b`
and bringing the highest ranks back to `a` one at a time.

## Library use

```python
import io
from pushswap.cli import push_swap

out = io.StringIO()
push_swap(["2", "1", "3"], out)
print(out.getvalue())   # "sa\n"
```

`push_swap` returns the final `Stacks` and raises
`pushswap.parsing.ParseError` on invalid input.

- `pushswap.stacks` — `Item` and `Stacks`, with `a_values()`, `b_values()`
  and `describe()` besides the operations above.
- `pushswap.parsing` — `parse_arguments`, `tokenize`, `is_valid_number`,
  `is_valid_int`, `is_only_space`, `has_duplicates`, `is_sorted`.
- `pushswap.sorting` — `sort_stacks` picks the strategy; `sort_three`,
  `sort_five`, `sort_large`, `push_back_to_a`, `assign_positions`, `pivot`,
  `max_position`, `best_block_size` and the `Block` state are available too.

The package also carries small helpers with the behaviour of the classic C
routines:

- `pushswap.chars` — ASCII classification and case conversion.
- `pushswap.strings` — `atoi` (wrapping to 32 bits), `itoa`, `strcmp`,
  `strncmp`, `strchr`, `strrchr`, `strnstr` and friends.
- `pushswap.substrings` — `split_words`, `strtrim`, `substr`, `strjoin`,
  `strlcpy`, `strlcat`, `strmapi`, `striteri`, `tablen`, `print_split`.
- `pushswap.memory` — `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove` on byte buffers.
- `pushswap.linkedlist` — `LinkedList` with front/back insertion, `clear`,
  `iterate` and `map`.
- `pushswap.printf` — `format_string` and `printf` for `%c %s %d %i %u %x %X
  %p %%`, plus `put_char`, `put_str`, `put_endl`, `put_number`.
- `pushswap.lines` — `LineReader`, reading a text or binary stream line by
  line through a fixed-size buffer.

## What it does not do

There is no checker: nothing reads a list of operations back, applies it to
the numbers and reports whether the result is sorted. The only command is
`push-swap`, which produces operations.