# cfsolve

Small solvers for six short algorithmic puzzles. Each one is a plain Python
function, and each also has a command that reads the usual multi-case input
from standard input and prints one answer per line. There are no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from cfsolve.cover_in_water import min_water_actions
from cfsolve.doremys_paint import can_make_good
from cfsolve.game_in_integers import winner
from cfsolve.halloumi_boxes import can_sort as can_sort_boxes
from cfsolve.jagged_swap import can_sort as can_sort_jagged
from cfsolve.line_trip import min_tank_volume

min_water_actions("#..#")        # 2
can_make_good([1, 2, 1, 2])      # True
winner(3)                        # "Second"
can_sort_boxes([3, 1, 2], 2)     # True
can_sort_jagged([1, 3, 2])       # True
min_tank_volume([1, 2, 5], 7)    # 4
```

What each function answers:

- `cover_in_water.min_water_actions(cells)` – for a string of `.` (empty)
  and `#` (blocked) cells, the fewest pours needed to fill every empty cell:
  2 if three empty cells stand in a row, otherwise the number of empty cells.
- `doremys_paint.can_make_good(values)` – whether the values can be
  reordered so every pair of neighbours has the same sum: at most two
  distinct values, with equal counts, or counts differing by one when the
  length is odd. An empty sequence raises `ValueError`.
- `game_in_integers.winner(n)` – `"First"` unless `n` is a multiple of
  three, in which case `"Second"`.
- `halloumi_boxes.can_sort(values, k)` – whether the values can be sorted by
  reversing windows of length at most `k`: always when `k > 1`, otherwise
  only if they are sorted already.
- `jagged_swap.can_sort(values)` – whether a permutation can be sorted by
  the jagged-swap operation, which holds exactly when it starts with 1. An
  empty sequence raises `ValueError`.
- `line_trip.min_tank_volume(points, x)` – the smallest tank needed to drive
  from 0 to `x` and back with stations at `points` and none at `x`: the
  largest gap between stops, where the last leg counts twice.

## Command-line use

Every command reads the number of test cases first, then each case in the
format below, and prints one answer per case. Input is read as
whitespace-separated tokens, so line breaks do not matter. Each command
accepts only `-h`/`--help`.

| Command            | Each case on input                | Output           |
|--------------------|-----------------------------------|------------------|
| `cover-in-water`   | `n`, then a string of `.` and `#` | an integer       |
| `doremys-paint`    | `n`, then `n` integers            | `YES` or `NO`    |
| `game-in-integers` | `n`                               | `First`/`Second` |
| `halloumi-boxes`   | `n k`, then `n` integers          | `YES` or `NO`    |
| `jagged-swap`      | `n`, then `n` integers            | `YES` or `NO`    |
| `line-trip`        | `n x`, then `n` integers          | an integer       |

For example:

```
printf '3\n1\n3\n5\n' | game-in-integers
```

prints

```
First
Second
First
```

Input that runs out before the stated number of integers raises
`ValueError`.