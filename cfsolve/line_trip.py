"""Smallest fuel tank needed for a round trip along a line with gas stations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import pairwise

from cfsolve.cover_in_water import _read_ints, _run_cases


def min_tank_volume(points: Sequence[int], x: int) -> int:
    """Return the tank volume needed to go from 0 to x and back.

    Stations sit at the given points; there is none at x, so the last leg
    is driven twice without refuelling.
    """
    stops = [0, *points, x]
    gaps = [right - left for left, right in pairwise(stops)]
    gaps[-1] *= 2
    return max(gaps)


def _case(tokens: Iterator[str]) -> int:
    count, x = _read_ints(tokens, 2)
    return min_tank_volume(_read_ints(tokens, count), x)


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print the volume per case."""
    return _run_cases(argv, "Solve 'Line Trip' cases read from stdin.", _case)


if __name__ == "__main__":
    raise SystemExit(main())