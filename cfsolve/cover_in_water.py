"""Minimum number of water-pouring actions needed to fill every empty cell."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from itertools import islice

EMPTY = "."

CaseSolver = Callable[[Iterator[str]], object]


def _read_ints(tokens: Iterator[str], count: int) -> list[int]:
    """Take the next ``count`` tokens as integers."""
    values = [int(token) for token in islice(tokens, count)]
    if len(values) != count:
        raise ValueError(f"expected {count} integers, got {len(values)}")
    return values


def _run_cases(argv: list[str] | None, description: str, solve_case: CaseSolver) -> int:
    """Read a case count and cases from stdin, printing one answer per case."""
    parser = argparse.ArgumentParser(description=description)
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    (cases,) = _read_ints(tokens, 1)
    for _ in range(cases):
        print(solve_case(tokens))
    return 0


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def min_water_actions(cells: str) -> int:
    """Return how many times water must be poured to fill all empty cells.

    Three empty cells in a row make an infinite source: two pours suffice.
    Otherwise every empty cell needs its own pour.
    """
    if EMPTY * 3 in cells:
        return 2
    return cells.count(EMPTY)


def _case(tokens: Iterator[str]) -> int:
    (length,) = _read_ints(tokens, 1)
    return min_water_actions(next(tokens)[:length])


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print one answer per case."""
    return _run_cases(argv, "Solve 'Cover in Water' cases read from stdin.", _case)


if __name__ == "__main__":
    raise SystemExit(main())