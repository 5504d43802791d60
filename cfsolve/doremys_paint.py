"""Decide whether an array can be reordered so all adjacent pair sums are equal."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence

from cfsolve.cover_in_water import _read_ints, _run_cases, _yes_no


def can_make_good(values: Sequence[int]) -> bool:
    """Return True if some permutation has every adjacent pair summing alike.

    This holds only with at most two distinct values whose counts are equal,
    or differ by one when the length is odd.
    """
    if not values:
        raise ValueError("values must not be empty")
    counts = Counter(values)
    if len(counts) >= 3:
        return False
    ordered = [counts[key] for key in sorted(counts)]
    first, last = ordered[0], ordered[-1]
    if first == last:
        return True
    return len(values) % 2 == 1 and abs(first - last) == 1


def _case(tokens: Iterator[str]) -> str:
    (length,) = _read_ints(tokens, 1)
    return _yes_no(can_make_good(_read_ints(tokens, length)))


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print YES or NO per case."""
    return _run_cases(argv, "Solve 'Doremy's Paint 3' cases read from stdin.", _case)


if __name__ == "__main__":
    raise SystemExit(main())