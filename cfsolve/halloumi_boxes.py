"""Decide whether boxes can be sorted by reversing subarrays of length at most k."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from cfsolve.cover_in_water import _read_ints, _run_cases, _yes_no


def can_sort(values: Sequence[int], k: int) -> bool:
    """Return True if the sequence is sorted already or reversals longer than one are allowed."""
    return k > 1 or list(values) == sorted(values)


def _case(tokens: Iterator[str]) -> str:
    length, k = _read_ints(tokens, 2)
    return _yes_no(can_sort(_read_ints(tokens, length), k))


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print YES or NO per case."""
    return _run_cases(argv, "Solve 'Halloumi Boxes' cases read from stdin.", _case)


if __name__ == "__main__":
    raise SystemExit(main())