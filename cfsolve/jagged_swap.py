"""Decide whether a permutation can be sorted by the jagged swap operation."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from cfsolve.cover_in_water import _read_ints, _run_cases, _yes_no


def can_sort(values: Sequence[int]) -> bool:
    """Return True if the permutation can be sorted, which needs 1 in front."""
    if not values:
        raise ValueError("values must not be empty")
    return values[0] == 1


def _case(tokens: Iterator[str]) -> str:
    (length,) = _read_ints(tokens, 1)
    return _yes_no(can_sort(_read_ints(tokens, length)))


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print YES or NO per case."""
    return _run_cases(argv, "Solve 'Jagged Swap' cases read from stdin.", _case)


if __name__ == "__main__":
    raise SystemExit(main())