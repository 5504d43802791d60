"""Winner of the add-or-subtract-one game that ends on a multiple of three."""

from __future__ import annotations

from collections.abc import Iterator

from cfsolve.cover_in_water import _read_ints, _run_cases

_MOVES = (-1, 1)


def winner(n: int) -> str:
    """Return "First" or "Second": the player who wins starting from n.

    The first player wins at once if a single move reaches a multiple of
    three; otherwise the second player can always undo that move.
    """
    if any((n + move) % 3 == 0 for move in _MOVES):
        return "First"
    return "Second"


def _case(tokens: Iterator[str]) -> str:
    (n,) = _read_ints(tokens, 1)
    return winner(n)


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print the winner per case."""
    return _run_cases(argv, "Solve 'Game in Integers' cases read from stdin.", _case)


if __name__ == "__main__":
    raise SystemExit(main())