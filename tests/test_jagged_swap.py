import io

import pytest

from cfsolve.jagged_swap import can_sort, main


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([1, 2, 3], True),
        ([1, 3, 2], True),
        ([1, 5, 4, 3, 2], True),
        ([2, 1, 3], False),
        ([3, 1, 2], False),
        ([5, 4, 3, 2, 1], False),
    ],
)
def test_verdict_depends_on_first_element(values, expected):
    assert can_sort(values) is expected


def test_empty_raises():
    with pytest.raises(ValueError):
        can_sort([])


@pytest.mark.parametrize(
    ("stdin", "expected"),
    [
        ("3\n3\n1 3 2\n5\n5 4 3 2 1\n3\n1 2 3\n", "YES\nNO\nYES\n"),
        ("1\n4\n2 1 4 3\n", "NO\n"),
    ],
)
def test_main_output(monkeypatch, capsys, stdin, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert main([]) == 0
    assert capsys.readouterr().out == expected