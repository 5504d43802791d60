import io

import pytest

from cfsolve.cover_in_water import main, min_water_actions


@pytest.mark.parametrize("cells", ["...", "##....#", "#...#..#.#", "......"])
def test_run_of_three_needs_two_actions(cells):
    assert min_water_actions(cells) == 2


@pytest.mark.parametrize("cells", ["#.#.#.#", ".#.", "..#..", "#", ".."])
def test_without_run_each_empty_cell_needs_an_action(cells):
    assert min_water_actions(cells) == len(cells.replace("#", ""))


def test_fully_blocked_needs_nothing():
    assert min_water_actions("####") == 0


@pytest.mark.parametrize("cells", ["...", "#.#.", "....#....", "..#..#..", "#"])
def test_never_more_than_number_of_empty_cells(cells):
    assert min_water_actions(cells) <= cells.count(".")


def test_main_prints_one_answer_per_case(monkeypatch, capsys):
    cases = ["...", "##....#", "#.#.#.#", "####"]
    text = f"{len(cases)}\n" + "".join(f"{len(c)}\n{c}\n" for c in cases)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    lines = capsys.readouterr().out.split()
    assert lines == [str(min_water_actions(c)) for c in cases]