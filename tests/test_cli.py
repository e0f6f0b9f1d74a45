import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.cli import main, solve
from pushswap.parsing import ArgumentError
from pushswap.stacks import Stacks


def _replay(values, lines):
    stacks = Stacks(values, io.StringIO())
    operations = {
        "sa": lambda: stacks.swap("a"),
        "sb": lambda: stacks.swap("b"),
        "ra": lambda: stacks.rotate("a"),
        "rb": lambda: stacks.rotate("b"),
        "rra": lambda: stacks.reverse_rotate("a"),
        "rrb": lambda: stacks.reverse_rotate("b"),
        "pa": stacks.push_a,
        "pb": stacks.push_b,
    }
    for line in lines:
        operations[line]()
    return stacks


def test_main_swaps_two(capsys):
    assert main(["2", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err == ""


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_main_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("args", [["1", "a"], [""], ["1", "1"], ["2147483648"], ["3 -"]])
def test_main_reports_errors(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_three_reversed(capsys):
    assert main(["3", "2", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["ra", "sa"]


def test_solve_rejects_duplicates():
    with pytest.raises(ArgumentError):
        solve([4, 4], io.StringIO())


@given(st.lists(st.integers(), unique=True, min_size=0, max_size=5))
def test_solve_small_inputs_sort(values):
    out = io.StringIO()
    stacks = solve(values, out)
    assert list(stacks.a) == sorted(range(len(values)))
    replayed = _replay(values, out.getvalue().splitlines())
    assert list(replayed.a) == sorted(values)
    assert not replayed.b


def test_solve_pinned_radix_input():
    values = [20, 0, 10, 30, 40, 50]
    out = io.StringIO()
    stacks = solve(values, out)
    assert list(stacks.a) == list(range(len(values)))
    assert list(_replay(values, out.getvalue().splitlines()).a) == sorted(values)


@given(st.lists(st.integers(min_value=-1000, max_value=1000), unique=True, min_size=6, max_size=30))
def test_solve_larger_inputs_empty_b_and_replay(values):
    out = io.StringIO()
    stacks = solve(values, out)
    assert not stacks.b
    assert sorted(stacks.a) == list(range(len(values)))
    replayed = _replay(values, out.getvalue().splitlines())
    assert not replayed.b
    assert sorted(replayed.a) == sorted(values)