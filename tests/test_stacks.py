import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Stacks


def make(values):
    stream = io.StringIO()
    return Stacks(values, stream), stream


def test_swap_a_exchanges_top_two():
    stacks, stream = make([2, 1, 3])
    stacks.swap("a")
    assert list(stacks.a) == [1, 2, 3]
    assert stream.getvalue() == "sa\n"


def test_swap_needs_two_values():
    stacks, stream = make([5])
    stacks.swap("a")
    stacks.swap("b")
    assert list(stacks.a) == [5]
    assert stream.getvalue() == ""


def test_swap_b():
    stacks, stream = make([1, 2])
    stacks.push_b()
    stacks.push_b()
    stacks.swap("b")
    assert list(stacks.b) == [1, 2]
    assert stream.getvalue().splitlines() == ["pb", "pb", "sb"]


def test_rotate_moves_top_to_bottom():
    stacks, stream = make([1, 2, 3])
    stacks.rotate("a")
    assert list(stacks.a) == [2, 3, 1]
    assert stream.getvalue() == "ra\n"


def test_reverse_rotate_moves_bottom_to_top():
    stacks, stream = make([1, 2, 3])
    stacks.reverse_rotate("a")
    assert list(stacks.a) == [3, 1, 2]
    assert stream.getvalue() == "rra\n"


def test_rotate_b_and_reverse_rotate_b():
    stacks, stream = make([1, 2, 3])
    for _ in range(3):
        stacks.push_b()
    stacks.rotate("b")
    stacks.reverse_rotate("b")
    assert list(stacks.b) == [3, 2, 1]
    assert stream.getvalue().splitlines()[-2:] == ["rb", "rrb"]


def test_push_moves_values():
    stacks, stream = make([1, 2])
    stacks.push_b()
    assert list(stacks.a) == [2]
    assert list(stacks.b) == [1]
    stacks.push_a()
    assert list(stacks.a) == [1, 2]
    assert list(stacks.b) == []
    assert stream.getvalue() == "pb\npa\n"


def test_push_from_empty_is_silent():
    stacks, stream = make([])
    stacks.push_a()
    stacks.push_b()
    assert list(stacks.a) == []
    assert stream.getvalue() == ""


def test_unknown_stack_raises():
    stacks, _ = make([1, 2])
    with pytest.raises(ValueError):
        stacks.swap("c")


def test_is_sorted():
    assert make([1, 2, 3])[0].is_sorted() is True
    assert make([2, 1, 3])[0].is_sorted() is False
    assert make([])[0].is_sorted() is True


def test_default_stream_is_stdout(capsys):
    stacks = Stacks([2, 1])
    stacks.swap("a")
    assert capsys.readouterr().out == "sa\n"


@given(st.lists(st.integers(), min_size=2))
def test_rotate_round_trip(values):
    stacks, _ = make(values)
    stacks.rotate("a")
    stacks.reverse_rotate("a")
    assert list(stacks.a) == values


@given(st.lists(st.integers()))
def test_push_round_trip_preserves_order(values):
    stacks, _ = make(values)
    for _ in values:
        stacks.push_b()
    assert list(stacks.b) == values[::-1]
    for _ in values:
        stacks.push_a()
    assert list(stacks.a) == values
    assert list(stacks.b) == []


@given(st.lists(st.integers()), st.lists(st.sampled_from(["sa", "ra", "rra", "pa", "pb"])))
def test_operations_preserve_values(values, ops):
    stacks, stream = make(values)
    actions = {
        "sa": lambda: stacks.swap("a"),
        "ra": lambda: stacks.rotate("a"),
        "rra": lambda: stacks.reverse_rotate("a"),
        "pa": stacks.push_a,
        "pb": stacks.push_b,
    }
    for op in ops:
        actions[op]()
    assert sorted(list(stacks.a) + list(stacks.b)) == sorted(values)
    assert set(stream.getvalue().splitlines()) <= set(ops)


@given(st.lists(st.integers()))
def test_is_sorted_agrees_with_sorted(values):
    stacks, _ = make(values)
    assert stacks.is_sorted() == (values == sorted(values))