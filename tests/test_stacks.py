import io

import pytest

from pushswap.stacks import Item, Stacks


@pytest.fixture
def out():
    return io.StringIO()


def test_init_assigns_input_positions(out):
    stacks = Stacks([7, 3, 9], out)
    assert stacks.a_values() == [7, 3, 9]
    assert [item.pos for item in stacks.a] == [1, 2, 3]
    assert stacks.b_values() == []


def test_swap_a_exchanges_top_two(out):
    stacks = Stacks([1, 2, 3], out)
    stacks.swap_a()
    assert stacks.a_values() == [2, 1, 3]
    assert out.getvalue() == "sa\n"


def test_swap_keeps_item_positions_with_values(out):
    stacks = Stacks([5, 6], out)
    stacks.swap_a()
    assert [(item.value, item.pos) for item in stacks.a] == [(6, 2), (5, 1)]


def test_swap_single_item_is_silent(out):
    stacks = Stacks([1], out)
    stacks.swap_a()
    stacks.swap_b()
    assert stacks.a_values() == [1]
    assert out.getvalue() == ""


def test_swap_without_emit(out):
    stacks = Stacks([1, 2], out)
    stacks.swap_a(emit=False)
    assert stacks.a_values() == [2, 1]
    assert out.getvalue() == ""


def test_push_b_and_push_a_round_trip(out):
    stacks = Stacks([1, 2, 3], out)
    stacks.push_b()
    stacks.push_b()
    assert stacks.a_values() == [3]
    assert stacks.b_values() == [2, 1]
    stacks.push_a()
    stacks.push_a()
    assert stacks.a_values() == [1, 2, 3]
    assert stacks.b_values() == []
    assert out.getvalue() == "pb\npb\npa\npa\n"


def test_push_from_empty_does_nothing(out):
    stacks = Stacks([], out)
    stacks.push_a()
    stacks.push_b()
    assert stacks.a_values() == []
    assert out.getvalue() == ""


def test_rotate_and_reverse_rotate_are_inverse(out):
    stacks = Stacks([1, 2, 3, 4], out)
    stacks.rotate_a()
    assert stacks.a_values() == [2, 3, 4, 1]
    stacks.reverse_rotate_a()
    assert stacks.a_values() == [1, 2, 3, 4]
    assert out.getvalue() == "ra\nrra\n"


def test_rotate_b_and_reverse_rotate_b(out):
    stacks = Stacks([1, 2, 3], out)
    for _ in range(3):
        stacks.push_b()
    assert stacks.b_values() == [3, 2, 1]
    stacks.rotate_b()
    assert stacks.b_values() == [2, 1, 3]
    stacks.reverse_rotate_b()
    assert stacks.b_values() == [3, 2, 1]
    assert out.getvalue().splitlines()[-2:] == ["rb", "rrb"]


def test_swap_both(out):
    stacks = Stacks([1, 2, 3, 4], out)
    stacks.push_b()
    stacks.push_b()
    stacks.swap_both()
    assert stacks.a_values() == [4, 3]
    assert stacks.b_values() == [1, 2]
    assert out.getvalue().splitlines()[-1] == "ss"


def test_rotate_both_reports_rb(out):
    stacks = Stacks([1, 2, 3, 4], out)
    stacks.push_b()
    stacks.push_b()
    stacks.rotate_both()
    assert stacks.a_values() == [4, 3]
    assert stacks.b_values() == [1, 2]
    assert out.getvalue().splitlines()[-1] == "rb"


def test_reverse_rotate_both(out):
    stacks = Stacks([1, 2, 3, 4, 5], out)
    stacks.push_b()
    stacks.push_b()
    stacks.reverse_rotate_both()
    assert stacks.a_values() == [5, 3, 4]
    assert stacks.b_values() == [1, 2]
    assert out.getvalue().splitlines()[-1] == "rrr"


def test_describe_empty(out):
    assert Stacks([], out).describe() == "Pile vide\n"


def test_describe_lists_values_and_positions(out):
    stacks = Stacks([5, -2], out)
    assert stacks.describe() == "Valeur: 5, Position: 1\nValeur: -2, Position: 2\n"


def test_item_position_is_mutable():
    item = Item(4)
    item.pos = 2
    assert (item.value, item.pos) == (4, 2)