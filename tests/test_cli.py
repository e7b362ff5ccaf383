import io
import random
import sys

import pytest

from pushswap.cli import main, push_swap
from pushswap.parsing import ParseError
from pushswap.stacks import Stacks

OPERATIONS = {
    "sa": Stacks.swap_a,
    "pa": Stacks.push_a,
    "pb": Stacks.push_b,
    "ra": Stacks.rotate_a,
    "rb": Stacks.rotate_b,
    "rra": Stacks.reverse_rotate_a,
    "rrb": Stacks.reverse_rotate_b,
}


def replay(values, text):
    stacks = Stacks(values, out=io.StringIO())
    for op in text.split():
        OPERATIONS[op](stacks)
    return stacks.a_values()


def test_main_without_arguments_returns_one():
    assert main([]) == 1


def test_main_none_reads_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["push_swap"])
    assert main() == 1


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("argv", [["1", "a"], ["1 1"], ["3", "3"], ["   "], [""], ["2147483648"]])
def test_main_invalid_input_prints_error(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_single_string_is_sorted_by_output(capsys):
    assert main(["4 -2 9 0 7"]) == 0
    output = capsys.readouterr().out
    assert replay([4, -2, 9, 0, 7], output) == [-2, 0, 4, 7, 9]


def test_push_swap_pair():
    out = io.StringIO()
    stacks = push_swap(["2", "1"], out)
    assert out.getvalue() == "sa\n"
    assert stacks.a_values() == [1, 2]


def test_push_swap_sorts_many_arguments():
    values = random.Random(7).sample(range(-1000, 1000), 120)
    out = io.StringIO()
    stacks = push_swap([str(v) for v in values], out)
    assert stacks.a_values() == sorted(values)
    assert not stacks.b
    assert replay(values, out.getvalue()) == sorted(values)


def test_push_swap_duplicates_raise():
    with pytest.raises(ParseError):
        push_swap(["1", "1"], io.StringIO())


def test_push_swap_sorted_emits_nothing():
    out = io.StringIO()
    stacks = push_swap(["-5", "0", "5"], out)
    assert out.getvalue() == ""
    assert stacks.a_values() == [-5, 0, 5]