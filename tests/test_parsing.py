import io

import pytest

from pushswap.parsing import (
    ParseError,
    has_duplicates,
    is_only_space,
    is_sorted,
    is_valid_int,
    is_valid_number,
    parse_arguments,
    tokenize,
)
from pushswap.stacks import Stacks


def test_is_valid_int_bounds():
    assert is_valid_int(2147483647)
    assert is_valid_int(-2147483648)
    assert not is_valid_int(2147483648)
    assert not is_valid_int(-2147483649)


@pytest.mark.parametrize(
    "text", ["42", "-7", "0", "2147483647", "-2147483648"]
)
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize(
    "text", ["+5", "007", "-0", "2147483648", "-2147483649", "abc", "1a", "-", "+", " 1"]
)
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_is_only_space():
    assert is_only_space("   ")
    assert is_only_space("")
    assert not is_only_space(" 1 ")


def test_has_duplicates():
    assert has_duplicates(["1", "2", "1"])
    assert not has_duplicates(["1", "2", "3"])
    assert not has_duplicates([])


def test_tokenize_single_argument_splits_on_spaces():
    assert tokenize(["  3 1   2 "]) == ["3", "1", "2"]


def test_tokenize_several_arguments():
    assert tokenize(["3", "-1", "2"]) == ["3", "-1", "2"]


@pytest.mark.parametrize(
    "args",
    [[], [""], ["    "], ["1 1"], ["1", "1"], ["1", "a"], ["1 +2"], ["1\t2"], ["2147483648"]],
)
def test_tokenize_rejects(args):
    with pytest.raises(ParseError):
        tokenize(args)


def test_parse_arguments_single_string():
    assert parse_arguments(["3 1 2"]) == [3, 1, 2]


def test_parse_arguments_several():
    assert parse_arguments(["-2147483648", "2147483647"]) == [-2147483648, 2147483647]


def test_parse_arguments_empty_first_argument_rejected():
    with pytest.raises(ParseError):
        parse_arguments(["", "1"])


def test_parse_arguments_empty_later_argument_reads_as_zero():
    assert parse_arguments(["1", "", "3"]) == [1, 0, 3]


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x"])


def test_is_sorted_true_for_ascending():
    assert is_sorted(Stacks([1, 2, 3], io.StringIO()))
    assert is_sorted(Stacks([5], io.StringIO()))


def test_is_sorted_false_for_unsorted_or_empty():
    assert not is_sorted(Stacks([2, 1, 3], io.StringIO()))
    assert not is_sorted(Stacks([], io.StringIO()))


def test_is_sorted_false_when_b_not_empty():
    stacks = Stacks([1, 2, 3], io.StringIO())
    stacks.push_b()
    assert stacks.a_values() == [2, 3]
    assert not is_sorted(stacks)