"""Validation of the command-line numbers and the sortedness check."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pushswap.stacks import Stacks
from pushswap.strings import atoi, itoa, strcmp
from pushswap.substrings import split_words

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


class ParseError(ValueError):
    """The arguments do not form a list of distinct integers."""


def is_valid_int(number: int) -> bool:
    """True when ``number`` fits in a signed 32-bit integer."""
    return INT_MIN <= number <= INT_MAX


def is_valid_number(text: str) -> bool:
    """True for an optionally signed run of digits written in canonical form.

    The text is parsed and written back; it is accepted when the two
    agree, so leading zeros, a plus sign and overflowing values fail.
    """
    digits = text[1:] if text[:1] in ("-", "+") else text
    if any(not "0" <= char <= "9" for char in digits):
        return False
    number = atoi(text)
    return is_valid_int(number) and strcmp(text, itoa(number)) == 0


def is_only_space(text: str) -> bool:
    """True when ``text`` holds nothing but spaces (or nothing at all)."""
    return all(char == " " for char in text)


def has_duplicates(tokens: Iterable[str]) -> bool:
    """True when two tokens parse to the same integer."""
    seen = set()
    for token in tokens:
        value = atoi(token)
        if value in seen:
            return True
        seen.add(value)
    return False


def tokenize(args: Sequence[str]) -> List[str]:
    """The validated number tokens of the arguments.

    A single argument is split on spaces; several arguments are taken
    one token each. Raises :class:`ParseError` on any invalid input.
    """
    args = list(args)
    if not args:
        raise ParseError("no arguments")
    if len(args) == 1:
        text = args[0]
        if is_only_space(text):
            raise ParseError("empty argument")
        tokens = split_words(text, " ")
    else:
        tokens = args
    if not all(is_valid_number(token) for token in tokens):
        raise ParseError("argument is not an integer")
    if has_duplicates(tokens):
        raise ParseError("duplicate argument")
    return tokens


def parse_arguments(args: Sequence[str]) -> List[int]:
    """The integers given on the command line, in order."""
    tokens = tokenize(args)
    if args[0] == "":
        raise ParseError("empty first argument")
    values = []
    for token in tokens:
        value = atoi(token)
        if value == 0 and strcmp(token, "0") != 0:
            raise ParseError(f"invalid number {token!r}")
        values.append(value)
    return values


def is_sorted(stacks: Stacks) -> bool:
    """True when ``b`` is empty and ``a`` is non-empty and strictly ascending."""
    if not stacks.a or stacks.b:
        return False
    values = stacks.a_values()
    return all(left < right for left, right in zip(values, values[1:]))