"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(code: CharLike) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError("expected a single character")
        return ord(code)
    return int(code)


def is_alpha(code: CharLike) -> bool:
    """True for an ASCII letter."""
    value = _code(code)
    return ord("a") <= value <= ord("z") or ord("A") <= value <= ord("Z")


def is_digit(code: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    value = _code(code)
    return ord("0") <= value <= ord("9")


def is_alnum(code: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(code) <= 127


def is_print(code: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    value = _code(code)
    return ord(" ") <= value <= ord("~")


def to_lower(code: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    value = _code(code)
    if ord("A") <= value <= ord("Z"):
        value += 32
    return chr(value) if isinstance(code, str) else value


def to_upper(code: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    value = _code(code)
    if ord("a") <= value <= ord("z"):
        value -= 32
    return chr(value) if isinstance(code, str) else value