"""Minimal formatted output: %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from pushswap.strings import itoa

BASE_TEN = "0123456789"
LHEXBASE = "0123456789abcdef"
UHEXBASE = "0123456789ABCDEF"

_UINT_MASK = (1 << 32) - 1
_ADDRESS_MASK = (1 << 64) - 1
_NULL_STRING = "(null)"
_NULL_ADDRESS = "(nil)"


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def to_base(number: int, base: str) -> str:
    """Write a non-negative integer using the digits of ``base``.

    Zero is always written as ``"0"``. Negative numbers are taken as
    unsigned 32-bit values.
    """
    if len(base) < 2:
        raise ValueError("base must have at least two digits")
    if number < 0:
        number &= _UINT_MASK
    if number == 0:
        return "0"
    radix = len(base)
    digits = []
    while number:
        number, remainder = divmod(number, radix)
        digits.append(base[remainder])
    return "".join(reversed(digits))


def format_address(address: Optional[int]) -> str:
    """Hexadecimal form of an address with a ``0x`` prefix; null is ``(nil)``."""
    if not address:
        return _NULL_ADDRESS
    return "0x" + to_base(address & _ADDRESS_MASK, LHEXBASE)


def _char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _NULL_STRING if value is None else str(value)
    if spec in "di":
        return itoa(int(value))
    if spec == "u":
        return to_base(int(value) & _UINT_MASK, BASE_TEN)
    if spec == "x":
        return to_base(int(value) & _UINT_MASK, LHEXBASE)
    if spec == "X":
        return to_base(int(value) & _UINT_MASK, UHEXBASE)
    if spec == "p":
        return format_address(value)
    raise ValueError(f"unsupported conversion %{spec}")


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args``.

    A ``%`` at the very end of ``fmt`` is kept as a literal character.
    """
    arg_iter = iter(args)
    pieces = []
    index = 0
    while index < len(fmt):
        char = fmt[index]
        if char == "%" and index + 1 < len(fmt):
            pieces.append(_convert(fmt[index + 1], arg_iter))
            index += 2
        else:
            pieces.append(char)
            index += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` and return the number of characters."""
    text = format_string(fmt, *args)
    _out(stream).write(text)
    return len(text)


def put_char(char: Union[int, str], stream: Optional[TextIO] = None) -> int:
    """Write one character; returns 1."""
    _out(stream).write(_char(char))
    return 1


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text`` (``(null)`` for ``None``) and return its length."""
    if text is None:
        text = _NULL_STRING
    _out(stream).write(text)
    return len(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; ``None`` writes nothing."""
    if text is None:
        return
    _out(stream).write(f"{text}\n")


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit integer in decimal."""
    _out(stream).write(itoa(number))