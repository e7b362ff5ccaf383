"""Splitting, trimming, joining and copying of strings."""

from __future__ import annotations

import sys
from itertools import takewhile
from typing import Callable, Iterable, List, Optional, Sequence, TextIO, Tuple


def _single_char(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("separator must be a single character")
    return sep


def split_words(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between separators."""
    _single_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; ``None`` if either is missing."""
    if first is None or second is None:
        return None
    return first + second


def strdup(text: str) -> str:
    """An equal copy of ``text``."""
    return str(text)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``. A size of 0
    copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had. When ``size`` does not exceed the length of ``dst``, ``dst`` is
    left unchanged and ``size + len(src)`` is returned as the length.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = len(dst)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string whose characters are ``func(index, char)``."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Apply ``func(index, char)`` to each character in turn.

    A character is replaced by what ``func`` returns, or kept when it
    returns ``None``. The resulting string is returned.
    """
    chars = list(text)
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return "".join(chars)


def tablen(items: Optional[Sequence[object]]) -> int:
    """Number of entries before the first ``None``; ``None`` itself has 0."""
    if items is None:
        return 0
    return sum(1 for _ in takewhile(lambda item: item is not None, items))


def print_split(words: Iterable[str], stream: Optional[TextIO] = None) -> None:
    """Write each word on a line of its own."""
    out = sys.stdout if stream is None else stream
    for word in words:
        out.write(f"{word}\n")