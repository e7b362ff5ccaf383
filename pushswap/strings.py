"""String helpers with the semantics of the classic C routines."""

from __future__ import annotations

from typing import Optional, Union

_INT_BITS = 32
_WHITESPACE = " \t\n\v\f\r"


def _to_int32(number: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    number &= (1 << _INT_BITS) - 1
    if number >= 1 << (_INT_BITS - 1):
        number -= 1 << _INT_BITS
    return number


def _char_code(char: Union[int, str]) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    return int(char) & 0xFF


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to 32 bits on overflow.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text with no digits gives 0.
    """
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    result = 0
    while index < len(text) and "0" <= text[index] <= "9":
        result = result * 10 + (ord(text[index]) - ord("0"))
        index += 1
    return _to_int32(result * sign)


def itoa(number: int) -> str:
    """Render a 32-bit integer in decimal."""
    return str(_to_int32(number))


def count_digits(number: int) -> int:
    """Number of characters needed to write ``number``, sign included."""
    count = 1 if number <= 0 else 0
    remaining = abs(number)
    while remaining:
        remaining //= 10
        count += 1
    return count


def strcmp(first: str, second: str) -> int:
    """Compare two strings up to the end of the shorter one.

    Returns the difference of the first differing characters, or 0 when
    one string is a prefix of the other.
    """
    for left, right in zip(first, second):
        if left != right:
            return ord(left) - ord(right)
    return 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; a missing character counts as 0."""
    for index in range(max(n, 0)):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if not left and not right:
            break
        if left != right:
            return left - right
    return 0


def strlen(text: Optional[str]) -> int:
    """Length of ``text``; ``None`` has length 0."""
    if text is None:
        return 0
    return len(text)


def strchr(text: str, char: Union[int, str]) -> Optional[int]:
    """Index of the first ``char`` in ``text``.

    Searching for the NUL character gives the length of ``text``;
    ``None`` is returned when the character is absent.
    """
    code = _char_code(char)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(text: str, char: Union[int, str]) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or ``None``."""
    code = _char_code(char)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at 0; ``None`` is returned when there is no match.
    """
    if not needle:
        return 0
    limit = min(max(length, 0), len(haystack))
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index