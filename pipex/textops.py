"""Small string helpers used for splitting command lines and search paths."""

from __future__ import annotations

from itertools import islice, zip_longest

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def split_words(text: str, separator: str) -> list[str]:
    """Split ``text`` on a single-character ``separator``, dropping empty pieces."""
    if len(separator) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(separator) if word]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits yields 0. The result
    wraps like a 32-bit signed integer.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    for char in text[position:]:
        if not "0" <= char <= "9":
            break
        result = _wrap_int32(result * 10 + (ord(char) - ord("0")))
    return _wrap_int32(result * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError("itoa expects an int")
    return str(number)


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; return the difference at the first mismatch."""
    if count < 0:
        raise ValueError("count must not be negative")
    pairs = zip_longest(first, second, fillvalue="\0")
    for left, right in islice(pairs, count):
        if left != right:
            return ord(left) - ord(right)
    return 0