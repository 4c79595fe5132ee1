"""printf-style formatting with a small, fixed set of conversions.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. Integers behave like their C counterparts:
``%d``/``%i`` wrap to a signed 32-bit value, ``%u``/``%x``/``%X`` to an
unsigned 32-bit value and ``%p`` to an unsigned 64-bit address. An unknown
conversion character produces no output and consumes no argument.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_UINT32 = 1 << 32
_UINT64 = 1 << 64
_NULL_STRING = "(null)"
_NULL_POINTER = "0x0"


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool):
        return int(value)
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{spec} expects an integer, got {type(value).__name__}"
        ) from None


def _signed32(value: int) -> int:
    half = _UINT32 >> 1
    return (value + half) % _UINT32 - half


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = _as_int(value, "p") % _UINT64
    return f"0x{address:x}"


def _format_signed(value: Any) -> str:
    return str(_signed32(_as_int(value, "d")))


def _format_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") % _UINT32)


def _format_lower_hex(value: Any) -> str:
    return f"{_as_int(value, 'x') % _UINT32:x}"


def _format_upper_hex(value: Any) -> str:
    return f"{_as_int(value, 'X') % _UINT32:X}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_lower_hex,
    "X": _format_upper_hex,
}

_MISSING = object()


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            continue
        value = next(remaining, _MISSING)
        if value is _MISSING:
            raise TypeError(f"not enough arguments for format string at %{spec}")
        yield converter(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_render(fmt, args))


def print_formatted(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)