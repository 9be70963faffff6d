"""Count-prefixed line input: a count line followed by that many domains."""

from __future__ import annotations

from typing import TextIO


class InputFormatError(ValueError):
    """Raised when the input stream does not follow the count/lines format."""


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    if not line:
        raise InputFormatError("unexpected end of input")
    return line.removesuffix("\n").removesuffix("\r")


def read_number_on_line(stream: TextIO) -> int:
    line = _read_line(stream)
    try:
        num = int(line.strip())
    except ValueError:
        raise InputFormatError(f"expected a count, got {line!r}") from None
    if num < 0:
        raise InputFormatError(f"count must not be negative, got {num}")
    return num


def read_lines(stream: TextIO, count: int) -> list[str]:
    """Read exactly ``count`` lines, without their line terminators."""
    return [_read_line(stream) for _ in range(count)]

