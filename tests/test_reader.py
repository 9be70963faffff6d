"""Tests for the count-prefixed input reader."""

import io

import pytest

from domain_guard.reader import (
    InputFormatError,
    read_lines,
    read_number_on_line,
)


class TestReadNumberOnLine:
    def test_plain(self) -> None:
        assert read_number_on_line(io.StringIO("3\n")) == 3

    def test_surrounding_whitespace(self) -> None:
        assert read_number_on_line(io.StringIO("  12 \r\n")) == 12

    def test_last_line_without_newline(self) -> None:
        assert read_number_on_line(io.StringIO("0")) == 0

    def test_not_a_number(self) -> None:
        with pytest.raises(InputFormatError, match="expected a count"):
            read_number_on_line(io.StringIO("three\n"))

    def test_negative(self) -> None:
        with pytest.raises(InputFormatError, match="negative"):
            read_number_on_line(io.StringIO("-1\n"))

    def test_end_of_input(self) -> None:
        with pytest.raises(InputFormatError, match="end of input"):
            read_number_on_line(io.StringIO(""))


class TestReadLines:
    def test_reads_exactly_count(self) -> None:
        stream = io.StringIO("a.b\nc.d\ne.f\n")
        assert read_lines(stream, 2) == ["a.b", "c.d"]
        assert stream.readline() == "e.f\n"

    def test_strips_only_line_terminators(self) -> None:
        assert read_lines(io.StringIO("a.b\r\n\n"), 2) == ["a.b", ""]

    def test_removes_one_terminator_only(self) -> None:
        assert read_lines(io.StringIO("a.b\r\r\nc.d\n\n"), 2) == ["a.b\r", "c.d"]

    def test_zero(self) -> None:
        assert read_lines(io.StringIO("a.b\n"), 0) == []

    def test_too_few_lines(self) -> None:
        with pytest.raises(InputFormatError):
            read_lines(io.StringIO("a.b\n"), 2)

