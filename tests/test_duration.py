"""Tests for duration parsing."""

from __future__ import annotations

from datetime import timedelta

import pytest

from confloader.duration import HOUR, MICROSECOND, MILLISECOND, MINUTE, SECOND, parse_duration, to_timedelta


class TestParseDuration:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0),
            ("+0", 0),
            ("-0", 0),
            ("42ns", 42),
            ("5m", 5 * MINUTE),
            ("10h10m", 10 * HOUR + 10 * MINUTE),
            ("1h30m15s", HOUR + 30 * MINUTE + 15 * SECOND),
            ("300ms", 300 * MILLISECOND),
            ("-1.5h", -(HOUR + 30 * MINUTE)),
            ("+2s", 2 * SECOND),
            ("1.5s", 1500 * MILLISECOND),
            (".5s", 500 * MILLISECOND),
            ("1.s", SECOND),
            ("2us", 2 * MICROSECOND),
            ("2µs", 2 * MICROSECOND),
            ("2μs", 2 * MICROSECOND),
            ("0.000000001s", 1),
            ("1.0000000001s", SECOND),
            ("1m0s", MINUTE),
            ("9223372036854775807ns", (1 << 63) - 1),
            ("-9223372036854775808ns", -(1 << 63)),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_duration(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "-",
            "5",
            "1.5",
            ".",
            ".s",
            "3x",
            "1d",
            "1h-5m",
            " 5s",
            "5s ",
            "abc",
            "9223372036854775808ns",
            "3000000h",
        ],
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_duration(text)


class TestToTimedelta:
    def test_whole_units(self) -> None:
        assert to_timedelta(10 * HOUR + 10 * MINUTE) == timedelta(hours=10, minutes=10)

    def test_negative(self) -> None:
        assert to_timedelta(-SECOND) == timedelta(seconds=-1)

    def test_sub_microsecond_rounds(self) -> None:
        assert to_timedelta(42) == timedelta(0)
        assert to_timedelta(1600) == timedelta(microseconds=2)
