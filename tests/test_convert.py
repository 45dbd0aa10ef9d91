"""Tests for number formatting and the coercion functions."""

from __future__ import annotations

import math

import pytest

from confloader import convert
from confloader.duration import HOUR, MINUTE, SECOND


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (42.0, "42"),
            (42.1, "42.1"),
            (0.1, "0.1"),
            (-3.5, "-3.5"),
            (0.0, "0"),
            (-0.0, "-0"),
            (1e21, "1000000000000000000000"),
            (1e-7, "0.0000001"),
            (123456789.0, "123456789"),
            (0.30000000000000004, "0.30000000000000004"),
            (math.nan, "NaN"),
            (math.inf, "+Inf"),
            (-math.inf, "-Inf"),
        ],
    )
    def test_format(self, value: float, expected: str) -> None:
        assert convert.format_number(value) == expected

    @pytest.mark.parametrize("value", [42.1, 0.1, 1e-7, 2.5e300, 1 / 3, 123.456])
    def test_shortest_form_reads_back(self, value: float) -> None:
        assert float(convert.format_number(value)) == value


class TestScalarCoercions:
    @pytest.mark.parametrize(
        "stored, expected",
        [
            ("foo", "foo"),
            (42.0, "42"),
            (True, "true"),
            (False, "false"),
            (("a", "b"), "a,b"),
            ((0.1, 1.1), "0.1,1.1"),
            ((True, False), "true,false"),
            (None, ""),
        ],
    )
    def test_to_string(self, stored, expected: str) -> None:
        assert convert.to_string(stored) == expected

    @pytest.mark.parametrize(
        "stored, expected",
        [
            ("42", 0.0),
            (42.5, 42.5),
            (True, 1.0),
            (False, 0.0),
            (("1",), 0.0),
            ((2.5, 3.5), 2.5),
            ((True, False), 1.0),
            ((False, True), 0.0),
            (None, 0.0),
        ],
    )
    def test_to_float(self, stored, expected: float) -> None:
        assert convert.to_float(stored) == expected

    @pytest.mark.parametrize(
        "stored, expected",
        [
            (42.9, 42),
            (-42.9, -42),
            (True, 1),
            (False, 0),
            ("7", 0),
            (math.nan, 0),
            (math.inf, 0),
        ],
    )
    def test_to_int_truncates(self, stored, expected: int) -> None:
        assert convert.to_int(stored) == expected

    @pytest.mark.parametrize(
        "stored, expected",
        [
            ("true", False),
            (0.0, False),
            (-1.0, True),
            (True, True),
            ((0.0, 1.0), False),
            ((2.0,), True),
            ((False, True), False),
            (("true",), False),
            (None, False),
        ],
    )
    def test_to_bool(self, stored, expected: bool) -> None:
        assert convert.to_bool(stored) is expected

    @pytest.mark.parametrize(
        "stored, expected",
        [
            ("1h30m", HOUR + 30 * MINUTE),
            ("250ns", 250),
            ("soon", 0),
            (0.0, 0),
            (5.0, 0),
            (("5m",), 5 * MINUTE),
            (None, 0),
        ],
    )
    def test_to_duration(self, stored, expected: int) -> None:
        assert convert.to_duration(stored) == expected


class TestArrayCoercions:
    @pytest.mark.parametrize(
        "stored, expected",
        [
            (("foo", "bar"), ["foo", "bar"]),
            ((0.1, 1.0), ["0.1", "1"]),
            ((True, False), ["true", "false"]),
            ("foo", ["foo"]),
            (0.1, ["0.1"]),
            (True, ["true"]),
            (None, []),
        ],
    )
    def test_to_string_list(self, stored, expected: list) -> None:
        assert convert.to_string_list(stored) == expected

    @pytest.mark.parametrize(
        "stored, expected",
        [
            ((0.1, 1.1), [0.1, 1.1]),
            ((True, False), [1.0, 0.0]),
            (42.1, [42.1]),
            (True, [1.0]),
            (False, [0.0]),
            ("1", []),
            (("1", "2"), []),
        ],
    )
    def test_to_float_list(self, stored, expected: list) -> None:
        assert convert.to_float_list(stored) == expected

    def test_to_int_list(self) -> None:
        assert convert.to_int_list((0.2, 1.4, -2.6)) == [0, 1, -2]

    @pytest.mark.parametrize(
        "stored, expected",
        [
            ((True, False), [True, False]),
            ((0.0, 1.1), [False, True]),
            (True, [True]),
            (0.0, [False]),
            (42.1, [True]),
            ("true", []),
        ],
    )
    def test_to_bool_list(self, stored, expected: list) -> None:
        assert convert.to_bool_list(stored) == expected

    def test_to_duration_list_zero_for_bad_slot(self) -> None:
        assert convert.to_duration_list(("1s", "later", "2m")) == [
            SECOND,
            0,
            2 * MINUTE,
        ]

    def test_list_is_a_copy(self) -> None:
        stored = ("a", "b")
        result = convert.to_string_list(stored)
        result.append("c")
        assert stored == ("a", "b")

    def test_mixed_tuple_has_no_rule(self) -> None:
        assert convert.to_string_list((1.0, "a")) == []
        assert convert.to_float((1.0, "a")) == 0.0
