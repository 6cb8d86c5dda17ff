import io
from datetime import date, datetime
from decimal import Decimal

import numpy as np
import pytest

from vouch.messages import TextMessageWriter
from vouch.messages.utils import (
    clip_string,
    convert_whitespace,
    find_mismatch_position,
    format_indices,
    indices_from_flat_index,
    qualified_name,
    type_representation,
)


class Widget:
    def __str__(self) -> str:
        return "widget"


def _render(value) -> str:
    writer = TextMessageWriter()
    writer.write_value(value)
    return str(writer)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "null"),
        (True, "True"),
        (np.bool_(False), "False"),
        ("abc", '"abc"'),
        ("", "<empty string>"),
        (42, "42"),
        (1.5, "1.5d"),
        (2.0, "2.0d"),
        (np.float64(0.25), "0.25d"),
        (np.float32(1.5), "1.5f"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        (Decimal("1.25"), "1.25m"),
        (datetime(2020, 1, 2, 3, 4, 5, 6000), "2020-01-02 03:04:05.006"),
        (date(2020, 1, 2), "2020-01-02"),
        (int, "<int>"),
        (Widget, f"<{__name__}.Widget>"),
        (Widget(), "<widget>"),
        (b"ab", "<b'ab'>"),
    ],
)
def test_write_value_renders_by_type(value, expected):
    assert _render(value) == expected


class TestCollections:
    def test_list(self):
        assert _render([1, 2, 3]) == "< 1, 2, 3 >"

    def test_empty(self):
        assert _render([]) == "<empty>"

    def test_nested_strings(self):
        assert _render(["a", ["b"]]) == '< "a", < "b" > >'

    def test_mapping(self):
        assert _render({"a": 1, "b": None}) == '< "a": 1, "b": null >'

    def test_long_collection_is_elided(self):
        assert _render(list(range(12))) == "< 0, 1, 2, 3, 4, 5, 6, 7, 8, 9... >"

    def test_exactly_max_items_is_not_elided(self):
        assert _render(list(range(10))) == "< 0, 1, 2, 3, 4, 5, 6, 7, 8, 9 >"

    def test_window_with_start(self):
        writer = TextMessageWriter()
        writer.write_collection_elements([1, 2, 3, 4, 5, 6], start=2, max_items=3)
        assert str(writer) == "< 3, 4, 5... >"

    def test_window_works_on_generators(self):
        writer = TextMessageWriter()
        writer.write_collection_elements((x * 10 for x in range(3)), start=1, max_items=3)
        assert str(writer) == "< 10, 20 >"


class TestArrays:
    def test_one_dimensional(self):
        assert _render(np.array([1, 2, 3])) == "< 1, 2, 3 >"

    def test_two_dimensional(self):
        assert _render(np.array([[1, 2, 3], [4, 5, 6]])) == "< < 1, 2, 3 >, < 4, 5, 6 > >"

    def test_three_dimensional(self):
        array = np.arange(8).reshape(2, 2, 2)
        assert _render(array) == "< < < 0, 1 >, < 2, 3 > >, < < 4, 5 >, < 6, 7 > > >"

    def test_empty_array(self):
        assert _render(np.zeros((0, 3))) == "<empty>"

    def test_zero_dimensional(self):
        assert _render(np.array(7)) == "7"


class TestLowLevel:
    def test_connector_predicate_modifier(self):
        writer = TextMessageWriter()
        writer.write_predicate("greater than")
        writer.write_expected_value(5)
        writer.write_connector("or")
        writer.write_expected_value(1)
        writer.write_modifier("ignoring case")
        assert str(writer) == "greater than 5 or 1, ignoring case"

    def test_message_line_levels(self):
        writer = TextMessageWriter()
        writer.write_message_line("Hello {0}", "world")
        writer.write_message_line("Nested", level=2)
        writer.write_message_line(None)
        assert str(writer) == "  Hello world\n      Nested\n"

    def test_message_line_without_args_keeps_braces(self):
        writer = TextMessageWriter()
        writer.write_message_line("{literal}")
        assert str(writer) == "  {literal}\n"

    def test_display_differences_with_tolerance(self):
        writer = TextMessageWriter()
        writer.display_differences(1.0, 2.0, 0.1)
        assert str(writer) == "  Expected: 1.0d +/- 0.1d\n  But was:  2.0d\n"

    def test_writes_into_supplied_stream(self):
        stream = io.StringIO()
        writer = TextMessageWriter(stream)
        writer.write_value([1])
        assert stream.getvalue() == "< 1 >"


class TestStringDifferences:
    def test_caret_under_first_difference(self):
        writer = TextMessageWriter()
        writer.display_string_differences("Hello", "Hallo", 1, False)
        lines = str(writer).splitlines()
        assert lines == [
            '  Expected: "Hello"',
            '  But was:  "Hallo"',
            "  ------------^",
        ]
        assert lines[2].index("^") == 14
        assert lines[0][14] == "e"

    def test_ignore_case_modifier(self):
        writer = TextMessageWriter()
        writer.display_string_differences("abc", "ABD", 2, True)
        assert str(writer).splitlines()[0] == '  Expected: "abc", ignoring case'

    def test_whitespace_is_escaped(self):
        writer = TextMessageWriter()
        writer.display_string_differences("a\nb", "a\tb", 1, False)
        lines = str(writer).splitlines()
        assert lines[0] == '  Expected: "a\\nb"'
        assert lines[1] == '  But was:  "a\\tb"'
        assert lines[2].index("^") == lines[0].index("n")

    def test_long_strings_clipped_around_mismatch(self):
        expected = "a" * 75 + "b" * 75
        actual = "a" * 75 + "c" * 75
        writer = TextMessageWriter()
        writer.display_string_differences(expected, actual, 75, False)
        lines = str(writer).splitlines()

        assert all(len(line) <= writer.max_line_length for line in lines)
        assert lines[0].startswith('  Expected: "...')
        assert lines[0].endswith('..."')
        assert lines[2].index("^") == lines[0].index("b") == 46


class TestUtils:
    def test_clip_short_string_unchanged(self):
        assert clip_string("hello", 10, 0) == "hello"

    def test_clip_tail(self):
        assert clip_string("abcdefghijkl", 10, 0) == "abcdefg..."

    def test_clip_both_ends(self):
        s = "0123456789" * 3
        assert clip_string(s, 10, 20) == "..." + s[17:21] + "..."

    def test_clip_head_only_when_rest_fits(self):
        s = "0123456789abcd"
        assert clip_string(s, 10, 8) == "..." + s[5:]

    def test_convert_whitespace(self):
        assert convert_whitespace("a\\b\r\n\t") == "a\\\\b\\r\\n\\t"
        assert convert_whitespace(None) is None

    @pytest.mark.parametrize(
        "expected, actual, ignore_case, position",
        [
            ("abc", "abc", False, -1),
            ("abc", "abd", False, 2),
            ("abc", "abcd", False, 3),
            ("abcd", "ab", False, 2),
            ("ABC", "abc", True, -1),
        ],
    )
    def test_find_mismatch_position(self, expected, actual, ignore_case, position):
        assert find_mismatch_position(expected, actual, 0, ignore_case) == position

    def test_type_representation(self):
        assert type_representation([1]) == "<list>"
        assert type_representation(np.zeros((2, 3), dtype=np.int64)) == "<int64[2,3]>"

    def test_qualified_name(self):
        assert qualified_name(int) == "int"
        assert qualified_name(Widget) == f"{__name__}.Widget"

    def test_indices(self):
        array = np.zeros((2, 3))
        assert indices_from_flat_index(array, 4) == [1, 1]
        assert indices_from_flat_index([1, 2, 3], 2) == [2]
        assert format_indices([1, 1]) == "[1,1]"


def test_seven_element_array_renders_fully():
    assert _render(np.array([12, 27, 19, 32, 45, 99, 26])) == "< 12, 27, 19, 32, 45, 99, 26 >"
