import io
from collections import deque

import numpy as np
import pytest

from vouch.constraints import Equal


def _failure(expected, actual, **kwargs) -> str:
    constraint = Equal(expected, **kwargs)
    result = constraint.evaluate(actual)
    assert not result
    return constraint.failure_message(result)


class TestEquality:
    @pytest.mark.parametrize(
        "expected, actual",
        [
            (None, None),
            (True, True),
            ([1, 2, 3], [1, 2, 3]),
            ([1, 2, 3], (1, 2, 3)),
            ([1, 2, 3], deque([1, 2, 3])),
            ([1, [2, 3]], [1.0, [2, 3.0]]),
            ({1, 2}, {2, 1}),
            ({"a": [1, 2]}, {"a": [1, 2.0]}),
            (np.array([[1, 2], [3, 4]]), np.array([[1, 2], [3, 4]])),
            (np.array([1, 2, 3]), [1, 2, 3]),
            (float("nan"), float("nan")),
            (b"abc", b"abc"),
        ],
    )
    def test_equal(self, expected, actual):
        assert Equal(expected).matches(actual)

    @pytest.mark.parametrize(
        "expected, actual",
        [
            (None, 0),
            (0, None),
            (1, True),
            (False, 0),
            ([1, 2], [2, 1]),
            ([1, 2], [1, 2, 3]),
            ({"a": 1}, {"b": 1}),
            ({"a": 1}, {"a": 2}),
            (np.array([[1, 2], [3, 4]]), np.array([1, 2, 3, 4])),
            (np.array([[1, 2], [3, 4]]), np.array([[1, 2, 3, 4]])),
        ],
    )
    def test_not_equal(self, expected, actual):
        assert not Equal(expected).matches(actual)

    def test_as_collection_ignores_shape(self):
        assert Equal(np.array([[1, 2], [3, 4]]), as_collection=True).matches(np.array([1, 2, 3, 4]))

    def test_arrays_with_different_first_extent(self):
        assert not Equal(np.array([[1, 2], [3, 4]])).matches(np.array([[1, 2]]))

    def test_comparer(self):
        by_length = Equal("abc", comparer=lambda expected, actual: len(expected) - len(actual))
        assert by_length.matches("xyz")
        assert not by_length.matches("xy")

    def test_streams(self):
        assert Equal(io.BytesIO(b"abcd")).matches(io.BytesIO(b"abcd"))
        assert not Equal(io.BytesIO(b"abcd")).matches(io.BytesIO(b"abxd"))
        assert not Equal(io.BytesIO(b"abcd")).matches(io.BytesIO(b"abc"))

    def test_tolerance_on_collections(self):
        assert Equal([1.0, 2.0], tolerance=0.1).matches([1.05, 1.95])

    def test_ignore_case_on_collections(self):
        assert Equal(["Hello", "World"], ignore_case=True).matches(["HELLO", "world"])

    def test_failure_points_outermost_first(self):
        result = Equal([[1, 2], [3, 4]]).evaluate([[1, 2], [3, 5]])
        assert result.details["failure_points"] == [1, 1]


class TestStringMessages:
    def test_same_length(self):
        assert _failure("Hello", "Hallo") == (
            "  String lengths are both 5. Strings differ at index 1.\n"
            '  Expected: "Hello"\n'
            '  But was:  "Hallo"\n'
            "  ------------^\n"
        )

    def test_different_length(self):
        assert _failure("abc", "abcd") == (
            "  Expected string length 3 but was 4. Strings differ at index 3.\n"
            '  Expected: "abc"\n'
            '  But was:  "abcd"\n'
            "  --------------^\n"
        )

    def test_ignore_case(self):
        assert _failure("Hello", "HALLO", ignore_case=True) == (
            "  String lengths are both 5. Strings differ at index 1.\n"
            '  Expected: "Hello", ignoring case\n'
            '  But was:  "HALLO"\n'
            "  ------------^\n"
        )

    def test_long_strings_fit_the_line(self):
        message = _failure("a" * 75 + "b" * 75, "a" * 75 + "c" * 75)
        lines = message.splitlines()
        assert lines[0] == "  String lengths are both 150. Strings differ at index 75."
        assert all(len(line) <= 78 for line in lines)
        assert lines[3].index("^") == lines[1].index("b")


class TestCollectionMessages:
    def test_same_length(self):
        assert _failure([1, 2, 3], [1, 2, 4]) == (
            "  Expected and actual are both <list> with 3 elements\n"
            "  Values differ at index [2]\n"
            "  Expected: 3\n"
            "  But was:  4\n"
        )

    def test_different_types(self):
        assert _failure([1, 2, 3], (1, 2, 4)) == (
            "  Expected is <list> with 3 elements, actual is <tuple> with 3 elements\n"
            "  Values differ at index [2]\n"
            "  Expected: 3\n"
            "  But was:  4\n"
        )

    def test_extra_items(self):
        assert _failure([1, 2, 3], [1, 2, 3, 4, 5]) == (
            "  Expected is <list> with 3 elements, actual is <list> with 5 elements\n"
            "  Values differ at index [3]\n"
            "  Extra:    < 4, 5 >\n"
        )

    def test_missing_items_show_at_most_three(self):
        assert _failure([1, 2, 3, 4, 5, 6], [1, 2]) == (
            "  Expected is <list> with 6 elements, actual is <list> with 2 elements\n"
            "  Values differ at index [2]\n"
            "  Missing:  < 3, 4, 5... >\n"
        )

    def test_nested(self):
        assert _failure([[1, 2], [3, 4]], [[1, 2], [3, 5]]) == (
            "  Expected and actual are both <list> with 2 elements\n"
            "  Values differ at index [1]\n"
            "    Expected and actual are both <list> with 2 elements\n"
            "    Values differ at index [1]\n"
            "  Expected: 4\n"
            "  But was:  5\n"
        )

    def test_nested_strings(self):
        assert _failure(["abc"], ["abd"]) == (
            "  Expected and actual are both <list> with 1 elements\n"
            "  Values differ at index [0]\n"
            "  String lengths are both 3. Strings differ at index 2.\n"
            '  Expected: "abc"\n'
            '  But was:  "abd"\n'
            "  -------------^\n"
        )

    def test_collection_against_scalar(self):
        assert _failure([1], 1) == "  Expected: < 1 >\n  But was:  1\n"


class TestArrayMessages:
    def test_same_shape(self):
        expected = np.array([[1, 2], [3, 4]], dtype=np.int64)
        actual = np.array([[1, 2], [3, 5]], dtype=np.int64)
        assert _failure(expected, actual) == (
            "  Expected and actual are both <int64[2,2]>\n"
            "  Values differ at index [1,1]\n"
            "  Expected: 4\n"
            "  But was:  5\n"
        )

    def test_different_shape(self):
        expected = np.array([[1, 2], [3, 4]], dtype=np.int64)
        actual = np.array([1, 2, 3, 5], dtype=np.int64)
        assert _failure(expected, actual, as_collection=True) == (
            "  Expected is <int64[2,2]>, actual is <int64[4]>\n"
            "  Values differ at expected index [1,1], actual index [3]\n"
            "  Expected: 4\n"
            "  But was:  5\n"
        )

    def test_rank_mismatch_without_failure_point(self):
        expected = np.array([[1, 2], [3, 4]], dtype=np.int64)
        actual = np.array([1, 2, 3, 4], dtype=np.int64)
        assert _failure(expected, actual) == (
            "  Expected is <int64[2,2]>, actual is <int64[4]>\n"
            "  Expected: < < 1, 2 >, < 3, 4 > >\n"
            "  But was:  < 1, 2, 3, 4 >\n"
        )


class TestStreamMessages:
    def test_same_length(self):
        assert _failure(io.BytesIO(b"abcd"), io.BytesIO(b"abxd")) == (
            "  Stream lengths are both 4. Streams differ at offset 2.\n"
        )

    def test_different_length(self):
        assert _failure(io.BytesIO(b"abcd"), io.BytesIO(b"abc")) == "  Expected Stream length 4 but was 3.\n"


class TestScalarMessages:
    def test_numbers(self):
        assert _failure(5, 4) == "  Expected: 5\n  But was:  4\n"

    def test_tolerance(self):
        assert _failure(1.0, 2.0, tolerance=0.1) == "  Expected: 1.0d +/- 0.1d\n  But was:  2.0d\n"

    def test_null(self):
        assert _failure(None, "x") == '  Expected: null\n  But was:  "x"\n'


def test_single_interior_difference_in_long_strings():
    expected = "".join(chr(ord("a") + i % 26) for i in range(150))
    actual = expected[:100] + "#" + expected[101:]
    lines = _failure(expected, actual).splitlines()
    expected_line, actual_line, caret_line = lines[1:4]

    assert all(len(line) <= 78 for line in lines)
    first_difference = next(i for i, (e, a) in enumerate(zip(expected_line, actual_line)) if e != a and i > 12)
    assert actual_line[first_difference] == "#"
    assert caret_line.index("^") == first_difference
