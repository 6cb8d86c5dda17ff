"""Equality constraint with numeric, string, collection and stream support."""

from __future__ import annotations

import io
from collections.abc import Callable, Collection, Iterable, Mapping, Sequence, Set
from dataclasses import dataclass
from itertools import islice
from typing import Any

import numpy as np

from vouch.constraints import numerics
from vouch.constraints._base import Constraint, ConstraintResult
from vouch.messages.utils import find_mismatch_position, format_indices, indices_from_flat_index, type_representation
from vouch.messages.writer import MessageWriter


BUFFER_SIZE = 4096

MSG_STRINGS_SAME_LENGTH = "String lengths are both {0}. Strings differ at index {1}."
MSG_STRINGS_DIFFERENT_LENGTH = "Expected string length {0} but was {1}. Strings differ at index {2}."
MSG_STREAMS_SAME_LENGTH = "Stream lengths are both {0}. Streams differ at offset {1}."
MSG_STREAMS_DIFFERENT_LENGTH = "Expected Stream length {0} but was {1}."
MSG_COLLECTION_SAME_TYPE = "Expected and actual are both {0}"
MSG_COLLECTION_DIFFERENT_TYPE = "Expected is {0}, actual is {1}"
MSG_VALUES_DIFFER = "Values differ at index {0}"
MSG_VALUES_DIFFER_RESHAPED = "Values differ at expected index {0}, actual index {1}"
MSG_WITH_ELEMENTS = " with {0} elements"


def is_collection(obj: Any) -> bool:
    """Whether ``obj`` is compared and rendered element by element."""
    if isinstance(obj, np.ndarray):
        return obj.ndim > 0
    return isinstance(obj, Collection) and not isinstance(obj, (str, bytes, bytearray, Mapping))


def is_stream(obj: Any) -> bool:
    return isinstance(obj, io.IOBase)


def _elements(collection: Any) -> Iterable[Any]:
    return collection.flat if isinstance(collection, np.ndarray) else collection


def _count(collection: Any) -> int:
    return collection.size if isinstance(collection, np.ndarray) else len(collection)


def _value_at(collection: Any, index: int) -> Any:
    if isinstance(collection, np.ndarray):
        return collection.flat[index]
    if isinstance(collection, Sequence):
        return collection[index]
    return next(islice(collection, index, None), None)


def _stream_length(stream: Any) -> int:
    length = stream.seek(0, io.SEEK_END)
    stream.seek(0)
    return length


@dataclass(frozen=True, eq=False)
class Equal(Constraint):
    """Succeeds when the actual value equals ``expected``.

    Numbers compare by value across numeric types, strings optionally
    ignore case, collections compare element by element (deeply), numpy
    arrays also compare their shapes, and binary or text streams compare
    their content.

    Parameters
    ----------
    expected : Any
        The expected value.
    tolerance : numeric or None
        Allowed absolute difference for numeric comparisons.
    ignore_case : bool
        Compare strings case-insensitively.
    as_collection : bool
        Compare numpy arrays as flat collections, ignoring their shapes.
    comparer : callable or None
        ``comparer(expected, actual) -> int``; zero means equal. Used for
        scalar values in place of the built-in rules.

    Examples
    --------
    >>> Equal(5).matches(5.0)
    True
    >>> Equal(1.0, tolerance=0.1).matches(1.05)
    True
    >>> Equal("Hello", ignore_case=True).matches("HELLO")
    True
    """

    expected: Any
    tolerance: Any = None
    ignore_case: bool = False
    as_collection: bool = False
    comparer: Callable[[Any, Any], int] | None = None

    def evaluate(self, actual: Any) -> ConstraintResult:
        failure_points: list[int] = []
        passed = self._objects_equal(self.expected, actual, failure_points)
        return self._result(actual, passed, failure_points=failure_points)

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_expected_value(self.expected)
        if self.tolerance is not None:
            writer.write_connector("+/-")
            writer.write_expected_value(self.tolerance)
        if self.ignore_case:
            writer.write_modifier("ignoring case")

    def describe_failure_to(self, writer: MessageWriter, result: ConstraintResult) -> None:
        failure_points = result.details.get("failure_points", [])
        self._display_differences(writer, self.expected, result.actual, failure_points, 0)

    # Equality

    def _objects_equal(self, expected: Any, actual: Any, failure_points: list[int]) -> bool:
        if expected is None and actual is None:
            return True
        if expected is None or actual is None:
            return False

        if isinstance(expected, (bool, np.bool_)) or isinstance(actual, (bool, np.bool_)):
            return (
                isinstance(expected, (bool, np.bool_))
                and isinstance(actual, (bool, np.bool_))
                and bool(expected) == bool(actual)
            )

        if isinstance(expected, np.ndarray) and isinstance(actual, np.ndarray) and not self.as_collection:
            return self._arrays_equal(expected, actual, failure_points)

        if isinstance(expected, Set) and isinstance(actual, Set):
            return expected == actual

        if is_collection(expected) and is_collection(actual):
            return self._collections_equal(expected, actual, failure_points)

        if isinstance(expected, Mapping) and isinstance(actual, Mapping):
            return self._mappings_equal(expected, actual)

        if is_stream(expected) and is_stream(actual):
            return self._streams_equal(expected, actual, failure_points)

        if self.comparer is not None:
            return self.comparer(expected, actual) == 0

        if numerics.is_numeric(expected) and numerics.is_numeric(actual):
            return numerics.are_equal(expected, actual, self.tolerance)

        if isinstance(expected, str) and isinstance(actual, str):
            if self.ignore_case:
                return expected.lower() == actual.lower()
            return expected == actual

        outcome = expected == actual
        if isinstance(outcome, np.ndarray):
            return False
        return bool(outcome)

    def _arrays_equal(self, expected: np.ndarray, actual: np.ndarray, failure_points: list[int]) -> bool:
        if expected.ndim != actual.ndim:
            return False
        if expected.shape[1:] != actual.shape[1:]:
            return False
        return self._collections_equal(expected, actual, failure_points)

    def _collections_equal(self, expected: Any, actual: Any, failure_points: list[int]) -> bool:
        count = 0
        for expected_item, actual_item in zip(_elements(expected), _elements(actual)):
            if not self._objects_equal(expected_item, actual_item, failure_points):
                break
            count += 1

        if count == _count(expected) and count == _count(actual):
            return True

        failure_points.insert(0, count)
        return False

    def _mappings_equal(self, expected: Mapping, actual: Mapping) -> bool:
        if expected.keys() != actual.keys():
            return False
        return all(self._objects_equal(expected[key], actual[key], []) for key in expected)

    def _streams_equal(self, expected: Any, actual: Any, failure_points: list[int]) -> bool:
        if _stream_length(expected) != _stream_length(actual):
            return False

        offset = 0
        while True:
            expected_chunk = expected.read(BUFFER_SIZE)
            actual_chunk = actual.read(BUFFER_SIZE)
            if not expected_chunk and not actual_chunk:
                return True
            if expected_chunk != actual_chunk:
                for position, (left, right) in enumerate(zip(expected_chunk, actual_chunk)):
                    if left != right:
                        failure_points.insert(0, offset + position)
                        return False
                failure_points.insert(0, offset + min(len(expected_chunk), len(actual_chunk)))
                return False
            offset += len(expected_chunk)

    # Failure rendering

    def _display_differences(
        self,
        writer: MessageWriter,
        expected: Any,
        actual: Any,
        failure_points: list[int],
        depth: int,
    ) -> None:
        if isinstance(expected, str) and isinstance(actual, str):
            self._display_string_differences(writer, expected, actual)
        elif is_collection(expected) and is_collection(actual):
            self._display_collection_differences(writer, expected, actual, failure_points, depth)
        elif is_stream(expected) and is_stream(actual):
            self._display_stream_differences(writer, expected, actual, failure_points, depth)
        else:
            writer.display_differences(expected, actual, self.tolerance)

    def _display_string_differences(self, writer: MessageWriter, expected: str, actual: str) -> None:
        mismatch = find_mismatch_position(expected, actual, 0, self.ignore_case)

        if len(expected) == len(actual):
            writer.write_message_line(MSG_STRINGS_SAME_LENGTH, len(expected), mismatch)
        else:
            writer.write_message_line(MSG_STRINGS_DIFFERENT_LENGTH, len(expected), len(actual), mismatch)

        writer.display_string_differences(expected, actual, mismatch, self.ignore_case)

    def _display_stream_differences(
        self,
        writer: MessageWriter,
        expected: Any,
        actual: Any,
        failure_points: list[int],
        depth: int,
    ) -> None:
        expected_length = _stream_length(expected)
        actual_length = _stream_length(actual)
        if expected_length == actual_length and len(failure_points) > depth:
            writer.write_message_line(MSG_STREAMS_SAME_LENGTH, expected_length, failure_points[depth])
        else:
            writer.write_message_line(MSG_STREAMS_DIFFERENT_LENGTH, expected_length, actual_length)

    def _display_collection_differences(
        self,
        writer: MessageWriter,
        expected: Any,
        actual: Any,
        failure_points: list[int],
        depth: int,
    ) -> None:
        failure_point = failure_points[depth] if len(failure_points) > depth else -1

        self._display_types_and_sizes(writer, expected, actual, depth)

        if failure_point < 0:
            writer.display_differences(expected, actual)
            return

        self._display_failure_point(writer, expected, actual, failure_point, depth)
        expected_count = _count(expected)
        actual_count = _count(actual)
        if failure_point < expected_count and failure_point < actual_count:
            self._display_differences(
                writer,
                _value_at(expected, failure_point),
                _value_at(actual, failure_point),
                failure_points,
                depth + 1,
            )
        elif expected_count < actual_count:
            writer.write("  Extra:    ")
            writer.write_collection_elements(_elements(actual), failure_point, 3)
            writer.write_line()
        else:
            writer.write("  Missing:  ")
            writer.write_collection_elements(_elements(expected), failure_point, 3)
            writer.write_line()

    @staticmethod
    def _display_types_and_sizes(writer: MessageWriter, expected: Any, actual: Any, depth: int) -> None:
        expected_repr = type_representation(expected)
        if not isinstance(expected, np.ndarray):
            expected_repr += MSG_WITH_ELEMENTS.format(_count(expected))

        actual_repr = type_representation(actual)
        if not isinstance(actual, np.ndarray):
            actual_repr += MSG_WITH_ELEMENTS.format(_count(actual))

        if expected_repr == actual_repr:
            writer.write_message_line(MSG_COLLECTION_SAME_TYPE, expected_repr, level=depth)
        else:
            writer.write_message_line(MSG_COLLECTION_DIFFERENT_TYPE, expected_repr, actual_repr, level=depth)

    @staticmethod
    def _display_failure_point(writer: MessageWriter, expected: Any, actual: Any, failure_point: int, depth: int) -> None:
        expected_rank = expected.ndim if isinstance(expected, np.ndarray) else 1
        actual_rank = actual.ndim if isinstance(actual, np.ndarray) else 1

        use_one_index = expected_rank == actual_rank
        if use_one_index and isinstance(expected, np.ndarray) and isinstance(actual, np.ndarray):
            use_one_index = expected.shape[1:] == actual.shape[1:]

        expected_indices = indices_from_flat_index(expected, failure_point)
        if use_one_index:
            writer.write_message_line(MSG_VALUES_DIFFER, format_indices(expected_indices), level=depth)
        else:
            actual_indices = indices_from_flat_index(actual, failure_point)
            writer.write_message_line(
                MSG_VALUES_DIFFER_RESHAPED,
                format_indices(expected_indices),
                format_indices(actual_indices),
                level=depth,
            )
