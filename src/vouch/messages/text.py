"""Text rendering of constraint failures.

``TextMessageWriter`` produces the standard failure block::

      Expected: "hello"
      But was:  "hallo"
      -------------^

Values are rendered by runtime type, long strings are clipped around the
first mismatch and collections are elided after a fixed number of items.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Collection, Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from numbers import Number
from typing import TYPE_CHECKING, Any

import numpy as np

from vouch.messages.utils import clip_string, convert_whitespace, find_mismatch_position, qualified_name
from vouch.messages.writer import MessageWriter


if TYPE_CHECKING:
    from vouch.constraints._base import Constraint, ConstraintResult


MAX_LINE_LENGTH = 78
DEFAULT_MAX_ITEMS = 10

PFX_EXPECTED = "  Expected: "
PFX_ACTUAL = "  But was:  "
PREFIX_LENGTH = len(PFX_EXPECTED)

FMT_NULL = "null"
FMT_EMPTY_COLLECTION = "<empty>"
FMT_EMPTY_STRING = "<empty string>"
FMT_DATETIME = "%Y-%m-%d %H:%M:%S"
FMT_DATE = "%Y-%m-%d"

_END = object()


class TextMessageWriter(MessageWriter):
    """Writes constraint descriptions and failure messages as plain text."""

    @property
    def max_line_length(self) -> int:
        return MAX_LINE_LENGTH

    # High level

    def write_message_line(self, message: str | None, *args: Any, level: int = 0) -> None:
        if message is None:
            return
        if args:
            message = message.format(*args)
        self.write("  " * (level + 1))
        self.write_line(message)

    def display_constraint_differences(self, constraint: Constraint, result: ConstraintResult) -> None:
        self.write(PFX_EXPECTED)
        constraint.describe_to(self)
        self.write_line()
        self.write(PFX_ACTUAL)
        constraint.write_actual_value_to(self, result)
        self.write_line()

    def display_differences(self, expected: Any, actual: Any, tolerance: Any = None) -> None:
        self.write(PFX_EXPECTED)
        self.write_expected_value(expected)
        if tolerance is not None:
            self.write_connector("+/-")
            self.write_expected_value(tolerance)
        self.write_line()
        self._write_actual_line(actual)

    def display_string_differences(self, expected: str, actual: str, mismatch: int, ignore_case: bool) -> None:
        # Widest string that fits after the prefix and the two quotes
        max_string_length = MAX_LINE_LENGTH - PREFIX_LENGTH - 2

        expected = convert_whitespace(clip_string(expected, max_string_length, mismatch))
        actual = convert_whitespace(clip_string(actual, max_string_length, mismatch))

        # Clipping and escaping move the mismatch
        mismatch = find_mismatch_position(expected, actual, 0, ignore_case)

        self.write(PFX_EXPECTED)
        self.write_expected_value(expected)
        if ignore_case:
            self.write_modifier("ignoring case")
        self.write_line()
        self._write_actual_line(actual)
        if mismatch >= 0:
            self._write_caret_line(mismatch)

    # Low level

    def write_connector(self, connector: str) -> None:
        self.write(f" {connector} ")

    def write_predicate(self, predicate: str) -> None:
        self.write(f"{predicate} ")

    def write_modifier(self, modifier: str) -> None:
        self.write(f", {modifier}")

    def write_expected_value(self, expected: Any) -> None:
        self.write_value(expected)

    def write_actual_value(self, actual: Any) -> None:
        self.write_value(actual)

    def write_value(self, value: Any) -> None:
        if value is None:
            self.write(FMT_NULL)
        elif isinstance(value, (bool, np.bool_)):
            self.write(str(bool(value)))
        elif isinstance(value, np.ndarray):
            self._write_array(value)
        elif isinstance(value, str):
            self._write_string(value)
        elif isinstance(value, (bytes, bytearray)):
            self.write(f"<{value!r}>")
        elif isinstance(value, Mapping):
            self._write_elements(value.items(), 0, DEFAULT_MAX_ITEMS, self._write_mapping_item)
        elif isinstance(value, Collection):
            self.write_collection_elements(value, 0, DEFAULT_MAX_ITEMS)
        elif isinstance(value, type):
            self.write(f"<{qualified_name(value)}>")
        elif isinstance(value, np.floating) and not isinstance(value, float):
            self._write_float(value, str(value), "f")
        elif isinstance(value, float):
            self._write_float(value, repr(float(value)), "d")
        elif isinstance(value, Decimal):
            self.write(f"{value}m")
        elif isinstance(value, datetime):
            self.write(value.strftime(FMT_DATETIME) + f".{value.microsecond // 1000:03d}")
        elif isinstance(value, date):
            self.write(value.strftime(FMT_DATE))
        elif isinstance(value, Number):
            self.write(str(value))
        else:
            self.write(f"<{value}>")

    def write_collection_elements(self, collection: Iterable[Any], start: int = 0, max_items: int = DEFAULT_MAX_ITEMS) -> None:
        """Write up to ``max_items`` elements of ``collection`` beginning at ``start``.

        An ellipsis is written before the closing bracket when elements remain
        past the shown window.
        """
        self._write_elements(collection, start, max_items, self.write_value)

    # Helpers

    def _write_actual_line(self, actual: Any) -> None:
        self.write(PFX_ACTUAL)
        self.write_actual_value(actual)
        self.write_line()

    def _write_caret_line(self, mismatch: int) -> None:
        # Two leading blanks, then dashes up to the opening quote and the mismatch
        self.write_line("  " + "-" * (PREFIX_LENGTH + mismatch - 1) + "^")

    def _write_elements(
        self,
        items: Iterable[Any],
        start: int,
        max_items: int,
        write_item: Callable[[Any], None],
    ) -> None:
        iterator = iter(items)
        first = next(iterator, _END)
        if first is _END:
            self.write(FMT_EMPTY_COLLECTION)
            return

        self.write("< ")
        count = 0
        index = 0
        truncated = False
        pending = first
        while pending is not _END:
            if index >= start:
                if count >= max_items:
                    truncated = True
                    break
                if count > 0:
                    self.write(", ")
                write_item(pending)
                count += 1
            index += 1
            pending = next(iterator, _END)

        if truncated:
            self.write("...")
        self.write(" >")

    def _write_mapping_item(self, item: tuple[Any, Any]) -> None:
        key, value = item
        self.write_value(key)
        self.write(": ")
        self.write_value(value)

    def _write_array(self, array: np.ndarray) -> None:
        if array.ndim == 0:
            self.write_value(array.item())
            return
        if array.size == 0:
            self.write(FMT_EMPTY_COLLECTION)
            return

        # Row-major products of the extents: a bracket opens or closes
        # whenever the flat index crosses one of these strides.
        rank = array.ndim
        products = [0] * rank
        product = 1
        for r in range(rank - 1, -1, -1):
            product *= array.shape[r]
            products[r] = product

        count = 0
        for element in array.flat:
            if count > 0:
                self.write(", ")

            start_segment = False
            for r in range(rank):
                start_segment = start_segment or count % products[r] == 0
                if start_segment:
                    self.write("< ")

            self.write_value(element)
            count += 1

            next_segment = False
            for r in range(rank):
                next_segment = next_segment or count % products[r] == 0
                if next_segment:
                    self.write(" >")

    def _write_string(self, s: str) -> None:
        if not s:
            self.write(FMT_EMPTY_STRING)
        else:
            self.write(f'"{s}"')

    def _write_float(self, value: Any, text: str, suffix: str) -> None:
        number = float(value)
        if math.isnan(number):
            self.write("NaN")
        elif math.isinf(number):
            self.write("Infinity" if number > 0 else "-Infinity")
        elif "." in text or "e" in text:
            self.write(text + suffix)
        else:
            self.write(text + ".0" + suffix)
