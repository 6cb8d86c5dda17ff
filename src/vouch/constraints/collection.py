"""Constraints on collections and other iterables."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np

from vouch.constraints._base import Constraint, ConstraintResult
from vouch.constraints.equal import Equal
from vouch.constraints.strings import Substring
from vouch.errors import ContractViolationError
from vouch.messages.writer import MessageWriter


MSG_VALUE_MUST_BE_COLLECTION = "The actual value must be a collection"
MSG_EXPECTED_MUST_BE_STRING = "The expected value must be a string when the actual value is a string"


def as_items(actual: Any) -> list[Any]:
    """Materialize an iterable actual value into a list of its elements.

    Strings and mappings are rejected: they are iterable but are not treated
    as collections of items.

    Raises
    ------
    ContractViolationError
        If ``actual`` is not an iterable collection.
    """
    if isinstance(actual, np.ndarray):
        return list(actual.flat)
    if isinstance(actual, (str, bytes, bytearray)) or not isinstance(actual, Iterable):
        raise ContractViolationError(MSG_VALUE_MUST_BE_COLLECTION, "actual")
    return list(actual)


class _Tally:
    """Multiset of items compared with ``Equal`` semantics, so unhashable items work."""

    def __init__(self, items: Iterable[Any]):
        self._entries: list[list[Any]] = []
        for item in items:
            self._add(item)

    def _find(self, item: Any) -> list[Any] | None:
        matcher = Equal(item)
        for entry in self._entries:
            if matcher.matches(entry[0]):
                return entry
        return None

    def _add(self, item: Any) -> None:
        entry = self._find(item)
        if entry is None:
            self._entries.append([item, 1])
        else:
            entry[1] += 1

    def try_remove(self, items: Iterable[Any]) -> bool:
        for item in items:
            entry = self._find(item)
            if entry is None or entry[1] == 0:
                return False
            entry[1] -= 1
        return True

    def all_counts_equal_to(self, count: int) -> bool:
        return all(entry[1] == count for entry in self._entries)


@dataclass(frozen=True, eq=False)
class UniqueItems(Constraint):
    def evaluate(self, actual: Any) -> ConstraintResult:
        items = as_items(actual)
        return self._result(actual, _Tally(items).all_counts_equal_to(1))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write("all items unique")


@dataclass(frozen=True, eq=False)
class CollectionContains(Constraint):
    """Succeeds when any element of the iterable equals ``expected``.

    Works on any iterable, including generators; iteration stops at the
    first matching element.
    """

    expected: Any

    def evaluate(self, actual: Any) -> ConstraintResult:
        if isinstance(actual, np.ndarray):
            actual_items: Iterable[Any] = actual.flat
        elif isinstance(actual, (str, bytes, bytearray)) or not isinstance(actual, Iterable):
            raise ContractViolationError(MSG_VALUE_MUST_BE_COLLECTION, "actual")
        else:
            actual_items = actual

        matcher = Equal(self.expected)
        return self._result(actual, any(matcher.matches(item) for item in actual_items))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate("collection containing")
        writer.write_expected_value(self.expected)


@dataclass(frozen=True, eq=False)
class CollectionEquivalent(Constraint):
    """Succeeds when the actual collection holds the same items as ``expected``, in any order."""

    expected: Iterable[Any]

    def evaluate(self, actual: Any) -> ConstraintResult:
        items = as_items(actual)
        tally = _Tally(self.expected)
        return self._result(actual, tally.try_remove(items) and tally.all_counts_equal_to(0))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate("equivalent to")
        writer.write_expected_value(self.expected)


@dataclass(frozen=True, eq=False)
class CollectionSubset(Constraint):
    """Succeeds when every item of the actual collection can be taken from ``expected``."""

    expected: Iterable[Any]

    def evaluate(self, actual: Any) -> ConstraintResult:
        items = as_items(actual)
        return self._result(actual, _Tally(self.expected).try_remove(items))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate("subset of")
        writer.write_expected_value(self.expected)


@dataclass(frozen=True, eq=False)
class Contains(Constraint):
    """Substring test for strings, membership test for everything else."""

    expected: Any
    ignore_case: bool = False

    def _delegate(self, actual: Any) -> Constraint:
        if isinstance(actual, str):
            if not isinstance(self.expected, str):
                raise ContractViolationError(MSG_EXPECTED_MUST_BE_STRING, "expected")
            return Substring(self.expected, ignore_case=self.ignore_case)
        return CollectionContains(self.expected)

    def evaluate(self, actual: Any) -> ConstraintResult:
        delegate = self._delegate(actual)
        inner = delegate.evaluate(actual)
        return ConstraintResult(actual=actual, value=inner.value, children=(inner,))

    def describe_to(self, writer: MessageWriter) -> None:
        if isinstance(self.expected, str):
            Substring(self.expected, ignore_case=self.ignore_case).describe_to(writer)
        else:
            CollectionContains(self.expected).describe_to(writer)

    def describe_failure_to(self, writer: MessageWriter, result: ConstraintResult) -> None:
        writer.display_constraint_differences(self._delegate(result.actual), result)
