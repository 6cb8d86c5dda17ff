"""Constraints for fixed conditions: emptiness, booleans, null and NaN."""

import math
from collections.abc import Sized
from dataclasses import dataclass
from typing import Any

import numpy as np

from vouch.constraints import numerics
from vouch.constraints._base import Constraint, ConstraintResult
from vouch.messages.writer import MessageWriter


@dataclass(frozen=True, eq=False)
class Empty(Constraint):
    """Succeeds for an empty string or an empty collection."""

    def evaluate(self, actual: Any) -> ConstraintResult:
        if isinstance(actual, np.ndarray):
            return self._result(actual, actual.size == 0)
        return self._result(actual, isinstance(actual, Sized) and len(actual) == 0)

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write("<empty>")


@dataclass(frozen=True, eq=False)
class IsTrue(Constraint):
    def evaluate(self, actual: Any) -> ConstraintResult:
        return self._result(actual, isinstance(actual, (bool, np.bool_)) and bool(actual))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_expected_value(True)


@dataclass(frozen=True, eq=False)
class IsFalse(Constraint):
    def evaluate(self, actual: Any) -> ConstraintResult:
        return self._result(actual, isinstance(actual, (bool, np.bool_)) and not bool(actual))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_expected_value(False)


@dataclass(frozen=True, eq=False)
class IsNull(Constraint):
    def evaluate(self, actual: Any) -> ConstraintResult:
        return self._result(actual, actual is None)

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_expected_value(None)


@dataclass(frozen=True, eq=False)
class IsNaN(Constraint):
    """Succeeds for a floating-point NaN; any other input fails."""

    def evaluate(self, actual: Any) -> ConstraintResult:
        return self._result(actual, numerics.is_floating_point(actual) and math.isnan(actual))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write("NaN")
