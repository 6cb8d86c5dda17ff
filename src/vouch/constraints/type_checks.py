"""Constraints on the runtime type of a value."""

from dataclasses import dataclass
from typing import Any

from vouch.constraints._base import Constraint, ConstraintResult
from vouch.messages.writer import MessageWriter


@dataclass(frozen=True, eq=False)
class TypeConstraint(Constraint):
    """Base class for type constraints; failures show the actual value's type."""

    expected_type: type

    def write_actual_value_to(self, writer: MessageWriter, result: ConstraintResult) -> None:
        writer.write_actual_value(None if result.actual is None else type(result.actual))


@dataclass(frozen=True, eq=False)
class ExactType(TypeConstraint):
    def evaluate(self, actual: Any) -> ConstraintResult:
        return self._result(actual, actual is not None and type(actual) is self.expected_type)

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_expected_value(self.expected_type)


@dataclass(frozen=True, eq=False)
class InstanceOfType(TypeConstraint):
    def evaluate(self, actual: Any) -> ConstraintResult:
        return self._result(actual, actual is not None and isinstance(actual, self.expected_type))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate("instance of")
        writer.write_expected_value(self.expected_type)


@dataclass(frozen=True, eq=False)
class AssignableFrom(TypeConstraint):
    """Succeeds when ``expected_type`` is the actual value's type or one of its subclasses."""

    def evaluate(self, actual: Any) -> ConstraintResult:
        return self._result(actual, actual is not None and issubclass(self.expected_type, type(actual)))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate("Type assignable from")
        writer.write_expected_value(self.expected_type)
