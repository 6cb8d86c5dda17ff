"""Reference identity constraint."""

from dataclasses import dataclass
from typing import Any

from vouch.constraints._base import Constraint, ConstraintResult
from vouch.messages.writer import MessageWriter


@dataclass(frozen=True, eq=False)
class SameAs(Constraint):
    """Succeeds only when the actual value *is* ``expected`` (identity, not equality)."""

    expected: Any

    def evaluate(self, actual: Any) -> ConstraintResult:
        return self._result(actual, actual is self.expected)

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate("same as")
        writer.write_expected_value(self.expected)
