"""Boolean combinators over two constraints."""

from dataclasses import dataclass
from typing import Any

from vouch.constraints._base import Constraint, ConstraintResult
from vouch.messages.writer import MessageWriter


@dataclass(frozen=True, eq=False)
class BinaryOperation(Constraint):
    left: Constraint
    right: Constraint

    connector = ""

    def describe_to(self, writer: MessageWriter) -> None:
        self.left.describe_to(writer)
        writer.write_connector(self.connector)
        self.right.describe_to(writer)


@dataclass(frozen=True, eq=False)
class And(BinaryOperation):
    """Succeeds when both children succeed.

    The right child is not evaluated when the left one fails; its slot in
    ``result.children`` is then ``None``.
    """

    connector = "and"

    def evaluate(self, actual: Any) -> ConstraintResult:
        left = self.left.evaluate(actual)
        right = self.right.evaluate(actual) if left.value else None
        passed = left.value and right is not None and right.value
        return ConstraintResult(actual=actual, value=passed, children=(left, right))


@dataclass(frozen=True, eq=False)
class Or(BinaryOperation):
    """Succeeds when either child succeeds, evaluating the right child only if needed."""

    connector = "or"

    def evaluate(self, actual: Any) -> ConstraintResult:
        left = self.left.evaluate(actual)
        right = None if left.value else self.right.evaluate(actual)
        passed = left.value or (right is not None and right.value)
        return ConstraintResult(actual=actual, value=passed, children=(left, right))
