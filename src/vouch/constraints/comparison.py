"""Ordering constraints."""

from dataclasses import dataclass
from typing import Any, ClassVar

from vouch.constraints import numerics
from vouch.constraints._base import Constraint, ConstraintResult
from vouch.messages.writer import MessageWriter


@dataclass(frozen=True, eq=False)
class ComparisonConstraint(Constraint):
    """Base class for constraints that order the actual value against ``expected``.

    Subclasses set which orderings succeed and the predicate text. Passing
    ``None`` or a value that cannot be ordered against ``expected`` raises
    :class:`~vouch.errors.ContractViolationError` instead of failing.
    """

    expected: Any

    less_ok: ClassVar[bool] = False
    equal_ok: ClassVar[bool] = False
    greater_ok: ClassVar[bool] = False
    predicate: ClassVar[str] = ""

    def evaluate(self, actual: Any) -> ConstraintResult:
        order = numerics.compare(self.expected, actual)
        passed = (order < 0 and self.greater_ok) or (order == 0 and self.equal_ok) or (order > 0 and self.less_ok)
        return self._result(actual, passed)

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate(self.predicate)
        writer.write_expected_value(self.expected)


@dataclass(frozen=True, eq=False)
class GreaterThan(ComparisonConstraint):
    greater_ok: ClassVar[bool] = True
    predicate: ClassVar[str] = "greater than"


@dataclass(frozen=True, eq=False)
class GreaterThanOrEqual(ComparisonConstraint):
    equal_ok: ClassVar[bool] = True
    greater_ok: ClassVar[bool] = True
    predicate: ClassVar[str] = "greater than or equal to"


@dataclass(frozen=True, eq=False)
class LessThan(ComparisonConstraint):
    less_ok: ClassVar[bool] = True
    predicate: ClassVar[str] = "less than"


@dataclass(frozen=True, eq=False)
class LessThanOrEqual(ComparisonConstraint):
    less_ok: ClassVar[bool] = True
    equal_ok: ClassVar[bool] = True
    predicate: ClassVar[str] = "less than or equal to"


@dataclass(frozen=True, eq=False)
class Between(Constraint):
    """Succeeds when the actual value lies between ``low`` and ``high``.

    By default the range is half-open, ``low <= actual < high``. Values of a
    different runtime type than the bounds, or ``None``, fail rather than
    raise.
    """

    low: Any
    high: Any
    include_low: bool = True
    include_high: bool = False

    def evaluate(self, actual: Any) -> ConstraintResult:
        if actual is None:
            return self._result(actual, False)
        if type(actual) is not type(self.low) or type(actual) is not type(self.high):
            return self._result(actual, False)

        low_order = numerics.compare(self.low, actual)
        if low_order > 0 or (not self.include_low and low_order == 0):
            return self._result(actual, False)

        high_order = numerics.compare(self.high, actual)
        return self._result(actual, high_order > 0 or (self.include_high and high_order == 0))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate("between")
        writer.write_expected_value(self.low)
        writer.write_connector("and")
        writer.write_expected_value(self.high)
