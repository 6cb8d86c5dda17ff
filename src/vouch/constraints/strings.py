"""Constraints on string values.

Every string constraint fails (rather than raising) when the actual value is
not a ``str``.
"""

import re
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any

from vouch.constraints._base import Constraint, ConstraintResult
from vouch.messages.utils import clip_string
from vouch.messages.writer import MessageWriter


@dataclass(frozen=True, eq=False)
class StringConstraint(Constraint):
    """Shared shape of the string constraints: an expected text plus case folding.

    Subclasses implement ``_test``, which only ever receives a ``str``.
    """

    expected: str
    ignore_case: bool = False

    predicate = ""

    def evaluate(self, actual: Any) -> ConstraintResult:
        if not isinstance(actual, str):
            return self._result(actual, False)
        return self._result(actual, self._test(actual))

    @abstractmethod
    def _test(self, actual: str) -> bool:
        """Apply the string test to ``actual``."""

    def _folded(self, actual: str) -> tuple[str, str]:
        if self.ignore_case:
            return actual.lower(), self.expected.lower()
        return actual, self.expected

    def _expected_for_display(self, writer: MessageWriter) -> str:
        return self.expected

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate(self.predicate)
        writer.write_expected_value(self._expected_for_display(writer))
        if self.ignore_case:
            writer.write_modifier("ignoring case")


@dataclass(frozen=True, eq=False)
class Substring(StringConstraint):
    predicate = "String containing"

    def _test(self, actual: str) -> bool:
        actual, expected = self._folded(actual)
        return expected in actual


@dataclass(frozen=True, eq=False)
class StartsWith(StringConstraint):
    predicate = "String starting with"

    def _test(self, actual: str) -> bool:
        actual, expected = self._folded(actual)
        return actual.startswith(expected)

    def _expected_for_display(self, writer: MessageWriter) -> str:
        return clip_string(self.expected, writer.max_line_length - 40, 0)


@dataclass(frozen=True, eq=False)
class EndsWith(StringConstraint):
    predicate = "String ending with"

    def _test(self, actual: str) -> bool:
        actual, expected = self._folded(actual)
        return actual.endswith(expected)


@dataclass(frozen=True, eq=False)
class RegexMatch(StringConstraint):
    """Succeeds when ``expected`` (a regular expression) matches anywhere in the string.

    Case folding uses ``re.IGNORECASE``; the pattern itself is never lowered.
    """

    predicate = "String matching"

    def _test(self, actual: str) -> bool:
        flags = re.IGNORECASE if self.ignore_case else 0
        return re.search(self.expected, actual, flags) is not None
