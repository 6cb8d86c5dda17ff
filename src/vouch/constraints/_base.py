"""Base constraint classes and result types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from vouch.messages.text import TextMessageWriter
from vouch.messages.writer import MessageWriter


class _Unset:
    """Placeholder for a value that was never captured."""

    def __repr__(self) -> str:
        return "UNSET"

    __str__ = __repr__


UNSET = _Unset()


class ConstraintResult(BaseModel):
    """Outcome of applying a constraint to a single value.

    Every evaluation returns a fresh result that carries the value it was
    given, so describing a failure never depends on state kept inside the
    constraint.

    Attributes
    ----------
    actual
        The value the constraint was evaluated against. ``UNSET`` for a child
        that was skipped by short-circuit evaluation.
    value
        Boolean outcome of the evaluation.
    children
        Results of child constraints, positionally matching the children of a
        combinator. ``None`` marks a child that was not evaluated.
    details
        Constraint-specific data captured during evaluation (failure points,
        property values...), used when rendering the failure.

    Notes
    -----
    ``bool(result)`` is equivalent to ``result.value``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    actual: Any = UNSET
    value: bool
    children: tuple[ConstraintResult | None, ...] = ()
    details: dict[str, Any] = Field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.value


class Constraint(ABC):
    """Base class for composable predicates.

    Subclasses implement ``evaluate`` and ``describe_to``. Concrete
    constraints are frozen dataclasses: their configuration is fixed at
    construction and evaluation never mutates them, so one instance can be
    shared between trees and threads.

    Constraints compose with ``&`` (``And``), ``|`` (``Or``) and ``~``
    (``Not``).
    """

    @abstractmethod
    def evaluate(self, actual: Any) -> ConstraintResult:
        """Apply the constraint to ``actual``.

        Parameters
        ----------
        actual : Any
            The value under test.

        Returns
        -------
        ConstraintResult
            Result carrying the outcome and the captured value.

        Raises
        ------
        ContractViolationError
            If the constraint cannot be applied to this kind of value.
        """

    @abstractmethod
    def describe_to(self, writer: MessageWriter) -> None:
        """Write a description of what makes this constraint succeed."""

    def matches(self, actual: Any) -> bool:
        return self.evaluate(actual).value

    @property
    def description(self) -> str:
        writer = TextMessageWriter()
        self.describe_to(writer)
        return str(writer)

    def write_actual_value_to(self, writer: MessageWriter, result: ConstraintResult) -> None:
        """Write the actual value captured in ``result``."""
        writer.write_actual_value(result.actual)

    def describe_failure_to(self, writer: MessageWriter, result: ConstraintResult) -> None:
        """Write the expected/actual block for a failed evaluation."""
        writer.display_constraint_differences(self, result)

    def failure_message(self, result: ConstraintResult) -> str:
        """Render ``describe_failure_to`` into a string."""
        writer = TextMessageWriter()
        self.describe_failure_to(writer, result)
        return str(writer)

    def _result(self, actual: Any, value: bool, **details: Any) -> ConstraintResult:
        return ConstraintResult(actual=actual, value=bool(value), details=details)

    def __and__(self, other: Constraint) -> Constraint:
        from vouch.constraints.binary import And

        return And(self, other)

    def __or__(self, other: Constraint) -> Constraint:
        from vouch.constraints.binary import Or

        return Or(self, other)

    def __invert__(self) -> Constraint:
        from vouch.constraints.prefix import Not

        return Not(self)
