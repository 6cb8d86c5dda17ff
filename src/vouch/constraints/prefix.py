"""Constraints that wrap a single child constraint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vouch.constraints._base import Constraint, ConstraintResult
from vouch.constraints.collection import as_items
from vouch.constraints.conditions import IsNull
from vouch.messages.writer import MessageWriter


_MISSING = object()


@dataclass(frozen=True, eq=False)
class Not(Constraint):
    """Negates ``child``. ``Not(None)`` is shorthand for ``Not(IsNull())``."""

    child: Constraint | None

    def __post_init__(self) -> None:
        if self.child is None:
            object.__setattr__(self, "child", IsNull())

    def evaluate(self, actual: Any) -> ConstraintResult:
        inner = self.child.evaluate(actual)
        return ConstraintResult(actual=actual, value=not inner.value, children=(inner,))

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate("not")
        self.child.describe_to(writer)

    def write_actual_value_to(self, writer: MessageWriter, result: ConstraintResult) -> None:
        inner = result.children[0] if result.children else None
        if inner is None:
            super().write_actual_value_to(writer, result)
        else:
            self.child.write_actual_value_to(writer, inner)


@dataclass(frozen=True, eq=False)
class ItemsConstraint(Constraint):
    """Applies ``child`` to each element of a collection.

    Raises :class:`~vouch.errors.ContractViolationError` when the actual
    value is not a collection.
    """

    child: Constraint

    predicate = ""

    def describe_to(self, writer: MessageWriter) -> None:
        writer.write_predicate(self.predicate)
        self.child.describe_to(writer)


@dataclass(frozen=True, eq=False)
class AllItems(ItemsConstraint):
    predicate = "all items"

    def evaluate(self, actual: Any) -> ConstraintResult:
        items = as_items(actual)
        return self._result(actual, all(self.child.matches(item) for item in items))


@dataclass(frozen=True, eq=False)
class SomeItems(ItemsConstraint):
    predicate = "some item"

    def evaluate(self, actual: Any) -> ConstraintResult:
        items = as_items(actual)
        return self._result(actual, any(self.child.matches(item) for item in items))


@dataclass(frozen=True, eq=False)
class NoItem(ItemsConstraint):
    predicate = "no item"

    def evaluate(self, actual: Any) -> ConstraintResult:
        items = as_items(actual)
        return self._result(actual, not any(self.child.matches(item) for item in items))


@dataclass(frozen=True, eq=False)
class HasProperty(Constraint):
    """Succeeds when the actual value has attribute ``name`` satisfying ``constraint``.

    Without a constraint only the presence of the attribute is checked.
    """

    name: str
    constraint: Constraint | None = None

    def evaluate(self, actual: Any) -> ConstraintResult:
        if actual is None:
            return self._result(actual, False, property_exists=False)

        value = getattr(actual, self.name, _MISSING)
        if value is _MISSING:
            return self._result(actual, False, property_exists=False)
        if self.constraint is None:
            return self._result(actual, True, property_exists=True, property_value=value)

        inner = self.constraint.evaluate(value)
        return ConstraintResult(
            actual=actual,
            value=inner.value,
            children=(inner,),
            details={"property_exists": True, "property_value": value},
        )

    def describe_to(self, writer: MessageWriter) -> None:
        if self.constraint is None:
            writer.write(f"property {self.name}")
            return
        writer.write_predicate(f"property {self.name}")
        self.constraint.describe_to(writer)

    def write_actual_value_to(self, writer: MessageWriter, result: ConstraintResult) -> None:
        if result.details.get("property_exists"):
            writer.write_actual_value(result.details["property_value"])
        elif result.actual is None:
            writer.write_actual_value(None)
        else:
            writer.write_actual_value(type(result.actual))
