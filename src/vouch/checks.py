"""Evaluate constraints and route failures through the sink chain.

``ensure`` is the single entry point; the helpers below it are shorthands
for the most common constraints::

    from vouch import checks, ensure
    from vouch.constraints import GreaterThan, LessThan

    ensure(answer, GreaterThan(40) & LessThan(50), "answer for {0}", question)
    checks.are_equal(expected, actual)
"""

from __future__ import annotations

import logging
from typing import Any

from vouch.constraints import (
    AssignableFrom,
    Constraint,
    ConstraintResult,
    Contains,
    Empty,
    Equal,
    GreaterThan,
    GreaterThanOrEqual,
    InstanceOfType,
    IsFalse,
    IsNaN,
    IsNull,
    IsTrue,
    LessThan,
    LessThanOrEqual,
    Not,
    SameAs,
)
from vouch.context import collect_failure, get_sink_chain
from vouch.errors import ContractViolationError
from vouch.messages.text import TextMessageWriter
from vouch.sinks.base import Failure, run_chain


logger = logging.getLogger(__name__)


def ensure(actual: Any, constraint: Constraint, message: str | None = None, *args: Any) -> ConstraintResult:
    """Apply ``constraint`` to ``actual`` and report a failure to the sink chain.

    Parameters
    ----------
    actual : Any
        The value under test.
    constraint : Constraint
        The constraint to apply.
    message : str or None
        Optional message shown above the failure block. ``args`` are
        formatted into it with ``str.format``.

    Returns
    -------
    ConstraintResult
        The evaluation result. A failed result is only returned when no sink
        in the chain raised.

    Raises
    ------
    ContractViolationError
        If ``constraint`` is ``None`` or cannot be applied to ``actual``.
    EnsureFailedError
        If the evaluation failed and a ``RaisingSink`` is in the chain.
    """
    if constraint is None:
        raise ContractViolationError("A constraint is required", "constraint")

    result = constraint.evaluate(actual)
    if result:
        return result

    writer = TextMessageWriter()
    formatted = None
    if message is not None:
        formatted = message.format(*args) if args else message
        writer.write_message_line(formatted)
    constraint.describe_failure_to(writer, result)

    failure = Failure(constraint=constraint, result=result, message=formatted, text=str(writer), args=args)
    logger.debug("Constraint failed: %s", constraint.description)
    collect_failure(failure)
    run_chain(get_sink_chain(), failure)
    return result


def that(actual: Any, constraint: Constraint, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(actual, constraint, message, *args)


def is_true(condition: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(condition, IsTrue(), message, *args)


def is_false(condition: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(condition, IsFalse(), message, *args)


def is_null(value: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(value, IsNull(), message, *args)


def is_not_null(value: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(value, Not(IsNull()), message, *args)


def is_nan(value: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(value, IsNaN(), message, *args)


def is_empty(value: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(value, Empty(), message, *args)


def is_not_empty(value: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(value, Not(Empty()), message, *args)


def are_equal(
    expected: Any,
    actual: Any,
    message: str | None = None,
    *args: Any,
    delta: Any = None,
) -> ConstraintResult:
    """Check ``actual`` equals ``expected``, numerically within ``delta`` when given."""
    return ensure(actual, Equal(expected, tolerance=delta), message, *args)


def are_not_equal(expected: Any, actual: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(actual, Not(Equal(expected)), message, *args)


def are_same(expected: Any, actual: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(actual, SameAs(expected), message, *args)


def are_not_same(expected: Any, actual: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(actual, Not(SameAs(expected)), message, *args)


def greater(arg1: Any, arg2: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    """Check ``arg1 > arg2``."""
    return ensure(arg1, GreaterThan(arg2), message, *args)


def greater_or_equal(arg1: Any, arg2: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(arg1, GreaterThanOrEqual(arg2), message, *args)


def less(arg1: Any, arg2: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    """Check ``arg1 < arg2``."""
    return ensure(arg1, LessThan(arg2), message, *args)


def less_or_equal(arg1: Any, arg2: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(arg1, LessThanOrEqual(arg2), message, *args)


def contains(expected: Any, actual: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    """Check ``expected`` is an item of ``actual`` (or a substring, for strings)."""
    return ensure(actual, Contains(expected), message, *args)


def is_instance_of(expected_type: type, actual: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(actual, InstanceOfType(expected_type), message, *args)


def is_not_instance_of(expected_type: type, actual: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(actual, Not(InstanceOfType(expected_type)), message, *args)


def is_assignable_from(expected_type: type, actual: Any, message: str | None = None, *args: Any) -> ConstraintResult:
    return ensure(actual, AssignableFrom(expected_type), message, *args)


def is_not_assignable_from(
    expected_type: type,
    actual: Any,
    message: str | None = None,
    *args: Any,
) -> ConstraintResult:
    return ensure(actual, Not(AssignableFrom(expected_type)), message, *args)


def fail(message: str | None = None, *args: Any) -> ConstraintResult:
    """Report an unconditional failure."""
    return ensure(False, IsTrue(), message, *args)
