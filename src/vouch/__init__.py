"""Vouch - composable constraints with readable failure messages."""

from . import checks
from .checks import ensure
from .constraints import (
    AllItems,
    And,
    Between,
    Constraint,
    ConstraintResult,
    Contains,
    Empty,
    Equal,
    GreaterThan,
    GreaterThanOrEqual,
    HasProperty,
    IsFalse,
    IsNull,
    IsTrue,
    LessThan,
    LessThanOrEqual,
    NoItem,
    Not,
    Or,
    SomeItems,
)
from .context import configure, failures_collector, sinks_scope
from .errors import ContractViolationError, EnsureFailedError
from .sinks import ConsoleSink, DebuggerSink, Failure, LoggingSink, RaisingSink
from .version import __version__


__all__ = [
    # Entry point
    "ensure",
    "checks",
    # Constraints
    "Constraint",
    "ConstraintResult",
    "Equal",
    "GreaterThan",
    "GreaterThanOrEqual",
    "LessThan",
    "LessThanOrEqual",
    "Between",
    "Empty",
    "IsTrue",
    "IsFalse",
    "IsNull",
    "Contains",
    "And",
    "Or",
    "Not",
    "AllItems",
    "SomeItems",
    "NoItem",
    "HasProperty",
    # Sinks and configuration
    "Failure",
    "LoggingSink",
    "DebuggerSink",
    "RaisingSink",
    "ConsoleSink",
    "configure",
    "sinks_scope",
    "failures_collector",
    # Errors
    "EnsureFailedError",
    "ContractViolationError",
]
