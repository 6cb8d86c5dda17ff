"""Composable constraints."""

from vouch.constraints._base import UNSET, Constraint, ConstraintResult
from vouch.constraints.binary import And, BinaryOperation, Or
from vouch.constraints.collection import (
    CollectionContains,
    CollectionEquivalent,
    CollectionSubset,
    Contains,
    UniqueItems,
)
from vouch.constraints.comparison import (
    Between,
    ComparisonConstraint,
    GreaterThan,
    GreaterThanOrEqual,
    LessThan,
    LessThanOrEqual,
)
from vouch.constraints.conditions import Empty, IsFalse, IsNaN, IsNull, IsTrue
from vouch.constraints.equal import Equal
from vouch.constraints.identity import SameAs
from vouch.constraints.prefix import AllItems, HasProperty, NoItem, Not, SomeItems
from vouch.constraints.strings import EndsWith, RegexMatch, StartsWith, Substring
from vouch.constraints.type_checks import AssignableFrom, ExactType, InstanceOfType

__all__ = [
    # Base
    "Constraint",
    "ConstraintResult",
    "UNSET",
    # Equality and ordering
    "Equal",
    "ComparisonConstraint",
    "GreaterThan",
    "GreaterThanOrEqual",
    "LessThan",
    "LessThanOrEqual",
    "Between",
    # Conditions
    "Empty",
    "IsTrue",
    "IsFalse",
    "IsNull",
    "IsNaN",
    # Strings
    "Substring",
    "StartsWith",
    "EndsWith",
    "RegexMatch",
    # Collections
    "UniqueItems",
    "CollectionContains",
    "CollectionEquivalent",
    "CollectionSubset",
    "Contains",
    # Types and identity
    "ExactType",
    "InstanceOfType",
    "AssignableFrom",
    "SameAs",
    # Combinators
    "BinaryOperation",
    "And",
    "Or",
    "Not",
    "AllItems",
    "SomeItems",
    "NoItem",
    "HasProperty",
]
