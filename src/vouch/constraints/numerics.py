"""Numeric recognition, equality and ordering across numeric types.

Python ints, floats, ``Decimal``, ``Fraction`` and numpy scalars compare by
value: ``Equal(5)`` accepts ``5.0``, ``Decimal("5")`` and ``np.int32(5)``.
Booleans are not treated as numbers.
"""

import math
from decimal import Decimal
from fractions import Fraction
from typing import Any

import numpy as np

from vouch.errors import ContractViolationError


def is_floating_point(obj: Any) -> bool:
    return isinstance(obj, (float, np.floating))


def is_fixed_point(obj: Any) -> bool:
    if isinstance(obj, (bool, np.bool_)):
        return False
    return isinstance(obj, (int, Decimal, Fraction, np.integer))


def is_numeric(obj: Any) -> bool:
    return is_floating_point(obj) or is_fixed_point(obj)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, Fraction):
        return Decimal(value.numerator) / Decimal(value.denominator)
    return Decimal(int(value))


def _to_exact(value: Any) -> int | Fraction:
    if isinstance(value, Fraction):
        return value
    return int(value)


def _sign(difference: Any) -> int:
    return (difference > 0) - (difference < 0)


def _floats_equal(expected: float, actual: float, tolerance: float) -> bool:
    if math.isnan(expected) and math.isnan(actual):
        return True
    # inf - inf is NaN, so infinities never go through the tolerance check
    if math.isinf(expected) or math.isnan(expected) or math.isnan(actual):
        return expected == actual
    if tolerance > 0.0:
        return abs(expected - actual) <= tolerance
    return expected == actual


def are_equal(expected: Any, actual: Any, tolerance: Any = None) -> bool:
    """Compare two numeric values, optionally within a tolerance.

    Parameters
    ----------
    expected, actual : numeric
        Values to compare. Either may be any numeric type.
    tolerance : numeric or None
        Maximum allowed absolute difference. ``None`` or zero means exact.

    Returns
    -------
    bool
        Whether the values are equal. NaN is equal to NaN.
    """
    if tolerance is None:
        tolerance = 0

    if is_floating_point(expected) or is_floating_point(actual):
        return _floats_equal(float(expected), float(actual), float(tolerance))

    if isinstance(expected, Decimal) or isinstance(actual, Decimal):
        expected, actual = _to_decimal(expected), _to_decimal(actual)
        if expected.is_nan() or actual.is_nan():
            return expected.is_nan() and actual.is_nan()
        if expected.is_infinite() or actual.is_infinite():
            return expected == actual
        if is_floating_point(tolerance):
            tolerance = Decimal(repr(float(tolerance)))
        else:
            tolerance = _to_decimal(tolerance)
        if tolerance > 0:
            return abs(expected - actual) <= tolerance
        return expected == actual

    expected, actual = _to_exact(expected), _to_exact(actual)
    if tolerance > 0:
        return abs(expected - actual) <= tolerance
    return expected == actual


def _compare_floats(expected: float, actual: float) -> int:
    # NaN sorts below every other value and equal to itself
    if math.isnan(expected):
        return 0 if math.isnan(actual) else -1
    if math.isnan(actual):
        return 1
    return (expected > actual) - (expected < actual)


def _compare_decimals(expected: Decimal, actual: Decimal) -> int:
    # same NaN ordering as floats; ordering a Decimal NaN raises InvalidOperation
    if expected.is_nan():
        return 0 if actual.is_nan() else -1
    if actual.is_nan():
        return 1
    return (expected > actual) - (expected < actual)


def compare(expected: Any, actual: Any) -> int:
    """Order ``expected`` relative to ``actual``.

    Returns
    -------
    int
        Negative if ``expected < actual``, zero if equal, positive otherwise.

    Raises
    ------
    ContractViolationError
        If either value is ``None`` or the two values cannot be ordered
        against each other.
    """
    if expected is None:
        raise ContractViolationError("Cannot compare using a null reference", "expected")
    if actual is None:
        raise ContractViolationError("Cannot compare to null reference", "actual")

    if is_numeric(expected) and is_numeric(actual):
        if is_floating_point(expected) or is_floating_point(actual):
            return _compare_floats(float(expected), float(actual))
        if isinstance(expected, Decimal) or isinstance(actual, Decimal):
            return _compare_decimals(_to_decimal(expected), _to_decimal(actual))
        return _sign(_to_exact(expected) - _to_exact(actual))

    incompatible = ContractViolationError(
        f"Cannot compare {type(actual).__name__} with {type(expected).__name__}",
        "actual",
    )
    if is_numeric(expected) or is_numeric(actual):
        raise incompatible
    if not (isinstance(actual, type(expected)) or isinstance(expected, type(actual))):
        raise incompatible

    try:
        if expected < actual:
            return -1
        if expected > actual:
            return 1
    except (TypeError, ValueError) as exc:
        # ValueError: element-wise results such as ndarrays have no truth value
        raise incompatible from exc
    return 0
