"""Exceptions raised by vouch."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from vouch.sinks.base import Failure


class EnsureFailedError(AssertionError):
    """AssertionError with the attached Failure.

    Raised by :class:`~vouch.sinks.raising.RaisingSink` at the end of a
    failed ``ensure`` call. The message is the rendered failure block.
    """

    def __init__(self, failure: Failure):
        self.failure = failure
        super().__init__(failure.text)


class ContractViolationError(TypeError):
    """A constraint was used with an argument it cannot work with.

    This signals a programming error (e.g. comparing ``None`` with
    ``GreaterThan``), not a failed expectation, and is never routed through
    the failure sinks.

    Attributes
    ----------
    argument : str
        Name of the offending argument (``"actual"``, ``"expected"``...).
    """

    def __init__(self, message: str, argument: str):
        self.argument = argument
        super().__init__(f"{message} (argument: {argument})")
