"""Failure sink that raises."""

from vouch.errors import EnsureFailedError
from vouch.sinks.base import Failure


class RaisingSink:
    """Raises :class:`~vouch.errors.EnsureFailedError` for every failure."""

    def handle(self, failure: Failure) -> None:
        raise EnsureFailedError(failure)

    def __repr__(self) -> str:
        return "RaisingSink()"
