"""Failure records and the sink protocol."""

import logging
from collections.abc import Iterable
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict

from vouch.constraints._base import Constraint, ConstraintResult

logger = logging.getLogger(__name__)


class Failure(BaseModel):
    """A failed ``ensure`` call, as handed to each failure sink.

    Attributes
    ----------
    constraint
        The constraint that failed.
    result
        The evaluation result carrying the actual value.
    message
        The caller's message with its arguments formatted in, if any.
    text
        The full rendered failure block (message line, expected/actual lines
        and any difference annotations).
    args
        The raw message arguments.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    constraint: Constraint
    result: ConstraintResult
    message: str | None = None
    text: str
    args: tuple[Any, ...] = ()

    def __str__(self) -> str:
        return self.text


class FailureSink(Protocol):
    """Anything that can consume a :class:`Failure`."""

    def handle(self, failure: Failure) -> None: ...


def run_chain(sinks: Iterable[FailureSink], failure: Failure) -> None:
    """Hand ``failure`` to every sink in order.

    A sink that raises does not stop the sinks after it. Once the chain has
    run, the first exception raised by a sink propagates.
    """
    error: Exception | None = None
    for sink in sinks:
        try:
            sink.handle(failure)
        except Exception as exc:
            if error is None:
                error = exc
            else:
                logger.warning("Failure sink %r raised after an earlier sink already did", sink, exc_info=exc)
    if error is not None:
        raise error
