from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from vouch.config import build_sinks, get_settings


if TYPE_CHECKING:
    from vouch.sinks.base import Failure, FailureSink

logger = logging.getLogger(__name__)


SINK_CHAIN: ContextVar[tuple[FailureSink, ...] | None] = ContextVar("sink_chain", default=None)
FAILURES_COLLECTOR: ContextVar[list[Failure] | None] = ContextVar("failures_collector", default=None)

_process_chain: tuple[FailureSink, ...] | None = None


def configure(*sinks: FailureSink) -> None:
    """Set the process-wide failure-sink chain.

    Parameters
    ----------
    sinks : FailureSink
        Sinks to run, in order, whenever an ``ensure`` call fails outside a
        :func:`sinks_scope` block.
    """
    global _process_chain
    _process_chain = tuple(sinks)
    logger.debug("Configured failure sinks: %s", _process_chain)


def reset() -> None:
    """Drop the process-wide chain so the settings-based default applies again."""
    global _process_chain
    _process_chain = None


def get_sink_chain() -> tuple[FailureSink, ...]:
    """Return the chain in effect: scoped, then process-wide, then from settings."""
    scoped = SINK_CHAIN.get()
    if scoped is not None:
        return scoped
    if _process_chain is not None:
        return _process_chain
    return build_sinks(get_settings())


def collect_failure(failure: Failure) -> None:
    if (collected := FAILURES_COLLECTOR.get()) is not None:
        collected.append(failure)


@contextmanager
def sinks_scope(*sinks: FailureSink) -> Iterator[None]:
    """Temporarily set `SINK_CHAIN` for the duration of the ``with`` block.

    Parameters
    ----------
    sinks : FailureSink
        Sinks to run on failure inside the block. No sinks means failures
        are only returned (and collected).
    """
    token = SINK_CHAIN.set(tuple(sinks))
    try:
        yield
    finally:
        SINK_CHAIN.reset(token)


@contextmanager
def failures_collector(ctx: list[Failure]) -> Iterator[None]:
    token = FAILURES_COLLECTOR.set(ctx)
    try:
        yield
    finally:
        FAILURES_COLLECTOR.reset(token)
