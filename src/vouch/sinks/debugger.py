"""Failure sink that drops into the debugger."""

import bdb
import sys

from vouch.sinks.base import Failure


def debugger_attached() -> bool:
    """Whether a debugger, rather than any trace function, is active.

    Coverage tools and profilers also install trace functions, so only a
    ``bdb``-based tracer (pdb and friends) or a loaded ``pydevd`` (PyCharm,
    debugpy) counts.
    """
    tracer = sys.gettrace()
    if isinstance(getattr(tracer, "__self__", None), bdb.Bdb):
        return True
    return "pydevd" in sys.modules


class DebuggerSink:
    """Breaks into the debugger when one is attached.

    Outside debugging sessions the sink does nothing, so it is safe to leave
    in the chain.
    """

    def handle(self, failure: Failure) -> None:
        if debugger_attached():
            breakpoint()

    def __repr__(self) -> str:
        return "DebuggerSink()"
