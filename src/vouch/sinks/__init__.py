"""Failure sinks invoked when an ``ensure`` call fails."""

from vouch.sinks.base import Failure, FailureSink, run_chain
from vouch.sinks.console import ConsoleSink
from vouch.sinks.debugger import DebuggerSink
from vouch.sinks.log import LoggingSink
from vouch.sinks.raising import RaisingSink

__all__ = [
    "Failure",
    "FailureSink",
    "run_chain",
    "LoggingSink",
    "DebuggerSink",
    "RaisingSink",
    "ConsoleSink",
]
