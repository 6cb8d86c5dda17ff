"""Failure sink that prints to the terminal using Rich."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from vouch.sinks.base import Failure


class ConsoleSink:
    """Prints each failure in a red panel titled with the failed constraint."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(file=sys.__stderr__)

    def handle(self, failure: Failure) -> None:
        title = escape(failure.constraint.description)
        body = escape(failure.text.rstrip("\n"))
        self.console.print(Panel(body, title=f"[bold red]✗[/bold red] {title}", border_style="red", expand=False))

    def __repr__(self) -> str:
        return "ConsoleSink()"
