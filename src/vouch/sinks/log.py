"""Failure sink that writes to a logger."""

import logging

from vouch.sinks.base import Failure


class LoggingSink:
    """Logs each failure's rendered text.

    Parameters
    ----------
    logger : logging.Logger or None
        Destination logger; defaults to the ``vouch`` logger.
    level : int
        Level the failures are logged at.
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.ERROR) -> None:
        self.logger = logger or logging.getLogger("vouch")
        self.level = level

    def handle(self, failure: Failure) -> None:
        self.logger.log(self.level, "Ensure failed:\n%s", failure.text.rstrip("\n"))

    def __repr__(self) -> str:
        return f"LoggingSink(logger={self.logger.name!r}, level={logging.getLevelName(self.level)})"
