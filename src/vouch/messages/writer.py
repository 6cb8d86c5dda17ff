"""Abstract message writer used by constraints to describe themselves."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TextIO


if TYPE_CHECKING:
    from vouch.constraints._base import Constraint, ConstraintResult


class MessageWriter(ABC):
    """Base class for writers that turn constraints and values into text.

    A writer wraps a text stream. Constraints call the low-level methods
    (``write_predicate``, ``write_expected_value``...) to describe
    themselves, and the high-level ``display_*`` methods to lay out a full
    failure block.

    Parameters
    ----------
    stream : TextIO or None
        Destination stream. A private ``io.StringIO`` is used when omitted,
        and ``str(writer)`` returns everything written so far.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else io.StringIO()

    @property
    def stream(self) -> TextIO:
        return self._stream

    @property
    @abstractmethod
    def max_line_length(self) -> int:
        """Maximum number of characters on a rendered line."""

    def write(self, text: str) -> None:
        self._stream.write(text)

    def write_line(self, text: str = "") -> None:
        self._stream.write(text + "\n")

    def __str__(self) -> str:
        getvalue = getattr(self._stream, "getvalue", None)
        return getvalue() if getvalue is not None else ""

    # High level

    @abstractmethod
    def write_message_line(self, message: str | None, *args: Any, level: int = 0) -> None:
        """Write a single indented message line, formatting ``args`` into it."""

    @abstractmethod
    def display_constraint_differences(self, constraint: Constraint, result: ConstraintResult) -> None:
        """Write the expected and actual lines for a failed constraint."""

    @abstractmethod
    def display_differences(self, expected: Any, actual: Any, tolerance: Any = None) -> None:
        """Write the expected and actual lines for two plain values."""

    @abstractmethod
    def display_string_differences(self, expected: str, actual: str, mismatch: int, ignore_case: bool) -> None:
        """Write expected and actual strings with a caret under the mismatch."""

    # Low level

    @abstractmethod
    def write_connector(self, connector: str) -> None: ...

    @abstractmethod
    def write_predicate(self, predicate: str) -> None: ...

    @abstractmethod
    def write_modifier(self, modifier: str) -> None: ...

    @abstractmethod
    def write_expected_value(self, expected: Any) -> None: ...

    @abstractmethod
    def write_actual_value(self, actual: Any) -> None: ...

    @abstractmethod
    def write_value(self, value: Any) -> None: ...

    @abstractmethod
    def write_collection_elements(self, collection: Iterable[Any], start: int = 0, max_items: int = 10) -> None: ...
