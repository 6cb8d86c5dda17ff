"""Rendering of constraint descriptions and failure messages."""

from vouch.messages.text import (
    MAX_LINE_LENGTH,
    PFX_ACTUAL,
    PFX_EXPECTED,
    PREFIX_LENGTH,
    TextMessageWriter,
)
from vouch.messages.utils import (
    clip_string,
    convert_whitespace,
    find_mismatch_position,
    type_representation,
)
from vouch.messages.writer import MessageWriter

__all__ = [
    "MessageWriter",
    "TextMessageWriter",
    "MAX_LINE_LENGTH",
    "PFX_EXPECTED",
    "PFX_ACTUAL",
    "PREFIX_LENGTH",
    "clip_string",
    "convert_whitespace",
    "find_mismatch_position",
    "type_representation",
]
