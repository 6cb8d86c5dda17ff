"""Helpers shared by the message writers."""

from typing import Any

import numpy as np


ELLIPSIS = "..."


def qualified_name(cls: type) -> str:
    """Return ``module.QualName`` for a class, omitting the ``builtins`` module."""
    module = getattr(cls, "__module__", None)
    name = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", repr(cls))
    if not module or module == "builtins":
        return name
    return f"{module}.{name}"


def type_representation(obj: Any) -> str:
    """Return the display form of an object's type.

    Numpy arrays are shown with their element type and declared extents,
    e.g. ``<int64[2,3]>``; everything else shows the qualified class name.
    """
    if isinstance(obj, np.ndarray):
        extents = ",".join(str(extent) for extent in obj.shape)
        return f"<{obj.dtype}[{extents}]>"
    return f"<{qualified_name(type(obj))}>"


def convert_whitespace(s: str | None) -> str | None:
    """Escape backslashes and control whitespace so a string fits on one line."""
    if s is None:
        return s
    s = s.replace("\\", "\\\\")
    s = s.replace("\r", "\\r")
    s = s.replace("\n", "\\n")
    s = s.replace("\t", "\\t")
    return s


def format_indices(indices: list[int] | tuple[int, ...]) -> str:
    """Render a list of indices as ``[i,j,k]``."""
    return "[" + ",".join(str(i) for i in indices) + "]"


def indices_from_flat_index(collection: Any, index: int) -> list[int]:
    """Map a flat (row-major) index onto per-dimension indices.

    Only multi-dimensional numpy arrays have more than one index; any other
    collection returns ``[index]``.
    """
    if not isinstance(collection, np.ndarray) or collection.ndim <= 1:
        return [index]
    return [int(i) for i in np.unravel_index(index, collection.shape)]


def clip_string(s: str, max_length: int, mismatch: int) -> str:
    """Clip ``s`` around ``mismatch`` so it fits in ``max_length`` characters.

    Removed parts are replaced by an ellipsis. When the mismatch lies past the
    clip window the string is clipped at the start (and at the end if the
    remainder is still too long); otherwise only the tail is clipped.
    """
    clip_length = max_length - len(ELLIPSIS)

    if mismatch >= clip_length:
        clip_start = mismatch - clip_length // 2
        if len(s) - clip_start > max_length:
            return ELLIPSIS + s[clip_start:clip_start + clip_length - len(ELLIPSIS)] + ELLIPSIS
        return ELLIPSIS + s[clip_start:]

    if len(s) > max_length:
        return s[:clip_length] + ELLIPSIS

    return s


def find_mismatch_position(expected: str, actual: str, start: int = 0, ignore_case: bool = False) -> int:
    """Return the index at which two strings start to differ.

    Comparison starts at ``start``. If one string is a prefix of the other the
    mismatch is reported where the shorter one ends. Returns -1 when the
    strings are equal.
    """
    length = min(len(expected), len(actual))

    s1 = expected.lower() if ignore_case else expected
    s2 = actual.lower() if ignore_case else actual

    for i in range(start, length):
        if s1[i] != s2[i]:
            return i

    if len(expected) != len(actual):
        return length

    return -1
