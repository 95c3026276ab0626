"""Small helpers for turning sequences into text and back."""

from __future__ import annotations

from collections.abc import Iterable, Sized


def _format(value: object) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def stringify(values: Iterable[object]) -> str:
    """Join the values with ', '; floats use six significant digits."""
    return ", ".join(_format(v) for v in values)


def stringify_sizes(values: Iterable[Sized]) -> str:
    """Join the lengths of the given collections with ', '."""
    return ", ".join(str(len(v)) for v in values)


def split_by_delimiter(text: str, delim: str) -> list[str]:
    """Split ``text`` at every ``delim``, keeping empty parts."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    return text.split(delim)