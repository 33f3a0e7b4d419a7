"""Next-non-blank-line lookup."""

from __future__ import annotations

from collections.abc import Sequence

from foldlevel.classifier import is_blank


def next_non_blank(lines: Sequence[str], index: int) -> int | None:
    """Index of the first non-blank line after ``index``, or None."""
    for candidate in range(index + 1, len(lines)):
        if not is_blank(lines[candidate]):
            return candidate
    return None


def next_non_blank_indices(lines: Sequence[str]) -> list[int | None]:
    """``next_non_blank`` for every line, computed in one backward sweep."""
    out: list[int | None] = [None] * len(lines)
    following: int | None = None
    for idx in range(len(lines) - 1, -1, -1):
        out[idx] = following
        if not is_blank(lines[idx]):
            following = idx
    return out
