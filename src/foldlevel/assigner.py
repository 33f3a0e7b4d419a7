"""Raw level assignment from indentation comparisons."""

from __future__ import annotations

from collections.abc import Sequence

from foldlevel.classifier import indent_depth, is_blank
from foldlevel.lookahead import next_non_blank, next_non_blank_indices
from foldlevel.types import Fixed, FoldConfig, Opens, RawLevel, Undefined


def _compare_depths(depth: int, next_depth: int) -> RawLevel:
    if next_depth > depth:
        return Opens(level=next_depth, header_depth=depth)
    # Equal or shallower next line: the line closes or continues its own block.
    return Fixed(depth)


def assign_raw_level(lines: Sequence[str], index: int, config: FoldConfig) -> RawLevel:
    """Raw level tag for one line.

    Blank lines are Undefined. A non-blank line whose next non-blank line is
    indented deeper opens that deeper level; otherwise it is fixed at its own
    depth. End of file compares as depth 0.
    """
    if is_blank(lines[index]):
        return Undefined()
    depth = indent_depth(lines, index, config)
    following = indent_depth(lines, next_non_blank(lines, index), config)
    return _compare_depths(depth, following)


def assign_raw_levels(lines: Sequence[str], config: FoldConfig) -> list[RawLevel]:
    """Raw level tags for every line in O(n)."""
    following = next_non_blank_indices(lines)
    depths = [indent_depth(lines, idx, config) for idx in range(len(lines))]

    out: list[RawLevel] = []
    for idx, text in enumerate(lines):
        if is_blank(text):
            out.append(Undefined())
            continue
        next_idx = following[idx]
        next_depth = 0 if next_idx is None else depths[next_idx]
        out.append(_compare_depths(depths[idx], next_depth))
    return out
