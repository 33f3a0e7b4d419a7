"""Fold span and fold tree derivation from resolved levels."""

from __future__ import annotations

from collections.abc import Sequence

from foldlevel.types import FoldNode, FoldSpan


def _check_levels(levels: Sequence[int]) -> None:
    for idx, level in enumerate(levels):
        if level < 0:
            raise ValueError(f"level on line {idx + 1} must be >= 0, got {level}")


def fold_spans_at_level(levels: Sequence[int], level: int) -> list[FoldSpan]:
    """Maximal runs of consecutive lines whose level is >= ``level``."""
    if level < 1:
        raise ValueError(f"fold level must be >= 1, got {level}")
    _check_levels(levels)

    spans: list[FoldSpan] = []
    start: int | None = None
    for idx, value in enumerate(levels):
        if value >= level:
            if start is None:
                start = idx
        elif start is not None:
            spans.append(FoldSpan(start_line=start + 1, end_line=idx, level=level))
            start = None
    if start is not None:
        spans.append(FoldSpan(start_line=start + 1, end_line=len(levels), level=level))
    return spans


def fold_spans(levels: Sequence[int]) -> list[FoldSpan]:
    """Every fold span at every level, sorted by (start_line, level).

    One sweep keeps the start line of each currently open level.
    """
    _check_levels(levels)

    spans: list[FoldSpan] = []
    open_starts: list[int] = []  # open_starts[k] = start line of level k + 1
    for idx, value in enumerate(levels):
        while len(open_starts) > value:
            depth = len(open_starts)
            spans.append(FoldSpan(start_line=open_starts.pop(), end_line=idx, level=depth))
        while len(open_starts) < value:
            open_starts.append(idx + 1)
    while open_starts:
        depth = len(open_starts)
        spans.append(FoldSpan(start_line=open_starts.pop(), end_line=len(levels), level=depth))

    spans.sort(key=lambda span: (span.start_line, span.level))
    return spans


def build_fold_tree(levels: Sequence[int]) -> tuple[FoldNode, ...]:
    """Nest fold spans into a tree; roots are the level-1 spans.

    Same sweep as ``fold_spans``: a closing span becomes a child of the
    span one level below it on the open stack.
    """
    _check_levels(levels)

    roots: list[FoldNode] = []
    # open_frames[k] = (start line, finished children) of level k + 1
    open_frames: list[tuple[int, list[FoldNode]]] = []

    def close(end_line: int) -> None:
        depth = len(open_frames)
        start_line, children = open_frames.pop()
        node = FoldNode(
            span=FoldSpan(start_line=start_line, end_line=end_line, level=depth),
            children=tuple(children),
        )
        (open_frames[-1][1] if open_frames else roots).append(node)

    for idx, value in enumerate(levels):
        while len(open_frames) > value:
            close(idx)
        while len(open_frames) < value:
            open_frames.append((idx + 1, []))
    while open_frames:
        close(len(levels))
    return tuple(roots)


def enclosing_spans(levels: Sequence[int], line_number: int) -> list[FoldSpan]:
    """Spans that contain ``line_number`` (1-based), outermost first."""
    if line_number < 1 or line_number > len(levels):
        raise IndexError(f"line {line_number} out of range for {len(levels)} lines")
    return sorted(
        (span for span in fold_spans(levels) if span.contains(line_number)),
        key=lambda span: span.level,
    )


def fold_tree_to_dict(nodes: Sequence[FoldNode]) -> list[dict[str, object]]:
    """Serialize a fold tree for deterministic snapshots."""
    return [
        {
            "start_line": node.span.start_line,
            "end_line": node.span.end_line,
            "level": node.span.level,
            "children": fold_tree_to_dict(node.children),
        }
        for node in nodes
    ]
