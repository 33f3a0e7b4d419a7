"""Tests for fold span and fold tree derivation."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from foldlevel.spans import (
    build_fold_tree,
    enclosing_spans,
    fold_spans,
    fold_spans_at_level,
    fold_tree_to_dict,
)
from foldlevel.types import FoldNode, FoldSpan


WORKED_LEVELS = [1, 1, 2, 2, 2, 1, 0, 1, 1, 1, 1, 1]


class TestFoldSpansAtLevel:
    def test_level_one_runs(self) -> None:
        assert fold_spans_at_level(WORKED_LEVELS, 1) == [
            FoldSpan(start_line=1, end_line=6, level=1),
            FoldSpan(start_line=8, end_line=12, level=1),
        ]

    def test_level_two_runs(self) -> None:
        assert fold_spans_at_level(WORKED_LEVELS, 2) == [
            FoldSpan(start_line=3, end_line=5, level=2),
        ]

    def test_level_above_max_is_empty(self) -> None:
        assert fold_spans_at_level(WORKED_LEVELS, 3) == []

    def test_level_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="fold level"):
            fold_spans_at_level(WORKED_LEVELS, 0)

    def test_negative_levels_rejected(self) -> None:
        with pytest.raises(ValueError, match="line 2"):
            fold_spans_at_level([0, -1], 1)


class TestFoldSpans:
    def test_all_levels_sorted(self) -> None:
        assert fold_spans(WORKED_LEVELS) == [
            FoldSpan(1, 6, 1),
            FoldSpan(3, 5, 2),
            FoldSpan(8, 12, 1),
        ]

    def test_matches_per_level_query(self) -> None:
        levels = [0, 2, 3, 1, 0, 3, 3, 0]
        expected = sorted(
            (
                span
                for level in range(1, max(levels) + 1)
                for span in fold_spans_at_level(levels, level)
            ),
            key=lambda span: (span.start_line, span.level),
        )
        assert fold_spans(levels) == expected

    def test_zero_levels_have_no_spans(self) -> None:
        assert fold_spans([0, 0, 0]) == []
        assert fold_spans([]) == []

    def test_spans_nest_strictly(self) -> None:
        levels = [1, 2, 3, 2, 3, 3, 1, 0, 2, 1]
        spans = fold_spans(levels)
        for inner in spans:
            if inner.level == 1:
                continue
            parents = [
                outer for outer in spans
                if outer.level == inner.level - 1
                and outer.start_line <= inner.start_line
                and inner.end_line <= outer.end_line
            ]
            assert len(parents) == 1

    def test_level_zero_line_is_never_inside_a_span(self) -> None:
        for span in fold_spans(WORKED_LEVELS):
            assert not span.contains(7)


class TestFoldTree:
    def test_tree_shape(self) -> None:
        assert fold_tree_to_dict(build_fold_tree(WORKED_LEVELS)) == [
            {
                "start_line": 1,
                "end_line": 6,
                "level": 1,
                "children": [
                    {"start_line": 3, "end_line": 5, "level": 2, "children": []},
                ],
            },
            {"start_line": 8, "end_line": 12, "level": 1, "children": []},
        ]

    def test_tree_covers_every_span_once(self) -> None:
        levels = [1, 2, 3, 2, 3, 3, 1, 0, 2, 1, 0, 4]

        def walk(nodes: tuple[FoldNode, ...]) -> list[FoldSpan]:
            out: list[FoldSpan] = []
            for node in nodes:
                out.append(node.span)
                for child in node.children:
                    assert child.span.level == node.span.level + 1
                    assert node.span.start_line <= child.span.start_line
                    assert child.span.end_line <= node.span.end_line
                out.extend(walk(node.children))
            return out

        flattened = walk(build_fold_tree(levels))
        assert sorted(flattened, key=lambda span: (span.start_line, span.level)) == fold_spans(levels)

    def test_level_jump_nests_each_level(self) -> None:
        tree = build_fold_tree([3, 3, 0])
        assert fold_tree_to_dict(tree) == [
            {
                "start_line": 1,
                "end_line": 2,
                "level": 1,
                "children": [
                    {
                        "start_line": 1,
                        "end_line": 2,
                        "level": 2,
                        "children": [
                            {"start_line": 1, "end_line": 2, "level": 3, "children": []},
                        ],
                    },
                ],
            },
        ]

    def test_many_sibling_children_keep_order(self) -> None:
        levels = [1] + [2, 1] * 500
        tree = build_fold_tree(levels)
        assert len(tree) == 1
        starts = [child.span.start_line for child in tree[0].children]
        assert len(starts) == 500
        assert starts == sorted(starts)

    def test_tree_rejects_negative_levels(self) -> None:
        with pytest.raises(ValueError):
            build_fold_tree([1, -1])

    def test_enclosing_spans_outermost_first(self) -> None:
        assert enclosing_spans(WORKED_LEVELS, 4) == [FoldSpan(1, 6, 1), FoldSpan(3, 5, 2)]
        assert enclosing_spans(WORKED_LEVELS, 7) == []

    def test_enclosing_spans_rejects_out_of_range(self) -> None:
        with pytest.raises(IndexError):
            enclosing_spans(WORKED_LEVELS, 13)

    def test_span_line_count(self) -> None:
        assert FoldSpan(8, 12, 1).line_count == 5
