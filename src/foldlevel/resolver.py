"""Batch fold-level resolution entrypoints."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from time import perf_counter

from foldlevel.assigner import assign_raw_levels
from foldlevel.classifier import classify_line
from foldlevel.normalization import split_source_lines
from foldlevel.propagation import propagate_levels
from foldlevel.spans import build_fold_tree, fold_spans, fold_spans_at_level, fold_tree_to_dict
from foldlevel.types import (
    DEFAULT_TAB_WIDTH,
    FoldConfig,
    FoldNode,
    FoldSpan,
    RawLevel,
    SourceLine,
    raw_level_label,
)


log = logging.getLogger(__name__)

RESOLVER_VERSION = "foldlevel_v1"


@dataclass(frozen=True, slots=True)
class FoldResolution:
    """Output of one resolution pass over a snapshot of lines."""

    config: FoldConfig
    lines: tuple[str, ...]
    raw_levels: tuple[RawLevel, ...]
    levels: tuple[int, ...]

    def __post_init__(self) -> None:
        if not len(self.lines) == len(self.raw_levels) == len(self.levels):
            raise ValueError(
                "lines, raw_levels and levels must have equal length, got "
                f"{len(self.lines)}/{len(self.raw_levels)}/{len(self.levels)}"
            )

    @property
    def max_level(self) -> int:
        return max(self.levels, default=0)

    def source_lines(self) -> list[SourceLine]:
        return [classify_line(self.lines, idx, self.config) for idx in range(len(self.lines))]

    def spans(self) -> list[FoldSpan]:
        return fold_spans(self.levels)

    def spans_at_level(self, level: int) -> list[FoldSpan]:
        return fold_spans_at_level(self.levels, level)

    def tree(self) -> tuple[FoldNode, ...]:
        return build_fold_tree(self.levels)

    def fingerprint(self) -> str:
        """SHA-256 of the resolved lines joined with LF."""
        return hashlib.sha256("\n".join(self.lines).encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class FoldResolver:
    """Stateless resolver bound to one configuration.

    Safe to share across threads and to call repeatedly; every call
    recomputes from scratch.
    """

    config: FoldConfig

    def resolve(self, lines: Sequence[str]) -> FoldResolution:
        started = perf_counter()
        snapshot = tuple(lines)
        raw_levels = assign_raw_levels(snapshot, self.config)
        levels = propagate_levels(raw_levels)
        log.debug(
            "resolved %d lines in %.3f ms (indent_unit=%d, tab_width=%d)",
            len(snapshot),
            (perf_counter() - started) * 1000,
            self.config.indent_unit,
            self.config.tab_width,
        )
        return FoldResolution(
            config=self.config,
            lines=snapshot,
            raw_levels=tuple(raw_levels),
            levels=tuple(levels),
        )

    def resolve_text(self, text: str) -> FoldResolution:
        return self.resolve(split_source_lines(text))


def resolve_fold_levels(
    lines: Sequence[str],
    indent_unit: int,
    *,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> list[int]:
    """Resolve one fold level per input line.

    Raises FoldConfigError when ``indent_unit`` or ``tab_width`` is not a
    positive integer.
    """

    resolver = FoldResolver(FoldConfig(indent_unit=indent_unit, tab_width=tab_width))
    return list(resolver.resolve(lines).levels)


def resolution_to_dict(resolution: FoldResolution) -> dict[str, object]:
    """Serialize a resolution for deterministic snapshots."""

    return {
        "resolver_version": RESOLVER_VERSION,
        "config": {
            "indent_unit": resolution.config.indent_unit,
            "tab_width": resolution.config.tab_width,
        },
        "line_count": len(resolution.lines),
        "max_level": resolution.max_level,
        "text_fingerprint": resolution.fingerprint(),
        "lines": [
            {
                "line_number": line.line_number,
                "is_blank": line.is_blank,
                "indent_depth": line.indent_depth,
                "raw_level": raw_level_label(raw),
                "level": level,
            }
            for line, raw, level in zip(
                resolution.source_lines(),
                resolution.raw_levels,
                resolution.levels,
                strict=True,
            )
        ],
        "spans": [
            {
                "start_line": span.start_line,
                "end_line": span.end_line,
                "level": span.level,
            }
            for span in resolution.spans()
        ],
        "tree": fold_tree_to_dict(resolution.tree()),
    }
