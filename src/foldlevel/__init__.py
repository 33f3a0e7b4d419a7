"""Indentation-based fold-level resolution."""

from foldlevel.assigner import assign_raw_level, assign_raw_levels
from foldlevel.classifier import classify_line, indent_depth, is_blank, measure_indent
from foldlevel.lookahead import next_non_blank, next_non_blank_indices
from foldlevel.normalization import normalize_source_text, split_source_lines
from foldlevel.propagation import propagate_levels
from foldlevel.resolver import (
    FoldResolution,
    FoldResolver,
    resolution_to_dict,
    resolve_fold_levels,
)
from foldlevel.spans import (
    build_fold_tree,
    enclosing_spans,
    fold_spans,
    fold_spans_at_level,
    fold_tree_to_dict,
)
from foldlevel.types import (
    Fixed,
    FoldConfig,
    FoldConfigError,
    FoldNode,
    FoldSpan,
    Opens,
    RawLevel,
    SourceLine,
    Undefined,
    raw_level_label,
)

__version__ = "0.1.0"

__all__ = [
    "Fixed",
    "FoldConfig",
    "FoldConfigError",
    "FoldNode",
    "FoldResolution",
    "FoldResolver",
    "FoldSpan",
    "Opens",
    "RawLevel",
    "SourceLine",
    "Undefined",
    "assign_raw_level",
    "assign_raw_levels",
    "build_fold_tree",
    "classify_line",
    "enclosing_spans",
    "fold_spans",
    "fold_spans_at_level",
    "fold_tree_to_dict",
    "indent_depth",
    "is_blank",
    "measure_indent",
    "next_non_blank",
    "next_non_blank_indices",
    "normalize_source_text",
    "propagate_levels",
    "raw_level_label",
    "resolution_to_dict",
    "resolve_fold_levels",
    "split_source_lines",
]
