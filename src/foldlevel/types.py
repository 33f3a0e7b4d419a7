"""Core types for fold-level resolution.

Type hierarchy:
  FoldConfig   : Indent unit and tab width for one resolution pass
  SourceLine   : One classified line (blank flag + indent depth)
  Fixed / Opens / Undefined : RawLevel tagged union from the level assigner
  FoldSpan     : Contiguous run of lines at or above a fold level
  FoldNode     : FoldSpan plus the spans nested one level deeper

Line numbers exposed on SourceLine, FoldSpan and FoldNode are 1-based.
Indices passed between the classifier, lookahead and assigner are 0-based.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias


DEFAULT_TAB_WIDTH = 4


class FoldConfigError(ValueError):
    """Raised when a fold configuration parameter is out of range."""


@dataclass(frozen=True, slots=True)
class FoldConfig:
    """Parameters for one resolution pass.

    indent_unit is the number of whitespace columns per indentation step.
    tab_width is the tab stop spacing used when measuring leading tabs.
    """

    indent_unit: int
    tab_width: int = DEFAULT_TAB_WIDTH

    def __post_init__(self) -> None:
        if isinstance(self.indent_unit, bool) or not isinstance(self.indent_unit, int):
            raise FoldConfigError(f"indent_unit must be an int, got {self.indent_unit!r}")
        if self.indent_unit <= 0:
            raise FoldConfigError(f"indent_unit must be > 0, got {self.indent_unit}")
        if isinstance(self.tab_width, bool) or not isinstance(self.tab_width, int):
            raise FoldConfigError(f"tab_width must be an int, got {self.tab_width!r}")
        if self.tab_width <= 0:
            raise FoldConfigError(f"tab_width must be > 0, got {self.tab_width}")


@dataclass(frozen=True, slots=True)
class SourceLine:
    """Classified source line.

    indent_depth is measured for blank lines too; the assigner ignores it
    there because blank lines are always Undefined.
    """

    line_number: int
    text: str
    is_blank: bool
    indent_depth: int

    def __post_init__(self) -> None:
        if self.line_number < 1:
            raise ValueError(f"line_number must be >= 1, got {self.line_number}")
        if self.indent_depth < 0:
            raise ValueError(f"indent_depth must be >= 0, got {self.indent_depth}")


# ---------------------------------------------------------------------------
# RawLevel: tagged union produced by the level assigner
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Fixed:
    """Definite fold level for a non-blank line."""

    level: int

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError(f"Fixed.level must be >= 0, got {self.level}")


@dataclass(frozen=True, slots=True)
class Opens:
    """Header line that starts a nested fold.

    level is the depth of the body the header opens; header_depth is the
    header's own indent depth, i.e. the level active outside that body.
    """

    level: int
    header_depth: int

    def __post_init__(self) -> None:
        if self.header_depth < 0:
            raise ValueError(f"Opens.header_depth must be >= 0, got {self.header_depth}")
        if self.level <= self.header_depth:
            raise ValueError(
                f"Opens.level ({self.level}) must be > header_depth ({self.header_depth})"
            )


@dataclass(frozen=True, slots=True)
class Undefined:
    """Blank line whose level comes from its neighbours."""


RawLevel: TypeAlias = Fixed | Opens | Undefined


def raw_level_label(raw: RawLevel) -> str:
    """Compact label used in reports: ``"3"``, ``">2"`` or ``"-"``."""
    match raw:
        case Fixed(level=level):
            return str(level)
        case Opens(level=level):
            return f">{level}"
        case Undefined():
            return "-"


# ---------------------------------------------------------------------------
# Fold structure
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True)
class FoldSpan:
    """Maximal run of lines whose resolved level is >= ``level``."""

    start_line: int
    end_line: int
    level: int

    def __post_init__(self) -> None:
        if self.start_line < 1:
            raise ValueError(f"start_line must be >= 1, got {self.start_line}")
        if self.end_line < self.start_line:
            raise ValueError(
                f"end_line ({self.end_line}) must be >= start_line ({self.start_line})"
            )
        if self.level < 1:
            raise ValueError(f"fold level must be >= 1, got {self.level}")

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1

    def contains(self, line_number: int) -> bool:
        return self.start_line <= line_number <= self.end_line


@dataclass(frozen=True, slots=True)
class FoldNode:
    """Fold span with the spans nested directly inside it."""

    span: FoldSpan
    children: tuple[FoldNode, ...] = field(default_factory=tuple)
