"""Line classification: blank detection and indentation depth."""

from __future__ import annotations

from collections.abc import Sequence

from foldlevel.types import FoldConfig, SourceLine


def is_blank(text: str) -> bool:
    """True when the line holds only whitespace or nothing."""
    return text.strip() == ""


def measure_indent(text: str, tab_width: int) -> int:
    """Width of the leading whitespace in columns.

    Spaces count one column; a tab advances to the next tab stop. Any other
    whitespace character (form feed, vertical tab) counts one column.
    """
    width = 0
    for ch in text:
        if ch == "\t":
            width += tab_width - (width % tab_width)
        elif ch.isspace() and ch not in "\n\r":
            width += 1
        else:
            break
    return width


def indent_depth(lines: Sequence[str], index: int | None, config: FoldConfig) -> int:
    """Indentation depth of ``lines[index]`` in units of ``config.indent_unit``.

    ``index`` of None stands for "no such line" and yields depth 0, so the
    last content line compares as if followed by a top-level line.
    """
    if index is None:
        return 0
    if index < 0 or index >= len(lines):
        raise IndexError(f"line index {index} out of range for {len(lines)} lines")
    return measure_indent(lines[index], config.tab_width) // config.indent_unit


def classify_line(lines: Sequence[str], index: int, config: FoldConfig) -> SourceLine:
    text = lines[index]
    return SourceLine(
        line_number=index + 1,
        text=text,
        is_blank=is_blank(text),
        indent_depth=indent_depth(lines, index, config),
    )
