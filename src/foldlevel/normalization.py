"""Deterministic line splitting for fold resolution."""

from __future__ import annotations


_BOM = "\ufeff"


def normalize_source_text(text: str) -> str:
    """Normalize raw file text before splitting.

    Current deterministic transforms:
    1. Drop a leading byte-order mark.
    2. Collapse CRLF and CR to LF.
    3. Convert non-breaking space to plain space.
    """

    raw = text or ""
    if raw.startswith(_BOM):
        raw = raw[1:]
    out: list[str] = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch == "\r":
            out.append("\n")
            if i + 1 < len(raw) and raw[i + 1] == "\n":
                i += 1
        elif ch == "\u00a0":
            out.append(" ")
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def split_source_lines(text: str) -> tuple[str, ...]:
    """Split file text into lines the way an editor buffer holds them.

    A single trailing newline terminates the last line rather than starting
    an empty one, so ``"a\\n"`` is one line and ``"a\\n\\n"`` is two.
    Empty text has no lines.
    """

    normalized = normalize_source_text(text)
    if not normalized:
        return ()
    if normalized.endswith("\n"):
        normalized = normalized[:-1]
    return tuple(normalized.split("\n"))
