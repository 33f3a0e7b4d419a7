#!/usr/bin/env python3
"""Resolve per-line fold levels for a source file and emit a report.

Usage:
    python3 scripts/fold_levels.py path/to/file.potion --indent-unit 4
    cat file.potion | python3 scripts/fold_levels.py - --json
    python3 scripts/fold_levels.py file.potion --spans --out artifacts/folds.json

Defaults for --indent-unit and --tab-width come from FOLDLEVEL_INDENT_UNIT
and FOLDLEVEL_TAB_WIDTH when set, else 4.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from foldlevel.io_utils import dumps_json, read_source_text, save_json
from foldlevel.resolver import FoldResolver, resolution_to_dict
from foldlevel.types import FoldConfig, FoldConfigError, FoldNode

log = logging.getLogger("fold_levels")

_DEFAULT_INDENT_UNIT = 4
_DEFAULT_TAB_WIDTH = 4


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise FoldConfigError(f"{name} must be an integer, got {raw!r}") from None


def _render_tree(nodes: tuple[FoldNode, ...], indent: str = "") -> list[str]:
    rows: list[str] = []
    for node in nodes:
        span = node.span
        rows.append(f"{indent}L{span.level} lines {span.start_line}-{span.end_line}")
        rows.extend(_render_tree(node.children, indent + "  "))
    return rows


def main() -> int:
    parser = argparse.ArgumentParser(description="Indentation-based fold level resolver")
    parser.add_argument("path", help="Source file to resolve, or '-' for stdin")
    parser.add_argument(
        "--indent-unit", type=int, default=None,
        help="Whitespace columns per indentation step (default: $FOLDLEVEL_INDENT_UNIT or 4)",
    )
    parser.add_argument(
        "--tab-width", type=int, default=None,
        help="Tab stop spacing (default: $FOLDLEVEL_TAB_WIDTH or 4)",
    )
    parser.add_argument("--spans", action="store_true", help="Print fold spans after the levels")
    parser.add_argument("--tree", action="store_true", help="Print the nested fold tree")
    parser.add_argument("--json", action="store_true", help="Print the full JSON report")
    parser.add_argument("--out", type=Path, default=None, help="Write the JSON report here")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        indent_unit = (
            args.indent_unit
            if args.indent_unit is not None
            else _env_int("FOLDLEVEL_INDENT_UNIT", _DEFAULT_INDENT_UNIT)
        )
        tab_width = (
            args.tab_width
            if args.tab_width is not None
            else _env_int("FOLDLEVEL_TAB_WIDTH", _DEFAULT_TAB_WIDTH)
        )
        config = FoldConfig(indent_unit=indent_unit, tab_width=tab_width)
    except FoldConfigError as exc:
        log.error("Invalid configuration: %s", exc)
        return 2

    try:
        text = read_source_text(args.path)
    except OSError as exc:
        log.error("Cannot read %s: %s", args.path, exc)
        return 2

    resolution = FoldResolver(config).resolve_text(text)
    log.debug("Resolved %d lines, max level %d", len(resolution.lines), resolution.max_level)

    report = resolution_to_dict(resolution)
    if args.out is not None:
        try:
            save_json(report, args.out)
        except OSError as exc:
            log.error("Cannot write %s: %s", args.out, exc)
            return 2
        log.info("Wrote report to %s", args.out)

    if args.json:
        print(dumps_json(report))
        return 0

    for idx, (line, level) in enumerate(zip(resolution.lines, resolution.levels, strict=True), start=1):
        print(f"{idx}\t{level}\t{line}")
    if args.spans:
        print()
        for span in resolution.spans():
            print(f"span\t{span.start_line}\t{span.end_line}\t{span.level}")
    if args.tree:
        print()
        for row in _render_tree(resolution.tree()):
            print(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
