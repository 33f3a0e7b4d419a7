"""I/O utilities for source text and orjson-encoded reports."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import orjson


def read_source_text(path: Path | str) -> str:
    """Read a source file, or stdin when ``path`` is ``"-"``.

    Bytes that are not valid UTF-8 are replaced rather than rejected, since
    only leading whitespace matters for folding.
    """
    if str(path) == "-":
        raw = sys.stdin.buffer.read()
    else:
        raw = Path(path).read_bytes()
    return raw.decode("utf-8", errors="replace")


def dumps_json(obj: Any, *, pretty: bool = True) -> str:
    """Encode an object as JSON text with sorted keys."""
    opts = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS if pretty else orjson.OPT_SORT_KEYS
    return orjson.dumps(obj, option=opts).decode("utf-8")


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_json(obj, pretty=pretty) + "\n", encoding="utf-8")


def load_json(path: Path) -> Any:
    return orjson.loads(path.read_bytes())
