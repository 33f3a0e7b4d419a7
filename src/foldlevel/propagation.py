"""Resolution of Undefined (blank-line) levels from their neighbours.

Each maximal run of Undefined lines takes the smaller of two values:

* the level of the tagged line just before the run. An ``Opens`` header
  counts at the level it opens, since the run sits inside that block.
* the level of the tagged line just after the run. An ``Opens`` header
  counts at its own ``header_depth``, since its block starts below the run.

File edges count as 0. The whole pass is one forward sweep.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from foldlevel.types import Fixed, Opens, RawLevel, Undefined


log = logging.getLogger(__name__)


def resolved_level(raw: RawLevel) -> int | None:
    """Own level of a tagged line; None for Undefined."""
    match raw:
        case Fixed(level=level):
            return level
        case Opens(level=level):
            return level
        case Undefined():
            return None


def _level_toward_preceding_run(raw: RawLevel) -> int:
    match raw:
        case Fixed(level=level):
            return level
        case Opens(header_depth=header_depth):
            return header_depth
        case Undefined():
            raise ValueError("Undefined has no level")


def propagate_levels(raw_levels: Sequence[RawLevel]) -> list[int]:
    """Resolve every raw tag to a non-negative integer level."""

    out: list[int] = []
    previous_level = 0
    pending_blanks = 0
    for raw in raw_levels:
        own = resolved_level(raw)
        if own is None:
            pending_blanks += 1
            continue
        if pending_blanks:
            fill = min(previous_level, _level_toward_preceding_run(raw))
            out.extend([fill] * pending_blanks)
            pending_blanks = 0
        out.append(own)
        previous_level = own

    if pending_blanks:
        out.extend([0] * pending_blanks)

    log.debug(
        "propagated %d raw levels (max level %d)",
        len(out),
        max(out, default=0),
    )
    return out
