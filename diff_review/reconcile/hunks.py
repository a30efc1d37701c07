"""
Hunk extraction — walks the span list and emits positioned hunks
relative to the "after" document.

Added hunks map directly onto after-document lines. Removed hunks have
no footprint in the after document; they are anchored to the after line
where the deletion happened so a viewer can attach them there.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from typing import Optional

from .spans import LineDiffer, Span, SpanKind, normalized_spans

logger = logging.getLogger(__name__)


class HunkKind(enum.Enum):
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class Hunk:
    """A maximal contiguous run of added or removed lines."""
    kind: HunkKind
    after_start_line: int      # 1-indexed, in the after document
    before_start_line: int     # 1-indexed, in the before document
    line_count: int
    lines: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "after_start_line": self.after_start_line,
            "before_start_line": self.before_start_line,
            "line_count": self.line_count,
            "lines": list(self.lines),
        }


@dataclass(frozen=True)
class DiffResult:
    """Hunks plus the two (un-normalised) contents they were computed from."""
    hunks: tuple[Hunk, ...]
    before_content: str
    after_content: str


@dataclass(frozen=True)
class LineCursor:
    """Fold accumulator: the next line number in each document."""
    after_line: int = 1
    before_line: int = 1


def advance(cursor: LineCursor, span: Span) -> tuple[LineCursor, Optional[Hunk]]:
    """Consume one span, returning the moved cursor and the hunk it yields."""
    lines = span.lines
    count = len(lines)

    if span.kind is SpanKind.EQUAL:
        return replace(
            cursor,
            after_line=cursor.after_line + count,
            before_line=cursor.before_line + count,
        ), None

    if span.kind is SpanKind.ADDED:
        hunk = Hunk(HunkKind.ADDED, cursor.after_line, cursor.before_line,
                    count, tuple(lines))
        return replace(cursor, after_line=cursor.after_line + count), hunk

    if span.kind is SpanKind.REMOVED:
        hunk = Hunk(HunkKind.REMOVED, cursor.after_line, cursor.before_line,
                    count, tuple(lines))
        return replace(cursor, before_line=cursor.before_line + count), hunk

    raise AssertionError(f"unhandled span kind: {span.kind!r}")


def compute_hunks(
    before: str,
    after: str,
    differ: Optional[LineDiffer] = None,
) -> list[Hunk]:
    """Compute line-level hunks between *before* and *after*.

    Content that differs only by a final trailing newline yields no hunks.
    """
    if before == after:
        return []

    cursor = LineCursor()
    hunks: list[Hunk] = []
    for span in normalized_spans(before, after, differ):
        cursor, hunk = advance(cursor, span)
        if hunk is not None:
            hunks.append(hunk)

    logger.debug("[DiffReview] Computed %d hunk(s)", len(hunks))
    return hunks


def compute_diff_result(
    before: Optional[str] = "",
    after: Optional[str] = "",
    differ: Optional[LineDiffer] = None,
) -> DiffResult | None:
    """Return a :class:`DiffResult`, or ``None`` when there is nothing to show.

    ``None`` inputs are treated as empty strings. The returned result
    keeps the caller's original strings, not the normalised ones.
    """
    before = before or ""
    after = after or ""
    if before == after:
        return None

    hunks = compute_hunks(before, after, differ)
    if not hunks:
        return None

    return DiffResult(hunks=tuple(hunks), before_content=before,
                      after_content=after)
