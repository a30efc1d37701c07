"""
Line-diff primitive — turns two texts into an ordered list of tagged
spans (equal / added / removed), each carrying its literal text.

Anything that returns spans satisfying the round-trip contract can be
plugged in through the ``differ`` argument of the public functions:
concatenating the EQUAL and REMOVED spans must give ``before`` back, and
concatenating the EQUAL and ADDED spans must give ``after`` back.
"""

from __future__ import annotations

import difflib
import enum
from dataclasses import dataclass
from typing import Callable, Optional


class SpanKind(enum.Enum):
    EQUAL = "equal"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class Span:
    """A contiguous run of lines with one diff tag."""
    kind: SpanKind
    text: str

    @property
    def lines(self) -> list[str]:
        return split_lines(self.text)

    @property
    def line_count(self) -> int:
        return len(self.lines)


LineDiffer = Callable[[str, str], list[Span]]


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n`` without producing a phantom last line.

    ``"a\\nb\\n"`` gives ``["a", "b"]``, ``"\\n"`` gives ``[""]`` and the
    empty string gives ``[]``.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def normalize_trailing_newline(text: str) -> str:
    """Make a non-empty *text* end in a newline."""
    if text and not text.endswith("\n"):
        return text + "\n"
    return text


def _keepend_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, keeping the terminators."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def diff_lines(before: str, after: str) -> list[Span]:
    """Default line differ built on :class:`difflib.SequenceMatcher`.

    A ``replace`` opcode is emitted as a REMOVED span immediately
    followed by an ADDED span.
    """
    before_lines = _keepend_lines(before)
    after_lines = _keepend_lines(after)

    matcher = difflib.SequenceMatcher(
        isjunk=None, a=before_lines, b=after_lines, autojunk=False
    )

    spans: list[Span] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        removed = "".join(before_lines[i1:i2])
        added = "".join(after_lines[j1:j2])
        if tag == "equal":
            spans.append(Span(SpanKind.EQUAL, removed))
            continue
        if removed:
            spans.append(Span(SpanKind.REMOVED, removed))
        if added:
            spans.append(Span(SpanKind.ADDED, added))
    return spans


def normalized_spans(
    before: str,
    after: str,
    differ: Optional[LineDiffer] = None,
) -> list[Span]:
    """Diff *before* and *after* after normalising their trailing newlines.

    Returns an empty list when the two normalised texts are equal. Spans
    with empty text are dropped so that hunk grouping and reconstruction
    both see a REMOVED span directly followed by its ADDED partner.
    """
    before = normalize_trailing_newline(before)
    after = normalize_trailing_newline(after)
    if before == after:
        return []
    return [span for span in (differ or diff_lines)(before, after) if span.text]
