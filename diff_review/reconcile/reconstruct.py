"""
Content reconstruction — rebuilds a file body from per-change
accept/reject decisions.

Reconstruction replays the span list directly instead of reading the
already-built hunks and groups, so the group numbering here follows the
same pairing rule as :func:`group_into_changes` by construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .spans import (
    LineDiffer, Span, SpanKind, normalize_trailing_newline, normalized_spans,
)

logger = logging.getLogger(__name__)


@dataclass
class _Replay:
    """Fold accumulator for :func:`reconstruct`."""
    decisions: Sequence[bool]
    group_index: int = 0
    output: list[str] = field(default_factory=list)

    def decide(self) -> bool:
        """Return the decision for the current group and move to the next.

        Groups beyond the end of the decision vector are accepted.
        """
        index = self.group_index
        self.group_index += 1
        if index < len(self.decisions):
            return bool(self.decisions[index])
        return True


def _is_replacement(spans: Sequence[Span], i: int) -> bool:
    return (
        spans[i].kind is SpanKind.REMOVED
        and i + 1 < len(spans)
        and spans[i + 1].kind is SpanKind.ADDED
    )


def reconstruct(
    before: str,
    after: str,
    decisions: Sequence[bool],
    differ: Optional[LineDiffer] = None,
) -> str:
    """Build the file content that results from applying *decisions*.

    ``decisions[i]`` accepts (``True``) or rejects (``False``) change
    group *i*. Missing entries are accepted; surplus entries are ignored.
    """
    if before == after:
        return after

    spans = normalized_spans(before, after, differ)
    if not spans:
        # Only the trailing newline differs; nothing to decide.
        return after

    replay = _Replay(decisions=decisions)
    i = 0
    while i < len(spans):
        span = spans[i]
        if span.kind is SpanKind.EQUAL:
            replay.output.append(span.text)
            i += 1
        elif _is_replacement(spans, i):
            chosen = spans[i + 1] if replay.decide() else span
            replay.output.append(chosen.text)
            i += 2
        elif span.kind is SpanKind.REMOVED:
            if not replay.decide():
                replay.output.append(span.text)
            i += 1
        elif span.kind is SpanKind.ADDED:
            if replay.decide():
                replay.output.append(span.text)
            i += 1
        else:
            raise AssertionError(f"unhandled span kind: {span.kind!r}")

    if replay.group_index != len(decisions):
        logger.debug(
            "[DiffReview] Decision vector has %d entries for %d change(s)",
            len(decisions), replay.group_index,
        )

    result = "".join(replay.output)
    added_newline = normalize_trailing_newline(after) != after
    if added_newline and result.endswith("\n"):
        result = result[:-1]
    return result
