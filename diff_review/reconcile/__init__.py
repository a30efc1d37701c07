"""Diff reconciliation — hunks, change groups and accept/reject rebuilds."""

from .spans import Span, SpanKind, LineDiffer, diff_lines, split_lines, normalize_trailing_newline
from .hunks import Hunk, HunkKind, DiffResult, LineCursor, compute_hunks, compute_diff_result
from .grouping import ChangeGroup, group_into_changes
from .reconstruct import reconstruct
from .review import (
    ChangeReview, ChangeStatus, ReviewError, DecisionParseError,
    parse_decision, parse_decisions,
)

__all__ = [
    "Span", "SpanKind", "LineDiffer", "diff_lines", "split_lines",
    "normalize_trailing_newline",
    "Hunk", "HunkKind", "DiffResult", "LineCursor",
    "compute_hunks", "compute_diff_result",
    "ChangeGroup", "group_into_changes",
    "reconstruct",
    "ChangeReview", "ChangeStatus", "ReviewError", "DecisionParseError",
    "parse_decision", "parse_decisions",
]
