"""
diff_review — accept/reject reconciliation for AI-proposed file edits.

Public API for library usage::

    from diff_review import compute_hunks, group_into_changes, reconstruct

    groups = group_into_changes(compute_hunks(before, after))
    merged = reconstruct(before, after, [True, False])
"""

from .reconcile import (
    ChangeGroup, ChangeReview, ChangeStatus, DiffResult, Hunk, HunkKind,
    Span, SpanKind, compute_diff_result, compute_hunks, group_into_changes,
    reconstruct,
)

__all__ = [
    "ChangeGroup", "ChangeReview", "ChangeStatus", "DiffResult", "Hunk",
    "HunkKind", "Span", "SpanKind", "compute_diff_result", "compute_hunks",
    "group_into_changes", "reconstruct",
]
