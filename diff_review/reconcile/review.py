"""
Per-change review state for one proposed file edit.

The reconcile functions are stateless; this is the caller-side record
of which change groups the user has approved or rejected so far, and
the bridge from those statuses to a decision vector.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import Optional

from .grouping import ChangeGroup, group_into_changes
from .hunks import compute_diff_result
from .reconstruct import reconstruct
from .spans import LineDiffer

logger = logging.getLogger(__name__)

_ACCEPT_TOKENS = {"1", "y", "yes", "true", "accept", "a"}
_REJECT_TOKENS = {"0", "n", "no", "false", "reject", "r"}


class ReviewError(Exception):
    """Raised for an invalid operation on a :class:`ChangeReview`."""


class DecisionParseError(ValueError):
    """Raised when a decision token cannot be read as accept or reject."""


class ChangeStatus(enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


def parse_decision(token: str) -> bool:
    """Read one accept/reject token (``1``/``0``, ``yes``/``no``, ...)."""
    value = token.strip().lower()
    if value in _ACCEPT_TOKENS:
        return True
    if value in _REJECT_TOKENS:
        return False
    raise DecisionParseError(f"Not an accept/reject decision: {token!r}")


def parse_decisions(text: str) -> list[bool]:
    """Parse a comma- or whitespace-separated decision vector.

    >>> parse_decisions("1,0, accept")
    [True, False, True]
    """
    return [parse_decision(tok) for tok in re.split(r"[,\s]+", text) if tok]


class ChangeReview:
    """Accept/reject bookkeeping over the change groups of one file."""

    def __init__(
        self,
        before: str,
        after: str,
        differ: Optional[LineDiffer] = None,
    ) -> None:
        self.before = before
        self.after = after
        self._differ = differ

        result = compute_diff_result(before, after, differ)
        self.groups: list[ChangeGroup] = (
            group_into_changes(result.hunks) if result else []
        )
        self._statuses = [ChangeStatus.PENDING] * len(self.groups)

    @classmethod
    def from_contents(
        cls,
        before: Optional[str],
        after: Optional[str],
        differ: Optional[LineDiffer] = None,
    ) -> "ChangeReview":
        return cls(before or "", after or "", differ)

    # ------------------------------------------------------------------
    # Status queries
    # ------------------------------------------------------------------

    @property
    def statuses(self) -> list[ChangeStatus]:
        return list(self._statuses)

    def status(self, index: int) -> ChangeStatus:
        return self._statuses[self._check_index(index)]

    @property
    def pending_count(self) -> int:
        return sum(1 for s in self._statuses if s is ChangeStatus.PENDING)

    @property
    def has_pending(self) -> bool:
        return self.pending_count > 0

    # ------------------------------------------------------------------
    # Status updates
    # ------------------------------------------------------------------

    def approve(self, index: int) -> None:
        self._set(index, ChangeStatus.APPROVED)

    def reject(self, index: int) -> None:
        self._set(index, ChangeStatus.REJECTED)

    def approve_all(self) -> int:
        """Approve every pending group. Returns how many were changed."""
        return self._set_pending(ChangeStatus.APPROVED)

    def reject_all(self) -> int:
        """Reject every pending group. Returns how many were changed."""
        return self._set_pending(ChangeStatus.REJECTED)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def decisions(self, pending_default: bool = True) -> list[bool]:
        """Return the decision vector; pending groups get *pending_default*."""
        return [
            pending_default if s is ChangeStatus.PENDING
            else s is ChangeStatus.APPROVED
            for s in self._statuses
        ]

    def resolve(self, pending_default: bool = True) -> str:
        """Reconstruct the file content from the current statuses."""
        return reconstruct(
            self.before, self.after,
            self.decisions(pending_default), self._differ,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._statuses):
            raise ReviewError(
                f"Change index {index} out of range "
                f"(file has {len(self._statuses)} change(s))"
            )
        return index

    def _set(self, index: int, status: ChangeStatus) -> None:
        self._statuses[self._check_index(index)] = status
        logger.debug("[DiffReview] Change %d marked %s", index, status.value)

    def _set_pending(self, status: ChangeStatus) -> int:
        changed = 0
        for i, current in enumerate(self._statuses):
            if current is ChangeStatus.PENDING:
                self._statuses[i] = status
                changed += 1
        return changed
