"""
Change grouping — merges a removal immediately followed by an addition
at the same after-line into one replacement, so the user accepts or
rejects it as a single edit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .hunks import Hunk, HunkKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeGroup:
    """One reviewable change: a lone hunk, or a removed + added pair."""
    index: int
    hunks: tuple[Hunk, ...]

    @property
    def start_line(self) -> int:
        return self.hunks[0].after_start_line

    @property
    def is_replacement(self) -> bool:
        return len(self.hunks) == 2

    @property
    def is_addition(self) -> bool:
        return len(self.hunks) == 1 and self.hunks[0].kind is HunkKind.ADDED

    @property
    def is_removal(self) -> bool:
        return len(self.hunks) == 1 and self.hunks[0].kind is HunkKind.REMOVED

    @property
    def removed_lines(self) -> list[str]:
        return [line for h in self.hunks if h.kind is HunkKind.REMOVED
                for line in h.lines]

    @property
    def added_lines(self) -> list[str]:
        return [line for h in self.hunks if h.kind is HunkKind.ADDED
                for line in h.lines]

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "start_line": self.start_line,
            "hunks": [h.to_dict() for h in self.hunks],
        }


def _is_replacement_pair(removed: Hunk, added: Hunk) -> bool:
    return (
        removed.kind is HunkKind.REMOVED
        and added.kind is HunkKind.ADDED
        and added.after_start_line == removed.after_start_line
    )


def group_into_changes(hunks: Sequence[Hunk]) -> list[ChangeGroup]:
    """Group hunks into change groups, indexed in discovery order."""
    groups: list[ChangeGroup] = []
    i = 0
    while i < len(hunks):
        if i + 1 < len(hunks) and _is_replacement_pair(hunks[i], hunks[i + 1]):
            members = (hunks[i], hunks[i + 1])
        else:
            members = (hunks[i],)
        groups.append(ChangeGroup(index=len(groups), hunks=members))
        i += len(members)

    logger.debug(
        "[DiffReview] Grouped %d hunk(s) into %d change(s)",
        len(hunks), len(groups),
    )
    return groups
