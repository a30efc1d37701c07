"""Tests for grouping hunks into reviewable changes."""

from diff_review.reconcile.grouping import ChangeGroup, group_into_changes
from diff_review.reconcile.hunks import Hunk, HunkKind, compute_hunks


def _removed(after_line, before_line=1, lines=("x",)):
    return Hunk(HunkKind.REMOVED, after_line, before_line, len(lines), lines)


def _added(after_line, before_line=1, lines=("y",)):
    return Hunk(HunkKind.ADDED, after_line, before_line, len(lines), lines)


class TestGroupIntoChanges:
    def test_empty(self):
        assert group_into_changes([]) == []

    def test_single_added_hunk(self):
        groups = group_into_changes(compute_hunks("a\n", "a\nb\n"))
        assert len(groups) == 1
        assert groups[0].index == 0
        assert groups[0].is_addition
        assert groups[0].hunks[0].kind is HunkKind.ADDED

    def test_single_removed_hunk(self):
        groups = group_into_changes(compute_hunks("a\nb\n", "a\n"))
        assert len(groups) == 1
        assert groups[0].is_removal

    def test_replacement_is_one_group(self):
        groups = group_into_changes(compute_hunks("a\nb\nc\n", "a\nx\nc\n"))
        assert len(groups) == 1
        group = groups[0]
        assert group.is_replacement
        assert [h.kind for h in group.hunks] == [HunkKind.REMOVED, HunkKind.ADDED]
        assert group.removed_lines == ["b"]
        assert group.added_lines == ["x"]
        assert group.start_line == 2
        assert all(h.after_start_line == 2 for h in group.hunks)

    def test_separate_changes_get_sequential_indices(self):
        groups = group_into_changes(
            compute_hunks("a\nb\nc\nd\ne\n", "a\nB\nc\nD\ne\n")
        )
        assert [g.index for g in groups] == [0, 1]
        assert [g.start_line for g in groups] == [2, 4]

    def test_replacement_then_pure_addition(self):
        groups = group_into_changes(compute_hunks("a\nb\nc\n", "a\nB\nc\nf\n"))
        assert len(groups) == 2
        assert groups[0].is_replacement
        assert groups[1].is_addition
        assert groups[1].index == 1

    def test_removed_and_added_at_different_lines_stay_apart(self):
        groups = group_into_changes([_removed(2), _added(3)])
        assert len(groups) == 2
        assert all(len(g.hunks) == 1 for g in groups)

    def test_added_before_removed_not_merged(self):
        groups = group_into_changes([_added(2), _removed(3)])
        assert len(groups) == 2

    def test_two_removals_not_merged(self):
        groups = group_into_changes([_removed(2), _removed(2, before_line=5)])
        assert len(groups) == 2

    def test_pairing_consumes_added_hunk(self):
        hunks = [_removed(2), _added(2), _added(2, before_line=4)]
        groups = group_into_changes(hunks)
        assert [len(g.hunks) for g in groups] == [2, 1]
        assert groups[1].hunks[0] is hunks[2]

    def test_accounting_matches_hunk_count(self):
        hunks = compute_hunks(
            "1\n2\n3\n4\n5\n6\n7\n", "1\ntwo\n3\n5\n6\nsix\n7\n8\n",
        )
        groups = group_into_changes(hunks)
        assert sum(len(g.hunks) for g in groups) == len(hunks)
        flattened = [h for g in groups for h in g.hunks]
        assert flattened == hunks

    def test_to_dict(self):
        group = ChangeGroup(index=0, hunks=(_removed(2), _added(2)))
        data = group.to_dict()
        assert data["index"] == 0
        assert data["start_line"] == 2
        assert [h["kind"] for h in data["hunks"]] == ["removed", "added"]
