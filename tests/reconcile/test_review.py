"""Tests for per-change review state and decision parsing."""

import pytest

from diff_review.reconcile.review import (
    ChangeReview, ChangeStatus, DecisionParseError, ReviewError,
    parse_decision, parse_decisions,
)

BEFORE = "a\nb\nc\nd\ne\n"
AFTER = "a\nB\nc\nD\ne\nf\n"   # two replacements and one addition


@pytest.fixture
def review():
    return ChangeReview(BEFORE, AFTER)


class TestInitialState:
    def test_all_groups_pending(self, review):
        assert len(review.groups) == 3
        assert review.statuses == [ChangeStatus.PENDING] * 3
        assert review.pending_count == 3
        assert review.has_pending

    def test_no_changes(self):
        review = ChangeReview("same\n", "same")
        assert review.groups == []
        assert not review.has_pending
        assert review.resolve() == "same"

    def test_from_contents_accepts_none(self):
        review = ChangeReview.from_contents(None, "x\n")
        assert review.before == ""
        assert len(review.groups) == 1
        assert review.groups[0].is_addition


class TestStatusUpdates:
    def test_approve_and_reject(self, review):
        review.approve(0)
        review.reject(2)
        assert review.statuses == [
            ChangeStatus.APPROVED, ChangeStatus.PENDING, ChangeStatus.REJECTED,
        ]
        assert review.status(1) is ChangeStatus.PENDING
        assert review.pending_count == 1

    def test_reject_all_keeps_decided_groups(self, review):
        review.approve(1)
        changed = review.reject_all()
        assert changed == 2
        assert review.statuses == [
            ChangeStatus.REJECTED, ChangeStatus.APPROVED, ChangeStatus.REJECTED,
        ]
        assert not review.has_pending

    def test_approve_all_keeps_decided_groups(self, review):
        review.reject(0)
        assert review.approve_all() == 2
        assert review.statuses[0] is ChangeStatus.REJECTED

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range(self, review, index):
        with pytest.raises(ReviewError):
            review.approve(index)

    def test_statuses_is_a_copy(self, review):
        review.statuses.append(ChangeStatus.APPROVED)
        assert len(review.statuses) == 3


class TestResolution:
    def test_decisions_with_pending_accepted(self, review):
        review.reject(1)
        assert review.decisions() == [True, False, True]

    def test_decisions_with_pending_rejected(self, review):
        review.approve(1)
        assert review.decisions(pending_default=False) == [False, True, False]

    def test_resolve_all_pending_accepts(self, review):
        assert review.resolve() == AFTER

    def test_resolve_all_pending_rejected(self, review):
        assert review.resolve(pending_default=False) == BEFORE

    def test_resolve_partial(self, review):
        review.approve(0)
        review.reject(1)
        review.reject(2)
        assert review.resolve() == "a\nB\nc\nd\ne\n"


class TestParseDecisions:
    @pytest.mark.parametrize("token, expected", [
        ("1", True), ("0", False), ("YES", True), ("no", False),
        ("accept", True), ("Reject", False), (" a ", True), ("r", False),
        ("true", True), ("False", False),
    ])
    def test_parse_decision(self, token, expected):
        assert parse_decision(token) is expected

    def test_parse_vector(self):
        assert parse_decisions("1,0, accept") == [True, False, True]
        assert parse_decisions("y n\ty") == [True, False, True]

    def test_empty_vector(self):
        assert parse_decisions("") == []
        assert parse_decisions(" , ") == []

    def test_invalid_token(self):
        with pytest.raises(DecisionParseError):
            parse_decisions("1,maybe")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_decision("2")
