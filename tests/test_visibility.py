# =============================================================================
# tests/test_visibility.py - Review Visibility Rule Tests
# =============================================================================
# The rule is tested here without HTTP or a store.
# =============================================================================

from datetime import datetime, timedelta, timezone

import pytest

from core.models.review import ReviewRecord
from core.services.visibility import issue_user_token, newest_first, visible

T0 = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)


def make_review(approved: bool = False, user_id: str = "token-a", minutes: int = 0) -> ReviewRecord:
    return ReviewRecord(
        id=f"review-{minutes}",
        app_id="app-1",
        name="Ann",
        rating=4,
        approved=approved,
        user_id=user_id,
        created_at=T0 + timedelta(minutes=minutes),
    )


class TestVisible:
    """Tests for visible(review, caller_token)."""

    def test_pending_visible_to_its_author(self):
        assert visible(make_review(user_id="token-a"), "token-a") is True

    def test_pending_hidden_from_other_tokens(self):
        assert visible(make_review(user_id="token-a"), "token-b") is False

    @pytest.mark.parametrize("caller_token", [None, ""])
    def test_pending_hidden_without_token(self, caller_token):
        assert visible(make_review(), caller_token) is False

    @pytest.mark.parametrize("caller_token", [None, "", "token-a", "token-b"])
    def test_approved_visible_to_everyone(self, caller_token):
        assert visible(make_review(approved=True, user_id="token-a"), caller_token) is True


class TestIssueUserToken:
    """Tests for submission tokens."""

    def test_token_is_32_hex_chars(self):
        token = issue_user_token()

        assert len(token) == 32
        int(token, 16)

    def test_tokens_are_never_reused(self):
        tokens = {issue_user_token() for _ in range(100)}

        assert len(tokens) == 100


class TestNewestFirst:
    def test_sorts_descending_by_creation(self):
        older, newer, newest = make_review(minutes=1), make_review(minutes=5), make_review(minutes=9)

        assert newest_first([newer, older, newest]) == [newest, newer, older]
