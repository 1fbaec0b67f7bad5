# =============================================================================
# core/services/visibility.py - Review Visibility Rule
# =============================================================================
# Who may see which review, independent of HTTP:
# - approved reviews are public
# - a pending review is shown only to the caller holding the token that was
#   issued when it was submitted
# =============================================================================

import secrets
from typing import Iterable

from core.models.review import ReviewRecord

TOKEN_BYTES = 16


def issue_user_token() -> str:
    """Return a fresh 32-character hex token for one review submission."""
    return secrets.token_hex(TOKEN_BYTES)


def visible(review: ReviewRecord, caller_token: str | None) -> bool:
    """
    Decide whether ``review`` is shown to a caller.

    Args:
        review: The review in question
        caller_token: Token the caller presented, or None/"" for none

    Returns:
        True if the review is approved, or pending and submitted under
        ``caller_token``
    """
    if review.approved:
        return True
    return bool(caller_token) and review.user_id == caller_token


def newest_first(reviews: Iterable[ReviewRecord]) -> list[ReviewRecord]:
    """Sort reviews by creation time, most recent first."""
    return sorted(reviews, key=lambda review: review.created_at, reverse=True)
