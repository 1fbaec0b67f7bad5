# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .app_service import AppService
from .review_service import ReviewService
from .visibility import issue_user_token, newest_first, visible

__all__ = [
    "AppService",
    "ReviewService",
    "issue_user_token",
    "newest_first",
    "visible",
]
