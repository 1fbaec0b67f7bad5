# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - apps.py: App catalog, search and ratings endpoints
# - reviews.py: Review submission, listing and moderation endpoints
# - pages.py: The two HTML entry points (/ and /admin)
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import apps
from . import reviews
from . import pages

__all__ = [
    "health",
    "apps",
    "reviews",
    "pages",
]
