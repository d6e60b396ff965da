# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - feed.py: The feed (all posts)
# - posts.py: Publishing and fetching single posts
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import feed
from . import posts

__all__ = [
    "health",
    "feed",
    "posts",
]
