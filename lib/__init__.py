# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - serialization.py: JSON codec for posts and feeds
# - utils.py: Shared utilities (UTC helpers, base error class)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import ApplicationError, ensure_utc, utc_now

__all__ = [
    "ApplicationError",
    "ensure_utc",
    "utc_now",
]
