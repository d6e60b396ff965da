# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .post_store import PostStore, StorePoisonedError, seed_demo_posts

__all__ = [
    "PostStore",
    "StorePoisonedError",
    "seed_demo_posts",
]
