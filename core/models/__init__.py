# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - post.py: Post and Author schemas (the JSON wire contract)
# =============================================================================

from .post import Author, Post

__all__ = [
    "Author",
    "Post",
]
