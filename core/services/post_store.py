# =============================================================================
# core/services/post_store.py - In-Memory Post Store
# =============================================================================
# The single piece of shared mutable state in the service.
#
# - Append-only: posts are added, never removed or replaced
# - Thread-safe: every access goes through one lock
# - Fail-fast: if an error escapes while the lock is held, the store is
#   poisoned and refuses all further access
#
# Usage:
#   store = PostStore()
#   store.add(post)
#   store.find_by_id(post.id)
# =============================================================================

import logging
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from uuid import UUID, uuid4

from core.models.post import Author, Post
from lib.utils import ApplicationError, utc_now

logger = logging.getLogger(__name__)


class StorePoisonedError(ApplicationError):
    """Raised on any access to a store whose critical section previously failed."""

    def __init__(self):
        super().__init__(
            "Post store is poisoned: a previous operation failed while holding its lock",
            code="STORE_POISONED",
            suggestion="Restart the process; the in-memory store cannot be trusted",
        )


class PostStore:
    """
    Append-only, thread-safe collection of posts.

    Posts are kept in insertion order. Lookups are a linear scan, which is
    fine for a demonstration workload; an id -> Post index can replace it
    without changing the interface.
    """

    def __init__(self, posts: Iterable[Post] = ()):
        self._posts: list[Post] = list(posts)
        self._lock = threading.Lock()
        self._poisoned = False

    @contextmanager
    def _locked(self) -> Iterator[list[Post]]:
        """
        Hold the lock for the duration of the block.

        Raises:
            StorePoisonedError: If an earlier block raised while holding the lock
        """
        with self._lock:
            if self._poisoned:
                raise StorePoisonedError()
            try:
                yield self._posts
            except BaseException:
                self._poisoned = True
                logger.critical("Post store poisoned by a failure inside its critical section")
                raise

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    def add(self, post: Post) -> None:
        """Append a post. No duplicate-id check is made."""
        with self._locked() as posts:
            posts.append(post)
            count = len(posts)
        logger.debug(f"Stored post {post.uuid} ({count} total)")

    def list(self) -> tuple[Post, ...]:
        """Snapshot of every post, in insertion order."""
        with self._locked() as posts:
            return tuple(posts)

    def find_by_id(self, post_id: UUID) -> Post | None:
        """Return the first post with this id, or None."""
        with self._locked() as posts:
            return next((post for post in posts if post.uuid == post_id), None)

    def __len__(self) -> int:
        with self._locked() as posts:
            return len(posts)


# =============================================================================
# Demo Content
# =============================================================================

def seed_demo_posts(store: PostStore, author_handle: str) -> list[Post]:
    """
    Add the two welcome posts shown on a fresh server.

    Args:
        store: Store to seed
        author_handle: Handle the welcome posts are attributed to

    Returns:
        The posts that were added
    """
    author = Author(handle=author_handle)
    posts = [
        Post.new(
            "First post",
            "This is the first post ever",
            author,
            utc_now(),
            uuid4(),
        ),
        Post.new(
            "Hermes is now online",
            "Today marks the day that Hermes is online!",
            author,
            utc_now(),
            uuid4(),
        ),
    ]
    for post in posts:
        store.add(post)

    logger.info(f"Seeded {len(posts)} demo posts by {author_handle}")
    return posts
