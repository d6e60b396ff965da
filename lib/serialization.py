# =============================================================================
# lib/serialization.py - Post JSON Codec
# =============================================================================
# Converts posts to and from their JSON wire form using pydantic.
#
# Usage:
#   from lib.serialization import decode_post, encode_feed
#
#   post = decode_post('{"summary": "s", ...}')
#   payload = encode_feed(store.list())
# =============================================================================

from collections.abc import Sequence
from uuid import UUID

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from core.models.post import Post
from lib.utils import ApplicationError


_FEED_ADAPTER = TypeAdapter(list[Post])
_POST_ID_ADAPTER = TypeAdapter(UUID)


class PostDecodeError(ApplicationError):
    """Raised when a payload is not valid JSON or does not match the Post shape."""

    def __init__(self, message: str):
        super().__init__(
            message,
            code="POST_DECODE_ERROR",
            suggestion=(
                "Send a JSON object with summary, contents, author_handle, "
                "date_time and uuid"
            ),
        )


class PostIdDecodeError(ApplicationError):
    """Raised when a post id is not a well-formed UUID."""

    def __init__(self, message: str):
        super().__init__(message, code="POST_ID_DECODE_ERROR")


class PostEncodeError(ApplicationError):
    """Raised when a post (or a list of posts) cannot be rendered as JSON."""

    def __init__(self, message: str):
        super().__init__(message, code="POST_ENCODE_ERROR")


def _describe(exc: ValidationError) -> str:
    """Flatten a ValidationError into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        if location:
            parts.append(f"{location}: {error['msg']}")
        else:
            parts.append(error["msg"])
    return "; ".join(parts)


def decode_post(payload: str | bytes) -> Post:
    """
    Parse a JSON payload into a Post.

    Args:
        payload: Raw JSON text received from a client

    Returns:
        The validated Post

    Raises:
        PostDecodeError: If the payload is not JSON or is missing fields
    """
    try:
        return Post.model_validate_json(payload)
    except ValidationError as e:
        raise PostDecodeError(f"Invalid post payload: {_describe(e)}") from e


def decode_post_id(value: str) -> UUID:
    """
    Parse a post id the same way the uuid field of a Post is parsed.

    Raises:
        PostIdDecodeError: If the value is not a well-formed UUID
    """
    try:
        return _POST_ID_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise PostIdDecodeError(_describe(e)) from e


def encode_post(post: Post) -> bytes:
    """
    Serialize one post to JSON.

    Raises:
        PostEncodeError: If serialization fails
    """
    try:
        return post.model_dump_json().encode("utf-8")
    except PydanticSerializationError as e:
        raise PostEncodeError(f"Failed to serialize post {post.uuid}: {e}") from e


def encode_feed(posts: Sequence[Post]) -> bytes:
    """
    Serialize a sequence of posts to a JSON array.

    Raises:
        PostEncodeError: If serialization fails
    """
    try:
        return _FEED_ADAPTER.dump_json(list(posts))
    except PydanticSerializationError as e:
        raise PostEncodeError(f"Failed to serialize feed: {e}") from e
