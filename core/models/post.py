# =============================================================================
# core/models/post.py - Post and Author Schemas
# =============================================================================
# These models define the wire contract for posts:
# - Author: who wrote a post (only the handle is tracked)
# - Post: one immutable published item, keyed by a client-supplied UUID
#
# Field names are fixed for wire compatibility with existing clients.
# Both models are frozen: once built, a post never changes.
# =============================================================================

import re
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lib.utils import ensure_utc

# Date, then a time of day; pydantic parses the rest
_ISO_DATETIME = re.compile(r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}")


class Author(BaseModel):
    """
    The author of a post.

    Identity is the handle string; uniqueness is not enforced anywhere.
    """

    model_config = ConfigDict(frozen=True)

    handle: str = Field(
        ...,
        description="Public handle shown next to each post"
    )


class Post(BaseModel):
    """
    A single published post.

    Posts are created once and never edited. The `uuid` is supplied by the
    client and is the only key used for lookups.

    Example:
        {
            "summary": "First post",
            "contents": "This is the first post ever",
            "author_handle": "Mathieu",
            "date_time": "2024-01-01T00:00:00Z",
            "uuid": "ed8729be-f33e-4395-b1c0-f5673668f89e"
        }
    """

    model_config = ConfigDict(frozen=True)

    # Short headline displayed in the feed
    summary: str = Field(
        ...,
        description="Short summary shown in the feed"
    )

    # Full body of the post (may be empty)
    contents: str = Field(
        ...,
        description="Full text of the post"
    )

    # Copied from the Author at creation time; no reference is kept
    author_handle: str = Field(
        ...,
        description="Handle of the author"
    )

    date_time: datetime = Field(
        ...,
        description="Publication time (UTC)"
    )

    uuid: UUID = Field(
        ...,
        description="Unique post identifier, chosen by the client"
    )

    @field_validator("date_time", mode="before")
    @classmethod
    def _require_iso_date_time(cls, value: Any) -> Any:
        """Reject Unix timestamps and date-only strings."""
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not _ISO_DATETIME.match(value):
            raise ValueError("date_time must be an ISO-8601 date and time string")
        return value

    @field_validator("date_time")
    @classmethod
    def _normalize_date_time(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @classmethod
    def new(
        cls,
        summary: str,
        contents: str,
        author: Author,
        date_time: datetime,
        uuid: UUID,
    ) -> "Post":
        """
        Build a post written by `author`.

        Only the author's handle is copied into the post.
        """
        return cls(
            summary=summary,
            contents=contents,
            author_handle=author.handle,
            date_time=date_time,
            uuid=uuid,
        )

    @property
    def id(self) -> UUID:
        """The lookup key of this post."""
        return self.uuid
