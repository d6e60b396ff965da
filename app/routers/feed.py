# =============================================================================
# app/routers/feed.py - Feed Endpoint
# =============================================================================
# GET /feed returns every post in insertion order as a JSON array.
# =============================================================================

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from app.dependencies import PostStoreDep
from app.exceptions import FeedRenderError
from lib.serialization import PostEncodeError, encode_feed

logger = logging.getLogger(__name__)

router = APIRouter()


# Declared sync so FastAPI runs it on its worker thread pool.
@router.get("/feed")
def list_feed(store: PostStoreDep):
    """
    List the feed.

    Returns all posts, oldest first. An empty store gives `[]`.
    """
    posts = store.list()

    try:
        payload = encode_feed(posts)
    except PostEncodeError as e:
        raise FeedRenderError(e.message) from e

    return Response(content=payload, status_code=200)
