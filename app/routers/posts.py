# =============================================================================
# app/routers/posts.py - Post Endpoints
# =============================================================================
# POST /post       Publish a post supplied by the client (id and timestamp
#                  included) and echo the submitted JSON back.
# GET  /post/{id}  Fetch a single post by UUID.
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from app.dependencies import PostStoreDep, get_path_param
from app.exceptions import (
    InvalidPostIdError,
    MalformedPostError,
    PostNotFoundError,
    PostRenderError,
    UnreadableBodyError,
)
from lib.serialization import (
    PostDecodeError,
    PostEncodeError,
    PostIdDecodeError,
    decode_post,
    decode_post_id,
    encode_post,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/post", status_code=201)
async def create_post(request: Request, store: PostStoreDep):
    """
    Publish a post.

    The body must be a JSON object with summary, contents, author_handle,
    date_time and uuid. The server does not generate ids or timestamps and
    does not check for duplicate ids.

    Returns the submitted payload unchanged with status 201.
    """
    raw = await request.body()

    try:
        payload = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise UnreadableBodyError(str(e)) from e

    try:
        post = decode_post(payload)
    except PostDecodeError as e:
        raise MalformedPostError(e.message) from e

    # The store lock must not be waited on from the event loop
    await run_in_threadpool(store.add, post)
    logger.info(f"Created post {post.uuid} by {post.author_handle}")

    return Response(content=payload, status_code=201)


# The bare route lets a request without an id reach the handler and get a 400.
@router.get("/post/")
@router.get("/post/{id}")
def get_post(request: Request, store: PostStoreDep):
    """
    Fetch one post by id.

    Returns 200 with the post, 404 with an empty body if no post has this id,
    or 400 if the id is missing or not a UUID.
    """
    post_id = get_path_param(request, "id")

    try:
        uuid = decode_post_id(post_id)
    except PostIdDecodeError as e:
        raise InvalidPostIdError(post_id, e.message) from e

    post = store.find_by_id(uuid)
    if post is None:
        raise PostNotFoundError(post_id)

    try:
        payload = encode_post(post)
    except PostEncodeError as e:
        raise PostRenderError(e.message) from e

    return Response(content=payload, status_code=200)
