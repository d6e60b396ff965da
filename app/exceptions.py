# =============================================================================
# app/exceptions.py - HTTP Exceptions and Handlers
# =============================================================================
# Handlers raise these exceptions; one exception handler turns them into
# responses. Error bodies are a plain-text description (or empty), not a
# JSON envelope, matching what existing clients expect.
# =============================================================================

import logging

from fastapi import Request
from fastapi.responses import Response

logger = logging.getLogger(__name__)


class HermesException(Exception):
    """
    Base exception for the Hermes API.

    Carries the HTTP status to answer with. When `expose_message` is False the
    response body is empty.
    """

    def __init__(
        self,
        message: str,
        code: str = "HERMES_ERROR",
        status_code: int = 500,
        expose_message: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.expose_message = expose_message

    @property
    def body(self) -> str:
        return self.message if self.expose_message else ""


# =============================================================================
# Client Errors
# =============================================================================

class UnreadableBodyError(HermesException):
    """Raised when the request body is not valid UTF-8 text."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Request body is not valid UTF-8: {error}",
            code="UNREADABLE_BODY",
            status_code=400,
        )


class MalformedPostError(HermesException):
    """Raised when a submitted post is not JSON or lacks required fields."""

    def __init__(self, error: str):
        super().__init__(
            message=error,
            code="MALFORMED_POST",
            status_code=400,
        )


class MissingPathParameterError(HermesException):
    """Raised when the route matched but the named parameter is absent."""

    def __init__(self, name: str):
        super().__init__(
            message=f"Missing path parameter: {name}",
            code="MISSING_PATH_PARAMETER",
            status_code=400,
            expose_message=False,
        )


class InvalidPostIdError(HermesException):
    """Raised when a post id is not a valid UUID."""

    def __init__(self, post_id: str, error: str):
        super().__init__(
            message=f"Invalid post id '{post_id}': {error}",
            code="INVALID_POST_ID",
            status_code=400,
        )


class PostNotFoundError(HermesException):
    """Raised when no post has the requested id. Answered with an empty body."""

    def __init__(self, post_id: str):
        super().__init__(
            message=f"Post not found: {post_id}",
            code="POST_NOT_FOUND",
            status_code=404,
            expose_message=False,
        )


class PostRenderError(HermesException):
    """
    Raised when a stored post cannot be serialized on the fetch path.

    Reported as 400 rather than 500; clients already depend on this.
    """

    def __init__(self, error: str):
        super().__init__(
            message=error,
            code="POST_RENDER_ERROR",
            status_code=400,
        )


# =============================================================================
# Server Errors
# =============================================================================

class PathParametersUnavailableError(HermesException):
    """Raised when the router did not attach any path parameters to the request."""

    def __init__(self):
        super().__init__(
            message="Path parameters are unavailable for this request",
            code="PATH_PARAMETERS_UNAVAILABLE",
            status_code=500,
            expose_message=False,
        )


class FeedRenderError(HermesException):
    """Raised when the feed cannot be serialized."""

    def __init__(self, error: str):
        super().__init__(
            message=error,
            code="FEED_RENDER_ERROR",
            status_code=500,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def hermes_exception_handler(
    request: Request,
    exc: HermesException
) -> Response:
    """Convert a HermesException to a response with a plain-text body."""
    log = logger.error if exc.status_code >= 500 else logger.info
    log(f"{request.method} {request.url.path} -> {exc.status_code} [{exc.code}] {exc.message}")
    return Response(content=exc.body, status_code=exc.status_code)
