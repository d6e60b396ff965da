# =============================================================================
# app/middleware.py - HTTP Middleware
# =============================================================================
# - log_requests: one log line per request (method, path, status, duration)
# - json_content_type: every response is declared as application/json
#
# Registered in main.py with app.middleware("http").
# =============================================================================

import logging
import time

from fastapi import Request

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


async def log_requests(request: Request, call_next):
    """Log each request once its response is ready."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.info(
        f"{request.method} {request.url.path} "
        f"{response.status_code} {elapsed_ms:.1f}ms"
    )
    return response


async def json_content_type(request: Request, call_next):
    """Set the JSON content type on every response, error responses included."""
    response = await call_next(request)
    response.headers["content-type"] = JSON_CONTENT_TYPE
    return response
