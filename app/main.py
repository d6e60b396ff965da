# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Hermes feed API.
# It builds the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from app import __version__
from app.config import Settings, settings
from app.exceptions import HermesException, hermes_exception_handler
from app.middleware import JSON_CONTENT_TYPE, json_content_type, log_requests
from app.routers import feed, health, posts
from core.services.post_store import PostStore, StorePoisonedError, seed_demo_posts

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Exit status used when the process stops itself because the store is unusable
POISONED_STORE_EXIT_CODE = 70


def terminate_process(exc: StorePoisonedError) -> None:
    """
    Stop the whole process immediately.

    A poisoned store cannot be served from; the supervisor is expected to
    restart the service.
    """
    logger.critical(f"Terminating: {exc}")
    logging.shutdown()
    os._exit(POISONED_STORE_EXIT_CODE)


def create_app(
    app_settings: Settings | None = None,
    store: PostStore | None = None,
) -> FastAPI:
    """
    Build the Hermes application.

    Args:
        app_settings: Settings to use (defaults to the environment settings)
        store: Post store to serve (defaults to a new, optionally seeded store)

    Returns:
        The configured FastAPI application
    """
    app_settings = app_settings or settings

    if store is None:
        store = PostStore()
        if app_settings.SEED_DEMO_POSTS:
            seed_demo_posts(store, app_settings.DEMO_AUTHOR_HANDLE)

    app = FastAPI(
        title="Hermes API",
        description="""
## Anonymous Feed API

Publish short posts and read them back as a feed.

| Method | Path | Description |
|--------|------|-------------|
| GET | /feed | All posts, oldest first |
| POST | /post | Publish a post (client supplies `uuid` and `date_time`) |
| GET | /post/{id} | One post by UUID |

### Quick Start

```bash
curl -X POST http://localhost:3000/post \\
  -d '{"summary": "Hello", "contents": "", "author_handle": "me",
       "date_time": "2024-01-01T00:00:00Z",
       "uuid": "ed8729be-f33e-4395-b1c0-f5673668f89e"}'

curl http://localhost:3000/feed
```
""",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = app_settings
    app.state.post_store = store

    # -------------------------------------------------------------------------
    # Middleware (last added runs first)
    # -------------------------------------------------------------------------

    # CORS middleware - the browser client is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list if app_settings.is_production else ["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.middleware("http")(json_content_type)
    app.middleware("http")(log_requests)

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(HermesException, hermes_exception_handler)

    @app.exception_handler(StorePoisonedError)
    async def handle_poisoned_store(request: Request, exc: StorePoisonedError):
        """Never answer from a poisoned store: stop the process."""
        terminate_process(exc)
        return Response(status_code=500)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return Response(
            content="An unexpected error occurred",
            status_code=500,
            media_type=JSON_CONTENT_TYPE,
        )

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(feed.router, tags=["Feed"])
    app.include_router(posts.router, tags=["Posts"])
    app.include_router(health.router, tags=["Health"])

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Hermes API",
            "version": __version__,
            "feed": "/feed",
            "post": "/post/{id}",
            "health": "/health",
        }

    logger.info(
        f"Hermes API ready in {app_settings.ENVIRONMENT} mode "
        f"with {len(store)} posts"
    )
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
