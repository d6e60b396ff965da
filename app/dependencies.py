# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions import MissingPathParameterError, PathParametersUnavailableError
from core.services.post_store import PostStore


def get_post_store(request: Request) -> PostStore:
    """
    Get the post store owned by the running application.

    The store is created in `create_app` and attached to `app.state`, so
    every handler of one app shares the same instance.
    """
    return request.app.state.post_store


# Type alias for dependency injection
PostStoreDep = Annotated[PostStore, Depends(get_post_store)]


def get_path_param(request: Request, name: str) -> str:
    """
    Read a named path parameter from the matched route.

    Raises:
        PathParametersUnavailableError: If routing attached no parameters (500)
        MissingPathParameterError: If the parameter is absent or empty (400)
    """
    params = request.scope.get("path_params")
    if params is None:
        raise PathParametersUnavailableError()

    value = params.get(name)
    if not value:
        raise MissingPathParameterError(name)

    return value


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running application was built with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
