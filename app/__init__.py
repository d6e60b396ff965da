# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers, server entry point
# - config.py: Environment variable loading and settings
# - middleware.py: Request logging and JSON content type
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# storage to the core/ package.
# =============================================================================

__version__ = "1.0.0"
