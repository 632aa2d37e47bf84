# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: Composition root, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - modules.py: Feature module definitions and composition
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# site logic to the core/ package.
# =============================================================================

__version__ = "0.1.0"
