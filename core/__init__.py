# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic site logic:
# - models/: Pydantic schemas for the site content
# - content.py: Static FAQ and hero content
# - accordion.py: FAQ accordion state machine
# - layout.py: Answer height measurement
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
