# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Nestera API:
# - test_accordion.py: FAQ accordion state machine and heights
# - test_layout.py: Answer height measurement
# - test_models.py: Content model validation
# - test_config.py: Settings validation and fail-fast loading
# - test_app.py: Module composition and HTTP endpoints
#
# Run tests with: pytest
# =============================================================================
