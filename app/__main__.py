# =============================================================================
# app/__main__.py - Server Runner
# =============================================================================
# Usage:
#   python -m app
# =============================================================================

import uvicorn

from app.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
