# =============================================================================
# app/routers/content.py - Page Content Endpoints
# =============================================================================
# Static landing page content that the frontend renders.
# =============================================================================

from fastapi import APIRouter

from app.config import Settings
from core.content import HERO
from core.models import HeroContent


def create_router(settings: Settings) -> APIRouter:
    router = APIRouter()

    @router.get("/content/hero", response_model=HeroContent)
    async def get_hero():
        """Hero section: headline lines, subheadline, CTAs, image, stat card."""
        return HERO

    return router
