# =============================================================================
# app/routers/faq.py - FAQ Endpoints
# =============================================================================
# Serves the FAQ list and the accordion view.
#
# The server holds no accordion state between requests: each request builds
# a fresh accordion, mounts it (measuring answer heights), applies the
# requested state and renders it.
#
# Endpoints:
#   GET  /faq                     - Title and items
#   GET  /faq/accordion           - View with `open_index` expanded (optional)
#   POST /faq/accordion/toggle    - View after toggling `index`
# =============================================================================

import logging

from fastapi import APIRouter, Query

from app.config import Settings
from app.exceptions import FAQItemNotFoundError
from core.accordion import Accordion
from core.content import FAQ_ITEMS, FAQ_TITLE
from core.models import AccordionView, FAQList, ToggleRequest

logger = logging.getLogger(__name__)


def _require_index(index: int | None) -> None:
    if index is not None and index >= len(FAQ_ITEMS):
        raise FAQItemNotFoundError(index, len(FAQ_ITEMS))


def create_router(settings: Settings) -> APIRouter:
    router = APIRouter()

    @router.get("/faq", response_model=FAQList)
    async def list_faq():
        """Return the FAQ section title and its items in display order."""
        return FAQList(title=FAQ_TITLE, items=list(FAQ_ITEMS))

    @router.get("/faq/accordion", response_model=AccordionView)
    async def get_accordion(
        open_index: int | None = Query(default=None, ge=0, description="Item to show expanded"),
    ):
        """
        Render the accordion with at most one item expanded.

        With no `open_index` every item is collapsed.
        """
        _require_index(open_index)
        accordion = Accordion(FAQ_ITEMS).mount()
        if open_index is not None:
            accordion.toggle(open_index)
        return accordion.render()

    @router.post("/faq/accordion/toggle", response_model=AccordionView)
    async def toggle_accordion(request: ToggleRequest):
        """
        Toggle one item starting from the client's current state.

        Clicking the open item collapses it; clicking any other item opens
        it and collapses the previous one.
        """
        _require_index(request.open_index)
        _require_index(request.index)

        accordion = Accordion(FAQ_ITEMS).mount()
        if request.open_index is not None:
            accordion.toggle(request.open_index)
        accordion.toggle(request.index)

        logger.debug(f"Accordion toggle {request.open_index} -> {accordion.open_index}")
        return accordion.render()

    return router
