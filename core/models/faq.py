# =============================================================================
# core/models/faq.py - FAQ Schemas
# =============================================================================
# These models define the API contract for the FAQ section:
# - FAQItem: One question/answer pair (immutable, identity = list position)
# - FAQItemView: One item as rendered by the accordion
# - AccordionView: Snapshot of the whole accordion (open item + heights)
# - ToggleRequest: Input for a stateless toggle over HTTP
#
# The accordion itself lives in core/accordion.py; these are just the shapes
# that cross the API boundary.
# =============================================================================

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FAQItem(BaseModel):
    """
    A single question/answer pair.

    Items are fixed at build time and never mutated, so the model is frozen.
    """

    model_config = ConfigDict(frozen=True)

    question: str = Field(
        ...,
        min_length=1,
        description="Question shown on the accordion control"
    )

    answer: str = Field(
        ...,
        min_length=1,
        description="Answer revealed when the item is expanded"
    )


class FAQList(BaseModel):
    """Response for GET /faq."""
    title: str
    items: list[FAQItem]


class FAQItemView(BaseModel):
    """
    One accordion item as it should be rendered.

    Example:
        {
            "index": 0,
            "question": "How do I get started with Nestera?",
            "answer": "Getting started with Nestera is simple...",
            "expanded": true,
            "control_id": "faq-question-0",
            "answer_id": "faq-answer-0",
            "height_px": 128,
            "toggle_icon": "×"
        }
    """

    index: int = Field(..., ge=0, description="Position in the FAQ list")
    question: str
    answer: str

    # aria-expanded on the control
    expanded: bool = Field(
        ...,
        description="True only for the single open item"
    )

    # aria-controls on the control points at answer_id
    control_id: str
    answer_id: str

    # None means the item is open but heights were not measured yet
    height_px: int | None = Field(
        ...,
        description="Rendered height of the answer region in pixels"
    )

    toggle_icon: Literal["+", "×"]


class AccordionView(BaseModel):
    """Snapshot of the accordion state, one entry per FAQ item."""
    open_index: int | None = Field(
        default=None,
        description="Index of the expanded item, or null when all are collapsed"
    )
    measured: bool = Field(
        default=False,
        description="Whether the one-time height measurement has run"
    )
    items: list[FAQItemView]


class ToggleRequest(BaseModel):
    """
    Input for POST /faq/accordion/toggle.

    The server keeps no accordion state between requests, so the client
    sends the current open index along with the clicked index.

    Example:
        {"open_index": 0, "index": 2}
    """

    open_index: int | None = Field(
        default=None,
        ge=0,
        description="Currently expanded item (null when all collapsed)"
    )

    index: int = Field(
        ...,
        ge=0,
        description="Item whose control was clicked"
    )
