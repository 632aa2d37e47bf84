# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for the site content:
# - faq.py: FAQ items and accordion views
# - hero.py: Hero section content
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# FAQ Models - Questions, answers and accordion state
# -----------------------------------------------------------------------------
from .faq import (
    AccordionView,
    FAQItem,
    FAQItemView,
    FAQList,
    ToggleRequest,
)

# -----------------------------------------------------------------------------
# Hero Models - Landing page hero section
# -----------------------------------------------------------------------------
from .hero import (
    CallToAction,
    HeroContent,
    HeroStat,
)

__all__ = [
    # FAQ
    "AccordionView",
    "FAQItem",
    "FAQItemView",
    "FAQList",
    "ToggleRequest",
    # Hero
    "CallToAction",
    "HeroContent",
    "HeroStat",
]
