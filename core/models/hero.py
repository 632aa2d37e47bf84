# =============================================================================
# core/models/hero.py - Hero Section Schemas
# =============================================================================
# Content for the landing page hero: multi-line headline, subheadline,
# two calls to action, the hero image and an optional stat card.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class CallToAction(BaseModel):
    """A labelled link button."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    href: str = Field(..., min_length=1)


class HeroStat(BaseModel):
    """Optional stat card shown under the calls to action."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str


class HeroContent(BaseModel):
    """
    Everything the hero section renders.

    Each entry of `headline` is rendered on its own line.

    Example:
        {
            "headline": ["Save in stablecoins.", "Earn on-chain yield."],
            "subheadline": "...",
            "primary_cta": {"label": "Start Saving", "href": "/app"},
            "secondary_cta": {"label": "How it works", "href": "#how-it-works"},
            "image_src": "/images/hero.png",
            "image_alt": "...",
            "stat": {"label": "Current APY", "value": "8.4%"}
        }
    """

    model_config = ConfigDict(frozen=True)

    headline: list[str] = Field(
        ...,
        min_length=1,
        description="Headline lines, one per rendered line"
    )
    subheadline: str
    primary_cta: CallToAction
    secondary_cta: CallToAction
    image_src: str
    image_alt: str
    stat: HeroStat | None = None
