# =============================================================================
# core/content.py - Static Site Content
# =============================================================================
# The FAQ list and hero copy are fixed at build time. Order of FAQ_ITEMS is
# the display order; an item has no identity beyond its position.
#
# HERO is placeholder copy until marketing supplies the final text. Its stat
# card only restates facts from the FAQ; never put a yield or APY figure here
# without a live source behind it.
# =============================================================================

from core.models import CallToAction, FAQItem, HeroContent, HeroStat

FAQ_TITLE = "Frequently Asked Questions"

FAQ_ITEMS: tuple[FAQItem, ...] = (
    FAQItem(
        question="How do I get started with Nestera?",
        answer=(
            "Getting started with Nestera is simple. Connect your wallet, "
            "deposit your preferred stablecoin, and start earning yield "
            "immediately. No complex setup required—just a few clicks and "
            "you're on your way to smarter, on-chain savings."
        ),
    ),
    FAQItem(
        question="Can I withdraw my funds at any time?",
        answer=(
            "Yes, you can withdraw your funds at any time without lock-up "
            "periods. Nestera is designed for flexibility, allowing you to "
            "access your savings whenever you need them while still earning "
            "competitive yields."
        ),
    ),
    FAQItem(
        question="Is Nestera audited and safe to use on-chain?",
        answer=(
            "Absolutely. Nestera's smart contracts are thoroughly audited by "
            "leading security firms. We prioritize transparency and security, "
            "with all code verified on-chain and open for community review."
        ),
    ),
    FAQItem(
        question="What stablecoins does Nestera currently support?",
        answer=(
            "Nestera currently supports major stablecoins including USDC and "
            "USDT on the Stellar network. We're continuously expanding our "
            "supported assets to provide you with more options for your "
            "savings strategy."
        ),
    ),
)

HERO = HeroContent(
    headline=["Grow your savings", "with on-chain yield."],
    subheadline=(
        "Deposit stablecoins, earn transparent yield on Stellar, and "
        "withdraw whenever you like."
    ),
    primary_cta=CallToAction(label="Start Saving", href="/app"),
    secondary_cta=CallToAction(label="How it works", href="#how-it-works"),
    image_src="/images/hero-savings.png",
    image_alt="Nestera savings dashboard showing a growing stablecoin balance",
    stat=HeroStat(label="Supported stablecoins", value="USDC, USDT"),
)
