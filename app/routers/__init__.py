# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - blockchain.py: On-chain integration boundary (stub)
# - faq.py: FAQ list and accordion views
# - content.py: Landing page content
#
# Each module exposes create_router(settings), wired up in app/modules.py.
# =============================================================================

from . import blockchain
from . import content
from . import faq
from . import health

__all__ = [
    "blockchain",
    "content",
    "faq",
    "health",
]
