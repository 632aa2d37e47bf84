# =============================================================================
# app/routers/blockchain.py - Blockchain Endpoints
# =============================================================================
# Feature boundary for on-chain integration. For now it only reports the
# configured network and contract; nothing here talks to the RPC endpoint.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.config import Settings


class BlockchainStatusResponse(BaseModel):
    """
    Configured on-chain target.

    Example:
        {
            "network": "testnet",
            "rpc_url": "https://soroban-testnet.stellar.org",
            "contract_id": null,
            "mode": "stub"
        }
    """
    network: str
    rpc_url: str
    contract_id: str | None = None
    mode: str = Field(
        default="stub",
        description="Integration mode; 'stub' means no live RPC calls are made"
    )


def create_router(settings: Settings) -> APIRouter:
    router = APIRouter()

    @router.get("/blockchain/status", response_model=BlockchainStatusResponse)
    async def blockchain_status():
        """Report which network and contract the site is configured for."""
        return BlockchainStatusResponse(
            network=settings.STELLAR_NETWORK,
            rpc_url=settings.STELLAR_RPC_URL,
            contract_id=settings.CONTRACT_ID,
        )

    return router
