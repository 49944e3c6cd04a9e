"""
Liveness endpoint for the auction API.

Load balancers poll it before routing bid traffic to an instance.
It touches neither the listing catalog nor the bid ledger, so it stays
green while the database is down; bid routes report that as a 503.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.bidding.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Auction service liveness",
    description="Reports that the auction API process is up, with its version.",
)
def health_check() -> HealthResponse:
    """Report the auction service as up."""
    return HealthResponse(status="ok", version=settings.version)
