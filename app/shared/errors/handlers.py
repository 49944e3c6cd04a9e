"""
Centralized error handlers for FastAPI.

Maps bidding domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Every rejection uses the BidRejection body: ``{"kind", "message"}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.bidding.errors import (
    BidPersistenceError,
    BiddingDomainError,
    BidTooLowError,
    InvalidItemError,
    MalformedAmountError,
    SelfBidProhibitedError,
)

logger = logging.getLogger(__name__)

HTTP_403 = 403
HTTP_404 = 404
HTTP_409 = 409
HTTP_422 = 422
HTTP_500 = 500
HTTP_503 = 503


def _rejection(status_code: int, kind: str, message: str) -> JSONResponse:
    """Build a consistent JSON rejection response."""
    return JSONResponse(
        status_code=status_code, content={"kind": kind, "message": message}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidItemError)
    async def handle_invalid_item(
        _request: Request, exc: InvalidItemError
    ) -> JSONResponse:
        """Handle unknown listing references."""
        logger.warning("Invalid item: listing_id=%s", exc.listing_id)
        return _rejection(HTTP_404, exc.kind, exc.message)

    @app.exception_handler(SelfBidProhibitedError)
    async def handle_self_bid(
        _request: Request, exc: SelfBidProhibitedError
    ) -> JSONResponse:
        """Handle owners bidding on their own listing."""
        return _rejection(HTTP_403, exc.kind, exc.message)

    @app.exception_handler(MalformedAmountError)
    async def handle_malformed_amount(
        _request: Request, exc: MalformedAmountError
    ) -> JSONResponse:
        """Handle amounts that are not finite numbers."""
        return _rejection(HTTP_422, exc.kind, exc.message)

    @app.exception_handler(BidTooLowError)
    async def handle_bid_too_low(
        _request: Request, exc: BidTooLowError
    ) -> JSONResponse:
        """Handle bids that do not beat the current highest bid."""
        return _rejection(HTTP_409, exc.kind, exc.message)

    @app.exception_handler(BidPersistenceError)
    async def handle_persistence(
        _request: Request, exc: BidPersistenceError
    ) -> JSONResponse:
        """Handle ledger and catalog storage failures."""
        logger.error("Persistence failure during %s", exc.operation)
        return _rejection(HTTP_503, exc.kind, exc.message)

    @app.exception_handler(BiddingDomainError)
    async def handle_bidding_domain(
        _request: Request, exc: BiddingDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled bidding domain errors."""
        logger.error("Unhandled bidding domain error: %s", exc.message)
        return _rejection(HTTP_500, "InternalError", "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _rejection(HTTP_500, "InternalError", "Internal server error")
