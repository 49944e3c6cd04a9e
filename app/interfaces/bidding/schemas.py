"""
Pydantic schemas for bidding API request/response validation.

These schemas define the API contract. The bid amount is accepted
as any JSON value and validated by the domain, so a malformed
amount is reported as a MalformedAmount rejection rather than a
schema error. No business logic belongs here.
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field

IDENTITY_MIN_LEN = 1
IDENTITY_MAX_LEN = 64


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str


class BidRejection(BaseModel):
    """Body of every rejected request.

    Attributes:
        kind: Rejection tag (InvalidItem, SelfBidProhibited, MalformedAmount,
            BidTooLow, PersistenceError).
        message: Human-readable explanation.
    """

    kind: str
    message: str


class SubmitBidRequest(BaseModel):
    """Request schema for placing a bid.

    Attributes:
        bidder_id: Identity of the bidder, as issued by the auth provider.
        amount: Proposed amount as sent, any JSON value.
    """

    bidder_id: str = Field(
        ...,
        min_length=IDENTITY_MIN_LEN,
        max_length=IDENTITY_MAX_LEN,
        description="Identity of the bidder",
    )
    # Left untyped so booleans, lists and objects reach the domain parser.
    amount: Any = Field(default=None, description="Proposed bid amount")


class BidStateResponse(BaseModel):
    """Current aggregate bid state of a listing."""

    listing_id: int
    highest_amount: Decimal
    bidder_count: int


class QuickBidItem(BaseModel):
    """A quick-bid shortcut."""

    increment: int
    amount: str


class QuickBidsResponse(BaseModel):
    """Response schema for the quick-bid endpoint."""

    quick_bids: list[QuickBidItem]


class ListingResponse(BaseModel):
    """A livestock listing."""

    id: int
    category: str
    breed: Optional[str] = None
    location: Optional[str] = None
    weight: Optional[Decimal] = None
    gender: Optional[str] = None
    starting_price: Decimal
    owner_id: str
    image_uri: Optional[str] = None


class ListingsResponse(BaseModel):
    """Response schema for category browsing."""

    category: str
    listings: list[ListingResponse]


class CategoriesResponse(BaseModel):
    """Response schema for the category list."""

    categories: list[str]
