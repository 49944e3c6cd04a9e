"""
Domain entities for the bidding bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

# Money columns hold NUMERIC(12, 2): up to 10 integer digits, 2 decimals.
AMOUNT_PRECISION = 12
AMOUNT_SCALE = 2


class BidStatus(Enum):
    """Lifecycle status of a bid record.

    Only ``pending`` is ever written; settlement happens elsewhere.
    """

    PENDING = "pending"


@dataclass(frozen=True)
class Listing:
    """An auctionable livestock item offered by its owner."""

    id: int
    category: str
    breed: Optional[str]
    location: Optional[str]
    weight: Optional[Decimal]
    gender: Optional[str]
    starting_price: Decimal
    owner_id: str
    image_uri: Optional[str] = None


@dataclass(frozen=True)
class NewBid:
    """A validated bid that has not been recorded in the ledger yet."""

    listing_id: int
    bidder_id: str
    amount: Decimal
    status: BidStatus = BidStatus.PENDING


@dataclass(frozen=True)
class Bid:
    """A bid record as stored in the ledger. Immutable once written."""

    id: int
    listing_id: int
    bidder_id: str
    amount: Decimal
    status: BidStatus
    created_at: datetime


@dataclass(frozen=True)
class BidTally:
    """Raw ledger aggregates for one listing.

    ``highest_amount`` is None when the listing has no bids yet.
    """

    highest_amount: Optional[Decimal]
    bidder_count: int


@dataclass(frozen=True)
class PlacedBid:
    """Outcome of a successful ledger append."""

    bid: Bid
    bidder_count: int


@dataclass(frozen=True)
class BidAggregate:
    """Derived bid state for a listing. Never stored."""

    listing_id: int
    highest_amount: Decimal
    bidder_count: int
