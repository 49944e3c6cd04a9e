"""
Data Transfer Objects for the bidding application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from app.domain.bidding.entities import BidAggregate, Listing


@dataclass(frozen=True)
class SubmitBidCommand:
    """Input DTO for placing a bid.

    Attributes:
        listing_id: The listing being bid on.
        bidder_id: Opaque identity of the bidder.
        amount: Proposed amount exactly as the caller sent it.
    """

    listing_id: int
    bidder_id: str
    amount: Any


@dataclass(frozen=True)
class GetBidStateQuery:
    """Input DTO for reading the current bid state of a listing."""

    listing_id: int


@dataclass(frozen=True)
class BidStateResult:
    """Output DTO for the aggregate bid state of a listing.

    Attributes:
        listing_id: The listing this state refers to.
        highest_amount: Highest recorded bid, or the starting price.
        bidder_count: Number of distinct bidders.
    """

    listing_id: int
    highest_amount: Decimal
    bidder_count: int

    @classmethod
    def from_aggregate(cls, aggregate: BidAggregate) -> "BidStateResult":
        return cls(
            listing_id=aggregate.listing_id,
            highest_amount=aggregate.highest_amount,
            bidder_count=aggregate.bidder_count,
        )


@dataclass(frozen=True)
class ComposeQuickBidsQuery:
    """Input DTO for building quick-bid shortcuts from a draft amount."""

    draft: Optional[str] = None


@dataclass(frozen=True)
class QuickBidResult:
    """A single quick-bid shortcut: the increment and the composed amount."""

    increment: int
    amount: str


@dataclass(frozen=True)
class ListCategoryListingsQuery:
    """Input DTO for browsing the listings of one category."""

    category: str


@dataclass(frozen=True)
class GetListingQuery:
    """Input DTO for fetching one listing."""

    listing_id: int


@dataclass(frozen=True)
class ListingResult:
    """Output DTO describing a listing."""

    id: int
    category: str
    breed: Optional[str]
    location: Optional[str]
    weight: Optional[Decimal]
    gender: Optional[str]
    starting_price: Decimal
    owner_id: str
    image_uri: Optional[str]

    @classmethod
    def from_entity(cls, listing: Listing) -> "ListingResult":
        return cls(
            id=listing.id,
            category=listing.category,
            breed=listing.breed,
            location=listing.location,
            weight=listing.weight,
            gender=listing.gender,
            starting_price=listing.starting_price,
            owner_id=listing.owner_id,
            image_uri=listing.image_uri,
        )
