"""
Shared fixtures for the test suite.

Provides in-memory implementations of the bidding ports so use cases
and routes can be tested without a database, plus a SQLite engine for
the SQL adapters.
"""

import os
import threading
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.domain.bidding.entities import (  # noqa: E402
    Bid,
    BidTally,
    Listing,
    NewBid,
    PlacedBid,
)
from app.domain.bidding.errors import BidPersistenceError  # noqa: E402
from app.domain.bidding.ports import BidLedger, ListingCatalog  # noqa: E402
from app.infrastructure.bidding.tables import metadata  # noqa: E402

OWNER_ID = "owner-1"


def make_listing(
    listing_id: int = 1,
    category: str = "Cattle",
    starting_price: str = "5000",
    owner_id: str = OWNER_ID,
) -> Listing:
    """Build a Listing with sensible defaults."""
    return Listing(
        id=listing_id,
        category=category,
        breed="Brahman",
        location="Bukidnon",
        weight=Decimal("420"),
        gender="Male",
        starting_price=Decimal(starting_price),
        owner_id=owner_id,
        image_uri=None,
    )


class InMemoryListingCatalog(ListingCatalog):
    """Dict-backed listing catalog."""

    def __init__(self, listings: Optional[list[Listing]] = None) -> None:
        self.listings = {listing.id: listing for listing in listings or []}
        self.fail = False

    def _check(self, operation: str) -> None:
        if self.fail:
            raise BidPersistenceError(operation)

    def get_by_id(self, listing_id: int) -> Optional[Listing]:
        self._check("get_listing")
        return self.listings.get(listing_id)

    def list_by_category(self, category: str) -> list[Listing]:
        self._check("list_listings")
        return sorted(
            (item for item in self.listings.values() if item.category == category),
            key=lambda item: item.id,
        )

    def list_categories(self) -> list[str]:
        self._check("list_categories")
        return sorted({item.category for item in self.listings.values()})


class InMemoryBidLedger(BidLedger):
    """List-backed bid ledger with a lock around the conditional append."""

    def __init__(self) -> None:
        self.bids: list[Bid] = []
        self.fail_reads = False
        self.fail_writes = False
        self.tally_override: Optional[BidTally] = None
        self._lock = threading.Lock()

    def _highest(self, listing_id: int) -> Optional[Decimal]:
        amounts = [b.amount for b in self.bids if b.listing_id == listing_id]
        return max(amounts) if amounts else None

    def _bidder_count(self, listing_id: int) -> int:
        return len({b.bidder_id for b in self.bids if b.listing_id == listing_id})

    def get_tally(self, listing_id: int) -> BidTally:
        if self.fail_reads:
            raise BidPersistenceError("get_tally")
        if self.tally_override is not None:
            tally, self.tally_override = self.tally_override, None
            return tally
        return BidTally(
            highest_amount=self._highest(listing_id),
            bidder_count=self._bidder_count(listing_id),
        )

    def append_if_highest(
        self, bid: NewBid, floor_amount: Decimal
    ) -> Optional[PlacedBid]:
        if self.fail_writes:
            raise BidPersistenceError("append_bid")
        with self._lock:
            current = self._highest(bid.listing_id)
            if bid.amount <= (floor_amount if current is None else current):
                return None
            record = Bid(
                id=len(self.bids) + 1,
                listing_id=bid.listing_id,
                bidder_id=bid.bidder_id,
                amount=bid.amount,
                status=bid.status,
                created_at=datetime.now(timezone.utc),
            )
            self.bids.append(record)
            return PlacedBid(bid=record, bidder_count=self._bidder_count(bid.listing_id))


@pytest.fixture
def listing() -> Listing:
    """A cattle listing starting at 5000, owned by OWNER_ID."""
    return make_listing()


@pytest.fixture
def catalog(listing: Listing) -> InMemoryListingCatalog:
    return InMemoryListingCatalog(
        [
            listing,
            make_listing(listing_id=2, category="Goat", starting_price="8000"),
            make_listing(listing_id=3, category="Cattle", starting_price="52000"),
        ]
    )


@pytest.fixture
def ledger() -> InMemoryBidLedger:
    return InMemoryBidLedger()


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine with the auction schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    yield engine
    engine.dispose()
