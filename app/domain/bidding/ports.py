"""
Port interfaces (ABCs) for the bidding bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from app.domain.bidding.entities import BidTally, Listing, NewBid, PlacedBid


class ListingCatalog(ABC):
    """Port for read-only access to auction listings."""

    @abstractmethod
    def get_by_id(self, listing_id: int) -> Optional[Listing]:
        """Return a listing by its ID, or None if not found.

        Raises:
            BidPersistenceError: If the catalog cannot be read.
        """
        raise NotImplementedError

    @abstractmethod
    def list_by_category(self, category: str) -> list[Listing]:
        """Return all listings in a category ordered by ID."""
        raise NotImplementedError

    @abstractmethod
    def list_categories(self) -> list[str]:
        """Return the distinct categories that have listings, sorted."""
        raise NotImplementedError


class BidLedger(ABC):
    """Port for the append-only store of bid records.

    Implementations must evaluate the strictly-higher condition of
    ``append_if_highest`` atomically with the insert, so two concurrent
    bidders cannot both win against the same stale maximum.
    """

    @abstractmethod
    def get_tally(self, listing_id: int) -> BidTally:
        """Return the maximum bid amount and distinct bidder count.

        Args:
            listing_id: The listing whose bids are aggregated.

        Returns:
            BidTally with ``highest_amount`` None when there are no bids.

        Raises:
            BidPersistenceError: If the ledger cannot be read.
        """
        raise NotImplementedError

    @abstractmethod
    def append_if_highest(
        self, bid: NewBid, floor_amount: Decimal
    ) -> Optional[PlacedBid]:
        """Append a bid only if it beats every recorded bid and the floor.

        Args:
            bid: The validated bid to record.
            floor_amount: Amount the bid must exceed when no bids exist
                (the listing's starting price).

        Returns:
            PlacedBid on success, or None when a bid at or above
            ``bid.amount`` is already recorded. Nothing is written then.

        Raises:
            BidPersistenceError: If the ledger cannot be written.
        """
        raise NotImplementedError
