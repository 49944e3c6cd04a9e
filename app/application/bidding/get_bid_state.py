"""
Use case: Read the current bid state of a listing.

Input: GetBidStateQuery (listing_id)
Output: BidStateResult
Side effects: None (read-only query).
Failure cases: InvalidItemError, BidPersistenceError.

Clients call this explicitly to refresh their view, e.g. when an auction
screen becomes active, and before a bid is attempted.
"""

import logging

from app.application.bidding.dtos import BidStateResult, GetBidStateQuery
from app.domain.bidding import bid_rules
from app.domain.bidding.ports import BidLedger, ListingCatalog

logger = logging.getLogger(__name__)


class GetBidStateUseCase:
    """Computes the highest bid and distinct bidder count on demand."""

    def __init__(self, catalog: ListingCatalog, ledger: BidLedger) -> None:
        self._catalog = catalog
        self._ledger = ledger

    def execute(self, query: GetBidStateQuery) -> BidStateResult:
        """Run the bid state query.

        Args:
            query: Query parameters (listing_id).

        Returns:
            Current aggregate state; the starting price and zero bidders
            when the listing has no bids.
        """
        logger.debug("Fetching bid state for listing_id=%s", query.listing_id)

        listing = bid_rules.check_listing(
            self._catalog.get_by_id(query.listing_id), query.listing_id
        )
        tally = self._ledger.get_tally(listing.id)

        return BidStateResult.from_aggregate(bid_rules.aggregate_state(listing, tally))
