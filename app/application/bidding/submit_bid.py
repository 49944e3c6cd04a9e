"""
Use case: Place a bid on a livestock listing.

Input: SubmitBidCommand (listing_id, bidder_id, amount)
Output: BidStateResult (new highest amount, distinct bidder count)
Side effects: Exactly one pending bid appended to the ledger on success.
    Nothing is written on any failure.
Failure cases: InvalidItemError, SelfBidProhibitedError, MalformedAmountError,
    BidTooLowError, BidPersistenceError.
"""

import logging

from app.application.bidding.dtos import BidStateResult, SubmitBidCommand
from app.domain.bidding import bid_rules
from app.domain.bidding.entities import NewBid
from app.domain.bidding.errors import BiddingDomainError, BidTooLowError
from app.domain.bidding.ports import BidLedger, ListingCatalog

logger = logging.getLogger(__name__)


class SubmitBidUseCase:
    """Validates a bid proposal and records it in the ledger.

    Checks that need no ledger state run first. The current highest
    amount is then read fresh and the append is conditioned on the bid
    still beating it at write time, so a bid that lost a race is
    reported as BidTooLowError instead of being recorded.
    """

    def __init__(self, catalog: ListingCatalog, ledger: BidLedger) -> None:
        self._catalog = catalog
        self._ledger = ledger

    def execute(self, command: SubmitBidCommand) -> BidStateResult:
        """Run the bid submission use case.

        Args:
            command: The bid proposal.

        Returns:
            The aggregate state after the bid was recorded.

        Raises:
            BiddingDomainError: One of the typed rejections listed above.
        """
        try:
            result = self._submit(command)
        except BiddingDomainError as exc:
            logger.info(
                "Bid rejected: listing_id=%s kind=%s", command.listing_id, exc.kind
            )
            raise

        logger.info("Bid accepted: listing_id=%s", command.listing_id)
        return result

    def _submit(self, command: SubmitBidCommand) -> BidStateResult:
        listing = self._catalog.get_by_id(command.listing_id)
        amount = bid_rules.validate_proposal(
            listing, command.bidder_id, command.amount, listing_id=command.listing_id
        )

        current = bid_rules.aggregate_state(
            listing, self._ledger.get_tally(listing.id)
        )
        bid_rules.check_beats_highest(amount, current.highest_amount)

        placed = self._ledger.append_if_highest(
            NewBid(
                listing_id=listing.id,
                bidder_id=command.bidder_id,
                amount=amount,
            ),
            floor_amount=listing.starting_price,
        )
        if placed is None:
            # Outbid between the read and the append.
            latest = bid_rules.aggregate_state(
                listing, self._ledger.get_tally(listing.id)
            )
            raise BidTooLowError(latest.highest_amount)

        return BidStateResult(
            listing_id=listing.id,
            highest_amount=placed.bid.amount,
            bidder_count=placed.bidder_count,
        )
