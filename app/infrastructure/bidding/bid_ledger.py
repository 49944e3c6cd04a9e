"""
Adapter: Bid ledger.

Implements BidLedger port on the ``bids`` table.

Appends are compare-and-append: the row is inserted only when its amount
beats the current maximum (or the starting price), evaluated inside the
same transaction as the insert. On PostgreSQL the listing row is locked
first so concurrent appends for one listing run one after another and
never compare against a stale maximum. SQLite holds the database write
lock for the whole ``INSERT ... SELECT`` statement.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import Numeric, bindparam, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from app.domain.bidding.entities import (
    AMOUNT_PRECISION,
    AMOUNT_SCALE,
    Bid,
    BidTally,
    NewBid,
    PlacedBid,
)
from app.domain.bidding.errors import BidPersistenceError
from app.domain.bidding.ports import BidLedger

logger = logging.getLogger(__name__)

AMOUNT_TYPE = Numeric(AMOUNT_PRECISION, AMOUNT_SCALE)

_TALLY_QUERY = text(
    """
    SELECT MAX(bid_amount) AS highest, COUNT(DISTINCT bidder_id) AS bidders
    FROM bids
    WHERE livestock_id = :listing_id
    """
)

_LOCK_LISTING_QUERY = text(
    "SELECT id FROM livestock WHERE id = :listing_id FOR UPDATE"
)

_CONDITIONAL_INSERT = text(
    """
    INSERT INTO bids (livestock_id, bidder_id, bid_amount, status)
    SELECT :listing_id, :bidder_id, :bid_amount, :status
    WHERE :bid_amount > COALESCE(
        (SELECT MAX(bid_amount) FROM bids WHERE livestock_id = :listing_id),
        :floor_amount
    )
    RETURNING id, created_at
    """
).bindparams(
    bindparam("bid_amount", type_=AMOUNT_TYPE),
    bindparam("floor_amount", type_=AMOUNT_TYPE),
)

_BIDDER_COUNT_QUERY = text(
    "SELECT COUNT(DISTINCT bidder_id) FROM bids WHERE livestock_id = :listing_id"
)


def _to_datetime(value: Any) -> datetime:
    """Normalize a driver timestamp to an aware UTC datetime.

    SQLite hands back ``CURRENT_TIMESTAMP`` as text without an offset.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


class BidLedgerAdapter(BidLedger):
    """SQL implementation of the append-only bid ledger."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_tally(self, listing_id: int) -> BidTally:
        """Return the maximum bid amount and distinct bidder count."""
        try:
            with self._engine.connect() as conn:
                row = conn.execute(_TALLY_QUERY, {"listing_id": listing_id}).one()
        except SQLAlchemyError as exc:
            logger.error("Bid tally query failed for listing_id=%s", listing_id, exc_info=True)
            raise BidPersistenceError("get_tally") from exc

        highest = None if row.highest is None else Decimal(str(row.highest))
        return BidTally(highest_amount=highest, bidder_count=int(row.bidders))

    def append_if_highest(
        self, bid: NewBid, floor_amount: Decimal
    ) -> Optional[PlacedBid]:
        """Append a bid only if it beats every recorded bid and the floor.

        Returns:
            PlacedBid on success, None when the bid no longer beats the
            recorded maximum. Nothing is written in that case.
        """
        try:
            with self._engine.begin() as conn:
                return self._append(conn, bid, floor_amount)
        except SQLAlchemyError as exc:
            logger.error(
                "Bid append failed for listing_id=%s", bid.listing_id, exc_info=True
            )
            raise BidPersistenceError("append_bid") from exc

    def _append(
        self, conn: Connection, bid: NewBid, floor_amount: Decimal
    ) -> Optional[PlacedBid]:
        if conn.dialect.name == "postgresql":
            conn.execute(_LOCK_LISTING_QUERY, {"listing_id": bid.listing_id})

        inserted = conn.execute(
            _CONDITIONAL_INSERT,
            {
                "listing_id": bid.listing_id,
                "bidder_id": bid.bidder_id,
                "bid_amount": bid.amount,
                "status": bid.status.value,
                "floor_amount": floor_amount,
            },
        ).first()

        if inserted is None:
            logger.debug("Conditional append refused for listing_id=%s", bid.listing_id)
            return None

        bidder_count = conn.execute(
            _BIDDER_COUNT_QUERY, {"listing_id": bid.listing_id}
        ).scalar_one()

        logger.debug("Appended bid id=%s for listing_id=%s", inserted.id, bid.listing_id)
        return PlacedBid(
            bid=Bid(
                id=int(inserted.id),
                listing_id=bid.listing_id,
                bidder_id=bid.bidder_id,
                amount=bid.amount,
                status=bid.status,
                created_at=_to_datetime(inserted.created_at),
            ),
            bidder_count=int(bidder_count),
        )
