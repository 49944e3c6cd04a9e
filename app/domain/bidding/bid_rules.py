"""
Bid validation rules.

Pure functions that decide whether a bid proposal is acceptable.
Checks run in a fixed order and the first failure wins:

1. the listing exists,
2. the bidder is not the owner,
3. the amount is a finite number with at most two decimals, below 10^10,
4. the amount is strictly higher than the current highest bid.

No IO happens here. The current highest amount is supplied by the caller,
which must read it fresh from the ledger right before calling
``check_beats_highest``.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from app.domain.bidding.entities import (
    AMOUNT_PRECISION,
    AMOUNT_SCALE,
    BidAggregate,
    BidTally,
    Listing,
)
from app.domain.bidding.errors import (
    BidTooLowError,
    InvalidItemError,
    MalformedAmountError,
    SelfBidProhibitedError,
)

AmountInput = Union[str, int, float, Decimal, None]

PRESET_INCREMENTS: tuple[int, ...] = (1000, 3000, 5000, 10000)

# Exclusive upper bound on magnitude, and the smallest representable step.
AMOUNT_LIMIT = Decimal(10) ** (AMOUNT_PRECISION - AMOUNT_SCALE)
AMOUNT_STEP = Decimal(1).scaleb(-AMOUNT_SCALE)


def parse_amount(raw: Any) -> Decimal:
    """Parse a caller-supplied amount into a Decimal the ledger can store.

    Accepts numbers and numeric strings (surrounding whitespace ignored).
    The value must fit a NUMERIC(12, 2) column: at most two decimal places
    and a magnitude below 10^10.

    Raises:
        MalformedAmountError: For None, booleans, non-scalar values, empty or
            non-numeric text, NaN, infinities, extra decimal places and
            out-of-range magnitudes.
    """
    if raw is None or isinstance(raw, bool):
        raise MalformedAmountError()
    if not isinstance(raw, (str, int, float, Decimal)):
        raise MalformedAmountError()

    text = raw.strip() if isinstance(raw, str) else str(raw)
    if not text:
        raise MalformedAmountError()

    try:
        amount = Decimal(text)
    except InvalidOperation as exc:
        raise MalformedAmountError() from exc

    if not amount.is_finite() or abs(amount) >= AMOUNT_LIMIT:
        raise MalformedAmountError()
    if amount != amount.quantize(AMOUNT_STEP):
        raise MalformedAmountError()
    return amount


def render_amount(amount: Decimal) -> str:
    """Render an amount as plain digits without exponent or trailing zeros."""
    return format(amount.normalize(), "f")


def add_increment(draft: AmountInput, increment: Union[int, Decimal]) -> str:
    """Return ``draft + increment`` as a string for a quick-bid shortcut.

    An unset or blank draft counts as zero. This only composes an amount;
    the result still goes through full validation when submitted.

    Examples:
        >>> add_increment(None, 1000)
        '1000'
        >>> add_increment("2000", 3000)
        '5000'
    """
    if draft is None or (isinstance(draft, str) and not draft.strip()):
        base = Decimal(0)
    else:
        base = parse_amount(draft)
    return render_amount(base + Decimal(increment))


def check_listing(listing: Optional[Listing], listing_id: object = None) -> Listing:
    """Return the listing, or raise InvalidItemError if it is missing."""
    if listing is None:
        raise InvalidItemError(listing_id)
    return listing


def check_not_owner(bidder_id: str, owner_id: str) -> None:
    """Reject a bid placed by the listing's own owner."""
    if bidder_id == owner_id:
        raise SelfBidProhibitedError()


def check_beats_highest(amount: Decimal, highest_amount: Decimal) -> None:
    """Require the amount to be strictly greater than the current highest."""
    if amount <= highest_amount:
        raise BidTooLowError(highest_amount)


def validate_proposal(
    listing: Optional[Listing],
    bidder_id: str,
    proposed_amount: Any,
    listing_id: object = None,
) -> Decimal:
    """Run the checks that need no ledger state (steps 1-3).

    The owner is taken from the listing. ``listing_id`` is reported on
    InvalidItemError when the listing is missing.

    Returns:
        The parsed amount, ready for ``check_beats_highest``.
    """
    listing = check_listing(listing, listing_id)
    check_not_owner(bidder_id, listing.owner_id)
    return parse_amount(proposed_amount)


def aggregate_state(listing: Listing, tally: BidTally) -> BidAggregate:
    """Derive the bid aggregate, falling back to the starting price."""
    highest = tally.highest_amount
    if highest is None:
        highest = listing.starting_price
    return BidAggregate(
        listing_id=listing.id,
        highest_amount=highest,
        bidder_count=tally.bidder_count,
    )
