"""
Domain-specific errors for the bidding bounded context.

All errors raised from the domain layer must be defined here.
Each error carries a ``kind`` tag that callers receive alongside the
message. These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from decimal import Decimal

CURRENCY_SYMBOL = "₱"


def format_amount(amount: Decimal) -> str:
    """Render an amount for user-facing messages, e.g. ``₱5,000``."""
    if amount == amount.to_integral_value():
        return f"{CURRENCY_SYMBOL}{int(amount):,}"
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


class BiddingDomainError(Exception):
    """Base error for all bidding domain errors."""

    kind = "BiddingError"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidItemError(BiddingDomainError):
    """Raised when a listing reference is missing or cannot be resolved."""

    kind = "InvalidItem"

    def __init__(self, listing_id: object = None) -> None:
        super().__init__("Invalid auction item.")
        self.listing_id = listing_id


class SelfBidProhibitedError(BiddingDomainError):
    """Raised when the bidder is the owner of the listing."""

    kind = "SelfBidProhibited"

    def __init__(self) -> None:
        super().__init__("You cannot place a bid on your own auction.")


class MalformedAmountError(BiddingDomainError):
    """Raised when a proposed amount is not a finite number."""

    kind = "MalformedAmount"

    def __init__(self) -> None:
        super().__init__("Please enter a valid bid amount.")


class BidTooLowError(BiddingDomainError):
    """Raised when a proposed amount does not beat the current highest bid."""

    kind = "BidTooLow"

    def __init__(self, highest_amount: Decimal) -> None:
        super().__init__(
            "Your bid must be higher than the current highest bid of "
            f"{format_amount(highest_amount)}."
        )
        self.highest_amount = highest_amount


class BidPersistenceError(BiddingDomainError):
    """Raised when reading from or writing to the bid ledger fails."""

    kind = "PersistenceError"

    def __init__(self, operation: str) -> None:
        super().__init__("Could not reach the auction service. Please try again later.")
        self.operation = operation
