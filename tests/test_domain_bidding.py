"""
Tests for the bidding domain layer.

Tests bid rules, entities and error classes in isolation.
No external dependencies or IO required.
"""

from decimal import Decimal

import pytest

from app.domain.bidding import bid_rules
from app.domain.bidding.entities import BidStatus, BidTally, NewBid
from app.domain.bidding.errors import (
    BidPersistenceError,
    BidTooLowError,
    InvalidItemError,
    MalformedAmountError,
    SelfBidProhibitedError,
    format_amount,
)
from conftest import OWNER_ID, make_listing


class TestParseAmount:
    """Tests for parsing caller-supplied amounts."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("6000", Decimal("6000")),
            ("  7500.50 ", Decimal("7500.50")),
            (6000, Decimal("6000")),
            (6000.5, Decimal("6000.5")),
            (Decimal("12.25"), Decimal("12.25")),
        ],
    )
    def test_valid_amounts(self, raw, expected) -> None:
        assert bid_rules.parse_amount(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["abc", "", "   ", None, True, "NaN", "Infinity", "-inf", float("nan"), "12abc"],
    )
    def test_malformed_amounts(self, raw) -> None:
        with pytest.raises(MalformedAmountError):
            bid_rules.parse_amount(raw)

    @pytest.mark.parametrize("raw", [[9000], {"amount": 9000}, b"9000", object()])
    def test_non_scalar_values_rejected(self, raw) -> None:
        with pytest.raises(MalformedAmountError):
            bid_rules.parse_amount(raw)

    @pytest.mark.parametrize(
        "raw", ["1e5000", "1e400", "10000000000", "-10000000000", 10**10, "5000.001", 0.001]
    )
    def test_amounts_outside_column_rejected(self, raw) -> None:
        """Amounts must fit NUMERIC(12, 2) exactly."""
        with pytest.raises(MalformedAmountError):
            bid_rules.parse_amount(raw)

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("9999999999.99", Decimal("9999999999.99")),
            ("5000.10", Decimal("5000.10")),
            ("5000.000", Decimal("5000")),
            ("1E+3", Decimal("1000")),
        ],
    )
    def test_amounts_at_column_limits(self, raw, expected) -> None:
        assert bid_rules.parse_amount(raw) == expected


class TestAddIncrement:
    """Tests for the quick-bid increment helper."""

    def test_unset_draft_counts_as_zero(self) -> None:
        assert bid_rules.add_increment(None, 1000) == "1000"

    def test_blank_draft_counts_as_zero(self) -> None:
        assert bid_rules.add_increment("  ", 10000) == "10000"

    def test_adds_to_existing_draft(self) -> None:
        assert bid_rules.add_increment("2000", 3000) == "5000"

    def test_keeps_fractional_part(self) -> None:
        assert bid_rules.add_increment("2000.50", 1000) == "3000.5"

    def test_no_exponent_in_output(self) -> None:
        assert bid_rules.add_increment("5000.00", 5000) == "10000"

    def test_non_numeric_draft_rejected(self) -> None:
        with pytest.raises(MalformedAmountError):
            bid_rules.add_increment("abc", 1000)

    @pytest.mark.parametrize("draft", ["1e5000", "1e400", "10000000000", "2000.005"])
    def test_out_of_range_draft_rejected(self, draft) -> None:
        with pytest.raises(MalformedAmountError):
            bid_rules.add_increment(draft, 1000)

    def test_large_draft_rendered_as_digits(self) -> None:
        assert bid_rules.add_increment("9999999999", 10000) == "10000009999"

    def test_preset_increments(self) -> None:
        assert bid_rules.PRESET_INCREMENTS == (1000, 3000, 5000, 10000)


class TestValidateProposal:
    """Tests for the ordered, ledger-free checks."""

    def test_missing_listing_fails_first(self) -> None:
        with pytest.raises(InvalidItemError):
            bid_rules.validate_proposal(None, OWNER_ID, "abc")

    def test_missing_listing_reports_its_id(self) -> None:
        with pytest.raises(InvalidItemError) as exc_info:
            bid_rules.validate_proposal(None, "bidder-a", "6000", listing_id=42)
        assert exc_info.value.listing_id == 42

    def test_owner_taken_from_listing(self) -> None:
        listing = make_listing(owner_id="someone-else")
        with pytest.raises(SelfBidProhibitedError):
            bid_rules.validate_proposal(listing, "someone-else", "6000")
        assert bid_rules.validate_proposal(listing, OWNER_ID, "6000") == Decimal("6000")

    def test_self_bid_checked_before_amount(self) -> None:
        listing = make_listing()
        with pytest.raises(SelfBidProhibitedError):
            bid_rules.validate_proposal(listing, OWNER_ID, "abc")

    @pytest.mark.parametrize("amount", ["1", "999999", 10**9])
    def test_self_bid_regardless_of_amount(self, amount) -> None:
        listing = make_listing()
        with pytest.raises(SelfBidProhibitedError):
            bid_rules.validate_proposal(listing, OWNER_ID, amount)

    def test_malformed_amount(self) -> None:
        listing = make_listing()
        with pytest.raises(MalformedAmountError):
            bid_rules.validate_proposal(listing, "bidder-a", "abc")

    def test_returns_parsed_amount(self) -> None:
        listing = make_listing()
        amount = bid_rules.validate_proposal(listing, "bidder-a", "6000")
        assert amount == Decimal("6000")


class TestCheckBeatsHighest:
    """Tests for the strictly-higher rule."""

    def test_equal_amount_is_too_low(self) -> None:
        with pytest.raises(BidTooLowError) as exc_info:
            bid_rules.check_beats_highest(Decimal("6000"), Decimal("6000"))
        assert exc_info.value.highest_amount == Decimal("6000")

    def test_lower_amount_is_too_low(self) -> None:
        with pytest.raises(BidTooLowError):
            bid_rules.check_beats_highest(Decimal("4000"), Decimal("5000"))

    def test_higher_amount_passes(self) -> None:
        bid_rules.check_beats_highest(Decimal("5000.01"), Decimal("5000"))


class TestAggregateState:
    """Tests for deriving the bid aggregate."""

    def test_falls_back_to_starting_price(self) -> None:
        listing = make_listing(starting_price="5000")
        state = bid_rules.aggregate_state(listing, BidTally(None, 0))
        assert state.highest_amount == Decimal("5000")
        assert state.bidder_count == 0
        assert state.listing_id == listing.id

    def test_uses_highest_recorded_bid(self) -> None:
        listing = make_listing(starting_price="5000")
        state = bid_rules.aggregate_state(listing, BidTally(Decimal("7000"), 2))
        assert state.highest_amount == Decimal("7000")
        assert state.bidder_count == 2


class TestEntities:
    """Tests for bidding entities."""

    def test_new_bid_defaults_to_pending(self) -> None:
        bid = NewBid(listing_id=1, bidder_id="bidder-a", amount=Decimal("6000"))
        assert bid.status is BidStatus.PENDING
        assert bid.status.value == "pending"


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_bid_too_low_message_states_amount_to_beat(self) -> None:
        exc = BidTooLowError(Decimal("5000"))
        assert exc.kind == "BidTooLow"
        assert "₱5,000" in exc.message

    def test_fractional_amount_formatting(self) -> None:
        assert format_amount(Decimal("12345.5")) == "₱12,345.50"

    @pytest.mark.parametrize(
        "exc, kind",
        [
            (InvalidItemError(7), "InvalidItem"),
            (SelfBidProhibitedError(), "SelfBidProhibited"),
            (MalformedAmountError(), "MalformedAmount"),
            (BidTooLowError(Decimal("1")), "BidTooLow"),
            (BidPersistenceError("get_tally"), "PersistenceError"),
        ],
    )
    def test_error_kinds(self, exc, kind) -> None:
        assert exc.kind == kind
        assert str(exc) == exc.message

    def test_persistence_message_is_generic(self) -> None:
        exc = BidPersistenceError("append_bid")
        assert "try again later" in exc.message
        assert exc.operation == "append_bid"
