"""
Use case: Build quick-bid shortcuts for a draft amount.

Input: ComposeQuickBidsQuery (optional draft)
Output: list[QuickBidResult], one per preset increment
Side effects: None.
Failure cases: MalformedAmountError (non-numeric draft).
"""

from app.application.bidding.dtos import ComposeQuickBidsQuery, QuickBidResult
from app.domain.bidding.bid_rules import PRESET_INCREMENTS, add_increment


class ComposeQuickBidsUseCase:
    """Adds each preset increment to the draft amount."""

    def __init__(self, increments: tuple[int, ...] = PRESET_INCREMENTS) -> None:
        self._increments = increments

    def execute(self, query: ComposeQuickBidsQuery) -> list[QuickBidResult]:
        return [
            QuickBidResult(increment=step, amount=add_increment(query.draft, step))
            for step in self._increments
        ]
