"""
Use cases: Read-only browsing of the listing catalog.

ListCategoriesUseCase
    Output: list[str]. Side effects: None.
ListCategoryListingsUseCase
    Input: ListCategoryListingsQuery (category)
    Output: list[ListingResult], empty when the category has no listings.
GetListingUseCase
    Input: GetListingQuery (listing_id)
    Output: ListingResult
    Failure cases: InvalidItemError.

All three raise BidPersistenceError when the catalog cannot be read.
"""

import logging

from app.application.bidding.dtos import (
    GetListingQuery,
    ListCategoryListingsQuery,
    ListingResult,
)
from app.domain.bidding import bid_rules
from app.domain.bidding.ports import ListingCatalog

logger = logging.getLogger(__name__)


class ListCategoriesUseCase:
    """Returns the categories that currently have listings."""

    def __init__(self, catalog: ListingCatalog) -> None:
        self._catalog = catalog

    def execute(self) -> list[str]:
        return self._catalog.list_categories()


class ListCategoryListingsUseCase:
    """Returns every listing in one category."""

    def __init__(self, catalog: ListingCatalog) -> None:
        self._catalog = catalog

    def execute(self, query: ListCategoryListingsQuery) -> list[ListingResult]:
        """Run the category browse query.

        Args:
            query: Query parameters (category).

        Returns:
            Listings ordered by ID.
        """
        logger.info("Listing livestock for category=%s", query.category)
        listings = self._catalog.list_by_category(query.category)
        return [ListingResult.from_entity(listing) for listing in listings]


class GetListingUseCase:
    """Returns a single listing or fails with InvalidItemError."""

    def __init__(self, catalog: ListingCatalog) -> None:
        self._catalog = catalog

    def execute(self, query: GetListingQuery) -> ListingResult:
        listing = bid_rules.check_listing(
            self._catalog.get_by_id(query.listing_id), query.listing_id
        )
        return ListingResult.from_entity(listing)
