"""
Dependency injection for the bidding bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the bidding context.
"""

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.application.bidding.browse_listings import (
    GetListingUseCase,
    ListCategoriesUseCase,
    ListCategoryListingsUseCase,
)
from app.application.bidding.compose_quick_bids import ComposeQuickBidsUseCase
from app.application.bidding.get_bid_state import GetBidStateUseCase
from app.application.bidding.submit_bid import SubmitBidUseCase
from app.core.config import settings
from app.infrastructure.bidding.bid_ledger import BidLedgerAdapter
from app.infrastructure.bidding.listing_catalog import ListingCatalogAdapter


@lru_cache(maxsize=1)
def get_db_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return create_engine(settings.get_database_url(), pool_pre_ping=True)


def get_submit_bid_use_case() -> SubmitBidUseCase:
    """Build SubmitBidUseCase with its infrastructure dependencies."""
    engine = get_db_engine()
    return SubmitBidUseCase(
        catalog=ListingCatalogAdapter(engine=engine),
        ledger=BidLedgerAdapter(engine=engine),
    )


def get_bid_state_use_case() -> GetBidStateUseCase:
    """Build GetBidStateUseCase with its infrastructure dependencies."""
    engine = get_db_engine()
    return GetBidStateUseCase(
        catalog=ListingCatalogAdapter(engine=engine),
        ledger=BidLedgerAdapter(engine=engine),
    )


def get_compose_quick_bids_use_case() -> ComposeQuickBidsUseCase:
    """Build ComposeQuickBidsUseCase with the default preset increments."""
    return ComposeQuickBidsUseCase()


def get_list_categories_use_case() -> ListCategoriesUseCase:
    """Build ListCategoriesUseCase with its infrastructure dependencies."""
    return ListCategoriesUseCase(catalog=ListingCatalogAdapter(engine=get_db_engine()))


def get_list_category_listings_use_case() -> ListCategoryListingsUseCase:
    """Build ListCategoryListingsUseCase with its infrastructure dependencies."""
    return ListCategoryListingsUseCase(
        catalog=ListingCatalogAdapter(engine=get_db_engine())
    )


def get_listing_use_case() -> GetListingUseCase:
    """Build GetListingUseCase with its infrastructure dependencies."""
    return GetListingUseCase(catalog=ListingCatalogAdapter(engine=get_db_engine()))
