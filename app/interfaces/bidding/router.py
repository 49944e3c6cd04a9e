"""
FastAPI router for the bidding bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas and the domain rules.
Error mapping is handled by centralized error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.application.bidding.browse_listings import (
    GetListingUseCase,
    ListCategoriesUseCase,
    ListCategoryListingsUseCase,
)
from app.application.bidding.compose_quick_bids import ComposeQuickBidsUseCase
from app.application.bidding.dtos import (
    BidStateResult,
    ComposeQuickBidsQuery,
    GetBidStateQuery,
    GetListingQuery,
    ListCategoryListingsQuery,
    ListingResult,
    SubmitBidCommand,
)
from app.application.bidding.get_bid_state import GetBidStateUseCase
from app.application.bidding.submit_bid import SubmitBidUseCase
from app.core.config import settings
from app.interfaces.bidding.dependencies import (
    get_bid_state_use_case,
    get_compose_quick_bids_use_case,
    get_list_categories_use_case,
    get_list_category_listings_use_case,
    get_listing_use_case,
    get_submit_bid_use_case,
)
from app.interfaces.bidding.schemas import (
    BidRejection,
    BidStateResponse,
    CategoriesResponse,
    ListingResponse,
    ListingsResponse,
    QuickBidItem,
    QuickBidsResponse,
    SubmitBidRequest,
)
from app.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/bidding", tags=["bidding"])


def _state_response(result: BidStateResult) -> BidStateResponse:
    return BidStateResponse(
        listing_id=result.listing_id,
        highest_amount=result.highest_amount,
        bidder_count=result.bidder_count,
    )


def _listing_response(result: ListingResult) -> ListingResponse:
    return ListingResponse(
        id=result.id,
        category=result.category,
        breed=result.breed,
        location=result.location,
        weight=result.weight,
        gender=result.gender,
        starting_price=result.starting_price,
        owner_id=result.owner_id,
        image_uri=result.image_uri,
    )


@router.get(
    "/categories",
    response_model=CategoriesResponse,
    responses={503: {"model": BidRejection}},
    summary="List auction categories",
)
def list_categories(
    use_case: ListCategoriesUseCase = Depends(get_list_categories_use_case),
) -> CategoriesResponse:
    """Return the categories that currently have listings."""
    return CategoriesResponse(categories=use_case.execute())


@router.get(
    "/categories/{category}/listings",
    response_model=ListingsResponse,
    responses={503: {"model": BidRejection}},
    summary="Browse listings in a category",
)
def list_category_listings(
    category: str,
    use_case: ListCategoryListingsUseCase = Depends(
        get_list_category_listings_use_case
    ),
) -> ListingsResponse:
    """Return every listing of a category."""
    results = use_case.execute(ListCategoryListingsQuery(category=category))
    return ListingsResponse(
        category=category,
        listings=[_listing_response(r) for r in results],
    )


@router.get(
    "/listings/{listing_id}",
    response_model=ListingResponse,
    responses={404: {"model": BidRejection}, 503: {"model": BidRejection}},
    summary="Get a listing",
)
def get_listing(
    listing_id: int,
    use_case: GetListingUseCase = Depends(get_listing_use_case),
) -> ListingResponse:
    """Return a single listing."""
    return _listing_response(use_case.execute(GetListingQuery(listing_id=listing_id)))


@router.get(
    "/listings/{listing_id}/state",
    response_model=BidStateResponse,
    responses={404: {"model": BidRejection}, 503: {"model": BidRejection}},
    summary="Refresh bid state",
    description="Current highest bid and number of distinct bidders for a listing.",
)
def get_bid_state(
    listing_id: int,
    use_case: GetBidStateUseCase = Depends(get_bid_state_use_case),
) -> BidStateResponse:
    """Return the current bid state of a listing."""
    return _state_response(use_case.execute(GetBidStateQuery(listing_id=listing_id)))


@router.post(
    "/listings/{listing_id}/bids",
    status_code=201,
    response_model=BidStateResponse,
    responses={
        403: {"model": BidRejection},
        404: {"model": BidRejection},
        409: {"model": BidRejection},
        422: {"model": BidRejection},
        503: {"model": BidRejection},
    },
    summary="Place a bid",
    description="Place a bid that must beat the current highest bid.",
)
@limiter.limit(settings.rate_limit_bids)
def submit_bid(
    request: Request,
    listing_id: int,
    body: SubmitBidRequest,
    use_case: SubmitBidUseCase = Depends(get_submit_bid_use_case),
) -> BidStateResponse:
    """Place a bid and return the updated bid state."""
    command = SubmitBidCommand(
        listing_id=listing_id,
        bidder_id=body.bidder_id,
        amount=body.amount,
    )
    return _state_response(use_case.execute(command))


@router.get(
    "/quick-bids",
    response_model=QuickBidsResponse,
    responses={422: {"model": BidRejection}},
    summary="Quick-bid shortcuts",
    description="Add each preset increment to the draft amount.",
)
def compose_quick_bids(
    draft: Optional[str] = Query(default=None, max_length=32),
    use_case: ComposeQuickBidsUseCase = Depends(get_compose_quick_bids_use_case),
) -> QuickBidsResponse:
    """Return the preset quick-bid amounts for a draft."""
    results = use_case.execute(ComposeQuickBidsQuery(draft=draft))
    return QuickBidsResponse(
        quick_bids=[QuickBidItem(increment=r.increment, amount=r.amount) for r in results]
    )
