"""
Adapter: Listing catalog.

Implements ListingCatalog port.
Reads livestock listings from the ``livestock`` table.
"""

import logging
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.domain.bidding.entities import Listing
from app.domain.bidding.errors import BidPersistenceError
from app.domain.bidding.ports import ListingCatalog

logger = logging.getLogger(__name__)

_LISTING_COLUMNS = """
    id, category, breed, location, weight, gender,
    starting_price, owner_id, image_uri
"""


def _to_decimal(value: Any) -> Optional[Decimal]:
    return None if value is None else Decimal(str(value))


def _row_to_listing(row) -> Listing:
    """Map a livestock row to a Listing entity."""
    return Listing(
        id=int(row.id),
        category=row.category,
        breed=row.breed,
        location=row.location,
        weight=_to_decimal(row.weight),
        gender=row.gender,
        starting_price=Decimal(str(row.starting_price)),
        owner_id=str(row.owner_id),
        image_uri=row.image_uri,
    )


class ListingCatalogAdapter(ListingCatalog):
    """SQL implementation of the listing catalog."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, listing_id: int) -> Optional[Listing]:
        """Return a listing by its ID, or None if not found."""
        query = text(
            f"SELECT {_LISTING_COLUMNS} FROM livestock WHERE id = :listing_id"
        )
        try:
            with self._engine.connect() as conn:
                row = conn.execute(query, {"listing_id": listing_id}).first()
        except SQLAlchemyError as exc:
            logger.error("Catalog lookup failed for listing_id=%s", listing_id, exc_info=True)
            raise BidPersistenceError("get_listing") from exc

        return _row_to_listing(row) if row is not None else None

    def list_by_category(self, category: str) -> list[Listing]:
        """Return all listings in a category ordered by ID."""
        query = text(
            f"SELECT {_LISTING_COLUMNS} FROM livestock "
            "WHERE category = :category ORDER BY id"
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query, {"category": category}).fetchall()
        except SQLAlchemyError as exc:
            logger.error("Catalog query failed for category=%s", category, exc_info=True)
            raise BidPersistenceError("list_listings") from exc

        logger.debug("Fetched %d listings for category=%s", len(rows), category)
        return [_row_to_listing(row) for row in rows]

    def list_categories(self) -> list[str]:
        """Return the distinct categories that have listings, sorted."""
        query = text("SELECT DISTINCT category FROM livestock ORDER BY category")
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).fetchall()
        except SQLAlchemyError as exc:
            logger.error("Catalog category query failed", exc_info=True)
            raise BidPersistenceError("list_categories") from exc

        return [row.category for row in rows]
