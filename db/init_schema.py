"""
Create the auction tables and optionally seed sample listings.

Creates ``livestock`` and ``bids`` if they do not exist. With ``--seed``
a handful of listings is inserted into an empty ``livestock`` table so a
local API can be exercised right away.

Usage:
    python db/init_schema.py [--seed] [--database-url URL]
"""

import argparse
import logging
import sys
from pathlib import Path

from sqlalchemy import create_engine, func, insert, select

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings  # noqa: E402
from app.infrastructure.bidding.tables import livestock, metadata  # noqa: E402
from app.shared.logging import configure_logging  # noqa: E402

logger = logging.getLogger("db.init_schema")

SAMPLE_LISTINGS = [
    {
        "category": "Cattle",
        "breed": "Brahman",
        "location": "Bukidnon",
        "weight": 420,
        "gender": "Male",
        "starting_price": 45000,
        "owner_id": "seed-owner-1",
    },
    {
        "category": "Cattle",
        "breed": "Holstein",
        "location": "Batangas",
        "weight": 380,
        "gender": "Female",
        "starting_price": 52000,
        "owner_id": "seed-owner-2",
    },
    {
        "category": "Goat",
        "breed": "Boer",
        "location": "Cebu",
        "weight": 45,
        "gender": "Male",
        "starting_price": 8000,
        "owner_id": "seed-owner-1",
    },
    {
        "category": "Pig",
        "breed": "Landrace",
        "location": "Pampanga",
        "weight": 95,
        "gender": "Female",
        "starting_price": 5000,
        "owner_id": "seed-owner-3",
    },
]


def main() -> int:
    parser = argparse.ArgumentParser(description="Create the auction schema.")
    parser.add_argument("--seed", action="store_true", help="Insert sample listings")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    args = parser.parse_args()

    configure_logging(settings.log_level)
    engine = create_engine(args.database_url or settings.get_database_url())

    metadata.create_all(engine)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))

    if args.seed:
        with engine.begin() as conn:
            existing = conn.execute(select(func.count()).select_from(livestock)).scalar_one()
            if existing:
                logger.info("livestock already has %d rows, skipping seed", existing)
            else:
                conn.execute(insert(livestock), SAMPLE_LISTINGS)
                logger.info("Seeded %d listings", len(SAMPLE_LISTINGS))
    return 0


if __name__ == "__main__":
    sys.exit(main())
