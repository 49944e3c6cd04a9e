"""
Table definitions for the auction database.

Used to create the schema (see db/init_schema.py and the test suite).
Adapters query these tables with plain SQL through ``text()``.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    text,
)

from app.domain.bidding.entities import AMOUNT_PRECISION, AMOUNT_SCALE

metadata = MetaData()

livestock = Table(
    "livestock",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("category", String(64), nullable=False, index=True),
    Column("breed", String(128)),
    Column("location", String(255)),
    Column("weight", Numeric(10, 2)),
    Column("gender", String(16)),
    Column("starting_price", Numeric(AMOUNT_PRECISION, AMOUNT_SCALE), nullable=False),
    Column("owner_id", String(64), nullable=False),
    Column("image_uri", Text),
)

bids = Table(
    "bids",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "livestock_id",
        Integer,
        ForeignKey("livestock.id"),
        nullable=False,
        index=True,
    ),
    Column("bidder_id", String(64), nullable=False),
    Column("bid_amount", Numeric(AMOUNT_PRECISION, AMOUNT_SCALE), nullable=False),
    Column("status", String(16), nullable=False, server_default="pending"),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
    CheckConstraint("bid_amount > 0", name="ck_bids_positive_amount"),
)
