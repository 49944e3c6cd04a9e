"""
Infrastructure adapters for the bidding bounded context.

Each adapter implements a domain port (ABC) and connects
to the auction database through a SQLAlchemy engine.
"""
