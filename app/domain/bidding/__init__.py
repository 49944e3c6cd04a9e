"""
Bidding bounded context — domain layer.

This module contains all domain logic for the bidding context:
- Listings and bid records
- Bid validation rules (self-bid, amount parsing, strictly-higher rule)
- Aggregate bid state (highest amount, distinct bidders)
"""
