"""
Bidder Adapters

Each adapter translates the auction's OpenRTB request into the requests a
single demand partner expects, and that partner's responses back into
typed bids.

Usage:
    from src.pbs.adapters.videobyte import builder
    from src.pbs.config import load_adapter_config

    adapter = builder("videobyte", load_adapter_config("videobyte"))
    requests, errors = adapter.build_requests(bid_request)
"""

from .base import (
    Bidder,
    BidderResponse,
    BidType,
    ExtImpBidder,
    RequestData,
    ResponseData,
    TypedBid,
)

__all__ = [
    "Bidder",
    "BidderResponse",
    "BidType",
    "ExtImpBidder",
    "RequestData",
    "ResponseData",
    "TypedBid",
]
