"""OpenRTB 2.5 object model used by the bidder adapters."""

from .request import BidRequest, Imp, Site
from .response import Bid, BidResponse, SeatBid

__all__ = [
    "BidRequest",
    "Imp",
    "Site",
    "Bid",
    "BidResponse",
    "SeatBid",
]
