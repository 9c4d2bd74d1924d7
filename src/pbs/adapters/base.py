"""
Bidder adapter contract.

The auction host hands each adapter the normalized bid request, sends the
``RequestData`` descriptors it gets back over HTTP, and feeds each HTTP
response to the adapter again to get typed bids out of it. Adapters never
perform I/O themselves.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..errors import AdapterError
from ..openrtb import Bid, BidRequest


class BidType(str, Enum):
    """Media type a bid is for."""

    BANNER = "banner"
    VIDEO = "video"
    AUDIO = "audio"
    NATIVE = "native"


@dataclass
class RequestData:
    """
    Outbound HTTP request descriptor.

    Attributes:
        method: HTTP method
        uri: Full URI including the query string
        body: Serialized request body
        headers: HTTP headers to send
    """

    method: str
    uri: str
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    def json_body(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


@dataclass
class ResponseData:
    """Raw HTTP response received from a bidder."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class TypedBid:
    """A bid annotated with the media type it is for."""

    bid: Bid
    bid_type: BidType


@dataclass
class BidderResponse:
    """Normalized bids from one bidder response."""

    bids: list[TypedBid] = field(default_factory=list)
    currency: str = "USD"


@dataclass
class ExtImpBidder:
    """
    Generic wrapper found in ``imp.ext``.

    The auction host moves each bidder's parameters under ``bidder`` before
    calling the adapter, so adapters decode this first and then decode
    ``bidder`` into their own params type.
    """

    bidder: Any = None
    prebid: Optional[dict[str, Any]] = None
    tid: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ExtImpBidder":
        """
        Create from dictionary.

        A missing ``bidder`` is left as None; it is the params decoder's
        job to reject it.

        Raises:
            ValueError: If ``data`` is not an object or ``prebid``/``tid``
                have the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        prebid = data.get("prebid")
        if prebid is not None and not isinstance(prebid, dict):
            raise ValueError("prebid must be a JSON object")
        tid = data.get("tid")
        if tid is not None and not isinstance(tid, str):
            raise ValueError("tid must be a string")

        return cls(
            bidder=data.get("bidder"),
            prebid=prebid,
            tid=tid,
        )


class Bidder(ABC):
    """Interface every bidder adapter implements."""

    @abstractmethod
    def build_requests(
        self, request: BidRequest
    ) -> tuple[list[RequestData], list[AdapterError]]:
        """
        Build the HTTP requests to send to the bidder.

        Errors are returned, not raised, so that one bad impression does not
        cost the bidder the rest of the auction.
        """

    @abstractmethod
    def parse_response(
        self,
        internal_request: BidRequest,
        external_request: RequestData,
        response: ResponseData,
    ) -> tuple[Optional[BidderResponse], Optional[list[AdapterError]]]:
        """Turn one bidder HTTP response into typed bids."""
