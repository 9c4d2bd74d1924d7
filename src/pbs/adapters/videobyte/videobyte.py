"""
VideoByte bidder adapter.

VideoByte takes one impression per request, so the adapter fans an auction
out into one POST per impression. Publisher, placement and network IDs from
the impression's bidder params travel in the query string.
"""

import dataclasses
import json
from typing import Optional
from urllib.parse import urlencode, urlparse

from ...config import AdapterConfig
from ...errors import AdapterError, BadInput, BadServerResponse, InvalidAdapterConfigError
from ...logging import bidder_logger
from ...openrtb import BidRequest, BidResponse, Imp
from ..base import (
    Bidder,
    BidderResponse,
    BidType,
    ExtImpBidder,
    RequestData,
    ResponseData,
    TypedBid,
)
from .params import ExtImpVideoByte

BIDDER_CODE = "videobyte"


class VideoByteAdapter(Bidder):
    """Adapter for the VideoByte exchange."""

    def __init__(self, endpoint: str):
        """
        Initialize the adapter.

        Args:
            endpoint: Base URL of the VideoByte bid endpoint
        """
        self.endpoint = endpoint
        self.logger = bidder_logger(BIDDER_CODE)

    def build_requests(
        self, request: BidRequest
    ) -> tuple[list[RequestData], list[AdapterError]]:
        """
        Build one POST per impression.

        Each outbound body is the full request narrowed to a single
        impression. The caller's request is never modified.

        Returns:
            Tuple of (request descriptors, errors for skipped impressions)
        """
        log = self.logger.bind(auction_id=request.id)
        adapter_requests: list[RequestData] = []
        errors: list[AdapterError] = []

        for imp in request.imp:
            try:
                imp_ext = _parse_ext(imp)
            except BadInput as e:
                log.debug("Skipping impression", imp_id=imp.id, error=e.message)
                errors.append(e)
                continue

            single_imp_request = dataclasses.replace(request, imp=[imp])
            try:
                body = single_imp_request.to_json().encode("utf-8")
            except (TypeError, ValueError, RecursionError) as e:
                errors.append(
                    AdapterError(f"Ignoring imp id={imp.id}, error while encoding request, err: {e}")
                )
                continue

            adapter_requests.append(
                RequestData(
                    method="POST",
                    uri=f"{self.endpoint}?{urlencode(sorted(_get_params(imp_ext).items()))}",
                    body=body,
                    headers=_get_headers(request),
                )
            )

        log.debug(
            "Built requests",
            requests=len(adapter_requests),
            errors=len(errors),
        )
        return adapter_requests, errors

    def parse_response(
        self,
        internal_request: BidRequest,
        external_request: RequestData,
        response: ResponseData,
    ) -> tuple[Optional[BidderResponse], Optional[list[AdapterError]]]:
        """
        Turn a VideoByte HTTP response into typed bids.

        A 204 is a no-bid and yields neither bids nor errors.
        """
        log = self.logger.bind(auction_id=internal_request.id)

        if response.status_code == 204:
            return None, None

        if response.status_code == 400:
            log.debug("Bad request reported", status_code=response.status_code)
            return None, [
                BadInput(
                    f"Bad user input: HTTP status {response.status_code}. "
                    "Run with request.debug = 1 for more info"
                )
            ]

        if response.status_code != 200:
            log.debug("Unexpected status", status_code=response.status_code)
            return None, [
                BadServerResponse(
                    f"Unexpected status code: {response.status_code}. "
                    "Run with request.debug = 1 for more info"
                )
            ]

        try:
            ortb_response = BidResponse.from_json(response.body)
        except (TypeError, ValueError, RecursionError) as e:
            # Only the generic message goes back to the host
            log.debug("Undecodable response body", error=str(e))
            return None, [BadServerResponse("Bad Server Response")]

        imp_by_id = {imp.id: imp for imp in internal_request.imp}

        bidder_response = BidderResponse()
        for seat_bid in ortb_response.seatbid:
            for bid in seat_bid.bid:
                bidder_response.bids.append(
                    TypedBid(bid=bid, bid_type=_get_media_type_for_imp(imp_by_id.get(bid.impid)))
                )

        return bidder_response, None


def builder(bidder_name: str, config: AdapterConfig) -> VideoByteAdapter:
    """
    Build a VideoByte adapter from host configuration.

    Raises:
        InvalidAdapterConfigError: If the endpoint is not an http(s) URL
    """
    parsed = urlparse(config.endpoint or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidAdapterConfigError(
            f"Invalid endpoint URL for {bidder_name}: {config.endpoint!r}"
        )
    return VideoByteAdapter(endpoint=config.endpoint)


def _get_media_type_for_imp(imp: Optional[Imp]) -> BidType:
    # VideoByte is a video exchange; anything that is not a known banner is video
    if imp is not None and imp.banner is not None:
        return BidType.BANNER
    return BidType.VIDEO


def _get_params(imp_ext: ExtImpVideoByte) -> dict[str, str]:
    params = {
        "source": "pbs",
        "pid": imp_ext.publisher_id,
    }
    if imp_ext.placement_id:
        params["placementId"] = imp_ext.placement_id
    if imp_ext.network_id:
        params["nid"] = imp_ext.network_id
    return params


def _get_headers(request: BidRequest) -> dict[str, str]:
    headers = {
        "Content-Type": "application/json;charset=utf-8",
        "Accept": "application/json",
    }

    if request.site is not None:
        if request.site.domain:
            headers["Origin"] = request.site.domain
        if request.site.ref:
            headers["Referer"] = request.site.ref

    return headers


def _parse_ext(imp: Imp) -> ExtImpVideoByte:
    """
    Decode the VideoByte params of an impression.

    Raises:
        BadInput: If either the bidder wrapper or the params cannot be decoded
    """
    try:
        ext = imp.ext
        if isinstance(ext, (str, bytes, bytearray)):
            ext = json.loads(ext)
        bidder_ext = ExtImpBidder.from_dict(ext)
    except (ValueError, RecursionError) as e:
        raise BadInput(
            f"Ignoring imp id={imp.id}, error while decoding extImpBidder, err: {e}"
        ) from e

    try:
        return ExtImpVideoByte.from_dict(bidder_ext.bidder)
    except ValueError as e:
        raise BadInput(
            f"Ignoring imp id={imp.id}, error while decoding impExt, err: {e}"
        ) from e
