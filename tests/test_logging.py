"""Tests for structured logging of adapter activity."""

from structlog.testing import capture_logs

from src.pbs.adapters.base import RequestData, ResponseData
from src.pbs.adapters.videobyte import VideoByteAdapter
from src.pbs.logging import add_service_info, bidder_logger
from src.pbs.openrtb import BidRequest, Imp


class TestProcessors:
    """Test the custom structlog processors."""

    def test_add_service_info(self):
        event = add_service_info(None, "info", {"event": "x"})

        assert event["service"] == "pbs-adapters"


class TestAdapterLogging:
    """Test that adapter log lines carry bidder and auction context."""

    def test_bidder_logger_binds_bidder(self):
        with capture_logs() as logs:
            bidder_logger("videobyte").info("hello")

        assert logs[0]["bidder"] == "videobyte"
        assert logs[0]["event"] == "hello"

    def test_skipped_impression_logged_with_auction(self):
        """Skipped impressions are logged with the auction and impression IDs."""
        with capture_logs() as logs:
            adapter = VideoByteAdapter(endpoint="https://x.videobyte.com/ortbhb")
            adapter.build_requests(BidRequest(id="auction-7", imp=[Imp(id="imp-1", ext=None)]))

        skipped = [entry for entry in logs if entry["event"] == "Skipping impression"]
        assert len(skipped) == 1
        assert skipped[0]["auction_id"] == "auction-7"
        assert skipped[0]["imp_id"] == "imp-1"
        assert skipped[0]["bidder"] == "videobyte"

    def test_unexpected_status_logged_with_auction(self):
        with capture_logs() as logs:
            adapter = VideoByteAdapter(endpoint="https://x.videobyte.com/ortbhb")
            adapter.parse_response(
                BidRequest(id="auction-8"),
                RequestData(method="POST", uri="https://x.videobyte.com/ortbhb"),
                ResponseData(status_code=503),
            )

        assert logs[0]["event"] == "Unexpected status"
        assert logs[0]["auction_id"] == "auction-8"
        assert logs[0]["status_code"] == 503
