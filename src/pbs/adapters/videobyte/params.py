"""VideoByte bidder parameters carried in ``imp.ext.bidder``."""

from dataclasses import dataclass
from typing import Any


@dataclass
class ExtImpVideoByte:
    """
    Attributes:
        publisher_id: VideoByte publisher ID (``pubId``, required)
        placement_id: Placement ID (``placementId``)
        network_id: Network ID (``nid``)
    """

    publisher_id: str
    placement_id: str = ""
    network_id: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ExtImpVideoByte":
        """
        Create from the bidder params object.

        Raises:
            ValueError: If the params are not an object, ``pubId`` is
                missing, or a field is not a string
        """
        if data is None:
            raise ValueError("missing bidder params")
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        values = {}
        for key in ("pubId", "placementId", "nid"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{key} must be a string, got {type(value).__name__}")
            values[key] = value or ""

        if not values["pubId"]:
            raise ValueError("pubId is required")

        return cls(
            publisher_id=values["pubId"],
            placement_id=values["placementId"],
            network_id=values["nid"],
        )

    def to_dict(self) -> dict[str, str]:
        """Convert to the wire representation."""
        result = {"pubId": self.publisher_id}
        if self.placement_id:
            result["placementId"] = self.placement_id
        if self.network_id:
            result["nid"] = self.network_id
        return result
