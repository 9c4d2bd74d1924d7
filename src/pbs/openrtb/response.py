"""OpenRTB 2.5 Bid Response models."""

import json
import math
from dataclasses import dataclass, field
from typing import Any, Optional

from .request import _compact, _optional_mapping, _require_mapping


def _reject_constant(name: str) -> float:
    """json.loads hook: NaN and Infinity are not valid JSON."""
    raise ValueError(f"invalid JSON constant: {name}")


def _optional_str(data: dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _optional_int(data: dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"{key} must be an integer, got {type(value).__name__}")
    return value


def _optional_str_list(data: dict[str, Any], key: str) -> Optional[list[str]]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{key} must be an array of strings")
    return value


def _list_of(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a JSON array")
    return value


@dataclass
class Bid:
    """
    A single offer to buy one impression.

    Attributes:
        id: Bidder-generated bid ID
        impid: ID of the Imp object this bid refers to
        price: Bid price, in CPM
        adm: Ad markup (HTML, VAST XML...)
        crid: Creative ID
    """

    id: str
    impid: str
    price: float
    adid: Optional[str] = None
    nurl: Optional[str] = None
    burl: Optional[str] = None
    adm: Optional[str] = None
    adomain: Optional[list[str]] = None
    cid: Optional[str] = None
    crid: Optional[str] = None
    dealid: Optional[str] = None
    cat: Optional[list[str]] = None
    w: Optional[int] = None
    h: Optional[int] = None
    ext: Optional[dict[str, Any]] = None
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = (
        "id", "impid", "price", "adid", "nurl", "burl", "adm", "adomain",
        "cid", "crid", "dealid", "cat", "w", "h", "ext",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return _compact(
            {
                "id": self.id,
                "impid": self.impid,
                "price": self.price,
                "adid": self.adid,
                "nurl": self.nurl,
                "burl": self.burl,
                "adm": self.adm,
                "adomain": self.adomain,
                "cid": self.cid,
                "crid": self.crid,
                "dealid": self.dealid,
                "cat": self.cat,
                "w": self.w,
                "h": self.h,
                "ext": self.ext,
            },
            self.extra,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bid":
        """Create from dictionary."""
        data = _require_mapping(data, "bid")

        price = data.get("price", 0)
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValueError(f"price must be a number, got {type(price).__name__}")
        try:
            price = float(price)
        except OverflowError as e:
            raise ValueError(f"price out of range: {e}") from e
        if not math.isfinite(price):
            raise ValueError(f"price must be finite, got {price}")

        return cls(
            id=_optional_str(data, "id") or "",
            impid=_optional_str(data, "impid") or "",
            price=price,
            adid=_optional_str(data, "adid"),
            nurl=_optional_str(data, "nurl"),
            burl=_optional_str(data, "burl"),
            adm=_optional_str(data, "adm"),
            adomain=_optional_str_list(data, "adomain"),
            cid=_optional_str(data, "cid"),
            crid=_optional_str(data, "crid"),
            dealid=_optional_str(data, "dealid"),
            cat=_optional_str_list(data, "cat"),
            w=_optional_int(data, "w"),
            h=_optional_int(data, "h"),
            ext=_optional_mapping(data, "ext"),
            extra={k: v for k, v in data.items() if k not in cls._KEYS},
        )


@dataclass
class SeatBid:
    """A group of bids made on behalf of one buyer seat."""

    bid: list[Bid] = field(default_factory=list)
    seat: Optional[str] = None
    group: Optional[int] = None
    ext: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return _compact(
            {
                "bid": [bid.to_dict() for bid in self.bid],
                "seat": self.seat,
                "group": self.group,
                "ext": self.ext,
            },
            {},
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SeatBid":
        """Create from dictionary."""
        data = _require_mapping(data, "seatbid")
        return cls(
            bid=[Bid.from_dict(bid) for bid in _list_of(data, "bid")],
            seat=_optional_str(data, "seat"),
            group=_optional_int(data, "group"),
            ext=_optional_mapping(data, "ext"),
        )


@dataclass
class BidResponse:
    """
    Top-level OpenRTB bid response.

    Attributes:
        id: ID of the bid request this is a response to
        seatbid: Seat bid groups (empty for a no-bid)
        cur: Bid currency (ISO-4217)
        nbr: No-bid reason code
    """

    id: str = ""
    seatbid: list[SeatBid] = field(default_factory=list)
    bidid: Optional[str] = None
    cur: Optional[str] = None
    customdata: Optional[str] = None
    nbr: Optional[int] = None
    ext: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return _compact(
            {
                "id": self.id,
                "seatbid": [seatbid.to_dict() for seatbid in self.seatbid],
                "bidid": self.bidid,
                "cur": self.cur,
                "customdata": self.customdata,
                "nbr": self.nbr,
                "ext": self.ext,
            },
            {},
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BidResponse":
        """Create from dictionary."""
        data = _require_mapping(data, "response")
        return cls(
            id=_optional_str(data, "id") or "",
            seatbid=[SeatBid.from_dict(sb) for sb in _list_of(data, "seatbid")],
            bidid=_optional_str(data, "bidid"),
            cur=_optional_str(data, "cur"),
            customdata=_optional_str(data, "customdata"),
            nbr=_optional_int(data, "nbr"),
            ext=_optional_mapping(data, "ext"),
        )

    def to_json(self) -> str:
        """Convert to compact JSON string."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, json_str: str | bytes) -> "BidResponse":
        """
        Create from JSON string.

        Raises:
            ValueError: If the text is not JSON or does not have the
                shape of a bid response (json.JSONDecodeError and
                UnicodeDecodeError are both ValueError subclasses). NaN and
                Infinity are rejected.
        """
        return cls.from_dict(json.loads(json_str, parse_constant=_reject_constant))
