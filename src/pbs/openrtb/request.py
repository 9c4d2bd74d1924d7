"""
OpenRTB 2.5 Bid Request Models

These dataclasses cover the parts of the bid request that adapters read.
Objects the adapters pass through untouched (device, user, regs...) are kept
as plain JSON mappings, and any key not modelled here is preserved in
``extra`` so re-serializing a request never drops data.

Reference: https://github.com/InteractiveAdvertisingBureau/openrtb2.x
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional


def _require_mapping(data: Any, name: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{name} must be a JSON object, got {type(data).__name__}")
    return data


def _optional_mapping(data: dict[str, Any], key: str) -> Optional[dict[str, Any]]:
    value = data.get(key)
    if value is None:
        return None
    return _require_mapping(value, key)


def _compact(result: dict[str, Any], extra: dict[str, Any]) -> dict[str, Any]:
    """Drop unset fields and merge passthrough keys (omitempty semantics)."""
    compacted = {key: value for key, value in result.items() if value is not None}
    for key, value in extra.items():
        compacted.setdefault(key, value)
    return compacted


@dataclass
class Site:
    """
    Website context of the auction.

    Attributes:
        id: Exchange-specific site ID
        domain: Domain of the site (e.g., "example.com")
        page: URL of the page where the impression will be shown
        ref: Referrer URL that caused navigation to the current page
        publisher: Publisher object (raw JSON)
    """

    id: Optional[str] = None
    name: Optional[str] = None
    domain: Optional[str] = None
    page: Optional[str] = None
    ref: Optional[str] = None
    cat: Optional[list[str]] = None
    publisher: Optional[dict[str, Any]] = None
    ext: Optional[dict[str, Any]] = None
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = ("id", "name", "domain", "page", "ref", "cat", "publisher", "ext")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return _compact(
            {
                "id": self.id,
                "name": self.name,
                "domain": self.domain,
                "page": self.page,
                "ref": self.ref,
                "cat": self.cat,
                "publisher": self.publisher,
                "ext": self.ext,
            },
            self.extra,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Site":
        """Create from dictionary."""
        data = _require_mapping(data, "site")
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            domain=data.get("domain"),
            page=data.get("page"),
            ref=data.get("ref"),
            cat=data.get("cat"),
            publisher=_optional_mapping(data, "publisher"),
            ext=_optional_mapping(data, "ext"),
            extra={k: v for k, v in data.items() if k not in cls._KEYS},
        )


@dataclass
class Imp:
    """
    A single ad slot being auctioned.

    The media descriptors (banner, video, audio, native) are kept as raw
    JSON objects; only their presence matters to the adapters.

    ``ext`` is the opaque extension payload. It may hold an already-decoded
    mapping or the raw JSON text (``str`` or ``bytes``) as received.
    """

    id: str
    banner: Optional[dict[str, Any]] = None
    video: Optional[dict[str, Any]] = None
    audio: Optional[dict[str, Any]] = None
    native: Optional[dict[str, Any]] = None
    tagid: Optional[str] = None
    bidfloor: Optional[float] = None
    bidfloorcur: Optional[str] = None
    secure: Optional[int] = None
    ext: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = (
        "id", "banner", "video", "audio", "native",
        "tagid", "bidfloor", "bidfloorcur", "secure", "ext",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        ext = self.ext
        if isinstance(ext, (str, bytes, bytearray)):
            ext = json.loads(ext)

        return _compact(
            {
                "id": self.id,
                "banner": self.banner,
                "video": self.video,
                "audio": self.audio,
                "native": self.native,
                "tagid": self.tagid,
                "bidfloor": self.bidfloor,
                "bidfloorcur": self.bidfloorcur,
                "secure": self.secure,
                "ext": ext,
            },
            self.extra,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Imp":
        """Create from dictionary."""
        data = _require_mapping(data, "imp")
        return cls(
            id=data.get("id", ""),
            banner=_optional_mapping(data, "banner"),
            video=_optional_mapping(data, "video"),
            audio=_optional_mapping(data, "audio"),
            native=_optional_mapping(data, "native"),
            tagid=data.get("tagid"),
            bidfloor=data.get("bidfloor"),
            bidfloorcur=data.get("bidfloorcur"),
            secure=data.get("secure"),
            ext=data.get("ext"),
            extra={k: v for k, v in data.items() if k not in cls._KEYS},
        )


@dataclass
class BidRequest:
    """
    Top-level OpenRTB bid request.

    Attributes:
        id: Auction ID
        imp: Impressions offered in this auction (at least one)
        site: Website context, if the request comes from a site
        app: App context (raw JSON), if the request comes from an app
        tmax: Maximum time in milliseconds the exchange allows for bids
    """

    id: str
    imp: list[Imp] = field(default_factory=list)
    site: Optional[Site] = None
    app: Optional[dict[str, Any]] = None
    device: Optional[dict[str, Any]] = None
    user: Optional[dict[str, Any]] = None
    regs: Optional[dict[str, Any]] = None
    source: Optional[dict[str, Any]] = None
    at: Optional[int] = None
    tmax: Optional[int] = None
    cur: Optional[list[str]] = None
    test: Optional[int] = None
    ext: Optional[dict[str, Any]] = None
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = (
        "id", "imp", "site", "app", "device", "user", "regs",
        "source", "at", "tmax", "cur", "test", "ext",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return _compact(
            {
                "id": self.id,
                "imp": [imp.to_dict() for imp in self.imp],
                "site": self.site.to_dict() if self.site else None,
                "app": self.app,
                "device": self.device,
                "user": self.user,
                "regs": self.regs,
                "source": self.source,
                "at": self.at,
                "tmax": self.tmax,
                "cur": self.cur,
                "test": self.test,
                "ext": self.ext,
            },
            self.extra,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BidRequest":
        """Create from dictionary."""
        data = _require_mapping(data, "request")
        imps = data.get("imp")
        if imps is None:
            imps = []
        elif not isinstance(imps, list):
            raise ValueError("imp must be a JSON array")

        site_data = data.get("site")
        return cls(
            id=data.get("id", ""),
            imp=[Imp.from_dict(imp) for imp in imps],
            site=Site.from_dict(site_data) if site_data is not None else None,
            app=_optional_mapping(data, "app"),
            device=_optional_mapping(data, "device"),
            user=_optional_mapping(data, "user"),
            regs=_optional_mapping(data, "regs"),
            source=_optional_mapping(data, "source"),
            at=data.get("at"),
            tmax=data.get("tmax"),
            cur=data.get("cur"),
            test=data.get("test"),
            ext=_optional_mapping(data, "ext"),
            extra={k: v for k, v in data.items() if k not in cls._KEYS},
        )

    def to_json(self) -> str:
        """Convert to compact JSON string."""
        return json.dumps(self.to_dict(), separators=(",", ":"), allow_nan=False)

    @classmethod
    def from_json(cls, json_str: str | bytes) -> "BidRequest":
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))
