"""VideoByte bidder adapter."""

from .params import ExtImpVideoByte
from .videobyte import BIDDER_CODE, VideoByteAdapter, builder

__all__ = [
    "BIDDER_CODE",
    "ExtImpVideoByte",
    "VideoByteAdapter",
    "builder",
]
