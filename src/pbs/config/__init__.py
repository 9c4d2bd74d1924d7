"""
Adapter Configuration Module

Key components:
    - AdapterConfig: Runtime settings passed to adapter builders
    - BidderInfo: Static bidder metadata loaded from YAML
    - load_adapter_config(): Resolve a bidder's config with env overrides
"""

from .adapter_config import (
    AdapterConfig,
    BidderInfo,
    PlatformCapabilities,
    endpoint_env_var,
    load_adapter_config,
    load_bidder_info,
)

__all__ = [
    "AdapterConfig",
    "BidderInfo",
    "PlatformCapabilities",
    "endpoint_env_var",
    "load_adapter_config",
    "load_bidder_info",
]
