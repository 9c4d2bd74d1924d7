"""
Adapter Configuration

Loads static bidder-info files (one YAML file per bidder) and turns them
into the configuration object handed to adapter builders.

Lookup order for a bidder's endpoint:
    1. PBS_ADAPTERS_<BIDDER>_ENDPOINT environment variable
    2. ``endpoint`` in the bidder-info/<bidder>.yaml shipped with this package
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..errors import InvalidAdapterConfigError
from ..logging import config_logger

logger = config_logger()

DEFAULT_BIDDER_INFO_DIR = Path(__file__).parent / "bidder-info"


@dataclass
class AdapterConfig:
    """
    Runtime configuration for one adapter instance.

    Attributes:
        endpoint: Base URL of the bidder's bid endpoint
        disabled: Whether the host should skip this bidder
        extra_info: Free-form adapter-specific settings
    """

    endpoint: str
    disabled: bool = False
    extra_info: str = ""


@dataclass
class PlatformCapabilities:
    """Media types a bidder accepts for one platform (site or app)."""

    media_types: list[str] = field(default_factory=list)


@dataclass
class BidderInfo:
    """
    Static metadata about a bidder, as shipped in its bidder-info file.

    Attributes:
        endpoint: Default bid endpoint
        maintainer_email: Who to contact about the adapter
        gvl_vendor_id: IAB Global Vendor List ID (for privacy)
        site: Media types supported on site traffic (None = site unsupported)
        app: Media types supported on app traffic (None = app unsupported)
    """

    endpoint: str
    maintainer_email: str = ""
    gvl_vendor_id: int | None = None
    site: PlatformCapabilities | None = None
    app: PlatformCapabilities | None = None
    disabled: bool = False

    def supports(self, platform: str, media_type: str) -> bool:
        """Check if the bidder accepts a media type on 'site' or 'app'."""
        capabilities = {"site": self.site, "app": self.app}.get(platform)
        if capabilities is None:
            return False
        return media_type in capabilities.media_types

    def adapter_config(self) -> AdapterConfig:
        """Build the runtime adapter configuration from this info."""
        return AdapterConfig(endpoint=self.endpoint, disabled=self.disabled)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BidderInfo":
        """
        Create from dictionary.

        Raises:
            InvalidAdapterConfigError: If a section has the wrong shape
        """
        maintainer = _section(data, "maintainer")
        capabilities = _section(data, "capabilities")

        endpoint = data.get("endpoint", "")
        if not isinstance(endpoint, str):
            raise InvalidAdapterConfigError("endpoint must be a string")

        return cls(
            endpoint=endpoint,
            maintainer_email=maintainer.get("email", ""),
            gvl_vendor_id=data.get("gvlVendorID"),
            site=_platform(capabilities, "site"),
            app=_platform(capabilities, "app"),
            disabled=data.get("disabled", False),
        )


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidAdapterConfigError(
            f"{key} must be a mapping, got {type(value).__name__}"
        )
    return value


def _platform(capabilities: dict[str, Any], key: str) -> PlatformCapabilities | None:
    if capabilities.get(key) is None:
        return None
    media_types = _section(capabilities, key).get("mediaTypes") or []
    if not isinstance(media_types, list):
        raise InvalidAdapterConfigError(f"capabilities.{key}.mediaTypes must be a list")
    return PlatformCapabilities(media_types)


def load_bidder_info(path: str | Path) -> BidderInfo:
    """
    Load a bidder-info YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed BidderInfo

    Raises:
        InvalidAdapterConfigError: If the file is missing or malformed
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise InvalidAdapterConfigError(f"Cannot read bidder info {path}: {e}") from e
    except yaml.YAMLError as e:
        raise InvalidAdapterConfigError(f"YAML error in {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidAdapterConfigError(f"Bidder info {path} must be a YAML mapping")

    return BidderInfo.from_dict(data)


def endpoint_env_var(bidder_name: str) -> str:
    """Name of the environment variable that overrides a bidder's endpoint."""
    return f"PBS_ADAPTERS_{bidder_name.upper().replace('-', '_')}_ENDPOINT"


def load_adapter_config(
    bidder_name: str, path: str | Path | None = None
) -> AdapterConfig:
    """
    Resolve the runtime configuration for a bidder.

    Args:
        bidder_name: Bidder code (e.g., "videobyte")
        path: Explicit bidder-info file. Defaults to
              $PBS_BIDDER_INFO_DIR/<bidder>.yaml or the packaged bidder-info/<bidder>.yaml

    Returns:
        AdapterConfig with environment overrides applied
    """
    if path is None:
        info_dir = Path(os.environ.get("PBS_BIDDER_INFO_DIR", str(DEFAULT_BIDDER_INFO_DIR)))
        path = info_dir / f"{bidder_name}.yaml"

    config = load_bidder_info(path).adapter_config()

    override = os.environ.get(endpoint_env_var(bidder_name))
    if override:
        logger.info("Endpoint overridden from environment", bidder=bidder_name)
        config.endpoint = override

    return config
