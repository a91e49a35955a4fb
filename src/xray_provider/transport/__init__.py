"""HTTP transport for xray-provider."""

from xray_provider.transport.client import XrayClient

__all__ = ["XrayClient"]
