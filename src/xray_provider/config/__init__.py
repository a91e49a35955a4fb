"""Configuration for xray-provider."""

from xray_provider.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
