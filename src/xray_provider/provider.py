"""Provider: builds the shared client and hands out resource adapters."""

from typing import TYPE_CHECKING

import httpx
import structlog

from xray_provider.resources import RESOURCE_TYPES, Resource
from xray_provider.transport.client import XrayClient

if TYPE_CHECKING:
    from xray_provider.config.settings import Settings

logger = structlog.get_logger(__name__)


class XrayProvider:
    """Registry of resource types sharing one Xray client.

    The client is created lazily, on the first resource that needs it, so
    that offline operations (validation, rendering) work without a
    configured Xray instance.
    """

    def __init__(
        self,
        settings: "Settings",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._client: XrayClient | None = None
        self._resources: dict[str, Resource] = {}

    @property
    def resource_types(self) -> list[str]:
        return sorted(RESOURCE_TYPES)

    @staticmethod
    def resource_class(type_name: str) -> type[Resource]:
        if type_name not in RESOURCE_TYPES:
            raise ValueError(f"Unknown resource type: {type_name}")
        return RESOURCE_TYPES[type_name]

    def get_client(self) -> XrayClient:
        """Get or create the Xray client."""
        if self._client is None:
            self._client = XrayClient.from_settings(self._settings, transport=self._transport)
            logger.info("Xray client created", url=self._settings.url)
        return self._client

    def get_resource(self, type_name: str) -> Resource:
        """Get or create the adapter for a resource type."""
        resource_class = self.resource_class(type_name)
        if type_name not in self._resources:
            self._resources[type_name] = resource_class(self.get_client())
        return self._resources[type_name]

    def close(self) -> None:
        """Close the shared client."""
        if self._client is not None:
            self._client.close()
        self._client = None
        self._resources = {}

    def __enter__(self) -> "XrayProvider":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
