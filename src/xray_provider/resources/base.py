"""Lifecycle adapter shared by every resource type."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

import structlog

from xray_provider.core.exceptions import APIError
from xray_provider.core.models.base import BlockModel
from xray_provider.core.models.state import Diagnostic, DiagnosticSeverity, ResourceData
from xray_provider.transport.client import XrayClient
from xray_provider.validation.parser import parse_config

logger = structlog.get_logger(__name__)

NO_DELETE_SUMMARY = "No delete functionality provided by API"
NO_DELETE_DETAIL = (
    "Delete function will return a warning and remove the Id from the Terraform state. "
    "The actual configuration will remain unchanged."
)


class Resource(ABC):
    """Maps create/read/update/delete onto the Xray REST API.

    Lifecycle of an instance::

        absent -> created -> read -> updated -> read -> (local-removed)

    Xray has no delete endpoint for these resources, so delete is a local
    state removal that always reports a warning. Restoring a default
    configuration is not an option since the defaults can change.
    """

    type_name: ClassVar[str]
    model: ClassVar[type[BlockModel]]

    def __init__(self, client: XrayClient) -> None:
        self._client = client

    @classmethod
    def validate(cls, config: dict[str, Any]) -> BlockModel:
        """Check a configuration tree without touching the network."""
        return parse_config(config, cls.model)

    @classmethod
    @abstractmethod
    def unpack(cls, model: BlockModel) -> dict[str, Any]:
        """Wire body for ``model``."""

    @abstractmethod
    def _send(self, model: BlockModel, payload: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Send the body; return the identifier and the provisional state tree."""

    @abstractmethod
    def _fetch(self, data: ResourceData) -> dict[str, Any]:
        """GET the instance and return its state tree."""

    def create(self, data: ResourceData) -> list[Diagnostic]:
        model = self.validate(data.config)
        payload = self.unpack(model)

        identifier, state = self._send(model, payload)
        data.id = identifier
        data.state = state
        logger.info("Resource applied", resource=self.type_name, id=identifier)

        return self.read(data)

    def update(self, data: ResourceData) -> list[Diagnostic]:
        # The API is declarative per resource: updating is sending it again
        return self.create(data)

    def read(self, data: ResourceData) -> list[Diagnostic]:
        try:
            data.state = self._fetch(data)
        except APIError as e:
            logger.error(
                "Resource is either not indexed or does not exist",
                resource=self.type_name,
                id=data.id,
                status_code=e.status_code,
            )
            data.clear()
            raise
        return []

    def delete(self, data: ResourceData) -> list[Diagnostic]:
        logger.warning(
            "There is no delete functionality in the API, the configuration is not removed "
            "from Xray but is removed from the Terraform state",
            resource=self.type_name,
            id=data.id,
        )
        data.clear()
        return [
            Diagnostic(
                severity=DiagnosticSeverity.WARNING,
                summary=NO_DELETE_SUMMARY,
                detail=NO_DELETE_DETAIL,
            )
        ]

    def import_state(self, data: ResourceData, identifier: str) -> list[Diagnostic]:
        """Adopt an existing remote instance by its natural key."""
        data.id = identifier
        return self.read(data)
