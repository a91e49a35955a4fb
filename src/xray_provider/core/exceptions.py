"""Exception hierarchy for xray-provider."""

from typing import Any


class XrayProviderError(Exception):
    """Base exception for all provider errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(XrayProviderError):
    """The provider itself is misconfigured (missing URL, token...)."""


class ValidationError(XrayProviderError):
    """A submitted configuration tree is invalid.

    Raised before any request is sent to Xray.
    """


class ConflictingFieldsError(ValidationError):
    """More than one member of an exclusive group was supplied."""


class InvalidConfigurationError(ValidationError):
    """A field value failed type or range validation."""


class TransportError(XrayProviderError):
    """The request never produced an HTTP response."""


class APIError(XrayProviderError):
    """Xray answered with a non-2xx status code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(XrayProviderError):
    """A successful response body could not be decoded."""
