"""Core domain models and exceptions for xray-provider."""

from xray_provider.core.exceptions import (
    APIError,
    ConfigurationError,
    ConflictingFieldsError,
    InvalidConfigurationError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
    XrayProviderError,
)
from xray_provider.core.models import (
    Diagnostic,
    DiagnosticSeverity,
    ReportKind,
    ReportModel,
    RepositoryConfigModel,
    ResourceData,
)

__all__ = [
    # Models
    "RepositoryConfigModel",
    "ReportModel",
    "ReportKind",
    "ResourceData",
    "Diagnostic",
    "DiagnosticSeverity",
    # Exceptions
    "XrayProviderError",
    "ConfigurationError",
    "ValidationError",
    "ConflictingFieldsError",
    "InvalidConfigurationError",
    "TransportError",
    "APIError",
    "ResponseDecodeError",
]
