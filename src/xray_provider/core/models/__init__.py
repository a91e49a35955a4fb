"""Domain models for xray-provider."""

from xray_provider.core.models.base import BlockModel, ExclusiveGroup
from xray_provider.core.models.report import (
    REPORT_MODELS,
    LicensesReport,
    OperationalRisksReport,
    ReportKind,
    ReportModel,
    ViolationsReport,
    VulnerabilitiesReport,
)
from xray_provider.core.models.repository_config import (
    AllOtherArtifacts,
    PathsConfig,
    Pattern,
    RepoConfig,
    RepositoryConfigModel,
)
from xray_provider.core.models.state import Diagnostic, DiagnosticSeverity, ResourceData

__all__ = [
    "BlockModel",
    "ExclusiveGroup",
    "RepositoryConfigModel",
    "RepoConfig",
    "PathsConfig",
    "Pattern",
    "AllOtherArtifacts",
    "ReportKind",
    "ReportModel",
    "LicensesReport",
    "OperationalRisksReport",
    "ViolationsReport",
    "VulnerabilitiesReport",
    "REPORT_MODELS",
    "ResourceData",
    "Diagnostic",
    "DiagnosticSeverity",
]
