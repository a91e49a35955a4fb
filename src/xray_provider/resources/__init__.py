"""Resource lifecycle adapters."""

from xray_provider.resources.base import Resource
from xray_provider.resources.report import (
    LicensesReportResource,
    OperationalRisksReportResource,
    ReportResource,
    ViolationsReportResource,
    VulnerabilitiesReportResource,
)
from xray_provider.resources.repository_config import RepositoryConfigResource

RESOURCE_TYPES: dict[str, type[Resource]] = {
    resource.type_name: resource
    for resource in (
        RepositoryConfigResource,
        LicensesReportResource,
        OperationalRisksReportResource,
        ViolationsReportResource,
        VulnerabilitiesReportResource,
    )
}

__all__ = [
    "Resource",
    "ReportResource",
    "RepositoryConfigResource",
    "LicensesReportResource",
    "OperationalRisksReportResource",
    "ViolationsReportResource",
    "VulnerabilitiesReportResource",
    "RESOURCE_TYPES",
]
