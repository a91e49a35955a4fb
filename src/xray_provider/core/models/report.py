"""Report resource models: resource selectors and per-report filters."""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Literal

from pydantic import Field, field_validator, model_validator

from xray_provider.core.models.base import BlockModel, ExclusiveGroup

Severity = Literal["Low", "Medium", "High", "Critical"]
Risk = Literal["None", "Low", "Medium", "High"]
ViolationType = Literal["security", "license", "operational_risk"]


class ReportKind(str, Enum):
    """Report type, valued by its endpoint segment under /reports."""

    LICENSES = "licenses"
    OPERATIONAL_RISKS = "operationalRisks"
    VIOLATIONS = "violations"
    VULNERABILITIES = "vulnerabilities"


# --- Shared blocks ---

class DateRange(BlockModel):
    """Timestamp range, RFC 3339 formatted."""

    start: str | None = None
    end: str | None = None

    @field_validator("start", "end")
    @classmethod
    def _check_timestamp(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError as e:
                raise ValueError(f"'{value}' is not an RFC 3339 timestamp") from e
        return value


class CvssScore(BlockModel):
    """CVSS score range."""

    min_score: float | None = Field(default=None, ge=0, le=10)
    max_score: float | None = Field(default=None, ge=0, le=10)

    @model_validator(mode="after")
    def _check_order(self) -> "CvssScore":
        if (
            self.min_score is not None
            and self.max_score is not None
            and self.min_score > self.max_score
        ):
            raise ValueError("min_score must not be greater than max_score")
        return self


# --- Resources ---

class RepositorySelector(BlockModel):
    name: str = Field(..., min_length=1)
    include_path_patterns: list[str] | None = None
    exclude_path_patterns: list[str] | None = None


class NamedVersionsSelector(BlockModel):
    """Builds or release bundles, selected by names or by patterns."""

    exclusive_groups: ClassVar[tuple[ExclusiveGroup, ...]] = (
        ExclusiveGroup.of("names", "include_patterns/exclude_patterns"),
    )

    names: list[str] | None = None
    include_patterns: list[str] | None = None
    exclude_patterns: list[str] | None = None
    number_of_latest_versions: int = Field(default=1, ge=0)


class ProjectsSelector(BlockModel):
    exclusive_groups: ClassVar[tuple[ExclusiveGroup, ...]] = (
        ExclusiveGroup.of("names", "include_key_patterns/exclude_key_patterns"),
    )

    names: list[str] | None = None
    include_key_patterns: list[str] | None = None
    exclude_key_patterns: list[str] | None = None
    number_of_latest_versions: int = Field(default=1, ge=0)


class ReportResources(BlockModel):
    """What the report runs over. Exactly one kind of resource per report."""

    exclusive_groups: ClassVar[tuple[ExclusiveGroup, ...]] = (
        ExclusiveGroup.of("repository", "builds", "release_bundles", "projects"),
    )

    repository: list[RepositorySelector] | None = None
    builds: NamedVersionsSelector | None = None
    release_bundles: NamedVersionsSelector | None = None
    projects: ProjectsSelector | None = None


# --- Filters ---

class LicensesFilters(BlockModel):
    exclusive_groups: ClassVar[tuple[ExclusiveGroup, ...]] = (
        ExclusiveGroup.of("license_names", "license_patterns"),
    )

    component: str | None = None
    artifact: str | None = None
    unknown: bool | None = None
    unrecognized: bool | None = None
    license_names: list[str] | None = None
    license_patterns: list[str] | None = None
    scan_date: DateRange | None = None


class OperationalRisksFilters(BlockModel):
    component: str | None = None
    artifact: str | None = None
    risks: list[Risk] | None = None
    scan_date: DateRange | None = None


class SecurityFilters(BlockModel):
    exclusive_groups: ClassVar[tuple[ExclusiveGroup, ...]] = (
        ExclusiveGroup.of("cve", "issue_id"),
        ExclusiveGroup.of("cve", "cvss_score"),
    )

    cve: str | None = None
    issue_id: str | None = None
    cvss_score: CvssScore | None = None
    summary_contains: str | None = None
    has_remediation: bool | None = None


class LicenseFilters(BlockModel):
    exclusive_groups: ClassVar[tuple[ExclusiveGroup, ...]] = (
        ExclusiveGroup.of("license_names", "license_patterns"),
    )

    unknown: bool | None = None
    unrecognized: bool | None = None
    license_names: list[str] | None = None
    license_patterns: list[str] | None = None


class ViolationsFilters(BlockModel):
    exclusive_groups: ClassVar[tuple[ExclusiveGroup, ...]] = (
        ExclusiveGroup.of("watch_names", "watch_patterns"),
    )

    type: ViolationType | None = None
    watch_names: list[str] | None = None
    watch_patterns: list[str] | None = None
    component: str | None = None
    artifact: str | None = None
    policy_names: list[str] | None = None
    severities: list[Severity] | None = None
    updated: DateRange | None = None
    security_filters: SecurityFilters | None = None
    license_filters: LicenseFilters | None = None


class VulnerabilitiesFilters(BlockModel):
    exclusive_groups: ClassVar[tuple[ExclusiveGroup, ...]] = (
        ExclusiveGroup.of("cve", "issue_id"),
        ExclusiveGroup.of("severities", "cvss_score"),
    )

    vulnerable_component: str | None = None
    impacted_artifact: str | None = None
    has_remediation: bool | None = None
    cve: str | None = None
    issue_id: str | None = None
    severities: list[Severity] | None = None
    cvss_score: CvssScore | None = None
    published: DateRange | None = None
    scan_date: DateRange | None = None


# --- Reports ---

class ReportModel(BlockModel):
    """Common shape of every report resource."""

    kind: ClassVar[ReportKind]

    name: str = Field(..., min_length=1)
    project_key: str | None = Field(default=None, pattern=r"^[a-z][a-z0-9\-]{1,31}$")
    resources: ReportResources


class LicensesReport(ReportModel):
    kind: ClassVar[ReportKind] = ReportKind.LICENSES

    filters: LicensesFilters


class OperationalRisksReport(ReportModel):
    kind: ClassVar[ReportKind] = ReportKind.OPERATIONAL_RISKS

    filters: OperationalRisksFilters


class ViolationsReport(ReportModel):
    kind: ClassVar[ReportKind] = ReportKind.VIOLATIONS

    filters: ViolationsFilters


class VulnerabilitiesReport(ReportModel):
    kind: ClassVar[ReportKind] = ReportKind.VULNERABILITIES

    filters: VulnerabilitiesFilters


REPORT_MODELS: dict[ReportKind, type[ReportModel]] = {
    ReportKind.LICENSES: LicensesReport,
    ReportKind.OPERATIONAL_RISKS: OperationalRisksReport,
    ReportKind.VIOLATIONS: ViolationsReport,
    ReportKind.VULNERABILITIES: VulnerabilitiesReport,
}
