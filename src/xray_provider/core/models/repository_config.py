"""Repository indexing configuration models."""

from typing import ClassVar

from pydantic import Field

from xray_provider.core.models.base import BlockModel, ExclusiveGroup

DEFAULT_RETENTION_IN_DAYS = 90


class RepoConfig(BlockModel):
    """Single repository configuration, applied to every artifact."""

    # Only supported by SaaS instances
    vuln_contextual_analysis: bool = False
    retention_in_days: int = Field(default=DEFAULT_RETENTION_IN_DAYS, ge=0)


class Pattern(BlockModel):
    """Retention rule for artifacts matching an include/exclude glob pair."""

    include: str = Field(..., min_length=1)
    exclude: str | None = Field(default=None, min_length=1)
    index_new_artifacts: bool = True
    retention_in_days: int = Field(default=DEFAULT_RETENTION_IN_DAYS, ge=0)


class AllOtherArtifacts(BlockModel):
    """Catch-all rule for artifacts matching none of the patterns."""

    index_new_artifacts: bool = True
    retention_in_days: int = Field(default=DEFAULT_RETENTION_IN_DAYS, ge=0)


class PathsConfig(BlockModel):
    """Path-pattern-specific retention rules plus the catch-all rule."""

    pattern: list[Pattern] = Field(..., min_length=1)
    all_other_artifacts: AllOtherArtifacts


class RepositoryConfigModel(BlockModel):
    """Indexing configuration for one repository, keyed by its name."""

    exclusive_groups: ClassVar[tuple[ExclusiveGroup, ...]] = (
        ExclusiveGroup.of("config", "paths_config"),
    )

    repo_name: str = Field(..., min_length=1)
    config: RepoConfig | None = None
    paths_config: PathsConfig | None = None
