"""Pack/unpack between repository configuration models and the Xray wire format.

Wire shape (``PUT /xray/api/v1/repos_config``)::

    {
        "repo_name": "...",
        "repo_config": {"vuln_contextual_analysis": true, "retention_in_days": 90},
        "repo_paths_config": {
            "patterns": [{"include": "...", "exclude": "...",
                          "index_new_artifacts": true, "retention_in_days": 90}],
            "all_other_artifacts": {"index_new_artifacts": true, "retention_in_days": 90}
        }
    }
"""

from collections.abc import Mapping
from typing import Any

from xray_provider.core.models.repository_config import (
    DEFAULT_RETENTION_IN_DAYS,
    AllOtherArtifacts,
    PathsConfig,
    Pattern,
    RepoConfig,
    RepositoryConfigModel,
)
from xray_provider.transform.utils import build_model


def unpack_repository_config(model: RepositoryConfigModel) -> dict[str, Any]:
    """Build the request body. Blocks that were not supplied are omitted."""
    payload: dict[str, Any] = {"repo_name": model.repo_name}
    if model.config is not None:
        payload["repo_config"] = _unpack_repo_config(model.config)
    if model.paths_config is not None:
        payload["repo_paths_config"] = _unpack_paths_config(model.paths_config)
    return payload


def pack_repository_config(payload: Mapping[str, Any]) -> RepositoryConfigModel:
    """Rebuild the model from a ``GET /repos_config/{repo_name}`` response."""
    data: dict[str, Any] = {"repo_name": payload.get("repo_name")}
    if payload.get("repo_config") is not None:
        data["config"] = _pack_repo_config(payload["repo_config"])
    if payload.get("repo_paths_config") is not None:
        data["paths_config"] = _pack_paths_config(payload["repo_paths_config"])
    return build_model(RepositoryConfigModel, data)


def _unpack_repo_config(config: RepoConfig) -> dict[str, Any]:
    wire: dict[str, Any] = {"retention_in_days": config.retention_in_days}
    # Self-hosted installations reject the key altogether
    if config.vuln_contextual_analysis:
        wire["vuln_contextual_analysis"] = True
    return wire


def _unpack_paths_config(paths_config: PathsConfig) -> dict[str, Any]:
    return {
        "patterns": [_unpack_pattern(pattern) for pattern in paths_config.pattern],
        "all_other_artifacts": _unpack_all_other_artifacts(paths_config.all_other_artifacts),
    }


def _unpack_pattern(pattern: Pattern) -> dict[str, Any]:
    return {
        "include": pattern.include,
        "exclude": pattern.exclude or "",
        "index_new_artifacts": pattern.index_new_artifacts,
        "retention_in_days": pattern.retention_in_days,
    }


def _unpack_all_other_artifacts(other: AllOtherArtifacts) -> dict[str, Any]:
    return {
        "index_new_artifacts": other.index_new_artifacts,
        "retention_in_days": other.retention_in_days,
    }


def _pack_repo_config(wire: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "vuln_contextual_analysis": wire.get("vuln_contextual_analysis", False),
        "retention_in_days": wire.get("retention_in_days", DEFAULT_RETENTION_IN_DAYS),
    }


def _pack_paths_config(wire: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "pattern": [_pack_pattern(pattern) for pattern in wire.get("patterns") or []],
        "all_other_artifacts": _pack_all_other_artifacts(wire.get("all_other_artifacts") or {}),
    }


def _pack_pattern(wire: Mapping[str, Any]) -> dict[str, Any]:
    pattern = {
        "include": wire.get("include"),
        "index_new_artifacts": wire.get("index_new_artifacts", True),
        "retention_in_days": wire.get("retention_in_days", DEFAULT_RETENTION_IN_DAYS),
    }
    # "" on the wire means no exclude pattern
    if wire.get("exclude"):
        pattern["exclude"] = wire["exclude"]
    return pattern


def _pack_all_other_artifacts(wire: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "index_new_artifacts": wire.get("index_new_artifacts", True),
        "retention_in_days": wire.get("retention_in_days", DEFAULT_RETENTION_IN_DAYS),
    }
