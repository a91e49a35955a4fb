"""Pack/unpack between report models and the report creation body.

Filter and selector field names match the wire names one to one, so both
directions go through the models' own (de)serialization. The only renamed
field is the repository selector set: ``repository`` blocks travel as the
``resources.repositories`` list.
"""

from collections.abc import Mapping
from typing import Any

from xray_provider.core.models.report import (
    REPORT_MODELS,
    ReportKind,
    ReportModel,
    ReportResources,
)
from xray_provider.transform.utils import build_model


def unpack_report(report: ReportModel) -> dict[str, Any]:
    """Build the report creation body. Unset filters and selectors are omitted.

    ``project_key`` is not part of the body; it travels as the ``projectKey``
    query parameter.
    """
    return {
        "name": report.name,
        "resources": _unpack_resources(report.resources),
        "filters": report.filters.model_dump(exclude_none=True),
    }


def pack_report(
    kind: ReportKind,
    payload: Mapping[str, Any],
    project_key: str | None = None,
) -> ReportModel:
    """Rebuild a report model of the given kind from a creation body."""
    resources = dict(payload.get("resources") or {})
    if "repositories" in resources:
        resources["repository"] = resources.pop("repositories")

    data = {
        "name": payload.get("name"),
        "project_key": project_key,
        "resources": resources,
        "filters": payload.get("filters") or {},
    }
    return build_model(REPORT_MODELS[kind], data)


def _unpack_resources(resources: ReportResources) -> dict[str, Any]:
    wire = resources.model_dump(exclude_none=True)
    if "repository" in wire:
        wire["repositories"] = wire.pop("repository")
    return wire
