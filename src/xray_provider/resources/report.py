"""Report resources: licenses, operational risks, violations, vulnerabilities."""

from typing import Any
from urllib.parse import quote

from xray_provider.core.exceptions import APIError, ResponseDecodeError
from xray_provider.core.models.report import (
    LicensesReport,
    OperationalRisksReport,
    ReportModel,
    ViolationsReport,
    VulnerabilitiesReport,
)
from xray_provider.core.models.state import ResourceData
from xray_provider.resources.base import Resource
from xray_provider.transform.report import pack_report, unpack_report

REPORTS_PATH = "/xray/api/v1/reports"

# Attributes computed by Xray, copied into state on every read
COMPUTED_ATTRIBUTES = ("report_type", "status", "total_artifacts", "start_time", "end_time")


class ReportResource(Resource):
    """A report generation request.

    The identifier is the ``report_id`` Xray assigns on creation.
    """

    model: type[ReportModel]

    @classmethod
    def unpack(cls, model: ReportModel) -> dict[str, Any]:
        return unpack_report(model)

    def _send(self, model: ReportModel, payload: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        params = {"projectKey": model.project_key} if model.project_key else None
        response = self._client.post(f"{REPORTS_PATH}/{model.kind.value}", payload, params=params)

        if not isinstance(response, dict) or response.get("report_id") is None:
            raise ResponseDecodeError(
                f"Xray did not return a report_id for {self.type_name}",
                details={"response": response},
            )

        state = pack_report(model.kind, payload, model.project_key).to_tree()
        return str(response["report_id"]), state

    def _fetch(self, data: ResourceData) -> dict[str, Any]:
        details = self._client.get(f"{REPORTS_PATH}/{quote(data.id, safe='')}") or {}
        if not isinstance(details, dict):
            raise ResponseDecodeError(
                f"Xray returned unexpected report details for {self.type_name} {data.id}",
                details={"response": details},
            )

        state = dict(data.state)
        state["report_id"] = data.id
        if details.get("name"):
            state["name"] = details["name"]
        for attribute in COMPUTED_ATTRIBUTES:
            if attribute in details:
                state[attribute] = details[attribute]
        return state

    def exists(self, report_id: str) -> bool:
        """Check whether Xray still knows the report.

        Never retried, so that a transient answer cannot hide a report that
        is really still there (or really gone).
        """
        try:
            self._client.get(f"{REPORTS_PATH}/{quote(report_id, safe='')}", never_retry=True)
        except APIError as e:
            if e.status_code == 404:
                return False
            raise
        return True


class LicensesReportResource(ReportResource):
    type_name = "xray_licenses_report"
    model = LicensesReport


class OperationalRisksReportResource(ReportResource):
    type_name = "xray_operational_risks_report"
    model = OperationalRisksReport


class ViolationsReportResource(ReportResource):
    type_name = "xray_violations_report"
    model = ViolationsReport


class VulnerabilitiesReportResource(ReportResource):
    type_name = "xray_vulnerabilities_report"
    model = VulnerabilitiesReport
