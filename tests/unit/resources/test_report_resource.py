"""Tests for the report resources."""

import httpx
import pytest

from xray_provider.core.exceptions import APIError, ConflictingFieldsError, ResponseDecodeError
from xray_provider.core.models.state import DiagnosticSeverity, ResourceData
from xray_provider.resources.report import REPORTS_PATH

REPORT_ENDPOINTS = {
    "xray_licenses_report": "licenses",
    "xray_operational_risks_report": "operationalRisks",
    "xray_violations_report": "violations",
    "xray_vulnerabilities_report": "vulnerabilities",
}

REPORT_DETAILS = {
    "id": 1,
    "name": "terraform-licenses-report",
    "report_type": "license",
    "status": "pending",
    "total_artifacts": 0,
    "num_of_processed_artifacts": 0,
    "progress": 0,
    "number_of_rows": 0,
    "start_time": "2020-06-29T12:22:16Z",
    "author": "admin",
}


def _created(report_id: int = 1) -> httpx.Response:
    return httpx.Response(200, json={"report_id": report_id, "status": "pending"})


@pytest.mark.unit
class TestCreateReport:
    @pytest.mark.parametrize("type_name", sorted(REPORT_ENDPOINTS))
    def test_create(self, provider, fake_xray, report_trees: dict[str, dict], type_name: str) -> None:
        fake_xray.add("POST", f"{REPORTS_PATH}/{REPORT_ENDPOINTS[type_name]}", _created(7))
        fake_xray.add("GET", f"{REPORTS_PATH}/7", httpx.Response(200, json=REPORT_DETAILS))
        tree = report_trees[type_name]
        data = ResourceData(config=tree)

        diagnostics = provider.get_resource(type_name).create(data)

        assert diagnostics == []
        assert data.id == "7"
        assert [request.method for request in fake_xray.requests] == ["POST", "GET"]
        assert fake_xray.body(0)["name"] == tree["name"]
        assert fake_xray.body(0)["resources"]["repositories"][0]["name"] == "repository-name"
        assert data.state["report_id"] == "7"
        assert data.state["status"] == "pending"

    def test_state_keeps_configuration(self, provider, fake_xray, licenses_report_tree: dict) -> None:
        fake_xray.add("POST", f"{REPORTS_PATH}/licenses", _created())
        fake_xray.add("GET", f"{REPORTS_PATH}/1", httpx.Response(200, json=REPORT_DETAILS))
        data = ResourceData(config=licenses_report_tree)

        provider.get_resource("xray_licenses_report").create(data)

        assert data.state["filters"][0]["license_names"] == ["Apache", "MIT"]
        assert data.state["resources"][0]["builds"] == []
        assert data.state["report_type"] == "license"
        assert data.state["start_time"] == "2020-06-29T12:22:16Z"
        assert "author" not in data.state

    def test_project_key_query_parameter(self, provider, fake_xray, licenses_report_tree: dict) -> None:
        fake_xray.add("POST", f"{REPORTS_PATH}/licenses", _created())
        fake_xray.add("GET", f"{REPORTS_PATH}/1", httpx.Response(200, json=REPORT_DETAILS))
        licenses_report_tree["project_key"] = "test-project"
        data = ResourceData(config=licenses_report_tree)

        provider.get_resource("xray_licenses_report").create(data)

        request = fake_xray.requests[0]
        assert request.url.params["projectKey"] == "test-project"
        assert "project_key" not in fake_xray.body(0)
        assert data.state["project_key"] == "test-project"

    def test_without_project_key(self, provider, fake_xray, licenses_report_tree: dict) -> None:
        fake_xray.add("POST", f"{REPORTS_PATH}/licenses", _created())
        fake_xray.add("GET", f"{REPORTS_PATH}/1", httpx.Response(200, json=REPORT_DETAILS))

        provider.get_resource("xray_licenses_report").create(ResourceData(config=licenses_report_tree))

        assert "projectKey" not in fake_xray.requests[0].url.params

    def test_conflicting_license_filters(self, provider, fake_xray, licenses_report_tree: dict) -> None:
        licenses_report_tree["filters"]["license_patterns"] = ["*Apache*"]
        data = ResourceData(config=licenses_report_tree)

        with pytest.raises(ConflictingFieldsError, match="Only one of"):
            provider.get_resource("xray_licenses_report").create(data)

        assert fake_xray.requests == []
        assert data.id == ""

    def test_rejected_by_xray(self, provider, fake_xray, vulnerabilities_report_tree: dict) -> None:
        body = '{"error":"Request payload is invalid as cannot find project"}'
        fake_xray.add("POST", f"{REPORTS_PATH}/vulnerabilities", httpx.Response(400, text=body))
        data = ResourceData(config=vulnerabilities_report_tree)

        with pytest.raises(APIError) as exc_info:
            provider.get_resource("xray_vulnerabilities_report").create(data)

        assert exc_info.value.body == body
        assert data.id == ""

    def test_missing_report_id(self, provider, fake_xray, licenses_report_tree: dict) -> None:
        fake_xray.add("POST", f"{REPORTS_PATH}/licenses", httpx.Response(200, json={"status": "pending"}))
        data = ResourceData(config=licenses_report_tree)

        with pytest.raises(ResponseDecodeError, match="report_id"):
            provider.get_resource("xray_licenses_report").create(data)

        assert data.id == ""

    def test_update_creates_new_report(self, provider, fake_xray, licenses_report_tree: dict) -> None:
        fake_xray.add("POST", f"{REPORTS_PATH}/licenses", _created(2))
        fake_xray.add("GET", f"{REPORTS_PATH}/2", httpx.Response(200, json=REPORT_DETAILS))
        data = ResourceData(id="1", config=licenses_report_tree)

        provider.get_resource("xray_licenses_report").update(data)

        assert data.id == "2"


@pytest.mark.unit
class TestReadReport:
    def test_report_gone(self, provider, fake_xray) -> None:
        data = ResourceData(id="1", state={"name": "terraform-licenses-report"})

        with pytest.raises(APIError):
            provider.get_resource("xray_licenses_report").read(data)

        assert data.id == ""
        assert data.state == {}

    def test_details_not_an_object(self, provider, fake_xray) -> None:
        fake_xray.add("GET", f"{REPORTS_PATH}/1", httpx.Response(200, json=[{"id": 1}]))
        data = ResourceData(id="1", state={"name": "terraform-licenses-report"})

        with pytest.raises(ResponseDecodeError, match="unexpected report details"):
            provider.get_resource("xray_licenses_report").read(data)

        assert data.id == "1"

    def test_import(self, provider, fake_xray) -> None:
        fake_xray.add("GET", f"{REPORTS_PATH}/1", httpx.Response(200, json=REPORT_DETAILS))
        data = ResourceData()

        provider.get_resource("xray_licenses_report").import_state(data, "1")

        assert data.id == "1"
        assert data.state["name"] == "terraform-licenses-report"
        assert data.state["total_artifacts"] == 0


@pytest.mark.unit
class TestReportExists:
    def test_exists(self, provider, fake_xray) -> None:
        fake_xray.add("GET", f"{REPORTS_PATH}/1", httpx.Response(200, json=REPORT_DETAILS))
        assert provider.get_resource("xray_licenses_report").exists("1") is True

    def test_gone(self, provider, fake_xray) -> None:
        assert provider.get_resource("xray_licenses_report").exists("1") is False

    def test_server_error_not_retried(self, provider, fake_xray) -> None:
        fake_xray.add("GET", f"{REPORTS_PATH}/1", httpx.Response(500, text="boom"))

        with pytest.raises(APIError):
            provider.get_resource("xray_licenses_report").exists("1")

        assert len(fake_xray.requests) == 1


@pytest.mark.unit
class TestDeleteReport:
    def test_delete_is_local(self, provider, fake_xray) -> None:
        data = ResourceData(id="1", state={"report_id": "1"})

        diagnostics = provider.get_resource("xray_violations_report").delete(data)

        assert fake_xray.requests == []
        assert data.id == ""
        assert [diagnostic.severity for diagnostic in diagnostics] == [DiagnosticSeverity.WARNING]
