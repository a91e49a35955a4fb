"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from xray_provider.config.settings import Settings
from xray_provider.provider import XrayProvider
from xray_provider.transport.client import XrayClient

XRAY_URL = "https://xray.example.com"


class FakeXray:
    """Stand-in for the Xray REST API that records every request.

    Routes map ``(method, path)`` to a queue of responses; the last response
    of a queue is repeated once the queue is exhausted. Unknown routes
    answer 404.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], list[httpx.Response | Callable]] = {}

    def add(self, method: str, path: str, *responses: httpx.Response | Callable) -> None:
        self._routes[(method, path)] = list(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json={"error": "Not found"})

        response = queue.pop(0) if len(queue) > 1 else queue[0]
        if callable(response):
            return response(request)
        return response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        url=XRAY_URL,
        access_token="test-token",
        retry_count=2,
    )


@pytest.fixture
def fake_xray() -> FakeXray:
    return FakeXray()


@pytest.fixture
def client(settings: Settings, fake_xray: FakeXray) -> XrayClient:
    xray_client = XrayClient.from_settings(settings, transport=fake_xray.transport)
    yield xray_client
    xray_client.close()


@pytest.fixture
def provider(settings: Settings, fake_xray: FakeXray) -> XrayProvider:
    xray_provider = XrayProvider(settings, transport=fake_xray.transport)
    yield xray_provider
    xray_provider.close()


# --- Configuration trees, as the host runtime submits them ---

@pytest.fixture
def paths_config_tree() -> dict:
    return {
        "repo_name": "example-repo-local",
        "paths_config": {
            "pattern": [
                {
                    "include": "pattern1",
                    "exclude": "pattern12",
                    "index_new_artifacts": True,
                    "retention_in_days": 90,
                }
            ],
            "all_other_artifacts": {
                "index_new_artifacts": True,
                "retention_in_days": 90,
            },
        },
    }


@pytest.fixture
def repo_config_tree() -> dict:
    return {
        "repo_name": "example-repo-local",
        "config": {
            "vuln_contextual_analysis": True,
            "retention_in_days": 30,
        },
    }


@pytest.fixture
def repository_resources() -> dict:
    return {
        "repository": [
            {
                "name": "repository-name",
                "include_path_patterns": ["pattern1", "pattern12"],
                "exclude_path_patterns": ["pattern1", "pattern12"],
            }
        ]
    }


@pytest.fixture
def licenses_report_tree(repository_resources: dict) -> dict:
    return {
        "name": "terraform-licenses-report",
        "resources": repository_resources,
        "filters": {
            "component": "component-name",
            "artifact": "impacted-artifact",
            "unknown": False,
            "unrecognized": True,
            "license_names": ["Apache", "MIT"],
            "scan_date": {
                "start": "2020-06-29T12:22:16Z",
                "end": "2020-07-29T12:22:16Z",
            },
        },
    }


@pytest.fixture
def operational_risks_report_tree(repository_resources: dict) -> dict:
    return {
        "name": "terraform-operational-risks-report",
        "resources": repository_resources,
        "filters": {
            "component": "component-name",
            "artifact": "impacted-artifact",
            "risks": ["Medium", "High"],
            "scan_date": {
                "start": "2020-06-29T12:22:16Z",
                "end": "2020-07-29T12:22:16Z",
            },
        },
    }


@pytest.fixture
def violations_report_tree(repository_resources: dict) -> dict:
    return {
        "name": "terraform-violations-report",
        "resources": repository_resources,
        "filters": {
            "type": "security",
            "watch_names": ["NameOfWatch1", "NameOfWatch2"],
            "component": "*vulnerable:component*",
            "artifact": "some://impacted*artifact",
            "policy_names": ["policy1", "policy2"],
            "severities": ["High", "Medium"],
            "updated": {
                "start": "2020-06-29T12:22:16Z",
                "end": "2020-07-29T12:22:16Z",
            },
            "security_filters": {
                "issue_id": "XRAY-87343",
                "cvss_score": {"min_score": 6.3, "max_score": 9},
                "summary_contains": "kernel",
                "has_remediation": True,
            },
            "license_filters": {
                "unknown": False,
                "unrecognized": True,
                "license_names": ["Apache", "MIT"],
            },
        },
    }


@pytest.fixture
def vulnerabilities_report_tree(repository_resources: dict) -> dict:
    return {
        "name": "terraform-vulnerabilities-report",
        "resources": repository_resources,
        "filters": {
            "vulnerable_component": "component-name",
            "impacted_artifact": "impacted-artifact",
            "has_remediation": False,
            "cve": "CVE-1234-1234",
            "cvss_score": {"min_score": 6.3, "max_score": 9},
            "published": {
                "start": "2020-06-29T12:22:16Z",
                "end": "2020-07-29T12:22:16Z",
            },
            "scan_date": {
                "start": "2020-06-29T12:22:16Z",
                "end": "2020-07-29T12:22:16Z",
            },
        },
    }


@pytest.fixture
def report_trees(
    licenses_report_tree: dict,
    operational_risks_report_tree: dict,
    violations_report_tree: dict,
    vulnerabilities_report_tree: dict,
) -> dict[str, dict]:
    """Valid configuration trees keyed by resource type."""
    return {
        "xray_licenses_report": licenses_report_tree,
        "xray_operational_risks_report": operational_risks_report_tree,
        "xray_violations_report": violations_report_tree,
        "xray_vulnerabilities_report": vulnerabilities_report_tree,
    }
