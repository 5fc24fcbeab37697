"""Regression tests for application list and detail view endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from urllib.parse import parse_qs, urlsplit

from fastapi.testclient import TestClient

from registry_dashboard.adapters import RegistryConnectionError, RegistryQueryError
from registry_dashboard.api.application import create_api_application
from registry_dashboard.config import DashboardSettings
from registry_dashboard.domain import ApplicationRecord, DeploymentRecord, domain_address_display

_NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)
_OWNER_HEX = "11" * 20


class _RegistryAdapterStub:
    """Registry adapter double for API tests."""

    def __init__(
        self,
        application_records: list[ApplicationRecord] | None = None,
        deployment_records: list[DeploymentRecord] | None = None,
        error: Exception | None = None,
    ):
        self.application_records = application_records or []
        self.deployment_records = deployment_records or []
        self.error = error
        self.requested_app_ids: list[str] = []

    def adapter_source_name(self) -> str:
        """Return deterministic source label.

        Returns:
            str: Source label.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        return "registry_stub"

    def adapter_fetch_application_records(self) -> list[ApplicationRecord]:
        """Return scripted application records or raise the scripted error."""

        if self.error is not None:
            raise self.error
        return self.application_records

    def adapter_fetch_deployment_records(self, app_id: str) -> list[DeploymentRecord]:
        """Return scripted deployment records or raise the scripted error."""

        self.requested_app_ids.append(app_id)
        if self.error is not None:
            raise self.error
        return self.deployment_records


class _UrlCheckerStub:
    """URL checker double marking only listed URLs as available."""

    def __init__(self, available_urls: frozenset[str] = frozenset()):
        self.available_urls = available_urls
        self.checked_urls: list[str] = []

    def adapter_check_url(self, url: str) -> bool:
        """Return whether the URL is listed as available.

        Args:
            url: Target URL.

        Returns:
            bool: Scripted availability.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        self.checked_urls.append(url)
        return url in self.available_urls


def _build_settings() -> DashboardSettings:
    return DashboardSettings(environment_name="test", laconic_api_url="https://registry.example.test/api")


def _build_client(adapter: _RegistryAdapterStub, checker: _UrlCheckerStub | None = None) -> TestClient:
    application = create_api_application(
        settings=_build_settings(),
        registry_adapter=adapter,
        url_checker=checker or _UrlCheckerStub(),
        clock=lambda: _NOW,
    )
    return TestClient(application)


def _sample_records() -> list[ApplicationRecord]:
    return [
        ApplicationRecord(
            record_id="app-old",
            bond_id="bond-1",
            create_time="2026-01-01T00:00:00Z",
            expiry_time="2026-07-01T00:00:00Z",
            names=("lrn://alice/applications/wallet",),
            owners=(_OWNER_HEX,),
            attributes={"name": "Wallet", "app_version": "2.0.0"},
        ),
        ApplicationRecord(
            record_id="app-new",
            bond_id="bond-2",
            create_time="2026-06-01T00:00:00Z",
            expiry_time="2027-06-01T00:00:00Z",
            names=("nope",),
        ),
    ]


def test_api_application_list_returns_stats_and_time_ordered_items() -> None:
    """Return statistics over all records and items newest first.

    Returns:
        None: Assertions validate list payload.

    Raises:
        AssertionError: Raised when payload does not match expected values.
    """

    client = _build_client(_RegistryAdapterStub(application_records=_sample_records()))

    response = client.get("/apps")

    assert response.status_code == 200
    payload = response.json()
    assert payload["fetch_status"] == "success"
    assert payload["stats"] == {
        "total_apps": 2,
        "unique_authorities": 2,
        "recently_created": 1,
        "soon_expiring": 1,
    }
    assert [item["id"] for item in payload["items"]] == ["app-new", "app-old"]
    assert payload["shown"] == 2
    assert payload["total"] == 2
    unnamed_item = payload["items"][0]
    assert unnamed_item["name"] == "Unnamed App"
    assert unnamed_item["version"] == "Unknown"
    assert unnamed_item["authority"] == "Unknown"
    assert unnamed_item["owners"] == []
    wallet_item = payload["items"][1]
    assert wallet_item["owners"] == [domain_address_display(_OWNER_HEX)]
    assert wallet_item["created"] == "2026-01-01 00:00:00 UTC"


def test_api_application_list_applies_search_and_sort() -> None:
    """Filter by search term and order by the requested sort option while keeping full stats.

    Returns:
        None: Assertions validate search and sort query parameters.

    Raises:
        AssertionError: Raised when filtering or stats differ.
    """

    client = _build_client(_RegistryAdapterStub(application_records=_sample_records()))

    response = client.get("/apps", params={"search": "ALICE", "sort": "name"})

    payload = response.json()
    assert [item["id"] for item in payload["items"]] == ["app-old"]
    assert payload["shown"] == 1
    assert payload["total"] == 2
    assert payload["stats"]["total_apps"] == 2
    assert payload["sort"] == "name"


def test_api_application_list_rejects_unknown_sort_option() -> None:
    """Return HTTP 400 for unsupported sort options."""

    client = _build_client(_RegistryAdapterStub(application_records=_sample_records()))

    response = client.get("/apps", params={"sort": "size"})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_SORT_OPTION"


def test_api_application_list_degrades_to_empty_on_upstream_failure() -> None:
    """Return an empty list with zero stats when the registry fetch fails.

    Returns:
        None: Assertions validate silent degradation.

    Raises:
        AssertionError: Raised when failures surface as HTTP errors.
    """

    client = _build_client(_RegistryAdapterStub(error=RegistryConnectionError("Registry transport request failed")))

    response = client.get("/apps")

    assert response.status_code == 200
    payload = response.json()
    assert payload["fetch_status"] == "error"
    assert payload["items"] == []
    assert payload["stats"] == {
        "total_apps": 0,
        "unique_authorities": 0,
        "recently_created": 0,
        "soon_expiring": 0,
    }


def test_api_application_list_detail_href_carries_navigation_parameters() -> None:
    """Build detail links whose query parameters the detail view redisplays.

    Returns:
        None: Assertions validate the navigation contract round trip.

    Raises:
        AssertionError: Raised when link parameters or redisplayed values differ.
    """

    adapter = _RegistryAdapterStub(application_records=_sample_records())
    client = _build_client(adapter)

    wallet_item = client.get("/apps", params={"sort": "name"}).json()["items"][1]
    detail_href = wallet_item["detail_href"]
    link_parts = urlsplit(detail_href)
    link_parameters = parse_qs(link_parts.query)

    assert link_parts.path == "/apps/app-old"
    assert link_parameters["name"] == ["Wallet"]
    assert link_parameters["version"] == ["2.0.0"]
    assert link_parameters["authority"] == ["alice"]
    assert link_parameters["created"] == ["2026-01-01T00:00:00Z"]
    assert link_parameters["owner"] == [domain_address_display(_OWNER_HEX)]

    detail_payload = client.get(detail_href).json()

    assert adapter.requested_app_ids == ["app-old"]
    assert detail_payload["app"] == {
        "name": "Wallet",
        "version": "2.0.0",
        "authority": "alice",
        "created": "2026-01-01 00:00:00 UTC",
        "expires": "2026-07-01 00:00:00 UTC",
        "owner": domain_address_display(_OWNER_HEX),
        "repository": "Unknown",
    }


def test_api_application_detail_falls_back_without_parameters() -> None:
    """Apply default labels when navigation parameters are absent."""

    client = _build_client(_RegistryAdapterStub())

    payload = client.get("/apps/app-1").json()

    assert payload["app"] == {
        "name": "Unnamed App",
        "version": "Unknown",
        "authority": "Unknown",
        "created": "Invalid Date",
        "expires": "Invalid Date",
        "owner": "",
        "repository": "Unknown",
    }
    assert payload["deployments"] == []
    assert payload["fetch_status"] == "success"


def test_api_application_detail_probes_each_deployment_url() -> None:
    """Return every listed URL of every deployment with its probed status.

    Returns:
        None: Assertions validate deployment URL statuses.

    Raises:
        AssertionError: Raised when a URL is dropped or misclassified.
    """

    deployments = [
        DeploymentRecord(
            record_id="dep-1",
            names=("lrn://alice/deployments/wallet",),
            attributes={"url": "http://a,http://b"},
        ),
        DeploymentRecord(record_id="dep-2", names=(), attributes={}),
    ]
    checker = _UrlCheckerStub(available_urls=frozenset({"http://a"}))
    client = _build_client(_RegistryAdapterStub(deployment_records=deployments), checker)

    payload = client.get("/apps/app-old").json()

    assert payload["deployments"] == [
        {
            "id": "dep-1",
            "name": "lrn://alice/deployments/wallet",
            "urls": [
                {"url": "http://a", "status": "available"},
                {"url": "http://b", "status": "unavailable"},
            ],
        },
        {"id": "dep-2", "name": "", "urls": []},
    ]
    assert checker.checked_urls == ["http://a", "http://b"]


def test_api_application_detail_degrades_on_upstream_query_errors() -> None:
    """Return no deployments when the registry reports query errors."""

    client = _build_client(_RegistryAdapterStub(error=RegistryQueryError("Registry query failed", errors=["x"])))

    response = client.get("/apps/app-old", params={"name": "Wallet"})

    assert response.status_code == 200
    assert response.json()["fetch_status"] == "error"
    assert response.json()["deployments"] == []
    assert response.json()["app"]["name"] == "Wallet"
