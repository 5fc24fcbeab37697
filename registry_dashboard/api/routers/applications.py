"""Application list and detail view router composition."""

from __future__ import annotations

from datetime import datetime
from typing import Callable
from urllib.parse import quote, urlencode

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from registry_dashboard.adapters import RegistryAdapterPort
from registry_dashboard.domain import (
    UNKNOWN_VALUE,
    UNNAMED_APP,
    ApplicationDetailInfo,
    ApplicationRecord,
    DeploymentRecord,
    DerivedStats,
    UrlStatus,
    domain_address_display,
    domain_format_timestamp,
    domain_record_authority,
    domain_record_display_name,
    domain_record_display_version,
)
from registry_dashboard.jobs import (
    RecordFetchOrchestrator,
    UrlReachabilityProber,
    UrlStatusBoard,
    job_extract_deployment_urls,
)
from registry_dashboard.listing import (
    DEFAULT_SORT_OPTION,
    SORT_OPTIONS,
    listing_compute_stats,
    listing_filter_and_sort,
    listing_record_owner_display,
    listing_utc_now,
)


def api_create_applications_router(
    registry_adapter: RegistryAdapterPort,
    url_prober: UrlReachabilityProber,
    clock: Callable[[], datetime] = listing_utc_now,
) -> APIRouter:
    """Create router exposing the application list and detail views.

    Args:
        registry_adapter: Adapter used by the per-request fetch orchestrator.
        url_prober: Prober used for deployment URL reachability.
        clock: Clock used for the statistics windows.

    Returns:
        APIRouter: Router exposing `/apps` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if registry_adapter is None:
        raise ValueError("registry_adapter must not be None")
    if url_prober is None:
        raise ValueError("url_prober must not be None")

    router = APIRouter(prefix="/apps", tags=["applications"])

    @router.get("")
    def api_application_list(
        search: str = Query(default=""),
        sort: str = Query(default=DEFAULT_SORT_OPTION),
    ) -> JSONResponse:
        """Return statistics and the filtered, ordered application list.

        Args:
            search: Case-insensitive search term.
            sort: Sort option.

        Returns:
            JSONResponse: List view payload.

        Raises:
            RuntimeError: This handler does not raise for upstream failures.
        """

        normalized_sort = sort.strip().lower()
        if normalized_sort not in SORT_OPTIONS:
            payload = {
                "status": "error",
                "code": "INVALID_SORT_OPTION",
                "message": f"unsupported sort={normalized_sort}",
            }
            return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)

        fetch_outcome = RecordFetchOrchestrator(registry_adapter=registry_adapter).job_fetch_application_records()
        all_records = fetch_outcome.records
        stats = listing_compute_stats(all_records, now=clock())
        shown_records = listing_filter_and_sort(all_records, search_term=search, sort_option=normalized_sort)

        payload = {
            "fetch_status": fetch_outcome.status,
            "stats": api_serialize_stats(stats),
            "search": search,
            "sort": normalized_sort,
            "shown": len(shown_records),
            "total": len(all_records),
            "items": [api_serialize_application_item(record) for record in shown_records],
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/{app_id}")
    def api_application_detail(
        app_id: str,
        name: str | None = Query(default=None),
        version: str | None = Query(default=None),
        authority: str | None = Query(default=None),
        created: str | None = Query(default=None),
        expires: str | None = Query(default=None),
        owner: str | None = Query(default=None),
        repository: str | None = Query(default=None),
    ) -> JSONResponse:
        """Return caller-supplied application metadata and probed deployments.

        The metadata is redisplayed verbatim from the navigation query
        parameters, with timestamps reformatted for display.

        Args:
            app_id: Application record identifier.
            name: Display name from the list view.
            version: Display version from the list view.
            authority: Authority from the list view.
            created: Raw creation timestamp.
            expires: Raw expiry timestamp.
            owner: Bech32 owner address.
            repository: Repository URL.

        Returns:
            JSONResponse: Detail view payload.

        Raises:
            RuntimeError: This handler does not raise for upstream failures.
        """

        detail_info = api_build_detail_info(
            name=name,
            version=version,
            authority=authority,
            created=created,
            expires=expires,
            owner=owner,
            repository=repository,
        )
        fetch_outcome = RecordFetchOrchestrator(registry_adapter=registry_adapter).job_fetch_deployment_records(
            app_id=app_id
        )

        deployment_items = []
        for deployment in fetch_outcome.records:
            deployment_urls = job_extract_deployment_urls(deployment)
            status_board = url_prober.job_probe_urls(deployment_urls)
            deployment_items.append(api_serialize_deployment(deployment, deployment_urls, status_board))

        payload = {
            "fetch_status": fetch_outcome.status,
            "app_id": app_id,
            "app": api_serialize_detail_info(detail_info),
            "deployments": deployment_items,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router


def api_build_detail_info(
    name: str | None = None,
    version: str | None = None,
    authority: str | None = None,
    created: str | None = None,
    expires: str | None = None,
    owner: str | None = None,
    repository: str | None = None,
) -> ApplicationDetailInfo:
    """Apply detail-view fallbacks to caller-supplied navigation values.

    Args:
        name: Display name.
        version: Display version.
        authority: Authority.
        created: Raw creation timestamp.
        expires: Raw expiry timestamp.
        owner: Bech32 owner address.
        repository: Repository URL.

    Returns:
        ApplicationDetailInfo: Display-ready application metadata.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return ApplicationDetailInfo(
        name=name or UNNAMED_APP,
        version=version or UNKNOWN_VALUE,
        authority=authority or UNKNOWN_VALUE,
        created=domain_format_timestamp(created),
        expires=domain_format_timestamp(expires),
        owner=owner or "",
        repository=repository or UNKNOWN_VALUE,
    )


def api_build_detail_href(record: ApplicationRecord) -> str:
    """Build the detail-view link carrying the navigation query parameters."""

    query_parameters = {
        "name": domain_record_display_name(record),
        "version": domain_record_display_version(record),
        "authority": domain_record_authority(record),
        "created": record.create_time,
        "expires": record.expiry_time,
        "owner": listing_record_owner_display(record),
    }
    return f"/apps/{quote(record.record_id, safe='')}?{urlencode(query_parameters)}"


def api_serialize_stats(stats: DerivedStats) -> dict[str, int]:
    """Serialize derived statistics to JSON payload."""

    return {
        "total_apps": stats.total_apps,
        "unique_authorities": stats.unique_authorities,
        "recently_created": stats.recently_created,
        "soon_expiring": stats.soon_expiring,
    }


def api_serialize_application_item(record: ApplicationRecord) -> dict[str, object]:
    """Serialize one application record to its list-view payload.

    Args:
        record: Application record.

    Returns:
        dict[str, object]: JSON-serializable list item.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "id": record.record_id,
        "bond_id": record.bond_id,
        "name": domain_record_display_name(record),
        "version": domain_record_display_version(record),
        "authority": domain_record_authority(record),
        "created": domain_format_timestamp(record.create_time),
        "expires": domain_format_timestamp(record.expiry_time),
        "create_time": record.create_time,
        "expiry_time": record.expiry_time,
        "owners": [domain_address_display(owner) for owner in record.owners],
        "detail_href": api_build_detail_href(record),
    }


def api_serialize_detail_info(detail_info: ApplicationDetailInfo) -> dict[str, str]:
    """Serialize detail-view application metadata."""

    return {
        "name": detail_info.name,
        "version": detail_info.version,
        "authority": detail_info.authority,
        "created": detail_info.created,
        "expires": detail_info.expires,
        "owner": detail_info.owner,
        "repository": detail_info.repository,
    }


def api_serialize_deployment(
    deployment: DeploymentRecord,
    deployment_urls: list[str],
    status_board: UrlStatusBoard,
) -> dict[str, object]:
    """Serialize one deployment with the probed status of each listed URL.

    Args:
        deployment: Deployment record.
        deployment_urls: URLs in attribute order, duplicates included.
        status_board: Board holding the probe results.

    Returns:
        dict[str, object]: JSON-serializable deployment payload.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "id": deployment.record_id,
        "name": deployment.names[0] if deployment.names else "",
        "urls": [
            {"url": url, "status": (status_board.board_status(url) or UrlStatus.CHECKING).value}
            for url in deployment_urls
        ],
    }


__all__ = [
    "api_build_detail_href",
    "api_build_detail_info",
    "api_create_applications_router",
    "api_serialize_application_item",
    "api_serialize_deployment",
    "api_serialize_detail_info",
    "api_serialize_stats",
]
