"""Sequential reachability probing of deployment URLs."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping

from registry_dashboard.adapters import UrlCheckerPort
from registry_dashboard.domain import DeploymentRecord, UrlStatus

logger = logging.getLogger(__name__)

UrlStatusCallback = Callable[[str, UrlStatus, Mapping[str, UrlStatus]], None]


def job_extract_deployment_urls(deployment: DeploymentRecord) -> list[str]:
    """Split the deployment `url` attribute into its URL list.

    The value is split on `,` literally. Entries are not trimmed and
    duplicates are kept.

    Args:
        deployment: Deployment record.

    Returns:
        list[str]: URLs in attribute order, empty when the attribute is absent or blank.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    url_value = deployment.attributes.get("url")
    if not url_value:
        return []
    return url_value.split(",")


class UrlStatusBoard:
    """Per-view status map keyed by literal URL string.

    Every URL starts as `checking` and is later written exactly once per
    probe with a terminal status. Duplicate URLs share one entry.
    """

    def __init__(self, urls: Iterable[str]):
        self._statuses: dict[str, UrlStatus] = {url: UrlStatus.CHECKING for url in urls}

    def board_set(self, url: str, url_status: UrlStatus) -> None:
        """Record the status of one URL."""

        self._statuses[url] = url_status

    def board_status(self, url: str) -> UrlStatus | None:
        """Return the current status of one URL, or None when it is not tracked."""

        return self._statuses.get(url)

    def board_snapshot(self) -> dict[str, UrlStatus]:
        """Return a copy of the current status map."""

        return dict(self._statuses)

    def board_pending_urls(self) -> list[str]:
        """Return URLs still in the `checking` state."""

        return [url for url, url_status in self._statuses.items() if url_status is UrlStatus.CHECKING]


class UrlReachabilityProber:
    """Probe URLs one at a time and publish each result as soon as it is known."""

    def __init__(self, url_checker: UrlCheckerPort):
        """Initialize prober dependencies.

        Args:
            url_checker: Checker issuing one header-only request per URL.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when url_checker is None.
        """

        if url_checker is None:
            raise ValueError("url_checker must not be None")
        self._url_checker = url_checker

    def job_probe_urls(
        self,
        urls: list[str],
        board: UrlStatusBoard | None = None,
        on_update: UrlStatusCallback | None = None,
    ) -> UrlStatusBoard:
        """Probe every URL sequentially in source order.

        The board holds `checking` for every URL before the first probe is
        issued. After each probe the board is updated and `on_update` is
        called with the URL, its terminal status and a board snapshot.

        Args:
            urls: URLs in source order, duplicates included.
            board: Optional pre-built board; one is created when omitted.
            on_update: Optional callback invoked after each status write.

        Returns:
            UrlStatusBoard: Board with a terminal status for every URL.

        Raises:
            RuntimeError: This method does not raise for probe failures.
        """

        status_board = board if board is not None else UrlStatusBoard(urls)
        for url in urls:
            url_status = self._job_probe_one(url)
            status_board.board_set(url, url_status)
            if on_update is not None:
                on_update(url, url_status, status_board.board_snapshot())
        return status_board

    def job_probe_deployment(
        self,
        deployment: DeploymentRecord,
        on_update: UrlStatusCallback | None = None,
    ) -> UrlStatusBoard:
        """Probe every URL listed on one deployment record."""

        return self.job_probe_urls(job_extract_deployment_urls(deployment), on_update=on_update)

    def _job_probe_one(self, url: str) -> UrlStatus:
        try:
            is_available = self._url_checker.adapter_check_url(url)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Reachability probe raised for %s", url)
            return UrlStatus.UNAVAILABLE
        return UrlStatus.AVAILABLE if is_available else UrlStatus.UNAVAILABLE
