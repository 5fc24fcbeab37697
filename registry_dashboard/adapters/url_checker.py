"""Header-only URL existence checks."""

from __future__ import annotations

import logging

import httpx

from .interfaces import UrlCheckerPort

logger = logging.getLogger(__name__)


class HttpUrlChecker(UrlCheckerPort):
    """URL checker issuing one HEAD request per URL.

    No explicit timeout is configured; the httpx client default applies.
    """

    def __init__(self, http_client: httpx.Client | None = None):
        self._http_client = http_client or httpx.Client(follow_redirects=True)

    def adapter_check_url(self, url: str) -> bool:
        """Return whether a HEAD request to the URL completed with a success status.

        Args:
            url: Target URL.

        Returns:
            bool: True for a 2xx response, False for any other status or transport failure.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        try:
            response = self._http_client.head(url)
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            logger.info("URL check failed for %s: %s", url, error)
            return False
        return response.is_success

    def adapter_close(self) -> None:
        """Release pooled HTTP connections."""

        self._http_client.close()
