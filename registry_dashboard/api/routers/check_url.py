"""Local reachability-check endpoint router composition."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from registry_dashboard.adapters import UrlCheckerPort

logger = logging.getLogger(__name__)


def api_create_check_url_router(url_checker: UrlCheckerPort) -> APIRouter:
    """Create router exposing the `/check-url` reachability endpoint.

    Args:
        url_checker: Checker issuing one header-only request per URL.

    Returns:
        APIRouter: Router exposing `/check-url`.

    Raises:
        ValueError: Raised when url_checker is invalid.
    """

    if url_checker is None:
        raise ValueError("url_checker must not be None")

    router = APIRouter(tags=["reachability"])

    @router.get("/check-url")
    def api_check_url(url: str | None = Query(default=None)) -> JSONResponse:
        """Report whether a URL answers a HEAD request with a success status.

        Transport failures are reported as unavailable, never as an HTTP error.

        Args:
            url: Target URL.

        Returns:
            JSONResponse: `{"isAvailable": bool}` or a 400 error payload.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        if not url or not url.strip():
            return JSONResponse(
                content={"error": "URL parameter is required"},
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        try:
            is_available = url_checker.adapter_check_url(url)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Error checking URL %s", url)
            is_available = False
        return JSONResponse(content={"isAvailable": bool(is_available)}, status_code=status.HTTP_200_OK)

    return router
