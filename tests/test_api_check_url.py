"""Regression tests for the local URL reachability endpoint."""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from registry_dashboard.api.routers import api_create_check_url_router


class _UrlCheckerStub:
    """URL checker double with scripted availability."""

    def __init__(self, available_urls: frozenset[str] = frozenset(), error: Exception | None = None):
        self.available_urls = available_urls
        self.error = error
        self.checked_urls: list[str] = []

    def adapter_check_url(self, url: str) -> bool:
        """Return scripted availability or raise the scripted error.

        Args:
            url: Target URL.

        Returns:
            bool: Scripted availability.

        Raises:
            Exception: Raised when an error is scripted.
        """

        self.checked_urls.append(url)
        if self.error is not None:
            raise self.error
        return url in self.available_urls


def _build_client(checker: _UrlCheckerStub) -> TestClient:
    application = FastAPI()
    application.include_router(api_create_check_url_router(url_checker=checker))
    return TestClient(application)


@pytest.mark.parametrize("query_params", [{}, {"url": ""}, {"url": "   "}])
def test_api_check_url_requires_url_parameter(query_params: dict[str, str]) -> None:
    """Return HTTP 400 when the url parameter is missing or blank.

    Args:
        query_params: Request query parameters.

    Returns:
        None: Assertions validate the error payload.

    Raises:
        AssertionError: Raised when the request is not rejected.
    """

    checker = _UrlCheckerStub()

    response = _build_client(checker).get("/check-url", params=query_params)

    assert response.status_code == 400
    assert response.json() == {"error": "URL parameter is required"}
    assert checker.checked_urls == []


def test_api_check_url_reports_checker_result() -> None:
    """Return the checker availability for the requested URL."""

    client = _build_client(_UrlCheckerStub(available_urls=frozenset({"https://up.example.test"})))

    assert client.get("/check-url", params={"url": "https://up.example.test"}).json() == {"isAvailable": True}
    assert client.get("/check-url", params={"url": "https://down.example.test"}).json() == {"isAvailable": False}


def test_api_check_url_reports_unavailable_when_checker_raises(caplog: pytest.LogCaptureFixture) -> None:
    """Report unavailable and log when the checker raises.

    Args:
        caplog: Pytest log capture fixture.

    Returns:
        None: Assertions validate failure handling.

    Raises:
        AssertionError: Raised when failures surface as HTTP errors.
    """

    client = _build_client(_UrlCheckerStub(error=RuntimeError("resolver crashed")))

    with caplog.at_level(logging.ERROR, logger="registry_dashboard.api.routers.check_url"):
        response = client.get("/check-url", params={"url": "https://app.example.test"})

    assert response.status_code == 200
    assert response.json() == {"isAvailable": False}
    assert "Error checking URL" in caplog.text
