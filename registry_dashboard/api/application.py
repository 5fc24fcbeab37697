"""FastAPI application factory for the registry dashboard.

This module defines API application composition used by the runtime.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Callable, Sequence

from fastapi import FastAPI

from registry_dashboard.adapters import RegistryAdapterPort, UrlCheckerPort
from registry_dashboard.config import DashboardSettings
from registry_dashboard.jobs import UrlReachabilityProber
from registry_dashboard.listing import listing_utc_now

from .routers import api_create_applications_router, api_create_check_url_router, api_create_health_router

logger = logging.getLogger(__name__)


def create_api_application(
    settings: DashboardSettings,
    registry_adapter: RegistryAdapterPort,
    url_checker: UrlCheckerPort,
    clock: Callable[[], datetime] = listing_utc_now,
    shutdown_callbacks: Sequence[Callable[[], None]] = (),
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        registry_adapter: Adapter for upstream registry queries.
        url_checker: Checker used by the prober and the `/check-url` endpoint.
        clock: Clock used for list-view statistics windows.
        shutdown_callbacks: Resource release callables run once at application shutdown.

    Returns:
        FastAPI: Framework application instance with all routers attached.

    Raises:
        RuntimeError: Raised if application initialization fails.
    """

    @asynccontextmanager
    async def lifespan(_application: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            for shutdown_callback in shutdown_callbacks:
                shutdown_callback()
            logger.info("Released %d runtime resources", len(shutdown_callbacks))

    application = FastAPI(title="Registry Application Dashboard", lifespan=lifespan)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal service identification response.

        Returns:
            dict[str, str]: Service name and environment label.

        Raises:
            RuntimeError: Raised if route handler cannot produce a response.
        """

        return {
            "service": "registry-dashboard",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(registry_adapter=registry_adapter))
    application.include_router(
        api_create_applications_router(
            registry_adapter=registry_adapter,
            url_prober=UrlReachabilityProber(url_checker=url_checker),
            clock=clock,
        )
    )
    application.include_router(api_create_check_url_router(url_checker=url_checker))

    return application
