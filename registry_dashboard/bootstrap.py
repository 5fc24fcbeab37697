"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from registry_dashboard.adapters import HttpUrlChecker, RegistryGraphQLAdapter
from registry_dashboard.api import create_api_application
from registry_dashboard.config import DashboardSettings, config_load_settings


def bootstrap_create_application(settings: DashboardSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    The HTTP clients of both adapters are closed when the application shuts down.

    Args:
        settings: Optional pre-validated settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    registry_adapter = bootstrap_create_registry_adapter(settings=resolved_settings)
    url_checker = HttpUrlChecker()
    return create_api_application(
        settings=resolved_settings,
        registry_adapter=registry_adapter,
        url_checker=url_checker,
        shutdown_callbacks=(registry_adapter.adapter_close, url_checker.adapter_close),
    )


def bootstrap_create_registry_adapter(settings: DashboardSettings | None = None) -> RegistryGraphQLAdapter:
    """Build the registry adapter for the configured endpoint.

    The caller owns the adapter and releases it with `adapter_close`.

    Returns:
        RegistryGraphQLAdapter: Adapter wired to the configured registry.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return RegistryGraphQLAdapter(api_url=resolved_settings.laconic_api_url)
