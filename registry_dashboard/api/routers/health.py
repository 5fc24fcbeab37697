"""Health endpoint router composition."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from registry_dashboard.adapters import RegistryAdapterPort


def api_create_health_router(registry_adapter: RegistryAdapterPort) -> APIRouter:
    """Create health-check router reporting app liveness and the registry source.

    The registry itself is not queried; every upstream query belongs to a view.

    Args:
        registry_adapter: Registry adapter whose source label is reported.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when registry_adapter is invalid.
    """

    if registry_adapter is None:
        raise ValueError("registry_adapter must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state."""

        payload = {
            "status": "ok",
            "app": "up",
            "registry_source": registry_adapter.adapter_source_name(),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
