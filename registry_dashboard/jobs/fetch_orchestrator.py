"""Job-layer fetch orchestrator with a loading/success/error lifecycle."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from registry_dashboard.adapters import (
    APPLICATION_RECORDS_OPERATION,
    DEPLOYMENT_RECORDS_OPERATION,
    RegistryAdapterPort,
    RegistryQueryError,
)
from registry_dashboard.domain import ApplicationRecord, DeploymentRecord, domain_build_lifecycle_event

from .interfaces import (
    LIFECYCLE_ERROR,
    LIFECYCLE_IDLE,
    LIFECYCLE_LOADING,
    LIFECYCLE_SUCCESS,
    FetchOutcome,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class RecordFetchOrchestrator:
    """Issue one registry query per view and degrade failures to empty results.

    The orchestrator never raises adapter failures to its caller. Transport
    errors, upstream-reported query errors and malformed payloads are logged
    and mapped to an `error` outcome with no records. There is no retry.
    """

    def __init__(self, registry_adapter: RegistryAdapterPort):
        """Initialize fetch orchestrator dependencies.

        Args:
            registry_adapter: Adapter for upstream registry queries.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when registry_adapter is None.
        """

        if registry_adapter is None:
            raise ValueError("registry_adapter must not be None")

        self._registry_adapter = registry_adapter
        self._lifecycle_state = LIFECYCLE_IDLE

    @property
    def lifecycle_state(self) -> str:
        """Current lifecycle state: `idle`, `loading`, `success` or `error`."""

        return self._lifecycle_state

    def job_fetch_application_records(self) -> FetchOutcome[ApplicationRecord]:
        """Fetch every application record for the list view.

        Returns:
            FetchOutcome[ApplicationRecord]: Records on success, empty on error.

        Raises:
            RuntimeError: This orchestrator does not raise for upstream failures.
        """

        return self._job_run_fetch(
            operation_name=APPLICATION_RECORDS_OPERATION,
            fetch=self._registry_adapter.adapter_fetch_application_records,
        )

    def job_fetch_deployment_records(self, app_id: str) -> FetchOutcome[DeploymentRecord]:
        """Fetch deployment records for the detail view of one application.

        Args:
            app_id: Application record identifier.

        Returns:
            FetchOutcome[DeploymentRecord]: Records on success, empty on error.

        Raises:
            RuntimeError: This orchestrator does not raise for upstream failures.
        """

        return self._job_run_fetch(
            operation_name=DEPLOYMENT_RECORDS_OPERATION,
            fetch=lambda: self._registry_adapter.adapter_fetch_deployment_records(app_id=app_id),
        )

    def _job_run_fetch(
        self,
        operation_name: str,
        fetch: Callable[[], list[RecordT]],
    ) -> FetchOutcome[RecordT]:
        """Run one fetch through the lifecycle states.

        Args:
            operation_name: Upstream operation label.
            fetch: Zero-argument adapter call.

        Returns:
            FetchOutcome[RecordT]: Terminal fetch outcome.

        Raises:
            RuntimeError: This helper does not raise for upstream failures.
        """

        timeline: list[dict[str, object]] = []
        self._job_enter_state(timeline, operation_name=operation_name, state=LIFECYCLE_LOADING)

        try:
            records = tuple(fetch())
        except RegistryQueryError as error:
            logger.error("Registry reported errors for %s: %s", operation_name, error.errors)
            return self._job_build_error_outcome(timeline, operation_name=operation_name, error=error)
        except (TimeoutError, ConnectionError, ValueError, RuntimeError) as error:
            logger.exception("Failed to fetch %s", operation_name)
            return self._job_build_error_outcome(timeline, operation_name=operation_name, error=error)

        self._job_enter_state(
            timeline,
            operation_name=operation_name,
            state=LIFECYCLE_SUCCESS,
            details={"record_count": len(records)},
        )
        logger.debug("Fetched %d records for %s", len(records), operation_name)
        return FetchOutcome(
            operation_name=operation_name,
            status=LIFECYCLE_SUCCESS,
            records=records,
            lifecycle_timeline=timeline,
        )

    def _job_build_error_outcome(
        self,
        timeline: list[dict[str, object]],
        operation_name: str,
        error: Exception,
    ) -> FetchOutcome:
        error_detail = f"{type(error).__name__}: {error}"
        self._job_enter_state(
            timeline,
            operation_name=operation_name,
            state=LIFECYCLE_ERROR,
            details={"error": error_detail},
        )
        return FetchOutcome(
            operation_name=operation_name,
            status=LIFECYCLE_ERROR,
            error_detail=error_detail,
            lifecycle_timeline=timeline,
        )

    def _job_enter_state(
        self,
        timeline: list[dict[str, object]],
        operation_name: str,
        state: str,
        details: dict[str, object] | None = None,
    ) -> None:
        self._lifecycle_state = state
        timeline.append(domain_build_lifecycle_event(operation=operation_name, state=state, details=details))
