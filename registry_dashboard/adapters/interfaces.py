"""Typed interfaces for adapter-layer responsibilities."""

from typing import Protocol

from registry_dashboard.domain import ApplicationRecord, DeploymentRecord


class RegistryAdapterPort(Protocol):
    """Port definition for read-only registry record queries."""

    def adapter_source_name(self) -> str:
        """Return adapter source identifier for diagnostics and logging.

        Returns:
            str: Human-readable upstream source identifier.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def adapter_fetch_application_records(self) -> list[ApplicationRecord]:
        """Fetch every record tagged as an application record.

        Returns:
            list[ApplicationRecord]: Typed application records in upstream order.

        Raises:
            ConnectionError: Raised when upstream connection fails.
            TimeoutError: Raised when request exceeds timeout.
            RuntimeError: Raised when upstream reports query errors.
            ValueError: Raised when the response shape is invalid.
        """

    def adapter_fetch_deployment_records(self, app_id: str) -> list[DeploymentRecord]:
        """Fetch deployment records attached to one application.

        Args:
            app_id: Application record identifier.

        Returns:
            list[DeploymentRecord]: Typed deployment records in upstream order.

        Raises:
            ConnectionError: Raised when upstream connection fails.
            TimeoutError: Raised when request exceeds timeout.
            RuntimeError: Raised when upstream reports query errors.
            ValueError: Raised when the response shape is invalid.
        """


class UrlCheckerPort(Protocol):
    """Port definition for lightweight URL existence checks."""

    def adapter_check_url(self, url: str) -> bool:
        """Return whether a header-only request to the URL succeeded.

        Args:
            url: Target URL.

        Returns:
            bool: True when the request completed with a success status.

        Raises:
            ConnectionError: Implementations may raise on transport failure.
        """
