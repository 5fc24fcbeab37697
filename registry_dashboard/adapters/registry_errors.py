"""Project-native typed exceptions for registry adapter failures."""

from __future__ import annotations


class RegistryAdapterError(Exception):
    """Base exception for adapter-level registry failures.

    Attributes:
        operation_name: GraphQL operation that failed, when known.
    """

    def __init__(self, message: str, operation_name: str | None = None):
        super().__init__(message)
        self.operation_name = operation_name


class RegistryConnectionError(RegistryAdapterError, ConnectionError):
    """Transport-level connectivity failure or non-success HTTP status."""


class RegistryTimeoutError(RegistryAdapterError, TimeoutError):
    """Transport timeout while waiting for the registry response."""


class RegistryQueryError(RegistryAdapterError, RuntimeError):
    """Upstream-reported GraphQL errors in an otherwise delivered response.

    Attributes:
        errors: Raw upstream error entries.
    """

    def __init__(self, message: str, operation_name: str | None = None, errors: list[object] | None = None):
        super().__init__(message=message, operation_name=operation_name)
        self.errors = list(errors or [])


class RegistryResponseError(RegistryAdapterError, ValueError):
    """Response body is not JSON or does not match the expected record shape."""
