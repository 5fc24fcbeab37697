"""Laconic registry GraphQL adapter implementation for record retrieval."""

from __future__ import annotations

from typing import Any, Final

import httpx

from registry_dashboard.domain import ApplicationRecord, DeploymentRecord, domain_build_attribute_map

from .interfaces import RegistryAdapterPort
from .registry_errors import (
    RegistryConnectionError,
    RegistryQueryError,
    RegistryResponseError,
    RegistryTimeoutError,
)

APPLICATION_RECORDS_OPERATION: Final[str] = "GetApplicationRecords"
DEPLOYMENT_RECORDS_OPERATION: Final[str] = "GetApplicationDeploymentRecords"

APPLICATION_RECORDS_QUERY: Final[str] = """query GetApplicationRecords {
  appDeploymentRecords: queryRecords(
    attributes: [{key: "type", value: {string: "ApplicationRecord"}}]
  ) {
    id
    bondId
    createTime
    expiryTime
    names
    owners
    attributes {
      key
      value {
        ... on StringValue {
          string: value
        }
      }
    }
  }
}"""

DEPLOYMENT_RECORDS_QUERY: Final[str] = """query GetApplicationDeploymentRecords($appId: String!) {
  appDeploymentRecords: queryRecords(
    attributes: [{key: "type", value: {string: "ApplicationDeploymentRecord"}}, {key: "application", value: {string: $appId}}]
  ) {
    id
    names
    attributes {
      key
      value {
        ...ValueParts
        __typename
      }
      __typename
    }
    __typename
  }
}

fragment ValueParts on Value {
  ... on BooleanValue {
    bool: value
    __typename
  }
  ... on IntValue {
    int: value
    __typename
  }
  ... on FloatValue {
    float: value
    __typename
  }
  ... on StringValue {
    string: value
    __typename
  }
  ... on BytesValue {
    bytes: value
    __typename
  }
  ... on LinkValue {
    link: value
    __typename
  }
  __typename
}"""

_RECORDS_RESPONSE_FIELD: Final[str] = "appDeploymentRecords"


class RegistryGraphQLAdapter(RegistryAdapterPort):
    """Adapter implementation for the registry `queryRecords` GraphQL endpoint."""

    _USER_AGENT: Final[str] = "registry-dashboard/1.0 (Python/httpx)"

    def __init__(self, api_url: str, http_client: httpx.Client | None = None):
        """Initialize registry adapter.

        Args:
            api_url: Registry GraphQL endpoint URL.
            http_client: Optional preconfigured client. One pooled client is
                created when omitted and reused for every query.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when the endpoint URL is blank.
        """

        normalized_api_url = api_url.strip()
        if not normalized_api_url:
            raise ValueError("api_url must not be blank")

        self._api_url = normalized_api_url
        self._http_client = http_client or httpx.Client(headers={"User-Agent": self._USER_AGENT})

    def adapter_source_name(self) -> str:
        """Return stable adapter source label.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return "laconic_registry_graphql"

    def adapter_fetch_application_records(self) -> list[ApplicationRecord]:
        """Fetch all application records.

        Returns:
            list[ApplicationRecord]: Typed application records in upstream order.

        Raises:
            RegistryConnectionError: Raised for network and non-success HTTP status.
            RegistryTimeoutError: Raised when the request times out.
            RegistryQueryError: Raised when upstream reports GraphQL errors.
            RegistryResponseError: Raised when the payload shape is invalid.
        """

        raw_records = self._adapter_query_records(
            operation_name=APPLICATION_RECORDS_OPERATION,
            query=APPLICATION_RECORDS_QUERY,
            variables={},
        )
        return [
            self._adapter_build_application_record(raw_record, operation_name=APPLICATION_RECORDS_OPERATION)
            for raw_record in raw_records
        ]

    def adapter_fetch_deployment_records(self, app_id: str) -> list[DeploymentRecord]:
        """Fetch deployment records for one application.

        Args:
            app_id: Application record identifier.

        Returns:
            list[DeploymentRecord]: Typed deployment records in upstream order.

        Raises:
            ValueError: Raised when app_id is blank.
            RegistryConnectionError: Raised for network and non-success HTTP status.
            RegistryTimeoutError: Raised when the request times out.
            RegistryQueryError: Raised when upstream reports GraphQL errors.
            RegistryResponseError: Raised when the payload shape is invalid.
        """

        normalized_app_id = app_id.strip()
        if not normalized_app_id:
            raise ValueError("app_id must not be blank")

        raw_records = self._adapter_query_records(
            operation_name=DEPLOYMENT_RECORDS_OPERATION,
            query=DEPLOYMENT_RECORDS_QUERY,
            variables={"appId": normalized_app_id},
        )
        return [
            self._adapter_build_deployment_record(raw_record, operation_name=DEPLOYMENT_RECORDS_OPERATION)
            for raw_record in raw_records
        ]

    def adapter_close(self) -> None:
        """Release pooled HTTP connections."""

        self._http_client.close()

    def _adapter_query_records(
        self,
        operation_name: str,
        query: str,
        variables: dict[str, str],
    ) -> list[dict[str, Any]]:
        """Execute one GraphQL POST and return the raw record list.

        Args:
            operation_name: GraphQL operation name.
            query: GraphQL document.
            variables: Operation variables.

        Returns:
            list[dict[str, Any]]: Raw record objects.

        Raises:
            RegistryConnectionError: Raised for network and non-success HTTP status.
            RegistryTimeoutError: Raised when the request times out.
            RegistryQueryError: Raised when upstream reports GraphQL errors.
            RegistryResponseError: Raised when the payload shape is invalid.
        """

        request_body = {"operationName": operation_name, "variables": variables, "query": query}
        try:
            response = self._http_client.post(self._api_url, json=request_body)
            response.raise_for_status()
        except httpx.TimeoutException as error:
            raise RegistryTimeoutError(
                "Registry transport request timed out", operation_name=operation_name
            ) from error
        except httpx.HTTPStatusError as error:
            raise RegistryConnectionError(
                f"Registry upstream returned HTTP {error.response.status_code}",
                operation_name=operation_name,
            ) from error
        except httpx.HTTPError as error:
            raise RegistryConnectionError("Registry transport request failed", operation_name=operation_name) from error
        except httpx.InvalidURL as error:
            raise RegistryConnectionError(
                f"Registry endpoint URL is invalid: {error}", operation_name=operation_name
            ) from error

        try:
            response_payload = response.json()
        except ValueError as error:
            raise RegistryResponseError(
                "Registry response is not valid JSON", operation_name=operation_name
            ) from error

        if not isinstance(response_payload, dict):
            raise RegistryResponseError("Registry response must be a JSON object", operation_name=operation_name)

        upstream_errors = response_payload.get("errors")
        if upstream_errors:
            raise RegistryQueryError(
                f"Registry query failed: operation={operation_name}, errors={len(upstream_errors)}",
                operation_name=operation_name,
                errors=upstream_errors if isinstance(upstream_errors, list) else [upstream_errors],
            )

        response_data = response_payload.get("data")
        if not isinstance(response_data, dict):
            raise RegistryResponseError("Registry response missing data object", operation_name=operation_name)
        raw_records = response_data.get(_RECORDS_RESPONSE_FIELD)
        if raw_records is None:
            return []
        if not isinstance(raw_records, list):
            raise RegistryResponseError(
                f"Registry response field {_RECORDS_RESPONSE_FIELD} must be a list",
                operation_name=operation_name,
            )
        return raw_records

    def _adapter_build_application_record(self, raw_record: object, operation_name: str) -> ApplicationRecord:
        """Map one raw application record object into a typed record.

        Args:
            raw_record: Raw record object.
            operation_name: Operation label for error messages.

        Returns:
            ApplicationRecord: Typed application record.

        Raises:
            RegistryResponseError: Raised when required fields are missing or mistyped.
        """

        if not isinstance(raw_record, dict):
            raise RegistryResponseError("Registry record must be an object", operation_name=operation_name)
        try:
            return ApplicationRecord(
                record_id=self._adapter_require_text(raw_record, "id"),
                bond_id=str(raw_record.get("bondId") or ""),
                create_time=str(raw_record.get("createTime") or ""),
                expiry_time=str(raw_record.get("expiryTime") or ""),
                names=self._adapter_text_tuple(raw_record.get("names"), field_name="names"),
                owners=self._adapter_text_tuple(raw_record.get("owners"), field_name="owners"),
                attributes=domain_build_attribute_map(raw_record.get("attributes")),
            )
        except ValueError as error:
            raise RegistryResponseError(
                f"Registry application record is malformed: {error}", operation_name=operation_name
            ) from error

    def _adapter_build_deployment_record(self, raw_record: object, operation_name: str) -> DeploymentRecord:
        """Map one raw deployment record object into a typed record.

        Args:
            raw_record: Raw record object.
            operation_name: Operation label for error messages.

        Returns:
            DeploymentRecord: Typed deployment record.

        Raises:
            RegistryResponseError: Raised when required fields are missing or mistyped.
        """

        if not isinstance(raw_record, dict):
            raise RegistryResponseError("Registry record must be an object", operation_name=operation_name)
        try:
            return DeploymentRecord(
                record_id=self._adapter_require_text(raw_record, "id"),
                names=self._adapter_text_tuple(raw_record.get("names"), field_name="names"),
                attributes=domain_build_attribute_map(raw_record.get("attributes")),
            )
        except ValueError as error:
            raise RegistryResponseError(
                f"Registry deployment record is malformed: {error}", operation_name=operation_name
            ) from error

    def _adapter_require_text(self, raw_record: dict[str, Any], field_name: str) -> str:
        value = raw_record.get(field_name)
        if not isinstance(value, str) or not value:
            raise ValueError(f"{field_name} must be a non-empty string")
        return value

    def _adapter_text_tuple(self, raw_values: object, field_name: str) -> tuple[str, ...]:
        if raw_values is None:
            return ()
        if not isinstance(raw_values, list) or not all(isinstance(value, str) for value in raw_values):
            raise ValueError(f"{field_name} must be a list of strings")
        return tuple(raw_values)
