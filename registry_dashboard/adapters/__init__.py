"""Adapter layer package for registry and URL-check integration boundaries."""

from .interfaces import RegistryAdapterPort, UrlCheckerPort
from .registry_client import (
	APPLICATION_RECORDS_OPERATION,
	DEPLOYMENT_RECORDS_OPERATION,
	RegistryGraphQLAdapter,
)
from .registry_errors import (
	RegistryAdapterError,
	RegistryConnectionError,
	RegistryQueryError,
	RegistryResponseError,
	RegistryTimeoutError,
)
from .url_checker import HttpUrlChecker

__all__ = [
	"APPLICATION_RECORDS_OPERATION",
	"DEPLOYMENT_RECORDS_OPERATION",
	"HttpUrlChecker",
	"RegistryAdapterError",
	"RegistryAdapterPort",
	"RegistryConnectionError",
	"RegistryGraphQLAdapter",
	"RegistryQueryError",
	"RegistryResponseError",
	"RegistryTimeoutError",
	"UrlCheckerPort",
]
