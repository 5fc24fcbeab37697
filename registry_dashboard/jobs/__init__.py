"""Job layer package for upstream fetch orchestration and URL probing."""

from .fetch_orchestrator import RecordFetchOrchestrator
from .interfaces import (
	LIFECYCLE_ERROR,
	LIFECYCLE_IDLE,
	LIFECYCLE_LOADING,
	LIFECYCLE_SUCCESS,
	FetchOutcome,
)
from .url_prober import (
	UrlReachabilityProber,
	UrlStatusBoard,
	UrlStatusCallback,
	job_extract_deployment_urls,
)

__all__ = [
	"FetchOutcome",
	"LIFECYCLE_ERROR",
	"LIFECYCLE_IDLE",
	"LIFECYCLE_LOADING",
	"LIFECYCLE_SUCCESS",
	"RecordFetchOrchestrator",
	"UrlReachabilityProber",
	"UrlStatusBoard",
	"UrlStatusCallback",
	"job_extract_deployment_urls",
]
