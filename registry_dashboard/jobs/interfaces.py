"""Typed interfaces for job-layer fetch and probe responsibilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Generic, TypeVar

LIFECYCLE_IDLE: Final[str] = "idle"
LIFECYCLE_LOADING: Final[str] = "loading"
LIFECYCLE_SUCCESS: Final[str] = "success"
LIFECYCLE_ERROR: Final[str] = "error"

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class FetchOutcome(Generic[RecordT]):
    """Result contract for one upstream fetch.

    Attributes:
        operation_name: Upstream operation that was executed.
        status: Terminal lifecycle state, `success` or `error`.
        records: Fetched records, always empty on error.
        error_detail: Failure description when status is `error`.
        lifecycle_timeline: Structured lifecycle events captured during the fetch.
    """

    operation_name: str
    status: str
    records: tuple[RecordT, ...] = ()
    error_detail: str | None = None
    lifecycle_timeline: list[dict[str, object]] = field(default_factory=list)

    def fetch_succeeded(self) -> bool:
        """Return whether the fetch finished in the success state."""

        return self.status == LIFECYCLE_SUCCESS
