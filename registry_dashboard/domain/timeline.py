"""Fetch lifecycle event helper utilities."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def domain_build_lifecycle_event(
    operation: str,
    state: str,
    details: dict[str, Any] | None = None,
) -> dict[str, object]:
    """Build one structured lifecycle event payload.

    Args:
        operation: Upstream operation name.
        state: Lifecycle state entered (`loading`, `success`, `error`).
        details: Optional structured details object.

    Returns:
        dict[str, object]: Structured lifecycle event.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    event_payload: dict[str, object] = {
        "operation": operation,
        "state": state,
        "at_utc": datetime.now(timezone.utc).isoformat(),
    }
    if details is not None:
        event_payload["details"] = details
    return event_payload
