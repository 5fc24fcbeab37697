"""Summary statistics over the full application record set."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable

from registry_dashboard.domain import (
    ApplicationRecord,
    DerivedStats,
    domain_parse_timestamp,
    domain_record_authority,
)

STATS_WINDOW = timedelta(days=30)


def listing_utc_now() -> datetime:
    """Return the current wall-clock time in UTC."""

    return datetime.now(timezone.utc)


def listing_compute_stats(
    records: Iterable[ApplicationRecord],
    now: datetime | None = None,
    clock: Callable[[], datetime] = listing_utc_now,
) -> DerivedStats:
    """Compute dashboard statistics over all fetched records.

    Both recency windows use strict comparisons against `now`, so a record
    created exactly 30 days ago is not counted as recently created.
    Records whose timestamps cannot be parsed fall in neither window.

    Args:
        records: Full fetched record set, not the filtered subset.
        now: Optional fixed reference instant.
        clock: Clock used when `now` is not supplied.

    Returns:
        DerivedStats: Derived counts.

    Raises:
        ValueError: Raised when `now` is offset-naive.
    """

    reference_now = now if now is not None else clock()
    if reference_now.tzinfo is None or reference_now.utcoffset() is None:
        raise ValueError("now must be offset-aware")

    created_after = reference_now - STATS_WINDOW
    expiring_before = reference_now + STATS_WINDOW

    record_list = list(records)
    authorities = {domain_record_authority(record) for record in record_list}
    recently_created = 0
    soon_expiring = 0
    for record in record_list:
        create_time = domain_parse_timestamp(record.create_time)
        if create_time is not None and create_time > created_after:
            recently_created += 1
        expiry_time = domain_parse_timestamp(record.expiry_time)
        if expiry_time is not None and expiry_time < expiring_before:
            soon_expiring += 1

    return DerivedStats(
        total_apps=len(record_list),
        unique_authorities=len(authorities),
        recently_created=recently_created,
        soon_expiring=soon_expiring,
    )


__all__ = ["STATS_WINDOW", "listing_compute_stats", "listing_utc_now"]
