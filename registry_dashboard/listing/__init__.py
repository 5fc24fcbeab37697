"""Listing layer package for record statistics, filtering and ordering."""

from .filter_sort import (
    DEFAULT_SORT_OPTION,
    SORT_OPTIONS,
    listing_filter_and_sort,
    listing_record_matches,
    listing_record_owner_display,
)
from .stats import STATS_WINDOW, listing_compute_stats, listing_utc_now

__all__ = [
    "DEFAULT_SORT_OPTION",
    "SORT_OPTIONS",
    "STATS_WINDOW",
    "listing_compute_stats",
    "listing_filter_and_sort",
    "listing_record_matches",
    "listing_record_owner_display",
    "listing_utc_now",
]
