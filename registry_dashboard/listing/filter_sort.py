"""Search filtering and ordering of the application record list."""

from __future__ import annotations

import unicodedata
from datetime import datetime, timezone
from typing import Callable, Final, Iterable

from registry_dashboard.domain import (
    ApplicationRecord,
    domain_address_display,
    domain_parse_timestamp,
    domain_record_authority,
    domain_record_display_name,
    domain_record_first_owner,
)

SORT_OPTIONS: Final[tuple[str, ...]] = ("time", "name", "authority", "owner")
DEFAULT_SORT_OPTION: Final[str] = "time"

_OLDEST_TIMESTAMP: Final[datetime] = datetime.min.replace(tzinfo=timezone.utc)


def listing_record_owner_display(record: ApplicationRecord) -> str:
    """Return the bech32 form of the first owner, or an empty string when ownerless."""

    first_owner = domain_record_first_owner(record)
    if not first_owner:
        return ""
    return domain_address_display(first_owner)


def listing_record_matches(record: ApplicationRecord, search_term: str) -> bool:
    """Return whether a record matches a case-insensitive search term.

    The term is matched against the display name, the derived
    authority and the bech32 first owner. Any one match is enough.

    Args:
        record: Application record.
        search_term: Free-text search term.

    Returns:
        bool: True when the term is a substring of any searchable field.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    normalized_term = search_term.lower()
    searchable_fields = (
        domain_record_display_name(record),
        domain_record_authority(record),
        listing_record_owner_display(record),
    )
    return any(normalized_term in field_value.lower() for field_value in searchable_fields)


def listing_filter_and_sort(
    records: Iterable[ApplicationRecord],
    search_term: str = "",
    sort_option: str = DEFAULT_SORT_OPTION,
) -> list[ApplicationRecord]:
    """Filter records by search term and order them by one sort option.

    The result is recomputed from scratch on every call. Sorting is stable.

    Args:
        records: Full fetched record set.
        search_term: Free-text search term; blank keeps every record.
        sort_option: One of `time`, `name`, `authority`, `owner`.

    Returns:
        list[ApplicationRecord]: Filtered and ordered records.

    Raises:
        ValueError: Raised when the sort option is unsupported.
    """

    if sort_option not in SORT_OPTIONS:
        raise ValueError(f"unsupported sort_option={sort_option}")

    filtered_records = [record for record in records if listing_record_matches(record, search_term or "")]

    if sort_option == "time":
        return sorted(filtered_records, key=_listing_create_time_key, reverse=True)

    text_key_builders: dict[str, Callable[[ApplicationRecord], str]] = {
        "name": domain_record_display_name,
        "authority": domain_record_authority,
        "owner": listing_record_owner_display,
    }
    text_key_builder = text_key_builders[sort_option]
    return sorted(filtered_records, key=lambda record: _listing_text_sort_key(text_key_builder(record)))


def _listing_create_time_key(record: ApplicationRecord) -> datetime:
    # Unparseable creation times sort after every valid one.
    return domain_parse_timestamp(record.create_time) or _OLDEST_TIMESTAMP


def _listing_text_sort_key(value: str) -> tuple[str, str, str]:
    # Base letters first, then accents, then lowercase before uppercase.
    decomposed_value = unicodedata.normalize("NFKD", value)
    base_letters = "".join(character for character in decomposed_value if not unicodedata.combining(character))
    return base_letters.casefold(), decomposed_value.casefold(), value.swapcase()


__all__ = [
    "DEFAULT_SORT_OPTION",
    "SORT_OPTIONS",
    "listing_filter_and_sort",
    "listing_record_matches",
    "listing_record_owner_display",
]
